"""
投递流水线编排

状态流转：
    Received -> Validated -> Extracted -> Matched -> Persisted(可选) -> Returned

前三个阶段任何失败都中止流水线，返回 {"error": True, "kind", "message"}；
第 4 阶段失败不改变终态，只是返回的 resumeId 为 None。
入口从不向调用方抛出异常。
"""

from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional

from fitfinder.errors import ErrorKind, PipelineError
from fitfinder.llm.llm_factory import LLMFactory
from fitfinder.pipeline.validator import validate_submission, decode_content
from fitfinder.pipeline.extractor import extract_text
from fitfinder.pipeline.matcher import check_credentials, generate_match
from fitfinder.pipeline.storage import store_upload
from fitfinder.pipeline.writer import write_resume_record


class PipelineState(str, Enum):
    """流水线状态枚举"""
    RECEIVED = "received"
    VALIDATED = "validated"
    EXTRACTED = "extracted"
    MATCHED = "matched"
    PERSISTED = "persisted"
    RETURNED = "returned"
    REJECTED_INPUT = "rejected_input"
    REJECTED_DOCUMENT = "rejected_document"
    REJECTED_GENERATION = "rejected_generation"


# 错误分类 -> 失败终态
_REJECTED_STATE = {
    ErrorKind.VALIDATION: PipelineState.REJECTED_INPUT,
    ErrorKind.EXTRACTION: PipelineState.REJECTED_DOCUMENT,
    ErrorKind.CONFIGURATION: PipelineState.REJECTED_GENERATION,
    ErrorKind.GENERATION: PipelineState.REJECTED_GENERATION,
}


class ResumePipeline:
    """
    简历投递流水线

    每次 run() 都是独立、顺序执行的处理单元，实例本身不保存投递状态，
    可以被并发的请求共享。

    使用示例：
        pipeline = ResumePipeline(engine=get_engine())
        result = pipeline.run(data, user_email="a@b.com")
        if result.get("error"):
            ...
    """

    def __init__(
        self,
        engine,
        llm_factory: Optional[LLMFactory] = None,
        upload_dir: Optional[Path] = None
    ):
        """
        Args:
            engine: 数据库引擎（第 4 阶段使用）
            llm_factory: LLM 工厂；为 None 时使用默认配置
            upload_dir: 上传根目录；为 None 时按环境变量解析
        """
        self.engine = engine
        self.llm_factory = llm_factory or LLMFactory()
        self.upload_dir = upload_dir

    def run(
        self,
        data: Any,
        user_email: Optional[str] = None,
        persist: bool = True
    ) -> Dict[str, Any]:
        """
        处理一次投递

        Args:
            data: 原始请求 {fileName, mimeType, contentBase64, jobDescription?, jobId?, orgId?}
            user_email: 当前身份（可选，只用于记录归属）
            persist: 是否写入简历记录（上传预览不写库）

        Returns:
            成功：{id, path, score, questions[, jobId, orgId, resumeId]}
            失败：{error: True, kind, message}
        """
        state = PipelineState.RECEIVED
        try:
            request = validate_submission(data)
            state = PipelineState.VALIDATED

            # 凭据检查放在解码和解析之前，配置问题不浪费提取开销
            check_credentials(self.llm_factory)

            content = decode_content(request)
            text = extract_text(content)
            state = PipelineState.EXTRACTED
            print(f"[ResumePipeline] 文本提取完成: {len(text)} 字符")

            upload_id, public_path = store_upload(content, self.upload_dir)

            match = generate_match(text, request.job_description or "", self.llm_factory)
            state = PipelineState.MATCHED

        except PipelineError as e:
            failed = _REJECTED_STATE.get(e.kind, state)
            print(f"[ResumePipeline] 终止于 {failed.value}: {e.message}")
            return e.to_payload()
        except Exception as e:
            print(f"[ResumePipeline Error] 未预期的异常 (状态 {state.value}): {e}")
            return {
                "error": True,
                "kind": ErrorKind.INTERNAL.value,
                "message": str(e) or "Unknown error"
            }

        payload: Dict[str, Any] = {
            "id": upload_id,
            "path": public_path,
            "score": match.score,
            "questions": match.questions_payload(),
        }
        if not persist:
            return payload

        write = write_resume_record(
            self.engine,
            match,
            file_name=request.file_name,
            path=public_path,
            user_email=user_email,
            job_id=request.job_id,
            organization_id=request.org_id
        )
        # 尽力而为：写入失败（write.ok 为 False）时有意忽略，
        # 用户仍然拿到分数和面试题，只是没有 resumeId
        payload.update({
            "jobId": request.job_id,
            "orgId": request.org_id,
            "resumeId": write.resume_id if write.ok else None,
        })
        return payload
