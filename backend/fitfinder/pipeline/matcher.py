"""
匹配生成器（流水线第 3 阶段）

把简历文本和职位描述交给 LLM，要求按 MatchOutput 的 JSON Schema 输出，
再用同一份 schema 对原始输出做二次校验。
这是流水线中唯一有网络依赖的阶段：不重试，失败即整次投递失败。
"""

import json
import math
from typing import Any, List, Optional, Tuple

import jsonschema
import pydantic
from pydantic import BaseModel, ConfigDict, Field

from fitfinder.errors import ConfigurationError, GenerationError
from fitfinder.llm.llm_factory import LLMFactory
from fitfinder.llm.models import MatchOutput, Question, match_output_json_schema
from fitfinder.llm.prompts import build_match_prompt


class MatchResult(BaseModel):
    """
    匹配结果 - 每次投递只产生一次，产生后不可变
    """
    model_config = ConfigDict(frozen=True)

    score: int = Field(ge=0, le=100)
    questions: Tuple[Question, ...] = ()

    def questions_payload(self) -> List[dict]:
        """面试题的可序列化形式（省略空的可选字段）"""
        return [q.model_dump(exclude_none=True) for q in self.questions]


def round_score(score: float) -> int:
    """四舍五入到整数（.5 进位，87.5 -> 88）"""
    return int(math.floor(score + 0.5))


def check_credentials(factory: LLMFactory) -> None:
    """
    确认 LLM 凭据已配置，不发起任何网络请求

    Raises:
        ConfigurationError: 凭据缺失或 LLM 配置文件不可用
    """
    try:
        factory.ensure_credentials()
    except ConfigurationError:
        raise
    except (FileNotFoundError, ValueError, KeyError) as e:
        raise ConfigurationError(f"LLM configuration is invalid: {e}") from e


def _raw_text(raw: Any) -> str:
    """从 LLM 原始消息中取出文本内容（兼容 str 和分段列表）"""
    content = getattr(raw, "content", raw)
    if content is None:
        return ""
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        parts = []
        for part in content:
            if isinstance(part, str):
                parts.append(part)
            elif isinstance(part, dict) and part.get("type", "text") == "text":
                parts.append(part.get("text", ""))
        return "".join(parts)
    if isinstance(content, dict):
        return json.dumps(content)
    return str(content)


def parse_match_output(raw_text: str) -> MatchResult:
    """
    解析并校验 LLM 的原始 JSON 输出

    schema 不符视为失败，不做静默类型转换（例如字符串 "72" 不会被当作分数）

    Raises:
        GenerationError: 输出为空、不是 JSON 或不符合 schema
    """
    if not raw_text or not raw_text.strip():
        raise GenerationError("LLM returned empty output.")

    try:
        data = json.loads(raw_text)
    except json.JSONDecodeError as e:
        raise GenerationError(f"LLM output is not valid JSON: {e}") from e

    try:
        jsonschema.validate(data, match_output_json_schema())
        validated = MatchOutput.model_validate(data)
    except (jsonschema.ValidationError, pydantic.ValidationError) as e:
        message = e.message if isinstance(e, jsonschema.ValidationError) else str(e)
        raise GenerationError(f"LLM output failed schema validation: {message}") from e

    return MatchResult(
        score=round_score(validated.score),
        questions=tuple(validated.questions)
    )


def generate_match(
    resume_text: str,
    job_description: str,
    factory: Optional[LLMFactory] = None
) -> MatchResult:
    """
    生成匹配分数和面试题

    两个输入都可以为空字符串，空职位描述同样会调用 LLM。

    Args:
        resume_text: 归一化后的简历文本
        job_description: 职位描述
        factory: LLM 工厂；为 None 时使用默认配置

    Returns:
        MatchResult

    Raises:
        ConfigurationError: 凭据缺失，此时不会调用 LLM
        GenerationError: 调用失败、输出为空或 schema 校验失败
    """
    factory = factory or LLMFactory()
    check_credentials(factory)

    try:
        llm = factory.create_llm()
    except ConfigurationError:
        raise
    except (ValueError, NotImplementedError) as e:
        raise ConfigurationError(f"LLM configuration is invalid: {e}") from e

    prompt = build_match_prompt(resume_text or "", job_description or "")

    try:
        # include_raw=True：拿到未经解析的原始消息，由我们自己做校验
        structured_llm = llm.with_structured_output(
            MatchOutput,
            method="json_schema",
            include_raw=True
        )
        response = structured_llm.invoke(prompt)
    except Exception as e:
        raise GenerationError(f"LLM invocation failed: {e}") from e

    raw = response.get("raw") if isinstance(response, dict) else response
    result = parse_match_output(_raw_text(raw))
    print(f"[MatchGenerator] 匹配完成: score={result.score}, questions={len(result.questions)}")
    return result
