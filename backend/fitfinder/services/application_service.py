"""
投递服务

候选人侧的入口：投递简历到职位、上传简历预览匹配、浏览职位。
简历相关入口直接委托给 ResumePipeline，保证任何失败都以结构化错误返回。
"""

from pathlib import Path
from typing import Any, Optional

from sqlmodel import Session

from fitfinder.llm.llm_factory import LLMFactory
from fitfinder.pipeline.orchestrator import ResumePipeline
from fitfinder.repositories.job_repository import JobRepository
from fitfinder.repositories.organization_repository import OrganizationRepository
from fitfinder.services.base import BaseService, error, NOT_AUTHENTICATED
from fitfinder.services.context import RequestContext
from fitfinder.services.serializers import job_to_dict


class ApplicationService(BaseService):
    """
    投递服务类

    使用示例：
        service = ApplicationService(RequestContext("me@example.com"))
        result = service.apply_resume({
            "fileName": "resume.pdf",
            "mimeType": "application/pdf",
            "contentBase64": encoded,
            "jobDescription": job["description"],
            "jobId": job["id"],
            "orgId": job["organizationId"],
        })
    """

    def __init__(
        self,
        context: RequestContext,
        engine=None,
        llm_factory: Optional[LLMFactory] = None,
        upload_dir: Optional[Path] = None
    ):
        super().__init__(context, engine)
        self.pipeline = ResumePipeline(
            engine=self.engine,
            llm_factory=llm_factory,
            upload_dir=upload_dir
        )

    def apply_resume(self, data: Any) -> dict:
        """
        投递简历：完整流水线，包含简历记录写入

        Returns:
            {id, path, score, questions, jobId, orgId, resumeId} 或 {error: True, ...}
        """
        return self.pipeline.run(data, user_email=self.context.user_email, persist=True)

    def upload_resume(self, data: Any) -> dict:
        """
        上传简历预览匹配结果：不关联职位，也不写库

        Returns:
            {id, path, score, questions} 或 {error: True, ...}
        """
        return self.pipeline.run(data, persist=False)

    def list_jobs(self) -> dict:
        """全部职位及其所属组织（最新的在前）"""
        if not self.context.is_authenticated:
            return error(NOT_AUTHENTICATED)

        with Session(self.engine) as session:
            orgs = OrganizationRepository(session)
            jobs = [
                job_to_dict(job, organization=orgs.get_by_id(job.organization_id))
                for job in JobRepository(session).list_all()
            ]
            return {"jobs": jobs}
