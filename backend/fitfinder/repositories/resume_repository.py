"""
简历记录 Repository
简历记录只增不改，这里只提供创建和查询
"""

from typing import Any, Dict, List, Optional

from sqlmodel import Session, select, col

from fitfinder.models.resume import Resume


class ResumeRepository:
    """
    简历记录数据访问对象
    """

    def __init__(self, session: Session):
        """
        初始化 Repository

        Args:
            session: SQLModel 数据库会话
        """
        self.session = session

    def create(
        self,
        file_name: str,
        path: str,
        score: int,
        questions: List[Dict[str, Any]],
        user_id: Optional[str] = None,
        job_id: Optional[str] = None,
        organization_id: Optional[str] = None
    ) -> Resume:
        """
        创建简历记录

        Args:
            file_name: 原始文件名
            path: 对外存储路径
            score: 匹配分数（0-100 整数）
            questions: 面试题列表
            user_id: 投递人 ID（可选，匿名投递为 None）
            job_id: 职位 ID（可选）
            organization_id: 组织 ID（可选）

        Returns:
            创建的 Resume 对象
        """
        resume = Resume(
            file_name=file_name,
            path=path,
            score=score,
            questions=questions,
            user_id=user_id,
            job_id=job_id,
            organization_id=organization_id
        )
        self.session.add(resume)
        self.session.commit()
        self.session.refresh(resume)
        return resume

    def get_by_id(self, resume_id: str) -> Optional[Resume]:
        """根据 ID 获取简历记录"""
        return self.session.get(Resume, resume_id)

    def list_by_job(self, job_id: str) -> List[Resume]:
        """获取投递到某职位的简历（分数从高到低）"""
        statement = select(Resume).where(
            Resume.job_id == job_id
        ).order_by(col(Resume.score).desc())
        return list(self.session.exec(statement).all())

    def list_by_organization(self, org_id: str) -> List[Resume]:
        """获取投递到某组织的简历（按创建时间倒序）"""
        statement = select(Resume).where(
            Resume.organization_id == org_id
        ).order_by(col(Resume.created_at).desc())
        return list(self.session.exec(statement).all())
