"""
职位管理 Repository
提供 jobs 表的增删查操作
"""

from typing import List, Optional

from sqlmodel import Session, select, col

from fitfinder.models.job import Job
from fitfinder.models.resume import Resume


class JobRepository:
    """
    职位数据访问对象
    """

    def __init__(self, session: Session):
        """
        初始化 Repository

        Args:
            session: SQLModel 数据库会话
        """
        self.session = session

    def create(self, org_id: str, title: str, description: str) -> Job:
        """
        创建职位

        Args:
            org_id: 所属组织 ID
            title: 岗位名称
            description: 职位描述

        Returns:
            创建的 Job 对象
        """
        job = Job(title=title, description=description, organization_id=org_id)
        self.session.add(job)
        self.session.commit()
        self.session.refresh(job)
        return job

    def get_by_id(self, job_id: str) -> Optional[Job]:
        """根据 ID 获取职位"""
        return self.session.get(Job, job_id)

    def list_all(self) -> List[Job]:
        """获取全部职位（按创建时间倒序）"""
        statement = select(Job).order_by(col(Job.created_at).desc())
        return list(self.session.exec(statement).all())

    def list_by_organization(self, org_id: str) -> List[Job]:
        """获取组织下的职位（按创建时间正序）"""
        statement = select(Job).where(
            Job.organization_id == org_id
        ).order_by(col(Job.created_at))
        return list(self.session.exec(statement).all())

    def delete(self, job_id: str) -> bool:
        """
        删除职位，级联删除投递到该职位的简历记录

        Args:
            job_id: 职位 ID

        Returns:
            是否删除成功
        """
        job = self.get_by_id(job_id)
        if not job:
            return False

        for resume in self.session.exec(select(Resume).where(Resume.job_id == job_id)).all():
            self.session.delete(resume)

        self.session.delete(job)
        self.session.commit()
        return True
