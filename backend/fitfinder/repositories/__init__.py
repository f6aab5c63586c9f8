"""
Repository (DAO) 模块
提供数据库操作的抽象层，封装 CRUD 逻辑
"""

from .user_repository import UserRepository
from .organization_repository import OrganizationRepository
from .job_repository import JobRepository
from .resume_repository import ResumeRepository

__all__ = [
    "UserRepository",
    "OrganizationRepository",
    "JobRepository",
    "ResumeRepository"
]
