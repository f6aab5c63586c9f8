"""
投递域模型 - 简历记录表
"""

from typing import Optional, List, Dict, Any
from sqlmodel import Field, Column, JSON

from .base import TimestampModel, new_id


class Resume(TimestampModel, table=True):
    """
    简历记录表
    每次成功完成匹配的投递写入一条，写入后不再修改，
    只会随职位或组织的级联删除而删除
    """
    __tablename__ = "resumes"

    id: str = Field(default_factory=new_id, primary_key=True)

    # 上传时的原始文件名
    file_name: str = Field(nullable=False)

    # 对外路径，如 /uploaded/<uuid>/resume.pdf
    path: str = Field(nullable=False)

    # 匹配分数，0-100 的整数
    score: int = Field(ge=0, le=100, nullable=False)

    # 面试题列表 JSON：[{text, topic?, confidence?}]
    questions: List[Dict[str, Any]] = Field(default_factory=list, sa_column=Column(JSON))

    # 外键：投递人（允许匿名投递）
    user_id: Optional[str] = Field(default=None, foreign_key="users.id", index=True)

    # 外键：投递的职位
    job_id: Optional[str] = Field(default=None, foreign_key="jobs.id", index=True)

    # 外键：投递的组织
    organization_id: Optional[str] = Field(default=None, foreign_key="organizations.id", index=True)
