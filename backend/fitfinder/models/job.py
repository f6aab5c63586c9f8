"""
职位域模型 - 职位表
"""

from sqlmodel import Field

from .base import TimestampModel, new_id


class Job(TimestampModel, table=True):
    """
    职位表
    由组织管理员发布，候选人投递时引用
    """
    __tablename__ = "jobs"

    id: str = Field(default_factory=new_id, primary_key=True)

    # 岗位名称
    title: str = Field(nullable=False)

    # 职位描述全文，投递时作为匹配输入
    description: str = Field(default="", nullable=False)

    # 外键：所属组织
    organization_id: str = Field(foreign_key="organizations.id", index=True, nullable=False)
