"""
组织域模型 - 组织表与成员关系表
"""

from sqlmodel import Field
from sqlalchemy import UniqueConstraint

from .base import TimestampModel, new_id


class Organization(TimestampModel, table=True):
    """
    组织表
    多租户的根节点，职位和简历都挂在组织下
    """
    __tablename__ = "organizations"

    id: str = Field(default_factory=new_id, primary_key=True)

    # 组织名称
    name: str = Field(nullable=False)


class OrganizationUser(TimestampModel, table=True):
    """
    组织成员表
    记录用户与组织的关系，is_admin 决定能否管理职位和成员
    """
    __tablename__ = "organization_users"

    # 复合唯一约束：同一用户在同一组织中只有一条成员记录
    __table_args__ = (UniqueConstraint("user_id", "organization_id", name="uix_user_organization"),)

    id: str = Field(default_factory=new_id, primary_key=True)

    user_id: str = Field(foreign_key="users.id", index=True, nullable=False)

    organization_id: str = Field(foreign_key="organizations.id", index=True, nullable=False)

    is_admin: bool = Field(default=False, nullable=False)
