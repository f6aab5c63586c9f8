"""
组织管理 Repository
提供 organizations / organization_users 表的操作，
包括成员权限查询和级联删除
"""

from typing import List, Optional

from sqlmodel import Session, select, col
from sqlalchemy import or_

from fitfinder.models.organization import Organization, OrganizationUser
from fitfinder.models.job import Job
from fitfinder.models.resume import Resume


class OrganizationRepository:
    """
    组织数据访问对象
    封装所有与组织和成员关系相关的数据库操作
    """

    def __init__(self, session: Session):
        """
        初始化 Repository

        Args:
            session: SQLModel 数据库会话
        """
        self.session = session

    def create_with_admin(self, name: str, user_id: str) -> Organization:
        """
        创建组织，并把创建者登记为管理员

        两条记录在同一事务中提交

        Args:
            name: 组织名称
            user_id: 创建者用户 ID

        Returns:
            创建的 Organization 对象
        """
        org = Organization(name=name)
        self.session.add(org)
        self.session.flush()

        membership = OrganizationUser(
            user_id=user_id,
            organization_id=org.id,
            is_admin=True
        )
        self.session.add(membership)
        self.session.commit()
        self.session.refresh(org)
        return org

    def get_by_id(self, org_id: str) -> Optional[Organization]:
        """根据 ID 获取组织"""
        return self.session.get(Organization, org_id)

    def list_for_user(self, user_id: str) -> List[Organization]:
        """
        获取用户所属的全部组织（按创建时间正序）

        Args:
            user_id: 用户 ID

        Returns:
            Organization 对象列表
        """
        statement = (
            select(Organization)
            .join(OrganizationUser, OrganizationUser.organization_id == Organization.id)
            .where(OrganizationUser.user_id == user_id)
            .order_by(col(Organization.created_at))
        )
        return list(self.session.exec(statement).all())

    def get_membership(self, user_id: str, org_id: str) -> Optional[OrganizationUser]:
        """
        获取成员关系

        Args:
            user_id: 用户 ID
            org_id: 组织 ID

        Returns:
            OrganizationUser 对象，不是成员则返回 None
        """
        statement = select(OrganizationUser).where(
            OrganizationUser.user_id == user_id,
            OrganizationUser.organization_id == org_id
        )
        return self.session.exec(statement).first()

    def is_admin(self, user_id: str, org_id: str) -> bool:
        """判断用户是否为组织管理员"""
        membership = self.get_membership(user_id, org_id)
        return bool(membership and membership.is_admin)

    def get_members(self, org_id: str) -> List[OrganizationUser]:
        """获取组织的全部成员关系"""
        statement = select(OrganizationUser).where(
            OrganizationUser.organization_id == org_id
        ).order_by(col(OrganizationUser.created_at))
        return list(self.session.exec(statement).all())

    def upsert_admin(self, user_id: str, org_id: str) -> OrganizationUser:
        """
        把用户设为组织管理员

        已是成员则提升为管理员，否则新建管理员成员关系

        Args:
            user_id: 目标用户 ID
            org_id: 组织 ID

        Returns:
            更新或新建的 OrganizationUser 对象
        """
        membership = self.get_membership(user_id, org_id)
        if membership:
            membership.is_admin = True
        else:
            membership = OrganizationUser(
                user_id=user_id,
                organization_id=org_id,
                is_admin=True
            )
        self.session.add(membership)
        self.session.commit()
        self.session.refresh(membership)
        return membership

    def delete(self, org_id: str) -> bool:
        """
        删除组织，级联删除其简历、职位和成员关系

        Args:
            org_id: 组织 ID

        Returns:
            是否删除成功
        """
        org = self.get_by_id(org_id)
        if not org:
            return False

        job_ids = select(Job.id).where(Job.organization_id == org_id)

        # 先删子表，避免外键悬挂
        resumes = self.session.exec(
            select(Resume).where(
                or_(Resume.organization_id == org_id, col(Resume.job_id).in_(job_ids))
            )
        ).all()
        for resume in resumes:
            self.session.delete(resume)

        for job in self.session.exec(select(Job).where(Job.organization_id == org_id)).all():
            self.session.delete(job)

        for membership in self.get_members(org_id):
            self.session.delete(membership)

        self.session.delete(org)
        self.session.commit()
        print(f"[OrganizationRepository] 组织已删除 (ID: {org_id}, 简历 {len(resumes)} 条)")
        return True
