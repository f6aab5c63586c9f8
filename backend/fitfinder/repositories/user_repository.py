"""
用户管理 Repository
提供 users 表的增删改查操作
"""

from typing import Optional

from sqlmodel import Session, select

from fitfinder.models.user import User


class UserRepository:
    """
    用户数据访问对象
    封装所有与 users 表相关的数据库操作
    """

    def __init__(self, session: Session):
        """
        初始化 Repository

        Args:
            session: SQLModel 数据库会话
        """
        self.session = session

    def get_by_email(self, email: str) -> Optional[User]:
        """
        根据邮箱获取用户

        Args:
            email: 用户邮箱

        Returns:
            User 对象，不存在则返回 None
        """
        statement = select(User).where(User.email == email)
        return self.session.exec(statement).first()

    def get_by_id(self, user_id: str) -> Optional[User]:
        """根据 ID 获取用户"""
        return self.session.get(User, user_id)

    def create(self, email: str, password_hash: str) -> User:
        """
        创建新用户

        Args:
            email: 邮箱（必须唯一）
            password_hash: 已派生的密码哈希

        Returns:
            创建的 User 对象
        """
        user = User(email=email, password_hash=password_hash)
        self.session.add(user)
        self.session.commit()
        self.session.refresh(user)
        print(f"[UserRepository] 新用户创建成功 (ID: {user.id})")
        return user
