"""
用户域模型 - 用户表
"""

from sqlmodel import Field

from .base import TimestampModel, new_id


class User(TimestampModel, table=True):
    """
    用户表
    以邮箱作为登录身份，会话中只保存邮箱
    """
    __tablename__ = "users"

    # 主键
    id: str = Field(default_factory=new_id, primary_key=True)

    # 唯一邮箱，会话身份的锚点
    email: str = Field(unique=True, index=True, nullable=False)

    # PBKDF2 派生结果，格式为 "<salt_hex>$<hash_hex>"
    password_hash: str = Field(nullable=False)
