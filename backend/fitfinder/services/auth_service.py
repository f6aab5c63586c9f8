"""
认证服务

注册 / 登录 / 登出。密码使用 PBKDF2-HMAC-SHA256 派生，每个用户独立随机盐。
成功后只把邮箱写入 RequestContext，会话 Cookie 由外层负责。
"""

import hashlib
import hmac
import secrets
from typing import Optional

from sqlmodel import Session

from fitfinder.repositories.user_repository import UserRepository
from fitfinder.services.base import BaseService, error

PBKDF2_ITERATIONS = 100_000
PBKDF2_KEY_LENGTH = 64
SALT_BYTES = 16


def hash_password(password: str, salt: Optional[str] = None) -> str:
    """
    派生密码哈希

    Returns:
        "<salt_hex>$<hash_hex>"
    """
    salt = salt or secrets.token_hex(SALT_BYTES)
    derived = hashlib.pbkdf2_hmac(
        "sha256",
        password.encode("utf-8"),
        salt.encode("utf-8"),
        PBKDF2_ITERATIONS,
        dklen=PBKDF2_KEY_LENGTH
    )
    return f"{salt}${derived.hex()}"


def verify_password(password: str, stored: str) -> bool:
    """常量时间比较密码"""
    salt, sep, _ = stored.partition("$")
    if not sep:
        return False
    return hmac.compare_digest(hash_password(password, salt), stored)


class AuthService(BaseService):
    """
    认证服务类
    """

    def signup(self, email: str, password: str, redirect_url: Optional[str] = None) -> dict:
        """
        注册

        已存在且密码一致时直接登录；已存在但密码不一致返回 userExists 错误。

        Returns:
            {"ok": True, "userEmail", "redirect"} 或错误结构
        """
        if not email or not password:
            return error("Email and password are required")

        with Session(self.engine) as session:
            repo = UserRepository(session)
            found = repo.get_by_email(email)

            if found:
                if not verify_password(password, found.password_hash):
                    return error("User already exists", userExists=True)
                user_email = found.email
            else:
                user_email = repo.create(email, hash_password(password)).email

        self.context.sign_in(user_email)
        print(f"[AuthService] 用户已登录: {user_email}")
        return {"ok": True, "userEmail": user_email, "redirect": redirect_url or "/"}

    def login(self, email: str, password: str) -> dict:
        """
        登录

        Returns:
            {"ok": True, "userEmail"} 或错误结构（用户不存在时带 userNotFound，前端据此提示注册）
        """
        with Session(self.engine) as session:
            user = UserRepository(session).get_by_email(email)

        if not user:
            return error("User not found", userNotFound=True)
        if not verify_password(password, user.password_hash):
            return error("Incorrect password")

        self.context.sign_in(user.email)
        return {"ok": True, "userEmail": user.email}

    def logout(self) -> dict:
        """登出"""
        self.context.clear()
        return {"ok": True, "redirect": "/"}
