"""
服务基类

封装 "从身份到用户" 的公共步骤：未登录或用户不存在时返回结构化错误
"""

from typing import Optional, Tuple

from sqlmodel import Session

from fitfinder.db.init_db import get_engine
from fitfinder.models.user import User
from fitfinder.repositories.user_repository import UserRepository
from fitfinder.services.context import RequestContext


def error(message: str, **extra) -> dict:
    """业务错误的统一返回结构"""
    return {"error": True, "message": message, **extra}


NOT_AUTHENTICATED = "Not authenticated"
USER_NOT_FOUND = "User not found"
NOT_AUTHORIZED = "Not authorized"


class BaseService:
    """持有请求上下文和数据库引擎的服务基类"""

    def __init__(self, context: RequestContext, engine=None):
        """
        Args:
            context: 请求身份上下文
            engine: 数据库引擎；为 None 时使用默认引擎
        """
        self.context = context
        self.engine = engine if engine is not None else get_engine()

    def _current_user(self, session: Session) -> Tuple[Optional[User], Optional[dict]]:
        """
        解析当前用户

        Returns:
            (user, None) 或 (None, 错误结构)
        """
        if not self.context.is_authenticated:
            return None, error(NOT_AUTHENTICATED)

        user = UserRepository(session).get_by_email(self.context.user_email)
        if not user:
            return None, error(USER_NOT_FOUND)
        return user, None
