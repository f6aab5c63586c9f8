"""
服务层模块
提供业务逻辑的抽象层，每个公开方法对应一个前端可调用的服务端函数
"""

from .context import RequestContext
from .auth_service import AuthService
from .organization_service import OrganizationService
from .application_service import ApplicationService

__all__ = [
    "RequestContext",
    "AuthService",
    "OrganizationService",
    "ApplicationService"
]
