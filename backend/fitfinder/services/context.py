"""
请求上下文

身份以显式的能力对象传入各服务，而不是从全局会话中读取。
会话 Cookie 的加密与传输由外层负责，这里只保存其中的用户邮箱。
"""

from typing import Optional


class RequestContext:
    """
    单次请求的身份上下文

    使用示例：
        ctx = RequestContext(user_email=cookie_data.get("userEmail"))
        service = OrganizationService(ctx)
    """

    def __init__(self, user_email: Optional[str] = None):
        self.user_email = user_email

    @property
    def is_authenticated(self) -> bool:
        return bool(self.user_email)

    def sign_in(self, email: str) -> None:
        """登录成功后写入身份"""
        self.user_email = email

    def clear(self) -> None:
        """登出：清空身份"""
        self.user_email = None

    def to_session_data(self) -> dict:
        """外层写回会话 Cookie 时使用的数据"""
        return {"userEmail": self.user_email} if self.user_email else {}
