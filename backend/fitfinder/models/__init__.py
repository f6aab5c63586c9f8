"""
数据库模型模块
导出所有表模型
"""

# 用户域模型
from .user import User

# 组织域模型
from .organization import Organization, OrganizationUser
from .job import Job

# 投递域模型
from .resume import Resume

# 基础模型
from .base import TimestampModel, new_id

# 定义导出的内容
__all__ = [
    # 用户域
    "User",
    # 组织域
    "Organization", "OrganizationUser",
    "Job",
    # 投递域
    "Resume",
    # 基础模型
    "TimestampModel", "new_id"
]
