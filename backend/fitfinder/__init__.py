"""
FitFinder 后端

组织发布职位，候选人上传 PDF 简历，LLM 给出匹配分数和面试题，组织管理员审阅候选人。
"""

__version__ = "0.1.0"
