"""
LLM 结构化输出模式

MatchOutput 是唯一的类型描述：既用来向 LLM 声明 JSON Schema，
也用来对 LLM 返回的结果做二次校验，两处不会漂移。
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class Question(BaseModel):
    """单道面试题"""
    text: str = Field(description="面试题题干")
    topic: Optional[str] = Field(default=None, description="考察的主题，例如 concurrency")
    confidence: Optional[float] = Field(
        default=None,
        ge=0,
        le=1,
        description="该题与岗位要求相关的置信度，0-1"
    )


class MatchOutput(BaseModel):
    """
    匹配结果模型 - LLM 结构化输出模式

    score 允许小数，由调用方四舍五入为整数；questions 顺序即展示顺序。
    """
    score: float = Field(ge=0, le=100, description="简历与职位的匹配分数，0-100")
    questions: List[Question] = Field(description="考察候选人知识的简短面试题，按展示顺序排列")


def match_output_json_schema() -> dict:
    """返回声明给 LLM 的 JSON Schema"""
    return MatchOutput.model_json_schema()
