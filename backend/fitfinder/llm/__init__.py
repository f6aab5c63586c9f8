"""
LLM 模块
提供 LLM 工厂、提示词和结构化输出模式
"""

from .llm_factory import LLMFactory, get_llm
from .models import MatchOutput, Question, match_output_json_schema
from .prompts import build_match_prompt

__all__ = [
    "LLMFactory",
    "get_llm",
    "MatchOutput",
    "Question",
    "match_output_json_schema",
    "build_match_prompt"
]
