"""
简历投递流水线：校验 -> 提取 -> 匹配 -> 持久化
"""

from .validator import ApplyRequest, validate_submission, decode_content
from .extractor import extract_text, normalize_whitespace
from .matcher import MatchResult, generate_match, parse_match_output, round_score
from .writer import WriteResult, write_resume_record
from .storage import store_upload, get_upload_dir
from .orchestrator import ResumePipeline, PipelineState

__all__ = [
    "ApplyRequest",
    "validate_submission",
    "decode_content",
    "extract_text",
    "normalize_whitespace",
    "MatchResult",
    "generate_match",
    "parse_match_output",
    "round_score",
    "WriteResult",
    "write_resume_record",
    "store_upload",
    "get_upload_dir",
    "ResumePipeline",
    "PipelineState"
]
