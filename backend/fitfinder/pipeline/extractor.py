"""
文本提取器（流水线第 2 阶段）

把 PDF 字节转换为归一化的纯文本。
"坏上传" 与 "流水线无法继续" 的唯一隔离边界就在这里。
"""

import io
import re

from pypdf import PdfReader

from fitfinder.errors import ExtractionError

_WHITESPACE_RE = re.compile(r"\s+")


def normalize_whitespace(text: str) -> str:
    """把所有空白串折叠成单个空格并去掉首尾空白"""
    return _WHITESPACE_RE.sub(" ", text or "").strip()


def extract_text(data: bytes) -> str:
    """
    从 PDF 字节中提取纯文本

    Args:
        data: 已确认为 PDF 类型的原始字节

    Returns:
        归一化后的文本；没有可提取文本（例如扫描件）时返回空字符串

    Raises:
        ExtractionError: 字节不是结构完整的 PDF
    """
    try:
        reader = PdfReader(io.BytesIO(data))
        page_texts = [page.extract_text() or "" for page in reader.pages]
    except Exception as e:
        raise ExtractionError(
            f"Could not read the uploaded PDF ({e}). Please re-export the document and try again."
        ) from e

    return normalize_whitespace(" ".join(page_texts))
