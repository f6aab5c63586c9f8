"""
输入校验器（流水线第 1 阶段）

在任何解码和 I/O 之前检查投递请求的形状，只做纯校验，没有副作用。
"""

import base64
import binascii
from typing import Any, Optional

import pydantic
from pydantic import BaseModel, ConfigDict, Field, field_validator

from fitfinder.errors import ValidationError

ACCEPTED_MIME_TYPE = "application/pdf"

# 低于该长度的 base64 内容视为空文件或截断文件
MIN_CONTENT_LENGTH = 20


class ApplyRequest(BaseModel):
    """
    投递请求

    接收前端的 camelCase 字段名，也允许按 Python 字段名构造
    """
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    file_name: str = Field(alias="fileName", min_length=1)
    mime_type: str = Field(alias="mimeType")
    content_base64: str = Field(alias="contentBase64", min_length=MIN_CONTENT_LENGTH)
    job_description: Optional[str] = Field(default=None, alias="jobDescription")
    job_id: Optional[str] = Field(default=None, alias="jobId")
    org_id: Optional[str] = Field(default=None, alias="orgId")

    @field_validator("mime_type")
    @classmethod
    def check_mime_type(cls, value: str) -> str:
        if value.lower() != ACCEPTED_MIME_TYPE:
            raise ValueError(f"expected {ACCEPTED_MIME_TYPE}, got '{value}'")
        return value


def _first_error_message(exc: pydantic.ValidationError) -> str:
    """把 pydantic 的第一条错误转换成可直接展示的文本"""
    errors = exc.errors()
    if not errors:
        return "Invalid input."
    first = errors[0]
    loc = ".".join(str(part) for part in first.get("loc", ()))
    msg = first.get("msg", "invalid value")
    return f"{loc}: {msg}" if loc else msg


def validate_submission(data: Any) -> ApplyRequest:
    """
    校验一次投递请求

    Args:
        data: 原始请求字典（前端字段名）

    Returns:
        校验通过的 ApplyRequest

    Raises:
        ValidationError: 第一个不满足的约束
    """
    if data is None:
        raise ValidationError("No input data received (client sent undefined).")

    if isinstance(data, ApplyRequest):
        return data

    try:
        return ApplyRequest.model_validate(data)
    except pydantic.ValidationError as e:
        raise ValidationError(_first_error_message(e)) from e


def decode_content(request: ApplyRequest) -> bytes:
    """
    把 base64 内容解码为原始字节

    忽略内容中的换行和空白（部分客户端会按 76 列折行）

    Raises:
        ValidationError: 内容不是合法的 base64
    """
    compact = "".join(request.content_base64.split())
    try:
        return base64.b64decode(compact, validate=True)
    except (binascii.Error, ValueError) as e:
        raise ValidationError(f"contentBase64: not valid base64 ({e})") from e
