"""
投递流水线错误分类

每个阶段只抛出自己的错误类型，编排层在边界处统一转换成
{"error": True, "kind": ..., "message": ...} 结构返回给调用方。
"""

from enum import Enum


class ErrorKind(str, Enum):
    """错误分类枚举 - 调用方据此决定展示给谁"""
    VALIDATION = "validation"          # 输入字段不合法，用户可修正
    EXTRACTION = "extraction"          # 文档无法解析，建议重新导出
    CONFIGURATION = "configuration"    # 运维侧缺少凭据，用户无法修正
    GENERATION = "generation"          # 上游 LLM 失败或输出不符合 schema，可重新提交
    STORAGE = "storage"                # 上传文件落盘失败
    INTERNAL = "internal"              # 未预期的异常


class PipelineError(Exception):
    """流水线错误基类，携带 ErrorKind 和可直接展示的消息"""

    kind: ErrorKind = ErrorKind.INTERNAL

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_payload(self) -> dict:
        """转换为调用方可分支判断的结构化错误"""
        return {"error": True, "kind": self.kind.value, "message": self.message}


class ValidationError(PipelineError):
    kind = ErrorKind.VALIDATION


class ExtractionError(PipelineError):
    kind = ErrorKind.EXTRACTION


class ConfigurationError(PipelineError, ValueError):
    """缺少凭据或配置错误

    同时是 ValueError，LLMFactory 的既有调用方按 ValueError 捕获依然有效
    """
    kind = ErrorKind.CONFIGURATION


class GenerationError(PipelineError):
    kind = ErrorKind.GENERATION


class StorageError(PipelineError):
    kind = ErrorKind.STORAGE
