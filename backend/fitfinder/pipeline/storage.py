"""
上传文件存储

每次投递在上传目录下占用一个 <uuid>/resume.pdf，对外路径为 /uploaded/<uuid>/resume.pdf
"""

import os
import uuid
from pathlib import Path
from typing import Optional, Tuple

from fitfinder.errors import StorageError

PUBLIC_PREFIX = "/uploaded"
STORED_FILE_NAME = "resume.pdf"


def get_upload_dir() -> Path:
    """
    获取上传目录
    优先使用环境变量 UPLOAD_DIR，否则为 backend/uploaded
    """
    upload_dir = os.environ.get("UPLOAD_DIR")
    if upload_dir:
        return Path(upload_dir)
    project_root = Path(__file__).parent.parent.parent
    return project_root / "uploaded"


def store_upload(data: bytes, upload_dir: Optional[Path] = None) -> Tuple[str, str]:
    """
    把上传内容写入磁盘

    Args:
        data: 已解码的 PDF 字节
        upload_dir: 上传根目录；为 None 时使用 get_upload_dir()

    Returns:
        (upload_id, public_path)

    Raises:
        StorageError: 目录创建或写入失败
    """
    root = Path(upload_dir) if upload_dir is not None else get_upload_dir()
    upload_id = str(uuid.uuid4())
    dest_dir = root / upload_id

    try:
        dest_dir.mkdir(parents=True, exist_ok=True)
        (dest_dir / STORED_FILE_NAME).write_bytes(data)
    except OSError as e:
        raise StorageError(f"Failed to store uploaded file: {e}") from e

    return upload_id, f"{PUBLIC_PREFIX}/{upload_id}/{STORED_FILE_NAME}"
