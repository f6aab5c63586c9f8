"""
持久化写入器（流水线第 4 阶段）

尽力而为：写入失败只记录警告，通过 WriteResult 的失败分支返回，从不抛出。
"""

from dataclasses import dataclass
from typing import Optional

from sqlmodel import Session

from fitfinder.pipeline.matcher import MatchResult
from fitfinder.repositories.resume_repository import ResumeRepository
from fitfinder.repositories.user_repository import UserRepository


@dataclass(frozen=True)
class WriteResult:
    """写入结果：ok=False 时 error 携带原因，resume_id 为 None"""
    ok: bool
    resume_id: Optional[str] = None
    error: Optional[str] = None


def write_resume_record(
    engine,
    match: MatchResult,
    file_name: str,
    path: str,
    user_email: Optional[str] = None,
    job_id: Optional[str] = None,
    organization_id: Optional[str] = None
) -> WriteResult:
    """
    写入一条简历记录

    user_email 只用于归属：找不到对应用户时按匿名投递写入。

    Args:
        engine: 数据库引擎
        match: 已计算完成的匹配结果
        file_name: 原始文件名
        path: 对外存储路径
        user_email: 当前身份的邮箱（可选）
        job_id: 职位 ID（可选）
        organization_id: 组织 ID（可选）

    Returns:
        WriteResult
    """
    try:
        with Session(engine) as session:
            user_id = None
            if user_email:
                user = UserRepository(session).get_by_email(user_email)
                user_id = user.id if user else None

            resume = ResumeRepository(session).create(
                file_name=file_name,
                path=path,
                score=match.score,
                questions=match.questions_payload(),
                user_id=user_id,
                job_id=job_id,
                organization_id=organization_id
            )
            print(f"[PersistenceWriter] 简历记录已存库 (ID: {resume.id})")
            return WriteResult(ok=True, resume_id=resume.id)
    except Exception as e:
        print(f"[PersistenceWriter] 警告: 简历记录写入失败: {e}")
        return WriteResult(ok=False, error=str(e))
