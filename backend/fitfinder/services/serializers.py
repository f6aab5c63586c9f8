"""
响应序列化

把表模型转换成前端使用的 camelCase 字典，不暴露 password_hash
"""

from typing import Any, Dict, Iterable, Optional

from fitfinder.models import User, Organization, OrganizationUser, Job, Resume


def _iso(value) -> Optional[str]:
    return value.isoformat() if value else None


def user_to_dict(user: User) -> Dict[str, Any]:
    return {"id": user.id, "email": user.email, "createdAt": _iso(user.created_at)}


def membership_to_dict(membership: OrganizationUser, user: Optional[User] = None) -> Dict[str, Any]:
    data = {
        "id": membership.id,
        "userId": membership.user_id,
        "organizationId": membership.organization_id,
        "isAdmin": membership.is_admin,
    }
    if user is not None:
        data["user"] = user_to_dict(user)
    return data


def resume_to_dict(resume: Resume, user: Optional[User] = None) -> Dict[str, Any]:
    return {
        "id": resume.id,
        "fileName": resume.file_name,
        "path": resume.path,
        "score": resume.score,
        "questions": resume.questions or [],
        "userId": resume.user_id,
        "jobId": resume.job_id,
        "organizationId": resume.organization_id,
        "createdAt": _iso(resume.created_at),
        "user": user_to_dict(user) if user is not None else None,
    }


def job_to_dict(
    job: Job,
    organization: Optional[Organization] = None,
    resumes: Optional[Iterable[Dict[str, Any]]] = None
) -> Dict[str, Any]:
    data = {
        "id": job.id,
        "title": job.title,
        "description": job.description,
        "organizationId": job.organization_id,
        "createdAt": _iso(job.created_at),
    }
    if organization is not None:
        data["organization"] = organization_to_dict(organization)
    if resumes is not None:
        data["resumes"] = list(resumes)
    return data


def organization_to_dict(org: Organization, **includes: Any) -> Dict[str, Any]:
    """组织字典，includes 中的 members / jobs / resumes 原样附加"""
    data = {"id": org.id, "name": org.name, "createdAt": _iso(org.created_at)}
    data.update(includes)
    return data
