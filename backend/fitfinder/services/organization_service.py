"""
组织管理服务

组织 / 成员 / 职位的增删查，写操作要求当前用户是组织管理员。
"""

from sqlmodel import Session

from fitfinder.models.organization import Organization
from fitfinder.repositories.organization_repository import OrganizationRepository
from fitfinder.repositories.job_repository import JobRepository
from fitfinder.repositories.resume_repository import ResumeRepository
from fitfinder.repositories.user_repository import UserRepository
from fitfinder.services.base import BaseService, error, NOT_AUTHENTICATED, NOT_AUTHORIZED
from fitfinder.services.serializers import (
    job_to_dict,
    membership_to_dict,
    organization_to_dict,
    resume_to_dict,
)


class OrganizationService(BaseService):
    """
    组织管理服务类

    使用示例：
        service = OrganizationService(RequestContext("admin@acme.io"))
        org = service.create_organization("Acme")["org"]
        service.create_job(org["id"], "Backend Engineer", "Go, Postgres")
    """

    def _members_payload(self, session: Session, org_id: str) -> list:
        users = UserRepository(session)
        return [
            membership_to_dict(m, users.get_by_id(m.user_id))
            for m in OrganizationRepository(session).get_members(org_id)
        ]

    def _resumes_payload(self, session: Session, resumes) -> list:
        users = UserRepository(session)
        return [
            resume_to_dict(r, users.get_by_id(r.user_id) if r.user_id else None)
            for r in resumes
        ]

    def create_organization(self, name: str) -> dict:
        """创建组织，创建者成为管理员"""
        if not name or not name.strip():
            return error("Organization name is required")

        with Session(self.engine) as session:
            user, err = self._current_user(session)
            if err:
                return err

            org = OrganizationRepository(session).create_with_admin(name.strip(), user.id)
            print(f"[OrganizationService] 组织已创建: {org.name} (ID: {org.id})")
            return {"org": organization_to_dict(org)}

    def list_organizations(self) -> dict:
        """当前用户所属的组织，附带成员和职位"""
        with Session(self.engine) as session:
            user, err = self._current_user(session)
            if err:
                return err

            jobs = JobRepository(session)
            orgs = [
                organization_to_dict(
                    org,
                    members=self._members_payload(session, org.id),
                    jobs=[job_to_dict(j) for j in jobs.list_by_organization(org.id)]
                )
                for org in OrganizationRepository(session).list_for_user(user.id)
            ]
            return {"orgs": orgs}

    def get_organization(self, org_id: str) -> dict:
        """组织详情：成员、职位（含候选人简历）和组织下的全部简历"""
        if not self.context.is_authenticated:
            return error(NOT_AUTHENTICATED)

        with Session(self.engine) as session:
            org = OrganizationRepository(session).get_by_id(org_id)
            if not org:
                return error("Organization not found")

            resumes = ResumeRepository(session)
            jobs = [
                job_to_dict(j, resumes=self._resumes_payload(session, resumes.list_by_job(j.id)))
                for j in JobRepository(session).list_by_organization(org.id)
            ]
            return {
                "org": organization_to_dict(
                    org,
                    members=self._members_payload(session, org.id),
                    jobs=jobs,
                    resumes=self._resumes_payload(session, resumes.list_by_organization(org.id))
                )
            }

    def add_admin(self, org_id: str, user_email: str) -> dict:
        """把目标用户设为组织管理员（已是成员则提升）"""
        with Session(self.engine) as session:
            user, err = self._current_user(session)
            if err:
                return err

            orgs = OrganizationRepository(session)
            if not orgs.is_admin(user.id, org_id):
                return error(NOT_AUTHORIZED)

            target = UserRepository(session).get_by_email(user_email)
            if not target:
                return error("Target user not found")

            orgs.upsert_admin(target.id, org_id)
            print(f"[OrganizationService] {user_email} 已成为组织 {org_id} 的管理员")
            return {"ok": True}

    def create_job(self, org_id: str, title: str, description: str) -> dict:
        """发布职位（仅管理员）"""
        with Session(self.engine) as session:
            user, err = self._current_user(session)
            if err:
                return err

            if not OrganizationRepository(session).is_admin(user.id, org_id):
                return error(NOT_AUTHORIZED)

            if not title or not title.strip():
                return error("Job title is required")

            job = JobRepository(session).create(org_id, title.strip(), description or "")
            return {"job": job_to_dict(job)}

    def delete_job(self, job_id: str) -> dict:
        """删除职位（仅该职位所属组织的管理员），级联删除简历记录"""
        with Session(self.engine) as session:
            user, err = self._current_user(session)
            if err:
                return err

            jobs = JobRepository(session)
            job = jobs.get_by_id(job_id)
            if not job:
                return error("Job not found")

            if not OrganizationRepository(session).is_admin(user.id, job.organization_id):
                return error(NOT_AUTHORIZED)

            jobs.delete(job_id)
            return {"ok": True}

    def delete_organization(self, org_id: str) -> dict:
        """删除组织（仅管理员），级联删除成员、职位和简历记录"""
        with Session(self.engine) as session:
            user, err = self._current_user(session)
            if err:
                return err

            orgs = OrganizationRepository(session)
            if not orgs.is_admin(user.id, org_id):
                return error(NOT_AUTHORIZED)

            orgs.delete(org_id)
            return {"ok": True}

    def get_job_candidates(self, org_id: str, job_id: str) -> dict:
        """职位的候选人列表（按分数从高到低）"""
        if not self.context.is_authenticated:
            return error(NOT_AUTHENTICATED)

        with Session(self.engine) as session:
            job = JobRepository(session).get_by_id(job_id)
            if not job:
                return error("Job not found")
            if job.organization_id != org_id:
                return error("Job does not belong to organization")

            org = session.get(Organization, job.organization_id)
            resumes = self._resumes_payload(session, ResumeRepository(session).list_by_job(job.id))
            return {"job": job_to_dict(job, organization=org, resumes=resumes)}
