"""
表模型单元测试
验证字符串主键、时间戳、JSON 字段和唯一约束
"""

import pytest
from sqlalchemy.exc import IntegrityError
from sqlmodel import select

from fitfinder.models import User, Organization, OrganizationUser, Job, Resume


class TestUser:
    """测试 User 模型"""

    def test_user_gets_string_id_and_timestamps(self, test_db_session):
        """测试：新用户自动获得 UUID 字符串主键和时间戳"""
        user = User(email="a@example.com", password_hash="salt$hash")
        test_db_session.add(user)
        test_db_session.commit()
        test_db_session.refresh(user)

        assert isinstance(user.id, str)
        assert len(user.id) == 36
        assert user.created_at is not None
        assert user.updated_at is not None

    def test_email_is_unique(self, test_db_session, admin_user):
        """测试：邮箱唯一"""
        test_db_session.add(User(email=admin_user.email, password_hash="x$y"))
        with pytest.raises(IntegrityError):
            test_db_session.commit()


class TestOrganizationUser:
    """测试成员关系模型"""

    def test_membership_is_unique_per_user_and_org(self, test_db_session, admin_user, test_organization):
        """测试：同一用户在同一组织只能有一条成员记录"""
        duplicate = OrganizationUser(
            user_id=admin_user.id,
            organization_id=test_organization.id,
            is_admin=False
        )
        test_db_session.add(duplicate)
        with pytest.raises(IntegrityError):
            test_db_session.commit()

    def test_is_admin_defaults_to_false(self):
        """测试：is_admin 默认 False"""
        membership = OrganizationUser(user_id="u", organization_id="o")
        assert membership.is_admin is False


class TestResume:
    """测试 Resume 模型"""

    def test_questions_json_round_trip(self, test_db_session, test_job, candidate_user):
        """测试：面试题列表以 JSON 存储并按原顺序读回"""
        questions = [
            {"text": "Describe goroutines", "topic": "concurrency", "confidence": 0.9},
            {"text": "What is a channel?"},
        ]
        resume = Resume(
            file_name="r.pdf",
            path="/uploaded/abc/resume.pdf",
            score=72,
            questions=questions,
            user_id=candidate_user.id,
            job_id=test_job.id,
            organization_id=test_job.organization_id
        )
        test_db_session.add(resume)
        test_db_session.commit()

        loaded = test_db_session.exec(select(Resume).where(Resume.id == resume.id)).one()
        assert loaded.questions == questions
        assert loaded.score == 72

    def test_anonymous_resume_allowed(self, test_db_session):
        """测试：允许没有用户、职位和组织的简历记录"""
        resume = Resume(file_name="r.pdf", path="/uploaded/x/resume.pdf", score=0)
        test_db_session.add(resume)
        test_db_session.commit()
        test_db_session.refresh(resume)

        assert resume.user_id is None
        assert resume.job_id is None
        assert resume.organization_id is None
        assert resume.questions == []


class TestJob:
    """测试 Job 模型"""

    def test_description_defaults_to_empty(self, test_db_session, test_organization):
        job = Job(title="Intern", organization_id=test_organization.id)
        test_db_session.add(job)
        test_db_session.commit()
        test_db_session.refresh(job)

        assert job.description == ""
