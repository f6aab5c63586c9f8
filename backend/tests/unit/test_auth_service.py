"""
AuthService 单元测试
"""

from sqlmodel import Session, select

from fitfinder.models import User
from fitfinder.services.auth_service import AuthService, hash_password, verify_password
from fitfinder.services.context import RequestContext


class TestPasswordHashing:

    def test_hash_format(self):
        stored = hash_password("secret")
        salt, sep, digest = stored.partition("$")

        assert sep == "$"
        assert len(salt) == 32
        assert len(digest) == 128

    def test_random_salt(self):
        assert hash_password("secret") != hash_password("secret")

    def test_verify(self):
        stored = hash_password("secret")
        assert verify_password("secret", stored) is True
        assert verify_password("Secret", stored) is False

    def test_verify_malformed_hash(self):
        assert verify_password("secret", "no-separator") is False


class TestSignup:

    def test_signup_creates_user(self, test_db_engine):
        context = RequestContext()
        result = AuthService(context, engine=test_db_engine).signup("new@example.com", "pw123456")

        assert result == {"ok": True, "userEmail": "new@example.com", "redirect": "/"}
        assert context.user_email == "new@example.com"
        with Session(test_db_engine) as session:
            user = session.exec(select(User).where(User.email == "new@example.com")).first()
            assert user is not None
            assert user.password_hash != "pw123456"

    def test_signup_redirect(self, test_db_engine):
        result = AuthService(RequestContext(), engine=test_db_engine).signup(
            "new@example.com", "pw123456", redirect_url="/jobs"
        )
        assert result["redirect"] == "/jobs"

    def test_signup_existing_user_same_password_signs_in(self, test_db_engine, candidate_user, test_password):
        context = RequestContext()
        result = AuthService(context, engine=test_db_engine).signup(candidate_user.email, test_password)

        assert result["ok"] is True
        assert context.user_email == candidate_user.email
        with Session(test_db_engine) as session:
            assert len(session.exec(select(User)).all()) == 1

    def test_signup_existing_user_different_password(self, test_db_engine, candidate_user):
        context = RequestContext()
        result = AuthService(context, engine=test_db_engine).signup(candidate_user.email, "wrong")

        assert result == {"error": True, "message": "User already exists", "userExists": True}
        assert context.is_authenticated is False

    def test_signup_requires_credentials(self, test_db_engine):
        result = AuthService(RequestContext(), engine=test_db_engine).signup("", "")
        assert result["error"] is True


class TestLogin:

    def test_login_success(self, test_db_engine, candidate_user, test_password):
        context = RequestContext()
        result = AuthService(context, engine=test_db_engine).login(candidate_user.email, test_password)

        assert result == {"ok": True, "userEmail": candidate_user.email}
        assert context.to_session_data() == {"userEmail": candidate_user.email}

    def test_login_unknown_user(self, test_db_engine):
        result = AuthService(RequestContext(), engine=test_db_engine).login("ghost@example.com", "x")

        assert result["error"] is True
        assert result["userNotFound"] is True

    def test_login_wrong_password(self, test_db_engine, candidate_user):
        context = RequestContext()
        result = AuthService(context, engine=test_db_engine).login(candidate_user.email, "wrong")

        assert result == {"error": True, "message": "Incorrect password"}
        assert context.user_email is None


class TestLogout:

    def test_logout_clears_identity(self, test_db_engine):
        context = RequestContext("someone@example.com")
        result = AuthService(context, engine=test_db_engine).logout()

        assert result["ok"] is True
        assert context.is_authenticated is False
        assert context.to_session_data() == {}
