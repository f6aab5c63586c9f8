"""
Pytest 测试配置
提供测试数据库、Mock LLM、PDF 样本等测试基础设施
"""

import base64
import json
import sys
from pathlib import Path
from typing import Callable, Generator, Optional
from unittest.mock import Mock

import pytest
from langchain_core.messages import AIMessage
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, create_engine

# 添加 backend 目录到 sys.path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from fitfinder.db.init_db import create_tables
from fitfinder.llm.llm_factory import LLMFactory
from fitfinder.models import User, Organization, OrganizationUser, Job
from fitfinder.services.auth_service import hash_password
from fitfinder.services.context import RequestContext


# ==================== 数据库 Fixtures ====================

@pytest.fixture(scope="function")
def test_db_engine():
    """
    创建测试用的内存数据库引擎
    每个测试函数都会获得一个全新的数据库；StaticPool 让所有 Session 共用同一连接
    """
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool
    )

    create_tables(engine)

    yield engine

    engine.dispose()


@pytest.fixture(scope="function")
def test_db_session(test_db_engine) -> Generator[Session, None, None]:
    """
    创建测试用的数据库会话
    """
    with Session(test_db_engine) as session:
        yield session


# ==================== 测试数据 Fixtures ====================

TEST_PASSWORD = "correct horse battery staple"


@pytest.fixture(scope="function")
def test_password() -> str:
    """种子用户的明文密码"""
    return TEST_PASSWORD


def _create_user(session: Session, email: str) -> User:
    user = User(email=email, password_hash=hash_password(TEST_PASSWORD))
    session.add(user)
    session.commit()
    session.refresh(user)
    return user


@pytest.fixture(scope="function")
def admin_user(test_db_session: Session) -> User:
    """组织管理员"""
    return _create_user(test_db_session, "admin@acme.io")


@pytest.fixture(scope="function")
def candidate_user(test_db_session: Session) -> User:
    """候选人（不属于任何组织）"""
    return _create_user(test_db_session, "candidate@example.com")


@pytest.fixture(scope="function")
def test_organization(test_db_session: Session, admin_user: User) -> Organization:
    """
    创建测试组织，admin_user 为管理员
    """
    org = Organization(name="Acme")
    test_db_session.add(org)
    test_db_session.commit()
    test_db_session.refresh(org)

    membership = OrganizationUser(user_id=admin_user.id, organization_id=org.id, is_admin=True)
    test_db_session.add(membership)
    test_db_session.commit()
    return org


@pytest.fixture(scope="function")
def test_job(test_db_session: Session, test_organization: Organization) -> Job:
    """
    创建测试职位
    """
    job = Job(
        title="Senior Go Engineer",
        description="Senior Go engineer",
        organization_id=test_organization.id
    )
    test_db_session.add(job)
    test_db_session.commit()
    test_db_session.refresh(job)
    return job


@pytest.fixture(scope="function")
def admin_context(admin_user: User) -> RequestContext:
    return RequestContext(admin_user.email)


@pytest.fixture(scope="function")
def candidate_context(candidate_user: User) -> RequestContext:
    return RequestContext(candidate_user.email)


# ==================== PDF Fixtures ====================

def build_pdf(text: Optional[str]) -> bytes:
    """
    生成单页 PDF

    text 为 None 时生成没有内容流的空白页（无可提取文本）
    """
    if text is None:
        objects = [
            b"<< /Type /Catalog /Pages 2 0 R >>",
            b"<< /Type /Pages /Kids [3 0 R] /Count 1 >>",
            b"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] >>",
        ]
    else:
        stream = f"BT /F1 24 Tf 72 720 Td ({text}) Tj ET".encode("latin-1")
        objects = [
            b"<< /Type /Catalog /Pages 2 0 R >>",
            b"<< /Type /Pages /Kids [3 0 R] /Count 1 >>",
            b"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
            b"/Contents 4 0 R /Resources << /Font << /F1 5 0 R >> >> >>",
            b"<< /Length %d >>\nstream\n" % len(stream) + stream + b"\nendstream",
            b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
        ]

    out = b"%PDF-1.4\n"
    offsets = []
    for number, body in enumerate(objects, start=1):
        offsets.append(len(out))
        out += b"%d 0 obj\n" % number + body + b"\nendobj\n"

    xref_offset = len(out)
    out += b"xref\n0 %d\n" % (len(objects) + 1)
    out += b"0000000000 65535 f \n"
    for offset in offsets:
        out += b"%010d 00000 n \n" % offset
    out += b"trailer\n<< /Size %d /Root 1 0 R >>\n" % (len(objects) + 1)
    out += b"startxref\n%d\n%%%%EOF\n" % xref_offset
    return out


@pytest.fixture(scope="function")
def pdf_bytes() -> Callable[[Optional[str]], bytes]:
    """返回 PDF 生成函数"""
    return build_pdf


@pytest.fixture(scope="function")
def make_submission() -> Callable[..., dict]:
    """
    构造投递请求
    默认内容为包含 "Python Go" 的单页 PDF
    """
    def _make(content: Optional[bytes] = None, **overrides) -> dict:
        raw = content if content is not None else build_pdf("Python Go")
        data = {
            "fileName": "r.pdf",
            "mimeType": "application/pdf",
            "contentBase64": base64.b64encode(raw).decode("ascii"),
        }
        data.update(overrides)
        return data

    return _make


# ==================== Mock LLM Fixtures ====================

DEFAULT_LLM_OUTPUT = {
    "score": 72,
    "questions": [
        {"text": "Describe goroutines", "topic": "concurrency", "confidence": 0.9}
    ]
}


def structured_response(output) -> dict:
    """
    模拟 with_structured_output(include_raw=True) 的返回值
    output 为 dict 时序列化为 JSON，为 str 时原样作为消息内容
    """
    content = output if isinstance(output, str) else json.dumps(output)
    return {"raw": AIMessage(content=content), "parsed": None, "parsing_error": None}


@pytest.fixture(scope="function")
def mock_llm():
    """
    Mock LLM 实例
    with_structured_output(...).invoke(...) 默认返回 DEFAULT_LLM_OUTPUT
    """
    mock = Mock()
    mock_structured = Mock()
    mock_structured.invoke.return_value = structured_response(DEFAULT_LLM_OUTPUT)
    mock.with_structured_output.return_value = mock_structured
    return mock


@pytest.fixture(scope="function")
def set_llm_output(mock_llm) -> Callable:
    """修改 Mock LLM 的输出"""
    def _set(output) -> None:
        mock_llm.with_structured_output.return_value.invoke.return_value = structured_response(output)

    return _set


@pytest.fixture(scope="function")
def mock_llm_factory(mock_llm):
    """
    Mock LLMFactory
    凭据检查总是通过，create_llm 返回 mock_llm
    """
    factory = Mock(spec=LLMFactory)
    factory.create_llm.return_value = mock_llm
    return factory


@pytest.fixture(scope="function")
def llm_config_path(tmp_path) -> str:
    """写入一份测试用 LLM 配置文件（gemini 激活）"""
    config = {
        "active_model": "gemini",
        "providers": {
            "gemini": {
                "base_url": None,
                "model_name": "gemini-flash-lite-latest",
                "env_key_map": "GEMINI_API_KEY",
                "temperature": 0.2,
                "timeout": 30
            },
            "openai_official": {
                "base_url": "https://api.openai.com/v1",
                "model_name": "gpt-4o-mini",
                "env_key_map": "OPENAI_API_KEY",
                "temperature": 0.2
            }
        }
    }
    path = tmp_path / "llm_config.json"
    path.write_text(json.dumps(config), encoding="utf-8")
    return str(path)


# ==================== Pytest 配置 ====================

def pytest_configure(config):
    """
    Pytest 初始化配置
    """
    config.addinivalue_line(
        "markers", "unit: Unit tests"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests"
    )
