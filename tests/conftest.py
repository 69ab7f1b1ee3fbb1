# tests/conftest.py
from __future__ import annotations

import os

# The application engine in infra.db.base is created at import time.
os.environ.setdefault("TT_DB_URL", "sqlite:///:memory:")

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from core.events.domain_events import domain_events
from core.models import UserRole
from infra.db.base import init_db
from infra.services import build_service_graph

ADMIN_EMAIL = "admin@example.com"


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch):
    monkeypatch.setenv("TT_ADMIN_EMAIL", ADMIN_EMAIL)
    monkeypatch.delenv("TT_ADMIN_NAME", raising=False)
    monkeypatch.delenv("TT_WORKSPACE_NAME", raising=False)
    monkeypatch.delenv("TT_DEFAULT_CURRENCY", raising=False)
    yield
    domain_events.reset()


@pytest.fixture
def session():
    # separate in-memory DB for tests
    engine = create_engine("sqlite:///:memory:", future=True)
    TestingSessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)
    init_db(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def services(session):
    return build_service_graph(session).as_dict()


@pytest.fixture
def workspace_id(services):
    services["auth_service"].sign_in(ADMIN_EMAIL)
    return services["user_session"].principal.workspace_id


@pytest.fixture
def login(services):
    def _login(email: str):
        return services["auth_service"].sign_in(email)

    return _login


@pytest.fixture
def member_factory(services, workspace_id):
    """Invite members as the admin, then restore the admin session."""

    def _create(email: str, role: UserRole = UserRole.EMPLOYEE, name: str | None = None):
        auth = services["auth_service"]
        previous = services["user_session"].principal
        auth.sign_in(ADMIN_EMAIL)
        user = services["member_service"].invite_member(workspace_id, email, name=name, role=role)
        if previous is not None:
            auth.sign_in(previous.email)
        return user

    return _create
