"""
Shared fixtures.

Every test gets a fresh in-memory SQLite database wired into the app
through `dependency_overrides`, so nothing touches the real database file.
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from freelancer_platform.core.security import create_user_token, get_password_hash
from freelancer_platform.db.base import Base
from freelancer_platform.db.session import get_db, json_serializer
from freelancer_platform.main import app
from freelancer_platform.models import User


@pytest.fixture()
def db_session():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        json_serializer=json_serializer,
    )
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    Base.metadata.create_all(bind=engine)

    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def client(db_session):
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


def make_user(db_session, email: str, role: str, password: str = "secret123") -> User:
    user = User(
        email=email,
        hashed_password=get_password_hash(password),
        full_name=email.split("@")[0].title(),
        role=role,
    )
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


def auth_headers(user: User) -> dict:
    return {"Authorization": f"Bearer {create_user_token(user)}"}


@pytest.fixture()
def admin_user(db_session):
    return make_user(db_session, "admin@example.com", "admin")


@pytest.fixture()
def client_user(db_session):
    return make_user(db_session, "client@example.com", "client")


@pytest.fixture()
def other_user(db_session):
    return make_user(db_session, "other@example.com", "freelancer")


@pytest.fixture()
def admin_headers(admin_user):
    return auth_headers(admin_user)


@pytest.fixture()
def client_headers(client_user):
    return auth_headers(client_user)


@pytest.fixture()
def other_headers(other_user):
    return auth_headers(other_user)
