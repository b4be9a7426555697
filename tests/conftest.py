# tests/conftest.py
from __future__ import annotations

import os
from collections.abc import Callable, Generator, Iterator
from datetime import datetime

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

from cleaning_platform.core.security import hash_password, issue_token_for  # noqa: E402
from cleaning_platform.db.session import Base  # noqa: E402
from cleaning_platform.db.session import get_db as app_get_session  # noqa: E402
from cleaning_platform.main import app as fastapi_app  # noqa: E402
from cleaning_platform.models import Message, Role, User  # noqa: E402
from cleaning_platform.repositories.identity_repo import IdentityRepository  # noqa: E402

TEST_DB_URL = "sqlite://"
TEST_PASSWORD = "secret123"
_TEST_PASSWORD_HASH = hash_password(TEST_PASSWORD)


@pytest.fixture(scope="session")
def engine() -> Generator[Engine, None, None]:
    engine = create_engine(
        TEST_DB_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def db_session(engine: Engine) -> Iterator[Session]:
    SessionLocal = sessionmaker(
        bind=engine,
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
    )
    session = SessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()

        # Ensure each test sees a clean database even if commits occurred.
        with engine.begin() as cleanup_conn:
            for table in reversed(Base.metadata.sorted_tables):
                cleanup_conn.execute(table.delete())


@pytest.fixture(scope="session")
def app() -> FastAPI:
    return fastapi_app


@pytest.fixture(autouse=True)
def override_session_dependency(app: FastAPI, db_session: Session) -> Iterator[None]:
    def _get_session_override() -> Generator[Session, None, None]:
        yield db_session

    app.dependency_overrides[app_get_session] = _get_session_override
    try:
        yield
    finally:
        app.dependency_overrides.pop(app_get_session, None)


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app, base_url="http://test") as test_client:
        yield test_client


@pytest.fixture()
def make_user(db_session: Session) -> Callable[..., User]:
    """Return a factory that persists a user with a profile."""

    def _make_user(name: str, role: Role, email: str | None = None) -> User:
        user = IdentityRepository(db_session).create_account(
            email=email or f"{name.lower().replace(' ', '.')}@example.com",
            password_hash=_TEST_PASSWORD_HASH,
            name=name,
            role=role,
        )
        db_session.commit()
        return user

    return _make_user


@pytest.fixture()
def owner(make_user: Callable[..., User]) -> User:
    """Primary owner account."""
    return make_user("Alice Owner", Role.OWNER)


@pytest.fixture()
def other_owner(make_user: Callable[..., User]) -> User:
    """Second owner account with no message history."""
    return make_user("Carol Owner", Role.OWNER)


@pytest.fixture()
def housekeeper(make_user: Callable[..., User]) -> User:
    """Primary housekeeper account."""
    return make_user("Bob Keeper", Role.HOUSEKEEPER)


@pytest.fixture()
def make_message(db_session: Session) -> Callable[..., Message]:
    """Return a factory that inserts a message row directly."""

    def _make_message(
        sender: User,
        receiver: User,
        body: str = "hello",
        *,
        created_at: datetime | None = None,
        deleted_for_sender: bool = False,
        deleted_for_receiver: bool = False,
    ) -> Message:
        message = Message(
            sender_id=sender.id,
            receiver_id=receiver.id,
            body=body,
            deleted_for_sender=deleted_for_sender,
            deleted_for_receiver=deleted_for_receiver,
        )
        if created_at is not None:
            message.created_at = created_at
        db_session.add(message)
        db_session.commit()
        return message

    return _make_message


def headers_for(user: User) -> dict[str, str]:
    """Return authorization headers for ``user``."""
    token = issue_token_for(user.id, user.email, user.profile.role)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def owner_headers(owner: User) -> dict[str, str]:
    return headers_for(owner)


@pytest.fixture()
def other_owner_headers(other_owner: User) -> dict[str, str]:
    return headers_for(other_owner)


@pytest.fixture()
def housekeeper_headers(housekeeper: User) -> dict[str, str]:
    return headers_for(housekeeper)
