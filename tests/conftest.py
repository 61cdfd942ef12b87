"""Pytest configuration for all tests."""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from singleusergroup.domain.entities import AccountRecord, Actor
from singleusergroup.domain.ports import (
    AccountAttribute,
    AccountDirectory,
    DirectoryError,
    DirectorySession,
    VisibilityChecker,
)
from singleusergroup.domain.services.suggestion_engine import attribute_values
from singleusergroup.infrastructure.persistence.database import Base
from singleusergroup.infrastructure.persistence.models import (
    SCHEME_MAILTO,
    SCHEME_USERNAME,
    AccountExternalIdModel,
    AccountModel,
)


class InMemoryDirectorySession(DirectorySession):
    """Directory session over a list of AccountRecords."""

    def __init__(self, directory: "InMemoryAccountDirectory") -> None:
        self.directory = directory

    async def get_by_id(self, account_id: int) -> AccountRecord | None:
        self.directory.calls.append(("get_by_id", account_id))
        return next((a for a in self.directory.accounts if a.id == account_id), None)

    async def get_by_username(self, username: str) -> AccountRecord | None:
        self.directory.calls.append(("get_by_username", username))
        return next((a for a in self.directory.accounts if a.username == username), None)

    async def query_by_attribute_range(
        self,
        attribute: AccountAttribute,
        lower: str,
        upper: str | None,
        limit: int,
    ) -> list[AccountRecord]:
        self.directory.calls.append(("query", attribute, lower, upper, limit))
        if self.directory.fail_queries:
            raise DirectoryError("directory unavailable")

        rows = [
            (value, account)
            for account in self.directory.accounts
            for value in attribute_values(account, attribute)
            if value >= lower and (upper is None or value < upper)
        ]
        rows.sort(key=lambda row: row[0])
        return [account for _, account in rows[:limit]]


class InMemoryAccountDirectory(AccountDirectory):
    """Account directory fake recording calls and session lifecycle."""

    def __init__(self, accounts: list[AccountRecord] | None = None) -> None:
        self.accounts = list(accounts or [])
        self.calls: list[tuple] = []
        self.opened = 0
        self.closed = 0
        self.fail_queries = False

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[DirectorySession, None]:
        self.opened += 1
        try:
            yield InMemoryDirectorySession(self)
        finally:
            self.closed += 1


class StaticVisibility(VisibilityChecker):
    """Visibility fake: all accounts, or only the listed account ids."""

    def __init__(self, visible_ids: set[int] | None = None) -> None:
        self.visible_ids = visible_ids

    async def can_see(self, actor: Actor, account_id: int) -> bool:
        return self.visible_ids is None or account_id in self.visible_ids


@pytest.fixture
def ann_accounts() -> list[AccountRecord]:
    """Two accounts whose full names both start with 'Ann'."""
    return [
        AccountRecord(id=1, username="admin", full_name="Ann Admin", preferred_email="admin@example.com"),
        AccountRecord(id=2, full_name="Ann B"),
    ]


@pytest.fixture
def make_directory():
    """Factory for in-memory account directories."""
    return InMemoryAccountDirectory


@pytest.fixture
def make_visibility():
    """Factory for static visibility checkers."""
    return StaticVisibility


@pytest.fixture
def directory(ann_accounts) -> InMemoryAccountDirectory:
    return InMemoryAccountDirectory(ann_accounts)


@pytest.fixture
def visibility() -> StaticVisibility:
    return StaticVisibility()


@pytest.fixture
def actor() -> Actor:
    return Actor(account_id=7, username="alice")


@pytest_asyncio.fixture
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session.

    Uses an in-memory SQLite database for testing.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async_session_maker = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session_maker() as session:
        yield session
        await session.rollback()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


def account_models() -> list[AccountModel]:
    """Seed rows for the SQLAlchemy directory.

    - 1000001: Ann Admin, username admin, secondary email ann.admin@corp.example
    - 1000002: Ann B, no username
    - 1000003: Bob Builder, username bob, preferred email bob@example.com
    - 123456: no full name, no username
    - 1000004: username 123456 (all-digit username)
    """
    return [
        AccountModel(
            id=1000001,
            full_name="Ann Admin",
            preferred_email="admin@example.com",
            external_ids=[
                AccountExternalIdModel(external_id=SCHEME_USERNAME + "admin"),
                AccountExternalIdModel(
                    external_id=SCHEME_MAILTO + "ann.admin@corp.example",
                    email_address="ann.admin@corp.example",
                ),
            ],
        ),
        AccountModel(id=1000002, full_name="Ann B"),
        AccountModel(
            id=1000003,
            full_name="Bob Builder",
            preferred_email="bob@example.com",
            external_ids=[AccountExternalIdModel(external_id=SCHEME_USERNAME + "bob")],
        ),
        AccountModel(id=123456),
        AccountModel(
            id=1000004,
            full_name="Numeric Name",
            external_ids=[AccountExternalIdModel(external_id=SCHEME_USERNAME + "123456")],
        ),
    ]


@pytest_asyncio.fixture
async def seeded_session(db_session: AsyncSession) -> AsyncSession:
    """Database session with the seed accounts committed."""
    db_session.add_all(account_models())
    await db_session.commit()
    return db_session


@pytest.fixture
def account_seed() -> list[AccountModel]:
    """Fresh seed rows, for tests that manage their own database."""
    return account_models()
