"""Unit tests for the SQLAlchemy account directory adapter."""

from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from singleusergroup.core.config import Settings
from singleusergroup.domain.entities import MAX_ACCOUNT_ID, AccountRecord
from singleusergroup.domain.ports import AccountAttribute, DirectoryError
from singleusergroup.infrastructure.directory import (
    SqlAlchemyAccountDirectory,
    SqlAlchemyDirectorySession,
    to_record,
)
from singleusergroup.infrastructure.persistence.database import DatabaseManager
from singleusergroup.infrastructure.persistence.models import (
    AccountExternalIdModel,
    AccountModel,
)


def test_to_record():
    model = AccountModel(
        id=5,
        full_name="Eve",
        preferred_email="eve@example.com",
        external_ids=[
            AccountExternalIdModel(external_id="username:eve"),
            AccountExternalIdModel(external_id="mailto:eve@corp.example", email_address="eve@corp.example"),
        ],
    )

    assert to_record(model) == AccountRecord(
        id=5,
        username="eve",
        full_name="Eve",
        preferred_email="eve@example.com",
        secondary_emails=("eve@corp.example",),
    )


def test_to_record_without_external_ids():
    assert to_record(AccountModel(id=6, external_ids=[])) == AccountRecord(id=6)


@pytest.fixture
def directory_session(seeded_session) -> SqlAlchemyDirectorySession:
    return SqlAlchemyDirectorySession(seeded_session)


@pytest.mark.asyncio
async def test_session_get_by_id(directory_session):
    account = await directory_session.get_by_id(1000001)

    assert account.username == "admin"
    assert account.secondary_emails == ("ann.admin@corp.example",)
    assert await directory_session.get_by_id(1) is None


@pytest.mark.asyncio
async def test_session_get_by_id_at_range_edge(db_session):
    db_session.add(AccountModel(id=MAX_ACCOUNT_ID, full_name="Last One", external_ids=[]))
    await db_session.commit()
    directory_session = SqlAlchemyDirectorySession(db_session)

    account = await directory_session.get_by_id(MAX_ACCOUNT_ID)

    assert account == AccountRecord(id=MAX_ACCOUNT_ID, full_name="Last One")
    assert await directory_session.get_by_id(MAX_ACCOUNT_ID + 1) is None
    assert await directory_session.get_by_id(99999999999999999999) is None


@pytest.mark.asyncio
async def test_session_get_by_username(directory_session):
    account = await directory_session.get_by_username("123456")

    assert account.id == 1000004
    assert await directory_session.get_by_username("nobody") is None


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("attribute", "lower", "upper", "expected"),
    [
        (AccountAttribute.USERNAME, "ad", "ae", [1000001]),
        (AccountAttribute.FULL_NAME, "Ann", "Ano", [1000001, 1000002]),
        (AccountAttribute.PREFERRED_EMAIL, "admin", "admio", [1000001]),
        (AccountAttribute.SECONDARY_EMAIL, "ann", "ano", [1000001]),
    ],
)
async def test_session_query_by_attribute_range(directory_session, attribute, lower, upper, expected):
    accounts = await directory_session.query_by_attribute_range(attribute, lower, upper, 10)

    assert [a.id for a in accounts] == expected
    assert all(isinstance(a, AccountRecord) for a in accounts)


@pytest.mark.asyncio
async def test_directory_session_scope(account_seed):
    db = DatabaseManager(Settings(database_url="sqlite+aiosqlite:///:memory:"))
    await db.create_tables()
    async with db.session() as session:
        session.add_all(account_seed)
        await session.commit()

    directory = SqlAlchemyAccountDirectory(db)
    async with directory.session() as session:
        account = await session.get_by_username("bob")

    assert account.full_name == "Bob Builder"
    await db.disconnect()


@pytest.mark.asyncio
async def test_directory_translates_database_errors():
    db = DatabaseManager(Settings(database_url="sqlite+aiosqlite:///:memory:"))
    directory = SqlAlchemyAccountDirectory(db)

    # No tables have been created
    with pytest.raises(DirectoryError) as exc_info:
        async with directory.session() as session:
            await session.get_by_id(1)

    assert isinstance(exc_info.value.__cause__, OperationalError)
    await db.disconnect()


@pytest.mark.asyncio
async def test_directory_passes_other_errors_through():
    directory = SqlAlchemyAccountDirectory(
        DatabaseManager(Settings(database_url="sqlite+aiosqlite:///:memory:"))
    )

    with pytest.raises(KeyError):
        async with directory.session():
            raise KeyError("not a database error")

    await directory.db.disconnect()


def test_directory_keeps_database_manager():
    db = MagicMock(spec=DatabaseManager)

    assert SqlAlchemyAccountDirectory(db).db is db
