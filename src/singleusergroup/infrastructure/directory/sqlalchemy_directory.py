"""Account directory backed by a SQLAlchemy database.

Reads the ``accounts`` and ``account_external_ids`` tables. Database errors
surface as ``DirectoryError`` so that callers never depend on SQLAlchemy.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from singleusergroup.core.logging import get_logger
from singleusergroup.domain.entities.account import MAX_ACCOUNT_ID, AccountRecord
from singleusergroup.domain.ports.account_directory import (
    AccountAttribute,
    AccountDirectory,
    DirectoryError,
    DirectorySession,
)
from singleusergroup.infrastructure.persistence.database import DatabaseManager
from singleusergroup.infrastructure.persistence.models import SCHEME_USERNAME, AccountModel
from singleusergroup.infrastructure.persistence.repositories import AccountRepository

logger = get_logger(__name__)


def to_record(model: AccountModel) -> AccountRecord:
    """Convert an account model with loaded external ids to an AccountRecord."""
    username = None
    secondary_emails = []
    for external_id in model.external_ids:
        if username is None and external_id.is_scheme(SCHEME_USERNAME):
            username = external_id.scheme_rest
        if external_id.email_address is not None:
            secondary_emails.append(external_id.email_address)

    return AccountRecord(
        id=model.id,
        username=username,
        full_name=model.full_name,
        preferred_email=model.preferred_email,
        secondary_emails=tuple(secondary_emails),
    )


class SqlAlchemyDirectorySession(DirectorySession):
    """Directory session wrapping one SQLAlchemy async session."""

    def __init__(self, session: AsyncSession) -> None:
        self.repository = AccountRepository(session)

    async def get_by_id(self, account_id: int) -> AccountRecord | None:
        # Beyond the BIGINT range the driver refuses to bind the value
        if account_id > MAX_ACCOUNT_ID:
            return None
        model = await self.repository.get_by_id(account_id)
        return to_record(model) if model is not None else None

    async def get_by_username(self, username: str) -> AccountRecord | None:
        model = await self.repository.get_by_username(username)
        return to_record(model) if model is not None else None

    async def query_by_attribute_range(
        self,
        attribute: AccountAttribute,
        lower: str,
        upper: str | None,
        limit: int,
    ) -> list[AccountRecord]:
        if attribute is AccountAttribute.USERNAME:
            models = await self.repository.suggest_by_username(lower, upper, limit)
        elif attribute is AccountAttribute.FULL_NAME:
            models = await self.repository.suggest_by_full_name(lower, upper, limit)
        elif attribute is AccountAttribute.PREFERRED_EMAIL:
            models = await self.repository.suggest_by_preferred_email(lower, upper, limit)
        else:
            models = await self.repository.suggest_by_email_address(lower, upper, limit)
        return [to_record(model) for model in models]


class SqlAlchemyAccountDirectory(AccountDirectory):
    """Account directory reading through a DatabaseManager.

    Example:
        directory = SqlAlchemyAccountDirectory(DatabaseManager())
        async with directory.session() as session:
            account = await session.get_by_username("alice")
    """

    def __init__(self, db: DatabaseManager) -> None:
        self.db = db

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[DirectorySession, None]:
        """Open a directory session over a fresh database session.

        Raises:
            DirectoryError: If opening the session or any query in the
                block fails in the database layer.
        """
        try:
            async with self.db.session() as session:
                yield SqlAlchemyDirectorySession(session)
        except SQLAlchemyError as e:
            logger.debug("Account directory query failed", error=str(e))
            raise DirectoryError(str(e)) from e
