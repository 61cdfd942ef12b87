"""Account repository for read-only directory queries."""

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import InstrumentedAttribute, selectinload

from singleusergroup.infrastructure.persistence.models import (
    SCHEME_USERNAME,
    AccountExternalIdModel,
    AccountModel,
)

# Exclusive upper bound of every key in the username scheme
_USERNAME_SCHEME_END = SCHEME_USERNAME[:-1] + chr(ord(SCHEME_USERNAME[-1]) + 1)


class AccountRepository:
    """Repository for account lookups and prefix range queries.

    Every query eagerly loads the account's external ids so that the
    username and secondary emails are available without further I/O.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize the repository.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    def _select_accounts(self) -> Select:
        return select(AccountModel).options(selectinload(AccountModel.external_ids))

    async def get_by_id(self, account_id: int) -> AccountModel | None:
        """Get an account by its numeric id.

        Args:
            account_id: Numeric account id.

        Returns:
            Account model if found, None otherwise.
        """
        result = await self.session.execute(
            self._select_accounts().where(AccountModel.id == account_id)
        )
        return result.scalar_one_or_none()

    async def get_by_username(self, username: str) -> AccountModel | None:
        """Get an account by username.

        Args:
            username: The account's username.

        Returns:
            Account model if found, None otherwise.
        """
        result = await self.session.execute(
            self._select_accounts()
            .join(AccountModel.external_ids)
            .where(AccountExternalIdModel.external_id == SCHEME_USERNAME + username)
        )
        return result.scalars().first()

    async def suggest_by_username(
        self, lower: str, upper: str | None, limit: int
    ) -> list[AccountModel]:
        """Get accounts whose username lies in ``[lower, upper)``, by username."""
        key = AccountExternalIdModel.external_id
        upper_key = SCHEME_USERNAME + upper if upper is not None else _USERNAME_SCHEME_END
        result = await self.session.execute(
            self._select_accounts()
            .join(AccountModel.external_ids)
            .where(key >= SCHEME_USERNAME + lower, key < upper_key)
            .order_by(key)
            .limit(limit)
        )
        return list(result.scalars().all())

    async def suggest_by_full_name(
        self, lower: str, upper: str | None, limit: int
    ) -> list[AccountModel]:
        """Get accounts whose full name lies in ``[lower, upper)``, by full name."""
        return await self._suggest_by_column(AccountModel.full_name, lower, upper, limit)

    async def suggest_by_preferred_email(
        self, lower: str, upper: str | None, limit: int
    ) -> list[AccountModel]:
        """Get accounts whose preferred email lies in ``[lower, upper)``."""
        return await self._suggest_by_column(AccountModel.preferred_email, lower, upper, limit)

    async def suggest_by_email_address(
        self, lower: str, upper: str | None, limit: int
    ) -> list[AccountModel]:
        """Get accounts with an external id email in ``[lower, upper)``.

        An account is returned once per matching external id.
        """
        email = AccountExternalIdModel.email_address
        query = (
            self._select_accounts()
            .join(AccountModel.external_ids)
            .where(email >= lower)
        )
        if upper is not None:
            query = query.where(email < upper)
        result = await self.session.execute(query.order_by(email).limit(limit))
        return list(result.scalars().all())

    async def _suggest_by_column(
        self,
        column: InstrumentedAttribute,
        lower: str,
        upper: str | None,
        limit: int,
    ) -> list[AccountModel]:
        query = self._select_accounts().where(column >= lower)
        if upper is not None:
            query = query.where(column < upper)
        result = await self.session.execute(query.order_by(column).limit(limit))
        return list(result.scalars().all())
