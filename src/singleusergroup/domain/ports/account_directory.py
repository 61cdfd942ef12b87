"""Abstract account directory consumed by the group backend.

The directory owns account storage and indexing. Group backends only
compose point lookups and attribute range queries against it, always
inside a scoped session.
"""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager
from enum import Enum

from singleusergroup.domain.entities.account import AccountRecord


class DirectoryError(Exception):
    """Raised when the account directory cannot answer a lookup or query."""


class AccountAttribute(str, Enum):
    """Account attributes that support prefix range queries."""

    USERNAME = "username"
    FULL_NAME = "full_name"
    PREFERRED_EMAIL = "preferred_email"
    SECONDARY_EMAIL = "secondary_email"


class DirectorySession(ABC):
    """Scoped session against the account directory."""

    @abstractmethod
    async def get_by_id(self, account_id: int) -> AccountRecord | None:
        """Look up an account by its numeric id."""
        ...

    @abstractmethod
    async def get_by_username(self, username: str) -> AccountRecord | None:
        """Look up an account by its username."""
        ...

    @abstractmethod
    async def query_by_attribute_range(
        self,
        attribute: AccountAttribute,
        lower: str,
        upper: str | None,
        limit: int,
    ) -> list[AccountRecord]:
        """Find accounts whose attribute value lies in ``[lower, upper)``.

        Args:
            attribute: Attribute to range over.
            lower: Inclusive lower bound.
            upper: Exclusive upper bound, or None for no upper bound.
            limit: Maximum number of rows to return.

        Returns:
            Matching accounts ordered by the attribute value. An account may
            appear more than once for multi-valued attributes.

        Raises:
            DirectoryError: If the query cannot be executed.
        """
        ...


class AccountDirectory(ABC):
    """Factory for directory sessions."""

    @abstractmethod
    def session(self) -> AbstractAsyncContextManager[DirectorySession]:
        """Open a session, released when the ``async with`` block exits.

        Raises:
            DirectoryError: If a session cannot be opened.
        """
        ...
