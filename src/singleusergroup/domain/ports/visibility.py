"""Abstract visibility check consumed by the group backend."""

from abc import ABC, abstractmethod

from singleusergroup.domain.entities.actor import Actor


class VisibilityChecker(ABC):
    """Decides whether a requesting actor may observe an account."""

    @abstractmethod
    async def can_see(self, actor: Actor, account_id: int) -> bool:
        """Return True if ``actor`` may see the account ``account_id``."""
        ...
