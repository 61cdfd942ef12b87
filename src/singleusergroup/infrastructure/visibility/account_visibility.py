"""Configuration-driven account visibility.

The policy decides which accounts an actor may see besides its own:

- ``ALL``: every account is visible to everyone.
- ``NONE``: an identified actor sees only its own account; the anonymous
  actor sees nothing.
"""

from enum import Enum

from singleusergroup.core.config import Settings, get_settings
from singleusergroup.domain.entities.actor import Actor
from singleusergroup.domain.ports.visibility import VisibilityChecker


class AccountVisibility(str, Enum):
    """Account visibility policies."""

    ALL = "ALL"
    NONE = "NONE"


class AccountVisibilityChecker(VisibilityChecker):
    """VisibilityChecker applying a fixed AccountVisibility policy."""

    def __init__(self, policy: AccountVisibility = AccountVisibility.ALL) -> None:
        self.policy = policy

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "AccountVisibilityChecker":
        settings = settings or get_settings()
        return cls(AccountVisibility(settings.account_visibility))

    async def can_see(self, actor: Actor, account_id: int) -> bool:
        if actor.is_identified and actor.account_id == account_id:
            return True
        return self.policy is AccountVisibility.ALL
