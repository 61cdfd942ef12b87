"""The principal on whose behalf a group backend is asked a question."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Actor:
    """Requesting principal.

    An actor carrying an ``account_id`` has been identified (authenticated)
    by the host. The anonymous actor has neither an account id nor a username.

    Attributes:
        account_id: Numeric id of the actor's own account, if identified.
        username: The actor's username, if the account has one.
    """

    account_id: int | None = None
    username: str | None = None

    @property
    def is_identified(self) -> bool:
        """Whether the actor is an identified user."""
        return self.account_id is not None

    @classmethod
    def anonymous(cls) -> "Actor":
        """Return the unidentified principal."""
        return cls()
