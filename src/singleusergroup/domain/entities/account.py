"""Account record as seen through the account directory.

Accounts are owned by the directory; this package only reads them.
"""

from dataclasses import dataclass, field

# Account ids are stored as signed 64-bit integers
MAX_ACCOUNT_ID = 2**63 - 1


@dataclass(frozen=True)
class AccountRecord:
    """Read-only view of one account in the directory.

    Attributes:
        id: Numeric account identifier (immutable).
        username: Unique username, if one has been assigned.
        full_name: Full display name, if set.
        preferred_email: Preferred email address, if set.
        secondary_emails: Any further email addresses recorded for the account.
    """

    id: int
    username: str | None = None
    full_name: str | None = None
    preferred_email: str | None = None
    secondary_emails: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        """Validate account data after initialization."""
        if self.id is None or self.id <= 0:
            raise ValueError("Account ID must be a positive integer")
        if self.id > MAX_ACCOUNT_ID:
            raise ValueError(f"Account ID must not exceed {MAX_ACCOUNT_ID}")
