"""Group UUID codec for single-user groups.

Every account is addressable as a group whose UUID is ``user:`` followed by
an identity token: either the decimal account id or the account's username.

Examples:
    >>> GroupUUIDCodec.encode(7)
    'user:7'
    >>> GroupUUIDCodec.decode("user:alice")
    'alice'
    >>> GroupUUIDCodec.classify("alice")
    <IdentityKind.USERNAME: 'username'>
"""

import re
from enum import Enum

from singleusergroup.domain.entities.account import MAX_ACCOUNT_ID
from singleusergroup.domain.entities.group import GroupUUID


class InvalidGroupUUIDError(ValueError):
    """Raised when a UUID not handled by this backend is decoded.

    Callers are expected to check ``GroupUUIDCodec.handles`` first.
    """

    def __init__(self, uuid: str) -> None:
        self.uuid = uuid
        super().__init__(f"SingleUserGroup does not handle {uuid}")


class IdentityKind(str, Enum):
    """Which form of account identity a token carries."""

    ACCOUNT_ID = "account_id"
    USERNAME = "username"


class GroupUUIDCodec:
    """Convert between group UUIDs and account identity tokens."""

    UUID_PREFIX = "user:"

    ACCOUNT_ID_PATTERN = re.compile(r"[1-9][0-9]*")

    # Letters or digits at both ends, ._@- allowed in between
    USERNAME_PATTERN = re.compile(r"[a-zA-Z0-9][a-zA-Z0-9._@-]*[a-zA-Z0-9]|[a-zA-Z0-9]")

    @classmethod
    def handles(cls, uuid: str) -> bool:
        """Return True if ``uuid`` belongs to a single-user group."""
        return uuid.startswith(cls.UUID_PREFIX)

    @classmethod
    def encode(cls, token: str | int) -> GroupUUID:
        """Build the group UUID for an identity token or numeric account id."""
        return f"{cls.UUID_PREFIX}{token}"

    @classmethod
    def decode(cls, uuid: str) -> str:
        """Extract the identity token from a group UUID.

        Args:
            uuid: A group UUID starting with ``user:``.

        Returns:
            The identity token following the prefix.

        Raises:
            InvalidGroupUUIDError: If ``uuid`` does not start with ``user:``.
        """
        if not cls.handles(uuid):
            raise InvalidGroupUUIDError(uuid)
        return uuid[len(cls.UUID_PREFIX) :]

    @classmethod
    def is_account_id(cls, token: str) -> bool:
        return cls.ACCOUNT_ID_PATTERN.fullmatch(token) is not None

    @classmethod
    def account_id_of(cls, token: str) -> int | None:
        """Numeric account id carried by ``token``.

        Returns:
            The id, or None if ``token`` is not an account id or is too
            large for any account to have it.
        """
        if not cls.is_account_id(token):
            return None
        account_id = int(token)
        return account_id if account_id <= MAX_ACCOUNT_ID else None

    @classmethod
    def is_username(cls, token: str) -> bool:
        return cls.USERNAME_PATTERN.fullmatch(token) is not None

    @classmethod
    def classify(cls, token: str) -> IdentityKind | None:
        """Tell whether a token is a numeric account id or a username.

        An all-digit token without a leading zero is always an account id,
        even though the username grammar accepts it too.

        Returns:
            The identity kind, or None if the token is neither.
        """
        if cls.is_account_id(token):
            return IdentityKind.ACCOUNT_ID
        if cls.is_username(token):
            return IdentityKind.USERNAME
        return None
