"""Display names of single-user groups.

A rendered name carries a marker telling which UUID form it was derived
from: ``user/`` for username UUIDs and ``userid/`` for numeric account id
UUIDs. Suggestion input may echo a rendered name back, so the markers are
also stripped from query text.
"""

from singleusergroup.domain.entities.account import AccountRecord
from singleusergroup.domain.entities.group import GroupUUID
from singleusergroup.domain.services.group_uuid import GroupUUIDCodec

NAME_PREFIX = "user/"
ACCOUNT_PREFIX = "userid/"


def uuid_of(account: AccountRecord) -> GroupUUID:
    """Preferred group UUID of an account: by username when it has one."""
    if account.username is not None:
        return GroupUUIDCodec.encode(account.username)
    return GroupUUIDCodec.encode(account.id)


def name_of(uuid: GroupUUID, account: AccountRecord) -> str:
    """Render the display name of the group ``uuid`` backed by ``account``.

    Examples:
        >>> name_of("user:admin", AccountRecord(id=1, username="admin", full_name="Ann Admin"))
        'user/Ann Admin (admin)'
        >>> name_of("user:2", AccountRecord(id=2, full_name="Ann B"))
        'userid/Ann B (2)'
    """
    if account.full_name:
        if account.username is not None:
            body = f"{account.full_name} ({account.username})"
        else:
            body = f"{account.full_name} ({account.id})"
    elif account.username is not None:
        body = account.username
    else:
        body = str(account.id)

    if GroupUUIDCodec.is_account_id(GroupUUIDCodec.decode(uuid)):
        return ACCOUNT_PREFIX + body
    return NAME_PREFIX + body


def strip_name_prefix(text: str) -> str:
    """Remove a leading display-name marker, if any."""
    if text.startswith(NAME_PREFIX):
        return text[len(NAME_PREFIX) :]
    if text.startswith(ACCOUNT_PREFIX):
        return text[len(ACCOUNT_PREFIX) :]
    return text
