"""Domain entities for SingleUserGroup.

Entities are pure Python dataclasses that represent core concepts.
They have no dependencies on infrastructure or external frameworks.
"""

from singleusergroup.domain.entities.account import MAX_ACCOUNT_ID, AccountRecord
from singleusergroup.domain.entities.actor import Actor
from singleusergroup.domain.entities.group import GroupDescriptor, GroupReference, GroupUUID

__all__ = [
    "MAX_ACCOUNT_ID",
    "AccountRecord",
    "Actor",
    "GroupDescriptor",
    "GroupReference",
    "GroupUUID",
]
