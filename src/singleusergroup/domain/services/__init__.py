"""Domain services for SingleUserGroup.

Services hold the logic of the single-user group backend. They depend only
on domain entities and on the ports to the account directory and the
visibility check.
"""

from singleusergroup.domain.services.group_backend import (
    GroupBackend,
    GroupBackendRegistry,
    RegisteredBackend,
)
from singleusergroup.domain.services.group_membership import GroupMembership, membership_of
from singleusergroup.domain.services.group_naming import (
    ACCOUNT_PREFIX,
    NAME_PREFIX,
    name_of,
    strip_name_prefix,
    uuid_of,
)
from singleusergroup.domain.services.group_uuid import (
    GroupUUIDCodec,
    IdentityKind,
    InvalidGroupUUIDError,
)
from singleusergroup.domain.services.single_user_group import SingleUserGroupBackend
from singleusergroup.domain.services.suggestion_engine import SuggestionEngine, successor

__all__ = [
    "ACCOUNT_PREFIX",
    "GroupBackend",
    "GroupBackendRegistry",
    "GroupMembership",
    "GroupUUIDCodec",
    "IdentityKind",
    "InvalidGroupUUIDError",
    "NAME_PREFIX",
    "RegisteredBackend",
    "SingleUserGroupBackend",
    "SuggestionEngine",
    "membership_of",
    "name_of",
    "strip_name_prefix",
    "successor",
    "uuid_of",
]
