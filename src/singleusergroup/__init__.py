"""SingleUserGroup - every account is its own single-member group.

Derives a synthetic group for each account in an account directory,
resolves the memberships of an authenticated actor and suggests groups
by prefix search over account attributes.
"""

__version__ = "0.1.0"

from singleusergroup.domain.services.group_backend import GroupBackend, GroupBackendRegistry
from singleusergroup.domain.services.single_user_group import SingleUserGroupBackend

__all__ = ["GroupBackend", "GroupBackendRegistry", "SingleUserGroupBackend", "__version__"]
