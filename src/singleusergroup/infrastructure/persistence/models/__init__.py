"""SQLAlchemy models of the account directory tables."""

from singleusergroup.infrastructure.persistence.models.account import AccountModel
from singleusergroup.infrastructure.persistence.models.account_external_id import (
    SCHEME_MAILTO,
    SCHEME_USERNAME,
    AccountExternalIdModel,
)

__all__ = [
    "AccountExternalIdModel",
    "AccountModel",
    "SCHEME_MAILTO",
    "SCHEME_USERNAME",
]
