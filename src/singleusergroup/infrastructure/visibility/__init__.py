"""Visibility check adapters."""

from singleusergroup.infrastructure.visibility.account_visibility import (
    AccountVisibility,
    AccountVisibilityChecker,
)

__all__ = ["AccountVisibility", "AccountVisibilityChecker"]
