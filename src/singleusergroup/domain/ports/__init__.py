"""Ports to the collaborators the group backend depends on."""

from singleusergroup.domain.ports.account_directory import (
    AccountAttribute,
    AccountDirectory,
    DirectoryError,
    DirectorySession,
)
from singleusergroup.domain.ports.visibility import VisibilityChecker

__all__ = [
    "AccountAttribute",
    "AccountDirectory",
    "DirectoryError",
    "DirectorySession",
    "VisibilityChecker",
]
