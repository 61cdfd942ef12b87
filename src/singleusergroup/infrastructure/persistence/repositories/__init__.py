"""Persistence repositories for directory queries."""

from singleusergroup.infrastructure.persistence.repositories.account_repository import (
    AccountRepository,
)

__all__ = ["AccountRepository"]
