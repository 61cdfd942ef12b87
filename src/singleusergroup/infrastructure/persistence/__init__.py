"""Persistence layer for the SQLAlchemy-backed account directory."""

from singleusergroup.infrastructure.persistence.database import Base, DatabaseManager

__all__ = ["Base", "DatabaseManager"]
