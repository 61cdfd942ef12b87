"""Account directory adapters."""

from singleusergroup.infrastructure.directory.sqlalchemy_directory import (
    SqlAlchemyAccountDirectory,
    SqlAlchemyDirectorySession,
    to_record,
)

__all__ = ["SqlAlchemyAccountDirectory", "SqlAlchemyDirectorySession", "to_record"]
