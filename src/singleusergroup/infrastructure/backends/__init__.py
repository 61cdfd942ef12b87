"""Built-in group backends and their registration.

``register_builtin_backends`` is called once at process startup by the host
to plug the single-user group backend into its backend registry.
"""

from singleusergroup.core.config import Settings, get_settings
from singleusergroup.core.logging import get_logger
from singleusergroup.domain.ports.account_directory import AccountDirectory
from singleusergroup.domain.ports.visibility import VisibilityChecker
from singleusergroup.domain.services.group_backend import GroupBackendRegistry
from singleusergroup.domain.services.single_user_group import SingleUserGroupBackend
from singleusergroup.infrastructure.directory import SqlAlchemyAccountDirectory
from singleusergroup.infrastructure.persistence.database import DatabaseManager
from singleusergroup.infrastructure.visibility import AccountVisibilityChecker

logger = get_logger(__name__)


def register_builtin_backends(
    registry: GroupBackendRegistry,
    directory: AccountDirectory,
    visibility: VisibilityChecker,
) -> list[str]:
    """Register the built-in group backends.

    Args:
        registry: Registry to add the backends to.
        directory: Account directory the backends read from.
        visibility: Visibility check applied to suggestions.

    Returns:
        Registration ids, in registration order.
    """
    backend = SingleUserGroupBackend(
        directory,
        visibility,
        logger=get_logger("singleusergroup.suggest"),
    )
    backend_ids = [registry.register(backend)]
    logger.info("Built-in group backends registered", count=len(backend_ids))
    return backend_ids


def create_registry(
    settings: Settings | None = None,
    db: DatabaseManager | None = None,
) -> GroupBackendRegistry:
    """Build a registry wired to the configured database and visibility policy.

    Args:
        settings: Optional settings instance. Defaults to get_settings().
        db: Optional database manager. Created from ``settings`` if omitted.

    Returns:
        A registry with the built-in backends registered.
    """
    settings = settings or get_settings()
    registry = GroupBackendRegistry()
    register_builtin_backends(
        registry,
        SqlAlchemyAccountDirectory(db or DatabaseManager(settings)),
        AccountVisibilityChecker.from_settings(settings),
    )
    return registry


__all__ = ["create_registry", "register_builtin_backends"]
