"""Group backend registry - the host's pluggable group capability.

A group backend answers four questions for the UUIDs it claims:
whether it handles a UUID, how to describe it, which of its groups match a
query, and which of its groups an actor belongs to. Backends are registered
into a ``GroupBackendRegistry`` at process startup; the host dispatches to
whichever backend claims a UUID and aggregates suggestions and memberships
across all of them.

Example:
    registry = GroupBackendRegistry()
    registry.register(SingleUserGroupBackend(directory, visibility))

    group = await registry.get("user:alice")
    refs = await registry.suggest("ali", actor)
"""

import uuid
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from structlog.contextvars import bound_contextvars

from singleusergroup.core.logging import get_logger
from singleusergroup.domain.entities.actor import Actor
from singleusergroup.domain.entities.group import GroupDescriptor, GroupReference, GroupUUID
from singleusergroup.domain.services.group_membership import GroupMembership

logger = get_logger(__name__)


@runtime_checkable
class GroupBackend(Protocol):
    """Capability set every group backend provides."""

    def handles(self, uuid: GroupUUID) -> bool:
        """Return True if this backend owns ``uuid``."""
        ...

    async def get(self, uuid: GroupUUID) -> GroupDescriptor | None:
        """Describe the group ``uuid``, or None if it does not exist."""
        ...

    async def suggest(self, text: str, actor: Actor) -> list[GroupReference]:
        """Suggest groups matching ``text`` that ``actor`` may see."""
        ...

    def memberships_of(self, actor: Actor) -> GroupMembership:
        """Groups of this backend that ``actor`` belongs to."""
        ...


@dataclass
class RegisteredBackend:
    """Internal representation of a registered backend.

    Attributes:
        id: Unique identifier for this registration.
        backend: The registered backend.
        registration_order: Order in which the backend was registered.
    """

    id: str
    backend: GroupBackend
    registration_order: int = 0


class GroupBackendRegistry:
    """Ordered collection of group backends with dispatch helpers.

    Backends are consulted in registration order. The registry itself
    satisfies the ``GroupBackend`` protocol.
    """

    def __init__(self) -> None:
        self._backends: list[RegisteredBackend] = []
        self._registration_counter: int = 0

    def register(self, backend: GroupBackend) -> str:
        """Register a backend.

        Args:
            backend: Object implementing the GroupBackend protocol.

        Returns:
            Unique registration id for later removal.

        Raises:
            TypeError: If ``backend`` does not implement GroupBackend.
        """
        if not isinstance(backend, GroupBackend):
            raise TypeError(f"{type(backend).__name__} is not a GroupBackend")

        backend_id = f"backend_{uuid.uuid4().hex[:12]}"
        self._registration_counter += 1
        self._backends.append(
            RegisteredBackend(
                id=backend_id,
                backend=backend,
                registration_order=self._registration_counter,
            )
        )

        logger.debug(
            "Group backend registered",
            backend_id=backend_id,
            backend=type(backend).__name__,
        )
        return backend_id

    def unregister(self, backend_id: str) -> bool:
        """Remove a registered backend.

        Returns:
            True if the backend was removed, False if the id is unknown.
        """
        remaining = [b for b in self._backends if b.id != backend_id]
        if len(remaining) == len(self._backends):
            logger.warning("Group backend not found for unregister", backend_id=backend_id)
            return False

        self._backends = remaining
        logger.debug("Group backend unregistered", backend_id=backend_id)
        return True

    @property
    def backends(self) -> list[GroupBackend]:
        """Registered backends in registration order."""
        return [b.backend for b in self._backends]

    def backend_for(self, uuid: GroupUUID) -> GroupBackend | None:
        """Return the first backend claiming ``uuid``, if any."""
        for registered in self._backends:
            if registered.backend.handles(uuid):
                return registered.backend
        return None

    def handles(self, uuid: GroupUUID) -> bool:
        return self.backend_for(uuid) is not None

    async def get(self, uuid: GroupUUID) -> GroupDescriptor | None:
        """Describe ``uuid`` using the backend that claims it.

        Returns:
            The descriptor, or None if no backend claims the UUID or the
            claiming backend does not know it.
        """
        with bound_contextvars(group_uuid=uuid):
            backend = self.backend_for(uuid)
            if backend is None:
                logger.debug("No group backend handles uuid")
                return None
            return await backend.get(uuid)

    async def suggest(self, text: str, actor: Actor) -> list[GroupReference]:
        """Concatenate suggestions of every backend in registration order."""
        suggestions: list[GroupReference] = []
        with bound_contextvars(query=text, actor=actor.account_id):
            for backend in self.backends:
                suggestions.extend(await backend.suggest(text, actor))
        return suggestions

    def memberships_of(self, actor: Actor) -> GroupMembership:
        """Union of the memberships reported by every backend."""
        membership = GroupMembership.EMPTY
        for backend in self.backends:
            membership = membership.union(backend.memberships_of(actor))
        return membership
