"""Group membership of an actor.

Membership in single-user groups is derived from the actor's own identity,
so resolving it never touches the account directory.
"""

from collections.abc import Iterable, Iterator

from singleusergroup.domain.entities.actor import Actor
from singleusergroup.domain.entities.group import GroupUUID
from singleusergroup.domain.services.group_uuid import GroupUUIDCodec


class GroupMembership:
    """Immutable set of group UUIDs an actor belongs to."""

    EMPTY: "GroupMembership"

    def __init__(self, groups: Iterable[GroupUUID] = ()) -> None:
        self._groups = frozenset(groups)

    def contains(self, uuid: GroupUUID) -> bool:
        """Return True if the actor is a member of ``uuid``."""
        return uuid in self._groups

    def contains_any(self, uuids: Iterable[GroupUUID]) -> bool:
        """Return True if the actor is a member of at least one of ``uuids``."""
        return any(uuid in self._groups for uuid in uuids)

    def intersection(self, uuids: Iterable[GroupUUID]) -> set[GroupUUID]:
        """Return the subset of ``uuids`` the actor is a member of."""
        return {uuid for uuid in uuids if uuid in self._groups}

    def known_groups(self) -> frozenset[GroupUUID]:
        return self._groups

    def union(self, other: "GroupMembership") -> "GroupMembership":
        return GroupMembership(self._groups | other.known_groups())

    def __contains__(self, uuid: object) -> bool:
        return uuid in self._groups

    def __iter__(self) -> Iterator[GroupUUID]:
        return iter(self._groups)

    def __len__(self) -> int:
        return len(self._groups)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, GroupMembership):
            return self._groups == other._groups
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._groups)

    def __repr__(self) -> str:
        return f"<GroupMembership(groups={sorted(self._groups)})>"


GroupMembership.EMPTY = GroupMembership()


def membership_of(actor: Actor) -> GroupMembership:
    """Resolve the single-user groups ``actor`` belongs to.

    An identified actor belongs to the group named by its account id and,
    when it has a username, to the group named by its username. Both denote
    the same account. The anonymous actor belongs to none.

    Args:
        actor: The requesting principal.

    Returns:
        GroupMembership with zero, one or two UUIDs.
    """
    if not actor.is_identified:
        return GroupMembership.EMPTY

    groups = [GroupUUIDCodec.encode(actor.account_id)]
    if actor.username is not None:
        groups.append(GroupUUIDCodec.encode(actor.username))
    return GroupMembership(groups)
