"""Group views produced by group backends.

Both types are derived per call and never persisted.
"""

from dataclasses import dataclass

GroupUUID = str


@dataclass(frozen=True)
class GroupDescriptor:
    """Description of a single group.

    Attributes:
        group_uuid: The group's UUID.
        name: Human readable group name.
        email_address: Email address of the group, if any.
        url: Location of more information about the group, if any.
        visible_to_all: Whether every user may see the group.
    """

    group_uuid: GroupUUID
    name: str
    email_address: str | None = None
    url: str | None = None
    visible_to_all: bool = False

    def is_visible_to_all(self) -> bool:
        return self.visible_to_all


@dataclass(frozen=True)
class GroupReference:
    """A (uuid, name) pair returned by group suggestion."""

    uuid: GroupUUID
    name: str
