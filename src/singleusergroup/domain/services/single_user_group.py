"""Makes a group out of each account.

UUIDs of the groups are derived from the account: ``user:<id>`` names the
group of the account with that numeric id and ``user:<username>`` the group
of the account with that username. Both denote the same single member.
"""

from typing import Any

from singleusergroup.domain.entities.account import AccountRecord
from singleusergroup.domain.entities.actor import Actor
from singleusergroup.domain.entities.group import GroupDescriptor, GroupReference, GroupUUID
from singleusergroup.domain.ports.account_directory import AccountDirectory, DirectorySession
from singleusergroup.domain.ports.visibility import VisibilityChecker
from singleusergroup.domain.services.group_membership import GroupMembership, membership_of
from singleusergroup.domain.services.group_naming import name_of
from singleusergroup.domain.services.group_uuid import GroupUUIDCodec, IdentityKind
from singleusergroup.domain.services.suggestion_engine import SuggestionEngine


class SingleUserGroupBackend:
    """Group backend in which every account is its own group."""

    def __init__(
        self,
        directory: AccountDirectory,
        visibility: VisibilityChecker,
        logger: Any | None = None,
    ) -> None:
        """Initialize the backend.

        Args:
            directory: Account directory to resolve accounts in.
            visibility: Visibility check applied to suggestions.
            logger: Structured logger handed to the suggestion engine.
        """
        self.directory = directory
        self.suggestion_engine = SuggestionEngine(directory, visibility, logger=logger)

    def handles(self, uuid: GroupUUID) -> bool:
        return GroupUUIDCodec.handles(uuid)

    def memberships_of(self, actor: Actor) -> GroupMembership:
        return membership_of(actor)

    async def suggest(self, text: str, actor: Actor) -> list[GroupReference]:
        return await self.suggestion_engine.suggest(text, actor)

    async def get(self, uuid: GroupUUID) -> GroupDescriptor | None:
        """Describe the single-user group ``uuid``.

        Args:
            uuid: A UUID this backend handles.

        Returns:
            The group descriptor, or None if no account matches the UUID.

        Raises:
            InvalidGroupUUIDError: If ``uuid`` is not a single-user group UUID.
            DirectoryError: If the account directory cannot be read.
        """
        token = GroupUUIDCodec.decode(uuid)
        kind = GroupUUIDCodec.classify(token)
        if kind is None:
            return None

        async with self.directory.session() as session:
            account = await self._lookup(session, token, kind)
        if account is None:
            return None

        return GroupDescriptor(
            group_uuid=uuid,
            name=name_of(uuid, account),
            email_address=account.preferred_email,
            url=None,
            visible_to_all=False,
        )

    @staticmethod
    async def _lookup(
        session: DirectorySession, token: str, kind: IdentityKind
    ) -> AccountRecord | None:
        if kind is IdentityKind.USERNAME:
            return await session.get_by_username(token)

        account_id = GroupUUIDCodec.account_id_of(token)
        account = await session.get_by_id(account_id) if account_id is not None else None
        # All-digit usernames are legal; fall back when no account has that id
        if account is None and GroupUUIDCodec.is_username(token):
            account = await session.get_by_username(token)
        return account
