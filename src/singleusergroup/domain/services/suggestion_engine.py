"""Single-user group suggestion.

Suggests groups for free text by prefix search over account attributes:
username, full name, preferred email and secondary emails, in that order.
Results are filtered by what the requesting actor may see, deduplicated by
account and capped at ``SuggestionEngine.MAX`` entries.
"""

import sys
from typing import Any

from singleusergroup.core.logging import get_logger
from singleusergroup.domain.entities.account import AccountRecord
from singleusergroup.domain.entities.actor import Actor
from singleusergroup.domain.entities.group import GroupReference
from singleusergroup.domain.ports.account_directory import (
    AccountAttribute,
    AccountDirectory,
    DirectoryError,
    DirectorySession,
)
from singleusergroup.domain.ports.visibility import VisibilityChecker
from singleusergroup.domain.services.group_naming import name_of, strip_name_prefix, uuid_of
from singleusergroup.domain.services.group_uuid import GroupUUIDCodec

MAX_CODE_POINT = chr(sys.maxunicode)


def successor(text: str) -> str | None:
    """Smallest string greater than every string starting with ``text``.

    ``[text, successor(text))`` is exactly the set of strings with prefix
    ``text``. Trailing U+10FFFF characters cannot be incremented, so they
    are dropped and the preceding character is incremented instead.

    Returns:
        The exclusive upper bound, or None if there is none (``text`` is
        empty or consists only of U+10FFFF).

    Examples:
        >>> successor("ann")
        'ano'
        >>> successor("a\\U0010ffff")
        'b'
    """
    head = text.rstrip(MAX_CODE_POINT)
    if not head:
        return None
    return head[:-1] + chr(ord(head[-1]) + 1)


def attribute_values(account: AccountRecord, attribute: AccountAttribute) -> tuple[str, ...]:
    """Values of ``attribute`` recorded for ``account``."""
    if attribute is AccountAttribute.USERNAME:
        value = account.username
    elif attribute is AccountAttribute.FULL_NAME:
        value = account.full_name
    elif attribute is AccountAttribute.PREFERRED_EMAIL:
        value = account.preferred_email
    else:
        return account.secondary_emails
    return (value,) if value is not None else ()


class SuggestionEngine:
    """Suggest single-user groups matching free text.

    Example:
        engine = SuggestionEngine(directory, visibility)
        refs = await engine.suggest("Ann", actor)
    """

    MAX = 10

    def __init__(
        self,
        directory: AccountDirectory,
        visibility: VisibilityChecker,
        logger: Any | None = None,
    ) -> None:
        """Initialize the engine.

        Args:
            directory: Account directory to query.
            visibility: Decides which accounts the requester may see.
            logger: Structured logger; defaults to this module's logger.
        """
        self.directory = directory
        self.visibility = visibility
        self.logger = logger or get_logger(__name__)

    async def suggest(self, text: str, actor: Actor) -> list[GroupReference]:
        """Suggest groups whose account matches ``text``.

        Args:
            text: Query text, optionally carrying a ``user/`` or ``userid/``
                marker from a previously rendered group name.
            actor: The requesting principal.

        Returns:
            At most MAX group references in discovery order. Directory
            failures yield an empty list.
        """
        text = strip_name_prefix(text)
        if not text:
            return []

        try:
            async with self.directory.session() as session:
                return await self._suggest(session, text, actor)
        except DirectoryError as e:
            self.logger.warning(
                "Cannot suggest users",
                query=text,
                error=str(e),
                exc_info=True,
            )
            return []

    async def _suggest(
        self, session: DirectorySession, text: str, actor: Actor
    ) -> list[GroupReference]:
        matches: list[GroupReference] = []
        seen: set[int] = set()

        # An existing account id wins over any prefix match
        account_id = GroupUUIDCodec.account_id_of(text)
        account = await session.get_by_id(account_id) if account_id is not None else None
        if account is not None:
            await self._add(matches, seen, actor, account)
        else:
            await self._suggest_by_prefix(session, text, actor, matches, seen)

        self.logger.debug("Suggested single-user groups", query=text, count=len(matches))
        return matches

    async def _suggest_by_prefix(
        self,
        session: DirectorySession,
        text: str,
        actor: Actor,
        matches: list[GroupReference],
        seen: set[int],
    ) -> None:
        upper = successor(text)
        for attribute in self._attributes_for(text):
            candidates = await session.query_by_attribute_range(
                attribute, text, upper, self.MAX
            )
            for account in candidates:
                if not any(v.startswith(text) for v in attribute_values(account, attribute)):
                    continue
                await self._add(matches, seen, actor, account)
                if len(matches) >= self.MAX:
                    return
        return matches

    @staticmethod
    def _attributes_for(text: str) -> list[AccountAttribute]:
        attributes = [
            AccountAttribute.FULL_NAME,
            AccountAttribute.PREFERRED_EMAIL,
            AccountAttribute.SECONDARY_EMAIL,
        ]
        if GroupUUIDCodec.is_username(text):
            attributes.insert(0, AccountAttribute.USERNAME)
        return attributes

    async def _add(
        self,
        matches: list[GroupReference],
        seen: set[int],
        actor: Actor,
        account: AccountRecord,
    ) -> None:
        if account.id in seen:
            return
        seen.add(account.id)
        if not await self.visibility.can_see(actor, account.id):
            return

        uuid = uuid_of(account)
        matches.append(GroupReference(uuid=uuid, name=name_of(uuid, account)))
