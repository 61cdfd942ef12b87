"""Unit tests for domain entities."""

import dataclasses

import pytest

from singleusergroup.domain.entities import MAX_ACCOUNT_ID, AccountRecord, Actor, GroupDescriptor


class TestAccountRecord:
    def test_optional_attributes_default_to_absent(self):
        account = AccountRecord(id=1)

        assert account.username is None
        assert account.full_name is None
        assert account.preferred_email is None
        assert account.secondary_emails == ()

    def test_requires_positive_id(self):
        with pytest.raises(ValueError, match="positive integer"):
            AccountRecord(id=0)

    def test_id_fits_in_64_bits(self):
        assert AccountRecord(id=MAX_ACCOUNT_ID).id == 2**63 - 1

        with pytest.raises(ValueError, match="must not exceed"):
            AccountRecord(id=MAX_ACCOUNT_ID + 1)

    def test_is_immutable(self):
        account = AccountRecord(id=1, username="admin")

        with pytest.raises(dataclasses.FrozenInstanceError):
            account.username = "root"


class TestActor:
    def test_identified(self):
        assert Actor(account_id=7).is_identified is True

    def test_anonymous(self):
        actor = Actor.anonymous()

        assert actor.is_identified is False
        assert actor.username is None


class TestGroupDescriptor:
    def test_defaults(self):
        group = GroupDescriptor(group_uuid="user:7", name="userid/7")

        assert group.email_address is None
        assert group.url is None
        assert group.is_visible_to_all() is False
