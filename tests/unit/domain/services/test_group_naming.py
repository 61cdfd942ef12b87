"""Unit tests for single-user group display names."""

from singleusergroup.domain.entities import AccountRecord
from singleusergroup.domain.services.group_naming import (
    ACCOUNT_PREFIX,
    NAME_PREFIX,
    name_of,
    strip_name_prefix,
    uuid_of,
)


def test_uuid_of_prefers_username():
    assert uuid_of(AccountRecord(id=1, username="admin")) == "user:admin"


def test_uuid_of_falls_back_to_account_id():
    assert uuid_of(AccountRecord(id=2, full_name="Ann B")) == "user:2"


def test_name_with_full_name_and_username():
    account = AccountRecord(id=1, username="admin", full_name="Ann Admin")
    assert name_of("user:admin", account) == "user/Ann Admin (admin)"


def test_name_with_full_name_only():
    account = AccountRecord(id=2, full_name="Ann B")
    assert name_of("user:2", account) == "userid/Ann B (2)"


def test_name_with_username_only():
    account = AccountRecord(id=3, username="bob")
    assert name_of("user:bob", account) == "user/bob"


def test_name_with_account_id_only():
    account = AccountRecord(id=123456)
    assert name_of("user:123456", account) == "userid/123456"


def test_empty_full_name_counts_as_absent():
    account = AccountRecord(id=3, username="bob", full_name="")
    assert name_of("user:bob", account) == "user/bob"


def test_marker_follows_requested_uuid_form():
    account = AccountRecord(id=1, username="admin", full_name="Ann Admin")
    assert name_of("user:1", account) == "userid/Ann Admin (admin)"
    assert name_of("user:admin", account) == "user/Ann Admin (admin)"


def test_strip_name_prefix():
    assert strip_name_prefix(NAME_PREFIX + "Ann Admin (admin)") == "Ann Admin (admin)"
    assert strip_name_prefix(ACCOUNT_PREFIX + "123456") == "123456"
    assert strip_name_prefix("Ann") == "Ann"
    assert strip_name_prefix("user/") == ""
    assert strip_name_prefix("userid/") == ""


def test_strip_name_prefix_only_strips_leading_marker():
    assert strip_name_prefix("ann user/x") == "ann user/x"
    assert strip_name_prefix("user/userid/7") == "userid/7"
