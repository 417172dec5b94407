"""Tests for credential validation."""

import pytest

from core.domain.models import ReturnCode
from core.domain.registry import ServerList
from core.services.credentials import CredentialStore


@pytest.fixture
def store():
    servers = ServerList()
    servers.add("Please select", "")
    servers.add("Andromeda", "s101.example")
    servers.add("Barym", "s102.example")
    return CredentialStore(servers)


class TestTextFields:
    @pytest.mark.parametrize("value", ["u", "commander", " spaced ", "ünïcode"])
    def test_non_empty_username_is_accepted(self, store, value):
        assert store.set_username(value) is ReturnCode.SUCCESS
        assert store.username == value

    @pytest.mark.parametrize("value", ["", None])
    def test_empty_username_is_refused_and_keeps_prior_value(self, store, value):
        store.set_username("first")

        assert store.set_username(value) is ReturnCode.REFUSED
        assert store.username == "first"

    @pytest.mark.parametrize("value", ["", None, 42])
    def test_password_refusal_keeps_prior_value(self, store, value):
        store.set_password("secret")

        assert store.set_password(value) is ReturnCode.REFUSED
        assert store.password == "secret"


class TestServerIndex:
    @pytest.mark.parametrize("index,expected", [
        (0, ReturnCode.REFUSED),
        (1, ReturnCode.SUCCESS),
        (2, ReturnCode.SUCCESS),
        (3, ReturnCode.REFUSED),
        (-1, ReturnCode.REFUSED),
        (None, ReturnCode.REFUSED),
        (True, ReturnCode.REFUSED),
    ])
    def test_only_open_range_is_accepted(self, store, index, expected):
        assert store.set_server(index) is expected

    def test_refused_index_keeps_prior_selection(self, store):
        store.set_server(2)
        store.set_server(3)

        assert store.server_index == 2


class TestSetCredentials:
    def test_all_valid_commits_all(self, store):
        assert store.set_credentials(1, "u", "p") is ReturnCode.SUCCESS
        assert (store.server_index, store.username, store.password) == (1, "u", "p")
        assert store.is_complete()

    @pytest.mark.parametrize("args", [
        (0, "u", "p"),
        (1, "", "p"),
        (1, "u", ""),
        (5, "u", None),
    ])
    def test_any_refusal_writes_nothing(self, store, args):
        assert store.set_credentials(*args) is ReturnCode.REFUSED
        assert store.username is None
        assert store.password is None
        assert store.server_index is None

    def test_refusal_does_not_overwrite_previous_credentials(self, store):
        store.set_credentials(2, "old", "old-pass")

        assert store.set_credentials(1, "new", "") is ReturnCode.REFUSED
        assert (store.server_index, store.username, store.password) == (2, "old", "old-pass")

    def test_clear_forgets_everything(self, store):
        store.set_credentials(1, "u", "p")
        store.clear()

        assert not store.is_complete()
        assert store.username is None

    def test_repr_hides_password(self, store):
        store.set_credentials(1, "u", "hunter2")

        assert "hunter2" not in repr(store)
