import pytest

from mke_client.models.account import (
    AccountFilter,
    CreateAccount,
    UpdateAccount,
    api_form_of_filter,
)


@pytest.mark.parametrize(
    "account_filter",
    [
        AccountFilter.USERS,
        AccountFilter.ORGS,
        AccountFilter.ADMINS,
        AccountFilter.NON_ADMINS,
        AccountFilter.ACTIVE_USERS,
    ],
)
def test_api_form_of_known_filter_is_itself(account_filter: AccountFilter) -> None:
    assert api_form_of_filter(account_filter) == account_filter.value


def test_api_form_accepts_plain_strings() -> None:
    assert api_form_of_filter("admins") == "admins"


@pytest.mark.parametrize("account_filter", ["bogus", "user", "inactive-users", "", None, "all"])
def test_api_form_of_unknown_filter_is_all(account_filter: str | None) -> None:
    assert api_form_of_filter(account_filter) == "all"


def test_create_account_empty() -> None:
    assert CreateAccount().is_empty
    assert not CreateAccount(name="testuser").is_empty
    assert not CreateAccount(is_org=True).is_empty


def test_create_account_payload_omits_empty_optionals() -> None:
    payload = CreateAccount(name="testuser", password="secret").to_payload()

    assert payload == {"name": "testuser", "id": "", "password": "secret"}


def test_create_account_payload_uses_api_keys() -> None:
    payload = CreateAccount(
        name="testuser",
        full_name="Test User",
        is_active=True,
        is_admin=True,
        is_org=True,
        search_ldap=True,
    ).to_payload()

    assert payload["fullName"] == "Test User"
    assert payload["isActive"] is True
    assert payload["isAdmin"] is True
    assert payload["isOrg"] is True
    assert payload["searchLDAP"] is True


def test_update_account_payload() -> None:
    assert UpdateAccount().to_payload() == {}
    assert UpdateAccount(full_name="New Name", is_admin=True).to_payload() == {
        "fullName": "New Name",
        "isAdmin": True,
    }
