"""Account API endpoints."""

from typing import Any

import structlog

from mke_client.api.http_client import HttpClient, response_json
from mke_client.exceptions import EmptyInputError, UnmarshalError
from mke_client.models.account import (
    Account,
    CreateAccount,
    UpdateAccount,
    api_form_of_filter,
)

logger = structlog.get_logger(__name__)

URL_TARGET_FOR_ACCOUNTS = "accounts"


def create_account(http: HttpClient, account: CreateAccount) -> Account:
    """
    Create an account.

    Args:
        http: Configured HTTP client.
        account: Account to create.

    Returns:
        The created account.

    Raises:
        EmptyInputError: If ``account`` is entirely empty. Nothing is sent.
    """
    if account.is_empty:
        msg = "creating account failed: empty input"
        raise EmptyInputError(msg, account=account)

    response = http.request("POST", URL_TARGET_FOR_ACCOUNTS, json=account.to_payload())
    return _parse_account(response_json(response))


def read_account(http: HttpClient, account_id: str) -> Account:
    """Get an account by ID or name."""
    response = http.request("GET", f"{URL_TARGET_FOR_ACCOUNTS}/{account_id}")
    return _parse_account(response_json(response))


def update_account(http: HttpClient, account_id: str, account: UpdateAccount) -> Account:
    """Update an account and return its new state."""
    response = http.request(
        "PATCH",
        f"{URL_TARGET_FOR_ACCOUNTS}/{account_id}",
        json=account.to_payload(),
    )
    return _parse_account(response_json(response))


def delete_account(http: HttpClient, account_id: str) -> None:
    """Delete an account."""
    http.request("DELETE", f"{URL_TARGET_FOR_ACCOUNTS}/{account_id}")


def list_accounts(http: HttpClient, account_filter: str | None = None) -> list[Account]:
    """
    List accounts.

    Args:
        http: Configured HTTP client.
        account_filter: An AccountFilter. Unrecognized values list all accounts.

    Returns:
        Accounts matching the filter.
    """
    api_filter = api_form_of_filter(account_filter)
    if api_filter != account_filter:
        logger.debug("Listing all accounts", requested_filter=account_filter)

    response = http.request("GET", URL_TARGET_FOR_ACCOUNTS, params={"filter": api_filter})
    data = response_json(response, URL_TARGET_FOR_ACCOUNTS)
    if not isinstance(data, dict):
        msg = "Account list response is not an object"
        raise UnmarshalError(msg, endpoint=URL_TARGET_FOR_ACCOUNTS)

    return [_parse_account(a) for a in data.get("accounts") or []]


def _parse_account(data: Any) -> Account:
    try:
        return Account(
            name=data["name"],
            id=data["id"],
            full_name=data.get("fullName", ""),
            is_active=data.get("isActive", False),
            is_admin=data.get("isAdmin", False),
            is_org=data.get("isOrg", False),
            is_imported=data.get("isImported", False),
            on_demand=data.get("onDemand", False),
            otp_enabled=data.get("otpEnabled", False),
            members_count=data.get("membersCount", 0),
            teams_count=data.get("teamsCount", 0),
        )
    except (KeyError, TypeError, AttributeError) as e:
        msg = f"Unexpected account shape: {e!r}"
        raise UnmarshalError(msg) from e
