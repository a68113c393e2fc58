"""
Account-related domain models.
"""

from dataclasses import dataclass, field, fields
from enum import StrEnum
from typing import Any


class AccountFilter(StrEnum):
    """Filters accepted by the account listing endpoint."""

    USERS = "users"
    ORGS = "orgs"
    ADMINS = "admins"
    NON_ADMINS = "non-admins"
    ACTIVE_USERS = "active-users"
    ALL = "all"


_API_FILTERS = frozenset(
    {
        AccountFilter.USERS,
        AccountFilter.ORGS,
        AccountFilter.ADMINS,
        AccountFilter.NON_ADMINS,
        AccountFilter.ACTIVE_USERS,
    }
)


def api_form_of_filter(account_filter: str | None) -> str:
    """
    Query parameter form of an account filter.

    Unrecognized values (including None) list everything rather than failing.

    Args:
        account_filter: Filter value, usually an AccountFilter.

    Returns:
        The filter string to send, "all" when not recognized.
    """
    if account_filter in _API_FILTERS:
        return str(account_filter)
    return AccountFilter.ALL.value


@dataclass(frozen=True, kw_only=True)
class CreateAccount:
    """
    Payload for creating an account.

    Attributes:
        name: Account name.
        id: Requested account ID (usually left empty).
        password: Write-only password.
        full_name: Display name.
        is_active: Whether the account is active.
        is_admin: Whether the account is an admin.
        is_org: Whether the account is an organization.
        search_ldap: Look the account up in LDAP on creation.
    """

    name: str = ""
    id: str = ""
    password: str = field(default="", repr=False)
    full_name: str = ""
    is_active: bool = False
    is_admin: bool = False
    is_org: bool = False
    search_ldap: bool = False

    @property
    def is_empty(self) -> bool:
        """Check if every field is at its zero value."""
        return all(not getattr(self, f.name) for f in fields(self))

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"name": self.name, "id": self.id, "password": self.password}
        if self.full_name:
            payload["fullName"] = self.full_name
        if self.is_active:
            payload["isActive"] = True
        if self.is_admin:
            payload["isAdmin"] = True
        if self.is_org:
            payload["isOrg"] = True
        if self.search_ldap:
            payload["searchLDAP"] = True
        return payload


@dataclass(frozen=True, kw_only=True)
class UpdateAccount:
    """Payload for updating an account. Empty/false fields are not sent."""

    full_name: str = ""
    is_active: bool = False
    is_admin: bool = False

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {}
        if self.full_name:
            payload["fullName"] = self.full_name
        if self.is_active:
            payload["isActive"] = True
        if self.is_admin:
            payload["isAdmin"] = True
        return payload


@dataclass(frozen=True, kw_only=True)
class Account:
    """
    Account as returned by the API.

    The flags and counters below ``is_org`` are read-only.
    """

    name: str
    id: str
    full_name: str = ""
    is_active: bool = False
    is_admin: bool = False
    is_org: bool = False
    is_imported: bool = False
    on_demand: bool = False
    otp_enabled: bool = False
    members_count: int = 0
    teams_count: int = 0
