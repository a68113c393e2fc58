"""
Domain models for the MKE client.
"""

from mke_client.models.account import (
    Account,
    AccountFilter,
    CreateAccount,
    UpdateAccount,
    api_form_of_filter,
)
from mke_client.models.client_bundle import (
    ClientBundle,
    ClientBundleKube,
    ClientBundleMeta,
    MetaEndpoint,
    StackOrchestrator,
)
from mke_client.models.public_key import AccountPublicKey

__all__ = [
    # Accounts
    "Account",
    "AccountFilter",
    "CreateAccount",
    "UpdateAccount",
    "api_form_of_filter",
    # Public keys
    "AccountPublicKey",
    # Client bundles
    "ClientBundle",
    "ClientBundleKube",
    "ClientBundleMeta",
    "MetaEndpoint",
    "StackOrchestrator",
]
