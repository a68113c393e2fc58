"""
MKE Python Client.

A Python client for the Mirantis Kubernetes Engine (MKE) API: login,
accounts, public keys, and client bundles decoded into structured data.

Example:
    ```python
    from mke_client import MKEClient, MKEClientConfig

    config = MKEClientConfig(
        endpoint="https://mke.example.com", username="admin", password="secret"
    )
    with MKEClient(config) as client:
        client.login()
        bundle = client.create_client_bundle("ci-runner")
        if bundle.kube is not None:
            print(bundle.kube.host)
        client.delete_client_bundle(bundle)
    ```
"""

from mke_client.client import MKEClient
from mke_client.config import MKEClientConfig
from mke_client.exceptions import (
    APIError,
    BundleArchiveError,
    ClientBundleError,
    ClientBundleRetrievalError,
    EmptyInputError,
    KubeConfigError,
    MetaDocumentError,
    MKEError,
    PublicKeyNotFoundError,
    ResponseError,
    ServerError,
    TransportError,
    UnauthorizedError,
    UnknownTargetError,
    UnmarshalError,
)
from mke_client.models import (
    Account,
    AccountFilter,
    AccountPublicKey,
    ClientBundle,
    ClientBundleKube,
    ClientBundleMeta,
    CreateAccount,
    StackOrchestrator,
    UpdateAccount,
)

__version__ = "0.1.0"

__all__ = [
    # Main client
    "MKEClient",
    "MKEClientConfig",
    # Models
    "Account",
    "AccountFilter",
    "AccountPublicKey",
    "ClientBundle",
    "ClientBundleKube",
    "ClientBundleMeta",
    "CreateAccount",
    "StackOrchestrator",
    "UpdateAccount",
    # Exceptions
    "MKEError",
    "TransportError",
    "APIError",
    "UnauthorizedError",
    "UnknownTargetError",
    "ServerError",
    "ResponseError",
    "UnmarshalError",
    "EmptyInputError",
    "ClientBundleError",
    "BundleArchiveError",
    "KubeConfigError",
    "MetaDocumentError",
    "ClientBundleRetrievalError",
    "PublicKeyNotFoundError",
]
