"""
MKE client facade.

This is the main entry point for users of the library. It wires the HTTP
client and services together behind one object.
"""

from typing import Self

import httpx
import structlog

from mke_client.api.endpoints import accounts, public_keys, system
from mke_client.api.http_client import HttpClient
from mke_client.config import MKEClientConfig
from mke_client.models.account import Account, CreateAccount, UpdateAccount
from mke_client.models.client_bundle import ClientBundle
from mke_client.models.public_key import AccountPublicKey
from mke_client.services.auth_service import AuthService
from mke_client.services.bundle_service import ClientBundleService

logger = structlog.get_logger(__name__)


class MKEClient:
    """
    Client for the MKE API.

    Example:
        ```python
        config = MKEClientConfig(
            endpoint="https://mke.example.com", username="admin", password="secret"
        )
        with MKEClient(config) as client:
            client.login()
            bundle = client.create_client_bundle("ci-runner")
            print(bundle.id, bundle.meta.docker_host)
        ```

    Not thread-safe: one instance shares a single token between all calls.
    """

    def __init__(
        self,
        config: MKEClientConfig,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """
        Args:
            config: Client configuration.
            transport: Optional httpx transport for testing.
        """
        self._config = config
        self._http = HttpClient(config, transport=transport)
        self._auth_service = AuthService(self._http)
        self._bundle_service = ClientBundleService(self._http)

    def __enter__(self) -> Self:
        return self

    def __exit__(self, exc_type: type | None, exc_val: BaseException | None, exc_tb: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the client and release resources."""
        self._http.close()
        logger.debug("Client closed")

    @property
    def username(self) -> str:
        return self._http.username

    @property
    def is_authenticated(self) -> bool:
        """Check if logged in."""
        return self._auth_service.is_authenticated

    def login(self) -> None:
        """
        Log in with the configured username and password.

        Raises:
            UnauthorizedError: If the credentials are rejected.
        """
        self._auth_service.login()

    def logout(self) -> None:
        """Forget the token."""
        self._auth_service.logout()

    def ping(self) -> None:
        """Check that the API answers."""
        system.ping(self._http)

    def create_account(self, account: CreateAccount) -> Account:
        """
        Create an account.

        Raises:
            EmptyInputError: If ``account`` is entirely empty.
        """
        return accounts.create_account(self._http, account)

    def read_account(self, account_id: str) -> Account:
        """Get an account by ID or name."""
        return accounts.read_account(self._http, account_id)

    def update_account(self, account_id: str, account: UpdateAccount) -> Account:
        """Update an account."""
        return accounts.update_account(self._http, account_id, account)

    def delete_account(self, account_id: str) -> None:
        """Delete an account."""
        accounts.delete_account(self._http, account_id)

    def list_accounts(self, account_filter: str | None = None) -> list[Account]:
        """List accounts. Unrecognized filters list everything."""
        return accounts.list_accounts(self._http, account_filter)

    def list_public_keys(self, account: str | None = None) -> list[AccountPublicKey]:
        """List public keys of an account, the logged in one by default."""
        return public_keys.list_public_keys(self._http, account or self.username)

    def delete_public_key(self, key_id: str, account: str | None = None) -> None:
        """Delete a public key of an account, the logged in one by default."""
        public_keys.delete_public_key(self._http, account or self.username, key_id)

    def create_client_bundle(self, label: str) -> ClientBundle:
        """
        Create and decode a client bundle.

        Raises:
            BundleArchiveError: If the archive cannot be read.
            ClientBundleRetrievalError: If entries failed to decode.
        """
        return self._bundle_service.create(label)

    def get_client_bundle_public_key(self, bundle: ClientBundle) -> AccountPublicKey:
        """
        Find the public key a bundle registered.

        Raises:
            PublicKeyNotFoundError: If no key matches.
        """
        return self._bundle_service.find_public_key(bundle)

    def delete_client_bundle(self, bundle: ClientBundle) -> None:
        """
        Delete a bundle by deleting its public key.

        Raises:
            PublicKeyNotFoundError: If no key matches.
        """
        self._bundle_service.delete(bundle)
