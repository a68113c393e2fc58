"""
Client bundle service.

Creates client bundles, and maps a bundle held locally back to the account
public key it registered. MKE has no bundle read or delete endpoint: the
public key is the bundle's only server-side identity.
"""

import structlog

from mke_client.api.endpoints.client_bundle import download_client_bundle
from mke_client.api.endpoints.public_keys import delete_public_key, list_public_keys
from mke_client.api.http_client import HttpClient
from mke_client.codec.client_bundle import decode_client_bundle
from mke_client.exceptions import PublicKeyNotFoundError
from mke_client.models.client_bundle import ClientBundle
from mke_client.models.public_key import AccountPublicKey

logger = structlog.get_logger(__name__)


class ClientBundleService:
    """Client bundle lifecycle for the logged in account."""

    def __init__(self, http: HttpClient) -> None:
        """
        Args:
            http: HTTP client, logged in.
        """
        self._http = http

    def create(self, label: str) -> ClientBundle:
        """
        Create a client bundle and decode it.

        Args:
            label: Label for the bundle's public key.

        Returns:
            The decoded bundle.

        Raises:
            BundleArchiveError: If the downloaded archive cannot be read.
            ClientBundleRetrievalError: If entries of the archive failed to decode.
        """
        data, size_hint = download_client_bundle(self._http, label)
        bundle = decode_client_bundle(data, size_hint=size_hint)
        logger.info("Client bundle created", bundle_id=bundle.id, label=label)
        return bundle

    def find_public_key(self, bundle: ClientBundle) -> AccountPublicKey:
        """
        Find the account public key registered for a bundle.

        Keys are compared with surrounding whitespace trimmed; the first
        match in API order wins.

        Args:
            bundle: Bundle held locally.

        Returns:
            The matching key.

        Raises:
            PublicKeyNotFoundError: If no key matches.
        """
        searched = bundle.public_key.strip()
        candidates = []

        for key in list_public_keys(self._http, self._http.username):
            candidate = key.public_key.strip()
            if candidate == searched:
                return key
            candidates.append(candidate)

        raise PublicKeyNotFoundError(searched=bundle.public_key, candidates=candidates)

    def delete(self, bundle: ClientBundle) -> None:
        """
        Delete a bundle by deleting its public key.

        Raises:
            PublicKeyNotFoundError: If no key matches the bundle.
        """
        key = self.find_public_key(bundle)
        delete_public_key(self._http, self._http.username, key.id)
        logger.info("Client bundle deleted", bundle_id=bundle.id, key_id=key.id)
