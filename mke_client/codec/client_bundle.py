"""
Client bundle archive decoding.

A client bundle archive holds the account's PEM material, an optional
kube.yml, and a nested docker bundle zip whose meta.json names the bundle.
"""

from dataclasses import replace

import structlog

from mke_client.codec.archive import ArchiveOutcome, EntryHandler, walk_archive
from mke_client.codec.kubeconfig import decode_kube_config
from mke_client.codec.meta import decode_meta
from mke_client.exceptions import BundleArchiveError
from mke_client.models.client_bundle import ClientBundle

logger = structlog.get_logger(__name__)

FILENAME_CA_PEM = "ca.pem"
FILENAME_CERT_PEM = "cert.pem"
FILENAME_PRIVATE_KEY_PEM = "key.pem"
FILENAME_PUBLIC_KEY_PEM = "cert.pub"
FILENAME_KUBECONFIG = "kube.yml"
FILENAME_DOCKER_BUNDLE_ZIP = "ucp-docker-bundle.zip"
FILENAME_DOCKER_BUNDLE_META = "meta.json"


def _text_setter(bundle: ClientBundle, attribute: str) -> EntryHandler:
    def _set(payload: bytes) -> None:
        setattr(bundle, attribute, payload.decode("utf-8"))

    return _set


def decode_client_bundle(data: bytes, *, size_hint: int | None = None) -> ClientBundle:
    """
    Decode a client bundle archive.

    Every known entry is attempted even when an earlier one fails. Entries
    missing from the archive leave their fields empty and are not errors.

    Args:
        data: Archive bytes as downloaded.
        size_hint: Declared archive size (the response content length).

    Returns:
        The decoded bundle.

    Raises:
        BundleArchiveError: If the archive or the nested docker bundle cannot
            be opened, or no bundle ID could be determined.
        ClientBundleRetrievalError: If one or more entries failed to decode.
    """
    bundle = ClientBundle()
    outcome = ArchiveOutcome()

    def _set_kube(payload: bytes) -> None:
        bundle.kube = decode_kube_config(payload.decode("utf-8"))

    def _set_meta(payload: bytes) -> None:
        bundle.meta = decode_meta(payload)

    def _walk_docker_bundle(payload: bytes) -> None:
        walk_archive(payload, {FILENAME_DOCKER_BUNDLE_META: _set_meta}, outcome)

    handlers: dict[str, EntryHandler] = {
        FILENAME_CA_PEM: _text_setter(bundle, "ca_cert"),
        FILENAME_CERT_PEM: _text_setter(bundle, "cert"),
        FILENAME_PRIVATE_KEY_PEM: _text_setter(bundle, "private_key"),
        FILENAME_PUBLIC_KEY_PEM: _text_setter(bundle, "public_key"),
        FILENAME_KUBECONFIG: _set_kube,
        FILENAME_DOCKER_BUNDLE_ZIP: _walk_docker_bundle,
    }

    bundle.id = walk_archive(data, handlers, outcome, size_hint=size_hint)
    outcome.raise_for_failures()

    if bundle.meta.name:
        bundle.id = bundle.meta.name
    if bundle.kube is not None:
        bundle.kube = replace(bundle.kube, insecure=bundle.meta.kubernetes_skip_verify_tls)

    if not bundle.id:
        msg = "Client bundle archive carries no bundle ID"
        raise BundleArchiveError(msg)

    logger.debug("Client bundle decoded", bundle_id=bundle.id, has_kube=bundle.kube is not None)
    return bundle
