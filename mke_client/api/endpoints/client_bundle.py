"""Client bundle API endpoint."""

import structlog

from mke_client.api.http_client import HttpClient

logger = structlog.get_logger(__name__)

URL_TARGET_FOR_CLIENT_BUNDLE = "api/clientbundle"
URL_TARGET_FOR_CLIENT_BUNDLE_QUERY_LABEL = "label"


def download_client_bundle(http: HttpClient, label: str) -> tuple[bytes, int | None]:
    """
    Create a client bundle and download its archive.

    Each call registers a new public key for the logged in account.

    Args:
        http: Configured HTTP client.
        label: Label for the bundle's public key.

    Returns:
        The archive bytes and the declared content length (None if not sent,
        or if the body was sent content-encoded).
    """
    response = http.request(
        "POST",
        URL_TARGET_FOR_CLIENT_BUNDLE,
        content=b"",
        params={URL_TARGET_FOR_CLIENT_BUNDLE_QUERY_LABEL: label},
    )

    content_length = response.headers.get("Content-Length")
    if response.headers.get("Content-Encoding", "identity") != "identity":
        # Content-Length counts the encoded bytes, response.content is decoded.
        content_length = None
    size_hint = int(content_length) if content_length and content_length.isdigit() else None
    logger.debug("Client bundle downloaded", size=len(response.content), size_hint=size_hint)
    return response.content, size_hint
