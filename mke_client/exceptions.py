"""
MKE client exception hierarchy.

All exceptions inherit from MKEError for easy catching.
"""

from typing import Any


class MKEError(Exception):
    """Base exception for all mke_client errors."""

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        if self.context:
            ctx = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({ctx})"
        return self.message


class TransportError(MKEError):
    """Network-level error (connection refused, timeout, TLS failure)."""

    def __init__(self, message: str, *, request_debug: str = "") -> None:
        super().__init__(message)
        self.request_debug = request_debug

    def __str__(self) -> str:
        if self.request_debug:
            return f"{self.message}\nreq: {self.request_debug}"
        return self.message


class APIError(MKEError):
    """The API answered with an error status."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None,
        endpoint: str | None = None,
        body: str = "",
    ) -> None:
        super().__init__(message, status_code=status_code, endpoint=endpoint)
        self.status_code = status_code
        self.endpoint = endpoint
        self.body = body


class UnauthorizedError(APIError):
    """Missing or rejected bearer token."""

    def __init__(
        self,
        message: str = "Unauthorized",
        *,
        status_code: int | None = 401,
        endpoint: str | None = None,
        body: str = "",
    ) -> None:
        super().__init__(message, status_code=status_code, endpoint=endpoint, body=body)


class UnknownTargetError(APIError):
    """Target not found (404)."""

    def __init__(self, message: str, *, endpoint: str | None = None, body: str = "") -> None:
        super().__init__(message, status_code=404, endpoint=endpoint, body=body)


class ServerError(APIError):
    """Server-side error (500)."""

    def __init__(self, message: str, *, endpoint: str | None = None, body: str = "") -> None:
        super().__init__(message, status_code=500, endpoint=endpoint, body=body)


class ResponseError(APIError):
    """Any other error status, with the request rendered for trouble-shooting."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        endpoint: str | None = None,
        body: str = "",
        request_debug: str = "",
    ) -> None:
        super().__init__(message, status_code=status_code, endpoint=endpoint, body=body)
        self.request_debug = request_debug


class UnmarshalError(MKEError):
    """Response body did not decode into the expected shape."""


class EmptyInputError(MKEError):
    """A creation call was given a zero-value payload."""


class ClientBundleError(MKEError):
    """Client bundle decoding failed."""


class BundleArchiveError(ClientBundleError):
    """The bundle archive (or its nested archive) could not be read at all."""


class KubeConfigError(ClientBundleError):
    """The kube.yml entry is not a valid connection config document."""


class MetaDocumentError(ClientBundleError):
    """The meta.json entry is not a valid meta document."""


class ClientBundleRetrievalError(ClientBundleError):
    """One or more archive entries failed to decode."""

    def __init__(self, failures: list[tuple[str, Exception]]) -> None:
        details = ", ".join(f"{name}: {error}" for name, error in failures)
        super().__init__(f"failed to retrieve the client bundle from MKE; {details}")
        self.failures = failures


class PublicKeyNotFoundError(MKEError):
    """No account public key matches the client bundle's public key."""

    def __init__(self, *, searched: str, candidates: list[str]) -> None:
        listing = "\n".join(candidates)
        super().__init__(
            "no MKE public key was found that matches the client bundle; "
            f"could not match key:\n{searched}\nin\n{listing}"
        )
        self.searched = searched
        self.candidates = candidates
