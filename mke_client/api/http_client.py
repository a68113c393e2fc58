"""
HTTP client for the MKE API.

Builds requests against the configured endpoint, attaches the bearer token,
and classifies error statuses into the mke_client exception taxonomy.
"""

import json as jsonlib
from dataclasses import dataclass, field
from http import HTTPStatus
from typing import Any, Self

import httpx
import structlog

from mke_client.config import MKEClientConfig
from mke_client.exceptions import (
    ResponseError,
    ServerError,
    TransportError,
    UnauthorizedError,
    UnknownTargetError,
    UnmarshalError,
)

logger = structlog.get_logger(__name__)

SENSITIVE_HEADERS = frozenset({"authorization", "cookie", "set-cookie"})
SENSITIVE_KEYS = frozenset({"password", "auth_token", "token", "private_key"})


def redact_headers(headers: httpx.Headers) -> dict[str, str]:
    """Request headers with credentials and cookies masked."""
    return {
        name: "***" if name.lower() in SENSITIVE_HEADERS else value
        for name, value in headers.items()
    }


def redact_body(value: Any) -> Any:
    """
    Mask secret fields of a decoded JSON body, at any depth.

    Args:
        value: Decoded JSON value.

    Returns:
        Copy with the values of sensitive keys replaced by "***".
    """
    if isinstance(value, dict):
        return {
            key: "***" if str(key).lower() in SENSITIVE_KEYS else redact_body(item)
            for key, item in value.items()
        }
    if isinstance(value, list):
        return [redact_body(item) for item in value]
    return value


def request_debug(request: httpx.Request) -> str:
    """Render a request's headers and body as JSON for trouble-shooting."""
    try:
        body = request.content.decode("utf-8", errors="replace")
    except httpx.RequestNotRead:
        body = ""
    try:
        body_data = jsonlib.loads(body) if body else body
    except ValueError:
        body_data = body

    rendered = {
        "method": request.method,
        "url": str(request.url),
        "headers": redact_headers(request.headers),
        "body": redact_body(body_data),
    }
    return jsonlib.dumps(rendered, indent=2, default=str)


def response_json(response: httpx.Response, endpoint: str | None = None) -> Any:
    """
    Decode a response body as JSON.

    Raises:
        UnmarshalError: If the body is not valid JSON.
    """
    try:
        return response.json()
    except ValueError as e:
        msg = "Invalid JSON response from API"
        raise UnmarshalError(msg, endpoint=endpoint) from e


def bearer_token_header_value(token: str) -> str:
    """Authorization header value for a bearer token."""
    return f"Bearer {token}"


@dataclass(kw_only=True)
class Credentials:
    """
    Username/password and the bearer token obtained from them.

    One instance is owned by each HttpClient and shared by every request it
    sends. ``token`` is written only by AuthService.login(). No locking is
    done: callers sharing a client across threads must serialize logins.
    """

    username: str
    password: str = field(repr=False)
    token: str = field(default="", repr=False)


class HttpClient:
    """Synchronous HTTP client for the MKE API."""

    def __init__(
        self,
        config: MKEClientConfig,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """
        Args:
            config: Client configuration.
            transport: Optional transport for testing (mock transport).
        """
        self._config = config
        self._transport = transport
        self._client: httpx.Client | None = None
        self.credentials = Credentials(username=config.username, password=config.password)

    def __enter__(self) -> Self:
        self._ensure_client()
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def _ensure_client(self) -> httpx.Client:
        if self._client is None:
            self._client = httpx.Client(
                base_url=self._config.endpoint,
                timeout=self._config.timeout,
                transport=self._transport,
                verify=not self._config.unsafe_ssl,
                headers={"User-Agent": self._config.user_agent},
            )
        return self._client

    def close(self) -> None:
        """Close the underlying HTTP client."""
        if self._client is None:
            logger.debug("Client not open.")
            return
        self._client.close()
        self._client = None

    @property
    def username(self) -> str:
        return self.credentials.username

    @property
    def is_authenticated(self) -> bool:
        """Check if a bearer token is held."""
        return bool(self.credentials.token)

    def set_token(self, token: str) -> None:
        """
        Store the bearer token, replacing any previous one.

        Note:
            Internal use only. Called by AuthService after a successful login.
        """
        self.credentials.token = token

    def clear_token(self) -> None:
        """Forget the bearer token."""
        self.credentials.token = ""

    def build_request(
        self,
        method: str,
        target: str,
        *,
        content: bytes | None = None,
        json: Any = None,
        params: dict[str, Any] | None = None,
    ) -> httpx.Request:
        """
        Build a request against the configured endpoint.

        Args:
            method: HTTP method (GET, POST, etc.).
            target: API target relative to the endpoint (e.g. "accounts").
            content: Raw request body.
            json: Value serialized as a JSON body; sets the JSON content type.
            params: Query parameters.

        Returns:
            The unsent request.
        """
        if content is not None and json is not None:
            msg = "Pass either content or json, not both"
            raise ValueError(msg)
        client = self._ensure_client()
        return client.build_request(
            method,
            target.lstrip("/"),
            content=content,
            json=json,
            params=params,
        )

    def send(self, request: httpx.Request, *, authorized: bool = True) -> httpx.Response:
        """
        Send a request and classify the response.

        Args:
            request: Request built with build_request().
            authorized: Whether to attach the bearer token. An authorized
                request without a token fails before anything is sent.

        Returns:
            The response, its status below 400.

        Raises:
            UnauthorizedError: No token held, or the API answered 401.
            UnknownTargetError: The API answered 404.
            ServerError: The API answered 500.
            ResponseError: The API answered any other error status.
            TransportError: The request could not be completed.
        """
        endpoint = request.url.path
        if authorized:
            if not self.credentials.token:
                msg = "Unauthorized: not logged in"
                raise UnauthorizedError(msg, status_code=None, endpoint=endpoint)
            request.headers["Authorization"] = bearer_token_header_value(self.credentials.token)

        client = self._ensure_client()
        logger.debug("Sending request", method=request.method, endpoint=endpoint)
        try:
            response = client.send(request)
        except httpx.TransportError as e:
            msg = f"Error occurred in http request: {e}"
            raise TransportError(msg, request_debug=request_debug(request)) from e

        logger.debug("Received response", endpoint=endpoint, status=response.status_code)
        if response.status_code >= HTTPStatus.BAD_REQUEST:
            self._raise_for_status(response, request)
        return response

    def request(
        self,
        method: str,
        target: str,
        *,
        content: bytes | None = None,
        json: Any = None,
        params: dict[str, Any] | None = None,
        authorized: bool = True,
    ) -> httpx.Response:
        """Build and send a request in one step. See build_request() and send()."""
        request = self.build_request(method, target, content=content, json=json, params=params)
        return self.send(request, authorized=authorized)

    @staticmethod
    def _raise_for_status(response: httpx.Response, request: httpx.Request) -> None:
        status = response.status_code
        body = response.text
        endpoint = request.url.path

        if status == HTTPStatus.UNAUTHORIZED:
            msg = f"Unauthorized: {status} : {body}"
            raise UnauthorizedError(msg, endpoint=endpoint, body=body)
        if status == HTTPStatus.NOT_FOUND:
            msg = f"Not Found: {status} : {body}"
            raise UnknownTargetError(msg, endpoint=endpoint, body=body)
        if status == HTTPStatus.INTERNAL_SERVER_ERROR:
            msg = f"Server Error: {status} : {body}"
            raise ServerError(msg, endpoint=endpoint, body=body)

        msg = f"Status code: {status} : {body}"
        raise ResponseError(
            msg,
            status_code=status,
            endpoint=endpoint,
            body=body,
            request_debug=request_debug(request),
        )
