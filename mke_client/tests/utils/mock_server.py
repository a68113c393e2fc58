"""
In-process stand-in for the MKE API.

Handlers are registered per method/path. When credentials are given, the
login target answers with their token, and handlers registered with
authorized=True (the default) require it as a bearer token.

    server = MockServer(credentials)
    server.add_handler("GET", "accounts/myuser", return_json({"name": "myuser", "id": "1"}))
    http = HttpClient(config, transport=server)
"""

import json
from collections.abc import Callable
from typing import Any

import httpx

from mke_client.api.endpoints.auth import URL_TARGET_FOR_AUTH
from mke_client.api.http_client import Credentials, bearer_token_header_value

Handler = Callable[[httpx.Request], httpx.Response]


def return_status(status_code: int) -> Handler:
    def _handle(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code)

    return _handle


def return_bytes(content: bytes, status_code: int = httpx.codes.OK) -> Handler:
    def _handle(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, content=content)

    return _handle


def return_json(data: Any, status_code: int = httpx.codes.OK) -> Handler:
    def _handle(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, content=json.dumps(data).encode())

    return _handle


def login_handler(credentials: Credentials) -> Handler:
    """Check username/password from the body and answer with the token."""

    def _handle(request: httpx.Request) -> httpx.Response:
        try:
            body = json.loads(request.content)
        except ValueError:
            return httpx.Response(httpx.codes.NOT_ACCEPTABLE)

        if body.get("username") != credentials.username or (
            body.get("password") != credentials.password
        ):
            return httpx.Response(httpx.codes.UNAUTHORIZED, content=b'{"message": "bad login"}')
        return httpx.Response(
            httpx.codes.OK, content=json.dumps({"auth_token": credentials.token}).encode()
        )

    return _handle


class MockServer(httpx.BaseTransport):
    """Routes requests to registered handlers; unknown targets answer 404."""

    def __init__(self, credentials: Credentials | None = None) -> None:
        self._credentials = credentials
        self._handlers: list[tuple[str, str, Handler, bool]] = []
        self.requests: list[httpx.Request] = []

        if credentials is not None:
            self.add_handler(
                "POST", URL_TARGET_FOR_AUTH, login_handler(credentials), authorized=False
            )

    def add_handler(
        self, method: str, path: str, handler: Handler, *, authorized: bool = True
    ) -> None:
        self._handlers.append((method, path, handler, authorized))

    def handle_request(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path.lstrip("/")

        for method, handler_path, handler, authorized in self._handlers:
            if method != request.method or handler_path != path:
                continue
            if authorized and not self._has_token(request):
                return httpx.Response(httpx.codes.UNAUTHORIZED, content=b"bad token")
            return handler(request)

        return httpx.Response(httpx.codes.NOT_FOUND, content=b"no such target")

    def paths(self) -> list[str]:
        """Paths of the requests received so far, in order."""
        return [r.url.path.lstrip("/") for r in self.requests]

    def _has_token(self, request: httpx.Request) -> bool:
        if self._credentials is None:
            return True
        expected = bearer_token_header_value(self._credentials.token)
        return request.headers.get("Authorization") == expected
