import httpx
import pytest

from mke_client.api.endpoints.system import URL_TARGET_FOR_PING, ping
from mke_client.api.http_client import HttpClient
from mke_client.exceptions import ServerError
from mke_client.tests.utils.mock_server import MockServer, return_status


def test_ping_needs_no_login(http: HttpClient, mock_server: MockServer) -> None:
    mock_server.add_handler(
        "GET", URL_TARGET_FOR_PING, return_status(httpx.codes.OK), authorized=False
    )

    ping(http)

    assert mock_server.paths() == ["_ping"]


def test_ping_server_error(http: HttpClient, mock_server: MockServer) -> None:
    mock_server.add_handler(
        "GET",
        URL_TARGET_FOR_PING,
        return_status(httpx.codes.INTERNAL_SERVER_ERROR),
        authorized=False,
    )

    with pytest.raises(ServerError):
        ping(http)
