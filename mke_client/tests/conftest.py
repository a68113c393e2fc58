from collections.abc import Iterator

import pytest

from mke_client.api.http_client import Credentials, HttpClient
from mke_client.config import MKEClientConfig
from mke_client.tests.utils.mock_server import MockServer

TEST_ENDPOINT = "https://mke.test"
TEST_USERNAME = "myuser"
TEST_PASSWORD = "mypassword"
TEST_TOKEN = "mytoken"


@pytest.fixture
def config() -> MKEClientConfig:
    return MKEClientConfig(endpoint=TEST_ENDPOINT, username=TEST_USERNAME, password=TEST_PASSWORD)


@pytest.fixture
def server_credentials() -> Credentials:
    return Credentials(username=TEST_USERNAME, password=TEST_PASSWORD, token=TEST_TOKEN)


@pytest.fixture
def mock_server(server_credentials: Credentials) -> MockServer:
    return MockServer(server_credentials)


@pytest.fixture
def http(config: MKEClientConfig, mock_server: MockServer) -> Iterator[HttpClient]:
    with HttpClient(config, transport=mock_server) as client:
        yield client


@pytest.fixture
def logged_in_http(http: HttpClient) -> HttpClient:
    http.set_token(TEST_TOKEN)
    return http
