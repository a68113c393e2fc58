import os
from collections.abc import Iterator

import pytest

from mke_client.client import MKEClient
from mke_client.config import MKEClientConfig

_ENV_VARS = ("MKE_TEST_ENDPOINT", "MKE_TEST_USERNAME", "MKE_TEST_PASSWORD")


def pytest_collection_modifyitems(config: pytest.Config, items: list) -> None:
    missing = not all(os.getenv(name) for name in _ENV_VARS)
    if not missing:
        return
    mark_expr = getattr(config.option, "markexpr", "")
    if "integration" in mark_expr:
        return
    skip = pytest.mark.skip(reason=f"{' / '.join(_ENV_VARS)} not set")
    for item in items:
        if item.get_closest_marker("integration"):
            item.add_marker(skip)


@pytest.fixture(scope="session")
def mke_config() -> MKEClientConfig:
    values = [os.getenv(name) for name in _ENV_VARS]
    if not all(values):
        pytest.fail(f"{', '.join(_ENV_VARS)} must be set to run integration tests.")
    endpoint, username, password = values
    return MKEClientConfig(
        endpoint=endpoint,
        username=username,
        password=password,
        unsafe_ssl=os.getenv("MKE_TEST_UNSAFE_SSL", "") == "1",
    )


@pytest.fixture(scope="module")
def authenticated_client(mke_config: MKEClientConfig) -> Iterator[MKEClient]:
    with MKEClient(mke_config) as client:
        client.login()
        yield client
