import pytest

from mke_client.exceptions import (
    APIError,
    ClientBundleRetrievalError,
    KubeConfigError,
    MetaDocumentError,
    MKEError,
    PublicKeyNotFoundError,
    ServerError,
    TransportError,
    UnauthorizedError,
    UnknownTargetError,
)


def test_mke_error_str_without_context() -> None:
    error = MKEError("Something failed")

    assert str(error) == "Something failed"


def test_mke_error_str_with_context() -> None:
    error = MKEError("Failed", account="myuser", attempt=3)

    assert "Failed" in str(error)
    assert "account='myuser'" in str(error)
    assert "attempt=3" in str(error)


@pytest.mark.parametrize(
    ("error", "status_code"),
    [
        (UnauthorizedError(), 401),
        (UnknownTargetError("gone"), 404),
        (ServerError("boom"), 500),
    ],
)
def test_dedicated_api_errors_carry_their_status(error: APIError, status_code: int) -> None:
    assert error.status_code == status_code
    assert isinstance(error, APIError)


def test_not_logged_in_unauthorized_has_no_status() -> None:
    error = UnauthorizedError("not logged in", status_code=None)

    assert error.status_code is None


def test_transport_error_includes_request_debug() -> None:
    error = TransportError("connection refused", request_debug='{"url": "https://mke.test"}')

    assert "connection refused" in str(error)
    assert "https://mke.test" in str(error)


def test_retrieval_error_concatenates_failures_in_order() -> None:
    error = ClientBundleRetrievalError(
        [
            ("kube.yml", KubeConfigError("bad yaml")),
            ("meta.json", MetaDocumentError("bad json")),
        ]
    )

    message = str(error)
    assert message.startswith("failed to retrieve the client bundle")
    assert message.index("kube.yml: bad yaml") < message.index("meta.json: bad json")
    assert [name for name, _ in error.failures] == ["kube.yml", "meta.json"]


def test_public_key_not_found_lists_candidates() -> None:
    error = PublicKeyNotFoundError(searched="C", candidates=["A", "B"])

    assert error.searched == "C"
    assert error.candidates == ["A", "B"]
    assert "A\nB" in str(error)
