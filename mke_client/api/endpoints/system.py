"""System API endpoints."""

from mke_client.api.http_client import HttpClient

URL_TARGET_FOR_PING = "_ping"


def ping(http: HttpClient) -> None:
    """Check that the MKE API answers."""
    http.request("GET", URL_TARGET_FOR_PING, authorized=False)
