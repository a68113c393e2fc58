"""Authentication API endpoint."""

from mke_client.api.http_client import HttpClient, response_json
from mke_client.exceptions import UnmarshalError

URL_TARGET_FOR_AUTH = "auth/login"


def login(http: HttpClient, username: str, password: str) -> str:
    """
    Exchange username/password for a bearer token.

    Args:
        http: Configured HTTP client.
        username: MKE account name.
        password: Account password.

    Returns:
        The bearer token.

    Raises:
        UnmarshalError: If the response carries no token.
    """
    response = http.request(
        "POST",
        URL_TARGET_FOR_AUTH,
        json={"username": username, "password": password},
        authorized=False,
    )
    data = response_json(response, URL_TARGET_FOR_AUTH)

    token = data.get("auth_token") if isinstance(data, dict) else None
    if not isinstance(token, str) or not token:
        msg = "Login response has no auth_token"
        raise UnmarshalError(msg, endpoint=URL_TARGET_FOR_AUTH)
    return token
