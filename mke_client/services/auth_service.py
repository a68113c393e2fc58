"""
Authentication service for the MKE client.

Handles login and the bearer token it produces.
"""

import structlog

from mke_client.api.endpoints.auth import login
from mke_client.api.http_client import HttpClient
from mke_client.exceptions import UnauthorizedError

logger = structlog.get_logger(__name__)


class AuthService:
    """
    Handles MKE authentication.

    The token lives in the HttpClient's Credentials; this service is the only
    code that writes it.

    Concurrency:
    - No locking. Two logins racing on one client both write the token and
      the last one wins; callers sharing a client must serialize logins.
    """

    def __init__(self, http_client: HttpClient) -> None:
        """
        Args:
            http_client: HTTP client whose credentials are used and updated.
        """
        self._http = http_client

    @property
    def is_authenticated(self) -> bool:
        """Check if a token is held."""
        return self._http.is_authenticated

    def login(self) -> None:
        """
        Log in with the client's username and password and store the token.

        Any previously held token is replaced.

        Raises:
            UnauthorizedError: If the credentials are rejected.
            UnmarshalError: If the response carries no token.
            APIError: For any other error status.
            TransportError: If the API cannot be reached.
        """
        credentials = self._http.credentials
        logger.info("Logging in", username=credentials.username)

        try:
            token = login(self._http, credentials.username, credentials.password)
        except UnauthorizedError:
            logger.error("Login rejected", username=credentials.username)
            raise

        self._http.set_token(token)
        logger.info("Login successful", username=credentials.username)

    def logout(self) -> None:
        """Forget the token locally. Later authorized calls need a new login()."""
        self._http.clear_token()
