"""
MKE client configuration.
"""

from dataclasses import dataclass, field

_USER_AGENT = "mke-client-python/0.1.0"


@dataclass(frozen=True, kw_only=True)
class MKEClientConfig:
    """
    Attributes:
        endpoint: Base URL of the MKE API, with scheme (e.g. "https://my.mke.com").
        username: Account used to log in.
        password: Password for ``username``.
        unsafe_ssl: Skip TLS verification of the API server. Development only.
        timeout: Request timeout in seconds.
        user_agent: User-Agent header value.
    """

    endpoint: str
    username: str = ""
    password: str = field(default="", repr=False)
    unsafe_ssl: bool = False
    timeout: float = 30.0
    user_agent: str = _USER_AGENT

    def __post_init__(self) -> None:
        if not self.endpoint:
            msg = "endpoint is required"
            raise ValueError(msg)
        if not self.endpoint.startswith(("http://", "https://")):
            msg = "endpoint must include an http:// or https:// scheme"
            raise ValueError(msg)
        if self.timeout <= 0:
            msg = "timeout must be positive"
            raise ValueError(msg)
