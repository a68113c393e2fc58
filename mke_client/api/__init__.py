"""
MKE API client layer.

Provides synchronous HTTP communication with the MKE API.
"""

from mke_client.api.http_client import (
    Credentials,
    HttpClient,
    bearer_token_header_value,
    redact_body,
    redact_headers,
    request_debug,
)

__all__ = [
    "Credentials",
    "HttpClient",
    "bearer_token_header_value",
    "redact_body",
    "redact_headers",
    "request_debug",
]
