"""
Business logic services for the MKE client.
"""

from mke_client.services.auth_service import AuthService
from mke_client.services.bundle_service import ClientBundleService

__all__ = [
    "AuthService",
    "ClientBundleService",
]
