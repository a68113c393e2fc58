"""Account public key API endpoints."""

from mke_client.api.http_client import HttpClient, response_json
from mke_client.exceptions import UnmarshalError
from mke_client.models.public_key import AccountPublicKey

URL_TARGET_PATTERN_FOR_PUBLIC_KEYS = "accounts/{account}/publicKeys"
URL_TARGET_PATTERN_FOR_PUBLIC_KEY = "accounts/{account}/publicKeys/{key_id}"


def list_public_keys(http: HttpClient, account: str) -> list[AccountPublicKey]:
    """
    List the public keys of an account.

    Args:
        http: Configured HTTP client.
        account: Account name or ID.

    Returns:
        Keys in the order the API returned them.
    """
    target = URL_TARGET_PATTERN_FOR_PUBLIC_KEYS.format(account=account)
    data = response_json(http.request("GET", target), target)

    try:
        return [
            AccountPublicKey(
                id=k["id"],
                public_key=k.get("publicKey", ""),
                label=k.get("label", ""),
            )
            for k in data.get("accountPublicKeys") or []
        ]
    except (KeyError, TypeError, AttributeError) as e:
        msg = f"Unexpected public key list shape: {e!r}"
        raise UnmarshalError(msg, endpoint=target) from e


def delete_public_key(http: HttpClient, account: str, key_id: str) -> None:
    """Delete one public key of an account."""
    target = URL_TARGET_PATTERN_FOR_PUBLIC_KEY.format(account=account, key_id=key_id)
    http.request("DELETE", target)
