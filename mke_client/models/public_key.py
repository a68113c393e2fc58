"""
Account public key model.
"""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class AccountPublicKey:
    """
    A public key registered for an account.

    Every client bundle registers one; it is the only server-side trace of the
    bundle, so deleting the key is how a bundle is deleted.

    Attributes:
        id: Key ID.
        public_key: PEM-encoded public key.
        label: Label given when the bundle was created.
    """

    id: str
    public_key: str
    label: str = ""
