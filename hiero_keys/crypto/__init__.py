"""Key implementations and container codecs."""

from ..crypto.keys import Key, PrivateKey, PublicKey
from ..crypto.ed25519 import Ed25519PrivateKey, Ed25519PublicKey
from ..crypto.ecdsa import EcdsaPrivateKey, EcdsaPublicKey
from ..crypto.factory import (
    generate_private_key,
    create_private_key,
    create_public_key,
    private_key_from_pem,
    public_key_from_pem,
)

__all__ = [
    # Keys
    "Key",
    "PrivateKey",
    "PublicKey",
    "Ed25519PrivateKey",
    "Ed25519PublicKey",
    "EcdsaPrivateKey",
    "EcdsaPublicKey",

    # Factory
    "generate_private_key",
    "create_private_key",
    "create_public_key",
    "private_key_from_pem",
    "public_key_from_pem",
]
