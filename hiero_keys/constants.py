"""Constants for Hiero key handling."""

__all__ = [
    "ED25519_OID",
    "EC_PUBLIC_KEY_OID",
    "SECP256K1_OID",
    "ED25519_PRIVATE_KEY_LENGTH",
    "ED25519_PUBLIC_KEY_LENGTH",
    "ED25519_SIGNATURE_LENGTH",
    "ECDSA_PRIVATE_KEY_LENGTH",
    "ECDSA_COMPRESSED_PUBLIC_KEY_LENGTH",
    "ECDSA_UNCOMPRESSED_PUBLIC_KEY_LENGTH",
    "ECDSA_SIGNATURE_LENGTH",
    "SECP256K1_ORDER",
    "PEM_LINE_LENGTH",
    "PEM_PRIVATE_KEY_LABEL",
    "PEM_PUBLIC_KEY_LABEL",
]

# Object identifiers
ED25519_OID = "1.3.101.112"
"""id-Ed25519 (RFC 8410)."""

EC_PUBLIC_KEY_OID = "1.2.840.10045.2.1"
"""id-ecPublicKey (RFC 5480)."""

SECP256K1_OID = "1.3.132.0.10"
"""Named curve secp256k1 (SEC 2)."""

# Key material sizes in bytes
ED25519_PRIVATE_KEY_LENGTH = 32
ED25519_PUBLIC_KEY_LENGTH = 32
ED25519_SIGNATURE_LENGTH = 64

ECDSA_PRIVATE_KEY_LENGTH = 32
ECDSA_COMPRESSED_PUBLIC_KEY_LENGTH = 33
ECDSA_UNCOMPRESSED_PUBLIC_KEY_LENGTH = 65
ECDSA_SIGNATURE_LENGTH = 64

# secp256k1 group order
SECP256K1_ORDER = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141

# PEM framing
PEM_LINE_LENGTH = 64
PEM_PRIVATE_KEY_LABEL = "PRIVATE KEY"
PEM_PUBLIC_KEY_LABEL = "PUBLIC KEY"
