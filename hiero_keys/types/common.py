"""Common type definitions for Hiero keys."""

from typing import NewType, Union

__all__ = [
    "HexStr",
    "PemStr",
    "DerBytes",
    "PrivateKeyBytes",
    "PublicKeyBytes",
    "Signature",
    "BytesLike",
]

# Textual forms
HexStr = NewType("HexStr", str)
"""Hexadecimal string representation."""

PemStr = NewType("PemStr", str)
"""PEM framed, base64 encoded DER."""

# Binary forms
DerBytes = NewType("DerBytes", bytes)
"""DER encoded ASN.1 structure."""

PrivateKeyBytes = NewType("PrivateKeyBytes", bytes)
"""32-byte Ed25519 seed or secp256k1 scalar."""

PublicKeyBytes = NewType("PublicKeyBytes", bytes)
"""32-byte Ed25519 point or 33-byte compressed secp256k1 point."""

Signature = NewType("Signature", bytes)
"""64-byte signature (r || s for ECDSA)."""

# Type aliases
BytesLike = Union[bytes, bytearray, memoryview]
"""Binary input accepted from callers; always copied on ingress."""
