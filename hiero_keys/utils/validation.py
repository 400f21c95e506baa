"""Validation utilities for raw key material."""

from typing import Any

from ..constants import (
    ECDSA_COMPRESSED_PUBLIC_KEY_LENGTH,
    ECDSA_PRIVATE_KEY_LENGTH,
    ECDSA_UNCOMPRESSED_PUBLIC_KEY_LENGTH,
    SECP256K1_ORDER,
)
from ..exceptions import (
    InvalidKeyLengthError,
    InvalidPointError,
    InvalidScalarError,
    InvalidSignatureLengthError,
)
from ..types.common import BytesLike

__all__ = [
    "to_bytes",
    "require_length",
    "require_signature_length",
    "is_valid_private_scalar",
    "validate_private_scalar",
    "is_valid_public_point",
    "validate_public_point",
]


def to_bytes(value: BytesLike) -> bytes:
    """
    Copy caller supplied binary data into an immutable bytes object.

    Raises:
        TypeError: If value is not bytes-like
    """
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    raise TypeError(f"Expected bytes-like value, got {type(value).__name__}")


def require_length(data: BytesLike, length: int) -> bytes:
    """
    Copy data and check its length.

    Raises:
        InvalidKeyLengthError: If length does not match
    """
    data = to_bytes(data)
    if len(data) != length:
        raise InvalidKeyLengthError(length, len(data))
    return data


def require_signature_length(signature: BytesLike, length: int) -> bytes:
    """
    Copy signature and check its length.

    Raises:
        InvalidSignatureLengthError: If length does not match
    """
    signature = to_bytes(signature)
    if len(signature) != length:
        raise InvalidSignatureLengthError(length, len(signature))
    return signature


def is_valid_private_scalar(value: Any) -> bool:
    """
    Check if a secp256k1 private scalar is usable.

    Args:
        value: Scalar as int or 32 big-endian bytes

    Returns:
        True if 1 <= d < n
    """
    if isinstance(value, (bytes, bytearray, memoryview)):
        if len(value) != ECDSA_PRIVATE_KEY_LENGTH:
            return False
        value = int.from_bytes(bytes(value), "big")
    if not isinstance(value, int) or isinstance(value, bool):
        return False
    return 0 < value < SECP256K1_ORDER


def validate_private_scalar(key: BytesLike) -> bytes:
    """
    Validate secp256k1 private scalar and return it as bytes.

    Args:
        key: 32-byte big-endian scalar

    Returns:
        Private key as 32 bytes

    Raises:
        InvalidKeyLengthError: If key is not 32 bytes
        InvalidScalarError: If key is zero or not below the curve order
    """
    key = require_length(key, ECDSA_PRIVATE_KEY_LENGTH)

    key_int = int.from_bytes(key, "big")
    if key_int == 0:
        raise InvalidScalarError("Private key cannot be zero")
    if key_int >= SECP256K1_ORDER:
        raise InvalidScalarError("Private key exceeds curve order")

    return key


def is_valid_public_point(key: BytesLike) -> bool:
    """
    Check the length and prefix of a SEC1 encoded point.

    Does not check that the point lies on the curve.
    """
    if not isinstance(key, (bytes, bytearray, memoryview)):
        return False
    key = bytes(key)
    if len(key) == ECDSA_COMPRESSED_PUBLIC_KEY_LENGTH:
        # Compressed: must start with 0x02 or 0x03
        return key[0] in (0x02, 0x03)
    elif len(key) == ECDSA_UNCOMPRESSED_PUBLIC_KEY_LENGTH:
        # Uncompressed: must start with 0x04
        return key[0] == 0x04
    return False


def validate_public_point(key: BytesLike) -> bytes:
    """
    Validate SEC1 point encoding and return it as bytes.

    Args:
        key: 33-byte compressed or 65-byte uncompressed point

    Returns:
        Point bytes, unchanged

    Raises:
        InvalidKeyLengthError: If key is neither 33 nor 65 bytes
        InvalidPointError: If the prefix byte does not match the length
    """
    key = to_bytes(key)
    if len(key) not in (ECDSA_COMPRESSED_PUBLIC_KEY_LENGTH, ECDSA_UNCOMPRESSED_PUBLIC_KEY_LENGTH):
        raise InvalidKeyLengthError(
            (ECDSA_COMPRESSED_PUBLIC_KEY_LENGTH, ECDSA_UNCOMPRESSED_PUBLIC_KEY_LENGTH),
            len(key),
            f"ECDSA public key must be 33 or 65 bytes, got {len(key)}",
        )
    if not is_valid_public_point(key):
        raise InvalidPointError(f"Invalid SEC1 point prefix: {key[0]:#04x}")
    return key
