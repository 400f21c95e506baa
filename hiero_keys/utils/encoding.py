"""Encoding and decoding utilities for Hiero keys."""

import base64
import binascii
import re
from typing import Union

from Crypto.Hash import keccak

from ..exceptions import InvalidEncodingError
from ..types.common import BytesLike, HexStr

__all__ = [
    "strip_hex_prefix",
    "hex_to_bytes",
    "bytes_to_hex",
    "base64_to_bytes",
    "bytes_to_base64",
    "int_to_bytes",
    "bytes_to_int",
    "keccak256",
]

# Characters ignored inside hex input
HEX_WHITESPACE = re.compile(r"[ \r\n]")
NON_HEX_CHAR = re.compile(r"[^0-9a-fA-F]")


def strip_hex_prefix(value: str) -> str:
    """Remove a leading 0x or 0X."""
    if value[:2] in ("0x", "0X"):
        return value[2:]
    return value


def hex_to_bytes(hex_str: Union[HexStr, str]) -> bytes:
    """
    Convert hex string to bytes.

    Spaces, carriage returns and line feeds are ignored. A 0x prefix is
    not stripped here; see strip_hex_prefix.

    Args:
        hex_str: Hex string

    Returns:
        Decoded bytes

    Raises:
        InvalidEncodingError: If hex string has odd length or a non-hex digit
    """
    cleaned = HEX_WHITESPACE.sub("", hex_str)
    if len(cleaned) % 2:
        raise InvalidEncodingError(
            f"Hex string has odd length: {len(cleaned)}",
            data=len(cleaned),
        )

    match = NON_HEX_CHAR.search(cleaned)
    if match:
        raise InvalidEncodingError(
            f"Invalid hex character {match.group()!r} at position {match.start()}",
            data=match.start(),
        )

    return bytes.fromhex(cleaned)


def bytes_to_hex(data: BytesLike, prefix: bool = False) -> HexStr:
    """
    Convert bytes to hex string.

    Args:
        data: Bytes to encode
        prefix: Add 0x prefix

    Returns:
        Lowercase hex string without separators
    """
    hex_str = bytes(data).hex()
    if prefix:
        hex_str = f"0x{hex_str}"
    return HexStr(hex_str)


def base64_to_bytes(value: str) -> bytes:
    """
    Decode standard (RFC 4648) base64 with padding.

    Raises:
        InvalidEncodingError: On characters outside the alphabet or bad padding
    """
    try:
        return base64.b64decode(value, validate=True)
    except (binascii.Error, ValueError) as e:
        raise InvalidEncodingError(f"Invalid base64 string: {e}") from e


def bytes_to_base64(data: BytesLike) -> str:
    """Encode bytes as standard base64 with padding."""
    return base64.b64encode(bytes(data)).decode("ascii")


def int_to_bytes(value: int, length: int) -> bytes:
    """
    Convert non-negative integer to fixed-width big-endian bytes.

    Shorter values are zero-padded on the left.
    """
    return value.to_bytes(length, byteorder="big")


def bytes_to_int(data: BytesLike) -> int:
    """Convert big-endian bytes to a non-negative integer."""
    return int.from_bytes(bytes(data), byteorder="big")


def keccak256(data: BytesLike) -> bytes:
    """
    Keccak-256 digest.

    This is the original Keccak padding, not the standardized SHA3-256.
    """
    return keccak.new(digest_bits=256, data=bytes(data)).digest()
