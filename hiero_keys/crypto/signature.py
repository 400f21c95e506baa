"""Signature encoding helpers for secp256k1 ECDSA.

The wire format is the fixed 64-byte r || s form. libsecp256k1 verifies DER,
so verification converts the wire form here.
"""

from typing import Tuple

from ..constants import ECDSA_SIGNATURE_LENGTH, SECP256K1_ORDER
from ..exceptions import InvalidSignatureLengthError
from ..types.common import BytesLike, Signature
from ..utils.encoding import bytes_to_int, int_to_bytes

__all__ = [
    "split_compact_signature",
    "join_compact_signature",
    "is_low_s",
    "normalize_s",
    "encode_der_signature",
]

HALF_ORDER = SECP256K1_ORDER // 2
SCALAR_LENGTH = ECDSA_SIGNATURE_LENGTH // 2


def split_compact_signature(signature: BytesLike) -> Tuple[int, int]:
    """
    Split a 64-byte r || s signature.

    Raises:
        InvalidSignatureLengthError: If signature is not 64 bytes
    """
    signature = bytes(signature)
    if len(signature) != ECDSA_SIGNATURE_LENGTH:
        raise InvalidSignatureLengthError(ECDSA_SIGNATURE_LENGTH, len(signature))
    return (
        bytes_to_int(signature[:SCALAR_LENGTH]),
        bytes_to_int(signature[SCALAR_LENGTH:]),
    )


def join_compact_signature(r: int, s: int) -> Signature:
    """Join r and s into 64 bytes, each big-endian and zero-padded to 32."""
    return Signature(int_to_bytes(r, SCALAR_LENGTH) + int_to_bytes(s, SCALAR_LENGTH))


def is_low_s(s: int) -> bool:
    return s <= HALF_ORDER


def normalize_s(s: int) -> int:
    """Map s to the lower half of the group order."""
    return s if is_low_s(s) else SECP256K1_ORDER - s


def _encode_der_integer(value: int) -> bytes:
    value_bytes = value.to_bytes(max(1, (value.bit_length() + 7) // 8), "big")
    if value_bytes[0] & 0x80:
        value_bytes = b"\x00" + value_bytes
    return b"\x02" + bytes([len(value_bytes)]) + value_bytes


def encode_der_signature(r: int, s: int) -> bytes:
    """
    Encode signature as DER.

    Args:
        r: Signature r value
        s: Signature s value

    Returns:
        DER-encoded ECDSA-Sig-Value
    """
    sequence = _encode_der_integer(r) + _encode_der_integer(s)
    return b"\x30" + bytes([len(sequence)]) + sequence

