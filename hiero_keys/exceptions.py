"""Hiero keys exceptions hierarchy."""

from typing import Any, Optional

__all__ = [
    "HieroKeysError",
    "EncodingError",
    "InvalidEncodingError",
    "InvalidPemError",
    "InvalidDerError",
    "AlgorithmError",
    "UnsupportedAlgorithmError",
    "CurveMismatchError",
    "KeyMaterialError",
    "InvalidKeyLengthError",
    "InvalidPointError",
    "InvalidScalarError",
    "InvalidSignatureLengthError",
    "FormatError",
    "FormatTypeMismatchError",
    "RawFormatMismatchError",
]


class HieroKeysError(Exception):
    """Base exception for all key handling errors."""

    def __init__(
        self,
        message: str,
        code: Optional[int] = None,
        data: Optional[Any] = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.data = data

    def __str__(self) -> str:
        if self.code:
            return f"[{self.code}] {self.message}"
        return self.message


class EncodingError(HieroKeysError):
    """Raised when textual or binary input cannot be decoded."""
    pass


class InvalidEncodingError(EncodingError):
    """Raised when a hex, base64 or PEM body is malformed."""
    pass


class InvalidPemError(EncodingError):
    """Raised when PEM framing (header, footer, structure) is wrong."""
    pass


class InvalidDerError(EncodingError):
    """Raised when an ASN.1 DER structure is malformed."""
    pass


class AlgorithmError(HieroKeysError):
    """Raised when a container names an algorithm this library cannot handle."""
    pass


class UnsupportedAlgorithmError(AlgorithmError):
    """Raised for an unknown algorithm object identifier."""

    def __init__(self, oid: str, message: Optional[str] = None) -> None:
        if message is None:
            message = f"Unsupported algorithm OID: {oid}"
        super().__init__(message, data=oid)
        self.oid = oid


class CurveMismatchError(AlgorithmError):
    """Raised when EC domain parameters do not name secp256k1."""
    pass


class KeyMaterialError(HieroKeysError):
    """Raised when raw key material or a signature is unusable."""
    pass


class InvalidKeyLengthError(KeyMaterialError):
    """Raised when raw key material has the wrong length."""

    def __init__(
        self,
        expected: Any,
        actual: int,
        message: Optional[str] = None
    ) -> None:
        if message is None:
            message = f"Invalid key length: expected {expected} bytes, got {actual}"
        super().__init__(message, data={"expected": expected, "actual": actual})
        self.expected = expected
        self.actual = actual


class InvalidPointError(KeyMaterialError):
    """Raised when an encoded curve point is off-curve or has a bad prefix."""
    pass


class InvalidScalarError(KeyMaterialError):
    """Raised when a private scalar is outside [1, n)."""
    pass


class InvalidSignatureLengthError(KeyMaterialError):
    """Raised when a signature does not have the fixed wire length."""

    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(
            f"Invalid signature length: expected {expected} bytes, got {actual}",
            data={"expected": expected, "actual": actual},
        )
        self.expected = expected
        self.actual = actual


class FormatError(HieroKeysError):
    """Raised when a format descriptor is used incorrectly."""
    pass


class FormatTypeMismatchError(FormatError):
    """Raised when a container does not support the requested key type."""
    pass


class RawFormatMismatchError(FormatError):
    """Raised when a value is bytes where a string is expected, or vice versa."""
    pass
