"""Type definitions for Hiero keys."""

# Common types
from ..types.common import (
    HexStr,
    PemStr,
    DerBytes,
    PrivateKeyBytes,
    PublicKeyBytes,
    Signature,
    BytesLike,
)

# Format descriptors
from ..types.formats import (
    KeyAlgorithm,
    KeyType,
    RawFormat,
    KeyContainer,
    KeyEncoding,
    KeyFormat,
    ByteImportEncoding,
)

__all__ = [
    # Common
    "HexStr",
    "PemStr",
    "DerBytes",
    "PrivateKeyBytes",
    "PublicKeyBytes",
    "Signature",
    "BytesLike",

    # Formats
    "KeyAlgorithm",
    "KeyType",
    "RawFormat",
    "KeyContainer",
    "KeyEncoding",
    "KeyFormat",
    "ByteImportEncoding",
]
