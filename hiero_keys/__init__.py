"""
Hiero Keys Python Library

Ed25519 and ECDSA (secp256k1) keys with PKCS#8 / SPKI containers in DER or
PEM, plus raw byte, hex and base64 import.
"""

from .exceptions import (
    HieroKeysError,
    EncodingError,
    InvalidEncodingError,
    InvalidPemError,
    InvalidDerError,
    AlgorithmError,
    UnsupportedAlgorithmError,
    CurveMismatchError,
    KeyMaterialError,
    InvalidKeyLengthError,
    InvalidPointError,
    InvalidScalarError,
    InvalidSignatureLengthError,
    FormatError,
    FormatTypeMismatchError,
    RawFormatMismatchError,
)
from .types import (
    KeyAlgorithm,
    KeyType,
    RawFormat,
    KeyContainer,
    KeyEncoding,
    KeyFormat,
    ByteImportEncoding,
)
from .crypto import (
    Key,
    PrivateKey,
    PublicKey,
    Ed25519PrivateKey,
    Ed25519PublicKey,
    EcdsaPrivateKey,
    EcdsaPublicKey,
    generate_private_key,
    create_private_key,
    create_public_key,
    private_key_from_pem,
    public_key_from_pem,
)

__version__ = "0.1.0"
__author__ = "Hiero Keys Python Library"

__all__ = [
    # Exceptions
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

    # Formats
    "KeyAlgorithm",
    "KeyType",
    "RawFormat",
    "KeyContainer",
    "KeyEncoding",
    "KeyFormat",
    "ByteImportEncoding",

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
