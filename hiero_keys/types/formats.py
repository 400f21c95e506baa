"""Key algorithm, type, container and encoding definitions."""

from enum import Enum
from typing import Any

from ..constants import PEM_PRIVATE_KEY_LABEL, PEM_PUBLIC_KEY_LABEL

__all__ = [
    "KeyAlgorithm",
    "KeyType",
    "RawFormat",
    "KeyContainer",
    "KeyEncoding",
    "KeyFormat",
    "ByteImportEncoding",
]


class KeyAlgorithm(str, Enum):
    """Supported signature algorithms."""

    ED25519 = "ed25519"  # EdDSA over Curve25519
    ECDSA = "ecdsa"      # ECDSA over secp256k1


class KeyType(str, Enum):
    """Public or private half of a key pair."""

    PUBLIC = "public"
    PRIVATE = "private"

    @property
    def pem_label(self) -> str:
        """Label used in PEM BEGIN/END markers."""
        if self is KeyType.PRIVATE:
            return PEM_PRIVATE_KEY_LABEL
        return PEM_PUBLIC_KEY_LABEL


class RawFormat(str, Enum):
    """Python representation of an encoded key value."""

    BYTES = "bytes"
    STRING = "string"

    def matches(self, value: Any) -> bool:
        """Check whether value has this representation."""
        if self is RawFormat.BYTES:
            return isinstance(value, (bytes, bytearray, memoryview))
        return isinstance(value, str)


class KeyContainer(str, Enum):
    """Supported container structures."""

    PKCS8 = "pkcs8"  # private keys
    SPKI = "spki"    # public keys

    def supports_type(self, key_type: KeyType) -> bool:
        if self is KeyContainer.PKCS8:
            return key_type is KeyType.PRIVATE
        return key_type is KeyType.PUBLIC


class KeyEncoding(Enum):
    """Encodings a container can be serialized with."""

    DER = RawFormat.BYTES
    PEM = RawFormat.STRING

    @property
    def raw_format(self) -> RawFormat:
        return self.value


class KeyFormat(Enum):
    """
    Combination of a container with an encoding.

    The raw format of the import/export value (bytes or str) follows from
    the encoding.
    """

    PKCS8_WITH_DER = (KeyContainer.PKCS8, KeyEncoding.DER)
    SPKI_WITH_DER = (KeyContainer.SPKI, KeyEncoding.DER)
    PKCS8_WITH_PEM = (KeyContainer.PKCS8, KeyEncoding.PEM)
    SPKI_WITH_PEM = (KeyContainer.SPKI, KeyEncoding.PEM)

    @property
    def container(self) -> KeyContainer:
        return self.value[0]

    @property
    def encoding(self) -> KeyEncoding:
        return self.value[1]

    @property
    def raw_format(self) -> RawFormat:
        return self.encoding.raw_format

    def supports_type(self, key_type: KeyType) -> bool:
        return self.container.supports_type(key_type)

    @classmethod
    def for_type(cls, key_type: KeyType, encoding: KeyEncoding) -> "KeyFormat":
        """
        Find the format that serializes key_type with encoding.

        Args:
            key_type: Public or private
            encoding: DER or PEM

        Returns:
            The matching KeyFormat
        """
        for key_format in cls:
            if key_format.encoding is encoding and key_format.supports_type(key_type):
                return key_format
        raise ValueError(f"No format for {key_type.value} key with {encoding.name}")

    def decode(self, key_type: KeyType, value: str) -> bytes:
        """
        Turn a textual rendition of this format into DER bytes.

        DER values are read as hex (whitespace and a 0x prefix are
        tolerated), PEM values go through the PEM codec.

        Args:
            key_type: Key type the value is expected to hold
            value: Encoded text

        Returns:
            DER encoded container
        """
        from ..utils.encoding import hex_to_bytes, strip_hex_prefix
        from ..utils.pem import from_pem

        if self.encoding is KeyEncoding.DER:
            return hex_to_bytes(strip_hex_prefix(value.strip()))
        return from_pem(key_type, value)

    def __str__(self) -> str:
        return self.name


class ByteImportEncoding(str, Enum):
    """Text encodings for raw key bytes."""

    HEX = "hex"
    BASE64 = "base64"

    def decode(self, value: str) -> bytes:
        """Decode text into raw bytes."""
        from ..utils.encoding import base64_to_bytes, hex_to_bytes, strip_hex_prefix

        if self is ByteImportEncoding.HEX:
            return hex_to_bytes(strip_hex_prefix(value.strip()))
        return base64_to_bytes(value)

    def encode(self, data: bytes) -> str:
        """Encode raw bytes as text."""
        from ..utils.encoding import bytes_to_base64, bytes_to_hex

        if self is ByteImportEncoding.HEX:
            return bytes_to_hex(data)
        return bytes_to_base64(data)

