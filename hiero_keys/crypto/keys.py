"""Key abstractions shared by all algorithms."""

from abc import ABC, abstractmethod
from typing import Optional, Tuple, Union

from ..exceptions import (
    FormatTypeMismatchError,
    RawFormatMismatchError,
    UnsupportedAlgorithmError,
)
from ..types.common import BytesLike, DerBytes, HexStr, PemStr, Signature
from ..types.formats import KeyAlgorithm, KeyFormat, KeyType, RawFormat
from ..utils.encoding import bytes_to_hex
from ..utils.pem import to_pem
from ..utils.validation import to_bytes

__all__ = ["Key", "PrivateKey", "PublicKey", "Message"]

Message = Union[str, BytesLike]
"""Message to sign or verify; str is encoded as UTF-8."""


def message_bytes(message: Message) -> bytes:
    if isinstance(message, str):
        return message.encode("utf-8")
    return to_bytes(message)


class Key(ABC):
    """
    Common behaviour of public and private keys.

    Keys are immutable. Equality and hashing use the (key_type, algorithm,
    raw bytes) triple, so keys imported through different paths compare
    equal regardless of their concrete class.
    """

    algorithm: KeyAlgorithm
    key_type: KeyType

    @abstractmethod
    def to_raw_bytes(self) -> bytes:
        """Raw key material (seed, scalar or compressed point)."""

    @abstractmethod
    def _encode_der(self) -> DerBytes:
        """DER container for this key (PKCS#8 or SPKI)."""

    def hex(self) -> HexStr:
        """Raw key material as hex string."""
        return bytes_to_hex(self.to_raw_bytes())

    def _check_format(self, key_format: KeyFormat, raw_format: RawFormat) -> None:
        if not isinstance(key_format, KeyFormat):
            raise TypeError(f"Expected KeyFormat, got {type(key_format).__name__}")
        if not key_format.supports_type(self.key_type):
            raise FormatTypeMismatchError(
                f"Format {key_format} does not support {self.key_type.value} keys"
            )
        if key_format.raw_format is not raw_format:
            raise RawFormatMismatchError(
                f"Format {key_format} produces {key_format.raw_format.value}, "
                f"not {raw_format.value}"
            )

    def to_bytes(self, key_format: KeyFormat) -> bytes:
        """
        Export key as binary container.

        Args:
            key_format: A DER format matching the key type

        Returns:
            DER encoded PKCS#8 or SPKI structure

        Raises:
            FormatTypeMismatchError: If the container does not hold this key type
            RawFormatMismatchError: If the format is not a binary one
        """
        self._check_format(key_format, RawFormat.BYTES)
        return bytes(self._encode_der())

    def to_string(self, key_format: KeyFormat) -> PemStr:
        """
        Export key as text container.

        Args:
            key_format: The PEM format matching the key type

        Returns:
            PEM encoded PKCS#8 or SPKI structure

        Raises:
            FormatTypeMismatchError: If the container does not hold this key type
            RawFormatMismatchError: If the format is not a textual one
        """
        self._check_format(key_format, RawFormat.STRING)
        return to_pem(self.key_type.pem_label, self._encode_der())

    def _identity(self) -> Tuple[KeyType, KeyAlgorithm, bytes]:
        return self.key_type, self.algorithm, self.to_raw_bytes()

    def __eq__(self, other: object) -> bool:
        """Check equality."""
        if not isinstance(other, Key):
            return NotImplemented
        return self._identity() == other._identity()

    def __hash__(self) -> int:
        return hash(self._identity())


def _expect_class(cls: type, key: Key) -> Key:
    if not isinstance(key, cls):
        raise UnsupportedAlgorithmError(
            key.algorithm.value,
            f"Expected {cls.__name__}, decoded a {key.algorithm.value} key",
        )
    return key


class PrivateKey(Key):
    """Private signing key."""

    key_type = KeyType.PRIVATE

    @abstractmethod
    def sign(self, message: Message) -> Signature:
        """Sign message, returning a 64-byte signature."""

    @abstractmethod
    def create_public_key(self) -> "PublicKey":
        """Derive the matching public key."""

    @classmethod
    def generate(cls, algorithm: Optional[KeyAlgorithm] = None) -> "PrivateKey":
        """
        Generate a new random private key.

        Args:
            algorithm: Key algorithm; defaults to the algorithm of the
                concrete class this is called on

        Returns:
            New PrivateKey instance
        """
        from .factory import generate_private_key

        algorithm = algorithm or getattr(cls, "algorithm", None)
        if algorithm is None:
            raise TypeError("generate() needs an algorithm when called on PrivateKey")
        return _expect_class(cls, generate_private_key(algorithm))

    @classmethod
    def create(cls, source: Union[KeyFormat, KeyAlgorithm], *args) -> "PrivateKey":
        """
        Import a private key.

        Accepted forms:
            create(key_format, value)
            create(algorithm, raw_bytes)
            create(algorithm, byte_import_encoding, text)
        """
        from .factory import create_private_key

        return _expect_class(cls, create_private_key(source, *args))

    @classmethod
    def from_pem(cls, value: str) -> "PrivateKey":
        """Import a PKCS#8 PEM private key."""
        return cls.create(KeyFormat.PKCS8_WITH_PEM, value)

    def __repr__(self) -> str:
        """String representation."""
        # Show first and last 4 chars of hex for security
        hex_str = self.hex()
        masked = f"{hex_str[:4]}...{hex_str[-4:]}"
        return f"{type(self).__name__}({masked})"


class PublicKey(Key):
    """Public verification key."""

    key_type = KeyType.PUBLIC

    @abstractmethod
    def verify(self, message: Message, signature: BytesLike) -> bool:
        """
        Verify signature over message.

        Returns False for a signature that does not verify; raises only for
        a signature of the wrong length.
        """

    @classmethod
    def create(cls, source: Union[KeyFormat, KeyAlgorithm], *args) -> "PublicKey":
        """
        Import a public key.

        Accepted forms:
            create(key_format, value)
            create(algorithm, raw_bytes)
            create(algorithm, byte_import_encoding, text)
        """
        from .factory import create_public_key

        return _expect_class(cls, create_public_key(source, *args))

    @classmethod
    def from_pem(cls, value: str) -> "PublicKey":
        """Import an SPKI PEM public key."""
        return cls.create(KeyFormat.SPKI_WITH_PEM, value)

    def __repr__(self) -> str:
        """String representation."""
        return f"{type(self).__name__}({self.hex()})"
