"""Ed25519 keys."""

import secrets

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ed25519

from ..constants import (
    ED25519_PRIVATE_KEY_LENGTH,
    ED25519_PUBLIC_KEY_LENGTH,
    ED25519_SIGNATURE_LENGTH,
)
from ..exceptions import InvalidPointError
from ..types.common import BytesLike, DerBytes, PrivateKeyBytes, PublicKeyBytes, Signature
from ..types.formats import KeyAlgorithm
from ..utils.validation import require_length, require_signature_length
from .asn1 import encode_private_key_info, encode_subject_public_key_info
from .keys import Message, PrivateKey, PublicKey, message_bytes

__all__ = ["Ed25519PrivateKey", "Ed25519PublicKey"]


class Ed25519PrivateKey(PrivateKey):
    """
    Ed25519 private key.

    Holds the 32-byte RFC 8032 seed. Signing does not pre-hash the message;
    Ed25519 hashes internally with SHA-512.
    """

    algorithm = KeyAlgorithm.ED25519

    def __init__(self, seed: BytesLike) -> None:
        """
        Initialize private key.

        Args:
            seed: 32-byte seed

        Raises:
            InvalidKeyLengthError: If seed is not 32 bytes
        """
        self._seed = PrivateKeyBytes(require_length(seed, ED25519_PRIVATE_KEY_LENGTH))
        self._key = ed25519.Ed25519PrivateKey.from_private_bytes(self._seed)

    @classmethod
    def random(cls) -> "Ed25519PrivateKey":
        """Create new random private key."""
        return cls(secrets.token_bytes(ED25519_PRIVATE_KEY_LENGTH))

    def sign(self, message: Message) -> Signature:
        return Signature(self._key.sign(message_bytes(message)))

    def create_public_key(self) -> "Ed25519PublicKey":
        public_bytes = self._key.public_key().public_bytes(
            encoding=serialization.Encoding.Raw,
            format=serialization.PublicFormat.Raw,
        )
        return Ed25519PublicKey(public_bytes)

    def to_raw_bytes(self) -> PrivateKeyBytes:
        return self._seed

    def _encode_der(self) -> DerBytes:
        return encode_private_key_info(self.algorithm, self._seed)


class Ed25519PublicKey(PublicKey):
    """Ed25519 public key (32-byte encoded point)."""

    algorithm = KeyAlgorithm.ED25519

    def __init__(self, point: BytesLike) -> None:
        """
        Initialize public key.

        Args:
            point: 32-byte encoded point

        Raises:
            InvalidKeyLengthError: If point is not 32 bytes
            InvalidPointError: If the crypto backend rejects the point
        """
        self._point = PublicKeyBytes(require_length(point, ED25519_PUBLIC_KEY_LENGTH))
        try:
            self._key = ed25519.Ed25519PublicKey.from_public_bytes(self._point)
        except ValueError as e:
            raise InvalidPointError(f"Invalid Ed25519 public key: {e}") from e

    def verify(self, message: Message, signature: BytesLike) -> bool:
        signature = require_signature_length(signature, ED25519_SIGNATURE_LENGTH)
        try:
            self._key.verify(signature, message_bytes(message))
            return True
        except InvalidSignature:
            return False

    def to_raw_bytes(self) -> PublicKeyBytes:
        return self._point

    def _encode_der(self) -> DerBytes:
        return encode_subject_public_key_info(self.algorithm, self._point)
