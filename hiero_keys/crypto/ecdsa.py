"""ECDSA keys over secp256k1."""

import hashlib
import secrets

from coincurve import PrivateKey as SecpPrivateKey, PublicKey as SecpPublicKey
from ecdsa import SECP256k1, SigningKey, util

from ..constants import ECDSA_PRIVATE_KEY_LENGTH, SECP256K1_ORDER
from ..exceptions import InvalidPointError, InvalidScalarError
from ..types.common import BytesLike, DerBytes, PrivateKeyBytes, PublicKeyBytes, Signature
from ..types.formats import KeyAlgorithm
from ..utils.encoding import bytes_to_int, int_to_bytes, keccak256
from ..utils.validation import (
    is_valid_private_scalar,
    validate_private_scalar,
    validate_public_point,
)
from .asn1 import encode_private_key_info, encode_subject_public_key_info
from .keys import Message, PrivateKey, PublicKey, message_bytes
from .signature import (
    encode_der_signature,
    normalize_s,
    split_compact_signature,
)

__all__ = ["EcdsaPrivateKey", "EcdsaPublicKey"]


class EcdsaPrivateKey(PrivateKey):
    """
    secp256k1 private key.

    Messages are hashed with Keccak-256 before signing. Nonces follow
    RFC 6979 (HMAC-SHA256), so signatures are deterministic. The signature
    is the 64-byte r || s form; s is returned as computed, without low-s
    normalization, and no recovery id is added.
    """

    algorithm = KeyAlgorithm.ECDSA

    def __init__(self, key: BytesLike) -> None:
        """
        Initialize private key.

        Args:
            key: 32-byte big-endian scalar

        Raises:
            InvalidKeyLengthError: If key is not 32 bytes
            InvalidScalarError: If key is zero or not below the curve order
        """
        self._secret = PrivateKeyBytes(validate_private_scalar(key))
        self._key = SecpPrivateKey(self._secret)
        self._signer = SigningKey.from_string(self._secret, curve=SECP256k1)

    @classmethod
    def from_scalar(cls, d: int) -> "EcdsaPrivateKey":
        """
        Create private key from an integer scalar.

        Raises:
            InvalidScalarError: If d is not in [1, n)
        """
        if not is_valid_private_scalar(d):
            raise InvalidScalarError("Private scalar must satisfy 1 <= d < n")
        return cls(int_to_bytes(d, ECDSA_PRIVATE_KEY_LENGTH))

    @classmethod
    def random(cls) -> "EcdsaPrivateKey":
        """
        Create new random private key.

        Returns:
            New EcdsaPrivateKey with 1 <= d < n
        """
        while True:
            key_bytes = secrets.token_bytes(ECDSA_PRIVATE_KEY_LENGTH)
            # Out of range draws are rejected, not reduced
            if is_valid_private_scalar(key_bytes):
                return cls(key_bytes)

    @property
    def scalar(self) -> int:
        """Private scalar d."""
        return bytes_to_int(self._secret)

    def sign(self, message: Message) -> Signature:
        """
        Sign message.

        Args:
            message: Message bytes; hashed with Keccak-256 here

        Returns:
            64-byte r || s signature
        """
        digest = keccak256(message_bytes(message))
        signature = self._signer.sign_digest_deterministic(
            digest, hashfunc=hashlib.sha256, sigencode=util.sigencode_string
        )
        return Signature(signature)

    def create_public_key(self) -> "EcdsaPublicKey":
        return EcdsaPublicKey(self._key.public_key.format(compressed=True))

    def to_raw_bytes(self) -> PrivateKeyBytes:
        return self._secret

    def _encode_der(self) -> DerBytes:
        public_point = self._key.public_key.format(compressed=True)
        return encode_private_key_info(self.algorithm, self._secret, public_point)


class EcdsaPublicKey(PublicKey):
    """
    secp256k1 public key.

    Accepts compressed (33-byte) or uncompressed (65-byte) SEC1 points and
    always stores the compressed form.
    """

    algorithm = KeyAlgorithm.ECDSA

    def __init__(self, point: BytesLike) -> None:
        """
        Initialize public key.

        Args:
            point: SEC1 encoded point

        Raises:
            InvalidKeyLengthError: If point is neither 33 nor 65 bytes
            InvalidPointError: If point has a bad prefix or is not on the curve
        """
        point = validate_public_point(point)
        try:
            self._key = SecpPublicKey(point)
        except ValueError as e:
            raise InvalidPointError(f"Invalid secp256k1 point: {e}") from e
        self._point = PublicKeyBytes(self._key.format(compressed=True))

    def verify(self, message: Message, signature: BytesLike) -> bool:
        """
        Verify signature.

        Args:
            message: Original message; hashed with Keccak-256 here
            signature: 64-byte r || s signature

        Returns:
            True if signature is valid

        Raises:
            InvalidSignatureLengthError: If signature is not 64 bytes
        """
        r, s = split_compact_signature(signature)
        if not (0 < r < SECP256K1_ORDER and 0 < s < SECP256K1_ORDER):
            return False

        digest = keccak256(message_bytes(message))
        # libsecp256k1 only verifies low-s; (r, s) and (r, n - s) are equivalent
        der = encode_der_signature(r, normalize_s(s))
        try:
            return self._key.verify(der, digest, hasher=None)
        except ValueError:
            return False

    def to_raw_bytes(self) -> PublicKeyBytes:
        return self._point

    def to_uncompressed_bytes(self) -> bytes:
        """65-byte uncompressed SEC1 encoding."""
        return self._key.format(compressed=False)

    def _encode_der(self) -> DerBytes:
        return encode_subject_public_key_info(self.algorithm, self._point)
