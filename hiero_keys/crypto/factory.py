"""Single entry point for key generation and import."""

import logging
from typing import Callable, Dict, Union

from ..exceptions import FormatTypeMismatchError, RawFormatMismatchError
from ..types.formats import ByteImportEncoding, KeyAlgorithm, KeyFormat, KeyType, RawFormat
from ..utils.pem import from_pem
from ..utils.validation import to_bytes
from .asn1 import DecodedKey, decode_private_key_info, decode_subject_public_key_info
from .ecdsa import EcdsaPrivateKey, EcdsaPublicKey
from .ed25519 import Ed25519PrivateKey, Ed25519PublicKey
from .keys import PrivateKey, PublicKey

__all__ = [
    "generate_private_key",
    "create_private_key",
    "create_public_key",
    "private_key_from_pem",
    "public_key_from_pem",
]

logger = logging.getLogger(__name__)

KeySource = Union[KeyFormat, KeyAlgorithm]

_PRIVATE_KEY_CLASSES: Dict[KeyAlgorithm, Callable[[bytes], PrivateKey]] = {
    KeyAlgorithm.ED25519: Ed25519PrivateKey,
    KeyAlgorithm.ECDSA: EcdsaPrivateKey,
}

_PUBLIC_KEY_CLASSES: Dict[KeyAlgorithm, Callable[[bytes], PublicKey]] = {
    KeyAlgorithm.ED25519: Ed25519PublicKey,
    KeyAlgorithm.ECDSA: EcdsaPublicKey,
}


def generate_private_key(algorithm: KeyAlgorithm) -> PrivateKey:
    """
    Generate a new random private key.

    Args:
        algorithm: Key algorithm

    Returns:
        Fresh private key backed by the OS random source
    """
    algorithm = KeyAlgorithm(algorithm)
    logger.debug(f"Generating {algorithm.value} private key")
    if algorithm is KeyAlgorithm.ED25519:
        return Ed25519PrivateKey.random()
    return EcdsaPrivateKey.random()


def _container_der(key_format: KeyFormat, key_type: KeyType, value) -> bytes:
    if not key_format.supports_type(key_type):
        raise FormatTypeMismatchError(
            f"Format {key_format} cannot hold a {key_type.value} key",
            data={"format": key_format.name, "key_type": key_type.value},
        )
    if not key_format.raw_format.matches(value):
        raise RawFormatMismatchError(
            f"Format {key_format} expects {key_format.raw_format.value} input, "
            f"got {type(value).__name__}",
            data={"format": key_format.name, "type": type(value).__name__},
        )

    logger.debug(f"Decoding {key_type.value} key from {key_format}")
    if key_format.raw_format is RawFormat.BYTES:
        return to_bytes(value)
    return from_pem(key_type, value)


def _raw_input(algorithm: KeyAlgorithm, args: tuple) -> bytes:
    if len(args) == 1:
        return to_bytes(args[0])
    if len(args) == 2:
        encoding, text = args
        if not isinstance(encoding, ByteImportEncoding):
            raise TypeError(
                f"Expected ByteImportEncoding, got {type(encoding).__name__}"
            )
        if not isinstance(text, str):
            raise TypeError(f"Expected str value, got {type(text).__name__}")
        logger.debug(f"Importing raw {algorithm.value} key from {encoding.value}")
        return encoding.decode(text)
    raise TypeError(f"Expected 1 or 2 values after the algorithm, got {len(args)}")


def _resolve(
    key_type: KeyType,
    source: KeySource,
    args: tuple,
    decode_der: Callable[[bytes], DecodedKey],
    classes: Dict[KeyAlgorithm, Callable[[bytes], Union[PrivateKey, PublicKey]]],
):
    if isinstance(source, KeyFormat):
        if len(args) != 1:
            raise TypeError(f"Expected exactly one value after {source}, got {len(args)}")
        decoded = decode_der(_container_der(source, key_type, args[0]))
        logger.debug(f"Decoded {decoded.algorithm.value} {key_type.value} key")
        return classes[decoded.algorithm](decoded.raw)

    if isinstance(source, KeyAlgorithm):
        return classes[source](_raw_input(source, args))

    raise TypeError(
        f"Expected KeyFormat or KeyAlgorithm, got {type(source).__name__}"
    )


def create_private_key(source: KeySource, *args) -> PrivateKey:
    """
    Import a private key.

    Args:
        source: KeyFormat of a container, or KeyAlgorithm for raw key material
        *args: The container value (bytes for DER, str for PEM), raw bytes,
            or a ByteImportEncoding followed by the encoded string

    Returns:
        Private key of the algorithm named by the container OID or source

    Raises:
        FormatTypeMismatchError: If the format is a public key container
        RawFormatMismatchError: If the value type does not match the format
        TypeError: If source or the argument shape is not recognised
    """
    return _resolve(
        KeyType.PRIVATE, source, args, decode_private_key_info, _PRIVATE_KEY_CLASSES
    )


def create_public_key(source: KeySource, *args) -> PublicKey:
    """
    Import a public key.

    Accepts the same argument shapes as create_private_key.
    """
    return _resolve(
        KeyType.PUBLIC, source, args, decode_subject_public_key_info, _PUBLIC_KEY_CLASSES
    )


def private_key_from_pem(value: str) -> PrivateKey:
    """Import a PKCS#8 PEM private key."""
    return create_private_key(KeyFormat.PKCS8_WITH_PEM, value)


def public_key_from_pem(value: str) -> PublicKey:
    """Import an SPKI PEM public key."""
    return create_public_key(KeyFormat.SPKI_WITH_PEM, value)
