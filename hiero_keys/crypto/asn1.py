"""PKCS#8 and SubjectPublicKeyInfo DER codec."""

import logging
from dataclasses import dataclass
from typing import Optional

from pyasn1.codec.der import decoder, encoder
from pyasn1.error import PyAsn1Error
from pyasn1.type import tag, univ
from pyasn1_alt_modules import rfc5280, rfc5480, rfc5915, rfc5958

from ..constants import (
    EC_PUBLIC_KEY_OID,
    ECDSA_PRIVATE_KEY_LENGTH,
    ED25519_OID,
    ED25519_PRIVATE_KEY_LENGTH,
    SECP256K1_OID,
)
from ..exceptions import (
    CurveMismatchError,
    InvalidDerError,
    InvalidKeyLengthError,
    UnsupportedAlgorithmError,
)
from ..types.common import BytesLike, DerBytes
from ..types.formats import KeyAlgorithm, KeyType

__all__ = [
    "DecodedKey",
    "algorithm_oid",
    "encode_private_key_info",
    "encode_subject_public_key_info",
    "decode_private_key_info",
    "decode_subject_public_key_info",
]

logger = logging.getLogger(__name__)

# PKCS#8 versions accepted on decode (RFC 5958 v1 and v2)
PKCS8_VERSIONS = (0, 1)
EC_PRIVATE_KEY_VERSION = 1


@dataclass(frozen=True)
class DecodedKey:
    """Raw key material extracted from a container."""

    algorithm: KeyAlgorithm
    key_type: KeyType
    raw: bytes

    def __repr__(self) -> str:
        # Raw private material stays out of logs and tracebacks
        return f"DecodedKey({self.algorithm.value}, {self.key_type.value}, {len(self.raw)} bytes)"


_ALGORITHM_OIDS = {
    KeyAlgorithm.ED25519: ED25519_OID,
    KeyAlgorithm.ECDSA: EC_PUBLIC_KEY_OID,
}


def algorithm_oid(algorithm: KeyAlgorithm) -> str:
    """Dotted OID for the AlgorithmIdentifier of algorithm."""
    return _ALGORITHM_OIDS[algorithm]


def _algorithm_for_oid(oid: str) -> KeyAlgorithm:
    for algorithm, known_oid in _ALGORITHM_OIDS.items():
        if oid == known_oid:
            return algorithm
    raise UnsupportedAlgorithmError(oid)


def _fill_algorithm_identifier(alg_id: univ.Sequence, algorithm: KeyAlgorithm) -> None:
    alg_id["algorithm"] = univ.ObjectIdentifier(algorithm_oid(algorithm))
    if algorithm is KeyAlgorithm.ECDSA:
        # ECParameters: namedCurve
        alg_id["parameters"] = encoder.encode(univ.ObjectIdentifier(SECP256K1_OID))


def _decode(substrate: bytes, spec, what: str):
    if not substrate:
        raise InvalidDerError(f"Invalid {what} DER: empty input")
    try:
        value, rest = decoder.decode(substrate, asn1Spec=spec)
    except PyAsn1Error as e:
        raise InvalidDerError(f"Invalid {what} DER: {e}") from e
    if rest:
        raise InvalidDerError(f"Invalid {what} DER: {len(rest)} trailing bytes")
    return value


def _named_curve(params: univ.Choice) -> str:
    """Curve OID from an ECParameters CHOICE; only namedCurve is supported."""
    if params.getName() != "namedCurve":
        raise CurveMismatchError(
            f"EC parameters use {params.getName()}, expected secp256k1 named curve",
            data=params.getName(),
        )
    return str(params["namedCurve"])


def _curve_parameter(alg_id: univ.Sequence) -> Optional[str]:
    """Named curve OID from an AlgorithmIdentifier, None when absent."""
    params = alg_id["parameters"]
    if not params.isValue:
        return None
    return _named_curve(_decode(bytes(params), rfc5480.ECParameters(), "EC parameters"))


def _require_secp256k1(curve: Optional[str]) -> None:
    if curve is None:
        raise CurveMismatchError("Missing EC curve parameters, expected secp256k1")
    if curve != SECP256K1_OID:
        raise CurveMismatchError(
            f"Unsupported curve {curve}, expected secp256k1 ({SECP256K1_OID})",
            data=curve,
        )


def _bit_string_octets(bits: univ.BitString, what: str) -> bytes:
    if len(bits) % 8:
        raise InvalidDerError(f"{what} BIT STRING has unused bits")
    return bits.asOctets()


def encode_private_key_info(
    algorithm: KeyAlgorithm,
    private_key: BytesLike,
    public_key: Optional[BytesLike] = None
) -> DerBytes:
    """
    Build a PKCS#8 PrivateKeyInfo.

    Args:
        algorithm: Key algorithm
        private_key: 32-byte Ed25519 seed or secp256k1 scalar
        public_key: 33-byte compressed point, required for ECDSA

    Returns:
        DER encoded PrivateKeyInfo
    """
    private_key = bytes(private_key)
    info = rfc5958.OneAsymmetricKey()
    info["version"] = 0
    _fill_algorithm_identifier(info["privateKeyAlgorithm"], algorithm)

    if algorithm is KeyAlgorithm.ED25519:
        # RFC 8410 CurvePrivateKey, an OCTET STRING inside the OCTET STRING
        inner = univ.OctetString(private_key)
    else:
        if public_key is None:
            raise ValueError("ECDSA PrivateKeyInfo requires the public point")
        inner = rfc5915.ECPrivateKey()
        inner["version"] = EC_PRIVATE_KEY_VERSION
        inner["privateKey"] = private_key
        inner["publicKey"] = univ.BitString(hexValue=bytes(public_key).hex()).subtype(
            explicitTag=tag.Tag(tag.tagClassContext, tag.tagFormatSimple, 1)
        )

    info["privateKey"] = encoder.encode(inner)
    return DerBytes(encoder.encode(info))


def encode_subject_public_key_info(algorithm: KeyAlgorithm, public_key: BytesLike) -> DerBytes:
    """
    Build a SubjectPublicKeyInfo.

    Args:
        algorithm: Key algorithm
        public_key: 32-byte Ed25519 point or 33-byte compressed secp256k1 point

    Returns:
        DER encoded SubjectPublicKeyInfo
    """
    spki = rfc5280.SubjectPublicKeyInfo()
    _fill_algorithm_identifier(spki["algorithm"], algorithm)
    spki["subjectPublicKey"] = univ.BitString.fromOctetString(bytes(public_key))
    return DerBytes(encoder.encode(spki))


def _decode_ec_private_key(alg_id: univ.Sequence, substrate: bytes) -> bytes:
    curve = _curve_parameter(alg_id)
    ec_key = _decode(substrate, rfc5915.ECPrivateKey(), "ECPrivateKey")

    if int(ec_key["version"]) != EC_PRIVATE_KEY_VERSION:
        raise InvalidDerError(f"Unsupported ECPrivateKey version: {int(ec_key['version'])}")

    inner_curve = _named_curve(ec_key["parameters"]) if ec_key["parameters"].isValue else None
    if inner_curve is not None:
        _require_secp256k1(inner_curve)
    _require_secp256k1(curve or inner_curve)

    scalar = bytes(ec_key["privateKey"])
    if len(scalar) > ECDSA_PRIVATE_KEY_LENGTH:
        raise InvalidKeyLengthError(ECDSA_PRIVATE_KEY_LENGTH, len(scalar))
    # Some encoders drop leading zero bytes
    return scalar.rjust(ECDSA_PRIVATE_KEY_LENGTH, b"\x00")


def decode_private_key_info(der: BytesLike) -> DecodedKey:
    """
    Parse a PKCS#8 PrivateKeyInfo and extract the raw private key.

    Args:
        der: DER encoded PrivateKeyInfo

    Returns:
        DecodedKey with the 32-byte seed (Ed25519) or scalar (ECDSA)

    Raises:
        InvalidDerError: If the structure is malformed
        UnsupportedAlgorithmError: If the algorithm OID is unknown
        CurveMismatchError: If EC parameters do not name secp256k1
        InvalidKeyLengthError: If the key material has the wrong size
    """
    info = _decode(bytes(der), rfc5958.OneAsymmetricKey(), "PKCS#8")

    version = int(info["version"])
    if version not in PKCS8_VERSIONS:
        raise InvalidDerError(f"Unsupported PKCS#8 version: {version}")

    alg_id = info["privateKeyAlgorithm"]
    oid = str(alg_id["algorithm"])
    algorithm = _algorithm_for_oid(oid)
    logger.debug(f"Decoding PKCS#8 private key with algorithm OID {oid}")

    substrate = bytes(info["privateKey"])
    if algorithm is KeyAlgorithm.ED25519:
        seed = bytes(_decode(substrate, univ.OctetString(), "Ed25519 private key"))
        if len(seed) != ED25519_PRIVATE_KEY_LENGTH:
            raise InvalidKeyLengthError(ED25519_PRIVATE_KEY_LENGTH, len(seed))
        return DecodedKey(algorithm, KeyType.PRIVATE, seed)

    return DecodedKey(algorithm, KeyType.PRIVATE, _decode_ec_private_key(alg_id, substrate))


def decode_subject_public_key_info(der: BytesLike) -> DecodedKey:
    """
    Parse a SubjectPublicKeyInfo and extract the raw public key.

    Args:
        der: DER encoded SubjectPublicKeyInfo

    Returns:
        DecodedKey with the encoded point as found in the BIT STRING

    Raises:
        InvalidDerError: If the structure is malformed
        UnsupportedAlgorithmError: If the algorithm OID is unknown
        CurveMismatchError: If EC parameters do not name secp256k1
    """
    spki = _decode(bytes(der), rfc5280.SubjectPublicKeyInfo(), "SubjectPublicKeyInfo")

    alg_id = spki["algorithm"]
    oid = str(alg_id["algorithm"])
    algorithm = _algorithm_for_oid(oid)
    logger.debug(f"Decoding SubjectPublicKeyInfo with algorithm OID {oid}")

    if algorithm is KeyAlgorithm.ECDSA:
        _require_secp256k1(_curve_parameter(alg_id))

    point = _bit_string_octets(spki["subjectPublicKey"], "subjectPublicKey")
    return DecodedKey(algorithm, KeyType.PUBLIC, point)
