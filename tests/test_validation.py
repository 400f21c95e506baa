import pytest

from hiero_keys.constants import SECP256K1_ORDER
from hiero_keys.exceptions import (
    InvalidKeyLengthError, InvalidPointError, InvalidScalarError, InvalidSignatureLengthError
)
from hiero_keys.utils import validation as v


def test_to_bytes_copies_and_rejects_other_types():
    buf = bytearray(b"\x01\x02")
    copied = v.to_bytes(buf)
    buf[0] = 0xFF
    assert copied == b"\x01\x02"
    assert v.to_bytes(memoryview(b"ab")) == b"ab"
    with pytest.raises(TypeError):
        v.to_bytes("0102")


def test_require_length():
    assert v.require_length(b"\x00" * 32, 32) == b"\x00" * 32
    with pytest.raises(InvalidKeyLengthError) as exc:
        v.require_length(b"\x00" * 31, 32)
    assert exc.value.expected == 32
    assert exc.value.actual == 31
    with pytest.raises(InvalidSignatureLengthError):
        v.require_signature_length(b"\x00" * 63, 64)


def test_private_scalar_validation():
    assert v.is_valid_private_scalar(1)
    assert v.is_valid_private_scalar(SECP256K1_ORDER - 1)
    assert not v.is_valid_private_scalar(0)
    assert not v.is_valid_private_scalar(SECP256K1_ORDER)
    assert not v.is_valid_private_scalar(True)
    assert not v.is_valid_private_scalar(b"\x01")

    assert v.validate_private_scalar(b"\x00" * 31 + b"\x01")[-1] == 1
    with pytest.raises(InvalidScalarError):
        v.validate_private_scalar(b"\x00" * 32)
    with pytest.raises(InvalidScalarError):
        v.validate_private_scalar(SECP256K1_ORDER.to_bytes(32, "big"))
    with pytest.raises(InvalidKeyLengthError):
        v.validate_private_scalar(b"\x01" * 33)


def test_public_point_validation():
    assert v.is_valid_public_point(b"\x02" + b"\x11" * 32)
    assert v.is_valid_public_point(b"\x03" + b"\x11" * 32)
    assert v.is_valid_public_point(b"\x04" + b"\x11" * 64)
    assert not v.is_valid_public_point(b"\x04" + b"\x11" * 32)
    assert not v.is_valid_public_point("02" * 33)

    with pytest.raises(InvalidPointError):
        v.validate_public_point(b"\x05" + b"\x11" * 32)
    with pytest.raises(InvalidKeyLengthError):
        v.validate_public_point(b"\x02" + b"\x11" * 31)
