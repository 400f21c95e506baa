"""PEM framing for DER key containers."""

import logging
import re
from typing import List

from ..constants import PEM_LINE_LENGTH
from ..exceptions import InvalidEncodingError, InvalidPemError
from ..types.common import BytesLike, PemStr
from ..types.formats import KeyType
from .encoding import base64_to_bytes, bytes_to_base64

__all__ = ["to_pem", "from_pem", "pem_lines"]

logger = logging.getLogger(__name__)

NON_BASE64_CHAR = re.compile(r"[^A-Za-z0-9+/=]")


def to_pem(label: str, der: BytesLike, line_length: int = PEM_LINE_LENGTH) -> PemStr:
    """
    Wrap DER bytes in PEM framing.

    Args:
        label: Label for the BEGIN/END markers, e.g. "PRIVATE KEY"
        der: DER encoded structure
        line_length: Body characters per line

    Returns:
        PEM text, every line terminated with a newline
    """
    body = bytes_to_base64(der)
    lines = [f"-----BEGIN {label}-----"]
    lines.extend(body[i:i + line_length] for i in range(0, len(body), line_length))
    lines.append(f"-----END {label}-----")
    return PemStr("".join(f"{line}\n" for line in lines))


def pem_lines(pem: str) -> List[str]:
    """Split PEM text into trimmed, non-blank lines (CR is treated as LF)."""
    lines = (line.strip() for line in pem.replace("\r", "\n").split("\n"))
    return [line for line in lines if line]


def from_pem(key_type: KeyType, pem: str) -> bytes:
    """
    Unwrap PEM text for the given key type into DER bytes.

    Stray characters outside the base64 alphabet are dropped from the body
    and missing padding is restored.

    Args:
        key_type: Expected key type, selects the label
        pem: PEM text

    Returns:
        DER bytes

    Raises:
        InvalidPemError: If the markers are missing or carry another label
        InvalidEncodingError: If the body cannot be decoded
    """
    label = key_type.pem_label
    header = f"-----BEGIN {label}-----"
    footer = f"-----END {label}-----"

    lines = pem_lines(pem)
    if not lines:
        raise InvalidPemError(f"Empty PEM input, expected {label}")
    if lines[0] != header:
        raise InvalidPemError(f"Invalid PEM header, expected '{header}'", data=lines[0])
    if lines[-1] != footer:
        raise InvalidPemError(f"Invalid PEM footer, expected '{footer}'", data=lines[-1])

    joined = "".join(lines[1:-1])
    payload = NON_BASE64_CHAR.sub("", joined)
    if len(payload) != len(joined):
        logger.warning(f"Dropped {len(joined) - len(payload)} non-base64 characters from PEM body")

    remainder = len(payload) % 4
    if remainder == 1:
        raise InvalidEncodingError("Invalid base64 payload in PEM (bad length)")
    elif remainder:
        logger.warning("Repairing missing base64 padding in PEM body")
        payload += "=" * (4 - remainder)

    return base64_to_bytes(payload)
