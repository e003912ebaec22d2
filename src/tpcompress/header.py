"""
Stream prologue: a 3-byte tag followed by a major/minor/patch version triple.
"""

import logging
from importlib.metadata import PackageNotFoundError, version
from typing import Final

from .errors import FormatError
from .types import Version

TAG: Final[bytes] = b"TPC"
HEADER_SIZE: Final[int] = len(TAG) + 3

log = logging.getLogger(__name__)


def _parse_version(raw: str) -> Version:
    """Turn a ``major.minor.patch`` string into a triple, ignoring any suffix."""
    parts: list[int] = []
    for piece in raw.split(".")[:3]:
        digits = ""
        for c in piece:
            if not c.isdigit():
                break
            digits += c
        parts.append(int(digits) if digits else 0)
    # short versions like "1.2" pad with zeros
    while len(parts) < 3:
        parts.append(0)
    return (parts[0], parts[1], parts[2])


try:
    _version = _parse_version(version("tpcompress"))
except PackageNotFoundError:
    _version = (0, 0, 0)

CURRENT_VERSION: Final[Version] = _version


def write_header(ver: Version = CURRENT_VERSION) -> bytes:
    """
    Build the 6-byte stream prologue.

    :param ver: Version triple to stamp; each component must fit in one byte.
    :raises FormatError: If a version component is outside 0-255.
    """
    for part in ver:
        if not 0 <= part <= 0xFF:
            raise FormatError(f"version component out of range: {part} in {ver}")
    return TAG + bytes(ver)


def read_header(data: bytes) -> Version:
    """
    Verify the stream prologue and return the version it carries.

    The version is not checked for compatibility.

    :raises FormatError: If the stream is shorter than the header or the tag does not match.
    """
    if len(data) < HEADER_SIZE:
        raise FormatError(
            f"expected TPC header of {HEADER_SIZE} bytes, got {len(data)}. Maybe wrong file type"
        )
    if data[: len(TAG)] != TAG:
        raise FormatError("expected TPC in header. Maybe wrong file type")

    major, minor, patch = data[len(TAG) : HEADER_SIZE]
    log.debug(f"stream version {major}.{minor}.{patch}")
    return (major, minor, patch)
