"""Unit tests for the stream header."""

import pytest

import tpcompress as tpc
from tpcompress.errors import FormatError


def test_write_header_layout():
    """Header is the tag followed by one byte per version component."""
    assert tpc.write_header((1, 2, 3)) == b"TPC\x01\x02\x03"
    assert len(tpc.write_header()) == tpc.HEADER_SIZE == 6


def test_write_header_rejects_wide_version():
    """Version components must fit in a byte."""
    with pytest.raises(FormatError):
        tpc.write_header((1, 256, 0))


def test_read_header_returns_version():
    """Version is read back but not checked."""
    assert tpc.read_header(b"TPC\xff\x00\x07rest") == (255, 0, 7)


@pytest.mark.parametrize("data", [b"", b"TPC", b"TPC\x00\x01", b"ZIP\x00\x01\x00"])
def test_read_header_rejects(data):
    """Short streams and foreign tags are format errors."""
    with pytest.raises(FormatError):
        tpc.read_header(data)
