"""Unit tests for stream -> text decompression, spacing and malformed streams."""

import pytest

import tpcompress as tpc
from tpcompress.errors import EscapeError, FormatError, StructureError

BEGIN = tpc.Marker.BEGIN_ASCII.value
END = tpc.Marker.END_ASCII.value
UPPER = tpc.Marker.START_UPPERCASE.value


# Spacing
# ---------------------------------------------------------------------------


def test_words_separated_by_single_space(table, stream):
    """Two word codes decode with one space and no padding."""
    assert tpc.decompress(table, stream(5, 4)) == "mi li"


def test_glyphs_attach_to_previous_word(table, stream):
    """Glyph codes are not preceded by a space."""
    assert tpc.decompress(table, stream(5, 6, 0xFD, 0xF7, 9)) == "mi moku.\n toki"


def test_uppercase_pair(table, stream):
    """Uppercase marker capitalizes the following word."""
    assert tpc.decompress(table, stream(UPPER, 9)) == "Toki"
    assert tpc.decompress(table, stream(5, UPPER, 9)) == "mi Toki"


def test_escape_region(table, stream):
    """Escaped bytes are reproduced verbatim with surrounding spacing."""
    assert tpc.decompress(table, stream(BEGIN, b"Foo123", END)) == "Foo123"
    assert tpc.decompress(table, stream(5, BEGIN, b"Foo123", END, 9)) == "mi Foo123 toki"


def test_escape_region_keeps_leading_glyph_spacing(table, stream):
    """An escape is spaced from the previous word even when it starts with a glyph."""
    assert tpc.decompress(table, stream(5, BEGIN, b",foo", END)) == "mi ,foo"


def test_escape_region_utf8(table, stream):
    """Multi-byte characters inside an escape are decoded."""
    assert tpc.decompress(table, stream(BEGIN, "jän".encode("utf-8"), END)) == "jän"


def test_unassigned_codes_are_skipped(table, stream):
    """Codes with no table entry produce no output."""
    assert tpc.decompress(table, stream(5, 0x50, 4)) == "mi li"


def test_header_only(table, stream):
    """A stream with no codes decodes to empty text."""
    assert tpc.decompress(table, stream()) == ""


# Round trips
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    "text",
    [
        "toki",
        "Toki",
        "mi li",
        "Foo123",
        "mi moku.",
        "toki pona\n",
        "Toki! mi moku, sina moku.",
        "jan Foo123 li pona",
        "mi  moku",
        "jän",
        "",
    ],
)
def test_roundtrip(table, text):
    """Texts without glyph runs or escaped punctuation round-trip exactly."""
    assert tpc.decompress(table, tpc.compress(table, text)) == text


def test_roundtrip_every_word(table, words):
    """Every vocabulary word round-trips alone."""
    for word in words:
        assert tpc.decompress(table, tpc.compress(table, word)) == word


def test_glyph_run_comes_back_reversed(table):
    """A run of trailing glyphs decodes in the order it was written."""
    assert tpc.decompress(table, tpc.compress(table, "pona!?")) == "pona?!"


def test_unknown_word_with_glyphs_repeats_them(table):
    """Escaped punctuation is decoded twice."""
    assert tpc.decompress(table, tpc.compress(table, "hi!?")) == "hi!??!"


# Malformed streams
# ---------------------------------------------------------------------------


def test_rejects_foreign_tag(table):
    """A stream without the TPC tag is a format error."""
    with pytest.raises(FormatError):
        tpc.decompress(table, b"ZIP\x00\x01\x00\x05\x04")


def test_rejects_short_stream(table):
    """A stream shorter than the header is a format error."""
    with pytest.raises(FormatError):
        tpc.decompress(table, b"TPC")


def test_end_without_begin(table, stream):
    """A lone end-of-escape marker is an escape error."""
    with pytest.raises(EscapeError) as exc:
        tpc.decompress(table, stream(5, END))
    assert exc.value.position == tpc.HEADER_SIZE + 1


def test_unterminated_escape(table, stream):
    """A stream ending inside an escape is an escape error."""
    with pytest.raises(EscapeError):
        tpc.decompress(table, stream(5, BEGIN, b"abc"))


def test_invalid_utf8_in_escape(table, stream):
    """Escape bytes must form valid text."""
    with pytest.raises(EscapeError):
        tpc.decompress(table, stream(BEGIN, b"\xc3", END))


@pytest.mark.parametrize("after", [[], [BEGIN, END], [UPPER, 9], [0x50]])
def test_uppercase_needs_word(table, stream, after):
    """The uppercase marker must be followed by a word code."""
    with pytest.raises(StructureError):
        tpc.decompress(table, stream(UPPER, *after))
