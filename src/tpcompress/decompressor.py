"""
TPC stream -> text.
"""

import logging
from typing import assert_never

from ._decorators import measure_time
from .errors import EscapeError, StructureError
from .header import HEADER_SIZE, read_header
from .table import PUNCT, CodeTable
from .types import Marker, Word

log = logging.getLogger(__name__)


def _needs_space(pos: int, begin: int, text: str) -> bool:
    """A word is preceded by a space unless it opens the stream or starts with a glyph."""
    return pos != begin and not (text and text[0] in PUNCT)


def _upper_first(s: str) -> str:
    return s[:1].upper() + s[1:]


def _read_escape(data: bytes, start: int) -> tuple[str, int]:
    """
    Collect the raw bytes of an escape region opened just before ``start``.

    :return: The decoded text and the offset of the closing marker.
    :raises EscapeError: If the stream ends before the region is closed or the
        bytes are not valid UTF-8.
    """
    end = data.find(Marker.END_ASCII.value, start)
    if end == -1:
        raise EscapeError("stream ended inside escape region", position=start - 1)
    raw = data[start:end]
    try:
        return raw.decode("utf-8"), end
    except UnicodeDecodeError as e:
        raise EscapeError("escape region is not valid text", position=start - 1) from e


@measure_time
def decompress(table: CodeTable, data: bytes) -> str:
    """
    Decode a TPC stream back into text.

    Unassigned codes are skipped without error.

    :param table: Code table built from the same vocabulary used to compress.
    :param data: Complete stream including the header.
    :return: The reconstructed text.
    :raises FormatError: If the header is missing or not a TPC header.
    :raises EscapeError: If an escape region is unbalanced or undecodable.
    :raises StructureError: If an uppercase marker is not followed by a word.
    """
    log.debug("verifying header")
    read_header(data)

    out: list[str] = []
    begin = HEADER_SIZE
    i = begin
    n = len(data)

    log.debug("decompressing")
    while i < n:
        token = table.token_for(data[i])
        match token:
            case None:
                log.debug(f"skipping unassigned code 0x{data[i]:02X} at offset {i}")
            case Word(text):
                if _needs_space(i, begin, text):
                    out.append(" ")
                out.append(text)
            case Marker.START_UPPERCASE:
                nxt = table.token_for(data[i + 1]) if i + 1 < n else None
                if not isinstance(nxt, Word):
                    found = None if nxt is None else f"{nxt}"
                    raise StructureError(
                        "expected word after uppercase byte", position=i, found=found
                    )
                if _needs_space(i, begin, nxt.text):
                    out.append(" ")
                out.append(_upper_first(nxt.text))
                i += 1
            case Marker.BEGIN_ASCII:
                if i != begin:
                    out.append(" ")
                text, i = _read_escape(data, i + 1)
                out.append(text)
            case Marker.END_ASCII:
                raise EscapeError("found end of escape before begin of escape", position=i)
            case _:
                assert_never(token)
        i += 1

    return "".join(out)
