"""
Text -> TPC stream.
"""

import logging

from ._decorators import measure_time
from .header import write_header
from .table import PUNCT, CodeTable
from .types import Code, Marker, Word

log = logging.getLogger(__name__)


def split_trailing_punct(token: str, table: CodeTable) -> tuple[str, list[Code]]:
    """
    Strip the maximal run of trailing glyphs from ``token``.

    Codes are collected in the order the glyphs are stripped, i.e. the last
    character of ``token`` comes first. Streams depend on this order, so a run
    like ``"!?"`` decodes as ``"?!"``.

    :return: The bare remainder and the codes of the stripped glyphs.
    """
    codes: list[Code] = []
    end = len(token)
    while end > 0 and token[end - 1] in PUNCT:
        codes.append(table.to_code[Word(token[end - 1])])
        end -= 1
    return token[:end], codes


def _encode_token(token: str, table: CodeTable, out: bytearray) -> None:
    """Append the codes for one space-delimited token to ``out``."""
    bare, trailing = split_trailing_punct(token, table)

    code: Code | None
    if bare[:1].isupper():
        code = table.code_for(Word(bare.lower()))
        # a marker in front of an escape region would not decode
        if code is not None:
            out.append(Marker.START_UPPERCASE.value)
    else:
        code = table.code_for(Word(bare))

    if code is not None:
        out.append(code)
    else:
        # unknown words keep their glyphs inside the escape and after it
        log.debug(f"escaping unknown token {token!r}")
        out.append(Marker.BEGIN_ASCII.value)
        out.extend(token.encode("utf-8"))
        out.append(Marker.END_ASCII.value)

    out.extend(trailing)


@measure_time
def compress(table: CodeTable, text: str) -> bytes:
    """
    Encode text into a TPC stream.

    The text is split on single spaces; each token becomes an optional
    uppercase marker plus a word code, or an escape region holding its raw
    UTF-8 bytes, followed by the codes of its trailing glyphs. No separator
    is written between tokens.

    :param table: Code table built from the vocabulary.
    :param text: Text to encode.
    :return: Header followed by the code sequence.
    """
    out = bytearray(write_header())
    for token in text.split(" "):
        _encode_token(token, table, out)

    log.debug(f"compressed {len(text)} chars into {len(out)} bytes")
    return bytes(out)
