"""
Bidirectional mapping between tokens and single-byte codes.
"""

import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Final, TYPE_CHECKING

from ._sanitise import render_token
from .errors import CodeTableError
from .types import Code, Marker, Token, Word

if TYPE_CHECKING:
    from .vocab import WordRecord

log = logging.getLogger(__name__)

# glyph -> reserved code
PUNCT_CODES: Final[Mapping[str, Code]] = MappingProxyType(
    {
        ".": 0xFD,
        ",": 0xFC,
        ":": 0xFB,
        "!": 0xFA,
        "?": 0xF9,
        "\n": 0xF7,
        "\t": 0xF6,
    }
)
PUNCT: Final[frozenset[str]] = frozenset(PUNCT_CODES)

# first code that is not available to vocabulary words
FIRST_RESERVED: Final[Code] = min(
    min(PUNCT_CODES.values()), min(m.value for m in Marker)
)
MAX_VOCAB_SIZE: Final[int] = FIRST_RESERVED


class CodeTable:
    """
    Immutable bijection between tokens and byte codes.

    Built once per run and shared read-only by the compressor and decompressor.
    """

    __slots__ = ("_to_code", "_from_code")

    def __init__(self, from_code: Mapping[Code, Token]) -> None:
        """Freeze ``from_code`` and derive its inverse."""
        frozen = dict(from_code)
        self._from_code: Mapping[Code, Token] = MappingProxyType(frozen)
        self._to_code: Mapping[Token, Code] = MappingProxyType(
            {tok: code for code, tok in frozen.items()}
        )
        if len(self._to_code) != len(self._from_code):
            raise CodeTableError("token assigned to more than one code")

    @property
    def to_code(self) -> Mapping[Token, Code]:
        return self._to_code

    @property
    def from_code(self) -> Mapping[Code, Token]:
        return self._from_code

    def code_for(self, token: Token) -> Code | None:
        """Return the code assigned to ``token`` or ``None``."""
        return self._to_code.get(token)

    def token_for(self, code: Code) -> Token | None:
        """Return the token assigned to ``code`` or ``None`` if unassigned."""
        return self._from_code.get(code)

    def vocab_size(self) -> int:
        """Return the number of codes held by vocabulary words."""
        return sum(1 for code in self._from_code if code < FIRST_RESERVED)

    def __len__(self) -> int:
        return len(self._from_code)

    def __contains__(self, token: object) -> bool:
        return token in self._to_code

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CodeTable):
            return NotImplemented
        return dict(self._from_code) == dict(other._from_code)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(codes={len(self)}, words={self.vocab_size()})"

    def save_listing(self, path: str | Path) -> Path:
        """
        Write a human-readable listing of every assigned code.

        One line per code in ascending order: ``[0xNN] text``. Markers render
        as ``<NAME>`` and control characters are escaped.

        :param path: Output file; parent directories are created.
        :return: The path written.
        """
        out = Path(path)
        out.parent.mkdir(parents=True, exist_ok=True)

        log.debug(f"saving code table listing to {out}")

        with out.open("w", encoding="utf-8", newline="\n") as f:
            for code in sorted(self._from_code):
                f.write(f"[0x{code:02X}] {render_token(self._from_code[code])}\n")
        return out


def build_code_table(words: "Mapping[str, WordRecord] | Iterable[str]") -> CodeTable:
    """
    Assign codes to vocabulary words by rank, then overlay the reserved codes.

    Words are sorted by code point so the same vocabulary always yields the
    same table.

    :param words: The mapping returned by :func:`tpcompress.vocab.load_words`,
        or plain word texts.
    :return: The frozen code table.
    :raises CodeTableError: If the vocabulary would spill into the reserved codes.
    """
    if isinstance(words, Mapping):
        # only the word text matters; usage tiers do not affect codes
        words = [rec.word for rec in words.values()]
    texts = sorted(set(words))

    # reserved assignments win: a word spelled like a glyph would map twice
    shadowed = [t for t in texts if t in PUNCT]
    if shadowed:
        log.warning(f"skipping vocabulary entries shadowed by reserved glyphs: {shadowed}")
        texts = [t for t in texts if t not in PUNCT]

    if len(texts) > MAX_VOCAB_SIZE:
        raise CodeTableError(
            f"vocabulary exceeds {MAX_VOCAB_SIZE} single-byte codes",
            vocab_size=len(texts),
        )

    from_code: dict[Code, Token] = {code: Word(text) for code, text in enumerate(texts)}
    for glyph, code in PUNCT_CODES.items():
        from_code[code] = Word(glyph)
    for marker in Marker:
        from_code[marker.value] = marker

    table = CodeTable(from_code)
    log.info(f"built code table with {len(table)} codes ({table.vocab_size()} words)")
    return table
