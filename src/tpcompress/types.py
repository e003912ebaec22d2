"""
Core types for the word codec.
"""

from dataclasses import dataclass
from enum import Enum

type Code = int
type Version = tuple[int, int, int]


@dataclass(frozen=True, slots=True)
class Word:
    """A vocabulary entry or a punctuation/whitespace glyph, by its exact text."""

    text: str


class Marker(Enum):
    """Control codes with no literal text of their own."""

    START_UPPERCASE = 0xF8
    END_ASCII = 0xFE
    BEGIN_ASCII = 0xFF


type Token = Word | Marker
