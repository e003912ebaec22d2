"""
Utilities for turning tokens into printable text.
"""

import unicodedata

from .types import Marker, Token, Word


def _escape_ctrl_chars(s: str) -> str:
    """Replace all Unicode control characters with their escape sequences."""
    cleaned = []
    for c in s:
        # control category codes vary: Cc, Cf, Cn etc.
        # so check via first character
        if unicodedata.category(c)[0] != "C":
            cleaned.append(c)
        else:
            cleaned.append(f"\\u{ord(c):04x}")
    return "".join(cleaned)


def render_token(token: Token) -> str:
    """Printable form of a token: escaped word text, or ``<NAME>`` for markers."""
    match token:
        case Word(text):
            return _escape_ctrl_chars(text)
        case Marker():
            return f"<{token.name}>"
