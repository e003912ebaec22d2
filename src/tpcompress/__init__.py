"""tpcompress: single-byte word substitution codec for toki pona text."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("tpcompress")
except PackageNotFoundError:
    __version__ = "dev"

from .compressor import compress, split_trailing_punct
from .decompressor import decompress
from .errors import (
    CodeTableError,
    EscapeError,
    FormatError,
    StructureError,
    TpcError,
    VocabularyError,
)
from .header import CURRENT_VERSION, HEADER_SIZE, TAG, read_header, write_header
from .table import PUNCT, PUNCT_CODES, CodeTable, build_code_table
from .types import Code, Marker, Token, Version, Word
from .vocab import UsageTier, WordRecord, fetch_words, load_words, parse_words

__all__ = [
    "compress",
    "decompress",
    "split_trailing_punct",
    "build_code_table",
    "CodeTable",
    "PUNCT",
    "PUNCT_CODES",
    "Word",
    "Marker",
    "Token",
    "Code",
    "Version",
    "TAG",
    "HEADER_SIZE",
    "CURRENT_VERSION",
    "read_header",
    "write_header",
    "UsageTier",
    "WordRecord",
    "fetch_words",
    "load_words",
    "parse_words",
    "TpcError",
    "FormatError",
    "EscapeError",
    "StructureError",
    "VocabularyError",
    "CodeTableError",
]
