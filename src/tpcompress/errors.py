"""Custom exception hierarchy for tpcompress codec errors."""


class TpcError(Exception):
    """Base exception for all tpcompress errors."""


class FormatError(TpcError):
    """Raised when a stream header is missing, truncated or not a TPC stream."""


class EscapeError(TpcError):
    """Raised when an escape region is unbalanced or cannot be decoded."""

    def __init__(self, message: str, *, position: int | None = None) -> None:
        """Initialize with an optional stream offset that gets appended to the message."""
        if position is not None:
            message = f"{message} (offset: {position})"
        super().__init__(message)
        self.position = position


class StructureError(TpcError):
    """Raised when an uppercase marker is not followed by a word."""

    def __init__(
        self,
        message: str,
        *,
        position: int | None = None,
        found: str | None = None,
    ) -> None:
        extra = " "
        if position is not None:
            extra += f"(offset: {position}) "
        if found:
            extra += f"(got {found}) "
        super().__init__(message + extra)
        self.position = position
        self.found = found


class VocabularyError(TpcError):
    """Raised when the word list cannot be fetched, read or parsed."""

    def __init__(self, message: str, *, source: str | None = None) -> None:
        extra = " "
        if source:
            extra += f"(source: {source}) "
        super().__init__(message + extra)
        self.source = source


class CodeTableError(TpcError):
    """Raised when a vocabulary cannot be laid out in the single-byte code space."""

    def __init__(self, message: str, *, vocab_size: int | None = None) -> None:
        """Initialize with optional vocab_size that gets appended to the message."""
        extra = " "
        if vocab_size is not None:
            extra += f"(vocab size: {vocab_size}) "
        super().__init__(message + extra)
        self.vocab_size = vocab_size
