"""Environment-driven defaults for the command surface."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Final

DEFAULT_WORDS_URL: Final[str] = "https://api.linku.la/v1/words"
DEFAULT_CACHE: Final[str] = "words.json"
DEFAULT_TIMEOUT: Final[float] = 30.0


@dataclass(frozen=True)
class Settings:
    words_url: str = DEFAULT_WORDS_URL
    cache_path: Path = Path(DEFAULT_CACHE)
    timeout: float = DEFAULT_TIMEOUT


def from_env() -> Settings:
    """Read settings from ``TPC_*`` environment variables, falling back to defaults."""
    timeout_raw = os.environ.get("TPC_HTTP_TIMEOUT", "").strip()
    try:
        timeout = float(timeout_raw) if timeout_raw else DEFAULT_TIMEOUT
    except ValueError:
        raise ValueError(f"TPC_HTTP_TIMEOUT must be a number, got {timeout_raw!r}") from None
    return Settings(
        words_url=(os.environ.get("TPC_WORDS_URL") or DEFAULT_WORDS_URL).strip(),
        cache_path=Path(os.path.expanduser(os.environ.get("TPC_WORDS_CACHE") or DEFAULT_CACHE)),
        timeout=timeout,
    )
