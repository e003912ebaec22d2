"""
Word list source: fetch from the remote dictionary, cache as JSON on disk.
"""

import json
import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

import requests

from ._config import DEFAULT_TIMEOUT, DEFAULT_WORDS_URL
from .errors import VocabularyError

log = logging.getLogger(__name__)


class UsageTier(str, Enum):
    """How widely a word is used; carried through but not used for code assignment."""

    COMMON = "common"
    CORE = "core"
    UNCOMMON = "uncommon"
    OBSCURE = "obscure"


@dataclass(frozen=True, slots=True)
class WordRecord:
    word: str
    usage_tier: UsageTier

    def to_json(self) -> dict[str, str]:
        return {"word": self.word, "usage_category": self.usage_tier.value}


def parse_words(payload: Any, source: str | None = None) -> dict[str, WordRecord]:
    """
    Validate a decoded word list payload.

    The payload maps an id to a record holding at least ``word`` and
    ``usage_category``; any other keys are ignored.

    :param payload: Decoded JSON.
    :param source: URL or path used in error messages.
    :raises VocabularyError: If the payload has the wrong shape or an unknown tier.
    """
    if not isinstance(payload, dict):
        raise VocabularyError(
            f"expected a JSON object, got {type(payload).__name__}", source=source
        )

    words: dict[str, WordRecord] = {}
    for key, rec in payload.items():
        if not isinstance(rec, dict):
            raise VocabularyError(f"record for {key!r} is not an object", source=source)
        word = rec.get("word")
        tier = rec.get("usage_category")
        if not isinstance(word, str) or not word:
            raise VocabularyError(f"record for {key!r} has no word", source=source)
        try:
            usage_tier = UsageTier(tier)
        except ValueError:
            raise VocabularyError(
                f"record for {key!r} has unknown usage category {tier!r}", source=source
            )
        words[key] = WordRecord(word, usage_tier)
    return words


def fetch_words(
    url: str = DEFAULT_WORDS_URL, timeout: float = DEFAULT_TIMEOUT
) -> dict[str, WordRecord]:
    """
    Download the word list.

    :raises VocabularyError: On network failure, HTTP error status or malformed JSON.
    """
    log.info(f"fetching word list from {url}")
    try:
        r = requests.get(url, timeout=timeout)
        r.raise_for_status()
        payload = r.json()
    except requests.JSONDecodeError as e:
        raise VocabularyError("word list is not valid JSON", source=url) from e
    except requests.RequestException as e:
        raise VocabularyError(f"failed to fetch word list: {e}", source=url) from e
    return parse_words(payload, source=url)


def read_cache(path: Path) -> dict[str, WordRecord]:
    """
    Load a cached word list.

    :raises VocabularyError: If the file cannot be read or parsed.
    """
    try:
        with path.open("r", encoding="utf-8") as f:
            payload = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise VocabularyError(f"failed to read word cache: {e}", source=str(path)) from e
    return parse_words(payload, source=str(path))


def write_cache(path: Path, words: dict[str, WordRecord]) -> None:
    """Persist a word list in the same shape it was fetched in."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8", newline="\n") as f:
        json.dump({key: rec.to_json() for key, rec in words.items()}, f, ensure_ascii=False)
    log.debug(f"cached {len(words)} words at {path}")


def load_words(
    cache_path: str | Path,
    url: str = DEFAULT_WORDS_URL,
    timeout: float = DEFAULT_TIMEOUT,
    refresh: bool = False,
) -> dict[str, WordRecord]:
    """
    Load the word list from the cache, fetching and caching it when missing.

    :param cache_path: JSON cache file.
    :param url: Remote word list.
    :param timeout: HTTP timeout in seconds.
    :param refresh: Ignore an existing cache and fetch again.
    :raises VocabularyError: If neither the cache nor the remote list is usable.
    """
    path = Path(cache_path)
    if path.exists() and not refresh:
        log.debug(f"loading word list from cache {path}")
        words = read_cache(path)
    else:
        words = fetch_words(url, timeout)
        try:
            write_cache(path, words)
        except OSError as e:
            raise VocabularyError(f"failed to write word cache: {e}", source=str(path)) from e

    log.info(f"loaded {len(words)} words")
    return words
