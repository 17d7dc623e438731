"""Blocklist reduction and matching."""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import FrozenSet, Iterable, List

from .utils.constants import BLOCKLIST_PATH, MIN_BLOCKLIST_WORD_LENGTH, SHORT_MATCH_LENGTH
from .utils.errors import ConfigFileNotFound
from .utils.logging import get_logger

LOG = get_logger()


def load_blocklist_file(path: Path) -> List[str]:
    """Read a newline separated word list, skipping blanks and ``#`` comments."""

    if not path.exists():
        raise ConfigFileNotFound(f"blocklist not found: {path}")
    words: List[str] = []
    with path.open("r", encoding="utf-8") as f:
        for line in f:
            word = line.strip()
            if not word or word.startswith("#"):
                continue
            words.append(word)
    LOG.debug("loaded %d blocklist word(s) from %s", len(words), path)
    return words


@lru_cache(maxsize=None)
def default_blocklist() -> FrozenSet[str]:
    """Return the bundled word list, read once per process."""

    return frozenset(word.lower() for word in load_blocklist_file(BLOCKLIST_PATH))


def filter_blocklist(words: Iterable[str], alphabet: str) -> FrozenSet[str]:
    """Keep the lower-cased words that could ever appear in an ID over ``alphabet``."""

    alphabet_lower = set(alphabet.lower())
    kept = set()
    dropped = 0
    for word in words:
        word_lower = word.lower()
        if len(word_lower) < MIN_BLOCKLIST_WORD_LENGTH or not set(word_lower) <= alphabet_lower:
            dropped += 1
            continue
        kept.add(word_lower)
    if dropped:
        LOG.debug("dropped %d blocklist word(s) that cannot match the alphabet", dropped)
    return frozenset(kept)


def is_blocked(candidate: str, words: Iterable[str]) -> bool:
    """Return ``True`` when ``candidate`` matches any of ``words``.

    ``words`` must already be lower-cased (see :func:`filter_blocklist`).
    Short IDs and short words need an exact match. Words holding digits only
    count at either end of the ID; other words match anywhere.
    """

    candidate = candidate.lower()
    for word in words:
        if len(word) > len(candidate):
            continue
        if len(candidate) <= SHORT_MATCH_LENGTH or len(word) <= SHORT_MATCH_LENGTH:
            if candidate == word:
                return True
        elif any(char.isdigit() for char in word):
            if candidate.startswith(word) or candidate.endswith(word):
                return True
        elif word in candidate:
            return True
    return False


__all__ = ["default_blocklist", "filter_blocklist", "is_blocked", "load_blocklist_file"]
