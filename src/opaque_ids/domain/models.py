"""Domain models describing codec configuration and encode outcomes."""
from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Optional

from ..utils.constants import DEFAULT_ALPHABET, DEFAULT_MIN_LENGTH


@dataclass(frozen=True)
class CodecOptions:
    """User-facing configuration for :class:`~opaque_ids.codec.IdCodec`.

    ``blocklist`` set to ``None`` selects the bundled default word list; any
    other value, including an empty set, replaces it entirely.
    """

    alphabet: str = DEFAULT_ALPHABET
    min_length: int = DEFAULT_MIN_LENGTH
    blocklist: Optional[FrozenSet[str]] = None


@dataclass(frozen=True)
class EncodeResult:
    """Outcome of the bounded regeneration loop for a single ``encode`` call."""

    id: str
    attempts: int
    exhausted: bool = False

    @property
    def ok(self) -> bool:
        return not self.exhausted
