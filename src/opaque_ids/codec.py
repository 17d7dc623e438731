"""Encode integer sequences into short IDs and decode them back."""
from __future__ import annotations

from typing import FrozenSet, Iterable, List, Optional, Sequence

from .alphabet import rotate, shuffle, validate_alphabet
from .blocklist import default_blocklist, filter_blocklist, is_blocked
from .domain.models import CodecOptions, EncodeResult
from .numeric import from_digits, to_digits
from .utils.constants import DEFAULT_ALPHABET, DEFAULT_MIN_LENGTH, MAX_NUMBER
from .utils.errors import (
    InvalidConfigurationError,
    InvalidMinLengthError,
    NumberOutOfRangeError,
    RegenerationExhaustedError,
)
from .utils.logging import get_logger

LOG = get_logger()


class IdCodec:
    """Reversible mapping between lists of non-negative integers and strings.

    The alphabet is shuffled and the blocklist filtered once, here; the
    instance is read-only afterwards and safe to share between threads.
    """

    def __init__(
        self,
        alphabet: str = DEFAULT_ALPHABET,
        min_length: int = DEFAULT_MIN_LENGTH,
        blocklist: Optional[Iterable[str]] = None,
    ) -> None:
        validate_alphabet(alphabet)
        if isinstance(min_length, bool) or not isinstance(min_length, int):
            raise InvalidMinLengthError(f"min_length must be an integer (got: {min_length!r})")
        if not 0 <= min_length <= len(alphabet):
            raise InvalidMinLengthError(
                f"min_length must be between 0 and {len(alphabet)} (got: {min_length})"
            )

        if isinstance(blocklist, str):
            raise InvalidConfigurationError(
                "blocklist must be a collection of words, not a single string"
            )
        words = default_blocklist() if blocklist is None else frozenset(blocklist)
        self._options = CodecOptions(
            alphabet=alphabet,
            min_length=min_length,
            blocklist=None if blocklist is None else words,
        )
        self._alphabet = shuffle(alphabet)
        self._min_length = min_length
        self._blocklist = filter_blocklist(words, alphabet)

    @classmethod
    def from_options(cls, options: CodecOptions) -> "IdCodec":
        return cls(
            alphabet=options.alphabet,
            min_length=options.min_length,
            blocklist=options.blocklist,
        )

    @property
    def options(self) -> CodecOptions:
        return self._options

    @property
    def alphabet(self) -> str:
        """The shuffled alphabet every ID is derived from."""
        return self._alphabet

    @property
    def min_length(self) -> int:
        return self._min_length

    @property
    def blocklist(self) -> FrozenSet[str]:
        """Blocklist words that survived filtering against the alphabet."""
        return self._blocklist

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(alphabet={self._options.alphabet!r}, "
            f"min_length={self._min_length}, blocklist=<{len(self._blocklist)} words>)"
        )

    def encode(self, numbers: Sequence[int]) -> str:
        """Return the ID for ``numbers``.

        Raises :class:`NumberOutOfRangeError` for negative or oversized
        values and :class:`RegenerationExhaustedError` when every rotation
        of the alphabet yields a blocked ID.
        """

        result = self.encode_with_attempts(numbers)
        if result.exhausted:
            raise RegenerationExhaustedError("Reached max attempts to re-generate the ID")
        return result.id

    def encode_with_attempts(self, numbers: Sequence[int]) -> EncodeResult:
        """Run the regeneration loop and report how it ended instead of raising."""

        numbers = list(numbers)
        if not numbers:
            return EncodeResult(id="", attempts=0)
        for num in numbers:
            if isinstance(num, bool) or not isinstance(num, int):
                raise NumberOutOfRangeError(f"encoding supports integers only (got: {num!r})")
            if not 0 <= num <= MAX_NUMBER:
                raise NumberOutOfRangeError(
                    f"encoding supports numbers between 0 and {MAX_NUMBER} (got: {num})"
                )

        attempt = 0
        while attempt <= len(self._alphabet):
            candidate = self._encode_once(numbers, attempt)
            if not is_blocked(candidate, self._blocklist):
                return EncodeResult(id=candidate, attempts=attempt + 1)
            LOG.debug("ID %r is blocked; regenerating (attempt %d)", candidate, attempt + 1)
            attempt += 1

        LOG.warning("no unblocked ID after %d attempts for %d number(s)", attempt, len(numbers))
        return EncodeResult(id="", attempts=attempt, exhausted=True)

    def _offset(self, numbers: List[int], attempt: int) -> int:
        size = len(self._alphabet)
        offset = len(numbers)
        for i, num in enumerate(numbers):
            offset += ord(self._alphabet[num % size]) + i
        return (offset % size + attempt) % size

    def _encode_once(self, numbers: List[int], attempt: int) -> str:
        rotated = rotate(self._alphabet, self._offset(numbers, attempt))
        prefix = rotated[0]
        # partition first, digits after it
        working = rotated[::-1]

        parts = [prefix]
        for i, num in enumerate(numbers):
            parts.append(to_digits(num, working[1:]))
            if i < len(numbers) - 1:
                parts.append(working[0])
                working = shuffle(working)
        id_ = "".join(parts)

        if len(id_) < self._min_length:
            id_ += working[0]
            while len(id_) < self._min_length:
                working = shuffle(working)
                id_ += working[: min(self._min_length - len(id_), len(working))]
        return id_

    def decode(self, id_: str) -> List[int]:
        """Return the numbers packed into ``id_``.

        Never raises: IDs holding foreign characters decode to ``[]`` and
        decoding stops at padding or at a segment that cannot be a number.
        """

        numbers: List[int] = []
        if not id_ or not set(id_) <= set(self._alphabet):
            return numbers

        offset = self._alphabet.index(id_[0])
        working = rotate(self._alphabet, offset)[::-1]
        pos = 1
        while pos < len(id_):
            end = id_.find(working[0], pos)
            separator = end >= 0
            if not separator:
                end = len(id_)
            segment = id_[pos:end]
            pos = end + 1
            if not segment:
                break
            try:
                value = from_digits(segment, working[1:], limit=MAX_NUMBER)
            except OverflowError:
                LOG.debug("segment %d of ID exceeds the supported range", len(numbers) + 1)
                break
            numbers.append(value)
            if separator:
                working = shuffle(working)
        return numbers


__all__ = ["IdCodec"]
