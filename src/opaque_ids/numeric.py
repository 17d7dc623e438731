"""Base-N conversion over an arbitrary digit alphabet."""
from __future__ import annotations

from typing import Optional


def to_digits(num: int, digits: str) -> str:
    """Spell ``num`` with ``digits``, most significant character first."""

    base = len(digits)
    out = []
    while True:
        num, rem = divmod(num, base)
        out.append(digits[rem])
        if num == 0:
            break
    return "".join(reversed(out))


def from_digits(chars: str, digits: str, limit: Optional[int] = None) -> int:
    """Inverse of :func:`to_digits`.

    Raises :class:`ValueError` when a character is missing from ``digits``
    and :class:`OverflowError` as soon as the value grows past ``limit``.
    """

    base = len(digits)
    acc = 0
    for char in chars:
        index = digits.find(char)
        if index < 0:
            raise ValueError(f"character {char!r} is not a valid digit")
        acc = acc * base + index
        if limit is not None and acc > limit:
            raise OverflowError(f"value exceeds {limit}")
    return acc


__all__ = ["to_digits", "from_digits"]
