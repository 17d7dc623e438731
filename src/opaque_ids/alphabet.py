"""Alphabet validation and the deterministic shuffle."""
from __future__ import annotations

from .utils.constants import MIN_ALPHABET_LENGTH
from .utils.errors import InvalidAlphabetError


def validate_alphabet(alphabet: str) -> str:
    """Check ``alphabet`` and return it unchanged.

    Only single-byte (ASCII) characters are accepted, which also caps the
    length at 128. Raises :class:`InvalidAlphabetError` otherwise, and for
    short alphabets or repeated characters.
    """

    if not isinstance(alphabet, str):
        raise InvalidAlphabetError(f"alphabet must be a string (got: {type(alphabet).__name__})")
    for char in alphabet:
        if len(char.encode("utf-8")) > 1:
            raise InvalidAlphabetError(f"alphabet cannot contain multibyte characters (got: {char!r})")
    if len(alphabet) < MIN_ALPHABET_LENGTH:
        raise InvalidAlphabetError(
            f"alphabet length must be at least {MIN_ALPHABET_LENGTH} (got: {len(alphabet)})"
        )
    if len(set(alphabet)) != len(alphabet):
        raise InvalidAlphabetError("alphabet must contain unique characters")
    return alphabet


def shuffle(alphabet: str) -> str:
    """Return the fixed, alphabet-seeded permutation of ``alphabet``.

    Pairs index ``i`` with its mirror ``j`` and swaps ``chars[i]`` with
    ``chars[(i * j + ord(chars[i]) + ord(chars[j])) % len]``. The result
    depends only on the input, so every implementation agrees on it.
    """

    chars = list(alphabet)
    size = len(chars)
    i = 0
    j = size - 1
    while j > 0:
        r = (i * j + ord(chars[i]) + ord(chars[j])) % size
        chars[i], chars[r] = chars[r], chars[i]
        i += 1
        j -= 1
    return "".join(chars)


def rotate(alphabet: str, offset: int) -> str:
    return alphabet[offset:] + alphabet[:offset]


__all__ = ["validate_alphabet", "shuffle", "rotate"]
