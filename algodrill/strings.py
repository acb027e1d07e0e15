"""String checks."""

from __future__ import annotations

import string

_LETTERS = frozenset(string.ascii_letters)


def is_palindrome(text: str) -> bool:
    """Whether the ASCII letters of ``text`` read the same both ways, ignoring case."""
    letters = [char.lower() for char in text if char in _LETTERS]
    return letters == letters[::-1]