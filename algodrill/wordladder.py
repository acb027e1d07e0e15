"""Shortest word-ladder length by breadth-first and depth-first search."""

from __future__ import annotations

import string
from collections import deque
from typing import Iterator, Sequence

_ALPHABET = string.ascii_lowercase


def _neighbours(word: str, dictionary: frozenset[str]) -> Iterator[str]:
    """Dictionary words reached by changing one letter of ``word`` to a-z."""
    for position, current in enumerate(word):
        prefix, suffix = word[:position], word[position + 1:]
        for letter in _ALPHABET:
            if letter == current:
                continue
            candidate = prefix + letter + suffix
            if candidate in dictionary:
                yield candidate


def ladder_length(begin: str, end: str, words: Sequence[str]) -> int:
    """Number of words in the shortest ladder from ``begin`` to ``end``.

    Each step changes one letter to a lowercase letter and must land on a
    word of ``words``. Returns 0 when ``words`` is empty, when ``end`` is not
    among them, or when no ladder exists.
    """
    if not words or end not in words:
        return 0
    dictionary = frozenset(words)
    visited = {begin}
    queue: deque[tuple[str, int]] = deque([(begin, 1)])
    while queue:
        word, length = queue.popleft()
        if word == end:
            return length
        for candidate in _neighbours(word, dictionary):
            if candidate not in visited:
                visited.add(candidate)
                queue.append((candidate, length + 1))
    return 0


def _one_apart(first: str, second: str) -> bool:
    """Whether the two words have equal length and differ in exactly one place."""
    if len(first) != len(second):
        return False
    return sum(a != b for a, b in zip(first, second)) == 1


def ladder_length_dfs(begin: str, end: str, words: Sequence[str]) -> int:
    """Number of words in the shortest ladder, found by exhaustive depth-first search.

    Steps may change one character to any character, as long as the result
    is in ``words``. Returns 0 under the same conditions as ``ladder_length``.
    """
    if not words or end not in words:
        return 0
    limit = len(words)
    best = limit + 1
    path: list[str] = []
    on_path: set[str] = set()

    def explore(previous: str) -> None:
        nonlocal best
        if previous == end:
            best = min(best, len(path))
            return
        if len(path) + 1 >= best:
            return
        for word in words:
            if word in on_path or not _one_apart(previous, word):
                continue
            path.append(word)
            on_path.add(word)
            explore(word)
            path.pop()
            on_path.discard(word)

    explore(begin)
    return 0 if best > limit else best + 1