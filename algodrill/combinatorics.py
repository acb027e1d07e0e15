"""Enumeration of permutations and palindromic partitions."""

from __future__ import annotations

from typing import Iterator, Sequence


def permutations(nums: Sequence[int]) -> list[list[int]]:
    """All orderings of ``nums``, in order of first choice by input position.

    Values are tracked as used by value, so when ``nums`` repeats a value no
    complete ordering can be formed and the result is empty. An empty input
    also gives an empty result.
    """
    size = len(nums)
    if size == 0:
        return []
    used: set[int] = set()
    path: list[int] = []

    def extend() -> Iterator[list[int]]:
        if len(path) == size:
            yield list(path)
            return
        for value in nums:
            if value in used:
                continue
            used.add(value)
            path.append(value)
            yield from extend()
            path.pop()
            used.discard(value)

    return list(extend())


def _is_palindrome(piece: str) -> bool:
    return piece == piece[::-1]


def palindrome_partitions(text: str) -> list[list[str]]:
    """Every way to split ``text`` into palindromic pieces; empty for empty text.

    Partitions are ordered by the length of their first piece, then the
    next, shortest first.
    """
    if not text:
        return []
    size = len(text)
    path: list[str] = []

    def split(start: int) -> Iterator[list[str]]:
        if start >= size:
            yield list(path)
            return
        for stop in range(start + 1, size + 1):
            piece = text[start:stop]
            if _is_palindrome(piece):
                path.append(piece)
                yield from split(stop)
                path.pop()

    return list(split(0))