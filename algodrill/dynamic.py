"""Dynamic-programming and greedy solutions to classic array and string problems."""

from __future__ import annotations

from itertools import pairwise
from typing import Sequence


def can_jump(nums: Sequence[int]) -> bool:
    """Whether the last index is reachable, tracking the steps left at each index."""
    remaining = 0
    for jump in nums[:-1]:
        remaining = max(remaining, jump) - 1
        if remaining < 0:
            return False
    return True


def can_jump_greedy(nums: Sequence[int]) -> bool:
    """Whether the last index is reachable, tracking the farthest reachable index."""
    size = len(nums)
    if size <= 1:
        return True
    reach = 0
    for index, jump in enumerate(nums):
        if index > reach or reach >= size:
            break
        reach = max(reach, index + jump)
    return reach >= size - 1


def min_jumps(nums: Sequence[int]) -> int:
    """Fewest jumps from the first to the last index.

    Raises ValueError when the last index cannot be reached.
    """
    size = len(nums)
    if size <= 1:
        return 0
    steps = 0
    left = right = 0
    while left <= right:
        steps += 1
        farthest = right
        for index in range(left, right + 1):
            landing = index + nums[index]
            if landing >= size - 1:
                return steps
            farthest = max(farthest, landing)
        left, right = right + 1, farthest
    raise ValueError("the last index cannot be reached")


def max_subarray(nums: Sequence[int]) -> int:
    """Largest sum of a non-empty contiguous run; 0 for an empty sequence."""
    if not nums:
        return 0
    best = ending_here = nums[0]
    for value in nums[1:]:
        ending_here = max(ending_here + value, value)
        best = max(best, ending_here)
    return best


def triangle_min_path(triangle: Sequence[Sequence[int]]) -> int:
    """Smallest top-to-bottom path sum, stepping to adjacent entries below."""
    if not triangle:
        raise ValueError("triangle is empty")
    best = list(triangle[-1])
    for row in reversed(triangle[:-1]):
        best = [
            value + min(below_left, below_right)
            for value, below_left, below_right in zip(row, best, best[1:])
        ]
    return best[0]


def min_palindrome_cut(text: str) -> int:
    """Fewest cuts splitting ``text`` into palindromic pieces."""
    size = len(text)
    if size < 2:
        return 0
    is_palindrome = [[False] * size for _ in range(size)]
    # cuts[i] is the fewest cuts for text[i:]; cuts[size] = -1 makes a whole piece cost 0.
    cuts = [size - 1 - start for start in range(size + 1)]
    for start in range(size - 1, -1, -1):
        for stop in range(start, size):
            if text[start] == text[stop] and (
                stop - start < 2 or is_palindrome[start + 1][stop - 1]
            ):
                is_palindrome[start][stop] = True
                cuts[start] = min(cuts[start], cuts[stop + 1] + 1)
    return cuts[0]


def length_of_longest_substring(text: str) -> int:
    """Length of the longest run of ``text`` without a repeated character."""
    last_seen: dict[str, int] = {}
    longest = 0
    begin = 0
    for index, char in enumerate(text):
        if last_seen.get(char, -1) >= begin:
            longest = max(longest, index - begin)
            begin = last_seen[char] + 1
        last_seen[char] = index
    return max(len(text) - begin, longest)


def max_profit(prices: Sequence[int]) -> int:
    """Best profit from one buy followed by one later sell; 0 if none gains."""
    if len(prices) < 2:
        return 0
    profit = 0
    lowest = prices[0]
    for price in prices[1:]:
        profit = max(profit, price - lowest)
        lowest = min(lowest, price)
    return profit


def max_profit_unlimited(prices: Sequence[int]) -> int:
    """Best profit from any number of non-overlapping buy-sell trades."""
    return sum(max(later - earlier, 0) for earlier, later in pairwise(prices))