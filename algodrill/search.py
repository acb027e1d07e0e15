"""Selection of the k-th largest value and search in sorted matrices."""

from __future__ import annotations

import heapq
from typing import Sequence


def _check_rank(k: int, size: int) -> None:
    if not 1 <= k <= size:
        raise ValueError(f"k must be between 1 and {size}, got {k}")


def _partition_descending(values: list[int], begin: int, end: int) -> int:
    """Move values larger than ``values[begin]`` before it; return its index."""
    pivot_value = values[begin]
    boundary = begin + 1
    for position in range(begin + 1, end):
        if values[position] > pivot_value:
            values[position], values[boundary] = values[boundary], values[position]
            boundary += 1
    values[begin], values[boundary - 1] = values[boundary - 1], values[begin]
    return boundary - 1


def find_kth_largest(nums: Sequence[int], k: int) -> int:
    """Return the k-th largest value (1-based) by quickselect."""
    _check_rank(k, len(nums))
    values = list(nums)
    target = k - 1
    begin, end = 0, len(values)
    while True:
        pivot = _partition_descending(values, begin, end)
        if pivot == target:
            return values[pivot]
        if pivot < target:
            begin = pivot + 1
        else:
            end = pivot


def find_kth_largest_heap(nums: Sequence[int], k: int) -> int:
    """Return the k-th largest value (1-based) by popping a max-heap."""
    _check_rank(k, len(nums))
    heap = [-value for value in nums]
    heapq.heapify(heap)
    for _ in range(k - 1):
        heapq.heappop(heap)
    return -heap[0]


def search_matrix(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Whether ``target`` is in a matrix whose rows and columns both ascend."""
    if not matrix or not matrix[0]:
        return False
    row = len(matrix) - 1
    column = 0
    width = len(matrix[0])
    while row >= 0 and column < width:
        value = matrix[row][column]
        if value == target:
            return True
        if value < target:
            column += 1
        else:
            row -= 1
    return False


def search_sorted_matrix(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Whether ``target`` is in a matrix that ascends in row-major order."""
    if not matrix or not matrix[0]:
        return False
    width = len(matrix[0])
    begin, end = 0, width * len(matrix)
    while begin < end:
        mid = begin + (end - begin) // 2
        row, column = divmod(mid, width)
        value = matrix[row][column]
        if value == target:
            return True
        if value < target:
            begin = mid + 1
        else:
            end = mid
    return False