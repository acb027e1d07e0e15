"""In-place sorting algorithms for mutable sequences."""

from __future__ import annotations

import heapq
from typing import MutableSequence, Sequence


def _sift_down(nums: MutableSequence[int], index: int, size: int) -> None:
    """Move ``nums[index]`` down until the max-heap property holds below it."""
    while True:
        left = 2 * index + 1
        right = left + 1
        larger = index
        if left < size and nums[left] > nums[larger]:
            larger = left
        if right < size and nums[right] > nums[larger]:
            larger = right
        if larger == index:
            return
        nums[index], nums[larger] = nums[larger], nums[index]
        index = larger


def heap_sort(nums: MutableSequence[int]) -> None:
    """Sort ``nums`` ascending in place using a max-heap."""
    size = len(nums)
    for index in range(size // 2 - 1, -1, -1):
        _sift_down(nums, index, size)
    for end in range(size - 1, 0, -1):
        nums[0], nums[end] = nums[end], nums[0]
        _sift_down(nums, 0, end)


def insertion_sort(nums: MutableSequence[int]) -> None:
    """Sort ``nums`` ascending in place by straight insertion."""
    for position in range(1, len(nums)):
        value = nums[position]
        slot = position - 1
        while slot >= 0 and nums[slot] > value:
            nums[slot + 1] = nums[slot]
            slot -= 1
        nums[slot + 1] = value


def _merge_range(nums: MutableSequence[int], begin: int, end: int) -> None:
    if end - begin < 2:
        return
    mid = begin + (end - begin) // 2
    _merge_range(nums, begin, mid)
    _merge_range(nums, mid, end)
    # heapq.merge prefers the first run on ties, which keeps the sort stable.
    merged = list(heapq.merge(nums[begin:mid], nums[mid:end]))
    nums[begin:end] = merged


def merge_sort(nums: MutableSequence[int]) -> None:
    """Sort ``nums`` ascending in place by top-down merge sort."""
    _merge_range(nums, 0, len(nums))


def _partition(nums: MutableSequence[int], begin: int, end: int) -> int:
    """Partition around ``nums[begin]``; return the pivot's final index."""
    pivot_value = nums[begin]
    boundary = begin + 1
    for position in range(begin + 1, end):
        if nums[position] < pivot_value:
            nums[position], nums[boundary] = nums[boundary], nums[position]
            boundary += 1
    nums[begin], nums[boundary - 1] = nums[boundary - 1], nums[begin]
    return boundary - 1


def quick_sort(nums: MutableSequence[int]) -> None:
    """Sort ``nums`` ascending in place by quicksort with a first-element pivot."""
    pending = [(0, len(nums))]
    while pending:
        begin, end = pending.pop()
        if end - begin < 2:
            continue
        pivot = _partition(nums, begin, end)
        pending.append((begin, pivot))
        pending.append((pivot + 1, end))


def selection_sort(nums: MutableSequence[int]) -> None:
    """Sort ``nums`` ascending in place by repeatedly selecting the minimum."""
    size = len(nums)
    for position in range(size - 1):
        smallest = min(range(position, size), key=nums.__getitem__)
        nums[position], nums[smallest] = nums[smallest], nums[position]


def bubble_sort(nums: MutableSequence[int]) -> None:
    """Sort ``nums`` ascending in place, stopping early once a pass makes no swap."""
    for pass_end in range(len(nums) - 1, 0, -1):
        swapped = False
        for position in range(pass_end):
            if nums[position + 1] < nums[position]:
                nums[position], nums[position + 1] = nums[position + 1], nums[position]
                swapped = True
        if not swapped:
            return


def sort_colors(nums: MutableSequence[int]) -> None:
    """Group 0s, then 1s, then 2s in place in a single pass.

    Values other than 0 and 2 are treated like 1 and left in the middle.
    """
    red = 0
    blue = len(nums) - 1
    current = 0
    while current <= blue:
        value = nums[current]
        if value == 0:
            nums[current], nums[red] = nums[red], nums[current]
            current += 1
            red += 1
        elif value == 2:
            nums[current], nums[blue] = nums[blue], nums[current]
            blue -= 1
        else:
            current += 1


def merge_sorted(
    nums1: MutableSequence[int], m: int, nums2: Sequence[int], n: int
) -> None:
    """Merge the first ``n`` of ``nums2`` into the first ``m`` of ``nums1``.

    ``nums1`` must have room for ``m + n`` values; the result fills its
    first ``m + n`` slots in ascending order.
    """
    if m < 0 or n < 0:
        raise ValueError("counts must not be negative")
    if len(nums1) < m + n:
        raise ValueError("nums1 has no room for the merged values")
    if len(nums2) < n:
        raise ValueError("nums2 holds fewer than n values")
    index = m + n - 1
    first = m - 1
    second = n - 1
    while first >= 0 and second >= 0:
        if nums1[first] > nums2[second]:
            nums1[index] = nums1[first]
            first -= 1
        else:
            nums1[index] = nums2[second]
            second -= 1
        index -= 1
    while second >= 0:
        nums1[index] = nums2[second]
        index -= 1
        second -= 1