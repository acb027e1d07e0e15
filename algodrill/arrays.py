"""Sorted-array deduplication and search in rotated sorted arrays."""

from __future__ import annotations

from typing import Sequence


def remove_duplicates(nums: Sequence[int]) -> list[int]:
    """Return the sorted input with each value kept once."""
    result: list[int] = []
    for value in nums:
        if not result or result[-1] != value:
            result.append(value)
    return result


def remove_duplicates_keep_two(nums: Sequence[int]) -> list[int]:
    """Return the sorted input with each value kept at most twice."""
    result: list[int] = []
    for value in nums:
        if len(result) < 2 or result[-2] != value:
            result.append(value)
    return result


def search_rotated(nums: Sequence[int], target: int) -> int:
    """Index of ``target`` in a rotated sorted array of distinct values, or -1."""
    first, last = 0, len(nums)
    while first < last:
        mid = first + (last - first) // 2
        if nums[mid] == target:
            return mid
        if nums[first] <= nums[mid]:
            if nums[first] <= target < nums[mid]:
                last = mid
            else:
                first = mid + 1
        elif nums[mid] < target <= nums[last - 1]:
            first = mid + 1
        else:
            last = mid
    return -1


def contains_rotated(nums: Sequence[int], target: int) -> bool:
    """Whether ``target`` occurs in a rotated sorted array that may hold repeats."""
    first, last = 0, len(nums)
    while first < last:
        mid = first + (last - first) // 2
        if nums[mid] == target:
            return True
        if nums[first] < nums[mid]:
            if nums[first] <= target < nums[mid]:
                last = mid
            else:
                first = mid + 1
        elif nums[first] > nums[mid]:
            if nums[mid] < target <= nums[last - 1]:
                first = mid + 1
            else:
                last = mid
        else:
            first += 1
    return False