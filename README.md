# algodrill

Classic algorithms and data structures in plain Python, using only the
standard library: linked lists, an LRU cache, array and matrix search,
sorting, dynamic programming and greedy problems, word ladders,
enumeration, and binary trees.

It is a library to import; it has no command-line program.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `algodrill.linked`

- `ListNode(val, next=None)`: a singly linked list node. Iterating over a
  node yields the values from it to the end of the list.
- `ListNode.from_values(values)`: builds a list in order; returns `None`
  for no values.
- `ListNode.to_list()`: the values from this node onwards as a Python list.
- `reverse_list(head)`: reverses the list in place and returns the new head.
- `insertion_sort_list(head)`, `sort_list(head)`: sort ascending by
  insertion and by merge sort, relinking the existing nodes.
- `merge_two_lists(first, second)`: merges two ascending lists into one.

### `algodrill.lru`

`LRUCache(capacity)` holds at most `capacity` entries and raises
`ValueError` if `capacity` is less than 1.

- `get(key)` returns the value and marks the key as most recently used,
  or `-1` (`LRUCache.MISSING`) when the key is absent.
- `set(key, value)` stores or updates an entry; when the cache is full, the
  least recently used entry is evicted first.
- `items()` lists `(key, value)` pairs from most to least recently used,
  and `str(cache)` shows them as `key:value` separated by spaces.
- `len(cache)` and `key in cache` are supported; neither changes the order.

### `algodrill.arrays`

- `remove_duplicates(nums)`: a new list keeping each value of a sorted input once.
- `remove_duplicates_keep_two(nums)`: the same, keeping each value at most twice.
- `search_rotated(nums, target)`: index of `target` in a rotated sorted
  array of distinct values, or `-1`.
- `contains_rotated(nums, target)`: whether `target` is in a rotated sorted
  array that may contain repeated values.

### `algodrill.strings`

- `is_palindrome(text)`: whether the ASCII letters of `text` read the same
  forwards and backwards, ignoring case. Every other character, digits
  included, is ignored.

### `algodrill.sorting`

Each function sorts a mutable sequence ascending **in place** and returns `None`:
`heap_sort`, `insertion_sort`, `merge_sort` (stable), `quick_sort`
(first-element pivot), `selection_sort` and `bubble_sort` (stops early
after a pass without a swap).

- `sort_colors(nums)`: groups 0s, then 1s, then 2s in one pass; any other
  value is treated like 1.
- `merge_sorted(nums1, m, nums2, n)`: merges the first `n` values of
  `nums2` into the first `m` values of `nums1`, filling the first `m + n`
  slots of `nums1`. Raises `ValueError` for negative counts, when `nums1`
  is shorter than `m + n`, or when `nums2` is shorter than `n`.

### `algodrill.search`

- `find_kth_largest(nums, k)` (quickselect) and `find_kth_largest_heap(nums, k)`
  (max-heap): the k-th largest value, counting from 1. The input is not
  modified. Both raise `ValueError` unless `1 <= k <= len(nums)`.
- `search_matrix(matrix, target)`: search a matrix whose rows and columns
  both ascend.
- `search_sorted_matrix(matrix, target)`: binary search in a matrix that
  ascends in row-major order.

Both matrix searches return `False` for an empty matrix.

### `algodrill.dynamic`

- `can_jump(nums)`, `can_jump_greedy(nums)`: whether the last index can be
  reached, where each value is the longest jump from its index.
- `min_jumps(nums)`: fewest jumps to the last index; raises `ValueError`
  when it cannot be reached.
- `max_subarray(nums)`: largest sum of a non-empty contiguous run; `0` for
  an empty sequence.
- `triangle_min_path(triangle)`: smallest top-to-bottom path sum; raises
  `ValueError` for an empty triangle.
- `min_palindrome_cut(text)`: fewest cuts that split `text` into palindromes.
- `length_of_longest_substring(text)`: length of the longest substring with
  no repeated character.
- `max_profit(prices)`: best profit from a single buy and later sell.
- `max_profit_unlimited(prices)`: best profit from any number of trades.

### `algodrill.wordladder`

- `ladder_length(begin, end, words)`: number of words (counting `begin`
  and `end`) in the shortest chain where each step changes one letter to a
  lowercase letter and lands on a word in `words`. Returns `0` when `words`
  is empty, `end` is not in `words`, or no chain exists.
- `ladder_length_dfs(begin, end, words)`: the same answer by exhaustive
  depth-first search; a step may change one character to any character.
  Its running time grows quickly with the size of `words`.

### `algodrill.combinatorics`

- `permutations(nums)`: every ordering of `nums`. Values are tracked by
  value, so an input with a repeated value gives an empty list, as does an
  empty input.
- `palindrome_partitions(text)`: every way to split `text` into palindromic
  pieces, shortest first pieces first; an empty list for empty text.

### `algodrill.trees`

- `TreeNode(val, left=None, right=None)`: a binary tree node.
- `preorder_traversal`, `inorder_traversal`, `postorder_traversal`: values
  in depth-first order, computed without recursion.
- `level_order`, `level_order_bottom`, `level_order_zigzag`: values grouped
  by level, top-down, bottom-up, or alternating direction.
- `sorted_array_to_bst(nums)`: a height-balanced search tree from ascending
  values; `None` for an empty input.

## Examples

```python
from algodrill.linked import ListNode, reverse_list
from algodrill.lru import LRUCache
from algodrill.dynamic import max_subarray, min_jumps
from algodrill.sorting import heap_sort
from algodrill.trees import sorted_array_to_bst, level_order
from algodrill.wordladder import ladder_length

head = ListNode.from_values([0, 1, 2, 3])
print(reverse_list(head).to_list())          # [3, 2, 1, 0]

cache = LRUCache(2)
cache.set(1, 1)
cache.set(2, 2)
cache.set(3, 3)                              # evicts key 1
print(cache.get(1))                          # -1
print(cache)                                 # 3:3 2:2

print(max_subarray([-2, 1, -3, 4, -1, 2, 1, -5, 4]))   # 6
print(min_jumps([2, 3, 1, 1, 4]))                      # 2

nums = [4, 2, 8, 5, 7, 1, 0, 9, 3, 6]
heap_sort(nums)
print(nums)                                  # [0, 1, 2, ..., 9]

root = sorted_array_to_bst([1, 2, 3, 4, 5])
print(level_order(root))

print(ladder_length("hit", "cog", ["hot", "dot", "dog", "lot", "log", "cog"]))  # 5
```