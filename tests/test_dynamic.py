import pytest
from hypothesis import given
from hypothesis import strategies as st

from algodrill.dynamic import (
    can_jump,
    can_jump_greedy,
    length_of_longest_substring,
    max_profit,
    max_profit_unlimited,
    max_subarray,
    min_jumps,
    min_palindrome_cut,
    triangle_min_path,
)

REACHABLE = [2, 3, 1, 1, 4]
BLOCKED = [3, 2, 1, 0, 4]

jump_lists = st.lists(st.integers(min_value=0, max_value=5), max_size=30)


@pytest.mark.parametrize("check", [can_jump, can_jump_greedy])
def test_can_jump_source_examples(check):
    assert check(REACHABLE)
    assert not check(BLOCKED)


@pytest.mark.parametrize("check", [can_jump, can_jump_greedy])
def test_can_jump_trivial_lengths(check):
    assert check([])
    assert check([0])


@given(nums=jump_lists)
def test_jump_checks_agree(nums):
    assert can_jump(nums) == can_jump_greedy(nums)


def test_min_jumps_source_example():
    assert min_jumps(REACHABLE) == 2


def test_min_jumps_unreachable_raises():
    with pytest.raises(ValueError):
        min_jumps(BLOCKED)


def test_min_jumps_single_element():
    assert min_jumps([0]) == 0


@given(nums=jump_lists)
def test_min_jumps_consistent_with_reachability(nums):
    if can_jump(nums):
        steps = min_jumps(nums)
        assert 0 <= steps <= max(len(nums) - 1, 0)
        assert (steps == 0) == (len(nums) <= 1)
    else:
        with pytest.raises(ValueError):
            min_jumps(nums)


def test_max_subarray_source_example():
    assert max_subarray([-2, 1, -3, 4, -1, 2, 1, -5, 4]) == 6


def test_max_subarray_empty_and_single():
    assert max_subarray([]) == 0
    assert max_subarray([-7]) == -7


@given(nums=st.lists(st.integers(-100, 100), min_size=1, max_size=40))
def test_max_subarray_bounds(nums):
    best = max_subarray(nums)
    assert best >= max(nums)
    assert best >= sum(nums)


@given(nums=st.lists(st.integers(0, 100), min_size=1, max_size=40))
def test_max_subarray_of_non_negatives_is_total(nums):
    assert max_subarray(nums) == sum(nums)


def test_triangle_source_example():
    triangle = [[2], [3, 4], [6, 5, 7], [4, 1, 8, 3]]
    assert triangle_min_path(triangle) == 11


def test_triangle_is_not_modified():
    triangle = [[2], [3, 4], [6, 5, 7]]
    triangle_min_path(triangle)
    assert triangle == [[2], [3, 4], [6, 5, 7]]


def test_triangle_single_row():
    assert triangle_min_path([[9]]) == 9


def test_triangle_empty_raises():
    with pytest.raises(ValueError):
        triangle_min_path([])


@pytest.mark.parametrize("text", ["", "a", "aa", "aba", "racecar", "abccba"])
def test_palindrome_needs_no_cut(text):
    assert min_palindrome_cut(text) == 0


@pytest.mark.parametrize("text", ["ab", "abcdef", "xyz"])
def test_distinct_letters_need_every_cut(text):
    assert min_palindrome_cut(text) == len(text) - 1


@given(text=st.text(alphabet="abc", max_size=15))
def test_palindrome_cut_upper_bound(text):
    assert 0 <= min_palindrome_cut(text) <= max(len(text) - 1, 0)


@given(text=st.text(alphabet="abc", min_size=1, max_size=10))
def test_palindrome_cut_of_doubled_text(text):
    assert min_palindrome_cut(text + text[::-1]) == 0


def test_longest_substring_of_distinct_chars():
    assert length_of_longest_substring("abcdef") == len("abcdef")
    assert length_of_longest_substring("") == 0


def test_longest_substring_of_repeated_char():
    assert length_of_longest_substring("aaaa") == len(set("aaaa"))


@given(text=st.text(alphabet="abcde", max_size=30))
def test_longest_substring_bounds(text):
    length = length_of_longest_substring(text)
    assert length <= len(set(text))
    assert (length == 0) == (text == "")


@given(text=st.text(alphabet="abcde", max_size=30))
def test_longest_substring_is_attained(text):
    length = length_of_longest_substring(text)
    windows = [text[start:start + length] for start in range(len(text) - length + 1)]
    assert any(len(set(window)) == length for window in windows)


def test_profit_on_rising_prices():
    prices = [1, 2, 3, 4, 5]
    assert max_profit(prices) == prices[-1] - prices[0]
    assert max_profit_unlimited(prices) == prices[-1] - prices[0]


def test_profit_on_falling_prices():
    prices = [5, 4, 3, 2, 1]
    assert max_profit(prices) == 0
    assert max_profit_unlimited(prices) == 0


def test_profit_needs_two_prices():
    assert max_profit([3]) == 0
    assert max_profit_unlimited([3]) == 0


@given(prices=st.lists(st.integers(0, 100), max_size=30))
def test_unlimited_trades_never_earn_less(prices):
    single = max_profit(prices)
    assert 0 <= single <= max_profit_unlimited(prices)


@given(prices=st.lists(st.integers(0, 100), min_size=2, max_size=30))
def test_single_trade_is_a_real_trade(prices):
    profit = max_profit(prices)
    assert profit == 0 or any(
        prices[sell] - prices[buy] == profit
        for buy in range(len(prices))
        for sell in range(buy + 1, len(prices))
    )