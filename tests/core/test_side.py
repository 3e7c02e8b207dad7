"""Side — tests for the persistent nearest-first stack.

Tests cover:
    - Construction keeps nearest-first order; EMPTY_SIDE is empty and falsy
    - Side(head, tail) needs both arguments; a lone value is never dropped
    - push / head / tail never modify the original
    - split_at returns the first n values and shares the remainder (no copy)
    - push_all puts the last pushed value nearest
    - Value equality and hashing
"""

import pytest

from listzipper.core.side import EMPTY_SIDE, Side


# ─── Construction ────────────────────────────────────────────────

def test_of_keeps_nearest_first_order():
    side = Side.of([3, 2, 1])
    assert list(side) == [3, 2, 1]
    assert side.head == 3
    assert len(side) == 3


def test_empty_side_is_falsy_and_empty():
    assert not EMPTY_SIDE
    assert len(EMPTY_SIDE) == 0
    assert list(EMPTY_SIDE) == []
    assert Side.of([]) == EMPTY_SIDE


def test_head_and_tail_of_empty_side_raise():
    with pytest.raises(IndexError):
        EMPTY_SIDE.head
    with pytest.raises(IndexError):
        EMPTY_SIDE.tail


def test_constructor_requires_a_tail():
    with pytest.raises(TypeError):
        Side(5)
    with pytest.raises(TypeError):
        Side(5, [1])
    assert list(Side(5, EMPTY_SIDE)) == [5]


def test_none_is_a_legal_element():
    side = EMPTY_SIDE.push(None)
    assert len(side) == 1
    assert side.head is None


# ─── Persistence ─────────────────────────────────────────────────

def test_push_leaves_original_untouched():
    side = Side.of([2, 1])
    pushed = side.push(3)
    assert list(pushed) == [3, 2, 1]
    assert list(side) == [2, 1]
    assert pushed.tail is side


def test_push_all_pushes_in_order():
    side = Side.of([9]).push_all([1, 2, 3])
    assert list(side) == [3, 2, 1, 9]


def test_reverse():
    assert list(Side.of([1, 2, 3]).reverse()) == [3, 2, 1]
    assert EMPTY_SIDE.reverse() == EMPTY_SIDE


def test_reversed_iterates_far_end_first():
    assert list(reversed(Side.of([3, 2, 1]))) == [1, 2, 3]


def test_map_preserves_order():
    assert list(Side.of([1, 2, 3]).map(lambda x: x * 10)) == [10, 20, 30]


# ─── split_at ────────────────────────────────────────────────────

def test_split_at_returns_prefix_and_shared_remainder():
    side = Side.of([5, 4, 3, 2, 1])
    taken, rest = side.split_at(2)
    assert taken == [5, 4]
    assert list(rest) == [3, 2, 1]
    assert rest is side.tail.tail


def test_split_at_zero_and_full_length():
    side = Side.of([1, 2])
    assert side.split_at(0) == ([], side)
    taken, rest = side.split_at(2)
    assert taken == [1, 2]
    assert rest == EMPTY_SIDE


def test_split_at_out_of_range_raises():
    with pytest.raises(IndexError):
        Side.of([1]).split_at(2)
    with pytest.raises(IndexError):
        Side.of([1]).split_at(-1)


# ─── Equality ────────────────────────────────────────────────────

def test_equal_content_means_equal_sides():
    assert Side.of([1, 2, 3]) == EMPTY_SIDE.push(3).push(2).push(1)
    assert hash(Side.of([1, 2, 3])) == hash(Side.of([1, 2, 3]))


def test_different_content_or_length_is_unequal():
    assert Side.of([1, 2]) != Side.of([1, 2, 3])
    assert Side.of([1, 2]) != Side.of([2, 1])


def test_side_is_not_equal_to_a_list():
    assert Side.of([1, 2]) != [1, 2]


def test_repr_shows_elements():
    assert repr(Side.of([1, 2])) == "Side([1, 2])"
