"""Maybe List Zipper — tests for the fallible wrapper and its composition.

Tests cover:
    - from_list: NOT_Z iff empty; focus on the head otherwise
    - from_list_at: focus at every valid position, NOT_Z out of bounds
    - Round trip: to_list_z(from_list(xs)) == xs
    - NOT_Z is a singleton, prints as "><", and short-circuits bind / lift chains
    - to_optional / from_optional round trip
"""

import copy
import pickle

import pytest

from listzipper.core.list_zipper import to_list, zipper
from listzipper.core.maybe_zipper import (
    NOT_Z, IsNotZ, IsZ, as_maybe_zipper, as_zipper, from_list, from_list_at,
    from_optional, is_z, to_list_z, to_optional,
)
from listzipper.core.mutation import swap_left
from listzipper.core.navigation import end, move_left, move_right

SAMPLES = [[1], [1, 2], [1, 2, 3], list("abcdefg"), [None, 0, None]]


# ─── Construction ────────────────────────────────────────────────

def test_from_list_focuses_on_head():
    assert from_list([1, 2, 3]) == IsZ(zipper([], 1, [2, 3]))


def test_from_list_of_empty_is_not_z():
    assert from_list([]) is NOT_Z
    assert from_list(iter(())) is NOT_Z


@pytest.mark.parametrize("items", SAMPLES)
def test_round_trip(items):
    assert to_list_z(from_list(items)) == items


def test_round_trip_of_empty_is_empty_list():
    assert to_list_z(from_list([])) == []


@pytest.mark.parametrize("items", SAMPLES)
def test_from_list_at_every_position_linearizes_back(items):
    for position in range(len(items)):
        mz = from_list_at(items, position)
        assert isinstance(mz, IsZ)
        assert mz.zipper.focus == items[position]
        assert len(mz.zipper.lefts) == position
        assert to_list(mz.zipper) == items


def test_from_list_at_places_lefts_nearest_first():
    assert from_list_at([1, 2, 3, 4, 5, 6, 7], 3) == IsZ(zipper([3, 2, 1], 4, [5, 6, 7]))


@pytest.mark.parametrize("position", [-1, 3, 100])
def test_from_list_at_out_of_bounds_is_not_z(position):
    assert from_list_at([1, 2, 3], position) is NOT_Z


# ─── NOT_Z ───────────────────────────────────────────────────────

def test_not_z_is_a_singleton():
    assert IsNotZ() is NOT_Z
    assert copy.deepcopy(NOT_Z) is NOT_Z
    assert pickle.loads(pickle.dumps(NOT_Z)) is NOT_Z


def test_display():
    assert str(NOT_Z) == "><"
    assert repr(NOT_Z) == "NOT_Z"
    assert str(IsZ(zipper([1], 2, []))) == "[1] >2< []"


def test_is_z():
    assert is_z(from_list([1]))
    assert not is_z(NOT_Z)


# ─── Composition ─────────────────────────────────────────────────

def test_chain_reads_left_to_right():
    result = from_list([1, 2, 3, 4]).bind(move_right).lift(end).bind(swap_left)
    assert result == IsZ(zipper([4, 2, 1], 3, []))


def test_chain_short_circuits_after_failure():
    calls = []

    def spy(z):
        calls.append(z)
        return IsZ(z)

    result = from_list([1, 2]).bind(move_left).bind(spy).lift(end)
    assert result is NOT_Z
    assert calls == []


def test_as_zipper_and_as_maybe_zipper():
    mz = from_list([1, 2, 3])
    assert as_zipper(end, mz) == IsZ(zipper([2, 1], 3, []))
    assert as_maybe_zipper(move_right, mz) == IsZ(zipper([1], 2, [3]))
    assert as_zipper(end, NOT_Z) is NOT_Z
    assert as_maybe_zipper(move_right, NOT_Z) is NOT_Z


def test_optional_round_trip():
    z = zipper([1], 2, [3])
    assert to_optional(IsZ(z)) == z
    assert to_optional(NOT_Z) is None
    assert from_optional(z) == IsZ(z)
    assert from_optional(None) is NOT_Z
    assert to_optional(from_optional(z)) == z
