"""List Zipper — a focussed position with the values to its left and right.

For example, taking [0, 1, 2, 3, 4, 5, 6] with the focus on the fourth element:

    >>> z = zipper([2, 1, 0], 3, [4, 5, 6])
    >>> str(z)
    '[2, 1, 0] >3< [4, 5, 6]'
    >>> to_list(z)
    [0, 1, 2, 3, 4, 5, 6]

Invariants:
    - reverse(lefts) ++ [focus] ++ rights is the sequence in original order, always
    - Both sides are nearest-first: lefts[0] and rights[0] are adjacent to the focus
    - A ListZipper always has a focus; "no cursor" lives in maybe_zipper.NOT_Z
    - Values are immutable: every operation returns a new ListZipper

Design Decisions:
    - Frozen dataclass: value equality and hashing for free, no identity beyond content
    - Operations are module functions taking the zipper last, not methods
      (ADR: pure functions compose; the wrapper lifts them without adapters)
"""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Generic, TypeVar

from listzipper.core.capabilities import Endo
from listzipper.core.domain_types import Position
from listzipper.core.side import Side

T = TypeVar("T")


@dataclass(frozen=True)
class ListZipper(Generic[T]):
    """Cursor over a non-empty sequence — pure value, no IO."""

    lefts: Side[T]
    focus: T
    rights: Side[T]

    def __str__(self) -> str:
        return render(self)


def zipper(lefts: Iterable[T], focus: T, rights: Iterable[T]) -> ListZipper[T]:
    """Build a zipper from plain iterables, both sides given nearest-first."""
    return ListZipper(Side.of(lefts), focus, Side.of(rights))


# ─── Accessors ───────────────────────────────────────────────────

def lefts(z: ListZipper[T]) -> list[T]:
    return list(z.lefts)


def rights(z: ListZipper[T]) -> list[T]:
    return list(z.rights)


def focus(z: ListZipper[T]) -> T:
    return z.focus


def has_left(z: ListZipper[T]) -> bool:
    """
    >>> has_left(zipper([1, 0], 2, [3, 4]))
    True
    >>> has_left(zipper([], 0, [1, 2]))
    False
    """
    return bool(z.lefts)


def has_right(z: ListZipper[T]) -> bool:
    return bool(z.rights)


def index(z: ListZipper[T]) -> Position:
    """Absolute 0-based position of the focus. O(1).

    >>> index(zipper([3, 2, 1], 4, [5, 6, 7]))
    3
    """
    return Position(len(z.lefts))


def to_list(z: ListZipper[T]) -> list[T]:
    """Linearize back to original order."""
    return [*reversed(z.lefts), z.focus, *z.rights]


# ─── Focus update ────────────────────────────────────────────────

def with_focus(fn: Endo[T], z: ListZipper[T]) -> ListZipper[T]:
    """
    >>> str(with_focus(lambda x: x + 1, zipper([1, 0], 2, [3, 4])))
    '[1, 0] >3< [3, 4]'
    """
    return ListZipper(z.lefts, fn(z.focus), z.rights)


def set_focus(value: T, z: ListZipper[T]) -> ListZipper[T]:
    return with_focus(lambda _: value, z)


# ─── Display ─────────────────────────────────────────────────────

def render(z: ListZipper[T]) -> str:
    return f"{list(z.lefts)!r} >{z.focus!r}< {list(z.rights)!r}"
