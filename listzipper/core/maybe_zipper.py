"""Maybe List Zipper — the fallible wrapper: a cursor (IsZ) or no cursor at all (NOT_Z).

Invariants:
    - NOT_Z is the only absent value; IsNotZ() always returns that same instance
    - Every step applied to NOT_Z yields NOT_Z (chains short-circuit, nothing is raised)
    - from_list(items) is NOT_Z iff items is empty
    - to_list_z(from_list(items)) == list(items)

Design Decisions:
    - Sum type over None: a dedicated absent variant can carry methods (bind/lift) and
      prints as "><", and None stays available as an ordinary element value
    - bind/lift methods on both variants so pipelines read left to right:
      from_list(xs).bind(move_right).lift(end).bind(swap_left)
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from listzipper.core.list_zipper import ListZipper, to_list
from listzipper.core.side import EMPTY_SIDE, Side

T = TypeVar("T")


@dataclass(frozen=True)
class IsZ(Generic[T]):
    """A present cursor."""

    zipper: ListZipper[T]

    def bind(self, step: Callable[[ListZipper[T]], "MaybeListZipper[T]"]) -> "MaybeListZipper[T]":
        return step(self.zipper)

    def lift(self, step: Callable[[ListZipper[T]], ListZipper[T]]) -> "MaybeListZipper[T]":
        return IsZ(step(self.zipper))

    def __str__(self) -> str:
        return str(self.zipper)


class IsNotZ:
    """No cursor here: empty source or a move past either end."""

    _instance: "IsNotZ | None" = None

    def __new__(cls) -> "IsNotZ":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def bind(self, step: Callable) -> "IsNotZ":
        return self

    def lift(self, step: Callable) -> "IsNotZ":
        return self

    def __reduce__(self):
        return (IsNotZ, ())

    def __repr__(self) -> str:
        return "NOT_Z"

    def __str__(self) -> str:
        return "><"


NOT_Z = IsNotZ()

MaybeListZipper = Union[IsZ[T], IsNotZ]


# ─── Construction ────────────────────────────────────────────────

def from_list(items: Iterable[T]) -> MaybeListZipper[T]:
    """Focus on the first element; NOT_Z for an empty sequence."""
    values = list(items)
    if not values:
        return NOT_Z
    return IsZ(ListZipper(EMPTY_SIDE, values[0], Side.of(values[1:])))


def from_list_at(items: Iterable[T], position: int) -> MaybeListZipper[T]:
    """Focus on the element at `position`; NOT_Z when out of bounds."""
    values = list(items)
    if not 0 <= position < len(values):
        return NOT_Z
    return IsZ(ListZipper(
        EMPTY_SIDE.push_all(values[:position]),
        values[position],
        Side.of(values[position + 1:]),
    ))


def from_optional(z: ListZipper[T] | None) -> MaybeListZipper[T]:
    return NOT_Z if z is None else IsZ(z)


# ─── Elimination ─────────────────────────────────────────────────

def to_optional(mz: MaybeListZipper[T]) -> ListZipper[T] | None:
    match mz:
        case IsZ(zipper=z):
            return z
        case _:
            return None


def to_list_z(mz: MaybeListZipper[T]) -> list[T]:
    match mz:
        case IsZ(zipper=z):
            return to_list(z)
        case _:
            return []


def is_z(mz: MaybeListZipper[T]) -> bool:
    return isinstance(mz, IsZ)


# ─── Composition ─────────────────────────────────────────────────

def as_zipper(
    step: Callable[[ListZipper[T]], ListZipper[T]], mz: MaybeListZipper[T],
) -> MaybeListZipper[T]:
    """Lift a total step over the wrapper."""
    return mz.lift(step)


def as_maybe_zipper(
    step: Callable[[ListZipper[T]], MaybeListZipper[T]], mz: MaybeListZipper[T],
) -> MaybeListZipper[T]:
    """Apply a fallible step to a present cursor; NOT_Z passes through."""
    return mz.bind(step)
