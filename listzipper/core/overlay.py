"""Derived-View Overlay — per-element transform, zip-apply, "every position" views, traverse.

Invariants:
    - fmap preserves shape and order exactly; f is applied to each element once
    - extend(f, z): focus is f(z); lefts are f of each cursor reached by repeated
      move_left (nearest first, stopping at the edge); rights mirror with move_right
    - extend(extract, z) == z
    - traverse runs effects in original sequence order: lefts farthest-first, then
      the focus, then rights nearest-first
    - Every operation on NOT_Z yields NOT_Z (traverse: effect.pure(NOT_Z))

Design Decisions:
    - One function per capability, matching on ListZipper / IsZ / IsNotZ, with each
      variant implemented separately (no shared base class to inherit from)
    - extend is two bounded walks over move_left / move_right, not a generic comonad
"""

from collections.abc import Callable, Iterator
from typing import Any, TypeVar

from listzipper.core.capabilities import Applicative
from listzipper.core.list_zipper import ListZipper
from listzipper.core.maybe_zipper import NOT_Z, IsNotZ, IsZ, MaybeListZipper
from listzipper.core.navigation import move_left, move_right
from listzipper.core.side import EMPTY_SIDE, Side

T = TypeVar("T")
U = TypeVar("U")

Target = ListZipper | IsZ | IsNotZ


def extract(z: ListZipper[T]) -> T:
    """The value under the focus."""
    return z.focus


# ─── fmap ────────────────────────────────────────────────────────

def _fmap_zipper(fn: Callable[[T], U], z: ListZipper[T]) -> ListZipper[U]:
    return ListZipper(z.lefts.map(fn), fn(z.focus), z.rights.map(fn))


def fmap(fn: Callable[[T], U], target: Target) -> Target:
    """Apply fn to every element, keeping positions.

    fmap(lambda x: x + 1, zipper([3, 2, 1], 4, [5, 6, 7]))  ->  [4, 3, 2] >5< [6, 7, 8]
    """
    match target:
        case ListZipper():
            return _fmap_zipper(fn, target)
        case IsZ(zipper=z):
            return IsZ(_fmap_zipper(fn, z))
        case IsNotZ():
            return NOT_Z
    raise TypeError(f"fmap does not support {type(target).__name__}")


# ─── apply ───────────────────────────────────────────────────────

def _apply_zipper(fz: ListZipper[Callable[[T], U]], z: ListZipper[T]) -> ListZipper[U]:
    return ListZipper(
        Side.of([f(x) for f, x in zip(fz.lefts, z.lefts)]),
        fz.focus(z.focus),
        Side.of([f(x) for f, x in zip(fz.rights, z.rights)]),
    )


def apply(fz: Target, z: Target) -> Target:
    """Zip a cursor of functions with a cursor of values, position by position.

    Sides are paired nearest-first and cut to the shorter one.
    """
    match (fz, z):
        case (ListZipper(), ListZipper()):
            return _apply_zipper(fz, z)
        case (IsZ(zipper=functions), IsZ(zipper=values)):
            return IsZ(_apply_zipper(functions, values))
        case (IsZ() | IsNotZ(), IsZ() | IsNotZ()):
            return NOT_Z
    raise TypeError(
        f"apply does not support {type(fz).__name__} with {type(z).__name__}",
    )


# ─── extend ──────────────────────────────────────────────────────

def _walk(
    step: Callable[[ListZipper[T]], MaybeListZipper[T]], z: ListZipper[T],
) -> Iterator[ListZipper[T]]:
    """Yield each cursor reached by repeating step, nearest first."""
    moved = step(z)
    while isinstance(moved, IsZ):
        yield moved.zipper
        moved = step(moved.zipper)


def _extend_zipper(fn: Callable[[ListZipper[T]], U], z: ListZipper[T]) -> ListZipper[U]:
    return ListZipper(
        Side.of([fn(c) for c in _walk(move_left, z)]),
        fn(z),
        Side.of([fn(c) for c in _walk(move_right, z)]),
    )


def extend(fn: Callable[[Any], U], target: Target) -> Target:
    """Rebuild the cursor with fn applied to the cursor seen from every position.

    For the wrapper, fn receives each position wrapped in IsZ.
    """
    match target:
        case ListZipper():
            return _extend_zipper(fn, target)
        case IsZ(zipper=z):
            return IsZ(_extend_zipper(lambda c: fn(IsZ(c)), z))
        case IsNotZ():
            return NOT_Z
    raise TypeError(f"extend does not support {type(target).__name__}")


def duplicate(target: Target) -> Target:
    """Each position holds the cursor focused on it."""
    return extend(lambda c: c, target)


# ─── traverse ────────────────────────────────────────────────────

def _collect(fn: Callable[[T], Any], values, effect: Applicative):
    """Combine fn(v) over values; the resulting Side has the last value nearest."""
    acc = effect.pure(EMPTY_SIDE)
    for value in values:
        acc = effect.map2(Side.push, acc, fn(value))
    return acc


def _traverse_zipper(fn: Callable[[T], Any], z: ListZipper[T], effect: Applicative):
    lefts_effect = _collect(fn, reversed(z.lefts), effect)
    focus_effect = fn(z.focus)
    rights_effect = _collect(fn, z.rights, effect)
    with_focus = effect.map2(lambda ls, x: (ls, x), lefts_effect, focus_effect)
    return effect.map2(
        lambda lx, rs: ListZipper(lx[0], lx[1], rs.reverse()),
        with_focus, rights_effect,
    )


def traverse(fn: Callable[[T], Any], target: Target, effect: Applicative):
    """Run fn over every element in sequence order, collecting into one effect.

    traverse(lambda x: Some(x), zipper([2, 1], 3, [4]), OPTION)  ->  Some([2, 1] >3< [4])
    """
    match target:
        case ListZipper():
            return _traverse_zipper(fn, target, effect)
        case IsZ(zipper=z):
            return effect.map2(
                lambda moved, _: IsZ(moved),
                _traverse_zipper(fn, z, effect), effect.pure(None),
            )
        case IsNotZ():
            return effect.pure(NOT_Z)
    raise TypeError(f"traverse does not support {type(target).__name__}")
