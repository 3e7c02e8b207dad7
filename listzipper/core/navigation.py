"""Navigation — single-step, N-step, wrap-around, search and absolute positioning.

Invariants:
    - Pure: every function returns a new value, the input zipper is untouched
    - to_list() of any non-NOT_Z result equals to_list() of the input
    - Reaching an edge is always observable (NOT_Z or PartialMove); only the *_loop
      variants wrap around instead, and they never fail
    - move_left / move_right are O(1); move_*_n(n) visit only the n nodes passed over
    - Negative counts delegate to the opposite direction with |n|
    - nth(n) never rewinds to the start first; it moves |n - index| steps

Design Decisions:
    - N-step moves split the first n values off the source side and push them onto the
      far side; the rest of the source side is shared, never copied or re-scanned
    - find_* is a fold of single steps so the first (nearest) match wins
"""

from collections.abc import Callable
from typing import TypeVar

from listzipper.core.capabilities import Predicate
from listzipper.core.domain_types import PartialMove
from listzipper.core.list_zipper import ListZipper
from listzipper.core.maybe_zipper import NOT_Z, IsNotZ, IsZ, MaybeListZipper
from listzipper.core.side import EMPTY_SIDE

T = TypeVar("T")


# ─── Single step ─────────────────────────────────────────────────

def move_left(z: ListZipper[T]) -> MaybeListZipper[T]:
    """Step one position left.

    move_left(zipper([3, 2, 1], 4, [5, 6, 7]))  ->  [2, 1] >3< [4, 5, 6, 7]
    move_left(zipper([], 1, [2, 3, 4]))  ->  ><
    """
    if not z.lefts:
        return NOT_Z
    return IsZ(ListZipper(z.lefts.tail, z.lefts.head, z.rights.push(z.focus)))


def move_right(z: ListZipper[T]) -> MaybeListZipper[T]:
    if not z.rights:
        return NOT_Z
    return IsZ(ListZipper(z.lefts.push(z.focus), z.rights.head, z.rights.tail))


def move_left_loop(z: ListZipper[T]) -> ListZipper[T]:
    """Move left, or from the first element jump to the last.

    move_left_loop(zipper([], 1, [2, 3, 4]))  ->  [3, 2, 1] >4< []
    """
    if z.lefts:
        return ListZipper(z.lefts.tail, z.lefts.head, z.rights.push(z.focus))
    far = z.rights.push(z.focus).reverse()
    return ListZipper(far.tail, far.head, EMPTY_SIDE)


def move_right_loop(z: ListZipper[T]) -> ListZipper[T]:
    """Move right, or from the last element jump to the first.

    move_right_loop(zipper([3, 2, 1], 4, []))  ->  [] >1< [2, 3, 4]
    """
    if z.rights:
        return ListZipper(z.lefts.push(z.focus), z.rights.head, z.rights.tail)
    far = z.lefts.push(z.focus).reverse()
    return ListZipper(EMPTY_SIDE, far.head, far.tail)


# ─── N steps ─────────────────────────────────────────────────────

def _shift_left(n: int, z: ListZipper[T]) -> ListZipper[T]:
    """Move n >= 1 positions left. Caller guarantees n <= len(z.lefts)."""
    passed, rest = z.lefts.split_at(n)
    return ListZipper(rest, passed[-1], z.rights.push(z.focus).push_all(passed[:-1]))


def _shift_right(n: int, z: ListZipper[T]) -> ListZipper[T]:
    """Move n >= 1 positions right. Caller guarantees n <= len(z.rights)."""
    passed, rest = z.rights.split_at(n)
    return ListZipper(z.lefts.push(z.focus).push_all(passed[:-1]), passed[-1], rest)


def move_left_n(n: int, z: ListZipper[T]) -> MaybeListZipper[T]:
    """Move the focus n positions left (right if n is negative).

    move_left_n(2, zipper([2, 1, 0], 3, [4, 5, 6]))  ->  [0] >1< [2, 3, 4, 5, 6]
    move_left_n(-1, zipper([2, 1, 0], 3, [4, 5, 6]))  ->  [3, 2, 1, 0] >4< [5, 6]
    """
    if n == 0:
        return IsZ(z)
    if n < 0:
        return move_right_n(-n, z)
    if n > len(z.lefts):
        return NOT_Z
    return IsZ(_shift_left(n, z))


def move_right_n(n: int, z: ListZipper[T]) -> MaybeListZipper[T]:
    """Move the focus n positions right (left if n is negative)."""
    if n == 0:
        return IsZ(z)
    if n < 0:
        return move_left_n(-n, z)
    if n > len(z.rights):
        return NOT_Z
    return IsZ(_shift_right(n, z))


def move_left_n_checked(n: int, z: ListZipper[T]) -> ListZipper[T] | PartialMove:
    """Like move_left_n, but on failure report how far the move could go.

    move_left_n_checked(4, zipper([3, 2, 1], 4, [5, 6, 7]))  ->  PartialMove(available=3)
    """
    if n < 0:
        return move_right_n_checked(-n, z)
    match move_left_n(n, z):
        case IsZ(zipper=moved):
            return moved
        case _:
            return PartialMove(len(z.lefts))


def move_right_n_checked(n: int, z: ListZipper[T]) -> ListZipper[T] | PartialMove:
    if n < 0:
        return move_left_n_checked(-n, z)
    match move_right_n(n, z):
        case IsZ(zipper=moved):
            return moved
        case _:
            return PartialMove(len(z.rights))


# ─── Search ──────────────────────────────────────────────────────

def _find(
    step: Callable[[ListZipper[T]], MaybeListZipper[T]],
    predicate: Predicate[T],
    z: ListZipper[T],
) -> MaybeListZipper[T]:
    moved = step(z)
    while True:
        match moved:
            case IsNotZ():
                return NOT_Z
            case IsZ(zipper=candidate) if predicate(candidate.focus):
                return moved
            case IsZ(zipper=candidate):
                moved = step(candidate)


def find_left(predicate: Predicate[T], z: ListZipper[T]) -> MaybeListZipper[T]:
    """Nearest element strictly left of the focus matching predicate.

    find_left(lambda x: x == 1, zipper([1, 2, 1], 3, [4, 5]))  ->  [2, 1] >1< [3, 4, 5]
    """
    return _find(move_left, predicate, z)


def find_right(predicate: Predicate[T], z: ListZipper[T]) -> MaybeListZipper[T]:
    """Nearest element strictly right of the focus matching predicate."""
    return _find(move_right, predicate, z)


# ─── Absolute positioning ────────────────────────────────────────

def start(z: ListZipper[T]) -> ListZipper[T]:
    if not z.lefts:
        return z
    return _shift_left(len(z.lefts), z)


def end(z: ListZipper[T]) -> ListZipper[T]:
    if not z.rights:
        return z
    return _shift_right(len(z.rights), z)


def nth(n: int, z: ListZipper[T]) -> MaybeListZipper[T]:
    """Move the focus to absolute position n, counting from the start.

    Moves relative to the current index, so only the |n - index| nodes in between are
    touched; at n == index the input cursor is returned unchanged.

    nth(1, zipper([3, 2, 1], 4, [5, 6, 7]))  ->  [1] >2< [3, 4, 5, 6, 7]
    nth(8, zipper([3, 2, 1], 4, [5, 6, 7]))  ->  ><
    """
    if n < 0:
        return NOT_Z
    return move_left_n(len(z.lefts) - n, z)
