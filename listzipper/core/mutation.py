"""Structural Mutation — swap, delete, insert and truncate at the focus.

Invariants:
    - "Mutation" returns a new zipper; the input is never modified
    - swap_* touch only the focus and its neighbour; the rest keeps its order
    - delete_pull_X(insert_push_X(v, z)) == IsZ(z) for both sides
    - Deleting with nothing to pull in is NOT_Z: a zipper always has a focus
    - drop_* are idempotent
"""

from typing import TypeVar

from listzipper.core.list_zipper import ListZipper
from listzipper.core.maybe_zipper import NOT_Z, IsZ, MaybeListZipper
from listzipper.core.side import EMPTY_SIDE

T = TypeVar("T")


# ─── Swap ────────────────────────────────────────────────────────

def swap_left(z: ListZipper[T]) -> MaybeListZipper[T]:
    """Exchange the focus with its left neighbour; the focus moves with it.

    swap_left(zipper([3, 2, 1], 4, [5, 6, 7]))  ->  [4, 2, 1] >3< [5, 6, 7]
    """
    if not z.lefts:
        return NOT_Z
    return IsZ(ListZipper(z.lefts.tail.push(z.focus), z.lefts.head, z.rights))


def swap_right(z: ListZipper[T]) -> MaybeListZipper[T]:
    if not z.rights:
        return NOT_Z
    return IsZ(ListZipper(z.lefts, z.rights.head, z.rights.tail.push(z.focus)))


# ─── Delete / insert ─────────────────────────────────────────────

def delete_pull_left(z: ListZipper[T]) -> MaybeListZipper[T]:
    """Remove the focus and pull the nearest left value into its place."""
    if not z.lefts:
        return NOT_Z
    return IsZ(ListZipper(z.lefts.tail, z.lefts.head, z.rights))


def delete_pull_right(z: ListZipper[T]) -> MaybeListZipper[T]:
    """Remove the focus and pull the nearest right value into its place."""
    if not z.rights:
        return NOT_Z
    return IsZ(ListZipper(z.lefts, z.rights.head, z.rights.tail))


def insert_push_left(value: T, z: ListZipper[T]) -> ListZipper[T]:
    """Make value the focus, pushing the old focus onto the left side.

    insert_push_left(15, zipper([3, 2, 1], 4, [5, 6, 7]))  ->  [4, 3, 2, 1] >15< [5, 6, 7]
    """
    return ListZipper(z.lefts.push(z.focus), value, z.rights)


def insert_push_right(value: T, z: ListZipper[T]) -> ListZipper[T]:
    return ListZipper(z.lefts, value, z.rights.push(z.focus))


# ─── Truncate ────────────────────────────────────────────────────

def drop_lefts(z: ListZipper[T]) -> ListZipper[T]:
    return ListZipper(EMPTY_SIDE, z.focus, z.rights)


def drop_rights(z: ListZipper[T]) -> ListZipper[T]:
    return ListZipper(z.lefts, z.focus, EMPTY_SIDE)
