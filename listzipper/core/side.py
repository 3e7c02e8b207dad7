"""Side — persistent nearest-first stack backing each half of a ListZipper.

Invariants:
    - Element 0 is the one adjacent to the focus; iteration runs outward
    - Nodes are never mutated after construction; tails are shared between stacks
    - len() is O(1): every node caches the length of the stack it heads
    - split_at(n) and push_all(values) visit only the n nodes they touch

Design Decisions:
    - Cons cells over tuples: push/pop are O(1) and the untouched remainder of a side
      is reused as-is, which keeps single steps O(1) and N-step moves O(n)
    - Value equality (element-wise), so two zippers with equal content compare equal
"""

from collections.abc import Callable, Iterable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T")
U = TypeVar("U")


class Side(Generic[T]):
    """Immutable singly-linked stack, nearest element first."""

    __slots__ = ("_head", "_tail", "_length")

    def __init__(self, head: T, tail: "Side[T]"):
        if not isinstance(tail, Side):
            raise TypeError(f"tail must be a Side, not {type(tail).__name__}")
        self._head = head
        self._tail = tail
        self._length = tail._length + 1

    @classmethod
    def _empty(cls) -> "Side[T]":
        """The bottom of every stack; only EMPTY_SIDE is built this way."""
        side = cls.__new__(cls)
        side._head = None
        side._tail = None
        side._length = 0
        return side

    @classmethod
    def of(cls, values: Iterable[T]) -> "Side[T]":
        """Build a side from values given nearest-first."""
        return EMPTY_SIDE.push_all(reversed(list(values)))

    # ─── Stack primitives ────────────────────────────────────────

    @property
    def head(self) -> T:
        if not self._length:
            raise IndexError("head of an empty side")
        return self._head

    @property
    def tail(self) -> "Side[T]":
        if not self._length:
            raise IndexError("tail of an empty side")
        return self._tail

    def push(self, value: T) -> "Side[T]":
        return Side(value, self)

    def push_all(self, values: Iterable[T]) -> "Side[T]":
        """Push each value in turn; the last one pushed ends up nearest."""
        side = self
        for value in values:
            side = Side(value, side)
        return side

    def split_at(self, n: int) -> tuple[list[T], "Side[T]"]:
        """Return the first n values (nearest-first) and the shared remainder.

        Requires 0 <= n <= len(self).
        """
        if not 0 <= n <= self._length:
            raise IndexError(f"cannot split {n} values off a side of {self._length}")
        taken = []
        node = self
        for _ in range(n):
            taken.append(node._head)
            node = node._tail
        return taken, node

    def reverse(self) -> "Side[T]":
        return EMPTY_SIDE.push_all(self)

    def map(self, fn: Callable[[T], U]) -> "Side[U]":
        return Side.of([fn(value) for value in self])

    # ─── Python protocols ────────────────────────────────────────

    def __len__(self) -> int:
        return self._length

    def __bool__(self) -> bool:
        return self._length > 0

    def __iter__(self) -> Iterator[T]:
        node = self
        while node._length:
            yield node._head
            node = node._tail

    def __reversed__(self) -> Iterator[T]:
        return reversed(list(self))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Side):
            return NotImplemented
        if self is other:
            return True
        if self._length != other._length:
            return False
        return all(a == b for a, b in zip(self, other))

    def __hash__(self) -> int:
        return hash(tuple(self))

    def __repr__(self) -> str:
        return f"Side({list(self)!r})"


EMPTY_SIDE: Side = Side._empty()
