"""Capability Protocols — narrow contracts the derived-view overlay relies on.

Invariants:
    - Each protocol names exactly the operations the overlay calls, nothing more
    - Implementations live next to their values (core/effects.py), never in the overlay
    - The overlay stays ignorant of any concrete effect

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Applicative is the whole contract traverse needs: lift a plain value (pure) and
      combine two effectful values with a binary function (map2)
"""

from collections.abc import Callable
from typing import Any, Protocol, TypeVar

T = TypeVar("T")

Predicate = Callable[[T], bool]
Endo = Callable[[T], T]


class Applicative(Protocol):
    """Contract for an effect threaded through traverse."""
    def pure(self, value: Any) -> Any: ...
    def map2(self, fn: Callable[[Any, Any], Any], fa: Any, fb: Any) -> Any: ...
