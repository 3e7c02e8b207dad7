"""Distinct — order-preserving deduplication, with an abortable, logging variant.

Invariants:
    - First occurrences are kept, in their original order
    - A value above `limit` aborts: the result value is None, never a partial list
    - Aborting keeps every log entry written before the offending value, then adds
      "aborting > <limit>: <value>" and stops
    - Every even value logs "even number: <value>", duplicates included

Design Decisions:
    - Seen-set threaded through a plain loop; the Logger value carries the log so an
      abort never loses what was already written
"""

from collections.abc import Hashable, Iterable
from typing import TypeVar

from listzipper.core.effects import Logger

H = TypeVar("H", bound=Hashable)

DEFAULT_LIMIT: int = 100


def distinct(items: Iterable[H]) -> list[H]:
    seen: set = set()
    kept = []
    for item in items:
        if item not in seen:
            seen.add(item)
            kept.append(item)
    return kept


def distinct_bounded(items: Iterable[int], limit: int = DEFAULT_LIMIT) -> list[int] | None:
    """Deduplicate, or None as soon as a value exceeds limit."""
    return distinct_logged(items, limit).value


def distinct_logged(
    items: Iterable[int], limit: int = DEFAULT_LIMIT,
) -> Logger[str, list[int] | None]:
    """Deduplicate while logging even values; abort above limit, keeping the log.

    [1, 2, 3, 2, 6]       ->  logs: even 2, even 2, even 6      value: [1, 2, 3, 6]
    [1, 2, 3, 2, 6, 106]  ->  logs: ...same, "aborting > 100: 106"  value: None
    """
    logs: list[str] = []
    seen: set[int] = set()
    kept: list[int] = []
    for item in items:
        if item > limit:
            logs.append(f"aborting > {limit}: {item}")
            return Logger(tuple(logs), None)
        if item % 2 == 0:
            logs.append(f"even number: {item}")
        if item not in seen:
            seen.add(item)
            kept.append(item)
    return Logger(tuple(logs), kept)
