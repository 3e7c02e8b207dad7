"""Cursor Script — apply a user-supplied list of named operations to a sequence.

Invariants:
    - Every step is validated before the first one runs (unknown op, missing argument,
      size limits): a bad script raises, it never half-runs
    - Once the cursor is NOT_Z the remaining steps are skipped; halted_at is the index
      of the step that produced it
    - A checked N-step move that comes back as PartialMove halts the script, keeps the
      last present cursor and reports the partial count
    - Construction failure (empty items, focus out of range) is NOT_Z with halted_at None

Design Decisions:
    - Explicit dict mapping CursorOp -> step builder (no getattr dispatch on user input)
    - find_* steps match by equality with the step's value
"""

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from functools import partial
from typing import Any

from listzipper.config import get_settings
from listzipper.core.domain_types import COUNTED_OPS, VALUED_OPS, CursorOp, PartialMove
from listzipper.core.errors import (
    ErrorContext, InputTooLargeError, InvalidStepError, UnknownOperationError,
)
from listzipper.core.list_zipper import ListZipper, set_focus
from listzipper.core.maybe_zipper import IsNotZ, IsZ, MaybeListZipper, from_list_at
from listzipper.core.mutation import (
    delete_pull_left, delete_pull_right, drop_lefts, drop_rights,
    insert_push_left, insert_push_right, swap_left, swap_right,
)
from listzipper.core.navigation import (
    end, find_left, find_right, move_left, move_left_loop, move_left_n,
    move_left_n_checked, move_right, move_right_loop, move_right_n,
    move_right_n_checked, nth, start,
)

logger = logging.getLogger(__name__)

MISSING: Any = object()

StepFn = Callable[[ListZipper], "MaybeListZipper | ListZipper | PartialMove"]


@dataclass(frozen=True)
class CursorStep:
    """One named operation; n and value only for the ops that take them."""
    op: CursorOp | str
    n: int | None = None
    value: Any = MISSING


@dataclass(frozen=True)
class ScriptOutcome:
    cursor: MaybeListZipper
    steps_applied: int
    halted_at: int | None = None
    partial_move: PartialMove | None = None


def _total(fn: Callable[[ListZipper], ListZipper]) -> StepFn:
    return lambda z: IsZ(fn(z))


def _equals(value: Any) -> Callable[[Any], bool]:
    return lambda x: x == value


_OPERATIONS: dict[CursorOp, Callable[[CursorStep], StepFn]] = {
    CursorOp.MOVE_LEFT: lambda s: move_left,
    CursorOp.MOVE_RIGHT: lambda s: move_right,
    CursorOp.MOVE_LEFT_LOOP: lambda s: _total(move_left_loop),
    CursorOp.MOVE_RIGHT_LOOP: lambda s: _total(move_right_loop),
    CursorOp.MOVE_LEFT_N: lambda s: partial(move_left_n, s.n),
    CursorOp.MOVE_RIGHT_N: lambda s: partial(move_right_n, s.n),
    CursorOp.MOVE_LEFT_N_CHECKED: lambda s: partial(move_left_n_checked, s.n),
    CursorOp.MOVE_RIGHT_N_CHECKED: lambda s: partial(move_right_n_checked, s.n),
    CursorOp.FIND_LEFT: lambda s: partial(find_left, _equals(s.value)),
    CursorOp.FIND_RIGHT: lambda s: partial(find_right, _equals(s.value)),
    CursorOp.NTH: lambda s: partial(nth, s.n),
    CursorOp.START: lambda s: _total(start),
    CursorOp.END: lambda s: _total(end),
    CursorOp.SWAP_LEFT: lambda s: swap_left,
    CursorOp.SWAP_RIGHT: lambda s: swap_right,
    CursorOp.DELETE_PULL_LEFT: lambda s: delete_pull_left,
    CursorOp.DELETE_PULL_RIGHT: lambda s: delete_pull_right,
    CursorOp.INSERT_PUSH_LEFT: lambda s: _total(partial(insert_push_left, s.value)),
    CursorOp.INSERT_PUSH_RIGHT: lambda s: _total(partial(insert_push_right, s.value)),
    CursorOp.DROP_LEFTS: lambda s: _total(drop_lefts),
    CursorOp.DROP_RIGHTS: lambda s: _total(drop_rights),
    CursorOp.SET_FOCUS: lambda s: _total(partial(set_focus, s.value)),
}


def resolve_step(step: CursorStep, position: int) -> tuple[CursorOp, StepFn]:
    """Validate one step and build the function that applies it."""
    try:
        op = CursorOp(step.op)
    except ValueError:
        raise UnknownOperationError(
            str(step.op), ErrorContext(op=str(step.op), step=position),
        ) from None

    if op in COUNTED_OPS and not isinstance(step.n, int):
        raise InvalidStepError(
            op.value, "an integer 'n' is required",
            ErrorContext(op=op.value, step=position),
        )
    if op in VALUED_OPS and step.value is MISSING:
        raise InvalidStepError(
            op.value, "a 'value' is required",
            ErrorContext(op=op.value, step=position),
        )
    return op, _OPERATIONS[op](step)


def _check_limit(field_name: str, size: int, limit: int) -> None:
    if size > limit:
        raise InputTooLargeError(field_name, size, limit)


def run_script(
    items: Sequence[Any], steps: Sequence[CursorStep], focus_index: int = 0,
) -> ScriptOutcome:
    """Build a cursor over items and thread it through steps."""
    settings = get_settings()
    _check_limit("items", len(items), settings.max_items)
    _check_limit("steps", len(steps), settings.max_steps)
    resolved = [resolve_step(step, i) for i, step in enumerate(steps)]

    current = from_list_at(items, focus_index)
    if isinstance(current, IsNotZ):
        logger.info(
            f"No cursor over {len(items)} item(s) at focus {focus_index}",
        )
        return ScriptOutcome(current, 0)

    for position, (op, apply_step) in enumerate(resolved):
        result = apply_step(current.zipper)
        match result:
            case PartialMove():
                logger.info(
                    f"Step {position} ({op.value}) stopped short",
                    extra={"op": op.value, "step": position,
                           "partial_move": result.available},
                )
                return ScriptOutcome(current, position, position, result)
            case ListZipper():
                current = IsZ(result)
            case IsNotZ():
                logger.info(
                    f"Step {position} ({op.value}) left no cursor; "
                    f"skipping {len(resolved) - position - 1} step(s)",
                    extra={"op": op.value, "step": position, "halted_at": position},
                )
                return ScriptOutcome(result, position, position)
            case _:
                current = result
        logger.debug(
            f"Applied {op.value}", extra={"op": op.value, "step": position},
        )

    return ScriptOutcome(current, len(resolved))
