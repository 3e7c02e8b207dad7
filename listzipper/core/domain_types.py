"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - Position is a 0-based distance from the start of the whole sequence
    - PartialMove carries how far a checked N-step move could actually go
    - Every operation a cursor script can name is a CursorOp member — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers for Position: zero runtime cost, full type-checker support
    - PartialMove as frozen dataclass: distinct tag from a successful move, compared by value
    - str Enums: request payloads and log extras carry the plain operation name
"""

from dataclasses import dataclass
from enum import Enum
from typing import NewType


# ─── Value Types ─────────────────────────────────────────────────

Position = NewType("Position", int)     # 0-based, < len(to_list(z))


@dataclass(frozen=True)
class PartialMove:
    """Failure report of a checked N-step move: elements available on the exhausted side."""
    available: int


# ─── Enums ───────────────────────────────────────────────────────

class CursorOp(str, Enum):
    """Operations a cursor script may apply, in the order they are documented."""
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    MOVE_LEFT_LOOP = "move_left_loop"
    MOVE_RIGHT_LOOP = "move_right_loop"
    MOVE_LEFT_N = "move_left_n"
    MOVE_RIGHT_N = "move_right_n"
    MOVE_LEFT_N_CHECKED = "move_left_n_checked"
    MOVE_RIGHT_N_CHECKED = "move_right_n_checked"
    FIND_LEFT = "find_left"
    FIND_RIGHT = "find_right"
    NTH = "nth"
    START = "start"
    END = "end"
    SWAP_LEFT = "swap_left"
    SWAP_RIGHT = "swap_right"
    DELETE_PULL_LEFT = "delete_pull_left"
    DELETE_PULL_RIGHT = "delete_pull_right"
    INSERT_PUSH_LEFT = "insert_push_left"
    INSERT_PUSH_RIGHT = "insert_push_right"
    DROP_LEFTS = "drop_lefts"
    DROP_RIGHTS = "drop_rights"
    SET_FOCUS = "set_focus"


# Operations that need a step count / a value argument
COUNTED_OPS: frozenset[CursorOp] = frozenset({
    CursorOp.MOVE_LEFT_N,
    CursorOp.MOVE_RIGHT_N,
    CursorOp.MOVE_LEFT_N_CHECKED,
    CursorOp.MOVE_RIGHT_N_CHECKED,
    CursorOp.NTH,
})
VALUED_OPS: frozenset[CursorOp] = frozenset({
    CursorOp.FIND_LEFT,
    CursorOp.FIND_RIGHT,
    CursorOp.INSERT_PUSH_LEFT,
    CursorOp.INSERT_PUSH_RIGHT,
    CursorOp.SET_FOCUS,
})
