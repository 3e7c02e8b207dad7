"""Cursor Script — tests for validating and threading named operations.

Tests cover:
    - A full script of moves and edits reaches the expected cursor
    - NOT_Z halts the script and records halted_at; later steps are skipped
    - PartialMove halts with the last present cursor and the available count
    - Construction failure is NOT_Z with halted_at None
    - Unknown ops / missing arguments / oversize input raise before any step runs
"""

import logging

import pytest

from listzipper.core.domain_types import CursorOp, PartialMove
from listzipper.core.errors import InputTooLargeError, InvalidStepError, UnknownOperationError
from listzipper.core.list_zipper import zipper
from listzipper.core.maybe_zipper import NOT_Z, IsZ
from listzipper.services.cursor_script import CursorStep, resolve_step, run_script

SEVEN = [1, 2, 3, 4, 5, 6, 7]


# ─── Successful scripts ──────────────────────────────────────────

def test_empty_script_returns_starting_cursor():
    outcome = run_script(SEVEN, [], focus_index=3)
    assert outcome.cursor == IsZ(zipper([3, 2, 1], 4, [5, 6, 7]))
    assert outcome.steps_applied == 0
    assert outcome.halted_at is None


def test_script_threads_every_step():
    steps = [
        CursorStep(CursorOp.MOVE_RIGHT),
        CursorStep("end"),
        CursorStep(CursorOp.SWAP_LEFT),
        CursorStep(CursorOp.MOVE_LEFT_N, n=2),
        CursorStep(CursorOp.SET_FOCUS, value=40),
    ]
    outcome = run_script([1, 2, 3, 4], steps)
    assert outcome.cursor == IsZ(zipper([1], 40, [4, 3]))
    assert outcome.steps_applied == 5
    assert outcome.halted_at is None


def test_find_matches_by_equality():
    outcome = run_script(SEVEN, [CursorStep(CursorOp.FIND_RIGHT, value=6)])
    assert outcome.cursor.zipper.focus == 6


def test_loop_steps_never_halt():
    outcome = run_script([1, 2], [CursorStep(CursorOp.MOVE_LEFT_LOOP)] * 3)
    assert outcome.cursor == IsZ(zipper([1], 2, []))
    assert outcome.steps_applied == 3


def test_none_is_a_legal_value():
    outcome = run_script([1, 2], [CursorStep(CursorOp.INSERT_PUSH_RIGHT, value=None)])
    assert outcome.cursor == IsZ(zipper([], None, [1, 2]))


# ─── Halting ─────────────────────────────────────────────────────

def test_not_z_halts_and_skips_remaining_steps():
    steps = [
        CursorStep(CursorOp.MOVE_RIGHT),
        CursorStep(CursorOp.MOVE_RIGHT),
        CursorStep(CursorOp.START),
    ]
    outcome = run_script([1, 2], steps)
    assert outcome.cursor is NOT_Z
    assert outcome.steps_applied == 1
    assert outcome.halted_at == 1


def test_partial_move_keeps_last_cursor():
    steps = [
        CursorStep(CursorOp.MOVE_RIGHT),
        CursorStep(CursorOp.MOVE_LEFT_N_CHECKED, n=4),
        CursorStep(CursorOp.END),
    ]
    outcome = run_script(SEVEN, steps, focus_index=2)
    assert outcome.cursor == IsZ(zipper([3, 2, 1], 4, [5, 6, 7]))
    assert outcome.partial_move == PartialMove(3)
    assert outcome.halted_at == 1
    assert outcome.steps_applied == 1


def test_checked_move_within_range_continues():
    outcome = run_script(SEVEN, [CursorStep(CursorOp.MOVE_RIGHT_N_CHECKED, n=6)])
    assert outcome.cursor == IsZ(zipper([6, 5, 4, 3, 2, 1], 7, []))
    assert outcome.partial_move is None


@pytest.mark.parametrize("items, focus_index", [([], 0), ([1, 2], 2)])
def test_construction_failure_is_not_z(items, focus_index):
    outcome = run_script(items, [CursorStep(CursorOp.MOVE_LEFT)], focus_index)
    assert outcome.cursor is NOT_Z
    assert outcome.steps_applied == 0
    assert outcome.halted_at is None


def test_halt_is_logged(caplog):
    with caplog.at_level(logging.INFO, logger="listzipper.services.cursor_script"):
        run_script([1], [CursorStep(CursorOp.MOVE_LEFT)])
    record = caplog.records[-1]
    assert record.op == "move_left"
    assert record.halted_at == 0


# ─── Validation ──────────────────────────────────────────────────

def test_unknown_operation_raises_with_step_position():
    with pytest.raises(UnknownOperationError) as exc_info:
        run_script(SEVEN, [CursorStep(CursorOp.START), CursorStep("jump")])
    assert exc_info.value.context.step == 1


@pytest.mark.parametrize("op", [CursorOp.MOVE_LEFT_N, CursorOp.NTH])
def test_counted_op_requires_n(op):
    with pytest.raises(InvalidStepError):
        resolve_step(CursorStep(op), 0)


@pytest.mark.parametrize("op", [CursorOp.FIND_LEFT, CursorOp.SET_FOCUS])
def test_valued_op_requires_value(op):
    with pytest.raises(InvalidStepError):
        resolve_step(CursorStep(op), 0)


def test_invalid_later_step_prevents_earlier_steps():
    steps = [CursorStep(CursorOp.MOVE_RIGHT), CursorStep(CursorOp.NTH)]
    with pytest.raises(InvalidStepError) as exc_info:
        run_script(SEVEN, steps)
    assert exc_info.value.context.op == "nth"


def test_item_limit(monkeypatch):
    monkeypatch.setenv("LISTZIPPER_MAX_ITEMS", "3")
    with pytest.raises(InputTooLargeError) as exc_info:
        run_script([1, 2, 3, 4], [])
    assert exc_info.value.field_name == "items"


def test_step_limit(monkeypatch):
    monkeypatch.setenv("LISTZIPPER_MAX_STEPS", "1")
    with pytest.raises(InputTooLargeError) as exc_info:
        run_script([1], [CursorStep(CursorOp.START)] * 2)
    assert exc_info.value.field_name == "steps"
