"""Cursor Routes — run cursor scripts and the deduplication demo over user input.

Invariants:
    - POST /api/v1/cursors/run always answers 200 with a CursorView; an absent cursor
      is a normal result (present=false), not an error
    - Script validation failures surface as ListZipperError (400/413) via global handlers
    - POST /api/v1/cursors/distinct keeps the log even when the run aborts

Design Decisions:
    - Thin routes: scripting lives in services/cursor_script, dedup in core/distinct
"""

import logging

from fastapi import APIRouter

from listzipper.config import get_settings
from listzipper.core.distinct import distinct_logged
from listzipper.core.list_zipper import index, lefts, rights, to_list
from listzipper.core.maybe_zipper import IsZ, MaybeListZipper
from listzipper.schemas.cursor import (
    CursorScriptRequest, CursorScriptResponse, CursorStepIn, CursorView,
    DistinctRequest, DistinctResponse,
)
from listzipper.services.cursor_script import MISSING, CursorStep, run_script

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/cursors", tags=["cursors"])


def _to_step(step: CursorStepIn) -> CursorStep:
    value = step.value if "value" in step.model_fields_set else MISSING
    return CursorStep(op=step.op, n=step.n, value=value)


def _to_view(mz: MaybeListZipper) -> CursorView:
    match mz:
        case IsZ(zipper=z):
            return CursorView(
                present=True,
                lefts=lefts(z),
                focus=z.focus,
                rights=rights(z),
                index=index(z),
                items=to_list(z),
                rendered=str(z),
            )
        case _:
            return CursorView(present=False, rendered=str(mz))


@router.post("/run", response_model=CursorScriptResponse)
async def run_cursor_script(body: CursorScriptRequest):
    """Build a cursor over body.items and apply body.steps in order."""
    outcome = run_script(
        body.items, [_to_step(s) for s in body.steps], body.focus_index,
    )
    return CursorScriptResponse(
        cursor=_to_view(outcome.cursor),
        steps_applied=outcome.steps_applied,
        halted_at=outcome.halted_at,
        partial_move=(
            outcome.partial_move.available if outcome.partial_move else None
        ),
    )


@router.post("/distinct", response_model=DistinctResponse)
async def run_distinct(body: DistinctRequest):
    """Deduplicate body.items, logging even values and aborting above the limit."""
    limit = body.limit if body.limit is not None else get_settings().distinct_limit
    result = distinct_logged(body.items, limit)
    if result.value is None:
        logger.info(f"Distinct aborted after {len(result.logs)} log line(s)")
    return DistinctResponse(
        logs=list(result.logs), value=result.value, aborted=result.value is None,
    )
