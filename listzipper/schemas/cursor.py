"""Cursor Schemas — Pydantic models for the cursor playground endpoints.

Invariants:
    - CursorStepIn.op is a CursorOp: unknown names are rejected at the boundary
    - value is "given" only when present in the payload, so null is a legal element
    - CursorView.present is False exactly when the cursor is NOT_Z; sides and focus
      are then empty / null
    - Sides are reported nearest-first, items in original order

Design Decisions:
    - Response renders the cursor for display only; there is no endpoint that accepts
      a cursor back
"""

from typing import Any

from pydantic import BaseModel, Field

from listzipper.core.domain_types import CursorOp


class CursorStepIn(BaseModel):
    """One operation in a cursor script."""
    op: CursorOp
    n: int | None = None
    value: Any = None


class CursorScriptRequest(BaseModel):
    items: list[Any]
    focus_index: int = Field(0, ge=0)
    steps: list[CursorStepIn] = Field(default_factory=list)


class CursorView(BaseModel):
    """Display form of a MaybeListZipper."""
    present: bool
    lefts: list[Any] = Field(default_factory=list)
    focus: Any = None
    rights: list[Any] = Field(default_factory=list)
    index: int | None = None
    items: list[Any] = Field(default_factory=list)
    rendered: str


class CursorScriptResponse(BaseModel):
    cursor: CursorView
    steps_applied: int
    halted_at: int | None = None
    partial_move: int | None = None


class DistinctRequest(BaseModel):
    items: list[int]
    limit: int | None = None


class DistinctResponse(BaseModel):
    logs: list[str]
    value: list[int] | None
    aborted: bool
