"""Core Layer — the list zipper and its fallible wrapper; pure, no IO, no logging.

Invariants:
    - No module in core/ imports from services/, api/, schemas/ or infrastructure/
    - All functions are pure and deterministic; boundaries are values (NOT_Z, PartialMove)

Design Decisions:
    - Functional core separated from imperative shell
"""
