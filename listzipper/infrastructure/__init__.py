"""Infrastructure Layer — cross-cutting concerns for the shell.

Invariants:
    - Infrastructure never imports from core/ domain logic

Design Decisions:
    - Logging setup kept out of core/: the core stays free of side effects
"""
