"""listzipper — bidirectional cursor over an ordered sequence, with a fallible wrapper.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)

Design Decisions:
    - Empty __init__.py: explicit imports only, no star exports
"""
