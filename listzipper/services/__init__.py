"""Services Layer — orchestrate core calls for the API and the batch printer.

Invariants:
    - Services log and raise typed errors; the core does neither
    - Script dispatch uses an explicit dict mapping (no auto-discovery)

Design Decisions:
    - One module per collaborator: user-input scripts, file batches
"""
