"""Core Layer: pure domain logic, no IO, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - Rule checks are pure and deterministic; they return Err or None

Design Decisions:
    - Functional core separated from imperative shell
"""
