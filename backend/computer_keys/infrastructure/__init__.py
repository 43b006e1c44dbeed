"""Infrastructure Layer: database session management and logging.

Invariants:
    - Infrastructure never contains business rules
    - Database failures are logged and re-raised, never swallowed
"""
