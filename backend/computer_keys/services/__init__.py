"""Services Layer: business rules for computers and authorized keys.

Invariants:
    - Services return Ok/Err outcomes and never commit
    - Services depend on repository Protocols, not on SQLAlchemy sessions
"""
