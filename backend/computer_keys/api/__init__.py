"""API Layer: FastAPI routes, negotiation, middleware and error translation.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Routes never contain business rules (delegate to services)
    - Errors are always rendered as the JSON error envelope
"""
