"""Pydantic Schemas: request/response contracts for both resources.

Invariants:
    - Schemas validate at the system boundary (request bodies, responses)
    - Required-field messages come from core/messages.py

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
