"""Repositories: SQLAlchemy implementations of core/repository_protocols.py.

Invariants:
    - One repository per table, bound to the request's AsyncSession
    - Repositories flush but never commit; the transaction boundary belongs to the caller
"""
