"""Codec Layer: external representations (JSON, XML) <-> internal records.

Invariants:
    - Decoding never touches the database
    - Decode failures are returned as Err(VALIDATION), never raised
"""
