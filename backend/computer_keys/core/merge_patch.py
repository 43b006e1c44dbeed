"""Partial Merge: overwrite only the fields a patch actually carries.

Invariants:
    - A field is applied iff it is present in `changes` AND its value is not None
    - Lists are replaced whole, never merged element-wise
    - Returns the names of the fields that were applied, in `changes` order

Design Decisions:
    - Presence is decided by the caller's dict (built from the request model),
      not by the storage layer's null semantics
"""

from collections.abc import Mapping


def merge_fields(target: object, changes: Mapping[str, object]) -> list[str]:
    """Set every non-None value in `changes` onto `target`."""
    applied = []
    for name, value in changes.items():
        if value is None:
            continue
        if isinstance(value, list):
            value = list(value)
        setattr(target, name, value)
        applied.append(name)
    return applied
