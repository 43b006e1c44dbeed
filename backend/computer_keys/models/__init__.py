"""ORM Models: SQLAlchemy declarative models for both resources.

Invariants:
    - All models inherit from Base (db/base.py)
    - No relationships between the two tables

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before create_all
"""

from computer_keys.models.computer import Computer  # noqa: F401
from computer_keys.models.ssh_key import SshKey  # noqa: F401
