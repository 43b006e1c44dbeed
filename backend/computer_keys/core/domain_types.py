"""Domain Types: rich types that replace bare primitives across the codebase.

Invariants:
    - ComputerId and SshKeyId wrap storage integers; never compared across resources
    - Storage ids fit a signed 64-bit column; ids outside that range are rejected at the edge
    - SshKeyType is the complete set of accepted key types
    - SSH_KEY_TYPE_PATTERN and SshKeyType agree

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

import re
from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

ComputerId = NewType("ComputerId", int)
SshKeyId = NewType("SshKeyId", int)

# Ids are stored as signed 64-bit integers
STORAGE_ID_MIN = -(2**63)
STORAGE_ID_MAX = 2**63 - 1


# ─── Enums ───────────────────────────────────────────────────────

class SshKeyType(str, Enum):
    """Accepted authorized_keys key types."""
    RSA = "ssh-rsa"
    ED25519 = "ssh-ed25519"


SSH_KEY_TYPE_PATTERN = re.compile(r"^(ssh-rsa|ssh-ed25519)$")


# ─── Shape limits (characters of the base64 blob) ───────────────

RSA_MIN_LENGTH = 300
ED25519_MIN_LENGTH = 40
ED25519_MAX_LENGTH = 100


# ─── Media Types ─────────────────────────────────────────────────

class MediaType(str, Enum):
    """Representations the computer resource can produce and consume."""
    JSON = "application/json"
    XML = "application/xml"
