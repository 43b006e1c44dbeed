"""SSH Key Shape Enforcement: coarse length checks on the public key blob.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects
    - Return Err(INVALID_SSH_KEY) on violation, None on success
    - ssh-rsa: blob length >= 300
    - ssh-ed25519: 40 <= blob length <= 100 (inclusive)
    - Unknown types pass through; the type pattern is checked at the codec boundary

Design Decisions:
    - Length only, no base64 decoding or key parsing: this is a shape check,
      not cryptographic verification
"""

from computer_keys.core import messages
from computer_keys.core.domain_types import (
    SshKeyType, RSA_MIN_LENGTH, ED25519_MIN_LENGTH, ED25519_MAX_LENGTH,
)
from computer_keys.core.errors import ErrorKind
from computer_keys.core.outcome import Err


def check_rsa_shape(public_key: str) -> Err | None:
    """ssh-rsa blobs shorter than RSA_MIN_LENGTH are rejected."""
    if len(public_key) < RSA_MIN_LENGTH:
        return Err(ErrorKind.INVALID_SSH_KEY, messages.SSH_KEY_INVALID_RSA)
    return None


def check_ed25519_shape(public_key: str) -> Err | None:
    """ssh-ed25519 blobs must fall inside [ED25519_MIN_LENGTH, ED25519_MAX_LENGTH]."""
    if not ED25519_MIN_LENGTH <= len(public_key) <= ED25519_MAX_LENGTH:
        return Err(ErrorKind.INVALID_SSH_KEY, messages.SSH_KEY_INVALID_ED25519)
    return None


def check_key_shape(key_type: str, public_key: str) -> Err | None:
    """Dispatch to the type-specific check. Returns the failure or None."""
    if key_type == SshKeyType.RSA.value:
        return check_rsa_shape(public_key)
    if key_type == SshKeyType.ED25519.value:
        return check_ed25519_shape(public_key)
    return None
