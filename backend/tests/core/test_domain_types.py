"""Domain Types: key type pattern and enums agree."""

from typing import get_type_hints

from computer_keys.core.domain_types import (
    ComputerId, MediaType, SSH_KEY_TYPE_PATTERN, STORAGE_ID_MAX, STORAGE_ID_MIN,
    SshKeyId, SshKeyType,
)
from computer_keys.core.repository_protocols import ComputerLike, SshKeyLike


def test_identity_types_wrap_int():
    assert ComputerId(1) == 1
    assert SshKeyId(7) == 7


def test_stored_records_carry_identity_types():
    assert get_type_hints(ComputerLike)["id"] is ComputerId
    assert get_type_hints(SshKeyLike)["id"] is SshKeyId


def test_storage_id_range_is_signed_64_bit():
    assert STORAGE_ID_MAX == 9223372036854775807
    assert STORAGE_ID_MIN == -STORAGE_ID_MAX - 1


def test_pattern_accepts_every_key_type():
    for key_type in SshKeyType:
        assert SSH_KEY_TYPE_PATTERN.match(key_type.value)


def test_pattern_rejects_other_types():
    assert not SSH_KEY_TYPE_PATTERN.match("ssh-dss")
    assert not SSH_KEY_TYPE_PATTERN.match("ecdsa-sha2-nistp256")
    assert not SSH_KEY_TYPE_PATTERN.match("ssh-rsa ")


def test_media_types_serialize_to_strings():
    assert MediaType.JSON.value == "application/json"
    assert MediaType.XML.value == "application/xml"
