"""SSH Key Service: business rules driven through an in-memory repository.

Tests cover:
    - add(): shape check before duplicate check, per-server uniqueness, index race
    - get_by_id/list: id is global, list is per server
    - update(): partial merge, merged shape re-checked, collision -> KEY_ALREADY_EXISTS
    - delete(): removes, unknown id -> KEY_NOT_FOUND
"""

import pytest

from computer_keys.core.domain_types import SshKeyId
from computer_keys.core.errors import ErrorKind
from computer_keys.core.outcome import Err, Ok
from computer_keys.schemas.ssh_key import SshKeyRequest, SshKeyUpdateRequest
from computer_keys.services.ssh_key_service import SshKeyService
from fakes import FakeSshKeyRepository

ED25519_KEY = "AAAAC3NzaC1lZDI1NTE5AAAAIOiKKC7lLUcyvJMo1gjvMr56XvOq814Hhin0OCYFDqT4"
OTHER_ED25519_KEY = "AAAAC3NzaC1lZDI1NTE5AAAAIBbW9nT2Y4pXkR0cFJv3QpKJH1sXqk4n0m9dQ2s8Zr7A"
RSA_KEY = "AAAAB3NzaC1yc2EAAAADAQABAAABAQ" + "C" * 300


def _request(key_type="ssh-ed25519", public=ED25519_KEY, comment="x") -> SshKeyRequest:
    return SshKeyRequest.model_validate(
        {"ssh-key": {"type": key_type, "public": public, "comment": comment}},
    )


def _update(**fields) -> SshKeyUpdateRequest:
    return SshKeyUpdateRequest.model_validate({"ssh-key": fields})


@pytest.fixture
def repository():
    return FakeSshKeyRepository()


@pytest.fixture
def service(repository):
    return SshKeyService(repository)


# ─── add ─────────────────────────────────────────────────────────

async def test_add_assigns_id_and_scope(service):
    outcome = await service.add("build-server", "jenkins", _request())
    assert isinstance(outcome, Ok)
    key = outcome.value
    assert key.id == 1
    assert (key.server_type, key.server_name) == ("build-server", "jenkins")
    assert key.key_type == "ssh-ed25519"
    assert key.comment == "x"


async def test_add_duplicate_on_same_server(service):
    await service.add("build-server", "jenkins", _request())
    outcome = await service.add("build-server", "jenkins", _request())
    assert outcome == Err(ErrorKind.KEY_ALREADY_EXISTS, "SSH key already exists")


async def test_same_key_on_other_server_is_allowed(service):
    await service.add("build-server", "jenkins", _request())
    outcome = await service.add("build-server", "gitlab", _request())
    assert isinstance(outcome, Ok)


async def test_add_race_lost_at_unique_index():
    repository = FakeSshKeyRepository(race=True)
    service = SshKeyService(repository)
    await service.add("build-server", "jenkins", _request())
    outcome = await service.add("build-server", "jenkins", _request())
    assert outcome == Err(ErrorKind.KEY_ALREADY_EXISTS, "SSH key already exists")
    assert len(repository.rows) == 1


async def test_add_short_ed25519(service, repository):
    outcome = await service.add("build-server", "jenkins", _request(public="TEST-ED25519"))
    assert outcome == Err(
        ErrorKind.INVALID_SSH_KEY,
        "The content of the public key is invalid for the type 'ed25519'",
    )
    assert repository.rows == []


async def test_add_short_rsa(service):
    outcome = await service.add(
        "build-server", "jenkins", _request(key_type="ssh-rsa", public="TEST-RSA"),
    )
    assert outcome == Err(
        ErrorKind.INVALID_SSH_KEY,
        "The content of the public key is invalid for the type 'ssh-rsa'",
    )


async def test_shape_checked_before_duplicate(service):
    await service.add("build-server", "jenkins", _request(key_type="ssh-rsa", public=RSA_KEY))
    outcome = await service.add(
        "build-server", "jenkins", _request(key_type="ssh-ed25519", public=RSA_KEY),
    )
    assert outcome.kind == ErrorKind.INVALID_SSH_KEY


# ─── get / list ──────────────────────────────────────────────────

async def test_get_by_id(service):
    created = await service.add("build-server", "jenkins", _request())
    outcome = await service.get_by_id(SshKeyId(created.value.id))
    assert outcome == Ok(created.value)


async def test_get_unknown_id(service):
    outcome = await service.get_by_id(SshKeyId(42))
    assert outcome == Err(ErrorKind.KEY_NOT_FOUND, "SSH key not found")


async def test_list_is_scoped_to_server(service):
    await service.add("build-server", "jenkins", _request())
    await service.add("build-server", "gitlab", _request())
    await service.add("build-server", "jenkins", _request(public=OTHER_ED25519_KEY))
    outcome = await service.list("build-server", "jenkins")
    assert [k.public_key for k in outcome.value] == [ED25519_KEY, OTHER_ED25519_KEY]


async def test_list_of_unknown_server_is_empty(service):
    assert await service.list("db", "nowhere") == Ok([])


# ─── update ──────────────────────────────────────────────────────

async def test_update_comment_only(service):
    created = await service.add("build-server", "jenkins", _request())
    outcome = await service.update(SshKeyId(created.value.id), _update(comment="new"))
    assert isinstance(outcome, Ok)
    key = outcome.value
    assert key.comment == "new"
    assert key.public_key == ED25519_KEY
    assert key.key_type == "ssh-ed25519"


async def test_update_rechecks_merged_shape(service):
    created = await service.add("build-server", "jenkins", _request())
    outcome = await service.update(SshKeyId(created.value.id), _update(type="ssh-rsa"))
    assert outcome.kind == ErrorKind.INVALID_SSH_KEY
    assert created.value.key_type == "ssh-ed25519"


async def test_update_collision(service):
    await service.add("build-server", "jenkins", _request())
    second = await service.add("build-server", "jenkins", _request(public=OTHER_ED25519_KEY))
    outcome = await service.update(SshKeyId(second.value.id), _update(public=ED25519_KEY))
    assert outcome == Err(ErrorKind.KEY_ALREADY_EXISTS, "SSH key already exists")


async def test_update_unknown_id(service):
    outcome = await service.update(SshKeyId(9), _update(comment="x"))
    assert outcome == Err(ErrorKind.KEY_NOT_FOUND, "SSH key not found")


# ─── delete ──────────────────────────────────────────────────────

async def test_delete_then_get_is_not_found(service):
    created = await service.add("build-server", "jenkins", _request())
    key_id = SshKeyId(created.value.id)
    assert await service.delete(key_id) == Ok(None)
    outcome = await service.get_by_id(key_id)
    assert outcome.kind == ErrorKind.KEY_NOT_FOUND


async def test_delete_unknown_id(service):
    outcome = await service.delete(SshKeyId(3))
    assert outcome == Err(ErrorKind.KEY_NOT_FOUND, "SSH key not found")
