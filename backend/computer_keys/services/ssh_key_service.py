"""SSH Key Service: business rules for per-server authorized keys.

Invariants:
    - add(): shape check first, then (server_type, server_name, public_key)
      must be new; a unique-index violation maps to KEY_ALREADY_EXISTS
    - get_by_id/update/delete: the id alone identifies the key; the server scope
      in the URL is not re-checked
    - update(): partial merge of type, public, comment; the merged type/public pair
      must still pass the shape check
    - Never commits: the caller commits on Ok and rolls back on Err
"""

import logging

from sqlalchemy.exc import IntegrityError

from computer_keys.core import messages
from computer_keys.core.domain_types import SshKeyId
from computer_keys.core.enforce_key_shape import check_key_shape
from computer_keys.core.errors import ErrorKind
from computer_keys.core.merge_patch import merge_fields
from computer_keys.core.outcome import Err, Ok, Outcome
from computer_keys.core.repository_protocols import SshKeyLike, SshKeyRepository
from computer_keys.models.ssh_key import SshKey
from computer_keys.schemas.ssh_key import SshKeyRequest, SshKeyUpdateRequest

logger = logging.getLogger(__name__)

_NOT_FOUND = Err(ErrorKind.KEY_NOT_FOUND, messages.SSH_KEY_NOT_FOUND)
_ALREADY_EXISTS = Err(ErrorKind.KEY_ALREADY_EXISTS, messages.SSH_KEY_ALREADY_EXISTS)


class SshKeyService:
    """CRUD over authorized keys."""

    def __init__(self, repository: SshKeyRepository):
        self.repository = repository

    async def add(
        self, server_type: str, server_name: str, request: SshKeyRequest,
    ) -> Outcome[SshKeyLike]:
        """Register a key for the server (server_type, server_name)."""
        key = request.ssh_key
        failure = check_key_shape(key.type, key.public_key)
        if failure:
            logger.warning(f"Rejected {key.type} key for {server_type}/{server_name}")
            return failure

        if await self.repository.exists_by_server_and_public_key(
            server_type, server_name, key.public_key,
        ):
            return _ALREADY_EXISTS

        entity = SshKey(
            server_type=server_type,
            server_name=server_name,
            key_type=key.type,
            public_key=key.public_key,
            comment=key.comment,
        )
        try:
            saved = await self.repository.save(entity)
        except IntegrityError:
            logger.warning(f"Unique index rejected key for {server_type}/{server_name}")
            return _ALREADY_EXISTS
        logger.info(f"Added SSH key {saved.id} to {server_type}/{server_name}")
        return Ok(saved)

    async def get_by_id(self, key_id: SshKeyId) -> Outcome[SshKeyLike]:
        ssh_key = await self.repository.find_by_id(key_id)
        if ssh_key is None:
            return _NOT_FOUND
        return Ok(ssh_key)

    async def list(
        self, server_type: str, server_name: str,
    ) -> Outcome[list[SshKeyLike]]:
        return Ok(await self.repository.find_by_server(server_type, server_name))

    async def update(
        self, key_id: SshKeyId, request: SshKeyUpdateRequest,
    ) -> Outcome[SshKeyLike]:
        """Merge the provided fields into key `key_id`."""
        ssh_key = await self.repository.find_by_id(key_id)
        if ssh_key is None:
            return _NOT_FOUND

        patch = request.ssh_key
        failure = check_key_shape(
            patch.type or ssh_key.key_type,
            patch.public_key or ssh_key.public_key,
        )
        if failure:
            return failure

        applied = merge_fields(ssh_key, request.changes())
        try:
            saved = await self.repository.save(ssh_key)
        except IntegrityError:
            logger.warning(f"Update of SSH key {key_id} collides with an existing key")
            return _ALREADY_EXISTS
        logger.info(f"Updated SSH key {key_id}: {applied}")
        return Ok(saved)

    async def delete(self, key_id: SshKeyId) -> Outcome[None]:
        if await self.repository.find_by_id(key_id) is None:
            return _NOT_FOUND
        await self.repository.delete_by_id(key_id)
        logger.info(f"Deleted SSH key {key_id}")
        return Ok(None)
