"""Authorized Keys Routes: CRUD over /{serverType}/{serverName}/authorized_keys (JSON only).

Invariants:
    - POST scopes the new key to (serverType, serverName)
    - GET/PUT/DELETE by id ignore the server scope in the URL; the id is global
    - Request bodies use the {"ssh-key": {...}} envelope; responses are flat
    - Writes commit only when the service returns Ok
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Path, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from computer_keys.api.error_handlers import failure_response
from computer_keys.core.domain_types import STORAGE_ID_MAX, STORAGE_ID_MIN, SshKeyId
from computer_keys.core.outcome import Err, Ok
from computer_keys.infrastructure.database import commit_outcome, get_db
from computer_keys.repositories.ssh_key_repository import SqlSshKeyRepository
from computer_keys.schemas.error import ErrorResponse
from computer_keys.schemas.ssh_key import (
    SshKeyRequest, SshKeyResponse, SshKeyUpdateRequest,
)
from computer_keys.services.ssh_key_service import SshKeyService

logger = logging.getLogger(__name__)
router = APIRouter(
    prefix="/{server_type}/{server_name}/authorized_keys", tags=["SSH Keys"],
)

_NOT_FOUND = {404: {"model": ErrorResponse, "description": "Key not found"}}
_BAD_REQUEST = {400: {"model": ErrorResponse, "description": "Invalid input data"}}

KeyIdPath = Annotated[int, Path(ge=STORAGE_ID_MIN, le=STORAGE_ID_MAX)]


def get_ssh_key_service(db: AsyncSession = Depends(get_db)) -> SshKeyService:
    return SshKeyService(SqlSshKeyRepository(db))


@router.post(
    "", status_code=status.HTTP_201_CREATED, response_model=SshKeyResponse,
    responses=_BAD_REQUEST,
)
async def add_ssh_key(
    request: Request,
    server_type: str,
    server_name: str,
    body: SshKeyRequest,
    db: AsyncSession = Depends(get_db),
    service: SshKeyService = Depends(get_ssh_key_service),
):
    """Add an SSH public key to the server's authorized_keys."""
    outcome = await service.add(server_type, server_name, body)
    match await commit_outcome(db, outcome):
        case Ok(value=ssh_key):
            return SshKeyResponse.from_entity(ssh_key)
        case Err() as err:
            return failure_response(err, request)


@router.get("", response_model=list[SshKeyResponse])
async def list_ssh_keys(
    request: Request,
    server_type: str,
    server_name: str,
    service: SshKeyService = Depends(get_ssh_key_service),
):
    """Get all SSH keys of the server."""
    match await service.list(server_type, server_name):
        case Ok(value=keys):
            return [SshKeyResponse.from_entity(k) for k in keys]
        case Err() as err:
            return failure_response(err, request)


@router.get("/{key_id}", response_model=SshKeyResponse, responses=_NOT_FOUND)
async def get_ssh_key(
    request: Request,
    server_type: str,
    server_name: str,
    key_id: KeyIdPath,
    service: SshKeyService = Depends(get_ssh_key_service),
):
    """Get a specific SSH key by id."""
    match await service.get_by_id(SshKeyId(key_id)):
        case Ok(value=ssh_key):
            return SshKeyResponse.from_entity(ssh_key)
        case Err() as err:
            return failure_response(err, request)


@router.put(
    "/{key_id}", response_model=SshKeyResponse,
    responses={**_NOT_FOUND, **_BAD_REQUEST},
)
async def update_ssh_key(
    request: Request,
    server_type: str,
    server_name: str,
    key_id: KeyIdPath,
    body: SshKeyUpdateRequest,
    db: AsyncSession = Depends(get_db),
    service: SshKeyService = Depends(get_ssh_key_service),
):
    """Update an existing SSH key; absent fields are left unchanged."""
    outcome = await service.update(SshKeyId(key_id), body)
    match await commit_outcome(db, outcome):
        case Ok(value=ssh_key):
            return SshKeyResponse.from_entity(ssh_key)
        case Err() as err:
            return failure_response(err, request)


@router.delete(
    "/{key_id}", status_code=status.HTTP_204_NO_CONTENT, responses=_NOT_FOUND,
)
async def delete_ssh_key(
    request: Request,
    server_type: str,
    server_name: str,
    key_id: KeyIdPath,
    db: AsyncSession = Depends(get_db),
    service: SshKeyService = Depends(get_ssh_key_service),
):
    """Remove an SSH key."""
    match await commit_outcome(db, await service.delete(SshKeyId(key_id))):
        case Ok():
            return Response(status_code=status.HTTP_204_NO_CONTENT)
        case Err() as err:
            return failure_response(err, request)
