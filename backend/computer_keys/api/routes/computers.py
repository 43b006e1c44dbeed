"""Computer Routes: CRUD over /computers with JSON/XML content negotiation.

Invariants:
    - GET /computers/{maker}, /computers/{maker}/{model} and /computers/{maker}/{model}/
      share one handler; model may be absent
    - Response media type follows Accept (JSON default); request bodies are decoded
      by Content-Type (XML for */xml and +xml, JSON otherwise)
    - Writes commit only when the service returns Ok
    - Errors are always the JSON envelope

Design Decisions:
    - Bodies read from Request and decoded by codec/computer_codec.py instead of a
      pydantic body parameter, so one handler accepts both encodings
"""

import logging

from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from computer_keys.api.error_handlers import failure_response
from computer_keys.api.negotiation import select_media_type
from computer_keys.codec.computer_codec import (
    encode_computer, encode_computers, parse_computer, to_payload,
)
from computer_keys.core.domain_types import MediaType
from computer_keys.core.outcome import Err, Ok
from computer_keys.infrastructure.database import commit_outcome, get_db
from computer_keys.repositories.computer_repository import SqlComputerRepository
from computer_keys.schemas.computer import ComputerPatch, ComputerPayload
from computer_keys.schemas.error import ErrorResponse
from computer_keys.services.computer_service import ComputerService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/computers", tags=["Computers"])

_NEGOTIATED = {
    "content": {
        MediaType.JSON.value: {},
        MediaType.XML.value: {},
    },
}
_COMPUTER_BODY = {
    "requestBody": {
        "required": True,
        "content": {
            MediaType.JSON.value: {
                "schema": {"$ref": "#/components/schemas/ComputerPayload"},
            },
            MediaType.XML.value: {
                "schema": {"$ref": "#/components/schemas/ComputerPayload"},
            },
        },
    },
}


def get_computer_service(db: AsyncSession = Depends(get_db)) -> ComputerService:
    return ComputerService(SqlComputerRepository(db))


def _accepted(request: Request) -> MediaType:
    return select_media_type(request.headers.get("accept"))


def _render(content: bytes, media_type: MediaType, status_code: int = 200) -> Response:
    return Response(
        content=content, media_type=media_type.value, status_code=status_code,
    )


@router.get(
    "", response_model=list[ComputerPayload],
    responses={200: _NEGOTIATED},
)
async def list_computers(
    request: Request,
    service: ComputerService = Depends(get_computer_service),
):
    """Get all computers."""
    media_type = _accepted(request)
    match await service.list():
        case Ok(value=computers):
            payloads = [to_payload(c) for c in computers]
            return _render(encode_computers(payloads, media_type), media_type)
        case Err() as err:
            return failure_response(err, request)


@router.get(
    "/{maker}/{model}", response_model=ComputerPayload,
    responses={
        200: _NEGOTIATED,
        403: {"model": ErrorResponse, "description": "Model parameter required"},
        404: {"model": ErrorResponse, "description": "Computer or maker not found"},
    },
)
@router.get("/{maker}/{model}/", include_in_schema=False)
@router.get(
    "/{maker}", response_model=ComputerPayload,
    responses={
        403: {"model": ErrorResponse, "description": "Model parameter required"},
        404: {"model": ErrorResponse, "description": "Maker not found"},
    },
)
@router.get("/{maker}/", include_in_schema=False)
async def get_computer(
    request: Request,
    maker: str,
    model: str | None = None,
    service: ComputerService = Depends(get_computer_service),
):
    """Get computer by maker and model. Returns JSON or XML based on Accept."""
    media_type = _accepted(request)
    match await service.get(maker, model):
        case Ok(value=computer):
            return _render(encode_computer(to_payload(computer), media_type), media_type)
        case Err() as err:
            return failure_response(err, request)


@router.post(
    "", status_code=status.HTTP_201_CREATED, response_model=ComputerPayload,
    openapi_extra=_COMPUTER_BODY,
    responses={
        201: _NEGOTIATED,
        400: {"model": ErrorResponse, "description": "Invalid input or duplicate"},
    },
)
async def create_computer(
    request: Request,
    db: AsyncSession = Depends(get_db),
    service: ComputerService = Depends(get_computer_service),
):
    """Create a new computer."""
    media_type = _accepted(request)
    parsed = parse_computer(
        await request.body(), request.headers.get("content-type"), ComputerPayload,
    )
    if isinstance(parsed, Err):
        return failure_response(parsed, request)

    match await commit_outcome(db, await service.create(parsed.value)):
        case Ok(value=computer):
            return _render(
                encode_computer(to_payload(computer), media_type), media_type,
                status.HTTP_201_CREATED,
            )
        case Err() as err:
            return failure_response(err, request)


@router.put(
    "/{maker}/{model}", response_model=ComputerPayload,
    openapi_extra=_COMPUTER_BODY,
    responses={
        200: _NEGOTIATED,
        400: {"model": ErrorResponse, "description": "Invalid input"},
        404: {"model": ErrorResponse, "description": "Computer not found"},
    },
)
async def update_computer(
    request: Request,
    maker: str,
    model: str,
    db: AsyncSession = Depends(get_db),
    service: ComputerService = Depends(get_computer_service),
):
    """Update an existing computer; absent fields are left unchanged."""
    media_type = _accepted(request)
    parsed = parse_computer(
        await request.body(), request.headers.get("content-type"), ComputerPatch,
    )
    if isinstance(parsed, Err):
        return failure_response(parsed, request)

    match await commit_outcome(db, await service.update(maker, model, parsed.value)):
        case Ok(value=computer):
            return _render(encode_computer(to_payload(computer), media_type), media_type)
        case Err() as err:
            return failure_response(err, request)


@router.delete(
    "/{maker}/{model}", status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"model": ErrorResponse, "description": "Computer not found"}},
)
async def delete_computer(
    request: Request,
    maker: str,
    model: str,
    db: AsyncSession = Depends(get_db),
    service: ComputerService = Depends(get_computer_service),
):
    """Delete a computer."""
    match await commit_outcome(db, await service.delete(maker, model)):
        case Ok():
            return Response(status_code=status.HTTP_204_NO_CONTENT)
        case Err() as err:
            return failure_response(err, request)
