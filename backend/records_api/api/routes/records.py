"""Record Routes — create, fetch-by-id and list-all over the record store.

Invariants:
    - POST body is decoded and validated before the store is touched
    - GET /records returns 204 (no body) when the store holds no records
    - Route handlers raise RecordsError; error_handlers.py shapes the response

Design Decisions:
    - Gateway built per request around the shared client (no module-level store)
    - Raw body read instead of a pydantic body parameter: decode vs. validation
      errors are told apart by the record mapper, not FastAPI
"""

import logging

from fastapi import APIRouter, Depends, Request, Response, status
from redis.asyncio import Redis

from records_api.config import Settings, get_settings
from records_api.core.domain_types import RecordId
from records_api.core.repository_protocols import RecordRepository
from records_api.infrastructure.record_gateway import RecordGateway
from records_api.infrastructure.redis_store import get_redis
from records_api.schemas.record import ErrorResponse, RecordCreate, RecordResponse
from records_api.services.record_mapper import parse_create_request, to_response

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/records", tags=["records"])

_ERRORS = {
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
}


def get_record_repository(
    client: Redis = Depends(get_redis),
    settings: Settings = Depends(get_settings),
) -> RecordRepository:
    """FastAPI dependency for the record gateway."""
    return RecordGateway(client, key_prefix=settings.record_key_prefix)


@router.post(
    "",
    response_model=RecordResponse,
    responses={status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}, **_ERRORS},
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {
                "application/json": {"schema": RecordCreate.model_json_schema()},
            },
        },
    },
)
async def create_record(
    request: Request,
    repo: RecordRepository = Depends(get_record_repository),
):
    """Create a record; the id is assigned server-side."""
    record = parse_create_request(await request.body())
    created = await repo.create(record)
    return to_response(created)


@router.get(
    "",
    response_model=list[RecordResponse],
    responses={status.HTTP_204_NO_CONTENT: {"description": "No records"}, **_ERRORS},
)
async def list_records(
    repo: RecordRepository = Depends(get_record_repository),
):
    """List every record in store enumeration order."""
    records = await repo.list_all()
    if not records:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return [to_response(r) for r in records]


@router.get(
    "/{record_id}",
    response_model=RecordResponse,
    responses={status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}, **_ERRORS},
)
async def get_record(
    record_id: str,
    repo: RecordRepository = Depends(get_record_repository),
):
    """Fetch one record by id."""
    record = await repo.get_by_id(RecordId(record_id))
    return to_response(record)
