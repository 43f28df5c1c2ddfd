"""Record Mapper — decodes create requests and shapes record responses.

Invariants:
    - parse_create_request never returns a Record with id set
    - Malformed JSON → DecodeError; well-formed but invalid → RecordValidationError
    - Both functions are pure: no IO, no store access

Design Decisions:
    - Body parsed from raw bytes (not a FastAPI body parameter) so decode and
      validation failures stay distinguishable before any store call
"""

from pydantic import ValidationError

from records_api.core.errors import DecodeError, RecordValidationError
from records_api.models.record import Record
from records_api.schemas.record import RecordCreate, RecordResponse

_DECODE_ERROR_TYPES = frozenset({"json_invalid", "json_type"})


def parse_create_request(body: bytes) -> Record:
    """Decode and validate a create request into an id-less Record."""
    try:
        dto = RecordCreate.model_validate_json(body)
    except ValidationError as e:
        errors = e.errors(include_url=False)
        if any(err["type"] in _DECODE_ERROR_TYPES for err in errors):
            raise DecodeError("request body is not valid JSON", cause=e) from e
        details = [_error_detail(err) for err in errors]
        raise RecordValidationError(
            "; ".join(f"{d['field']}: {d['message']}" for d in details),
            details=details,
            cause=e,
        ) from e
    return Record(name=dto.name)


def to_response(record: Record) -> RecordResponse:
    return RecordResponse(id=record.id, name=record.name)


def _error_detail(err: dict) -> dict:
    field = ".".join(str(loc) for loc in err["loc"]) or "body"
    return {"field": field, "message": err["msg"], "type": err["type"]}
