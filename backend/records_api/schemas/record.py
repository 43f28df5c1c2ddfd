"""Record Schemas — wire DTOs for the /records endpoints.

Invariants:
    - RecordCreate.name: required string, at least 3 characters
    - RecordCreate has no id field: ids are assigned server-side only
    - ErrorResponse carries a single message field
"""

from pydantic import BaseModel, Field

NAME_MIN_LENGTH = 3


class RecordCreate(BaseModel):
    """Create request body."""
    name: str = Field(min_length=NAME_MIN_LENGTH)


class RecordResponse(BaseModel):
    """Public record representation."""
    id: str
    name: str


class ErrorResponse(BaseModel):
    """Error body for every non-2xx response."""
    message: str
