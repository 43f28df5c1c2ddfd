"""Record — the single persisted entity, as stored in Redis.

Invariants:
    - Stored JSON uses "ID"/"Name" keys (matches records already in the keyspace)
    - id is None only before the gateway assigns one; never caller-supplied

Design Decisions:
    - Aliases + populate_by_name: Python code uses id/name, the store sees ID/Name
"""

from pydantic import BaseModel, ConfigDict, Field


class Record(BaseModel):
    """Persisted record: opaque id plus name."""

    model_config = ConfigDict(populate_by_name=True)

    id: str | None = Field(default=None, alias="ID")
    name: str = Field(alias="Name")

    def to_store(self) -> str:
        return self.model_dump_json(by_alias=True)

    @classmethod
    def from_store(cls, payload: str) -> "Record":
        return cls.model_validate_json(payload)
