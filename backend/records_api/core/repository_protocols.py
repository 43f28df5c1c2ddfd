"""Boundary Protocols — contract between routes and the record store.

Invariants:
    - Routes depend on RecordRepository, never on a concrete client
    - Every method raises StoreError (core/errors.py) on failure

Design Decisions:
    - Protocol over ABC: structural subtyping, test doubles need no base class
"""

from typing import Protocol

from records_api.core.domain_types import RecordId
from records_api.models.record import Record


class RecordRepository(Protocol):
    """Contract for record persistence — implemented by infrastructure."""
    async def create(self, record: Record) -> Record: ...
    async def get_by_id(self, record_id: RecordId) -> Record: ...
    async def list_all(self) -> list[Record]: ...
