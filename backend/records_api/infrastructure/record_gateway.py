"""Record Gateway — Redis-backed RecordRepository with store-error translation.

Invariants:
    - Every record lives under key_prefix + id
    - create() returns the value read back from the store, not the input
    - Absent key on get_by_id → StoreError(NOT_FOUND); every other redis failure
      maps to a 500-level StoreError kind
    - list_all() aborts on the first failed read or undecodable payload
    - No retries, no caching: each call is one round trip per key touched

Design Decisions:
    - Client injected at construction: one gateway per request, one client per process
    - KEYS over SCAN: keyspace is a single small prefix; enumeration order preserved
    - Fail-fast listing kept over skip-and-continue: a corrupt record is surfaced,
      not hidden
"""

import logging
import uuid
from typing import Callable

from pydantic import ValidationError
from redis.asyncio import Redis
from redis.exceptions import RedisError

from records_api.core.domain_types import RecordId, StoreErrorKind
from records_api.core.errors import StoreError
from records_api.models.record import Record

logger = logging.getLogger(__name__)

DEFAULT_KEY_PREFIX = "record:"


def new_record_id() -> RecordId:
    return RecordId(str(uuid.uuid4()))


class RecordGateway:
    """Reads and writes records in Redis, one key per record."""

    def __init__(
        self,
        client: Redis,
        key_prefix: str = DEFAULT_KEY_PREFIX,
        id_factory: Callable[[], str] = new_record_id,
    ):
        self._client = client
        self.key_prefix = key_prefix
        self._id_factory = id_factory

    def key_for(self, record_id: str) -> str:
        return f"{self.key_prefix}{record_id}"

    async def create(self, record: Record) -> Record:
        """Assign an id if missing, write, then read back as confirmation."""
        if not record.id:
            record = record.model_copy(update={"id": self._id_factory()})
        key = self.key_for(record.id)

        try:
            await self._client.set(key, record.to_store())
        except RedisError as e:
            raise StoreError(StoreErrorKind.WRITE_FAILED, cause=e) from e

        try:
            payload = await self._client.get(key)
        except RedisError as e:
            raise StoreError(StoreErrorKind.READ_FAILED, cause=e) from e
        if payload is None:
            raise StoreError(
                StoreErrorKind.READ_FAILED,
                cause=KeyError(key),
            )

        created = self._decode(key, payload)
        logger.info("Record created", extra={"record_id": created.id})
        return created

    async def get_by_id(self, record_id: RecordId) -> Record:
        key = self.key_for(record_id)
        try:
            payload = await self._client.get(key)
        except RedisError as e:
            raise StoreError(
                StoreErrorKind.TRANSPORT,
                "failed to get record from store",
                cause=e,
            ) from e
        if payload is None:
            raise StoreError(
                StoreErrorKind.NOT_FOUND,
                f"record '{record_id}' not found",
            )
        return self._decode(key, payload)

    async def list_all(self) -> list[Record]:
        """Every record under the prefix, in enumeration order."""
        try:
            keys = await self._client.keys(f"{self.key_prefix}*")
        except RedisError as e:
            raise StoreError(StoreErrorKind.TRANSPORT, cause=e) from e

        records = []
        for key in keys:
            try:
                payload = await self._client.get(key)
            except RedisError as e:
                raise StoreError(StoreErrorKind.TRANSPORT, cause=e) from e
            if payload is None:
                # deleted between KEYS and GET
                raise StoreError(
                    StoreErrorKind.TRANSPORT,
                    cause=KeyError(key),
                )
            records.append(self._decode(key, payload))
        return records

    def _decode(self, key: str, payload: str) -> Record:
        try:
            record = Record.from_store(payload)
        except ValidationError as e:
            raise StoreError(StoreErrorKind.CORRUPT, cause=e) from e
        if not record.id:
            raise StoreError(
                StoreErrorKind.CORRUPT,
                cause=ValueError(f"{key} has no ID"),
            )
        return record
