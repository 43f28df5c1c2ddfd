"""Error Hierarchy — typed exceptions for every Records API failure mode.

Invariants:
    - Every error has a code (str) and an http_status
    - StoreError status is derived from its kind: NOT_FOUND → 404, others → 500
    - to_response() exposes only the message; the wrapped cause stays server-side

Design Decisions:
    - Single hierarchy with RecordsError base: one FastAPI handler catches all
    - Cause kept as an attribute (and __cause__ via raise ... from) for logging
"""

from typing import Any

from records_api.core.domain_types import StoreErrorKind


class RecordsError(Exception):
    """Base exception for all Records API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        http_status: int = 500,
        cause: BaseException | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.http_status = http_status
        self.cause = cause

    def to_response(self) -> dict:
        """Convert to the client-visible error body."""
        return {"message": self.message}

    def __str__(self) -> str:
        if self.cause is None:
            return self.message
        return f"{self.message}: {self.cause}"


# ─── Request Errors (400-level) ─────────────────────────────────

class DecodeError(RecordsError):
    """Request body is not well-formed JSON."""
    def __init__(self, message: str, cause: BaseException | None = None):
        super().__init__(message, "DECODE_ERROR", 400, cause)


class RecordValidationError(RecordsError):
    """Request body is JSON but violates a field rule."""
    def __init__(
        self,
        message: str,
        details: list[dict[str, Any]] | None = None,
        cause: BaseException | None = None,
    ):
        super().__init__(message, "VALIDATION_ERROR", 400, cause)
        self.details = details or []


# ─── Store Errors ───────────────────────────────────────────────

_STORE_MESSAGES = {
    StoreErrorKind.NOT_FOUND: "record not found",
    StoreErrorKind.TRANSPORT: "failed to read records from store",
    StoreErrorKind.CORRUPT: "stored record could not be decoded",
    StoreErrorKind.WRITE_FAILED: "failed to create record in store",
    StoreErrorKind.READ_FAILED: "failed to read back created record",
}


class StoreError(RecordsError):
    """Store operation failed; kind decides the HTTP status."""
    def __init__(
        self,
        kind: StoreErrorKind,
        message: str | None = None,
        cause: BaseException | None = None,
    ):
        status = 404 if kind is StoreErrorKind.NOT_FOUND else 500
        super().__init__(
            message or _STORE_MESSAGES[kind],
            f"STORE_{kind.name}",
            status,
            cause,
        )
        self.kind = kind


class StoreUnavailableError(RecordsError):
    """Store did not answer the startup connectivity check."""
    def __init__(self, address: str, cause: BaseException | None = None):
        super().__init__(
            f"store at {address} is unavailable",
            "STORE_UNAVAILABLE", 503, cause,
        )
        self.address = address
