"""Error hierarchy — status mapping and client-visible body.

Tests:
    - StoreError kind decides 404 vs 500
    - to_response() carries only the message, never the cause
"""

import pytest

from records_api.core.domain_types import StoreErrorKind
from records_api.core.errors import (
    DecodeError,
    RecordValidationError,
    StoreError,
    StoreUnavailableError,
)


def test_request_errors_are_client_errors():
    assert DecodeError("bad json").http_status == 400
    assert RecordValidationError("name too short").http_status == 400


def test_not_found_maps_to_404():
    err = StoreError(StoreErrorKind.NOT_FOUND, "record 'x' not found")
    assert err.http_status == 404
    assert err.code == "STORE_NOT_FOUND"


@pytest.mark.parametrize("kind", [
    StoreErrorKind.TRANSPORT,
    StoreErrorKind.CORRUPT,
    StoreErrorKind.WRITE_FAILED,
    StoreErrorKind.READ_FAILED,
])
def test_other_store_kinds_map_to_500(kind):
    assert StoreError(kind).http_status == 500


def test_response_hides_cause():
    err = StoreError(
        StoreErrorKind.WRITE_FAILED, cause=OSError("10.0.0.5:6379 refused"),
    )
    assert err.to_response() == {"message": "failed to create record in store"}
    assert "refused" in str(err)


def test_store_unavailable_keeps_address():
    err = StoreUnavailableError("redis://cache:6379")
    assert err.address == "redis://cache:6379"
    assert err.http_status == 503
