"""Record mapper — decoding, validation, and response projection.

Invariants:
    - Malformed JSON → DecodeError; bad fields → RecordValidationError
    - Parsed records never carry an id, even when the caller sends one
"""

import pytest

from records_api.core.errors import DecodeError, RecordValidationError
from records_api.models.record import Record
from records_api.services.record_mapper import parse_create_request, to_response


def test_valid_body_yields_record_without_id():
    record = parse_create_request(b'{"name": "alice"}')
    assert record.name == "alice"
    assert record.id is None


def test_three_characters_is_enough():
    assert parse_create_request(b'{"name": "bob"}').name == "bob"


def test_caller_supplied_id_is_ignored():
    record = parse_create_request(b'{"id": "mine", "name": "alice"}')
    assert record.id is None


def test_short_name_rejected():
    with pytest.raises(RecordValidationError) as exc:
        parse_create_request(b'{"name": "ab"}')
    assert exc.value.details[0]["field"] == "name"
    assert "at least 3" in exc.value.message


def test_missing_name_rejected():
    with pytest.raises(RecordValidationError) as exc:
        parse_create_request(b"{}")
    assert exc.value.details[0]["type"] == "missing"


def test_non_string_name_rejected():
    with pytest.raises(RecordValidationError):
        parse_create_request(b'{"name": 12345}')


def test_non_object_body_is_a_validation_error():
    with pytest.raises(RecordValidationError) as exc:
        parse_create_request(b'["alice"]')
    assert exc.value.details[0]["field"] == "body"


@pytest.mark.parametrize("body", [b"not json", b'{"name": ', b""])
def test_malformed_body_is_a_decode_error(body):
    with pytest.raises(DecodeError):
        parse_create_request(body)


def test_to_response_projects_id_and_name():
    dto = to_response(Record(id="42", name="alice"))
    assert dto.model_dump() == {"id": "42", "name": "alice"}
