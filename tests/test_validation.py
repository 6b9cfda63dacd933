import pytest

from itquiz.domain.model import DispatchRequest, FieldError, LookupRequest
from itquiz.services.validation import parse_int, validate_dispatch, validate_lookup


@pytest.mark.parametrize(
    "value, expected",
    [
        (3, 3),
        ("12", 12),
        (" 7 ", 7),
        ("-2", -2),
        (4.0, 4),
        (4.5, None),
        ("abc", None),
        ("1.5", None),
        ("1_0", None),
        ("１２", None),
        ("+5", 5),
        ("", None),
        (None, None),
        (True, None),
        ([1], None),
    ],
)
def test_parse_int(value, expected):
    assert parse_int(value) == expected


def test_lookup_valid():
    assert validate_lookup("2", 5) == LookupRequest(id=2)


def test_lookup_out_of_range_is_an_error_not_a_wrap():
    errors = validate_lookup(5, 5)
    assert errors == [FieldError("id", "id must be less than 5")]


def test_lookup_negative():
    errors = validate_lookup(-1, 5)
    assert [e.field for e in errors] == ["id"]


def test_lookup_not_numeric():
    errors = validate_lookup("first", 5)
    assert errors == [FieldError("id", "id must be an integer")]


def test_dispatch_valid_with_numeric_strings():
    result = validate_dispatch({"id": "12", "count": "3", "webhookUrl": " https://hook.test/x "})
    assert result == DispatchRequest(start_id=12, count=3, webhook_url="https://hook.test/x")


def test_dispatch_collects_every_field_error():
    errors = validate_dispatch({"id": -1, "count": 0, "webhookUrl": ""})
    assert isinstance(errors, list)
    assert len(errors) == 3
    assert [e.field for e in errors] == ["id", "count", "webhookUrl"]


def test_dispatch_missing_fields():
    errors = validate_dispatch({})
    assert [e.field for e in errors] == ["id", "count", "webhookUrl"]
    assert errors[0].message == "id must be an integer"


def test_dispatch_webhook_must_be_string():
    errors = validate_dispatch({"id": 0, "count": 1, "webhookUrl": 42})
    assert errors == [FieldError("webhookUrl", "webhookUrl must be a non-empty string")]


def test_dispatch_has_no_upper_bound_on_count():
    result = validate_dispatch({"id": 0, "count": 10_000, "webhookUrl": "https://hook.test"})
    assert isinstance(result, DispatchRequest)
    assert result.count == 10_000
