"""
Unit tests for the pure materialization stages.
"""

from dataclasses import dataclass

import pytest
from pydantic import BaseModel, ValidationError

from adapters.decoding import JsonDecoder, parse_json_array, parse_json_object
from core.domain.errors import DecodeError, InvalidJsonError, NetworkErrorKind


class LoginToken(BaseModel):
    token: str


@dataclass
class Page:
    page: int
    per_page: int


def test_parse_json_object():
    assert parse_json_object(b'{"page": 2}') == {"page": 2}


def test_parse_json_object_rejects_array():
    with pytest.raises(InvalidJsonError) as exc_info:
        parse_json_object(b"[1, 2, 3]")

    assert exc_info.value.kind is NetworkErrorKind.INVALID_JSON


def test_parse_json_array():
    assert parse_json_array(b"[1, 2, 3]") == [1, 2, 3]


def test_parse_json_array_rejects_object():
    with pytest.raises(InvalidJsonError):
        parse_json_array(b'{"page": 2}')


@pytest.mark.parametrize(
    "data",
    [b"", b"<html></html>", b'{"page": ', b"\xc3\x28", b"[" * 100_000 + b"]" * 100_000],
)
def test_malformed_json_is_invalid_json(data):
    with pytest.raises(InvalidJsonError):
        parse_json_object(data)


def test_decode_model():
    assert JsonDecoder().decode(b'{"token": "QpwL5tke4Pnpja7X4"}', LoginToken) == LoginToken(token="QpwL5tke4Pnpja7X4")


def test_decode_dataclass_and_generics():
    decoder = JsonDecoder()

    assert decoder.decode(b'{"page": 2, "per_page": 6}', Page) == Page(page=2, per_page=6)
    assert decoder.decode(b'[{"token": "a"}, {"token": "b"}]', list[LoginToken]) == [
        LoginToken(token="a"),
        LoginToken(token="b"),
    ]


def test_decode_missing_field_keeps_structured_cause():
    with pytest.raises(DecodeError) as exc_info:
        JsonDecoder().decode(b'{"error": "Missing password"}', LoginToken)

    cause = exc_info.value.cause
    assert isinstance(cause, ValidationError)
    errors = cause.errors()
    assert errors[0]["type"] == "missing"
    assert errors[0]["loc"] == ("token",)


def test_decode_strict_disables_coercion():
    data = b'{"page": "2", "per_page": 6}'

    assert JsonDecoder().decode(data, Page).page == 2
    with pytest.raises(DecodeError):
        JsonDecoder(strict=True).decode(data, Page)


def test_decode_malformed_json_is_decode_error():
    with pytest.raises(DecodeError):
        JsonDecoder().decode(b"not json", LoginToken)
