"""Etapas de materialización: bytes -> valor.

Por qué funciones puras:
- El pipeline de transporte/status es uno solo (`request_data`); cada
  materialización es una etapa independiente que se compone encima.
- Son testeables sin red ni sesión.
"""

from __future__ import annotations

import json
from functools import lru_cache
from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError

from core.domain.errors import DecodeError, InvalidJsonError

T = TypeVar("T")


def _load_json(data: bytes) -> Any:
    try:
        return json.loads(data)
    except (json.JSONDecodeError, UnicodeDecodeError, RecursionError) as exc:
        raise InvalidJsonError(f"Response body is not valid JSON: {exc}") from exc


def parse_json_object(data: bytes) -> dict[str, Any]:
    payload = _load_json(data)
    if not isinstance(payload, dict):
        raise InvalidJsonError(f"Expected a JSON object, got {type(payload).__name__}")
    return payload


def parse_json_array(data: bytes) -> list[Any]:
    payload = _load_json(data)
    if not isinstance(payload, list):
        raise InvalidJsonError(f"Expected a JSON array, got {type(payload).__name__}")
    return payload


@lru_cache(maxsize=128)
def _adapter_for(schema: Any) -> TypeAdapter[Any]:
    return TypeAdapter(schema)


class JsonDecoder:
    """Decoder tipado sobre pydantic `TypeAdapter`.

    Acepta cualquier esquema que pydantic sepa validar: `BaseModel`,
    dataclasses, `TypedDict` o genéricos como `list[Model]`.

    Nota:
    - Los errores se envuelven en `DecodeError` conservando el
      `ValidationError` original (con `loc`/`type` por campo).
    """

    def __init__(self, *, strict: bool = False) -> None:
        self.strict = strict

    def decode(self, data: bytes, schema: type[T]) -> T:
        try:
            return _adapter_for(schema).validate_json(data, strict=self.strict)
        except ValidationError as exc:
            raise DecodeError(exc) from exc
