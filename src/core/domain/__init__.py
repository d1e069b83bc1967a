"""Modelos y entidades del dominio.

Por qué:
- Aquí viven las estructuras de datos puras e inmutables (Pydantic v2) y la
  taxonomía de errores.
- El dominio no conoce httpx ni pydantic TypeAdapter: solo conceptos del problema.
"""

from core.domain.errors import (
    DecodeError,
    InvalidJsonError,
    InvalidStatusCodeError,
    NetworkError,
    NetworkErrorKind,
    TransportFailureError,
    UnableToBuildRequestError,
    UnknownNetworkError,
)
from core.domain.models import HttpHeader, HttpMethod, HttpQueryParameter, MimeType, NetworkRequest

__all__ = [
    "DecodeError",
    "HttpHeader",
    "HttpMethod",
    "HttpQueryParameter",
    "InvalidJsonError",
    "InvalidStatusCodeError",
    "MimeType",
    "NetworkError",
    "NetworkErrorKind",
    "NetworkRequest",
    "TransportFailureError",
    "UnableToBuildRequestError",
    "UnknownNetworkError",
]
