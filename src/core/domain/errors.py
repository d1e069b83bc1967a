"""Taxonomía cerrada de errores del cliente.

Por qué una jerarquía cerrada:
- Cualquier fallo (construcción, transporte, status, JSON, decode) llega al
  caller como exactamente una de estas clases.
- El caller discrimina por `kind` (o por clase) sin conocer httpx ni pydantic.

Nota:
- `cause` es solo diagnóstico; nunca se inspecciona para control de flujo.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from core.domain.models import NetworkRequest


class NetworkErrorKind(str, Enum):
    UNABLE_TO_BUILD_REQUEST = "unable_to_build_request"
    NETWORK_ERROR = "network_error"
    INVALID_STATUS_CODE = "invalid_status_code"
    INVALID_JSON = "invalid_json"
    DECODE = "decode"
    UNKNOWN = "unknown"


class NetworkError(Exception):
    """Base de la taxonomía. No se instancia directamente."""

    kind: ClassVar[NetworkErrorKind]

    def __init__(self, message: str, *, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause


class UnableToBuildRequestError(NetworkError):
    kind = NetworkErrorKind.UNABLE_TO_BUILD_REQUEST

    def __init__(self, request: NetworkRequest) -> None:
        super().__init__(f"Unable to build a transport request for {request.method.value} {request.url!r}")
        self.request = request


class TransportFailureError(NetworkError):
    """Fallo de transporte: DNS, conexión, timeout, reset."""

    kind = NetworkErrorKind.NETWORK_ERROR

    def __init__(self, cause: BaseException) -> None:
        super().__init__(f"Transport failure: {type(cause).__name__}: {cause}", cause=cause)


class InvalidStatusCodeError(NetworkError):
    kind = NetworkErrorKind.INVALID_STATUS_CODE

    def __init__(self, code: int) -> None:
        super().__init__(f"Unexpected HTTP status code {code}")
        self.code = code


class InvalidJsonError(NetworkError):
    kind = NetworkErrorKind.INVALID_JSON

    def __init__(self, message: str = "Response body is not the expected JSON shape") -> None:
        super().__init__(message)


class DecodeError(NetworkError):
    """Fallo de decode tipado; `cause` conserva los errores estructurados del decoder."""

    kind = NetworkErrorKind.DECODE

    def __init__(self, cause: BaseException) -> None:
        super().__init__(f"Unable to decode response: {cause}", cause=cause)


class UnknownNetworkError(NetworkError):
    kind = NetworkErrorKind.UNKNOWN

    def __init__(self, cause: BaseException | None = None) -> None:
        detail = f"{type(cause).__name__}: {cause}" if cause is not None else "no response status"
        super().__init__(f"Unknown network failure ({detail})", cause=cause)
