"""Cliente de red: transporte + validación de status + materialización.

Responsabilidad:
- Aplicar el transformador, enviar por la sesión httpx y validar el status (2xx).
- Componer las etapas de `adapters.decoding` sobre un único `request_data`.
- Normalizar cualquier fallo a la taxonomía `NetworkError` (sin doble envoltura).

Concurrencia:
- La sesión y la configuración son de solo lectura; no hay estado mutable
  compartido entre llamadas, así que no hace falta ningún lock.
- `asyncio.CancelledError` no se normaliza: se propaga tal cual y httpx
  cierra la conexión en curso.
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar

import httpx

from adapters.decoding import JsonDecoder, parse_json_array, parse_json_object
from adapters.http_client import build_async_client
from adapters.request_transformer import transform_request
from core.config import AppSettings
from core.domain.errors import (
    InvalidStatusCodeError,
    NetworkError,
    TransportFailureError,
    UnableToBuildRequestError,
    UnknownNetworkError,
)
from core.domain.models import NetworkRequest
from core.interfaces.transformer import RequestTransformer

T = TypeVar("T")

logger = logging.getLogger(__name__)


def normalize_error(exc: Exception) -> NetworkError:
    """Colapsa un fallo cualquiera en la taxonomía del cliente."""

    if isinstance(exc, NetworkError):
        return exc
    if isinstance(exc, httpx.RequestError):
        return TransportFailureError(exc)
    return UnknownNetworkError(exc)


def is_success_status(code: int) -> bool:
    return 200 <= code <= 299


class NetworkClient:
    """Implementación de `NetworkProtocol` sobre `httpx.AsyncClient`."""

    def __init__(
        self,
        session: httpx.AsyncClient,
        *,
        decoder: JsonDecoder | None = None,
        request_transformer: RequestTransformer | None = None,
    ) -> None:
        self._session = session
        self._decoder = decoder or JsonDecoder()
        self._request_transformer: RequestTransformer = request_transformer or transform_request

    @classmethod
    def from_settings(
        cls,
        settings: AppSettings | None = None,
        *,
        decoder: JsonDecoder | None = None,
        request_transformer: RequestTransformer | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> "NetworkClient":
        """Construye sesión y decoder a partir de `AppSettings`."""

        settings = settings or AppSettings()
        return cls(
            build_async_client(settings, transport=transport),
            decoder=decoder or JsonDecoder(strict=settings.decode_strict),
            request_transformer=request_transformer,
        )

    @property
    def session(self) -> httpx.AsyncClient:
        return self._session

    @property
    def decoder(self) -> JsonDecoder:
        return self._decoder

    async def aclose(self) -> None:
        await self._session.aclose()

    async def __aenter__(self) -> "NetworkClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    def _build_wire_request(self, request: NetworkRequest) -> httpx.Request:
        wire = self._request_transformer(request)
        if wire is None:
            raise UnableToBuildRequestError(request)

        # Las cabeceras por defecto de la sesión solo se aplican vía `build_request`;
        # aquí completamos las que el request no trae.
        for name, value in self._session.headers.multi_items():
            if name not in wire.headers:
                wire.headers[name] = value
        return wire

    async def _fetch_bytes(self, request: NetworkRequest) -> bytes:
        wire = self._build_wire_request(request)
        logger.debug(f"{wire.method} {wire.url}")

        response = await self._session.send(wire, stream=True)
        try:
            status = getattr(response, "status_code", None)
            if not isinstance(status, int):
                raise UnknownNetworkError()
            if not is_success_status(status):
                # El cuerpo se descarta sin leerlo.
                raise InvalidStatusCodeError(status)
            data = await response.aread()
        finally:
            await response.aclose()

        logger.debug(f"Response: {status} - {len(data)} bytes")
        return data

    async def request_data(self, request: NetworkRequest) -> bytes:
        try:
            return await self._fetch_bytes(request)
        except Exception as exc:
            error = normalize_error(exc)
            if error is exc:
                raise
            raise error from exc

    async def request_json_object(self, request: NetworkRequest) -> dict[str, Any]:
        data = await self.request_data(request)
        try:
            return parse_json_object(data)
        except NetworkError:
            raise
        except Exception as exc:
            raise normalize_error(exc) from exc

    async def request_json_array(self, request: NetworkRequest) -> list[Any]:
        data = await self.request_data(request)
        try:
            return parse_json_array(data)
        except NetworkError:
            raise
        except Exception as exc:
            raise normalize_error(exc) from exc

    async def request_decodable(self, request: NetworkRequest, schema: type[T]) -> T:
        data = await self.request_data(request)
        try:
            return self._decoder.decode(data, schema)
        except NetworkError:
            raise
        except Exception as exc:
            raise normalize_error(exc) from exc
