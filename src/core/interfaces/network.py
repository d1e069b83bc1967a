"""Contrato del cliente de red.

Reglas de diseño:
- Cada operación es asíncrona y termina con exactamente un valor o un
  `NetworkError`.
- La cancelación de la tarea se propaga al transporte (`asyncio.CancelledError`).
"""

from __future__ import annotations

from typing import Any, Protocol, TypeVar, runtime_checkable

from core.domain.models import NetworkRequest

T = TypeVar("T")


@runtime_checkable
class NetworkProtocol(Protocol):
    async def request_data(self, request: NetworkRequest) -> bytes:
        """Bytes crudos de una respuesta 2xx."""

        ...

    async def request_json_object(self, request: NetworkRequest) -> dict[str, Any]:
        ...

    async def request_json_array(self, request: NetworkRequest) -> list[Any]:
        ...

    async def request_decodable(self, request: NetworkRequest, schema: type[T]) -> T:
        """Decodifica la respuesta al esquema indicado por el caller."""

        ...
