"""Contrato del transformador de requests.

Por qué Protocol:
- Cualquier callable `NetworkRequest -> httpx.Request | None` sirve
  (función, lambda, objeto con `__call__`), sin herencia.
- Permite inyectar dobles de test o políticas de codificación alternativas
  sin tocar el cliente.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from core.domain.models import NetworkRequest

if TYPE_CHECKING:
    import httpx


@runtime_checkable
class RequestTransformer(Protocol):
    """Convierte un descriptor en un request de transporte.

    Devuelve `None` (en vez de lanzar) si el descriptor no es convertible;
    el cliente lo traduce a `UnableToBuildRequestError`.
    """

    def __call__(self, request: NetworkRequest) -> httpx.Request | None:
        ...
