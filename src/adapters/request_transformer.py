"""Transformador por defecto: `NetworkRequest` -> `httpx.Request`.

Responsabilidad:
- Construir la URL final con los query params codificados, en orden.
- Añadir cabeceras en orden (sin deduplicar), el cuerpo y el timeout.

Por qué codificamos la query a mano:
- `httpx.QueryParams` agrupa los nombres repetidos y reordena la query; aquí
  el orden de entrada es observable y debe conservarse tal cual.
"""

from __future__ import annotations

from urllib.parse import quote

import httpx

from core.domain.models import HttpQueryParameter, NetworkRequest

_SUPPORTED_SCHEMES = ("http", "https")


def encode_query(parameters: tuple[HttpQueryParameter, ...]) -> str:
    """Codifica los parámetros (RFC 3986, espacio -> `%20`) conservando el orden."""

    return "&".join(f"{quote(p.name, safe='')}={quote(p.value, safe='')}" for p in parameters)


def _build_url(request: NetworkRequest) -> httpx.URL | None:
    try:
        url = httpx.URL(request.url)
    except (httpx.InvalidURL, TypeError, ValueError):
        return None

    if url.scheme not in _SUPPORTED_SCHEMES or not url.host:
        return None

    if not request.query_parameters:
        return url

    query = encode_query(request.query_parameters)
    existing = url.query.decode("ascii")
    if existing:
        query = f"{existing}&{query}"
    try:
        return url.copy_with(query=query.encode("ascii"))
    except httpx.InvalidURL:
        return None


def transform_request(request: NetworkRequest) -> httpx.Request | None:
    """Deriva el request de transporte; `None` si el descriptor no es convertible."""

    url = _build_url(request)
    if url is None:
        return None

    try:
        return httpx.Request(
            request.method.value,
            url,
            headers=[(h.name, h.value) for h in request.headers],
            content=request.body,
            extensions={"timeout": httpx.Timeout(request.timeout).as_dict()},
        )
    except (UnicodeEncodeError, ValueError, TypeError, httpx.InvalidURL):
        # Cabeceras no codificables (p.ej. no ASCII) no llegan al transporte.
        return None
