"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta e inmutabilidad (`frozen`) sin acoplar el Core
  al transporte HTTP.
- Un `NetworkRequest` se construye una vez y nunca se muta; el request de
  transporte se deriva de él en cada llamada.

Nota:
- Estos modelos describen *qué* petición se quiere hacer, no *cómo* se envía.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

DEFAULT_TIMEOUT_SECONDS = 30.0


class HttpMethod(str, Enum):
    GET = "GET"
    HEAD = "HEAD"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    OPTIONS = "OPTIONS"
    CONNECT = "CONNECT"
    TRACE = "TRACE"


class MimeType(str, Enum):
    """Content types habituales para `Content-Type` / `Accept`."""

    JSON = "application/json"
    FORM_URLENCODED = "application/x-www-form-urlencoded"
    MULTIPART_FORM_DATA = "multipart/form-data"
    OCTET_STREAM = "application/octet-stream"
    TEXT = "text/plain"
    HTML = "text/html"
    XML = "application/xml"


class HttpHeader(BaseModel):
    """Par nombre/valor de cabecera. Los duplicados se permiten a nivel de request."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Nombre de la cabecera.")
    value: str = Field(..., description="Valor de la cabecera.")

    @classmethod
    def content_type(cls, mime: MimeType) -> "HttpHeader":
        return cls(name="Content-Type", value=mime.value)

    @classmethod
    def accept(cls, mime: MimeType) -> "HttpHeader":
        return cls(name="Accept", value=mime.value)

    @classmethod
    def authorization(cls, value: str) -> "HttpHeader":
        return cls(name="Authorization", value=value)

    @classmethod
    def bearer(cls, token: str) -> "HttpHeader":
        return cls.authorization(f"Bearer {token}")

    @classmethod
    def user_agent(cls, value: str) -> "HttpHeader":
        return cls(name="User-Agent", value=value)


class HttpQueryParameter(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Nombre del parámetro (sin codificar).")
    value: str = Field(..., description="Valor del parámetro (sin codificar).")


class NetworkRequest(BaseModel):
    """Descripción inmutable de una llamada HTTP.

    Por qué tuplas:
    - El orden de cabeceras y query params es observable en el request final.
    - Las tuplas impiden mutaciones accidentales tras la construcción
      (las listas recibidas se convierten automáticamente).
    """

    model_config = ConfigDict(frozen=True)

    url: str = Field(
        ...,
        description="URL base (absoluta). Los query params se añaden al final.",
    )
    method: HttpMethod = Field(
        default=HttpMethod.GET,
        description="Método HTTP.",
    )
    headers: tuple[HttpHeader, ...] = Field(
        default_factory=tuple,
        description="Cabeceras en orden; se permiten nombres repetidos.",
    )
    query_parameters: tuple[HttpQueryParameter, ...] = Field(
        default_factory=tuple,
        description="Query params en orden; se codifican al construir el request.",
    )
    body: bytes | None = Field(
        default=None,
        description="Cuerpo crudo, se adjunta sin modificar.",
    )
    timeout: float = Field(
        default=DEFAULT_TIMEOUT_SECONDS,
        gt=0,
        description="Timeout del request (segundos), aplicado por el transporte.",
    )
