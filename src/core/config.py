"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar los adaptadores.
- Permite que el builder del transporte y el decoder lean config de forma consistente.
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """Configuración central del cliente HTTP.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para transporte y decoder.
    """

    model_config = SettingsConfigDict(
        env_prefix="ANOTHER_HTTP_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    http_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Timeout por defecto de la sesión (segundos). Cada request puede fijar el suyo.",
    )
    user_agent: str = Field(
        default="another-http-client/0.1",
        min_length=1,
        description="User-Agent por defecto de la sesión.",
    )
    follow_redirects: bool = Field(
        default=True,
        description="Seguir redirecciones en el transporte.",
    )
    max_connections: int = Field(
        default=100,
        ge=1,
        le=1000,
        description="Conexiones simultáneas máximas del pool.",
    )
    max_keepalive_connections: int = Field(
        default=20,
        ge=0,
        le=1000,
        description="Conexiones keep-alive máximas del pool.",
    )

    decode_strict: bool = Field(
        default=False,
        description="Validación estricta (sin coerción de tipos) al decodificar respuestas tipadas.",
    )
