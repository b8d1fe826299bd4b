"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que adaptadores (HTTP/QRNG) lean config de forma consistente.

Todos los valores tienen default, así que la herramienta funciona sin ningún `.env`.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ANU_QRNG_API_URL = "https://qrng.anu.edu.au/API/jsonI.php"


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "qrng-cli"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "qrng-cli"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "qrng-cli"
    return Path.home() / ".config" / "qrng-cli"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI/adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="QRNG_CLI_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    api_url: str = Field(
        default=ANU_QRNG_API_URL,
        min_length=8,
        description="Endpoint JSON del servicio QRNG.",
    )
    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(
        default="qrng-cli/0.1 (+https://qrng.anu.edu.au)",
        min_length=1,
        description="User-Agent para peticiones al QRNG.",
    )
    intention_delay_seconds: float = Field(
        default=10.0,
        ge=0,
        description="Pausa antes del sorteo Lotto ('Focus on your intention...').",
    )
    pause_on_exit: bool = Field(
        default=True,
        description="Esperar Enter antes de salir (útil al lanzar desde un doble clic).",
    )
    log_level: str = Field(
        default="WARNING",
        description="Nivel de logging por defecto (DEBUG, INFO, WARNING, ERROR).",
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level: {value!r}")
        return level
