"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que adaptadores (HTTP) lean config de forma consistente.
"""

from __future__ import annotations

import os
import sys
from enum import Enum
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_API_URL = "https://api.exchangeratesapi.io"


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "fiatconv"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "fiatconv"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "fiatconv"
    return Path.home() / ".config" / "fiatconv"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class SymbolsMode(str, Enum):
    """Qué monedas se piden en el parámetro `symbols`."""

    TARGET = "target"
    PAIR = "pair"


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI/adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="FIATCONV_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    api_url: str = Field(
        default=DEFAULT_API_URL,
        min_length=8,
        description="Raíz de la API de rates (se le añade `/latest`).",
    )
    proxy: str | None = Field(
        default=None,
        description="Proxy opcional para la petición (http, https, socks5).",
    )
    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(
        default="fiatconv/0.1",
        min_length=1,
        description="User-Agent enviado al proveedor.",
    )
    symbols_mode: SymbolsMode = Field(
        default=SymbolsMode.TARGET,
        description="`target` -> symbols=DST; `pair` -> symbols=SRC,DST.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Nivel de logging por defecto (stderr).",
    )
