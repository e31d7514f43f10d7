"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- De aquí sale la `ClientConfiguration` inmutable que recibe el cliente HTTP.
"""

from __future__ import annotations

import logging
import os
import sys
from enum import Enum
from pathlib import Path
from urllib.parse import urlsplit

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.domain.endpoint import ClientConfiguration

JSON_CONTENT_TYPE = "application/json;charset=utf-8"


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "github-users"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "github-users"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "github-users"
    return Path.home() / ".config" / "github-users"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key:
            data[key] = value
    return data


def write_user_env_vars(values: dict[str, str]) -> Path:
    """Escribe/actualiza variables en el .env global del usuario."""

    env_path = get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# github-users user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class Environment(str, Enum):
    """Entorno de ejecución; determina el nombre del logger de la app."""

    UAT = "uat"
    PROD = "prod"

    def logger_name(self) -> str:
        return f"github_users.{self.value}"


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Una base URL inválida hace fallar la construcción: es un error fatal de arranque.
    """

    model_config = SettingsConfigDict(
        env_prefix="GITHUB_USERS_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    api_base_url: str = Field(
        default="https://api.github.com",
        min_length=8,
        description="Base URL de la API REST de GitHub (o GitHub Enterprise).",
    )
    api_token: str | None = Field(
        default=None,
        description="Token opcional; se envía como `Authorization: Bearer`.",
    )
    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(
        default="github-users/0.1",
        min_length=1,
        description="User-Agent (GitHub rechaza requests sin él).",
    )
    page_size: int = Field(
        default=20,
        ge=1,
        le=100,
        description="Usuarios por página en el listado.",
    )
    environment: Environment = Field(
        default=Environment.UAT,
        description="Entorno (uat/prod).",
    )
    log_level: str = Field(
        default="WARNING",
        description="Nivel de logging para la CLI.",
    )

    @field_validator("api_base_url")
    @classmethod
    def _check_base_url(cls, value: str) -> str:
        parts = urlsplit(value.strip())
        if parts.scheme not in ("http", "https") or not parts.netloc:
            raise ValueError(f"api_base_url must be an absolute http(s) URL, got {value!r}")
        return value.strip()

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level {value!r}")
        return level


def build_client_configuration(settings: AppSettings) -> ClientConfiguration:
    """Traduce los settings al `ClientConfiguration` inmutable del cliente HTTP."""

    headers: dict[str, str] = {
        "Content-Type": JSON_CONTENT_TYPE,
        "Accept": "application/vnd.github+json",
        "User-Agent": settings.user_agent,
    }
    if settings.api_token:
        headers["Authorization"] = f"Bearer {settings.api_token}"
    return ClientConfiguration(base_url=settings.api_base_url, base_headers=headers)


def get_app_logger(settings: AppSettings) -> logging.Logger:
    return logging.getLogger(settings.environment.logger_name())
