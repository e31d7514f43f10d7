"""Modelos wire de la API de GitHub.

Todo es opcional: la API puede omitir campos (o devolver `null`) y el mapper
se encarga de los defaults. `extra="ignore"` descarta el resto del payload.
"""

from __future__ import annotations

from pydantic import BaseModel
from pydantic.config import ConfigDict


class User(BaseModel):
    """Elemento de `GET /users`."""

    model_config = ConfigDict(extra="ignore")

    login: str | None = None
    avatar_url: str | None = None
    html_url: str | None = None


class UserDetail(BaseModel):
    """Respuesta de `GET /users/{login}`."""

    model_config = ConfigDict(extra="ignore")

    login: str | None = None
    avatar_url: str | None = None
    html_url: str | None = None
    location: str | None = None
    followers: int | None = None
    following: int | None = None
