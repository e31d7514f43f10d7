"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Validación estricta y documentación autocontenida (Field) sin acoplar el
  Core a librerías de I/O.
- Serialización estable (`model_dump(mode="json")`) para exportar resultados.

Nota:
- Estos modelos describen *qué* es un usuario para la UI, no la forma en que
  lo devuelve la API de GitHub (eso vive en `adapters.github.models`).
"""

from __future__ import annotations

from uuid import UUID, uuid4

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class UserEntity(BaseModel):
    """Usuario de la lista paginada.

    Identidad:
    - `id` se genera en cada mapeo; solo sirve para identificar filas en la UI.
    - La igualdad se define únicamente por `login`. La paginación compara el
      último usuario renderizado con el último acumulado usando esta regla.
    """

    model_config = ConfigDict(frozen=True)

    id: UUID = Field(
        default_factory=uuid4,
        description="Identidad efímera para render de listas (no persistida).",
    )
    login: str = Field(
        default="",
        description="Login (handle) de GitHub.",
    )
    avatar_url: str = Field(
        default="",
        description="URL del avatar.",
    )
    html_url: str = Field(
        default="",
        description="URL pública del perfil.",
    )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UserEntity):
            return NotImplemented
        return self.login == other.login

    def __hash__(self) -> int:
        return hash(self.login)


class UserDetailEntity(BaseModel):
    """Detalle de un usuario (pantalla de perfil)."""

    model_config = ConfigDict(frozen=True)

    login: str = Field(default="", description="Login (handle) de GitHub.")
    avatar_url: str = Field(default="", description="URL del avatar.")
    html_url: str = Field(default="", description="URL pública del perfil.")
    location: str = Field(default="", description="Ubicación declarada (vacía si no hay).")
    followers: int = Field(default=0, ge=0, description="Número de seguidores.")
    following: int = Field(default=0, ge=0, description="Número de cuentas seguidas.")
