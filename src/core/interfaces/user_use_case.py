"""Casos de uso de usuarios (lo que consume la capa de presentación)."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import UserDetailEntity, UserEntity


@runtime_checkable
class UserUseCase(Protocol):
    async def get_list_user(self, per_page: int, since: int) -> list[UserEntity]: ...

    async def get_user(self, login_username: str) -> UserDetailEntity: ...
