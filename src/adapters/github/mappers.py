"""Mappers wire → dominio.

Son totales: cualquier campo ausente se completa con `""` o `0`.
"""

from __future__ import annotations

from uuid import uuid4

from adapters.github.models import User, UserDetail
from core.domain.models import UserDetailEntity, UserEntity


class UserMapper:
    input_type = list[User]

    def map(self, value: list[User]) -> list[UserEntity]:
        return [
            UserEntity(
                id=uuid4(),
                login=user.login or "",
                avatar_url=user.avatar_url or "",
                html_url=user.html_url or "",
            )
            for user in value
        ]


class UserDetailMapper:
    input_type = UserDetail

    def map(self, value: UserDetail) -> UserDetailEntity:
        return UserDetailEntity(
            login=value.login or "",
            avatar_url=value.avatar_url or "",
            html_url=value.html_url or "",
            location=value.location or "",
            followers=value.followers or 0,
            following=value.following or 0,
        )
