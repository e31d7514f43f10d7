"""Repositorio de usuarios sobre la API de GitHub."""

from __future__ import annotations

from adapters.github.endpoints import UserEndpoint
from adapters.github.mappers import UserDetailMapper, UserMapper
from core.domain.models import UserDetailEntity, UserEntity
from core.interfaces.network_client import NetworkClientService
from core.interfaces.user_use_case import UserUseCase


class UserRepository(UserUseCase):
    """Implementa `UserUseCase` delegando en el cliente HTTP + mappers."""

    def __init__(
        self,
        network_client: NetworkClientService,
        user_mapper: UserMapper | None = None,
        user_detail_mapper: UserDetailMapper | None = None,
    ) -> None:
        self._network_client = network_client
        self._user_mapper = user_mapper or UserMapper()
        self._user_detail_mapper = user_detail_mapper or UserDetailMapper()

    async def get_list_user(self, per_page: int, since: int) -> list[UserEntity]:
        endpoint = UserEndpoint.get_list_user(per_page=per_page, since=since)
        return await self._network_client.request_mapped(endpoint, self._user_mapper)

    async def get_user(self, login_username: str) -> UserDetailEntity:
        endpoint = UserEndpoint.get_user_detail(login_username)
        return await self._network_client.request_mapped(endpoint, self._user_detail_mapper)
