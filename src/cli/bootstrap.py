"""Composition root.

Construye una vez, a partir de `AppSettings`, todo lo que la CLI necesita
y lo inyecta por constructor. Nada de singletons globales.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import httpx

from adapters.github import UserRepository
from adapters.network_client import NetworkClient
from adapters.reachability import NetworkReachability
from core.config import AppSettings, build_client_configuration, get_app_logger
from core.domain.endpoint import ClientConfiguration
from core.interfaces.reachability import Reachability
from core.services import UserDetailViewModel, UserListViewModel, ViewModelHooks


@dataclass(frozen=True)
class AppContainer:
    settings: AppSettings
    configuration: ClientConfiguration
    logger: logging.Logger
    reachability: Reachability
    network_client: NetworkClient
    user_repository: UserRepository

    @classmethod
    def build(
        cls,
        settings: AppSettings | None = None,
        *,
        reachability: Reachability | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> "AppContainer":
        settings = settings or AppSettings()
        configuration = build_client_configuration(settings)
        logger = get_app_logger(settings)
        reachability = reachability or NetworkReachability()
        network_client = NetworkClient(
            configuration,
            settings=settings,
            reachability=reachability,
            logger=logger,
            transport=transport,
        )
        return cls(
            settings=settings,
            configuration=configuration,
            logger=logger,
            reachability=reachability,
            network_client=network_client,
            user_repository=UserRepository(network_client),
        )

    def user_list_view_model(
        self,
        *,
        page_size: int | None = None,
        hooks: ViewModelHooks | None = None,
    ) -> UserListViewModel:
        return UserListViewModel(
            self.user_repository,
            page_size=page_size or self.settings.page_size,
            hooks=hooks or ViewModelHooks(),
        )

    def user_detail_view_model(self, *, hooks: ViewModelHooks | None = None) -> UserDetailViewModel:
        return UserDetailViewModel(self.user_repository, hooks=hooks or ViewModelHooks())
