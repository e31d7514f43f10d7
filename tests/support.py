"""Test doubles shared across the suite."""
import json
from typing import Callable

import httpx

from core.domain.models import UserDetailEntity, UserEntity


class StubReachability:
    """Reachability with a fixed answer."""

    def __init__(self, connected: bool = True):
        self.is_connected = connected


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it served."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.requests: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)


def json_response(payload, status_code: int = 200) -> httpx.Response:
    return httpx.Response(status_code, content=json.dumps(payload).encode("utf-8"))


class UserUseCaseMock:
    """Configurable UserUseCase; records every call."""

    def __init__(self):
        self.list_calls: list[tuple[int, int]] = []
        self.detail_calls: list[str] = []
        self.get_list_user_handler = None
        self.get_user_handler = None

    async def get_list_user(self, per_page: int, since: int) -> list[UserEntity]:
        self.list_calls.append((per_page, since))
        result = self.get_list_user_handler(per_page, since)
        if hasattr(result, "__await__"):
            result = await result
        return result

    async def get_user(self, login_username: str) -> UserDetailEntity:
        self.detail_calls.append(login_username)
        return self.get_user_handler(login_username)
