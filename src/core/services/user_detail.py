"""Single user detail state."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from core.domain.models import UserDetailEntity
from core.interfaces.user_use_case import UserUseCase
from core.services.user_list import ViewModelHooks, describe_error

logger = logging.getLogger(__name__)


@dataclass
class UserDetailViewModel:
    user_repository: UserUseCase
    hooks: ViewModelHooks = field(default_factory=ViewModelHooks)

    user_detail: UserDetailEntity | None = field(default=None, init=False)
    is_loading: bool = field(default=False, init=False)
    error_message: str | None = field(default=None, init=False)

    def _notify(self) -> None:
        if self.hooks.changed:
            self.hooks.changed()

    async def fetch_user_detail(self, login_username: str) -> None:
        self.is_loading = True
        self._notify()
        try:
            self.user_detail = await self.user_repository.get_user(login_username)
        except Exception as exc:
            logger.warning("Loading user %s failed: %s", login_username, exc)
            self.error_message = f"Error fetching user detail: {describe_error(exc)}"
        else:
            self.error_message = None
        finally:
            self.is_loading = False
            self._notify()
