"""Paginated user list state.

The view-model owns a pagination cursor and three observable fields
(`users`, `is_loading`, `error`). All mutations happen inside coroutines
running on the event loop that owns the view-model, so a UI layer reading
those fields between awaits never sees a half-applied page.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Callable

from core.domain.errors import APIError
from core.domain.models import UserEntity
from core.interfaces.user_use_case import UserUseCase

logger = logging.getLogger(__name__)


@dataclass
class ViewModelHooks:
    """Optional callbacks for UI layers (re-render on state change)."""

    changed: Callable[[], None] | None = None


@dataclass
class PaginationState:
    current_page_index: int = 0
    page_size: int = 20
    is_loading: bool = False

    @property
    def since(self) -> int:
        return self.current_page_index * self.page_size


def describe_error(error: BaseException) -> str:
    if isinstance(error, APIError):
        return error.message
    return str(error) or error.__class__.__name__


@dataclass
class UserListViewModel:
    user_repository: UserUseCase
    page_size: int = 20
    hooks: ViewModelHooks = field(default_factory=ViewModelHooks)

    users: list[UserEntity] = field(default_factory=list, init=False)
    error: BaseException | None = field(default=None, init=False)
    error_message: str | None = field(default=None, init=False)
    pagination: PaginationState = field(init=False)
    _pending: set[asyncio.Task[None]] = field(default_factory=set, init=False, repr=False)

    def __post_init__(self) -> None:
        self.pagination = PaginationState(page_size=self.page_size)

    @property
    def is_loading(self) -> bool:
        return self.pagination.is_loading

    def _notify(self) -> None:
        if self.hooks.changed:
            self.hooks.changed()

    async def load_users(self) -> None:
        """Fetch the next page and append it.

        Calls made while a page is in flight return immediately.
        """

        if self.pagination.is_loading:
            return

        self.pagination.is_loading = True
        self._notify()
        since = self.pagination.since

        try:
            new_users = await self.user_repository.get_list_user(
                per_page=self.pagination.page_size,
                since=since,
            )
        except Exception as exc:
            logger.warning("Loading users since=%s failed: %s", since, exc)
            self.error = exc
            self.error_message = describe_error(exc)
            self.pagination.is_loading = False
            self._notify()
            return

        self.users.extend(new_users)
        self.pagination.current_page_index += 1
        self.error = None
        self.error_message = None
        self.pagination.is_loading = False
        self._notify()

    def load_more_if_needed(self, user: UserEntity) -> asyncio.Task[None] | None:
        """Schedule `load_users` when `user` is the last accumulated one.

        Must be called from the event loop that owns the view-model. Returns the
        scheduled task, or `None` when nothing was triggered.
        """

        if self.pagination.is_loading:
            return None
        if not self.users or user != self.users[-1]:
            return None

        task = asyncio.get_running_loop().create_task(self.load_users())
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task
