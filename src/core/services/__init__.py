"""View-models: estado observable para la capa de presentación."""

from core.services.user_detail import UserDetailViewModel
from core.services.user_list import PaginationState, UserListViewModel, ViewModelHooks

__all__ = [
    "PaginationState",
    "UserDetailViewModel",
    "UserListViewModel",
    "ViewModelHooks",
]
