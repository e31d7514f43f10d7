"""Adaptador de la API REST de GitHub (usuarios).

Por qué un paquete:
- Agrupa modelos wire, endpoints, mappers y el repositorio de una misma fuente.
- El repositorio implementa `core.interfaces.UserUseCase`.
"""

from adapters.github.endpoints import UserEndpoint
from adapters.github.mappers import UserDetailMapper, UserMapper
from adapters.github.models import User, UserDetail
from adapters.github.repository import UserRepository

__all__ = [
    "User",
    "UserDetail",
    "UserDetailMapper",
    "UserEndpoint",
    "UserMapper",
    "UserRepository",
]
