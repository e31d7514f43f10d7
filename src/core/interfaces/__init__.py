"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan adaptadores concretos.
- Permite invertir dependencias: el Core depende de abstracciones.
"""

from core.interfaces.mapper import Mappable
from core.interfaces.network_client import NetworkClientService
from core.interfaces.reachability import Reachability
from core.interfaces.user_use_case import UserUseCase

__all__ = [
    "Mappable",
    "NetworkClientService",
    "Reachability",
    "UserUseCase",
]
