"""Modelos y entidades del dominio.

Por qué:
- Aquí viven las estructuras de datos puras (Pydantic v2 / dataclasses).
- El dominio no conoce httpx, CLI ni SDKs: solo conceptos del problema.
"""

from core.domain.endpoint import (
    APIEndpoint,
    BodyPayload,
    ClientConfiguration,
    DictBody,
    EncodableBody,
    HTTPMethod,
    RawBody,
)
from core.domain.errors import APIError, APIErrorKind, RawResponse
from core.domain.models import UserDetailEntity, UserEntity

__all__ = [
    "APIEndpoint",
    "APIError",
    "APIErrorKind",
    "BodyPayload",
    "ClientConfiguration",
    "DictBody",
    "EncodableBody",
    "HTTPMethod",
    "RawBody",
    "RawResponse",
    "UserDetailEntity",
    "UserEntity",
]
