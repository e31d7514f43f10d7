"""Descripción inmutable de un endpoint HTTP.

Por qué en el dominio:
- Un endpoint es un valor puro (qué pedir), no sabe cómo se envía.
- El builder de requests (adapters) es quien lo traduce a httpx.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Union


class HTTPMethod(str, Enum):
    """Métodos HTTP soportados por el cliente."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"


def _freeze(values: Mapping[str, str] | None) -> Mapping[str, str]:
    return MappingProxyType(dict(values or {}))


@dataclass(frozen=True)
class RawBody:
    """Bytes enviados tal cual."""

    data: bytes


@dataclass(frozen=True)
class DictBody:
    """Diccionario serializado como JSON.

    `options` son keyword arguments de `json.dumps` (p.ej. `sort_keys`, `indent`).
    """

    values: Mapping[str, Any]
    options: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class EncodableBody:
    """Objeto arbitrario serializado con un encoder.

    Sin encoder: modelos pydantic usan `model_dump_json(by_alias=True)`, el
    resto pasa por `json.dumps`.
    """

    value: Any
    encoder: Callable[[Any], bytes | str] | None = None


BodyPayload = Union[RawBody, DictBody, EncodableBody]


@dataclass(frozen=True)
class APIEndpoint:
    """Un request concreto contra la API.

    `base_url` es opcional: si falta se usa el de `ClientConfiguration`.
    """

    path: str
    method: HTTPMethod = HTTPMethod.GET
    base_url: str | None = None
    url_queries: Mapping[str, str] = field(default_factory=dict)
    headers: Mapping[str, str] = field(default_factory=dict)
    body: BodyPayload | None = None

    def __post_init__(self) -> None:
        if not self.path:
            raise ValueError("APIEndpoint.path must be set")
        object.__setattr__(self, "method", HTTPMethod(self.method))
        object.__setattr__(self, "url_queries", _freeze(self.url_queries))
        object.__setattr__(self, "headers", _freeze(self.headers))


@dataclass(frozen=True)
class ClientConfiguration:
    """Configuración compartida por todos los requests de un cliente.

    Se construye una vez al arrancar (ver `core.config.build_client_configuration`).
    """

    base_url: str | None
    base_headers: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "base_headers", _freeze(self.base_headers))

    @classmethod
    def default(cls) -> "ClientConfiguration":
        return cls(base_url=None, base_headers={})
