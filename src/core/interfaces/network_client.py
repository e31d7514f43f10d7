"""Contrato del cliente de red.

Reglas de diseño:
- Todo es asíncrono porque hace I/O (HTTP).
- Los fallos llegan como `APIError`; nunca se reintenta internamente.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol, TypeVar, runtime_checkable

from core.domain.endpoint import APIEndpoint
from core.domain.errors import RawResponse
from core.interfaces.mapper import Mappable

T = TypeVar("T")


@runtime_checkable
class NetworkClientService(Protocol):
    async def request(self, endpoint: APIEndpoint) -> RawResponse:
        """Ejecuta el request y clasifica el status; lanza `APIError` si falla."""

        ...

    async def request_decoded(
        self,
        endpoint: APIEndpoint,
        as_type: Any,
        decoder: Callable[[bytes], T] | None = None,
    ) -> T:
        """Ejecuta el request y decodifica el JSON de la respuesta."""

        ...

    async def request_mapped(self, endpoint: APIEndpoint, mapper: Mappable[Any, T]) -> T:
        """Decodifica `mapper.input_type` y aplica `mapper.map`."""

        ...
