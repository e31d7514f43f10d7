"""Contrato de conectividad."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Reachability(Protocol):
    """Consulta síncrona: ¿hay una ruta de red disponible ahora mismo?

    Se consulta antes de cada request; debe ser barata y no bloquear.
    """

    @property
    def is_connected(self) -> bool: ...
