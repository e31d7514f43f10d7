"""Chequeo de conectividad sin tráfico.

`connect()` sobre un socket UDP no envía paquetes: solo pide al kernel una
ruta hacia el destino. Si no hay interfaz/ruta falla con OSError. Se prueba
IPv4 e IPv6: basta con que una familia tenga ruta.
"""

from __future__ import annotations

import socket

IPV6_ROUTE_HOST = "2001:4860:4860::8888"


class NetworkReachability:
    """Implementación de `core.interfaces.Reachability` basada en la tabla de rutas."""

    def __init__(
        self,
        host: str = "8.8.8.8",
        port: int = 53,
        ipv6_host: str | None = IPV6_ROUTE_HOST,
    ) -> None:
        self._targets: list[tuple[socket.AddressFamily, tuple[str, int]]] = [
            (socket.AF_INET, (host, port)),
        ]
        if ipv6_host:
            self._targets.append((socket.AF_INET6, (ipv6_host, port)))

    @staticmethod
    def _has_route(family: socket.AddressFamily, address: tuple[str, int]) -> bool:
        try:
            with socket.socket(family, socket.SOCK_DGRAM) as sock:
                sock.connect(address)
        except OSError:
            return False
        return True

    @property
    def is_connected(self) -> bool:
        return any(self._has_route(family, address) for family, address in self._targets)
