"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza timeouts y política de redirects para todo el cliente.
- Facilita testeo: se puede inyectar un `httpx.MockTransport`.
"""

from __future__ import annotations

import httpx

from core.config import AppSettings


def build_timeout(settings: AppSettings | None = None, *, seconds: float | None = None) -> httpx.Timeout:
    """`seconds` explícito gana; si no, el de settings (leídos del entorno si faltan)."""

    if seconds is None:
        seconds = (settings or AppSettings()).http_timeout_seconds
    return httpx.Timeout(seconds)


def build_async_client(
    settings: AppSettings | None = None,
    *,
    timeout_seconds: float | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` con defaults seguros.

    Por qué un builder:
    - Centraliza timeouts para que todos los requests se comporten igual.
    - Los headers no van aquí: los fija el request builder a partir de
      `ClientConfiguration`, que es la única fuente de verdad.
    """

    return httpx.AsyncClient(
        timeout=build_timeout(settings, seconds=timeout_seconds),
        follow_redirects=True,
        transport=transport,
    )
