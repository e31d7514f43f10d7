"""Cliente HTTP de la app (implementación de `NetworkClientService`).

Pipeline por request:
1. Reachability: sin ruta de red → `network_error`, sin I/O.
2. Request builder: sin request → `invalid_endpoint`.
3. Envío con httpx y clasificación del status.
4. (opcional) Decodificación JSON con pydantic y mapeo al dominio.

Cada intento queda logueado; el log nunca altera el resultado.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, TypeVar

import httpx
from pydantic import TypeAdapter

from adapters.http_client import build_async_client
from adapters.reachability import NetworkReachability
from adapters.request_builder import build_request
from core.config import AppSettings
from core.domain.endpoint import APIEndpoint, ClientConfiguration
from core.domain.errors import APIError, RawResponse
from core.interfaces.mapper import Mappable
from core.interfaces.reachability import Reachability

T = TypeVar("T")

_MAX_LOGGED_BODY = 2_000


def classify_status(status_code: int) -> APIError | None:
    """`None` si el status es exitoso (200-399), si no el `APIError` correspondiente."""

    if 200 <= status_code < 400:
        return None
    if status_code == 401:
        return APIError.invalid_access_token()
    if status_code == 403:
        return APIError.invalid_refresh_token()
    return APIError.bad_server_response()


def _preview(data: bytes | None) -> str:
    if not data:
        return "-"
    text = data.decode("utf-8", errors="replace")
    if len(text) > _MAX_LOGGED_BODY:
        return text[:_MAX_LOGGED_BODY] + "…"
    return text


def log_exchange(
    logger: logging.Logger,
    *,
    request: httpx.Request,
    data: bytes | None,
    response: httpx.Response | None,
    error: BaseException | None,
) -> None:
    status = response.status_code if response is not None else "-"
    if error is not None:
        logger.warning(
            "%s %s -> %s error=%s response body=%s",
            request.method,
            request.url,
            status,
            error,
            _preview(data),
        )
    else:
        logger.info("%s %s -> %s", request.method, request.url, status)
    logger.debug(
        "request headers=%s body=%s response body=%s",
        dict(request.headers),
        _preview(request.content),
        _preview(data),
    )


class NetworkClient:
    """Ejecuta endpoints contra la API configurada.

    Dependencias explícitas (sin singletons):
    - `configuration`: base URL + headers base, inmutable.
    - `reachability`: por defecto `NetworkReachability`.
    - `logger`: por defecto el logger del módulo.
    - `timeout_seconds`: de `settings` si se pasan; si no, el default de
      `AppSettings` sin leer el entorno.
    - `transport`: solo para tests (`httpx.MockTransport`).
    """

    def __init__(
        self,
        configuration: ClientConfiguration | None = None,
        *,
        settings: AppSettings | None = None,
        timeout_seconds: float | None = None,
        reachability: Reachability | None = None,
        logger: logging.Logger | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._configuration = configuration or ClientConfiguration.default()
        if timeout_seconds is None:
            timeout_seconds = (
                settings.http_timeout_seconds
                if settings is not None
                else AppSettings.model_fields["http_timeout_seconds"].default
            )
        self._timeout_seconds = timeout_seconds
        self._reachability = reachability or NetworkReachability()
        self._logger = logger or logging.getLogger(__name__)
        self._transport = transport

    @property
    def configuration(self) -> ClientConfiguration:
        return self._configuration

    async def request(self, endpoint: APIEndpoint) -> RawResponse:
        if not self._reachability.is_connected:
            raise APIError.network_error()

        request = build_request(endpoint, self._configuration)
        if request is None:
            raise APIError.invalid_endpoint()

        try:
            async with build_async_client(
                timeout_seconds=self._timeout_seconds,
                transport=self._transport,
            ) as client:
                request.extensions["timeout"] = client.timeout.as_dict()
                response = await client.send(request)
                data = await response.aread()
        except httpx.HTTPError as exc:
            log_exchange(self._logger, request=request, data=None, response=None, error=exc)
            raise APIError.bad_server_response() from exc

        failure = classify_status(response.status_code)
        log_exchange(self._logger, request=request, data=data, response=response, error=failure)
        if failure is not None:
            raise failure
        return RawResponse(data=data, status_code=response.status_code)

    async def request_decoded(
        self,
        endpoint: APIEndpoint,
        as_type: Any,
        decoder: Callable[[bytes], T] | None = None,
    ) -> T:
        raw = await self.request(endpoint)
        decode = decoder or TypeAdapter(as_type).validate_json
        try:
            return decode(raw.data)
        except Exception as exc:
            self._logger.error("❌ error decoding %s: %s", endpoint.path, exc)
            raise APIError.parsing(exc) from exc

    async def request_mapped(self, endpoint: APIEndpoint, mapper: Mappable[Any, T]) -> T:
        model = await self.request_decoded(endpoint, mapper.input_type)
        return mapper.map(model)
