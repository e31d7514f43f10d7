"""Endpoint + configuración → `httpx.Request`.

Función pura: no hace I/O ni lanza por datos del endpoint. Si no se puede
construir un request devuelve `None` y el cliente lo reporta como
`invalid_endpoint`.
"""

from __future__ import annotations

import json
import logging
from typing import Any

import httpx
from pydantic import BaseModel

from core.domain.endpoint import (
    APIEndpoint,
    BodyPayload,
    ClientConfiguration,
    DictBody,
    EncodableBody,
    RawBody,
)

logger = logging.getLogger(__name__)


def _default_encoder(value: Any) -> bytes:
    if isinstance(value, BaseModel):
        return value.model_dump_json(by_alias=True).encode("utf-8")
    return json.dumps(value).encode("utf-8")


def encode_body(body: BodyPayload | None) -> bytes | None:
    """Serializa el body según su variante.

    Un fallo de serialización (excepción del encoder o resultado que no sea
    bytes/str) se trata como "sin body": el request sale igual.
    """

    if body is None:
        return None
    if isinstance(body, RawBody):
        return body.data
    if not isinstance(body, (DictBody, EncodableBody)):
        raise TypeError(f"unsupported body payload: {type(body).__name__}")

    try:
        if isinstance(body, DictBody):
            encoded = json.dumps(dict(body.values), **dict(body.options))
        else:
            encoder = body.encoder or _default_encoder
            encoded = encoder(body.value)
    except Exception as exc:
        logger.debug("Body serialization failed, sending without body: %s", exc)
        return None

    if isinstance(encoded, str):
        return encoded.encode("utf-8")
    if isinstance(encoded, (bytes, bytearray)):
        return bytes(encoded)
    logger.debug("Body encoder returned %s, sending without body", type(encoded).__name__)
    return None


def resolve_url(endpoint: APIEndpoint, configuration: ClientConfiguration) -> httpx.URL | None:
    base = endpoint.base_url or configuration.base_url
    if not base:
        return None
    try:
        base_url = httpx.URL(base)
    except httpx.InvalidURL:
        return None
    if not base_url.scheme or not base_url.host:
        return None

    # Se conserva el prefijo de path de la base (p.ej. GitHub Enterprise `/api/v3`).
    path = base_url.path.rstrip("/") + "/" + endpoint.path.lstrip("/")
    params = sorted(endpoint.url_queries.items())
    try:
        url = base_url.copy_with(path=path)
        if params:
            url = url.copy_merge_params(params)
    except httpx.InvalidURL:
        return None
    return url


def build_request(endpoint: APIEndpoint, configuration: ClientConfiguration) -> httpx.Request | None:
    url = resolve_url(endpoint, configuration)
    if url is None:
        return None

    # httpx.Headers es case-insensitive: el header del endpoint pisa al base.
    headers = httpx.Headers(dict(configuration.base_headers))
    headers.update(dict(endpoint.headers))
    return httpx.Request(
        endpoint.method.value,
        url,
        headers=headers,
        content=encode_body(endpoint.body),
    )
