"""Errores tipados del cliente HTTP.

Por qué un único tipo con `kind`:
- Los consumidores (view-models, CLI) solo necesitan distinguir la categoría
  del fallo y un mensaje presentable; no la excepción concreta de httpx.
- Permite comparar errores por categoría en tests sin depender de instancias.
"""

from __future__ import annotations

from enum import Enum
from typing import NamedTuple


class RawResponse(NamedTuple):
    """Bytes crudos y status de una respuesta clasificada como exitosa."""

    data: bytes
    status_code: int


class APIErrorKind(str, Enum):
    INVALID_ENDPOINT = "invalid_endpoint"
    BAD_SERVER_RESPONSE = "bad_server_response"
    NETWORK_ERROR = "network_error"
    PARSING = "parsing"
    INVALID_ACCESS_TOKEN = "invalid_access_token"
    INVALID_REFRESH_TOKEN = "invalid_refresh_token"


_MESSAGES: dict[APIErrorKind, str] = {
    APIErrorKind.NETWORK_ERROR: (
        "Sorry! The service cannot be reached right now. Please check your internet connection."
    ),
    APIErrorKind.BAD_SERVER_RESPONSE: (
        "Sorry, we are having trouble with the service. Please try again later."
    ),
}

_UNKNOWN_MESSAGE = "Unknown error"


class APIError(Exception):
    """Fallo de una petición, etiquetado por `kind`.

    Solo `PARSING` envuelve otra excepción (`cause`). La igualdad compara la
    etiqueta y, para `PARSING`, la identidad del error envuelto.
    """

    def __init__(self, kind: APIErrorKind, cause: BaseException | None = None) -> None:
        self.kind = APIErrorKind(kind)
        self.cause = cause
        detail = f"{self.kind.value}: {cause}" if cause is not None else self.kind.value
        super().__init__(detail)

    @classmethod
    def invalid_endpoint(cls) -> "APIError":
        return cls(APIErrorKind.INVALID_ENDPOINT)

    @classmethod
    def bad_server_response(cls) -> "APIError":
        return cls(APIErrorKind.BAD_SERVER_RESPONSE)

    @classmethod
    def network_error(cls) -> "APIError":
        return cls(APIErrorKind.NETWORK_ERROR)

    @classmethod
    def parsing(cls, cause: BaseException) -> "APIError":
        return cls(APIErrorKind.PARSING, cause)

    @classmethod
    def invalid_access_token(cls) -> "APIError":
        return cls(APIErrorKind.INVALID_ACCESS_TOKEN)

    @classmethod
    def invalid_refresh_token(cls) -> "APIError":
        return cls(APIErrorKind.INVALID_REFRESH_TOKEN)

    @property
    def message(self) -> str:
        """Mensaje presentable al usuario final."""

        return _MESSAGES.get(self.kind, _UNKNOWN_MESSAGE)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, APIError):
            return NotImplemented
        if self.kind is not other.kind:
            return False
        if self.kind is APIErrorKind.PARSING:
            return self.cause is other.cause
        return True

    def __hash__(self) -> int:
        if self.kind is APIErrorKind.PARSING:
            return hash((self.kind, id(self.cause)))
        return hash(self.kind)

    def __repr__(self) -> str:
        if self.cause is not None:
            return f"APIError({self.kind.value}, cause={self.cause!r})"
        return f"APIError({self.kind.value})"
