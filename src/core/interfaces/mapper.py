"""Contrato de mapeo wire → dominio.

Por qué Protocol genérico:
- El cliente HTTP decodifica `input_type` y delega la transformación al
  mapper, sin conocer los modelos concretos de cada API.
"""

from __future__ import annotations

from typing import Any, Protocol, TypeVar, runtime_checkable

InputT = TypeVar("InputT")
OutputT = TypeVar("OutputT", covariant=True)


@runtime_checkable
class Mappable(Protocol[InputT, OutputT]):
    """Transforma un modelo decodificado (`input_type`) en una entidad del dominio.

    `input_type` es cualquier tipo que pydantic sepa validar (modelos,
    `list[Model]`, etc.). `map` puede lanzar; el error se propaga tal cual.
    """

    input_type: Any

    def map(self, value: InputT) -> OutputT: ...
