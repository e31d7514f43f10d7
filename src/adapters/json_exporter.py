"""Exportación JSON de usuarios.

Por qué JSON:
- Interoperabilidad con otras herramientas y pipelines.
- Permite guardar un listado paginado sin depender del render de la CLI.
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from pathlib import Path

from core.domain.models import UserEntity


def export_users_json(*, users: Sequence[UserEntity], output_path: Path) -> Path:
    """Exporta la lista a JSON UTF-8 con formato estable (sin el `id` efímero)."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload = [user.model_dump(mode="json", exclude={"id"}) for user in users]
    output_path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path
