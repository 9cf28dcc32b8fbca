"""Serialización JSON del resultado de una comparación.

Por qué JSON:
- Interoperabilidad con otras herramientas y pipelines (`--json | jq`).
- Se imprime en stdout; la comparación no persiste nada en disco.
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import TypeAdapter

from core.domain.models import DiffEntry
from core.domain.record import CollectionResult
from core.services.comparison import ComparisonResult

_ENTRIES_ADAPTER: TypeAdapter[list[DiffEntry]] = TypeAdapter(list[DiffEntry])


def _collection_payload(result: CollectionResult) -> dict[str, Any]:
    return {
        "model": result.model_name,
        "ok": result.ok,
        "error": result.error,
        "record": result.record.to_dict(),
    }


def comparison_to_payload(result: ComparisonResult) -> dict[str, Any]:
    return {
        "left": _collection_payload(result.left),
        "right": _collection_payload(result.right),
        "entries": _ENTRIES_ADAPTER.dump_python(result.entries, mode="json"),
        "summary": result.summary.model_dump(mode="json"),
        "warnings": list(result.warnings),
    }


def export_comparison_json(result: ComparisonResult) -> str:
    """Devuelve el resultado como JSON UTF-8 con formato estable."""

    payload = comparison_to_payload(result)
    return json.dumps(payload, ensure_ascii=False, indent=2)
