"""JSON export of the aggregated result.

Why JSON:
- Interoperability with other tools and pipelines.
- Lets a run be kept as a fixture without re-hitting the API.
"""

from __future__ import annotations

import json
from pathlib import Path

from core.domain.models import AggregateResult


def result_to_json(result: AggregateResult) -> str:
    # No sort_keys: `films` order and field order are part of the output.
    return json.dumps(result.model_dump(mode="json"), ensure_ascii=False, indent=2)


def export_result_json(*, result: AggregateResult, output_path: Path) -> Path:
    """Write `AggregateResult` as UTF-8 JSON with a stable layout."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(result_to_json(result) + "\n", encoding="utf-8")
    return output_path
