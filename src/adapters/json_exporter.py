"""JSON export of the shown persons.

Each record uses the data file schema, so an export can be loaded as a data
file.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Sequence

from adapters.json_storage import JsonAdaptedPerson
from core.domain.models import Person


def export_persons_json(*, persons: Sequence[Person], output_path: Path) -> Path:
    """Export `persons` as UTF-8 JSON with a stable layout."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload = {"persons": [JsonAdaptedPerson.from_person(person).model_dump(mode="json") for person in persons]}
    output_path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path
