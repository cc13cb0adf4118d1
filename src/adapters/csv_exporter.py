"""CSV export of the shown persons, one row per person."""

from __future__ import annotations

import csv
from pathlib import Path
from typing import Sequence

from adapters.json_storage import JsonAdaptedPerson
from core.domain.models import Person

CSV_COLUMNS = (
    "name",
    "phone",
    "email",
    "address",
    "github_id",
    "nus_network_id",
    "person_type",
    "student_id",
    "tutorial_id",
    "tags",
)


def export_persons_csv(*, persons: Sequence[Person], output_path: Path) -> Path:
    """Export `persons` as CSV with a header row; tags are joined with ";"."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    with output_path.open("w", encoding="utf-8", newline="") as handle:
        writer = csv.DictWriter(handle, fieldnames=CSV_COLUMNS)
        writer.writeheader()
        for person in persons:
            row = JsonAdaptedPerson.from_person(person).model_dump()
            row["tags"] = ";".join(row["tags"])
            writer.writerow({column: row[column] or "" for column in CSV_COLUMNS})
    return output_path
