"""Picks an exporter from the output file extension."""

from __future__ import annotations

from pathlib import Path

from adapters.csv_exporter import export_persons_csv
from adapters.json_exporter import export_persons_json
from adapters.report_exporter import export_persons_html
from core.interfaces.exporter import PersonExporter

_EXPORTERS: dict[str, PersonExporter] = {
    ".csv": export_persons_csv,
    ".json": export_persons_json,
    ".html": export_persons_html,
}


def exporter_for(output_path: Path) -> PersonExporter:
    """Return the exporter for `output_path`; raises ValueError for unknown extensions."""

    suffix = output_path.suffix.lower()
    try:
        return _EXPORTERS[suffix]
    except KeyError:
        raise ValueError(f"Unsupported export format: {suffix or '(none)'}") from None
