"""Export contract."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, Sequence

from core.domain.models import Person


class PersonExporter(Protocol):
    """Writes persons to `output_path` and returns the path written."""

    def __call__(self, *, persons: Sequence[Person], output_path: Path) -> Path: ...
