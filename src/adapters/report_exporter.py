"""HTML contact sheet export.

Why it lives in adapters:
- HTML rendering is an infrastructure detail (Jinja2).
- The core only knows `Person` records.
"""

from __future__ import annotations

from collections import Counter
from datetime import datetime, timezone
from pathlib import Path
from typing import Sequence

from jinja2 import Environment, FileSystemLoader, select_autoescape

from core.domain.models import Person
from core.domain.values import Role

_TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"


def _get_env() -> Environment:
    return Environment(
        loader=FileSystemLoader(str(_TEMPLATES_DIR)),
        autoescape=select_autoescape(["html", "xml"]),
    )


def render_persons_html(*, persons: Sequence[Person]) -> str:
    """Render a self-contained HTML page listing `persons`."""

    generated_at = datetime.now(timezone.utc).isoformat(timespec="seconds")
    role_counts = Counter(person.person_type.role for person in persons)

    template = _get_env().get_template("contacts.html")
    return template.render(
        persons=persons,
        generated_at=generated_at,
        persons_total=len(persons),
        students_count=role_counts[Role.STUDENT],
        staff_count=role_counts[Role.STAFF],
    )


def export_persons_html(*, persons: Sequence[Person], output_path: Path) -> Path:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(render_persons_html(persons=persons), encoding="utf-8")
    return output_path
