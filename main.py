"""Development entry point for a source checkout.

    python main.py shell
    python main.py exec "list"

The packages live under `src/`, so the path is added here when the project
has not been installed with `pip install -e .`.
"""

from __future__ import annotations

import sys
from pathlib import Path


def main() -> None:
    src = Path(__file__).resolve().parent / "src"
    if str(src) not in sys.path:
        sys.path.insert(0, str(src))

    # Windows consoles default to cp1252; the Rich banner and tables need UTF-8.
    if sys.platform == "win32":
        sys.stdout.reconfigure(encoding="utf-8")
        sys.stderr.reconfigure(encoding="utf-8")

    from cli.main import app  # noqa: PLC0415

    app(prog_name="tabook")


if __name__ == "__main__":
    main()
