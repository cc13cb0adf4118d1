"""Doctor command for environment diagnostics."""

from __future__ import annotations

import tempfile
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from adapters.json_storage import JsonAddressBookStorage
from adapters.report_exporter import render_persons_html
from core.config import AppSettings, write_user_env_vars
from core.errors import DataLoadingError

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _check_data_file(path: Path) -> tuple[str, str]:
    try:
        address_book = JsonAddressBookStorage(path).read()
    except DataLoadingError as exc:
        return "FAIL", str(exc)
    if address_book is None:
        return "MISSING", "Will be created on the first command"
    return "OK", f"{len(address_book)} persons"


def _check_writable(directory: Path) -> tuple[bool, str]:
    """Try to create a scratch file in `directory` (or its closest existing parent)."""

    probe_dir = directory
    while not probe_dir.exists() and probe_dir != probe_dir.parent:
        probe_dir = probe_dir.parent
    try:
        with tempfile.NamedTemporaryFile(dir=probe_dir):
            pass
    except OSError as exc:
        return False, str(exc)
    return True, str(probe_dir)


def _check_template() -> tuple[bool, str]:
    try:
        render_persons_html(persons=[])
    except Exception as exc:
        return False, str(exc)
    return True, "OK"


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()

    table = Table(title="TABook Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("Data file", "OK", str(settings.data_file_path))
    table.add_row("Log level", "OK", settings.log_level.upper())

    status, detail = _check_data_file(settings.data_file_path)
    table.add_row("Data file contents", status, detail)

    ok_dir, detail_dir = _check_writable(settings.data_file_path.parent)
    table.add_row("Data directory writable", "OK" if ok_dir else "FAIL", detail_dir)

    ok_html, detail_html = _check_template()
    table.add_row("HTML export template", "OK" if ok_html else "FAIL", detail_html)

    _console.print(table)

    if status == "FAIL":
        _console.print(
            "\n[yellow]Note:[/yellow] An unreadable data file is ignored at startup and replaced "
            "by an empty address book on the next save. Fix or move it first."
        )


@app.command()
def setup() -> None:
    """Interactive setup (stores config in the user config .env)."""

    settings = AppSettings()

    data_file = typer.prompt(
        "Data file path",
        default=str(settings.data_file_path),
        show_default=True,
    ).strip()
    log_level = typer.prompt("Log level", default=settings.log_level.upper(), show_default=True).strip().upper()

    if not data_file:
        raise typer.BadParameter("data file path is required")
    if log_level not in _LOG_LEVELS:
        raise typer.BadParameter(f"log level must be one of {', '.join(_LOG_LEVELS)}")

    env_path = write_user_env_vars(
        {
            "TABOOK_DATA_FILE_PATH": data_file,
            "TABOOK_LOG_LEVEL": log_level,
        }
    )

    _console.print(f"[green]Saved config to:[/green] {env_path}")
