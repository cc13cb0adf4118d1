"""TABook command line.

`shell` runs an interactive loop; `exec` runs a single command, which is handy
for scripts. Both go through `LogicManager`, so they save after each command.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from adapters.json_storage import JsonAddressBookStorage
from cli import doctor
from cli.ui_components import build_persons_table, build_result_panel, print_banner
from core.commands.base import CommandResult
from core.config import AppSettings
from core.services.logic import LogicManager, load_model

app = typer.Typer(no_args_is_help=True, help="TABook: a contact book for teaching teams.")
app.add_typer(doctor.app, name="doctor")

_console = Console()

_DATA_FILE_OPTION = typer.Option(
    None,
    "--data-file",
    "-f",
    help="JSON data file to use instead of the configured one.",
)


def configure_logging(level: str) -> None:
    """Route all logging through Rich on stderr."""

    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False, rich_tracebacks=True)],
        force=True,
    )


def _load_settings(data_file: Optional[Path]) -> AppSettings:
    settings = AppSettings()
    if data_file is not None:
        settings = settings.model_copy(update={"data_file_path": data_file})
    return settings


def _build_logic(settings: AppSettings) -> LogicManager:
    storage = JsonAddressBookStorage(settings.data_file_path)
    return LogicManager(model=load_model(storage), storage=storage)


def _render(result: CommandResult, logic: LogicManager) -> None:
    _console.print(build_result_panel(result))
    if result.success and not (result.show_help or result.exit):
        _console.print(build_persons_table(logic.filtered_persons))


@app.command()
def shell(data_file: Optional[Path] = _DATA_FILE_OPTION) -> None:
    """Start the interactive shell; type `exit` to leave."""

    settings = _load_settings(data_file)
    configure_logging(settings.log_level)
    logic = _build_logic(settings)

    if settings.show_banner:
        print_banner(_console)
    _console.print(build_persons_table(logic.filtered_persons))

    while True:
        try:
            line = _console.input("[bold cyan]tabook>[/bold cyan] ")
        except (EOFError, KeyboardInterrupt):
            _console.print()
            break
        if not line.strip():
            continue

        result = logic.execute(line)
        _render(result, logic)
        if result.exit:
            break


@app.command("exec")
def exec_command(
    command_text: str = typer.Argument(..., help='One command line, e.g. "find alex".'),
    data_file: Optional[Path] = _DATA_FILE_OPTION,
) -> None:
    """Run one command and exit with status 1 if it failed."""

    settings = _load_settings(data_file)
    configure_logging(settings.log_level)
    logic = _build_logic(settings)

    result = logic.execute(command_text)
    _render(result, logic)
    if not result.success:
        raise typer.Exit(code=1)


def run() -> None:
    app()
