"""Exports the shown list to a file."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from adapters.exporters import exporter_for
from core.commands.base import Command, CommandResult
from core.errors import CommandError, require_non_null

if TYPE_CHECKING:
    from core.services.model import ModelManager

logger = logging.getLogger(__name__)


class ExportCommand(Command):
    COMMAND_WORD = "export"

    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Exports the displayed person list to a file. "
        "The format follows the file extension (.csv, .json or .html).\n"
        "Parameters: FILE_PATH\n"
        f"Example: {COMMAND_WORD} exports/tutorial-11.csv"
    )

    MESSAGE_SUCCESS = "Exported {count} persons to {path}"
    MESSAGE_FAILURE = "Could not export to {path}: {error}"

    def __init__(self, file_path: Path) -> None:
        require_non_null(file_path)
        self.file_path = file_path

    def execute(self, model: "ModelManager") -> CommandResult:
        persons = model.filtered_persons
        exporter = exporter_for(self.file_path)
        try:
            written = exporter(persons=persons, output_path=self.file_path)
        except OSError as exc:
            raise CommandError(self.MESSAGE_FAILURE.format(path=self.file_path, error=exc)) from exc

        logger.info("Exported %d persons to %s", len(persons), written)
        return CommandResult(self.MESSAGE_SUCCESS.format(count=len(persons), path=written))

    def arguments(self) -> tuple[Any, ...]:
        return (self.file_path,)
