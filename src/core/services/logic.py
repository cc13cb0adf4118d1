"""Command pipeline: parse one line, execute it, persist the result.

The CLI delegates every user command here, which keeps printing and prompting
out of the core and lets tests drive the whole flow without a terminal.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from core.commands.base import CommandResult
from core.domain.models import Person
from core.errors import CommandError, DataLoadingError
from core.interfaces.storage import AddressBookStorage
from core.parser.address_book_parser import AddressBookParser
from core.services.model import ModelManager

logger = logging.getLogger(__name__)

FILE_OPS_ERROR_FORMAT = "Could not save data to file: {}"


@dataclass
class LogicManager:
    """Runs user commands against a model backed by `storage`."""

    model: ModelManager
    storage: AddressBookStorage
    parser: AddressBookParser = field(default_factory=AddressBookParser)

    def execute(self, command_text: str) -> CommandResult:
        logger.info("----------------[USER COMMAND][%s]", command_text)

        parsed = self.parser.parse_command(command_text)
        failure = parsed.failure
        if failure is not None:
            logger.debug("Parse failed (%s): %s", failure.kind.value, failure.message)
            return CommandResult(failure.message, success=False)

        command = parsed.unwrap()
        try:
            result = command.execute(self.model)
        except CommandError as exc:
            logger.info("Command %s failed: %s", command.COMMAND_WORD, exc.message)
            return CommandResult(exc.message, success=False)

        try:
            self.storage.save(self.model.address_book)
        except OSError as exc:
            logger.error("Saving to %s failed: %s", self.storage.file_path, exc)
            return CommandResult(FILE_OPS_ERROR_FORMAT.format(exc), success=False)

        return result

    @property
    def filtered_persons(self) -> tuple[Person, ...]:
        return self.model.filtered_persons


def load_model(storage: AddressBookStorage) -> ModelManager:
    """Build the model from storage, falling back to an empty address book."""

    try:
        address_book = storage.read()
    except DataLoadingError as exc:
        logger.warning(
            "Data file %s could not be loaded (%s). Starting with an empty address book.",
            storage.file_path,
            exc,
        )
        return ModelManager()

    if address_book is None:
        logger.info("No data file at %s. Starting with an empty address book.", storage.file_path)
        return ModelManager()
    return ModelManager(address_book)
