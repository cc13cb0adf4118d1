"""Commands that take no arguments."""

from __future__ import annotations

from typing import TYPE_CHECKING

from core.commands.base import Command, CommandResult
from core.domain.address_book import AddressBook
from core.domain.predicates import show_all_persons

if TYPE_CHECKING:
    from core.services.model import ModelManager


class ListCommand(Command):
    COMMAND_WORD = "list"
    MESSAGE_USAGE = f"{COMMAND_WORD}: Lists all persons in the address book."
    MESSAGE_SUCCESS = "Listed all persons"

    def execute(self, model: "ModelManager") -> CommandResult:
        model.update_filtered_person_list(show_all_persons)
        return CommandResult(self.MESSAGE_SUCCESS)


class ClearCommand(Command):
    COMMAND_WORD = "clear"
    MESSAGE_USAGE = f"{COMMAND_WORD}: Removes every person from the address book."
    MESSAGE_SUCCESS = "Address book has been cleared!"

    def execute(self, model: "ModelManager") -> CommandResult:
        model.set_address_book(AddressBook())
        model.update_filtered_person_list(show_all_persons)
        return CommandResult(self.MESSAGE_SUCCESS)


class ExitCommand(Command):
    COMMAND_WORD = "exit"
    MESSAGE_USAGE = f"{COMMAND_WORD}: Exits the program."
    MESSAGE_EXIT_ACKNOWLEDGEMENT = "Exiting Address Book as requested ..."

    def execute(self, model: "ModelManager") -> CommandResult:
        return CommandResult(self.MESSAGE_EXIT_ACKNOWLEDGEMENT, exit=True)


class HelpCommand(Command):
    COMMAND_WORD = "help"
    MESSAGE_USAGE = f"{COMMAND_WORD}: Shows program usage instructions.\nExample: {COMMAND_WORD}"
    SHOWING_HELP_MESSAGE = "Available commands:"

    def __init__(self, usages: tuple[str, ...] = ()) -> None:
        self.usages = usages

    def execute(self, model: "ModelManager") -> CommandResult:
        lines = [self.SHOWING_HELP_MESSAGE, *self.usages]
        return CommandResult("\n\n".join(lines), show_help=True)
