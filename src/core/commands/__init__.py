"""Executable commands.

Each command carries an already-validated argument bundle and runs against
the in-memory model.
"""

from core.commands.add import AddCommand
from core.commands.base import Command, CommandResult
from core.commands.delete import DeleteCommand
from core.commands.edit import EditCommand, EditPersonDescriptor
from core.commands.export import ExportCommand
from core.commands.find import FindCommand
from core.commands.general import ClearCommand, ExitCommand, HelpCommand, ListCommand

__all__ = [
    "AddCommand",
    "ClearCommand",
    "Command",
    "CommandResult",
    "DeleteCommand",
    "EditCommand",
    "EditPersonDescriptor",
    "ExitCommand",
    "ExportCommand",
    "FindCommand",
    "HelpCommand",
    "ListCommand",
]
