"""Maps a command word to its parser."""

from __future__ import annotations

import logging
import re
from typing import Callable

from core.commands import (
    AddCommand,
    ClearCommand,
    Command,
    DeleteCommand,
    EditCommand,
    ExitCommand,
    ExportCommand,
    FindCommand,
    HelpCommand,
    ListCommand,
)
from core.errors import ParseError, require_non_null
from core.messages import MESSAGE_UNKNOWN_COMMAND, invalid_format
from core.parser.command_parsers import (
    AddCommandParser,
    DeleteCommandParser,
    EditCommandParser,
    ExportCommandParser,
    FindCommandParser,
)
from core.parser.result import ParseResult, attempt

logger = logging.getLogger(__name__)

_BASIC_COMMAND_FORMAT = re.compile(r"(?P<command_word>\S+)(?P<arguments>.*)", re.DOTALL)

_COMMAND_TYPES: tuple[type[Command], ...] = (
    AddCommand,
    EditCommand,
    DeleteCommand,
    FindCommand,
    ListCommand,
    ExportCommand,
    ClearCommand,
    HelpCommand,
    ExitCommand,
)


class AddressBookParser:
    """Entry point for raw user input."""

    def __init__(self) -> None:
        usages = tuple(command_type.MESSAGE_USAGE for command_type in _COMMAND_TYPES)
        self._parsers: dict[str, Callable[[str], Command]] = {
            AddCommand.COMMAND_WORD: AddCommandParser().parse,
            EditCommand.COMMAND_WORD: EditCommandParser().parse,
            DeleteCommand.COMMAND_WORD: DeleteCommandParser().parse,
            FindCommand.COMMAND_WORD: FindCommandParser().parse,
            ExportCommand.COMMAND_WORD: ExportCommandParser().parse,
            # Argument-less commands ignore any trailing text.
            ListCommand.COMMAND_WORD: lambda _args: ListCommand(),
            ClearCommand.COMMAND_WORD: lambda _args: ClearCommand(),
            ExitCommand.COMMAND_WORD: lambda _args: ExitCommand(),
            HelpCommand.COMMAND_WORD: lambda _args: HelpCommand(usages),
        }

    @property
    def command_words(self) -> tuple[str, ...]:
        return tuple(self._parsers)

    def parse_command(self, user_input: str) -> ParseResult[Command]:
        """Parse one line of input into a command, or a tagged failure."""

        return attempt(self._parse, user_input)

    def _parse(self, user_input: str) -> Command:
        require_non_null(user_input)
        match = _BASIC_COMMAND_FORMAT.fullmatch(user_input.strip())
        if match is None:
            raise ParseError(invalid_format(HelpCommand.MESSAGE_USAGE))

        command_word = match.group("command_word")
        arguments = match.group("arguments")
        logger.debug("Command word: %s; Arguments: %r", command_word, arguments)

        parse = self._parsers.get(command_word)
        if parse is None:
            logger.debug("Input had unknown command word %r", command_word)
            raise ParseError(MESSAGE_UNKNOWN_COMMAND)
        return parse(arguments)
