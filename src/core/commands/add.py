"""Adds a person to the address book."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from core.commands.base import Command, CommandResult
from core.domain.models import Person
from core.errors import CommandError, require_non_null
from core.messages import format_person
from core.parser.syntax import (
    PREFIX_ADDRESS,
    PREFIX_EMAIL,
    PREFIX_GITHUB_ID,
    PREFIX_NAME,
    PREFIX_NUS_NETWORK_ID,
    PREFIX_PHONE,
    PREFIX_STUDENT_ID,
    PREFIX_TAG,
    PREFIX_TUTORIAL_ID,
    PREFIX_TYPE,
)

if TYPE_CHECKING:
    from core.services.model import ModelManager

logger = logging.getLogger(__name__)


class AddCommand(Command):
    COMMAND_WORD = "add"

    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Adds a person to the address book. "
        f"Parameters: {PREFIX_NAME}NAME {PREFIX_PHONE}PHONE {PREFIX_EMAIL}EMAIL {PREFIX_ADDRESS}ADDRESS "
        f"{PREFIX_NUS_NETWORK_ID}NUS_NETWORK_ID {PREFIX_GITHUB_ID}GITHUB_ID {PREFIX_TYPE}TYPE "
        f"[{PREFIX_STUDENT_ID}STUDENT_ID] [{PREFIX_TUTORIAL_ID}TUTORIAL_ID] [{PREFIX_TAG}TAG]...\n"
        f"Example: {COMMAND_WORD} {PREFIX_NAME}John Doe {PREFIX_PHONE}98765432 "
        f"{PREFIX_EMAIL}johnd@example.com {PREFIX_ADDRESS}311, Clementi Ave 2, #02-25 "
        f"{PREFIX_NUS_NETWORK_ID}e0123456 {PREFIX_GITHUB_ID}john-doe {PREFIX_TYPE}student "
        f"{PREFIX_STUDENT_ID}A0123456X {PREFIX_TUTORIAL_ID}11 {PREFIX_TAG}friends"
    )

    MESSAGE_SUCCESS = "New person added: {}"
    MESSAGE_DUPLICATE_PERSON = "This person already exists in the address book"

    def __init__(self, person: Person) -> None:
        require_non_null(person)
        self.to_add = person

    def execute(self, model: "ModelManager") -> CommandResult:
        if model.has_person(self.to_add):
            raise CommandError(self.MESSAGE_DUPLICATE_PERSON)

        model.add_person(self.to_add)
        logger.info("Added person %s", self.to_add.nus_network_id)
        return CommandResult(self.MESSAGE_SUCCESS.format(format_person(self.to_add)))

    def arguments(self) -> tuple[Any, ...]:
        return (self.to_add,)
