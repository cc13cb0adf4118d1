"""Deletes a shown person."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from core.commands.base import Command, CommandResult, resolve_index
from core.domain.index import Index
from core.errors import require_non_null
from core.messages import format_person

if TYPE_CHECKING:
    from core.services.model import ModelManager

logger = logging.getLogger(__name__)


class DeleteCommand(Command):
    COMMAND_WORD = "delete"

    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Deletes the person identified by the index number used in the displayed person list.\n"
        "Parameters: INDEX (must be a positive integer)\n"
        f"Example: {COMMAND_WORD} 1"
    )

    MESSAGE_DELETE_PERSON_SUCCESS = "Deleted Person: {}"

    def __init__(self, index: Index) -> None:
        require_non_null(index)
        self.target_index = index

    def execute(self, model: "ModelManager") -> CommandResult:
        person_to_delete = resolve_index(model, self.target_index)
        model.delete_person(person_to_delete)
        logger.info("Deleted person at index %s", self.target_index)
        return CommandResult(self.MESSAGE_DELETE_PERSON_SUCCESS.format(format_person(person_to_delete)))

    def arguments(self) -> tuple[Any, ...]:
        return (self.target_index,)
