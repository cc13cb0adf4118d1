"""Filters the shown list by name keywords."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from core.commands.base import Command, CommandResult
from core.domain.predicates import NameContainsKeywordsPredicate
from core.messages import MESSAGE_PERSONS_LISTED_OVERVIEW

if TYPE_CHECKING:
    from core.services.model import ModelManager


class FindCommand(Command):
    COMMAND_WORD = "find"

    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Finds all persons whose names contain any of the specified keywords "
        "(case-insensitive) and displays them as a list with index numbers.\n"
        "Parameters: KEYWORD [MORE_KEYWORDS]...\n"
        f"Example: {COMMAND_WORD} alice bob charlie"
    )

    def __init__(self, predicate: NameContainsKeywordsPredicate) -> None:
        self.predicate = predicate

    def execute(self, model: "ModelManager") -> CommandResult:
        model.update_filtered_person_list(self.predicate)
        return CommandResult(MESSAGE_PERSONS_LISTED_OVERVIEW.format(len(model.filtered_persons)))

    def arguments(self) -> tuple[Any, ...]:
        return (self.predicate,)
