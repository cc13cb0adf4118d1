"""Command contract and result."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar

from core.domain.index import Index
from core.domain.models import Person
from core.errors import CommandError
from core.messages import MESSAGE_INVALID_PERSON_DISPLAYED_INDEX

if TYPE_CHECKING:
    from core.services.model import ModelManager


@dataclass(frozen=True)
class CommandResult:
    """What the user should see after a command ran."""

    feedback_to_user: str
    show_help: bool = False
    exit: bool = False
    success: bool = True


class Command(ABC):
    """An executable command built from one parsed line of input.

    Commands compare equal when they are of the same kind and carry the same
    argument bundle.
    """

    COMMAND_WORD: ClassVar[str]
    MESSAGE_USAGE: ClassVar[str]

    @abstractmethod
    def execute(self, model: "ModelManager") -> CommandResult:
        """Run against `model`; raise `CommandError` on failure."""

    def arguments(self) -> tuple[Any, ...]:
        return ()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Command):
            return NotImplemented
        return self.COMMAND_WORD == other.COMMAND_WORD and self.arguments() == other.arguments()

    def __hash__(self) -> int:
        return hash((self.COMMAND_WORD, self.arguments()))

    def __repr__(self) -> str:
        return f"{type(self).__name__}{self.arguments()!r}"


def resolve_index(model: "ModelManager", index: Index) -> Person:
    """Return the shown person at `index`, checking it against the shown list."""

    shown = model.filtered_persons
    if index.zero_based >= len(shown):
        raise CommandError(MESSAGE_INVALID_PERSON_DISPLAYED_INDEX)
    return shown[index.zero_based]
