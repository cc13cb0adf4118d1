"""Edits the details of a shown person."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel
from pydantic.config import ConfigDict

from core.commands.base import Command, CommandResult, resolve_index
from core.domain.index import Index
from core.domain.models import Person
from core.domain.predicates import show_all_persons
from core.domain.values import (
    Address,
    Email,
    GitHubId,
    Name,
    NusNetworkId,
    PersonType,
    Phone,
    StudentId,
    Tag,
    TutorialId,
)
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


class EditPersonDescriptor(BaseModel):
    """Fields to change on a person; `None` leaves a field untouched.

    `tags=frozenset()` clears all tags, `tags=None` keeps them.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: Name | None = None
    phone: Phone | None = None
    email: Email | None = None
    address: Address | None = None
    github_id: GitHubId | None = None
    nus_network_id: NusNetworkId | None = None
    person_type: PersonType | None = None
    tags: frozenset[Tag] | None = None
    student_id: StudentId | None = None
    tutorial_id: TutorialId | None = None

    def edited_fields(self) -> dict[str, Any]:
        return {
            field_name: getattr(self, field_name)
            for field_name in type(self).model_fields
            if getattr(self, field_name) is not None
        }

    def is_any_field_edited(self) -> bool:
        return bool(self.edited_fields())


def create_edited_person(person: Person, descriptor: EditPersonDescriptor) -> Person:
    return person.model_copy(update=descriptor.edited_fields())


class EditCommand(Command):
    COMMAND_WORD = "edit"

    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Edits the details of the person identified by the index number used in the "
        "displayed person list. Existing values will be overwritten by the input values.\n"
        f"Parameters: INDEX (must be a positive integer) [{PREFIX_NAME}NAME] [{PREFIX_PHONE}PHONE] "
        f"[{PREFIX_EMAIL}EMAIL] [{PREFIX_ADDRESS}ADDRESS] [{PREFIX_NUS_NETWORK_ID}NUS_NETWORK_ID] "
        f"[{PREFIX_GITHUB_ID}GITHUB_ID] [{PREFIX_TYPE}TYPE] [{PREFIX_STUDENT_ID}STUDENT_ID] "
        f"[{PREFIX_TUTORIAL_ID}TUTORIAL_ID] [{PREFIX_TAG}TAG]...\n"
        f"Example: {COMMAND_WORD} 1 {PREFIX_PHONE}91234567 {PREFIX_EMAIL}johndoe@example.com"
    )

    MESSAGE_EDIT_PERSON_SUCCESS = "Edited Person: {}"
    MESSAGE_NOT_EDITED = "At least one field to edit must be provided."
    MESSAGE_DUPLICATE_PERSON = "This person already exists in the address book."

    def __init__(self, index: Index, descriptor: EditPersonDescriptor) -> None:
        require_non_null(index, descriptor)
        self.index = index
        self.descriptor = descriptor

    def execute(self, model: "ModelManager") -> CommandResult:
        person_to_edit = resolve_index(model, self.index)
        edited_person = create_edited_person(person_to_edit, self.descriptor)

        if not person_to_edit.is_same_person(edited_person) and model.has_person(edited_person):
            raise CommandError(self.MESSAGE_DUPLICATE_PERSON)

        model.set_person(person_to_edit, edited_person)
        model.update_filtered_person_list(show_all_persons)
        logger.info("Edited person at index %s", self.index)
        return CommandResult(self.MESSAGE_EDIT_PERSON_SUCCESS.format(format_person(edited_person)))

    def arguments(self) -> tuple[Any, ...]:
        return (self.index, self.descriptor)
