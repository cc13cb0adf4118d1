"""JSON file storage for the address book.

Format:
    {"persons": [{"name": "...", "phone": "...", ..., "tags": ["..."]}]}

Every stored field is a plain string; reading re-checks each one against the
value-object rules so a hand-edited file cannot smuggle in invalid data.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError
from pydantic.config import ConfigDict

from core.domain.address_book import AddressBook
from core.domain.models import Person
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
    ValueObject,
)
from core.errors import DataLoadingError

logger = logging.getLogger(__name__)

MESSAGE_DUPLICATE_PERSON = "Persons list contains duplicate person(s)."

_FIELD_TYPES: dict[str, type[ValueObject]] = {
    "name": Name,
    "phone": Phone,
    "email": Email,
    "address": Address,
    "github_id": GitHubId,
    "nus_network_id": NusNetworkId,
    "person_type": PersonType,
    "student_id": StudentId,
    "tutorial_id": TutorialId,
}


class JsonAdaptedPerson(BaseModel):
    """Storage schema of one person."""

    model_config = ConfigDict(extra="ignore")

    name: str
    phone: str
    email: str
    address: str
    github_id: str
    nus_network_id: str
    person_type: str
    tags: list[str] = Field(default_factory=list)
    student_id: str | None = None
    tutorial_id: str | None = None

    @classmethod
    def from_person(cls, person: Person) -> "JsonAdaptedPerson":
        return cls(
            name=person.name.value,
            phone=person.phone.value,
            email=person.email.value,
            address=person.address.value,
            github_id=person.github_id.value,
            nus_network_id=person.nus_network_id.value,
            person_type=person.person_type.value,
            tags=[tag.value for tag in person.sorted_tags()],
            student_id=person.student_id.value if person.student_id else None,
            tutorial_id=person.tutorial_id.value if person.tutorial_id else None,
        )

    def to_person(self) -> Person:
        """Build the domain record; raises `DataLoadingError` naming the first bad field."""

        values: dict[str, ValueObject] = {}
        for field_name, value_type in _FIELD_TYPES.items():
            raw = getattr(self, field_name)
            if raw is None:
                continue
            if not value_type.is_valid(raw):
                raise DataLoadingError(f"{field_name}: {value_type.MESSAGE_CONSTRAINTS}")
            values[field_name] = value_type(raw)

        for raw_tag in self.tags:
            if not Tag.is_valid(raw_tag):
                raise DataLoadingError(f"tags: {Tag.MESSAGE_CONSTRAINTS}")

        return Person(**values, tags=frozenset(Tag(raw_tag) for raw_tag in self.tags))


class JsonSerializableAddressBook(BaseModel):
    persons: list[JsonAdaptedPerson] = Field(default_factory=list)

    @classmethod
    def from_address_book(cls, address_book: AddressBook) -> "JsonSerializableAddressBook":
        return cls(persons=[JsonAdaptedPerson.from_person(person) for person in address_book])

    def to_address_book(self) -> AddressBook:
        address_book = AddressBook()
        for adapted in self.persons:
            person = adapted.to_person()
            if address_book.has_person(person):
                raise DataLoadingError(MESSAGE_DUPLICATE_PERSON)
            address_book.add_person(person)
        return address_book


class JsonAddressBookStorage:
    """Reads and writes the address book as a UTF-8 JSON file."""

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    @property
    def file_path(self) -> Path:
        return self._file_path

    def read(self) -> AddressBook | None:
        if not self._file_path.exists():
            logger.info("Data file %s not found", self._file_path)
            return None

        try:
            data = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise DataLoadingError(f"Could not read {self._file_path}: {exc}") from exc

        try:
            document = JsonSerializableAddressBook.model_validate(data)
        except ValidationError as exc:
            raise DataLoadingError(f"Invalid data in {self._file_path}: {exc.error_count()} error(s)") from exc

        return document.to_address_book()

    def save(self, address_book: AddressBook) -> None:
        self._file_path.parent.mkdir(parents=True, exist_ok=True)
        payload = JsonSerializableAddressBook.from_address_book(address_book).model_dump(mode="json")
        self._file_path.write_text(
            json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
            encoding="utf-8",
        )
        logger.debug("Saved %d persons to %s", len(address_book), self._file_path)
