"""Ordered collection of unique persons."""

from __future__ import annotations

from typing import Iterable, Iterator

from core.domain.models import Person
from core.errors import DuplicatePersonError, PersonNotFoundError, require_non_null


class AddressBook:
    """Keeps persons in insertion order; no two entries satisfy `is_same_person`."""

    def __init__(self, persons: Iterable[Person] = ()) -> None:
        self._persons: list[Person] = []
        for person in persons:
            self.add_person(person)

    @property
    def persons(self) -> tuple[Person, ...]:
        return tuple(self._persons)

    def has_person(self, person: Person) -> bool:
        require_non_null(person)
        return any(existing.is_same_person(person) for existing in self._persons)

    def add_person(self, person: Person) -> None:
        if self.has_person(person):
            raise DuplicatePersonError()
        self._persons.append(person)

    def set_person(self, target: Person, edited: Person) -> None:
        """Replace `target` with `edited`, keeping its position."""

        require_non_null(target, edited)
        try:
            position = self._persons.index(target)
        except ValueError:
            raise PersonNotFoundError() from None

        if not target.is_same_person(edited) and self.has_person(edited):
            raise DuplicatePersonError()
        self._persons[position] = edited

    def remove_person(self, person: Person) -> None:
        try:
            self._persons.remove(person)
        except ValueError:
            raise PersonNotFoundError() from None

    def reset_data(self, other: "AddressBook") -> None:
        self._persons = list(other.persons)

    def __len__(self) -> int:
        return len(self._persons)

    def __iter__(self) -> Iterator[Person]:
        return iter(self.persons)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AddressBook):
            return NotImplemented
        return self._persons == other._persons

    def __repr__(self) -> str:
        return f"AddressBook({len(self._persons)} persons)"
