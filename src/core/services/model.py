"""In-memory state the commands operate on."""

from __future__ import annotations

import logging
from typing import Callable

from core.domain.address_book import AddressBook
from core.domain.models import Person
from core.domain.predicates import show_all_persons

logger = logging.getLogger(__name__)

PersonPredicate = Callable[[Person], bool]


class ModelManager:
    """Owns the address book and the filter that decides which persons are shown."""

    def __init__(self, address_book: AddressBook | None = None) -> None:
        self._address_book = AddressBook()
        if address_book is not None:
            self._address_book.reset_data(address_book)
        self._predicate: PersonPredicate = show_all_persons
        logger.debug("Initialised model with %d persons", len(self._address_book))

    @property
    def address_book(self) -> AddressBook:
        return self._address_book

    def set_address_book(self, address_book: AddressBook) -> None:
        self._address_book.reset_data(address_book)

    def has_person(self, person: Person) -> bool:
        return self._address_book.has_person(person)

    def add_person(self, person: Person) -> None:
        self._address_book.add_person(person)
        self.update_filtered_person_list(show_all_persons)

    def delete_person(self, person: Person) -> None:
        self._address_book.remove_person(person)

    def set_person(self, target: Person, edited: Person) -> None:
        self._address_book.set_person(target, edited)

    @property
    def filtered_persons(self) -> tuple[Person, ...]:
        """The list currently shown to the user; indexes refer to it."""

        return tuple(person for person in self._address_book.persons if self._predicate(person))

    def update_filtered_person_list(self, predicate: PersonPredicate) -> None:
        self._predicate = predicate
