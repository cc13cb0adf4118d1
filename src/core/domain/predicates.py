"""Filters applied to the shown person list."""

from __future__ import annotations

from dataclasses import dataclass

from core.domain.models import Person


def show_all_persons(person: Person) -> bool:
    return True


@dataclass(frozen=True)
class NameContainsKeywordsPredicate:
    """Matches persons whose name contains any keyword as a whole word, ignoring case."""

    keywords: tuple[str, ...]

    def __call__(self, person: Person) -> bool:
        words = {word.lower() for word in person.name.value.split()}
        return any(keyword.lower() in words for keyword in self.keywords)
