"""User-facing messages shared across parsers and commands."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from core.domain.models import Person
    from core.parser.tokenizer import Prefix

MESSAGE_UNKNOWN_COMMAND = "Unknown command"
MESSAGE_INVALID_COMMAND_FORMAT = "Invalid command format! \n{}"
MESSAGE_INVALID_PERSON_DISPLAYED_INDEX = "The person index provided is invalid"
MESSAGE_PERSONS_LISTED_OVERVIEW = "{} persons listed!"
MESSAGE_DUPLICATE_FIELDS = "Multiple values specified for the following single-valued field(s): "


def invalid_format(usage: str) -> str:
    return MESSAGE_INVALID_COMMAND_FORMAT.format(usage)


def duplicate_prefixes_message(prefixes: Iterable["Prefix"]) -> str:
    unique = dict.fromkeys(str(prefix) for prefix in prefixes)
    return MESSAGE_DUPLICATE_FIELDS + " ".join(unique)


def format_person(person: "Person") -> str:
    return str(person)
