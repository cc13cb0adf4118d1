"""One parser per command that takes arguments.

Error policy:
- `add` and the fields of `edit` let the field's own constraint message
  through, so the user learns which value was wrong.
- `delete`, `export` and the index of `edit` replace any inner failure with the
  command's usage message.
"""

from __future__ import annotations

import logging
from typing import Any

from core.commands import (
    AddCommand,
    DeleteCommand,
    EditCommand,
    EditPersonDescriptor,
    ExportCommand,
    FindCommand,
)
from core.domain.models import Person
from core.domain.predicates import NameContainsKeywordsPredicate
from core.domain.values import Tag
from core.errors import ParseError
from core.messages import invalid_format
from core.parser import field_parser
from core.parser.syntax import (
    PERSON_FIELD_PREFIXES,
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
    SINGLE_VALUED_PREFIXES,
)
from core.parser.tokenizer import ArgumentMultimap, Prefix, tokenize

logger = logging.getLogger(__name__)

# Single-valued person fields and the function that parses each one.
_FIELD_PARSERS: tuple[tuple[str, Prefix, Any], ...] = (
    ("name", PREFIX_NAME, field_parser.parse_name),
    ("phone", PREFIX_PHONE, field_parser.parse_phone),
    ("email", PREFIX_EMAIL, field_parser.parse_email),
    ("address", PREFIX_ADDRESS, field_parser.parse_address),
    ("github_id", PREFIX_GITHUB_ID, field_parser.parse_github_id),
    ("nus_network_id", PREFIX_NUS_NETWORK_ID, field_parser.parse_nus_network_id),
    ("person_type", PREFIX_TYPE, field_parser.parse_type),
    ("student_id", PREFIX_STUDENT_ID, field_parser.parse_student_id),
    ("tutorial_id", PREFIX_TUTORIAL_ID, field_parser.parse_tutorial_id),
)


def _parse_present_fields(argument_map: ArgumentMultimap) -> dict[str, Any]:
    fields: dict[str, Any] = {}
    for field_name, prefix, parse in _FIELD_PARSERS:
        raw = argument_map.get_value(prefix)
        if raw is not None:
            fields[field_name] = parse(raw)
    return fields


class AddCommandParser:
    REQUIRED_PREFIXES = (
        PREFIX_NAME,
        PREFIX_PHONE,
        PREFIX_EMAIL,
        PREFIX_ADDRESS,
        PREFIX_NUS_NETWORK_ID,
        PREFIX_GITHUB_ID,
        PREFIX_TYPE,
    )

    def parse(self, args: str) -> AddCommand:
        argument_map = tokenize(args, *PERSON_FIELD_PREFIXES)

        if not argument_map.are_prefixes_present(*self.REQUIRED_PREFIXES) or argument_map.get_preamble():
            raise ParseError(invalid_format(AddCommand.MESSAGE_USAGE))

        argument_map.verify_no_duplicate_prefixes_for(*SINGLE_VALUED_PREFIXES)
        fields = _parse_present_fields(argument_map)
        tags = field_parser.parse_tags(argument_map.get_all_values(PREFIX_TAG))

        return AddCommand(Person(**fields, tags=tags))


class EditCommandParser:
    def parse(self, args: str) -> EditCommand:
        argument_map = tokenize(args, *PERSON_FIELD_PREFIXES)

        try:
            index = field_parser.parse_index(argument_map.get_preamble())
        except ParseError as exc:
            raise ParseError(invalid_format(EditCommand.MESSAGE_USAGE)) from exc

        argument_map.verify_no_duplicate_prefixes_for(*SINGLE_VALUED_PREFIXES)
        fields = _parse_present_fields(argument_map)
        tags = self._parse_tags_for_edit(argument_map.get_all_values(PREFIX_TAG))
        if tags is not None:
            fields["tags"] = tags

        descriptor = EditPersonDescriptor(**fields)
        if not descriptor.is_any_field_edited():
            raise ParseError(EditCommand.MESSAGE_NOT_EDITED)

        return EditCommand(index, descriptor)

    @staticmethod
    def _parse_tags_for_edit(tags: list[str]) -> frozenset[Tag] | None:
        """`None` when no tag prefix was given; a lone empty `t/` clears all tags."""

        if not tags:
            return None
        if tags == [""]:
            return frozenset()
        return field_parser.parse_tags(tags)


class DeleteCommandParser:
    def parse(self, args: str) -> DeleteCommand:
        try:
            index = field_parser.parse_index(args)
        except ParseError as exc:
            raise ParseError(invalid_format(DeleteCommand.MESSAGE_USAGE)) from exc
        return DeleteCommand(index)


class FindCommandParser:
    def parse(self, args: str) -> FindCommand:
        trimmed = args.strip()
        if not trimmed:
            raise ParseError(invalid_format(FindCommand.MESSAGE_USAGE))
        return FindCommand(NameContainsKeywordsPredicate(tuple(trimmed.split())))


class ExportCommandParser:
    def parse(self, args: str) -> ExportCommand:
        try:
            file_path = field_parser.parse_file_path(args)
        except ParseError as exc:
            # Only the usage message reaches the user.
            logger.debug("Rejected export path %r: %s", args, exc.message)
            raise ParseError(invalid_format(ExportCommand.MESSAGE_USAGE)) from exc
        return ExportCommand(file_path)
