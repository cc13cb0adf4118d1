"""
Unit Tests for Command Parsers

Each parser either builds the expected command or raises ParseError with the
message the user will see.
"""

from pathlib import Path

import pytest

from core.commands import (
    AddCommand,
    DeleteCommand,
    EditCommand,
    EditPersonDescriptor,
    ExportCommand,
    FindCommand,
)
from core.domain.index import Index
from core.domain.predicates import NameContainsKeywordsPredicate
from core.domain.values import Email, Name, Phone, StudentId, Tag
from core.errors import ParseError
from core.messages import MESSAGE_DUPLICATE_FIELDS, invalid_format
from core.parser.command_parsers import (
    AddCommandParser,
    DeleteCommandParser,
    EditCommandParser,
    ExportCommandParser,
    FindCommandParser,
)
from core.parser.field_parser import MESSAGE_INVALID_FILE_PATH


AMY_REQUIRED = {
    "n/": "Amy Bee",
    "p/": "11111111",
    "e/": "amy@example.com",
    "a/": "Block 312, Amy Street 1",
    "u/": "e0000001",
    "g/": "amy-bee",
    "ty/": "student",
}


def _parse_failure(parser, args: str) -> str:
    with pytest.raises(ParseError) as exc_info:
        parser.parse(args)
    return exc_info.value.message


class TestAddCommandParser:
    """Tests for AddCommandParser."""

    parser = AddCommandParser()

    def test_parse_when_all_fields_present_then_add_command(self, amy, amy_add_args):
        assert self.parser.parse(amy_add_args) == AddCommand(amy)

    def test_parse_when_optional_fields_omitted_then_none(self, amy_add_args):
        args = amy_add_args.replace(" s/A0000001X tut/11 t/friend", "")
        person = self.parser.parse(args).to_add
        assert person.student_id is None
        assert person.tutorial_id is None
        assert person.tags == frozenset()

    def test_parse_when_fields_in_any_order_then_same_person(self, amy):
        args = (
            " t/friend tut/11 s/A0000001X ty/student g/amy-bee u/e0000001"
            " a/Block 312, Amy Street 1 e/amy@example.com p/11111111 n/Amy Bee"
        )
        assert self.parser.parse(args) == AddCommand(amy)

    def test_parse_when_multiple_tags_then_all_kept(self, amy_add_args):
        person = self.parser.parse(amy_add_args + " t/husband t/friend").to_add
        assert person.tags == frozenset({Tag("friend"), Tag("husband")})

    @pytest.mark.parametrize("prefix", list(AMY_REQUIRED))
    def test_parse_when_required_field_missing_then_usage(self, prefix):
        args = "".join(f" {key}{value}" for key, value in AMY_REQUIRED.items() if key != prefix)
        assert _parse_failure(self.parser, args) == invalid_format(AddCommand.MESSAGE_USAGE)

    def test_parse_when_only_required_fields_then_add_command(self):
        args = "".join(f" {key}{value}" for key, value in AMY_REQUIRED.items())
        assert self.parser.parse(args).to_add.name == Name("Amy Bee")

    def test_parse_when_preamble_present_then_usage(self, amy_add_args):
        assert _parse_failure(self.parser, " some preamble" + amy_add_args) == invalid_format(AddCommand.MESSAGE_USAGE)

    def test_parse_when_single_valued_prefix_repeated_then_duplicate_message(self, amy_add_args):
        message = _parse_failure(self.parser, amy_add_args + " n/Amy Tan p/999")
        assert message == MESSAGE_DUPLICATE_FIELDS + "n/ p/"

    @pytest.mark.parametrize(
        "old,new,expected",
        [
            ("n/Amy Bee", "n/James&", Name.MESSAGE_CONSTRAINTS),
            ("p/11111111", "p/911a", Phone.MESSAGE_CONSTRAINTS),
            ("e/amy@example.com", "e/bob!yahoo", Email.MESSAGE_CONSTRAINTS),
            ("s/A0000001X", "s/12345", StudentId.MESSAGE_CONSTRAINTS),
            ("t/friend", "t/hubby*", Tag.MESSAGE_CONSTRAINTS),
        ],
    )
    def test_parse_when_field_invalid_then_field_message(self, amy_add_args, old, new, expected):
        assert _parse_failure(self.parser, amy_add_args.replace(old, new)) == expected

    def test_parse_when_missing_prefix_and_invalid_value_then_usage_wins(self, amy_add_args):
        args = amy_add_args.replace(" p/11111111", "").replace("n/Amy Bee", "n/James&")
        assert _parse_failure(self.parser, args) == invalid_format(AddCommand.MESSAGE_USAGE)


class TestEditCommandParser:
    """Tests for EditCommandParser."""

    parser = EditCommandParser()

    def test_parse_when_one_field_then_descriptor_with_that_field(self):
        expected = EditCommand(Index.from_one_based(1), EditPersonDescriptor(phone=Phone("91234567")))
        assert self.parser.parse(" 1 p/91234567") == expected

    def test_parse_when_several_fields_then_all_set(self):
        command = self.parser.parse(" 2 n/Amy Tan e/amy@u.nus.edu t/ta")
        assert command.index == Index.from_one_based(2)
        assert command.descriptor == EditPersonDescriptor(
            name=Name("Amy Tan"),
            email=Email("amy@u.nus.edu"),
            tags=frozenset({Tag("ta")}),
        )

    def test_parse_when_lone_empty_tag_then_clears_tags(self):
        command = self.parser.parse(" 1 t/")
        assert command.descriptor.tags == frozenset()
        assert command.descriptor.is_any_field_edited()

    def test_parse_when_empty_tag_mixed_with_tags_then_tag_error(self):
        assert _parse_failure(self.parser, " 1 t/friend t/") == Tag.MESSAGE_CONSTRAINTS

    def test_parse_when_no_tag_prefix_then_tags_untouched(self):
        assert self.parser.parse(" 1 n/Amy").descriptor.tags is None

    @pytest.mark.parametrize("args", ["", " n/Amy", " -5 n/Amy", " 0 n/Amy", " 1 some random string", " 1 i/ string"])
    def test_parse_when_index_invalid_then_usage(self, args):
        assert _parse_failure(self.parser, args) == invalid_format(EditCommand.MESSAGE_USAGE)

    def test_parse_when_no_field_then_not_edited(self):
        assert _parse_failure(self.parser, " 1") == EditCommand.MESSAGE_NOT_EDITED

    def test_parse_when_field_invalid_then_field_message(self):
        assert _parse_failure(self.parser, " 1 p/abc") == Phone.MESSAGE_CONSTRAINTS

    def test_parse_when_single_valued_prefix_repeated_then_duplicate_message(self):
        message = _parse_failure(self.parser, " 1 p/911 e/a@bc p/922 e/b@cd")
        assert message == MESSAGE_DUPLICATE_FIELDS + "p/ e/"

    def test_parse_when_tag_repeated_then_allowed(self):
        command = self.parser.parse(" 1 t/a t/b")
        assert command.descriptor.tags == frozenset({Tag("a"), Tag("b")})


class TestDeleteCommandParser:
    """Tests for DeleteCommandParser."""

    parser = DeleteCommandParser()

    def test_parse_when_valid_index_then_delete_command(self):
        assert self.parser.parse(" 1") == DeleteCommand(Index.from_one_based(1))

    @pytest.mark.parametrize("args", ["", " a", " 0", " -1", " 1 2", " 2147483648"])
    def test_parse_when_invalid_then_usage(self, args):
        assert _parse_failure(self.parser, args) == invalid_format(DeleteCommand.MESSAGE_USAGE)


class TestFindCommandParser:
    """Tests for FindCommandParser."""

    parser = FindCommandParser()

    def test_parse_when_keywords_then_find_command(self):
        expected = FindCommand(NameContainsKeywordsPredicate(("Alice", "Bob")))
        assert self.parser.parse(" Alice Bob") == expected

    def test_parse_when_extra_whitespace_then_ignored(self):
        expected = FindCommand(NameContainsKeywordsPredicate(("Alice", "Bob")))
        assert self.parser.parse(" \n Alice \n \t Bob  \t") == expected

    @pytest.mark.parametrize("args", ["", "     "])
    def test_parse_when_blank_then_usage(self, args):
        assert _parse_failure(self.parser, args) == invalid_format(FindCommand.MESSAGE_USAGE)


class TestExportCommandParser:
    """Tests for ExportCommandParser."""

    parser = ExportCommandParser()

    @pytest.mark.parametrize("args", [" out.csv", " exports/tut 11.json", " report.HTML"])
    def test_parse_when_supported_path_then_export_command(self, args):
        assert self.parser.parse(args) == ExportCommand(Path(args.strip()))

    @pytest.mark.parametrize("args", ["", " ", " out.txt", " out", " folder/"])
    def test_parse_when_unusable_path_then_usage_only(self, args):
        message = _parse_failure(self.parser, args)
        assert message == invalid_format(ExportCommand.MESSAGE_USAGE)
        assert MESSAGE_INVALID_FILE_PATH not in message
