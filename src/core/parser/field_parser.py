"""Turns raw argument strings into value objects.

Every `parse_*` function:
- raises `NullArgumentError` for `None`;
- trims surrounding whitespace;
- raises `ParseError` with the value object's constraint message when the
  trimmed text is not acceptable.

Bounds of an index against the shown list are not checked here.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Iterable, TypeVar

from core.domain.index import Index
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
from core.errors import ParseError, require_non_null

MESSAGE_INVALID_INDEX = "Index is not a non-zero unsigned integer."
MESSAGE_INVALID_FILE_PATH = "File path should not be blank and should end with .csv, .json or .html"

SUPPORTED_EXPORT_SUFFIXES = (".csv", ".json", ".html")

# Largest position accepted, matching a signed 32-bit integer.
MAX_INDEX = 2**31 - 1

_UNSIGNED_INTEGER = re.compile(r"[0-9]+")

V = TypeVar("V", bound=ValueObject)


def _parse_value(raw: str, value_type: type[V]) -> V:
    require_non_null(raw)
    try:
        return value_type(raw.strip())
    except ValueError as exc:
        raise ParseError(str(exc)) from exc


def _is_non_zero_unsigned_integer(text: str) -> bool:
    if _UNSIGNED_INTEGER.fullmatch(text) is None:
        return False
    significant = text.lstrip("0")
    if not significant or len(significant) > len(str(MAX_INDEX)):
        return False
    return int(significant) <= MAX_INDEX


def parse_index(one_based_index: str) -> Index:
    """Parse a one-based position such as "3"."""

    require_non_null(one_based_index)
    trimmed = one_based_index.strip()
    if not _is_non_zero_unsigned_integer(trimmed):
        raise ParseError(MESSAGE_INVALID_INDEX)
    return Index.from_one_based(int(trimmed))


def parse_name(name: str) -> Name:
    return _parse_value(name, Name)


def parse_phone(phone: str) -> Phone:
    return _parse_value(phone, Phone)


def parse_address(address: str) -> Address:
    return _parse_value(address, Address)


def parse_email(email: str) -> Email:
    return _parse_value(email, Email)


def parse_tag(tag: str) -> Tag:
    return _parse_value(tag, Tag)


def parse_tags(tags: Iterable[str]) -> frozenset[Tag]:
    """Parse every tag; one bad tag fails the whole collection."""

    require_non_null(tags)
    return frozenset(parse_tag(tag) for tag in tags)


def parse_github_id(github_id: str) -> GitHubId:
    return _parse_value(github_id, GitHubId)


def parse_nus_network_id(nus_network_id: str) -> NusNetworkId:
    return _parse_value(nus_network_id, NusNetworkId)


def parse_type(person_type: str) -> PersonType:
    return _parse_value(person_type, PersonType)


def parse_student_id(student_id: str) -> StudentId:
    return _parse_value(student_id, StudentId)


def parse_tutorial_id(tutorial_id: str) -> TutorialId:
    return _parse_value(tutorial_id, TutorialId)


def parse_file_path(file_path: str) -> Path:
    """Validate an export destination; only the shape is checked, not the disk."""

    require_non_null(file_path)
    trimmed = file_path.strip()
    if not trimmed or "\x00" in trimmed or trimmed.endswith(("/", "\\")):
        raise ParseError(MESSAGE_INVALID_FILE_PATH)

    path = Path(trimmed)
    if path.suffix.lower() not in SUPPORTED_EXPORT_SUFFIXES:
        raise ParseError(MESSAGE_INVALID_FILE_PATH)
    return path
