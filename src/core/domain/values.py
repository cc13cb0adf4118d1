"""Value objects for person records.

Each type wraps one string, validates it once at construction and is immutable
afterwards. Equality and hashing follow the stored string and the concrete
type, so `Tag("cs") != Name("cs")`.

Callers trim input before constructing; that is the field parser's job.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

from core.errors import check_argument, require_non_null

_ALNUM_CHAR = r"[^\W_]"
_ALNUM = _ALNUM_CHAR + "+"


@dataclass(frozen=True)
class ValueObject:
    """Base for all single-string value objects."""

    value: str

    MESSAGE_CONSTRAINTS: ClassVar[str] = ""
    VALIDATION_REGEX: ClassVar[re.Pattern[str]]

    def __post_init__(self) -> None:
        if type(self) is ValueObject:
            raise TypeError("ValueObject is a base class; instantiate a concrete value type")
        require_non_null(self.value)
        check_argument(type(self).is_valid(self.value), self.MESSAGE_CONSTRAINTS)

    @classmethod
    def is_valid(cls, test: object) -> bool:
        """Return True if `test` is an acceptable raw value for this type."""

        if not isinstance(test, str):
            return False
        return cls.VALIDATION_REGEX.fullmatch(test) is not None

    def __str__(self) -> str:
        return self.value


class Name(ValueObject):
    MESSAGE_CONSTRAINTS = "Names should only contain alphanumeric characters and spaces, and it should not be blank"
    VALIDATION_REGEX = re.compile(r"[a-zA-Z0-9][a-zA-Z0-9 ]*")


class Phone(ValueObject):
    MESSAGE_CONSTRAINTS = "Phone numbers should only contain numbers, and it should be at least 3 digits long"
    VALIDATION_REGEX = re.compile(r"[0-9]{3,}")


class Address(ValueObject):
    MESSAGE_CONSTRAINTS = "Addresses can take any values, and it should not be blank"
    # First character must not be whitespace; no line breaks anywhere.
    VALIDATION_REGEX = re.compile(r"[^\s][^\n\r\u0085\u2028\u2029]*", re.ASCII)


class Email(ValueObject):
    MESSAGE_CONSTRAINTS = (
        "Emails should be of the format local-part@domain and adhere to the following constraints:\n"
        "1. The local-part should only contain alphanumeric characters and these special characters, "
        "excluding the parentheses, (+_.-). The local-part may not start or end with any special characters.\n"
        "2. This is followed by a '@' and then a domain name. The domain name is made up of domain labels "
        "separated by periods.\n"
        "The domain name must:\n"
        "    - end with a domain label at least 2 characters long\n"
        "    - have each domain label start and end with alphanumeric characters\n"
        "    - have each domain label consist of alphanumeric characters, separated only by hyphens, if any."
    )

    _LOCAL_PART = _ALNUM + r"(?:[+_.-]" + _ALNUM + r")*"
    _DOMAIN_PART = _ALNUM + r"(?:-" + _ALNUM + r")*"
    # Last label needs at least two adjacent alphanumerics.
    _LAST_LABEL = r"(?=[^.]*?" + _ALNUM_CHAR + r"{2})" + _DOMAIN_PART
    _DOMAIN = r"(?:" + _DOMAIN_PART + r"\.)*" + _LAST_LABEL
    VALIDATION_REGEX = re.compile(_LOCAL_PART + "@" + _DOMAIN, re.ASCII)


class Tag(ValueObject):
    MESSAGE_CONSTRAINTS = "Tags names should be alphanumeric"
    VALIDATION_REGEX = re.compile(r"[a-zA-Z0-9]+")


class GitHubId(ValueObject):
    MESSAGE_CONSTRAINTS = "GitHub ID must be valid, and it should not be blank"
    # Alphanumeric runs joined by single hyphens.
    VALIDATION_REGEX = re.compile(r"[a-zA-Z0-9]+(-[a-zA-Z0-9]+)*")


class NusNetworkId(ValueObject):
    MESSAGE_CONSTRAINTS = "NUS Network ID should start with e or E and be followed by exactly 7 digits"
    VALIDATION_REGEX = re.compile(r"[eE][0-9]{7}")


class StudentId(ValueObject):
    MESSAGE_CONSTRAINTS = (
        "Student ID should start with a letter, followed by 7 digits and end with a letter, "
        "e.g. A0123456X"
    )
    VALIDATION_REGEX = re.compile(r"[a-zA-Z][0-9]{7}[a-zA-Z]")


class TutorialId(ValueObject):
    MESSAGE_CONSTRAINTS = "Tutorial ID should be a number of at most 2 digits"
    VALIDATION_REGEX = re.compile(r"[0-9]{1,2}")


class Role(str, Enum):
    """Roles a person can hold in a course."""

    STUDENT = "student"
    STAFF = "staff"


class PersonType(ValueObject):
    MESSAGE_CONSTRAINTS = "Type should be either 'student' or 'staff'"

    @classmethod
    def is_valid(cls, test: object) -> bool:
        return isinstance(test, str) and test in {role.value for role in Role}

    @property
    def role(self) -> Role:
        return Role(self.value)
