"""Error taxonomy shared by the domain, the parser and command execution.

Only `ParseError` and `CommandError` are shown to the user. `NullArgumentError`
marks a caller bug; value objects signal bad input with a plain `ValueError`.
"""

from __future__ import annotations


class NullArgumentError(TypeError):
    """A required argument was `None`."""


class ParseError(Exception):
    """User input does not follow the expected format."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class CommandError(Exception):
    """A parsed command could not be executed."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class DuplicatePersonError(Exception):
    def __init__(self) -> None:
        super().__init__("Operation would result in duplicate persons")


class PersonNotFoundError(Exception):
    def __init__(self) -> None:
        super().__init__("Person not found in the address book")


class DataLoadingError(Exception):
    """The data file exists but its content cannot be turned into an address book."""


def require_non_null(*values: object) -> None:
    for value in values:
        if value is None:
            raise NullArgumentError("argument must not be None")


def check_argument(condition: bool, message: str) -> None:
    if not condition:
        raise ValueError(message)
