"""Tagged parse outcomes.

The public parsing boundary returns a `ParseResult` instead of raising, so the
caller decides what to do by looking at `ok` and `failure.kind`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Generic, TypeVar

from core.errors import NullArgumentError, ParseError

T = TypeVar("T")


class FailureKind(str, Enum):
    NULL_ARGUMENT = "null_argument"
    ILLEGAL_ARGUMENT = "illegal_argument"
    PARSE_ERROR = "parse_error"


@dataclass(frozen=True)
class ParseFailure:
    kind: FailureKind
    message: str


@dataclass(frozen=True)
class ParseResult(Generic[T]):
    """Either a parsed `value` or a `failure`, never both."""

    value: T | None = None
    failure: ParseFailure | None = None

    @property
    def ok(self) -> bool:
        return self.failure is None

    @classmethod
    def success(cls, value: T) -> "ParseResult[T]":
        return cls(value=value)

    @classmethod
    def fail(cls, kind: FailureKind, message: str) -> "ParseResult[T]":
        return cls(failure=ParseFailure(kind=kind, message=message))

    def unwrap(self) -> T:
        """Return the value, or raise `ParseError` carrying the failure message."""

        if self.failure is not None:
            raise ParseError(self.failure.message)
        return self.value  # type: ignore[return-value]


def attempt(fn: Callable[..., T], *args: Any) -> ParseResult[T]:
    """Run one parse function and tag how it ended."""

    try:
        return ParseResult.success(fn(*args))
    except NullArgumentError as exc:
        return ParseResult.fail(FailureKind.NULL_ARGUMENT, str(exc))
    except ParseError as exc:
        return ParseResult.fail(FailureKind.PARSE_ERROR, exc.message)
    except ValueError as exc:
        return ParseResult.fail(FailureKind.ILLEGAL_ARGUMENT, str(exc))
