"""Position of a record in the list currently shown to the user."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Index:
    """A list position usable both one-based (user facing) and zero-based.

    Bounds against the shown list are checked when a command runs.
    """

    zero_based: int

    def __post_init__(self) -> None:
        if self.zero_based < 0:
            raise ValueError(f"index must not be negative: {self.zero_based}")

    @property
    def one_based(self) -> int:
        return self.zero_based + 1

    @classmethod
    def from_zero_based(cls, value: int) -> "Index":
        return cls(value)

    @classmethod
    def from_one_based(cls, value: int) -> "Index":
        return cls(value - 1)

    def __str__(self) -> str:
        return str(self.one_based)
