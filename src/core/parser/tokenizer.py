"""Splits an argument string into prefixed values.

Input shape: `<preamble> <prefix><value> <prefix><value> ...`

A prefix only counts when it starts the string or follows whitespace, so
`t/` is not found inside `tut/` and `a/` is not found inside `https://a/b`
unless a space precedes it.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from core.errors import ParseError
from core.messages import duplicate_prefixes_message

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Prefix:
    """Marker that introduces one argument value, e.g. `n/`."""

    text: str

    def __str__(self) -> str:
        return self.text


class ArgumentMultimap:
    """Values found for each prefix, in the order they appeared."""

    def __init__(self, preamble: str = "") -> None:
        self._preamble = preamble
        self._values: dict[Prefix, list[str]] = {}

    def put(self, prefix: Prefix, value: str) -> None:
        self._values.setdefault(prefix, []).append(value)

    def get_value(self, prefix: Prefix) -> str | None:
        """Last value given for `prefix`, or None if it never appeared."""

        values = self._values.get(prefix)
        return values[-1] if values else None

    def get_all_values(self, prefix: Prefix) -> list[str]:
        return list(self._values.get(prefix, []))

    def get_preamble(self) -> str:
        return self._preamble

    def are_prefixes_present(self, *prefixes: Prefix) -> bool:
        return all(prefix in self._values for prefix in prefixes)

    def verify_no_duplicate_prefixes_for(self, *prefixes: Prefix) -> None:
        duplicated = [prefix for prefix in prefixes if len(self._values.get(prefix, [])) > 1]
        if duplicated:
            raise ParseError(duplicate_prefixes_message(duplicated))


def _find_prefix_positions(args: str, prefixes: tuple[Prefix, ...]) -> list[tuple[int, Prefix]]:
    positions: list[tuple[int, Prefix]] = []
    for prefix in prefixes:
        pattern = re.compile(r"(?<!\S)" + re.escape(prefix.text))
        positions.extend((match.start(), prefix) for match in pattern.finditer(args))
    positions.sort(key=lambda item: item[0])
    return positions


def tokenize(args: str, *prefixes: Prefix) -> ArgumentMultimap:
    """Tokenize `args` using the given prefixes.

    Values are trimmed. A prefix present with nothing after it maps to "".
    """

    positions = _find_prefix_positions(args, prefixes)
    preamble_end = positions[0][0] if positions else len(args)
    multimap = ArgumentMultimap(preamble=args[:preamble_end].strip())

    for i, (start, prefix) in enumerate(positions):
        value_start = start + len(prefix.text)
        value_end = positions[i + 1][0] if i + 1 < len(positions) else len(args)
        multimap.put(prefix, args[value_start:value_end].strip())

    logger.debug("Tokenized %r into %d prefixed values", args, len(positions))
    return multimap
