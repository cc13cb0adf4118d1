"""Storage contract for the address book.

Why Protocol:
- The core only needs "read me a book" and "save this book"; the JSON file
  adapter (or an in-memory stub in tests) satisfies it structurally.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

from core.domain.address_book import AddressBook


@runtime_checkable
class AddressBookStorage(Protocol):
    """Minimal persistence contract.

    Rules:
    - `read` returns None when nothing has been stored yet.
    - `read` raises `DataLoadingError` when stored data is unusable.
    - `save` raises `OSError` when writing fails.
    """

    @property
    def file_path(self) -> Path: ...

    def read(self) -> AddressBook | None: ...

    def save(self, address_book: AddressBook) -> None: ...
