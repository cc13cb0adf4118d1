import sys
from pathlib import Path
from typing import Callable

import pytest

# Add src to sys.path so `core`, `adapters` and `cli` import without installing
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from core.domain.models import Person  # noqa: E402
from core.domain.values import (  # noqa: E402
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
)

AMY_FIELDS = {
    "name": "Amy Bee",
    "phone": "11111111",
    "email": "amy@example.com",
    "address": "Block 312, Amy Street 1",
    "github_id": "amy-bee",
    "nus_network_id": "e0000001",
    "person_type": "student",
    "student_id": "A0000001X",
    "tutorial_id": "11",
    "tags": ("friend",),
}

BOB_FIELDS = {
    "name": "Bob Choo",
    "phone": "22222222",
    "email": "bob@example.com",
    "address": "Block 123, Bobby Street 3",
    "github_id": "bob-choo",
    "nus_network_id": "E0000002",
    "person_type": "staff",
    "student_id": None,
    "tutorial_id": None,
    "tags": ("husband", "friend"),
}

AMY_ADD_ARGS = (
    " n/Amy Bee p/11111111 e/amy@example.com a/Block 312, Amy Street 1"
    " u/e0000001 g/amy-bee ty/student s/A0000001X tut/11 t/friend"
)

_VALUE_TYPES = {
    "name": Name,
    "phone": Phone,
    "email": Email,
    "address": Address,
    "github_id": GitHubId,
    "nus_network_id": NusNetworkId,
    "person_type": PersonType,
    "student_id": StudentId,
    "tutorial_id": TutorialId,
}


def build_person(fields: dict, **overrides) -> Person:
    """Build a Person from plain strings; `overrides` replace entries of `fields`."""
    merged = {**fields, **overrides}
    values = {
        key: value_type(merged[key])
        for key, value_type in _VALUE_TYPES.items()
        if merged.get(key) is not None
    }
    return Person(**values, tags=frozenset(Tag(tag) for tag in merged.get("tags", ())))


@pytest.fixture
def make_person() -> Callable[..., Person]:
    """Factory starting from Amy's fields."""
    return lambda **overrides: build_person(AMY_FIELDS, **overrides)


@pytest.fixture
def amy() -> Person:
    return build_person(AMY_FIELDS)


@pytest.fixture
def bob() -> Person:
    return build_person(BOB_FIELDS)


@pytest.fixture
def amy_add_args() -> str:
    """Arguments of an `add` command that builds exactly `amy`."""
    return AMY_ADD_ARGS
