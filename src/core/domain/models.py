"""Domain records (Pydantic v2).

Why Pydantic in the domain:
- Frozen models give value equality and hashing for whole records.
- Field types are the validated value objects from `core.domain.values`, so a
  `Person` can only be built from already-checked parts.
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

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
)


class Person(BaseModel):
    """A student or staff member in the address book."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: Name = Field(..., description="Full name as shown in lists.")
    phone: Phone
    email: Email
    address: Address
    github_id: GitHubId
    nus_network_id: NusNetworkId = Field(
        ...,
        description="Institution login; two records with the same one are the same person.",
    )
    person_type: PersonType
    tags: frozenset[Tag] = Field(default_factory=frozenset)
    student_id: StudentId | None = None
    tutorial_id: TutorialId | None = None

    def is_same_person(self, other: "Person | None") -> bool:
        """Weaker notion of equality used to reject duplicates."""

        if other is self:
            return True
        return other is not None and other.nus_network_id == self.nus_network_id

    def sorted_tags(self) -> list[Tag]:
        return sorted(self.tags, key=lambda tag: tag.value)

    def __str__(self) -> str:
        parts = [
            f"{self.name}",
            f"Phone: {self.phone}",
            f"Email: {self.email}",
            f"Address: {self.address}",
            f"GitHub: {self.github_id}",
            f"NUS Network ID: {self.nus_network_id}",
            f"Type: {self.person_type}",
        ]
        if self.student_id is not None:
            parts.append(f"Student ID: {self.student_id}")
        if self.tutorial_id is not None:
            parts.append(f"Tutorial: {self.tutorial_id}")
        if self.tags:
            parts.append("Tags: " + ", ".join(f"[{tag}]" for tag in self.sorted_tags()))
        return "; ".join(parts)
