"""Data models for design drills."""

from dataclasses import dataclass, field
from enum import Enum


class EntityKind(str, Enum):
    """Kind tag carried by every entity."""

    BOOK = "book"
    USER = "user"


@dataclass(frozen=True)
class Book:
    """A book record identified by name and ISBN."""

    name: str
    isbn: str
    kind: EntityKind = field(default=EntityKind.BOOK, init=False)

    def describe(self) -> str:
        """Return a human-readable description of the book."""
        return f'Book with name: "{self.name}" and isbn: "{self.isbn}"'

    def as_row(self) -> dict[str, str]:
        """Return the fields of the book for tabular output."""
        return {"kind": self.kind.value, "name": self.name, "isbn": self.isbn}


@dataclass(frozen=True)
class User:
    """A user record.

    The age is accepted verbatim and is never part of the description.
    """

    name: str
    age: int | str
    kind: EntityKind = field(default=EntityKind.USER, init=False)

    def describe(self) -> str:
        """Return a human-readable description of the user."""
        return f'User with name: "{self.name}"'

    def as_row(self) -> dict[str, str]:
        """Return the fields of the user for tabular output."""
        return {"kind": self.kind.value, "name": self.name, "age": str(self.age)}


Entity = Book | User


@dataclass(frozen=True)
class RequirementDescription:
    """A single requirement line of a requirements document."""

    code: str
    description: str
