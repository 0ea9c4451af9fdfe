"""Documentation record fields and derived data models.

A documentation record is the mapping an upstream symbol extractor produces
for one symbol. Every field is optional; lookups go through :func:`get`, so a
missing field and a field of the wrong type read the same way.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, TypeVar

T = TypeVar("T")

DocRecord = Mapping[str, Any]


class DocField(str, Enum):
    """Known documentation record keys."""

    NAME = "name"
    PARSED_DECLARATION = "parsedDeclaration"
    DOC_DECLARATION = "docDeclaration"
    DOC_ABSTRACT = "docAbstract"
    DOC_DISCUSSION_XML = "docDiscussionXML"
    DOC_DISCUSSION = "docDiscussion"
    FILE_PATH = "filePath"


def get(
    record: DocRecord, field: DocField, kind: type[T] | tuple[type, ...] = str
) -> T | None:
    """Look up ``field`` in ``record``.

    Returns None when the field is missing or its value is not a ``kind``;
    ``kind`` may be a tuple of types, as with :func:`isinstance`.
    """
    value = record.get(field.value)
    if isinstance(value, kind):
        return value
    return None


@dataclass(frozen=True)
class DebugInfo:
    """Introspection view of a single record."""

    name: str
    declaration: str  # Raw parsed declaration, not Markdown
    file: str  # Source path with the configured prefix removed
    is_documented: bool

    def as_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "declaration": self.declaration,
            "file": self.file,
            "isDocumented": self.is_documented,
        }
