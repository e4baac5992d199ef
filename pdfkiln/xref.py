"""The cross-reference table that maps object numbers to byte offsets."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import BinaryIO

ROOT_GENERATION = 65535


class Generation(Enum):
    """Generation number of an entry; the free-list head uses the root value."""

    NORMAL = 0
    ROOT = ROOT_GENERATION

    def as_u16(self) -> int:
        return self.value


class ObjectStatus(Enum):
    """Whether a table entry is in use or on the free list."""

    IN_USE = "n"
    FREE = "f"

    def __str__(self) -> str:
        return self.value


class XRefErrorKind(Enum):
    EMPTY_TABLE = "empty cross-reference table"
    INVALID_ROOT_ENTRY = "first cross-reference entry must be free with the root generation"


class XRefError(Exception):
    """Raised when the cross-reference table cannot be written."""

    def __init__(self, kind: XRefErrorKind) -> None:
        super().__init__(kind.value)
        self.kind = kind


@dataclass
class XRefEntry:
    """One line of the table.

    For an in-use entry the offset is the byte position of the object; for a
    free entry it is the number of the next free object.
    """

    object_number: int
    offset_or_next_free: int
    object_status: ObjectStatus
    generation: Generation = Generation.NORMAL

    def serialize(self) -> bytes:
        """The fixed-width 20-byte form of the entry."""
        line = (
            f"{self.offset_or_next_free:010d} {self.generation.as_u16():05d} "
            f"{self.object_status}\r\n"
        )
        return line.encode("ascii")


class XRefTable:
    """A single-section table whose numbering starts at object 0."""

    def __init__(self) -> None:
        self._entries: list[XRefEntry] = []
        self.position = 0
        self.add_entry(XRefEntry(0, 0, ObjectStatus.FREE, Generation.ROOT))

    @property
    def entries(self) -> tuple[XRefEntry, ...]:
        return tuple(self._entries)

    def add_entry(self, entry: XRefEntry) -> None:
        self._entries.append(entry)

    def serialize(self, stream: BinaryIO) -> None:
        """Write the table to ``stream`` and remember where it starts."""
        if not self._entries:
            raise XRefError(XRefErrorKind.EMPTY_TABLE)

        self._entries.sort(key=lambda e: e.object_number)

        first = self._entries[0]
        if first.generation is not Generation.ROOT or first.object_status is not ObjectStatus.FREE:
            raise XRefError(XRefErrorKind.INVALID_ROOT_ENTRY)

        self.position = stream.tell()
        header = f"xref\r\n0 {len(self._entries)}\r\n".encode("ascii")
        stream.write(header + b"".join(entry.serialize() for entry in self._entries))