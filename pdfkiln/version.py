"""PDF specification versions."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Version(Enum):
    """A PDF version, ordered from oldest to newest."""

    V1_0 = "1.0"
    V1_1 = "1.1"
    V1_2 = "1.2"
    V1_3 = "1.3"
    V1_4 = "1.4"
    V1_5 = "1.5"
    V1_6 = "1.6"
    V1_7 = "1.7"
    V1_7_1 = "1.7.1"
    V1_7_3 = "1.7.3"
    V1_7_5 = "1.7.5"
    V1_7_6 = "1.7.6"
    V1_7_8 = "1.7.8"
    V2_2017 = "2.2017"
    V2_2020 = "2.2020"

    @classmethod
    def default(cls) -> "Version":
        return cls.V1_5

    def as_str(self) -> str:
        return self.value

    def as_bytes(self) -> bytes:
        return self.value.encode("ascii")

    @property
    def _rank(self) -> int:
        return list(type(self)).index(self)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._rank < other._rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._rank <= other._rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._rank > other._rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._rank >= other._rank


@dataclass
class TargetVersion:
    """The version a document is being written for."""

    target: Version = field(default_factory=Version.default)