"""Soft-mask dictionaries for transparency."""

from __future__ import annotations

from enum import Enum

from .util import Name


class MaskSubType(Enum):
    LUMINOSITY = "Luminosity"
    ALPHA = "Alpha"

    def as_str(self) -> str:
        return self.value


class SoftMask:
    """A soft mask built from a transparency-group stream."""

    def __init__(self, sub_type: MaskSubType, stream: object) -> None:
        self.dictionary: dict[str, object] = {"S": Name(sub_type.as_str()), "G": stream}

    def _add(self, key: str, value: object) -> SoftMask:
        if key in self.dictionary:
            raise KeyError(f"soft mask already has a {key} entry")
        self.dictionary[key] = value
        return self

    def typed(self) -> SoftMask:
        return self._add("Type", Name("Mask"))

    def with_backdrop(self, backdrop: list[float]) -> SoftMask:
        return self._add("BG", backdrop)

    def with_function(self, function: dict[str, object]) -> SoftMask:
        return self._add("TR", function)

    def with_function_identity(self) -> SoftMask:
        return self._add("TR", Name("Identity"))