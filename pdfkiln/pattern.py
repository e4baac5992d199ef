"""Tiling patterns."""

from __future__ import annotations

import hashlib
from enum import Enum

from .util import Matrix, Name, Rectangle


class PatternType(Enum):
    TILING = 1
    SHADING = 2


class TilingType(Enum):
    CONSTANT_SPACING = 1
    NO_DISTORTION = 2
    FASTER_TILING = 3


class PaintType(Enum):
    COLORED = 1
    UNCOLORED = 2


def _display(value: float) -> str:
    number = float(value)
    if number.is_integer():
        return str(int(number))
    return repr(number)


class TilingPattern:
    """A pattern cell drawn repeatedly at a fixed horizontal and vertical step."""

    def __init__(
        self,
        bbox: Rectangle,
        x_step: float,
        y_step: float,
        paint_type: PaintType,
        tiling_type: TilingType,
        content: bytes,
    ) -> None:
        self.x_step = x_step
        self.y_step = y_step
        self.paint_type = paint_type
        self.content = bytes(content)
        self.dictionary: dict[str, object] = {
            "Type": Name("Pattern"),
            "BBox": bbox.as_pdf_array(),
            "XStep": x_step,
            "YStep": y_step,
            "PaintType": paint_type.value,
            "TilingType": tiling_type.value,
        }

    def with_matrix(self, matrix: Matrix) -> TilingPattern:
        if "Matrix" in self.dictionary:
            raise KeyError("pattern already has a Matrix entry")
        self.dictionary["Matrix"] = matrix.as_pdf_array()
        return self

    def hash_key(self) -> str:
        """A key identifying patterns with the same steps, paint type and content."""
        digest = int.from_bytes(hashlib.blake2b(self.content, digest_size=8).digest(), "big")
        return (
            f"tiling:{_display(self.x_step)}:{_display(self.y_step)}:"
            f"{self.paint_type.value}:{digest}"
        )