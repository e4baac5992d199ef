"""Standard and custom page sizes, measured in PDF points."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

from .util import Dims

MM_TO_POINTS = 2.8346456693
IN_TO_POINTS = 72.0


class _Kind(Enum):
    A0 = "A0"
    A1 = "A1"
    A2 = "A2"
    A3 = "A3"
    A4 = "A4"
    A5 = "A5"
    LETTER = "Letter"
    LEGAL = "Legal"
    CUSTOM_POINTS = "CustomPoints"
    CUSTOM_INCHES = "CustomInches"
    CUSTOM_MM = "CustomMm"


_STANDARD_POINTS = {
    _Kind.A0: (841.0 * MM_TO_POINTS, 1189.0 * MM_TO_POINTS),
    _Kind.A1: (594.0 * MM_TO_POINTS, 841.0 * MM_TO_POINTS),
    _Kind.A2: (420.0 * MM_TO_POINTS, 594.0 * MM_TO_POINTS),
    _Kind.A3: (297.0 * MM_TO_POINTS, 420.0 * MM_TO_POINTS),
    _Kind.A4: (210.0 * MM_TO_POINTS, 297.0 * MM_TO_POINTS),
    _Kind.A5: (148.0 * MM_TO_POINTS, 210.0 * MM_TO_POINTS),
    _Kind.LETTER: (8.5 * IN_TO_POINTS, 11.0 * IN_TO_POINTS),
    _Kind.LEGAL: (8.5 * IN_TO_POINTS, 14.0 * IN_TO_POINTS),
}

_CUSTOM_SCALE = {
    _Kind.CUSTOM_POINTS: 1.0,
    _Kind.CUSTOM_INCHES: IN_TO_POINTS,
    _Kind.CUSTOM_MM: MM_TO_POINTS,
}


@dataclass(frozen=True)
class PageSize:
    """A page size; use the named constants or the ``custom_*`` constructors."""

    kind: _Kind
    width: float = 0.0
    height: float = 0.0

    A0: ClassVar[PageSize]
    A1: ClassVar[PageSize]
    A2: ClassVar[PageSize]
    A3: ClassVar[PageSize]
    A4: ClassVar[PageSize]
    A5: ClassVar[PageSize]
    LETTER: ClassVar[PageSize]
    LEGAL: ClassVar[PageSize]

    @classmethod
    def default(cls) -> PageSize:
        return cls.A4

    @classmethod
    def custom_points(cls, width: float, height: float) -> PageSize:
        return cls(_Kind.CUSTOM_POINTS, width, height)

    @classmethod
    def custom_inches(cls, width: float, height: float) -> PageSize:
        return cls(_Kind.CUSTOM_INCHES, width, height)

    @classmethod
    def custom_mm(cls, width: float, height: float) -> PageSize:
        return cls(_Kind.CUSTOM_MM, width, height)

    def dims_points(self) -> Dims:
        """The page dimensions in points; negative custom sizes clamp to zero."""
        if self.kind in _STANDARD_POINTS:
            return Dims(*_STANDARD_POINTS[self.kind])
        scale = _CUSTOM_SCALE[self.kind]
        return Dims(max(self.width, 0.0) * scale, max(self.height, 0.0) * scale)

    def rect_to_pdf_array(self) -> list[float]:
        """The page rectangle as a ``MediaBox`` array."""
        dims = self.dims_points()
        return [0.0, 0.0, dims.width, dims.height]


PageSize.A0 = PageSize(_Kind.A0)
PageSize.A1 = PageSize(_Kind.A1)
PageSize.A2 = PageSize(_Kind.A2)
PageSize.A3 = PageSize(_Kind.A3)
PageSize.A4 = PageSize(_Kind.A4)
PageSize.A5 = PageSize(_Kind.A5)
PageSize.LETTER = PageSize(_Kind.LETTER)
PageSize.LEGAL = PageSize(_Kind.LEGAL)