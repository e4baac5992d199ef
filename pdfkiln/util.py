"""Geometry primitives and small value types shared by the PDF builders."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum


def format_number(value: float) -> str:
    """Render a number the way it is written in a PDF: no exponent, no trailing zeros."""
    if isinstance(value, bool):
        raise TypeError("booleans are not PDF numbers")
    if isinstance(value, int):
        return str(value)
    number = float(value)
    if not math.isfinite(number):
        raise ValueError(f"cannot write non-finite number {number!r} to a PDF")
    if number.is_integer():
        return str(int(number))
    text = f"{number:.6f}".rstrip("0").rstrip(".")
    if text in ("", "-0"):
        return "0"
    return text


@dataclass(frozen=True)
class Name:
    """A PDF name object such as ``/Pattern``."""

    value: str

    def __str__(self) -> str:
        return f"/{self.value}"


@dataclass(frozen=True)
class Reference:
    """An indirect reference to a numbered object."""

    number: int
    generation: int = 0

    def __str__(self) -> str:
        return f"{self.number} {self.generation} R"


@dataclass(frozen=True)
class Posn:
    """A point; in PDF space zero is at the bottom."""

    x: float
    y: float

    def to_stream_string(self) -> str:
        return f"{format_number(self.x)} {format_number(self.y)}"


@dataclass(frozen=True)
class Line:
    """A straight segment between two points."""

    start: Posn
    end: Posn

    def as_pdf_array(self) -> list[float]:
        return [self.start.x, self.start.y, self.end.x, self.end.y]


@dataclass(frozen=True)
class Dims:
    """A width and height pair."""

    width: float
    height: float

    def to_stream_string(self) -> str:
        return f"{format_number(self.width)} {format_number(self.height)}"


@dataclass(frozen=True)
class Rectangle:
    """A rectangle given by its lower-left and upper-right corners."""

    x1: float
    y1: float
    x2: float
    y2: float

    def as_pdf_array(self) -> list[float]:
        return [self.x1, self.y1, self.x2, self.y2]

    def to_stream_string(self) -> str:
        return " ".join(format_number(v) for v in self.as_pdf_array())


@dataclass(frozen=True)
class Matrix:
    """A PDF transformation matrix ``[a b c d e f]``."""

    a: float
    b: float
    c: float
    d: float
    e: float
    f: float

    def as_pdf_array(self) -> list[float]:
        return [self.a, self.b, self.c, self.d, self.e, self.f]

    def to_stream_string(self) -> str:
        return " ".join(format_number(v) for v in self.as_pdf_array())


class WindingRule(Enum):
    NON_ZERO = "nonzero"
    EVEN_ODD = "evenodd"


class CompressionMethod(Enum):
    NONE = "none"
    FLATE = "flate"

    def filters(self) -> str:
        """The inline-image filter names for this method."""
        if self is CompressionMethod.FLATE:
            return "/A85 /Fl"
        return "/A85"


class StrokeOrFill(Enum):
    STROKE = "stroke"
    FILL = "fill"