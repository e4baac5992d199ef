"""Shading dictionaries for smooth colour transitions."""

from __future__ import annotations

from enum import Enum
from typing import TypeVar

_S = TypeVar("_S", bound="ShadingBase")


class ShadingType(Enum):
    FUNCTION = 1
    AXIAL = 2
    RADIAL = 3
    FREE_FORM_GOURAUD = 4
    LATTICE_GOURAUD = 5
    COONS_PATCH = 6
    TENSOR_PATCH = 7


class ShadingBase:
    """Entries shared by every shading type."""

    shading_type: ShadingType

    def __init__(self, color_space: object) -> None:
        self.dictionary: dict[str, object] = {
            "ShadingType": self.shading_type.value,
            "ColorSpace": color_space,
        }

    def _add(self: _S, key: str, value: object) -> _S:
        if key in self.dictionary:
            raise KeyError(f"shading already has a {key} entry")
        self.dictionary[key] = value
        return self

    def with_background(self: _S, background: object) -> _S:
        return self._add("Background", background)

    def with_bbox(self: _S, bbox: object) -> _S:
        return self._add("BBox", bbox)

    def with_anti_alias(self: _S, value: bool) -> _S:
        return self._add("AntiAlias", bool(value))


class Shading1Function(ShadingBase):
    """Colour defined by a function of two variables over a domain."""

    shading_type = ShadingType.FUNCTION

    def __init__(self, color_space: object, function: dict[str, object]) -> None:
        super().__init__(color_space)
        self._add("Function", function)

    def with_domain(self, domain: list[float]) -> Shading1Function:
        return self._add("Domain", domain)

    def with_matrix(self, matrix: list[float]) -> Shading1Function:
        return self._add("Matrix", matrix)


class Shading2Axial(ShadingBase):
    """Colour varying along a line between two points."""

    shading_type = ShadingType.AXIAL

    def __init__(
        self, color_space: object, coords: list[float], function: dict[str, object]
    ) -> None:
        super().__init__(color_space)
        self._add("Coords", coords)
        self._add("Function", function)

    def with_domain(self, domain: list[float]) -> Shading2Axial:
        return self._add("Domain", domain)

    def with_extend(self, extend: list[bool]) -> Shading2Axial:
        return self._add("Extend", extend)


class Shading3Radial(ShadingBase):
    """Colour varying between two circles."""

    shading_type = ShadingType.RADIAL

    def __init__(self, color_space: object, function: dict[str, object]) -> None:
        super().__init__(color_space)
        self._add("Function", function)

    def with_domain(self, domain: list[float]) -> Shading3Radial:
        return self._add("Domain", domain)

    def with_extend(self, extend: list[bool]) -> Shading3Radial:
        return self._add("Extend", extend)


class Shading4FreeFormGouraud(ShadingBase):
    """Free-form Gouraud-shaded triangle mesh."""

    shading_type = ShadingType.FREE_FORM_GOURAUD

    def __init__(
        self,
        color_space: object,
        bits_per_coordinate: int,
        bits_per_component: int,
        bits_per_flag: int,
        decode: list[float],
    ) -> None:
        super().__init__(color_space)
        self._add("BitsPerCordinate", bits_per_component)
        self._add("BitsPerComponent", bits_per_coordinate)
        self._add("BitsPerFlag", bits_per_flag)
        self._add("Decode", decode)

    def with_function(self, function: dict[str, object]) -> Shading4FreeFormGouraud:
        return self._add("Function", function)


class Shading5LatticeGouraud(ShadingBase):
    """Lattice-form Gouraud-shaded triangle mesh."""

    shading_type = ShadingType.LATTICE_GOURAUD

    def __init__(
        self,
        color_space: object,
        bits_per_coordinate: int,
        bits_per_component: int,
        vertices_per_row: int,
        decode: list[float],
    ) -> None:
        super().__init__(color_space)
        self._add("BitsPerCordinate", bits_per_component)
        self._add("BitsPerComponent", bits_per_coordinate)
        self._add("VerticesPerRow", vertices_per_row)
        self._add("Decode", decode)

    def with_function(self, function: dict[str, object]) -> Shading5LatticeGouraud:
        return self._add("Function", function)


class _PatchShading(ShadingBase):
    def __init__(
        self,
        color_space: object,
        bits_per_coordinate: int,
        bits_per_component: int,
        bits_per_flag: int,
    ) -> None:
        super().__init__(color_space)
        self._add("BitsPerCoordinate", bits_per_coordinate)
        self._add("BitsPerComponent", bits_per_component)
        self._add("BitsPerFlag", bits_per_flag)


class Shading6CoonsPatch(_PatchShading):
    """Coons patch mesh."""

    shading_type = ShadingType.COONS_PATCH

    def with_decode(self, decode: list[float]) -> Shading6CoonsPatch:
        return self._add("Decode", decode)

    def with_function(self, function: dict[str, object]) -> Shading6CoonsPatch:
        return self._add("Function", function)


class Shading7TensorPatch(_PatchShading):
    """Tensor-product patch mesh."""

    shading_type = ShadingType.TENSOR_PATCH

    def with_decode(self, decode: list[float]) -> Shading7TensorPatch:
        return self._add("Decode", decode)

    def with_function(self, function: dict[str, object]) -> Shading7TensorPatch:
        return self._add("Function", function)