"""Categories of named resources in a resource dictionary."""

from __future__ import annotations

from enum import Enum


class ResourceCategory(Enum):
    """A resource-dictionary key, with the prefix used for generated names."""

    COLOR_SPACE = "ColorSpace"
    EXT_G_STATE = "ExtGState"
    FONT = "Font"
    PATTERN = "Pattern"
    PROPERTIES = "Properties"
    SHADING = "Shading"
    X_OBJECT = "XObject"
    PROC_SET = "ProcSet"

    def as_str(self) -> str:
        return self.value

    def prefix(self) -> str:
        return _PREFIXES[self]


_PREFIXES = {
    ResourceCategory.COLOR_SPACE: "CS",
    ResourceCategory.EXT_G_STATE: "GS",
    ResourceCategory.FONT: "F",
    ResourceCategory.PATTERN: "P",
    ResourceCategory.PROPERTIES: "Pr",
    ResourceCategory.SHADING: "Sh",
    ResourceCategory.X_OBJECT: "Im",
    ResourceCategory.PROC_SET: "PS",
}

STANDARD_RESOURCE_CATEGORIES: tuple[str, ...] = tuple(c.as_str() for c in ResourceCategory)