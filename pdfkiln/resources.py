"""Named resources referred to from a content stream."""

from __future__ import annotations

from .resource_category import ResourceCategory


class NamedResources:
    """A resource dictionary mapping generated names to object numbers."""

    def __init__(self) -> None:
        self.dictionary: dict[str, dict[str, int]] = {}

    def add(self, category: ResourceCategory, object_id: int) -> str:
        """Register ``object_id`` under ``category`` and return its generated name."""
        name = f"{category.prefix()}{self.category_count(category)}"
        self.dictionary.setdefault(category.as_str(), {})[name] = object_id
        return name

    def get(self, category: ResourceCategory) -> dict[str, int] | None:
        return self.dictionary.get(category.as_str())

    def contains(self, category: ResourceCategory) -> bool:
        return category.as_str() in self.dictionary

    def category_count(self, category: ResourceCategory) -> int:
        return len(self.dictionary.get(category.as_str(), {}))

    def is_empty(self) -> bool:
        return len(self) == 0

    def __len__(self) -> int:
        return len(self.dictionary)