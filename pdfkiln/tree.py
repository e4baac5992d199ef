"""Name trees and number trees."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from .util import Reference


def _entry_key_name(key: object) -> str:
    if isinstance(key, bool):
        raise TypeError("tree keys must be strings or integers")
    if isinstance(key, str):
        return "Names"
    if isinstance(key, int):
        return "Nums"
    raise TypeError("tree keys must be strings or integers")


class Tree:
    """A node of a name tree (string keys) or number tree (integer keys)."""

    def __init__(self, object_number: int) -> None:
        self.object_number = object_number
        self.dictionary: dict[str, object] = {}

    def _add(self, key: str, value: object) -> None:
        if key in self.dictionary:
            raise KeyError(f"tree node already has a {key} entry")
        self.dictionary[key] = value

    def set_kids(self, kids: Iterable[int]) -> None:
        """Point this node at its child nodes."""
        self._add("Kids", [Reference(kid) for kid in kids])

    def set_entries(self, entries: Sequence[tuple[object, object]]) -> None:
        """Store key/value pairs as a flat ``Names`` or ``Nums`` array."""
        if not entries:
            raise ValueError("cannot tell a name tree from a number tree with no entries")
        names = {_entry_key_name(key) for key, _ in entries}
        if len(names) != 1:
            raise TypeError("tree keys must all be of one type")
        flat: list[object] = []
        for key, value in entries:
            flat.extend((key, value))
        self._add(names.pop(), flat)

    def set_limits(self, least: object, greatest: object) -> None:
        """Record the least and greatest keys under this node."""
        if _entry_key_name(least) != _entry_key_name(greatest):
            raise TypeError("limits must be of one key type")
        self._add("Limits", [least, greatest])