"""Ordered collection of unique, non-blank names."""

from collections.abc import Iterable, Iterator

from money.exceptions import (
    EmptyArgumentError,
    ExistingItemError,
    IncorrectArgumentError,
    UnknownItemError,
)


class ExclusiveItems:
    """Registered tag or resource names, in registration order."""

    def __init__(self, names: Iterable[str] = ()) -> None:
        self._items: list[str] = []
        for name in names:
            self.add(name)

    def add(self, name: str) -> None:
        if not name:
            raise EmptyArgumentError(name)
        if name.isspace():
            raise IncorrectArgumentError(name)
        if name in self._items:
            raise ExistingItemError(name)
        self._items.append(name)

    def remove(self, name: str) -> None:
        if name not in self._items:
            raise UnknownItemError(name)
        self._items.remove(name)

    def sorted_keys(self) -> list[str]:
        """Names sorted case-insensitively, for display."""
        return sorted(self._items, key=str.lower)

    def __contains__(self, name: object) -> bool:
        return name in self._items

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ExclusiveItems):
            return self._items == other._items
        if isinstance(other, list):
            return self._items == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"ExclusiveItems({self._items!r})"
