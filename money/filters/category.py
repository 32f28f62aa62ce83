"""Filtering option admitting an order according to its tags or resource.

A ``CategoryFilter`` is either ignored (every order passes) or enabled with an
ordered list of categories, each one selected or discarded. Lookups by name
that miss never raise: mutators answer ``False`` or ``None`` and leave the
filter untouched.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from money.filters.selector import ItemSelector


@dataclass
class Category:
    """A tag or resource name with its selection state."""

    name: str
    selector: ItemSelector = ItemSelector.selected

    def toggle(self) -> ItemSelector:
        self.selector = self.selector.toggle()
        return self.selector

    @property
    def is_selected(self) -> bool:
        return self.selector is ItemSelector.selected


class CategoryFilter:
    """Ignored, or enabled over an ordered list of categories."""

    def __init__(self, categories: Iterable[Category] | None = None) -> None:
        self._categories: list[Category] | None = (
            None if categories is None else list(categories)
        )

    @classmethod
    def ignored(cls) -> "CategoryFilter":
        return cls()

    @classmethod
    def enabled(cls, categories: Iterable[Category] = ()) -> "CategoryFilter":
        return cls(categories)

    @property
    def is_ignored(self) -> bool:
        return self._categories is None

    @property
    def categories(self) -> list[Category]:
        """Enabled categories; empty when ignored."""
        return [] if self._categories is None else list(self._categories)

    def _find(self, name: str) -> Category | None:
        if self._categories is None:
            return None
        for category in self._categories:
            if category.name == name:
                return category
        return None

    def set(self, categories: Iterable[Category]) -> None:
        """Replace every category, enabling the filter if needed."""
        self._categories = list(categories)

    def add(self, category: Category) -> None:
        """Append a category. Uniqueness is the caller's concern."""
        if self._categories is None:
            self._categories = [category]
        else:
            self._categories.append(category)

    def remove(self, name: str) -> bool:
        """Drop a category. Removing the last one disables the filter."""
        category = self._find(name)
        if category is None:
            return False
        if len(self._categories) > 1:
            self._categories.remove(category)
        else:
            self._categories = None
        return True

    def toggle(self, name: str) -> ItemSelector | None:
        category = self._find(name)
        if category is None:
            return None
        return category.toggle()

    def state_of(self, name: str) -> ItemSelector | None:
        category = self._find(name)
        return None if category is None else category.selector

    def clear(self) -> None:
        self._categories = None

    def among_any_selected(self, name: str | None) -> bool:
        """Admission rule for single-valued fields (resource).

        A missing value passes only when nothing is selected. A present value
        must be one of the selected categories; names unknown to the filter
        are rejected.
        """
        if self._categories is None:
            return True
        if name is None:
            return all(not category.is_selected for category in self._categories)
        return any(
            category.is_selected and category.name == name
            for category in self._categories
        )

    def with_each_selected(self, names: Sequence[str]) -> bool:
        """Admission rule for multi-valued fields (tags): every selected
        category must be present in ``names``."""
        if self._categories is None:
            return True
        return all(
            category.name in names
            for category in self._categories
            if category.is_selected
        )

    def with_any_not_discarded(self, names: Sequence[str]) -> bool:
        """Alternative tag rule: rejects only when every name is discarded."""
        if self._categories is None or not names:
            return True
        for name in names:
            category = self._find(name)
            if category is None or category.is_selected:
                return True
        return False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CategoryFilter):
            return NotImplemented
        return self._categories == other._categories

    def __repr__(self) -> str:
        if self._categories is None:
            return "CategoryFilter.ignored()"
        return f"CategoryFilter.enabled({self._categories!r})"
