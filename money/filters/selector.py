"""Binary selection state attached to a filtered item."""

import enum


class ItemSelector(enum.StrEnum):
    discarded = "discarded"
    selected = "selected"

    def toggle(self) -> "ItemSelector":
        """Return the opposite state."""
        if self is ItemSelector.selected:
            return ItemSelector.discarded
        return ItemSelector.selected
