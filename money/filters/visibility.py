"""Small enumerations gating order visibility and tag matching."""

import enum


class VisibilityFilter(enum.StrEnum):
    ignored = "ignored"
    visible_only = "visible_only"
    hidden_only = "hidden_only"

    def next(self) -> "VisibilityFilter":
        """Cycle ignored -> visible_only -> hidden_only -> ignored."""
        members = list(VisibilityFilter)
        return members[(members.index(self) + 1) % len(members)]

    def allows(self, visible: bool) -> bool:
        if self is VisibilityFilter.visible_only:
            return visible
        if self is VisibilityFilter.hidden_only:
            return not visible
        return True


class TagPolicy(enum.StrEnum):
    """How an order's tags are matched against the tag filter.

    ``each_selected``: the order carries every selected tag.
    ``any_not_discarded``: the order has no tag, or at least one tag that is
    not discarded by the filter.
    """

    each_selected = "each_selected"
    any_not_discarded = "any_not_discarded"
