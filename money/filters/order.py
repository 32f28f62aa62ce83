"""Composite filter over an order list."""

from __future__ import annotations

import datetime
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from money.filters.category import CategoryFilter
from money.filters.date import DateFilterKind, DateRangeFilter
from money.filters.ordering import (
    IndexedOrder,
    OrderingDirection,
    OrderingPreference,
    sort_orders,
)
from money.filters.selector import ItemSelector
from money.filters.visibility import TagPolicy, VisibilityFilter
from money.models.category import CategoryType
from money.models.order import Order, TransactionState
from money.utils.logging import get_logger

if TYPE_CHECKING:
    from money.config import Settings

logger = get_logger(__name__)


def _all_states_selected() -> dict[TransactionState, ItemSelector]:
    return {state: ItemSelector.selected for state in TransactionState}


def parse_date(value: str) -> datetime.date:
    """Parse an ISO 8601 calendar date such as ``2020-03-10``.

    Datetime strings are refused. Raises ``ValueError`` when invalid.
    """
    return datetime.date.fromisoformat(value.strip())


@dataclass
class OrderFilter:
    """Every filtering and ordering option of an order view.

    Axes::

        visibility   ignored | visible_only | hidden_only
        date         ignored | since | until | between
        states       pending / in_progress / done, each selected or discarded
        resources    ignored | enabled categories (any selected)
        tags         ignored | enabled categories (see ``tag_policy``)
        ordering     by_date | by_description | by_amount | by_id
        direction    ascending | descending
    """

    visibility: VisibilityFilter = VisibilityFilter.visible_only
    date: DateRangeFilter = field(default_factory=DateRangeFilter)
    states: dict[TransactionState, ItemSelector] = field(default_factory=_all_states_selected)
    resources: CategoryFilter = field(default_factory=CategoryFilter)
    tags: CategoryFilter = field(default_factory=CategoryFilter)
    ordering: OrderingPreference = OrderingPreference.by_id
    direction: OrderingDirection = OrderingDirection.ascending
    tag_policy: TagPolicy = TagPolicy.each_selected

    @classmethod
    def from_settings(cls, settings: Settings) -> OrderFilter:
        return cls(
            visibility=settings.default_visibility,
            ordering=settings.default_ordering,
            direction=settings.default_direction,
            tag_policy=settings.tag_policy,
        )

    # ------------------------------------------------------------------
    # Category axes
    # ------------------------------------------------------------------

    def categories(self, kind: CategoryType) -> CategoryFilter:
        if kind is CategoryType.resource:
            return self.resources
        return self.tags

    # ------------------------------------------------------------------
    # State axis
    # ------------------------------------------------------------------

    def state_of(self, state: TransactionState) -> ItemSelector:
        return self.states.get(state, ItemSelector.selected)

    def toggle_state(self, state: TransactionState) -> ItemSelector:
        self.states[state] = self.state_of(state).toggle()
        return self.states[state]

    # ------------------------------------------------------------------
    # Visibility axis
    # ------------------------------------------------------------------

    def toggle_visibility(self) -> VisibilityFilter:
        self.visibility = self.visibility.next()
        return self.visibility

    # ------------------------------------------------------------------
    # Date axis, from user supplied strings
    # ------------------------------------------------------------------

    def _parse_bound(self, value: str) -> tuple[bool, datetime.date | None]:
        if not value.strip():
            return True, None
        try:
            return True, parse_date(value)
        except ValueError:
            logger.warning("Rejected date bound %r, keeping current filter", value)
            return False, None

    def set_date_range(self, start: str, end: str) -> bool:
        """Set both bounds. Returns ``True`` when the result is a closed range."""
        start_ok, start_date = self._parse_bound(start)
        end_ok, end_date = self._parse_bound(end)
        if not (start_ok and end_ok):
            return False
        self.date.set_range(start_date, end_date)
        return self.date.kind is DateFilterKind.between

    def set_date_beginning(self, start: str) -> bool:
        """Set the start bound. Returns ``True`` when a start bound is active."""
        ok, start_date = self._parse_bound(start)
        if not ok:
            return False
        self.date.set_beginning(start_date)
        return self.date.start is not None

    def set_date_end(self, end: str) -> bool:
        """Set the end bound. Returns ``True`` when an end bound is active."""
        ok, end_date = self._parse_bound(end)
        if not ok:
            return False
        self.date.set_end(end_date)
        return self.date.end is not None

    def disable_date(self) -> None:
        self.date.disable()

    # ------------------------------------------------------------------
    # Evaluation
    # ------------------------------------------------------------------

    def clear_filters(self) -> None:
        """Reset every admission axis so that every order passes."""
        self.visibility = VisibilityFilter.ignored
        self.date.disable()
        self.states = _all_states_selected()
        self.resources.clear()
        self.tags.clear()

    def _tags_match(self, tags: Sequence[str]) -> bool:
        if self.tag_policy is TagPolicy.any_not_discarded:
            return self.tags.with_any_not_discarded(tags)
        return self.tags.with_each_selected(tags)

    def is_order_allowed(self, order: Order) -> bool:
        """``True`` if the order satisfies every filtering option."""
        visibility_match = self.visibility.allows(order.visible)
        state_match = self.state_of(order.state) is ItemSelector.selected
        date_match = self.date.is_date_allowed(order.date)
        tag_match = self._tags_match(order.tags)
        resource_match = self.resources.among_any_selected(order.resource)
        return visibility_match and state_match and date_match and tag_match and resource_match

    def apply(self, orders: Iterable[Order]) -> list[IndexedOrder]:
        """Admitted ``(original_index, order)`` pairs, sorted."""
        orders = list(orders)
        admitted = [
            (index, order) for index, order in enumerate(orders) if self.is_order_allowed(order)
        ]
        logger.debug(
            "Filter admitted %d of %d orders (ordering=%s, direction=%s)",
            len(admitted),
            len(orders),
            self.ordering,
            self.direction,
        )
        return sort_orders(admitted, self.ordering, self.direction)


def apply_filter(orders: Iterable[Order], order_filter: OrderFilter) -> list[IndexedOrder]:
    """Run ``order_filter`` over ``orders``."""
    return order_filter.apply(orders)
