"""Per-category amount summaries over an order list."""

import datetime
from collections.abc import Iterable

from money.filters.date import DateRangeFilter
from money.filters.ordering import IndexedOrder
from money.models.category import CategoryType
from money.models.order import Order, TransactionState
from money.schemas.aggregation import CategoryAmount


def _belongs_to(order: Order, kind: CategoryType, name: str) -> bool:
    if kind is CategoryType.resource:
        return order.resource == name
    return name in order.tags


def aggregate(
    orders: Iterable[Order],
    kind: CategoryType,
    name: str,
    date_filter: DateRangeFilter,
) -> CategoryAmount | None:
    """Sum visible orders of one category admitted by ``date_filter``.

    Returns ``None`` when no order matched, so "no data" is distinguishable
    from a zero balance. ``name`` is not checked against registered categories.
    """
    amount = CategoryAmount()
    matched = 0
    for order in orders:
        if not order.visible or not _belongs_to(order, kind, name):
            continue
        if not date_filter.is_date_allowed(order.date):
            continue
        matched += 1
        if order.state == TransactionState.done:
            amount.current += order.amount
        elif order.state == TransactionState.in_progress:
            amount.in_progress += order.amount
        else:
            amount.pending += order.amount
        amount.expected += order.amount
    return amount if matched else None


def absolute_category_amount(
    orders: Iterable[Order],
    kind: CategoryType,
    name: str,
    until: datetime.date,
) -> CategoryAmount | None:
    """Category balance accumulated up to ``until`` (inclusive)."""
    return aggregate(orders, kind, name, DateRangeFilter.until(until))


def relative_category_amount(
    orders: Iterable[Order],
    kind: CategoryType,
    name: str,
    start: datetime.date,
    end: datetime.date,
) -> CategoryAmount | None:
    """Category movement between two days (inclusive).

    An inverted window degrades to everything since ``start``.
    """
    return aggregate(orders, kind, name, DateRangeFilter.check_range(start, end))


def sum_amounts(orders: Iterable[IndexedOrder]) -> float:
    """Total amount of filtered ``(index, order)`` pairs."""
    return sum((order.amount for _, order in orders), 0.0)
