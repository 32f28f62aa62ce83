"""Presentation order of filtered orders."""

import enum
import math
from collections.abc import Callable, Iterable
from typing import Any

from money.models.order import Order


class OrderingPreference(enum.StrEnum):
    by_date = "by_date"
    by_description = "by_description"
    by_amount = "by_amount"
    by_id = "by_id"


class OrderingDirection(enum.StrEnum):
    ascending = "ascending"
    descending = "descending"


IndexedOrder = tuple[int, Order]


def _date_key(item: IndexedOrder) -> Any:
    # Undated orders come first in ascending order.
    date = item[1].date
    return (False,) if date is None else (True, date)


def _description_key(item: IndexedOrder) -> Any:
    return item[1].description.lower()


def _amount_key(item: IndexedOrder) -> Any:
    # NaN is greater than every number.
    amount = item[1].amount
    if math.isnan(amount):
        return (True, 0.0)
    return (False, amount)


def _id_key(item: IndexedOrder) -> Any:
    return item[0]


_SORT_KEYS: dict[OrderingPreference, Callable[[IndexedOrder], Any]] = {
    OrderingPreference.by_date: _date_key,
    OrderingPreference.by_description: _description_key,
    OrderingPreference.by_amount: _amount_key,
    OrderingPreference.by_id: _id_key,
}


def sort_orders(
    orders: Iterable[IndexedOrder],
    preference: OrderingPreference = OrderingPreference.by_id,
    direction: OrderingDirection = OrderingDirection.ascending,
) -> list[IndexedOrder]:
    """Stable sort of ``(index, order)`` pairs.

    Descending order reverses the comparison, so equal keys keep their
    incoming relative order in both directions.
    """
    return sorted(
        orders,
        key=_SORT_KEYS[preference],
        reverse=direction is OrderingDirection.descending,
    )
