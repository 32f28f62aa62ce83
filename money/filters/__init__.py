"""Order filtering engine: category, date, state and visibility axes plus ordering."""

from money.filters.category import Category, CategoryFilter
from money.filters.date import DateFilterKind, DateRangeFilter
from money.filters.order import OrderFilter, apply_filter
from money.filters.ordering import OrderingDirection, OrderingPreference, sort_orders
from money.filters.selector import ItemSelector
from money.filters.visibility import TagPolicy, VisibilityFilter

__all__ = [
    "Category",
    "CategoryFilter",
    "DateFilterKind",
    "DateRangeFilter",
    "ItemSelector",
    "OrderFilter",
    "OrderingDirection",
    "OrderingPreference",
    "TagPolicy",
    "VisibilityFilter",
    "apply_filter",
    "sort_orders",
]
