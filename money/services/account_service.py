"""Service layer tying an account to the filter of its current view."""

from __future__ import annotations

import datetime
from collections.abc import Iterable

from pydantic import ValidationError

from money.config import Settings, get_settings
from money.exceptions import OrderNotFoundError, RequestFailure
from money.filters.category import Category
from money.filters.order import OrderFilter, parse_date
from money.filters.ordering import IndexedOrder
from money.filters.selector import ItemSelector
from money.models.account import Account
from money.models.category import CategoryType
from money.models.order import Order, TransactionState
from money.schemas.account import AccountSchema
from money.schemas.aggregation import CategoryAmount
from money.services import aggregation
from money.utils.logging import get_logger

logger = get_logger(__name__)


class AccountService:
    """Owns an account and the filter used to present its orders.

    Category registration failures raise ``RequestFailure`` subclasses and a
    bad order index raises ``OrderNotFoundError``. Filter mutations never
    raise.
    """

    def __init__(
        self,
        account: Account | None = None,
        order_filter: OrderFilter | None = None,
        settings: Settings | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.account = account if account is not None else Account()
        self.filter = (
            order_filter if order_filter is not None else OrderFilter.from_settings(self.settings)
        )

    # ------------------------------------------------------------------
    # Registered categories
    # ------------------------------------------------------------------

    def _registered(self, kind: CategoryType):
        if kind is CategoryType.resource:
            return self.account.resources
        return self.account.tags

    def categories(self, kind: CategoryType) -> list[str]:
        """Registered names, sorted case-insensitively."""
        return self._registered(kind).sorted_keys()

    def add_category(self, kind: CategoryType, name: str) -> None:
        try:
            if kind is CategoryType.resource:
                self.account.add_resource(name)
            else:
                self.account.add_tag(name)
        except RequestFailure as exc:
            logger.info("Refused to add %s %r: %s", kind, name, exc.code)
            raise
        logger.info("Added %s %r", kind, name)

    def remove_category(self, kind: CategoryType, name: str) -> None:
        """Unregister a category, detach it from orders and drop it from the filter."""
        try:
            if kind is CategoryType.resource:
                self.account.remove_resource(name)
            else:
                self.account.remove_tag(name)
        except RequestFailure as exc:
            logger.info("Refused to remove %s %r: %s", kind, name, exc.code)
            raise
        self.filter.categories(kind).remove(name)
        logger.info("Removed %s %r", kind, name)

    # ------------------------------------------------------------------
    # Category filters
    # ------------------------------------------------------------------

    def set_filter_categories(self, kind: CategoryType, names: Iterable[str]) -> None:
        """Enable the axis with every given name selected."""
        self.filter.categories(kind).set(Category(name, ItemSelector.selected) for name in names)

    def add_filter_category(self, kind: CategoryType, name: str) -> None:
        self.filter.categories(kind).add(Category(name, ItemSelector.selected))

    def remove_filter_category(self, kind: CategoryType, name: str) -> bool:
        return self.filter.categories(kind).remove(name)

    def toggle_filter_category(self, kind: CategoryType, name: str) -> ItemSelector | None:
        return self.filter.categories(kind).toggle(name)

    def filter_category_state(self, kind: CategoryType, name: str) -> ItemSelector | None:
        return self.filter.categories(kind).state_of(name)

    def clear_filter_categories(self, kind: CategoryType) -> None:
        self.filter.categories(kind).clear()

    def clear_filters(self) -> None:
        self.filter.clear_filters()

    # ------------------------------------------------------------------
    # Orders
    # ------------------------------------------------------------------

    def _order(self, index: int) -> Order:
        order = self.account.get_order(index)
        if order is None:
            raise OrderNotFoundError(index)
        return order

    def add_order(self) -> int:
        return self.account.add_order()

    def duplicate_order(self, index: int) -> int:
        copy_index = self.account.duplicate_order(index)
        if copy_index is None:
            raise OrderNotFoundError(index)
        return copy_index

    def delete_order(self, index: int) -> None:
        if not self.account.delete_order(index):
            raise OrderNotFoundError(index)

    def purge_hidden_orders(self) -> int:
        purged = self.account.purge_hidden_orders()
        logger.info("Purged %d hidden orders", purged)
        return purged

    def toggle_order_visibility(self, index: int) -> bool:
        order = self._order(index)
        order.visible = not order.visible
        return order.visible

    def set_order_date(self, index: int, value: str) -> bool:
        """Set the date from an ISO string; empty clears it.

        An invalid string leaves the order untouched and returns ``False``.
        """
        order = self._order(index)
        if not value.strip():
            order.date = None
            return True
        try:
            order.date = parse_date(value)
        except ValueError:
            logger.warning("Rejected date %r for order %d", value, index)
            return False
        return True

    def set_order_description(self, index: int, description: str) -> None:
        self._order(index).description = description

    def set_order_amount(self, index: int, amount: float) -> None:
        self._order(index).amount = amount

    def set_order_resource(self, index: int, resource: str | None) -> bool:
        """Select a registered resource; ``None`` or empty clears it."""
        order = self._order(index)
        if not resource:
            order.clear_resource()
            return True
        return order.set_resource(resource, self.account.resources)

    def set_order_tags(self, index: int, tags: Iterable[str]) -> bool:
        """Replace the tags of an order.

        Returns ``False`` if at least one tag is unknown; known tags are
        attached anyway.
        """
        order = self._order(index)
        order.clear_tags()
        accepted = True
        for tag in tags:
            if not order.add_tag(tag, self.account.tags):
                accepted = False
        return accepted

    def set_order_state(self, index: int, state: TransactionState) -> None:
        self._order(index).set_state(state)

    # ------------------------------------------------------------------
    # Views
    # ------------------------------------------------------------------

    def filtered_orders(self) -> list[IndexedOrder]:
        return self.filter.apply(self.account.orders)

    def sum_filtered_orders(self) -> float:
        return aggregation.sum_amounts(self.filtered_orders())

    def category_amount(self, kind: CategoryType, name: str) -> CategoryAmount | None:
        """Summary of one category within the current date filter."""
        return aggregation.aggregate(self.account.orders, kind, name, self.filter.date)

    def absolute_category_amount(
        self, kind: CategoryType, name: str, until: datetime.date
    ) -> CategoryAmount | None:
        return aggregation.absolute_category_amount(self.account.orders, kind, name, until)

    def relative_category_amount(
        self,
        kind: CategoryType,
        name: str,
        start: datetime.date,
        end: datetime.date,
    ) -> CategoryAmount | None:
        return aggregation.relative_category_amount(self.account.orders, kind, name, start, end)

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def dump_json(self) -> str:
        return AccountSchema.from_domain(self.account).model_dump_json()

    def load_json(self, data: str | bytes) -> bool:
        """Replace the account from JSON. Invalid data leaves it untouched."""
        try:
            account = AccountSchema.model_validate_json(data).to_domain()
        except (ValidationError, RequestFailure):
            logger.warning("Failed to load account data", exc_info=True)
            return False
        self.account = account
        logger.info(
            "Loaded account: %d orders, %d tags, %d resources",
            len(account.orders),
            len(account.tags),
            len(account.resources),
        )
        return True
