"""Unit tests for domain models and enums."""

from datetime import date

import pytest

from money.exceptions import (
    EmptyArgumentError,
    ExistingItemError,
    IncorrectArgumentError,
    MoneyError,
    RequestFailure,
    RequestFailureCode,
    UnknownItemError,
)
from money.models import (
    Account,
    CategoryType,
    ExclusiveItems,
    Order,
    TransactionState,
)
from tests.conftest import make_order


class TestTransactionState:
    def test_values(self):
        assert TransactionState.pending.value == 0
        assert TransactionState.in_progress.value == 1
        assert TransactionState.done.value == 2

    def test_all_members(self):
        assert len(TransactionState) == 3


class TestCategoryType:
    def test_values(self):
        assert CategoryType.resource.value == "resource"
        assert CategoryType.tag.value == "tag"


class TestOrder:
    def test_defaults(self):
        order = Order()
        assert order.date is None
        assert order.description == ""
        assert order.amount == 0.0
        assert order.resource is None
        assert order.tags == []
        assert order.state is TransactionState.pending
        assert order.visible is True

    def test_set_resource(self):
        order = Order()
        assert order.set_resource("Bank", ["Bank", "Cash"]) is True
        assert order.resource == "Bank"

    def test_set_unknown_resource_keeps_current(self):
        order = make_order(resource="Cash")
        assert order.set_resource("Card", ["Bank", "Cash"]) is False
        assert order.resource == "Cash"

    def test_clear_resource(self):
        order = make_order(resource="Cash")
        order.clear_resource()
        assert order.resource is None

    def test_add_tag(self):
        order = Order()
        assert order.add_tag("Food", ["Food", "Car"]) is True
        assert order.add_tag("Food", ["Food", "Car"]) is False
        assert order.add_tag("Rent", ["Food", "Car"]) is False
        assert order.tags == ["Food"]

    def test_remove_tag(self):
        order = make_order(tags=["Food", "Car"])
        assert order.remove_tag("Food") is True
        assert order.remove_tag("Food") is False
        assert order.tags == ["Car"]

    def test_done_stamps_today_when_undated(self):
        order = Order()
        order.set_state(TransactionState.done)
        assert order.state is TransactionState.done
        assert order.date == date.today()

    def test_set_state_accepts_ordinal(self):
        order = Order()
        order.set_state(2)
        assert order.state is TransactionState.done
        assert order.date == date.today()

    def test_done_keeps_existing_date(self):
        order = make_order(date=date(2020, 1, 1))
        order.set_state(TransactionState.done)
        assert order.date == date(2020, 1, 1)

    @pytest.mark.parametrize("state", [TransactionState.pending, TransactionState.in_progress])
    def test_other_states_leave_date_alone(self, state):
        order = Order()
        order.set_state(state)
        assert order.date is None

    def test_copy_is_independent(self):
        order = make_order(tags=["Food"], amount=3.5)
        duplicate = order.copy()
        duplicate.tags.append("Car")
        assert duplicate == make_order(tags=["Food", "Car"], amount=3.5)
        assert order.tags == ["Food"]


class TestExclusiveItems:
    def test_keeps_insertion_order(self):
        items = ExclusiveItems(["b", "A", "c"])
        assert list(items) == ["b", "A", "c"]
        assert len(items) == 3
        assert "A" in items
        assert "a" not in items

    def test_sorted_keys_case_insensitive(self):
        assert ExclusiveItems(["bank", "Cash", "atm"]).sorted_keys() == ["atm", "bank", "Cash"]

    @pytest.mark.parametrize(
        ("name", "error", "code"),
        [
            ("", EmptyArgumentError, RequestFailureCode.empty_argument),
            ("   ", IncorrectArgumentError, RequestFailureCode.incorrect_argument),
            ("Bank", ExistingItemError, RequestFailureCode.existing_item),
        ],
    )
    def test_add_rejections(self, name, error, code):
        items = ExclusiveItems(["Bank"])
        with pytest.raises(error) as exc_info:
            items.add(name)
        assert exc_info.value.code == code
        assert isinstance(exc_info.value, RequestFailure)
        assert isinstance(exc_info.value, MoneyError)
        assert items == ["Bank"]

    def test_remove(self):
        items = ExclusiveItems(["Bank", "Cash"])
        items.remove("Bank")
        assert items == ["Cash"]

    def test_remove_unknown(self):
        items = ExclusiveItems(["Bank"])
        with pytest.raises(UnknownItemError) as exc_info:
            items.remove("Cash")
        assert exc_info.value.name == "Cash"
        assert exc_info.value.code == RequestFailureCode.unknown_item

    def test_equality(self):
        assert ExclusiveItems(["a", "b"]) == ExclusiveItems(["a", "b"])
        assert ExclusiveItems(["a", "b"]) != ExclusiveItems(["b", "a"])


class TestAccount:
    def test_remove_tag_detaches_from_orders(self, account):
        account.remove_tag("Mom & Dad")
        assert "Mom & Dad" not in account.tags
        assert all("Mom & Dad" not in order.tags for order in account.orders)
        assert account.orders[0].tags == ["Transport"]

    def test_remove_resource_clears_orders(self, account):
        account.remove_resource("Bank")
        assert [order.resource for order in account.orders] == ["Cash", None, None, None]

    def test_remove_unknown_tag_leaves_orders(self, account):
        with pytest.raises(UnknownItemError):
            account.remove_tag("Rent")
        assert account.orders[3].tags == ["Food", "Supermarket", "Mom & Dad"]

    def test_add_order(self, account):
        index = account.add_order()
        assert index == 4
        assert account.orders[index] == Order()

    def test_get_order_out_of_range(self, account):
        assert account.get_order(4) is None
        assert account.get_order(-1) is None

    def test_delete_order_shifts_indexes(self, account):
        assert account.delete_order(1) is True
        assert [order.description for order in account.orders] == [
            "Car gas",
            "Metro",
            "Pasta & Eggs",
        ]
        assert account.delete_order(10) is False

    def test_duplicate_order(self, account):
        index = account.duplicate_order(0)
        assert index == 4
        assert account.orders[4] == account.orders[0]
        assert account.orders[4] is not account.orders[0]
        assert account.duplicate_order(99) is None

    def test_purge_hidden_orders(self, account):
        assert account.purge_hidden_orders() == 1
        assert len(account.orders) == 3
        assert all(order.visible for order in account.orders)

    def test_sum_orders(self, account):
        assert account.sum_orders() == pytest.approx(-70.79)
        assert Account().sum_orders() == 0.0
