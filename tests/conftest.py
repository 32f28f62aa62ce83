"""Shared test fixtures for money."""

import os

# Force test settings before any imports
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("LOG_LEVEL", "DEBUG")

from datetime import date

import pytest

from money.config import get_settings
from money.filters.category import Category
from money.filters.selector import ItemSelector
from money.models.account import Account
from money.models.order import Order, TransactionState
from money.services.account_service import AccountService


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    """Clear the lru_cache on settings between tests."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# ---------------------------------------------------------------------------
# Model factories
# ---------------------------------------------------------------------------

RESOURCES = ["Bank", "Cash"]
TAGS = ["Food", "Service", "Transport", "Mom & Dad", "Supermarket"]


def make_order(**overrides) -> Order:
    """Return an Order with default values, updated by ``overrides``."""
    data = {
        "date": None,
        "description": "",
        "amount": 0.0,
        "resource": None,
        "tags": [],
        "state": TransactionState.pending,
        "visible": True,
    }
    data.update(overrides)
    data["tags"] = list(data["tags"])
    return Order(**data)


def selected(*names: str) -> list[Category]:
    return [Category(name, ItemSelector.selected) for name in names]


def discarded(*names: str) -> list[Category]:
    return [Category(name, ItemSelector.discarded) for name in names]


def make_orders() -> list[Order]:
    """Four orders mixing resources, tags, dates, states and visibility."""
    return [
        make_order(
            date=date(2020, 3, 10),
            description="Car gas",
            amount=-45.0,
            resource="Cash",
            tags=["Transport", "Mom & Dad"],
            state=TransactionState.done,
        ),
        make_order(
            date=date(2020, 3, 14),
            description="Gamepass Ultimate",
            amount=-14.99,
            resource="Bank",
            tags=["Service"],
            state=TransactionState.in_progress,
        ),
        make_order(
            date=date(2020, 4, 20),
            description="Metro",
            amount=-2.5,
            resource="Bank",
            tags=["Transport", "Mom & Dad"],
            visible=False,
        ),
        make_order(
            date=date(2020, 5, 24),
            description="Pasta & Eggs",
            amount=-8.3,
            tags=["Food", "Supermarket", "Mom & Dad"],
            state=TransactionState.done,
        ),
    ]


def make_account() -> Account:
    account = Account()
    for resource in RESOURCES:
        account.add_resource(resource)
    for tag in TAGS:
        account.add_tag(tag)
    account.orders.extend(make_orders())
    return account


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def orders() -> list[Order]:
    return make_orders()


@pytest.fixture()
def account() -> Account:
    return make_account()


@pytest.fixture()
def service(account) -> AccountService:
    """Service over the sample account with a default filter."""
    return AccountService(account)
