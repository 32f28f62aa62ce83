"""Domain models package."""

from money.models.account import Account
from money.models.category import CategoryType
from money.models.exclusive import ExclusiveItems
from money.models.order import Order, TransactionState

__all__ = [
    "Account",
    "Order",
    "ExclusiveItems",
    "CategoryType",
    "TransactionState",
]
