"""Pydantic schemas for account (de)serialization."""

import datetime

from pydantic import BaseModel, Field

from money.models.account import Account
from money.models.exclusive import ExclusiveItems
from money.models.order import Order, TransactionState


class OrderSchema(BaseModel):
    """Serialized order. ``state`` is stored as its integer ordinal.

    Non-finite amounts are written as ``"NaN"``, ``"Infinity"`` or
    ``"-Infinity"`` and read back from those strings.
    """

    date: datetime.date | None = None
    description: str = ""
    amount: float = 0.0
    resource: str | None = None
    tags: list[str] = Field(default_factory=list)
    state: TransactionState = TransactionState.pending
    visible: bool = True

    model_config = {"from_attributes": True, "ser_json_inf_nan": "strings"}

    @classmethod
    def from_domain(cls, order: Order) -> "OrderSchema":
        return cls.model_validate(order)

    def to_domain(self) -> Order:
        return Order(
            date=self.date,
            description=self.description,
            amount=self.amount,
            resource=self.resource,
            tags=list(self.tags),
            state=self.state,
            visible=self.visible,
        )


class AccountSchema(BaseModel):
    """Serialized account: registered categories and orders."""

    tags: list[str] = Field(default_factory=list)
    resources: list[str] = Field(default_factory=list)
    orders: list[OrderSchema] = Field(default_factory=list)

    model_config = {"ser_json_inf_nan": "strings"}

    @classmethod
    def from_domain(cls, account: Account) -> "AccountSchema":
        return cls(
            tags=list(account.tags),
            resources=list(account.resources),
            orders=[OrderSchema.from_domain(order) for order in account.orders],
        )

    def to_domain(self) -> Account:
        """Rebuild the account. Duplicate or blank names raise ``RequestFailure``."""
        return Account(
            tags=ExclusiveItems(self.tags),
            resources=ExclusiveItems(self.resources),
            orders=[order.to_domain() for order in self.orders],
        )
