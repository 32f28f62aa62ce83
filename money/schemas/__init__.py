"""Pydantic schemas for serialization and computed results."""

from money.schemas.account import AccountSchema, OrderSchema
from money.schemas.aggregation import CategoryAmount
from money.schemas.filter import (
    CategoryFilterSchema,
    CategorySchema,
    DateRangeSchema,
    OrderFilterSchema,
)

__all__ = [
    "AccountSchema",
    "CategoryAmount",
    "CategoryFilterSchema",
    "CategorySchema",
    "DateRangeSchema",
    "OrderFilterSchema",
    "OrderSchema",
]
