"""Pydantic schemas for category amounts."""

from pydantic import BaseModel


class CategoryAmount(BaseModel):
    """Sums of order amounts for one category, split by transaction state."""

    current: float = 0.0
    pending: float = 0.0
    in_progress: float = 0.0
    expected: float = 0.0
