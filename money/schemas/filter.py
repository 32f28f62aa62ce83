"""Pydantic schemas for filter (de)serialization.

Every enumerated state survives a round trip: selector of each category,
date filter variant and the per-state selection keyed by state name.
"""

import datetime

from pydantic import BaseModel, Field, field_validator, model_validator

from money.filters.category import Category, CategoryFilter
from money.filters.date import DateFilterKind, DateRangeFilter
from money.filters.order import OrderFilter
from money.filters.ordering import OrderingDirection, OrderingPreference
from money.filters.selector import ItemSelector
from money.filters.visibility import TagPolicy, VisibilityFilter
from money.models.order import TransactionState


class CategorySchema(BaseModel):
    name: str
    selector: ItemSelector = ItemSelector.selected


class CategoryFilterSchema(BaseModel):
    """``enabled=False`` means the axis is ignored; categories are then empty."""

    enabled: bool = False
    categories: list[CategorySchema] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, category_filter: CategoryFilter) -> "CategoryFilterSchema":
        return cls(
            enabled=not category_filter.is_ignored,
            categories=[
                CategorySchema(name=c.name, selector=c.selector)
                for c in category_filter.categories
            ],
        )

    def to_domain(self) -> CategoryFilter:
        if not self.enabled:
            return CategoryFilter.ignored()
        return CategoryFilter.enabled(
            Category(c.name, c.selector) for c in self.categories
        )


class DateRangeSchema(BaseModel):
    kind: DateFilterKind = DateFilterKind.ignored
    start: datetime.date | None = None
    end: datetime.date | None = None

    @model_validator(mode="after")
    def check_bounds(self) -> "DateRangeSchema":
        """Bounds must match the declared variant."""
        needs_start = self.kind in (DateFilterKind.since, DateFilterKind.between)
        needs_end = self.kind in (DateFilterKind.until, DateFilterKind.between)
        if needs_start != (self.start is not None) or needs_end != (self.end is not None):
            raise ValueError(f"Bounds do not match date filter kind {self.kind}")
        return self

    @classmethod
    def from_domain(cls, date_filter: DateRangeFilter) -> "DateRangeSchema":
        return cls(kind=date_filter.kind, start=date_filter.start, end=date_filter.end)

    def to_domain(self) -> DateRangeFilter:
        return DateRangeFilter(self.start, self.end)


class OrderFilterSchema(BaseModel):
    visibility: VisibilityFilter = VisibilityFilter.visible_only
    date: DateRangeSchema = Field(default_factory=DateRangeSchema)
    states: dict[str, ItemSelector] = Field(
        default_factory=lambda: {state.name: ItemSelector.selected for state in TransactionState}
    )
    resources: CategoryFilterSchema = Field(default_factory=CategoryFilterSchema)
    tags: CategoryFilterSchema = Field(default_factory=CategoryFilterSchema)
    ordering: OrderingPreference = OrderingPreference.by_id
    direction: OrderingDirection = OrderingDirection.ascending
    tag_policy: TagPolicy = TagPolicy.each_selected

    @field_validator("states")
    @classmethod
    def validate_state_names(cls, v: dict[str, ItemSelector]) -> dict[str, ItemSelector]:
        unknown = set(v) - set(TransactionState.__members__)
        if unknown:
            raise ValueError(f"Unknown transaction states: {sorted(unknown)}")
        return v

    @classmethod
    def from_domain(cls, order_filter: OrderFilter) -> "OrderFilterSchema":
        return cls(
            visibility=order_filter.visibility,
            date=DateRangeSchema.from_domain(order_filter.date),
            states={state.name: selector for state, selector in order_filter.states.items()},
            resources=CategoryFilterSchema.from_domain(order_filter.resources),
            tags=CategoryFilterSchema.from_domain(order_filter.tags),
            ordering=order_filter.ordering,
            direction=order_filter.direction,
            tag_policy=order_filter.tag_policy,
        )

    def to_domain(self) -> OrderFilter:
        states = {state: ItemSelector.selected for state in TransactionState}
        for name, selector in self.states.items():
            states[TransactionState[name]] = selector
        return OrderFilter(
            visibility=self.visibility,
            date=self.date.to_domain(),
            states=states,
            resources=self.resources.to_domain(),
            tags=self.tags.to_domain(),
            ordering=self.ordering,
            direction=self.direction,
            tag_policy=self.tag_policy,
        )
