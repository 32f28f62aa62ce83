"""Filtering option admitting an order according to its date."""

import datetime
import enum


class DateFilterKind(enum.StrEnum):
    ignored = "ignored"
    since = "since"
    until = "until"
    between = "between"


class DateRangeFilter:
    """Optional inclusive ``[start, end]`` day interval.

    Both bounds set means ``between``, only one means ``since`` or ``until``,
    none means the filter is ignored. An inverted pair never survives
    construction or mutation: the end bound is dropped and the filter becomes
    ``since(start)``.
    """

    def __init__(
        self,
        start: datetime.date | None = None,
        end: datetime.date | None = None,
    ) -> None:
        self._start: datetime.date | None = None
        self._end: datetime.date | None = None
        self.set_range(start, end)

    @classmethod
    def ignored(cls) -> "DateRangeFilter":
        return cls()

    @classmethod
    def since(cls, start: datetime.date) -> "DateRangeFilter":
        return cls(start, None)

    @classmethod
    def until(cls, end: datetime.date) -> "DateRangeFilter":
        return cls(None, end)

    @classmethod
    def between(cls, start: datetime.date, end: datetime.date) -> "DateRangeFilter":
        return cls.check_range(start, end)

    @staticmethod
    def check_range(start: datetime.date, end: datetime.date) -> "DateRangeFilter":
        """``between(start, end)`` when ``end >= start``, else ``since(start)``."""
        date_filter = DateRangeFilter()
        date_filter._start = start
        if (end - start).days >= 0:
            date_filter._end = end
        return date_filter

    @property
    def start(self) -> datetime.date | None:
        return self._start

    @property
    def end(self) -> datetime.date | None:
        return self._end

    @property
    def kind(self) -> DateFilterKind:
        if self._start is None and self._end is None:
            return DateFilterKind.ignored
        if self._end is None:
            return DateFilterKind.since
        if self._start is None:
            return DateFilterKind.until
        return DateFilterKind.between

    @property
    def is_ignored(self) -> bool:
        return self.kind is DateFilterKind.ignored

    def _assign(self, other: "DateRangeFilter") -> None:
        self._start, self._end = other._start, other._end

    def set_range(
        self,
        start: datetime.date | None,
        end: datetime.date | None,
    ) -> None:
        if start is not None and end is not None:
            self._assign(DateRangeFilter.check_range(start, end))
        else:
            self._start, self._end = start, end

    def set_beginning(self, start: datetime.date | None) -> None:
        """Update the start bound only, keeping any end bound."""
        self.set_range(start, self._end)

    def set_end(self, end: datetime.date | None) -> None:
        """Update the end bound only, keeping any start bound."""
        self.set_range(self._start, end)

    def disable(self) -> None:
        self._start = self._end = None

    def is_date_allowed(self, date: datetime.date | None) -> bool:
        """Inclusive day comparison. A missing date only passes when ignored."""
        if self.is_ignored:
            return True
        if date is None:
            return False
        if self._start is not None and (date - self._start).days < 0:
            return False
        if self._end is not None and (self._end - date).days < 0:
            return False
        return True

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DateRangeFilter):
            return NotImplemented
        return (self._start, self._end) == (other._start, other._end)

    def __repr__(self) -> str:
        kind = self.kind
        if kind is DateFilterKind.ignored:
            return "DateRangeFilter.ignored()"
        if kind is DateFilterKind.since:
            return f"DateRangeFilter.since({self._start!r})"
        if kind is DateFilterKind.until:
            return f"DateRangeFilter.until({self._end!r})"
        return f"DateRangeFilter.between({self._start!r}, {self._end!r})"
