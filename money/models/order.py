"""Order model."""

import datetime
import enum
from collections.abc import Container
from dataclasses import dataclass, field


class TransactionState(enum.IntEnum):
    """Payment lifecycle stage. The integer value is stored as-is."""

    pending = 0
    in_progress = 1
    done = 2


@dataclass
class Order:
    """A single financial transaction."""

    date: datetime.date | None = None
    description: str = ""
    amount: float = 0.0
    resource: str | None = None
    tags: list[str] = field(default_factory=list)
    state: TransactionState = TransactionState.pending
    visible: bool = True

    def set_resource(self, resource: str, available: Container[str]) -> bool:
        """Select the resource among registered ones."""
        if resource not in available:
            return False
        self.resource = resource
        return True

    def clear_resource(self) -> None:
        self.resource = None

    def add_tag(self, tag: str, available: Container[str]) -> bool:
        """Attach a registered tag. Unknown and already attached tags are refused."""
        if tag not in available or tag in self.tags:
            return False
        self.tags.append(tag)
        return True

    def remove_tag(self, tag: str) -> bool:
        if tag not in self.tags:
            return False
        self.tags.remove(tag)
        return True

    def clear_tags(self) -> None:
        self.tags.clear()

    def set_state(self, state: TransactionState) -> None:
        """Update the state. Moving to ``done`` stamps today's date if none is set."""
        state = TransactionState(state)
        if state is TransactionState.done and self.date is None:
            self.date = datetime.date.today()
        self.state = state

    def copy(self) -> "Order":
        return Order(
            date=self.date,
            description=self.description,
            amount=self.amount,
            resource=self.resource,
            tags=list(self.tags),
            state=self.state,
            visible=self.visible,
        )
