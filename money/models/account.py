"""Account model."""

from dataclasses import dataclass, field

from money.models.exclusive import ExclusiveItems
from money.models.order import Order


@dataclass
class Account:
    """Registered categories plus the authoritative order list.

    The position of an order in ``orders`` is its identifier for the
    lifetime of the list.
    """

    tags: ExclusiveItems = field(default_factory=ExclusiveItems)
    resources: ExclusiveItems = field(default_factory=ExclusiveItems)
    orders: list[Order] = field(default_factory=list)

    def add_tag(self, tag: str) -> None:
        self.tags.add(tag)

    def remove_tag(self, tag: str) -> None:
        """Unregister a tag and detach it from every order."""
        self.tags.remove(tag)
        for order in self.orders:
            order.remove_tag(tag)

    def add_resource(self, resource: str) -> None:
        self.resources.add(resource)

    def remove_resource(self, resource: str) -> None:
        """Unregister a resource and clear it on every order using it."""
        self.resources.remove(resource)
        for order in self.orders:
            if order.resource == resource:
                order.clear_resource()

    def add_order(self) -> int:
        """Append a default order and return its index."""
        self.orders.append(Order())
        return len(self.orders) - 1

    def get_order(self, index: int) -> Order | None:
        if 0 <= index < len(self.orders):
            return self.orders[index]
        return None

    def delete_order(self, index: int) -> bool:
        if self.get_order(index) is None:
            return False
        del self.orders[index]
        return True

    def duplicate_order(self, index: int) -> int | None:
        """Append a copy of an order and return the copy's index."""
        order = self.get_order(index)
        if order is None:
            return None
        self.orders.append(order.copy())
        return len(self.orders) - 1

    def purge_hidden_orders(self) -> int:
        """Permanently drop hidden orders. Returns how many were removed."""
        kept = [order for order in self.orders if order.visible]
        purged = len(self.orders) - len(kept)
        self.orders[:] = kept
        return purged

    def sum_orders(self) -> float:
        return sum((order.amount for order in self.orders), 0.0)
