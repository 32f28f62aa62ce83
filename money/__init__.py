"""Personal expense tracking: order filtering and category aggregation."""

__version__ = "1.0.0"
