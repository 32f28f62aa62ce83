"""Services built on top of the filter engine."""
