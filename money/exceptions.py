"""Typed exceptions raised at the account boundary.

The filter engine itself never raises: category lookups that miss return
``False`` or ``None``. These exceptions cover category registration and order
lookup, where the caller has to be told what went wrong.

    MoneyError
    +-- RequestFailure
    |   +-- IncorrectArgumentError   INCORRECT_ARGUMENT
    |   +-- EmptyArgumentError       EMPTY_ARGUMENT
    |   +-- UnknownItemError         UNKNOWN_ITEM
    |   +-- ExistingItemError        EXISTING_ITEM
    +-- OrderNotFoundError           ORDER_NOT_FOUND
"""

import enum


class RequestFailureCode(enum.StrEnum):
    incorrect_argument = "INCORRECT_ARGUMENT"
    empty_argument = "EMPTY_ARGUMENT"
    unknown_item = "UNKNOWN_ITEM"
    existing_item = "EXISTING_ITEM"


class MoneyError(Exception):
    """Base class for every error raised by this package."""

    code: str = "MONEY_ERROR"


class RequestFailure(MoneyError):
    """A category registration request was rejected."""

    code: str = "REQUEST_FAILURE"

    def __init__(self, name: str, message: str):
        self.name = name
        super().__init__(message)


class IncorrectArgumentError(RequestFailure):
    """Name is made of whitespace only."""

    code: str = RequestFailureCode.incorrect_argument

    def __init__(self, name: str):
        super().__init__(name, f"Incorrect name: {name!r}")


class EmptyArgumentError(RequestFailure):
    """Name is empty."""

    code: str = RequestFailureCode.empty_argument

    def __init__(self, name: str = ""):
        super().__init__(name, "Name must not be empty")


class UnknownItemError(RequestFailure):
    """Name does not match any registered item."""

    code: str = RequestFailureCode.unknown_item

    def __init__(self, name: str):
        super().__init__(name, f"Unknown item: {name}")


class ExistingItemError(RequestFailure):
    """Name is already registered."""

    code: str = RequestFailureCode.existing_item

    def __init__(self, name: str):
        super().__init__(name, f"Item already exists: {name}")


class OrderNotFoundError(MoneyError):
    """No order lives at the requested index."""

    code: str = "ORDER_NOT_FOUND"

    def __init__(self, index: int):
        self.index = index
        super().__init__(f"Order not found: {index}")
