"""Exceptions raised by the order service and mapped to responses by the API."""


class OrderDeskError(Exception):
    """Base class for every error the order service raises on purpose."""


class OrderValidationError(OrderDeskError):
    """Raised when a submission fails field validation.

    ``errors`` maps each offending field to its messages, e.g.
    ``{"name": ["The Name field is required."]}``.
    """

    def __init__(self, errors: dict[str, list[str]]) -> None:
        super().__init__(f"Order validation failed for: {', '.join(sorted(errors))}")
        self.errors = errors


class InvalidArgumentError(OrderDeskError):
    """Raised when an operation receives a malformed argument."""


class OrdersNotFoundError(OrderDeskError):
    """Raised when the recent-orders listing comes back empty."""


class StoreError(OrderDeskError):
    """Raised when the order store fails; never carries the underlying detail."""
