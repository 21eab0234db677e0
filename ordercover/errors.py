"""
Errors raised by ordercover.
Every error is a caller contract violation; none of them is retryable.
"""


class OrderCoverError(Exception):
    pass


class SchemaError(OrderCoverError, ValueError):
    """An order record is missing required fields or has wrong field types."""


class ValidationError(OrderCoverError, ValueError):
    """An amount argument is invalid, a paired sequence has the wrong length,
    or an order has a zero maker_asset_amount where a fee ratio needs it."""
