"""
Domain exceptions.

CRITICAL: This file must contain ZERO imports from:
- pydantic
"""
from .enums import OrderStatus


class InvalidOrderStateError(ValueError):
    """
    Raised when a status transition is not allowed from the current status.

    Subclasses ValueError so callers catching the generic business-rule
    error keep working.
    """

    def __init__(self, message: str, current_status: OrderStatus, action: str):
        super().__init__(message)
        self.current_status = current_status
        self.action = action
