"""Application services."""
from .order_service import OrderLifecycleService

__all__ = ["OrderLifecycleService"]
