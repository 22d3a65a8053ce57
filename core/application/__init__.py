"""Application layer - services coordinating the domain."""

from .services import OrderLifecycleService

__all__ = ["OrderLifecycleService"]
