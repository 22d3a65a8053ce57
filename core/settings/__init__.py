# Settings package
from core.settings.order_settings import OrderSettings, get_order_settings

__all__ = ["OrderSettings", "get_order_settings"]
