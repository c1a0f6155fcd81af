from .table import Table
from .menu import Menu
from .order import Order
from .order_item import OrderItem

__all__ = [
    "Table",
    "Menu",
    "Order",
    "OrderItem",
]
