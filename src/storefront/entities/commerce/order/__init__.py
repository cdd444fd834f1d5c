"""Table package: Order."""

from .table import CardTable, CardTypeTable, OrderStatusTable, OrderTable

__all__ = ["CardTable", "CardTypeTable", "OrderStatusTable", "OrderTable"]
