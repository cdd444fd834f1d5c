"""Table package: Basket."""

from .table import BasketItemTable, BasketTable

__all__ = ["BasketItemTable", "BasketTable"]
