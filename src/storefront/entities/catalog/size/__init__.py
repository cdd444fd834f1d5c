"""Entity package: Size."""

from .entity import Size
from .table import SizeTable

__all__ = ["Size", "SizeTable"]
