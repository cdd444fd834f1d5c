"""Entity package: Category."""

from .entity import Category
from .repository import CategoryMapper, CategoryRepository
from .table import CategoryTable

__all__ = ["Category", "CategoryMapper", "CategoryRepository", "CategoryTable"]
