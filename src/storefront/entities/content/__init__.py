"""Table package: Content."""

from .table import ContentTable, ContentTypeTable

__all__ = ["ContentTable", "ContentTypeTable"]
