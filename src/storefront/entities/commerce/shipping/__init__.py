"""Table package: shipping."""

from .table import ContactTable, CountryTable, PostageTable, PostZoneTable

__all__ = ["ContactTable", "CountryTable", "PostageTable", "PostZoneTable"]
