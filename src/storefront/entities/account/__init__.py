"""Table package: User and Role."""

from .table import RoleTable, UserTable

__all__ = ["RoleTable", "UserTable"]
