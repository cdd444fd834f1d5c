"""Core services exports."""

# Database Services
from .database.db_manage import DbManageService
from .database.db_session import DbSessionService

# Catalogue Services
from .image_service import ImageUploadService
from .orderable_service import MoveDirection, OrderableService
from .size_service import SizeService

# Orchestrators
from .catalog import CategoryOrchestrator, ProductOrchestrator

__all__ = [
    # Database Services
    "DbManageService",
    "DbSessionService",
    # Catalogue Services
    "ImageUploadService",
    "MoveDirection",
    "OrderableService",
    "SizeService",
    # Orchestrators
    "CategoryOrchestrator",
    "ProductOrchestrator",
]
