from .category_orchestrator import CategoryOrchestrator
from .product_orchestrator import ProductOrchestrator

__all__ = ["CategoryOrchestrator", "ProductOrchestrator"]
