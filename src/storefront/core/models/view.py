"""View results returned by the orchestrators."""

from dataclasses import dataclass
from typing import Any, NamedTuple

from src.storefront.entities import Category, Product


@dataclass
class ShopViewData:
    """What a view displays; unset members stay ``None``."""

    product: Product | None = None
    category: Category | None = None
    categories: list[Category] | None = None
    products: list[Product] | None = None

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready view data keyed by the presentation names."""

        def dump(value: Any, **kwargs: Any) -> Any:
            if value is None:
                return None
            if isinstance(value, list):
                return [item.model_dump(mode="json", **kwargs) for item in value]
            return value.model_dump(mode="json", **kwargs)

        return {
            "Product": dump(self.product),
            "Category": dump(self.category),
            # categories are listed without their products
            "Categories": dump(self.categories, exclude={"products"}),
            "Products": dump(self.products),
        }


class ViewResult(NamedTuple):
    view_name: str
    view_data: ShopViewData
