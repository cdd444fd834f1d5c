"""Maintenance of a product's sizes from the edit form."""

from collections.abc import Mapping

from loguru import logger

from src.storefront.entities import Product, Size

SIZE_FIELD_PREFIX = "size_"


class SizeService:
    def apply(self, form: Mapping[str, str], product: Product) -> None:
        """Add the sizes named by the form's ``size_*`` fields to ``product``.

        Blank fields are ignored, a name that already exists as an active size
        is not added twice and an inactive size of the same name is
        reactivated.
        """
        names = [
            form[key].strip()
            for key in sorted(form, key=_size_field_order)
            if key.startswith(SIZE_FIELD_PREFIX) and form[key].strip()
        ]
        for name in names:
            existing = product.find_size(name)
            if existing is None:
                product.sizes.append(Size(name=name))
                logger.debug("Added size {} to product {}", name, product.name)
            elif not existing.is_active:
                existing.is_active = True
                existing.is_in_stock = True

    def clear(self, product: Product) -> None:
        """Deactivate every size; size rows are never removed."""
        for size in product.sizes:
            size.is_active = False


def _size_field_order(key: str) -> tuple[int, str]:
    suffix = key[len(SIZE_FIELD_PREFIX):]
    return (int(suffix), key) if suffix.isdecimal() else (1 << 30, key)
