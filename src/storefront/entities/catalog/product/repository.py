"""Product repository and its entity/row mapping."""

from sqlmodel import Session, select

from src.storefront.entities._repository import Repository
from src.storefront.entities.catalog.image import Image, ImageTable
from src.storefront.entities.catalog.size import SizeTable

from .entity import Product, ProductImage
from .table import ProductImageTable, ProductTable

_SCALAR_FIELDS = (
    "category_id",
    "name",
    "description",
    "price",
    "position",
    "weight",
    "is_active",
    "url_name",
)


class ProductMapper:
    """Maps a Product with its gallery and sizes onto the product tables."""

    entity_name = "Product"
    row_type = ProductTable
    order_by = (ProductTable.position, ProductTable.id)

    def to_entity(self, row: ProductTable) -> Product:
        # sizes are read through from_attributes; the gallery is mapped by hand
        product = Product.model_validate(row, from_attributes=True)
        product.product_images = [
            ProductImage(
                id=link.id,
                position=link.position,
                image=Image.model_validate(link.image, from_attributes=True),
            )
            for link in row.images
        ]
        return product

    def to_row(
        self, entity: Product, row: ProductTable | None, session: Session
    ) -> ProductTable:
        if row is None:
            row = ProductTable(category_id=entity.category_id, name=entity.name)
        for field_name in _SCALAR_FIELDS:
            setattr(row, field_name, getattr(entity, field_name))

        links_by_id = {link.id: link for link in row.images}
        links = []
        for product_image in entity.product_images:
            link = links_by_id.get(product_image.id) if product_image.id else None
            if link is None:
                link = ProductImageTable()
                link.image = self._image_row(product_image.image, session)
            link.position = product_image.position
            links.append(link)
        row.images = links

        sizes_by_id = {size_row.id: size_row for size_row in row.sizes}
        size_rows = []
        for size in entity.sizes:
            size_row = sizes_by_id.get(size.id) if size.id else None
            if size_row is None:
                size_row = SizeTable(name=size.name)
            size_row.name = size.name
            size_row.is_in_stock = size.is_in_stock
            size_row.is_active = size.is_active
            size_rows.append(size_row)
        row.sizes = size_rows
        return row

    def after_flush(self, entity: Product, row: ProductTable) -> None:
        entity.id = row.id
        for product_image, link in zip(entity.product_images, row.images, strict=True):
            product_image.id = link.id
            product_image.image.id = link.image_id
        for size, size_row in zip(entity.sizes, row.sizes, strict=True):
            size.id = size_row.id

    def _image_row(self, image: Image, session: Session) -> ImageTable:
        image_row = session.get(ImageTable, image.id) if image.id else None
        if image_row is None:
            image_row = ImageTable(file_name=image.file_name, description=image.description)
        return image_row


class ProductRepository(Repository[Product, ProductTable]):
    """Data-access layer for products."""

    def __init__(self, session: Session) -> None:
        super().__init__(session, ProductMapper())

    def list_by_category(self, category_id: int) -> list[Product]:
        """Products of one category in display order."""
        statement = (
            select(ProductTable)
            .where(ProductTable.category_id == category_id)
            .order_by(*ProductMapper.order_by)
        )
        return self._track_all(self.session.exec(statement).all())
