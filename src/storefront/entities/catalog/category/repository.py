"""Category repository and its entity/row mapping."""

from sqlmodel import Session, col, select

from src.storefront.entities._repository import Repository
from src.storefront.entities.catalog.product import ProductMapper

from .entity import Category
from .table import CategoryTable


class CategoryMapper:
    entity_name = "Category"
    row_type = CategoryTable
    order_by = (CategoryTable.position, CategoryTable.id)

    def __init__(self) -> None:
        self._products = ProductMapper()

    def to_entity(self, row: CategoryTable) -> Category:
        return Category(
            id=row.id,
            name=row.name,
            parent_id=row.parent_id,
            position=row.position,
            is_active=row.is_active,
            products=[self._products.to_entity(product) for product in row.products],
        )

    def to_row(
        self, entity: Category, row: CategoryTable | None, session: Session
    ) -> CategoryTable:
        if row is None:
            row = CategoryTable(name=entity.name)
        row.name = entity.name
        row.parent_id = entity.parent_id
        row.position = entity.position
        row.is_active = entity.is_active
        return row

    def after_flush(self, entity: Category, row: CategoryTable) -> None:
        entity.id = row.id


class CategoryRepository(Repository[Category, CategoryTable]):
    """Data-access layer for categories."""

    def __init__(self, session: Session) -> None:
        super().__init__(session, CategoryMapper())

    def list_children(self, parent_id: int | None) -> list[Category]:
        """Direct children of a category, or the root categories for ``None``."""
        statement = select(CategoryTable)
        if parent_id is None:
            statement = statement.where(col(CategoryTable.parent_id).is_(None))
        else:
            statement = statement.where(CategoryTable.parent_id == parent_id)
        statement = statement.order_by(*CategoryMapper.order_by)
        return self._track_all(self.session.exec(statement).all())
