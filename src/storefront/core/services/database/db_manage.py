"""Schema management for the storefront database."""

from loguru import logger
from sqlalchemy.engine import Engine
from sqlmodel import SQLModel


class DbManageService:
    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def create_all(self) -> None:
        """Create all database tables that do not exist yet."""
        import src.storefront.entities  # noqa: F401  registers every table

        SQLModel.metadata.create_all(self._engine)
        logger.info("Database initialized with {} tables", len(SQLModel.metadata.tables))

    def drop_all(self) -> None:
        import src.storefront.entities  # noqa: F401

        SQLModel.metadata.drop_all(self._engine)
        logger.warning("Dropped all storefront tables")
