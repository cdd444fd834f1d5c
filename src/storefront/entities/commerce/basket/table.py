"""Basket database table models."""

from datetime import UTC, datetime

from sqlmodel import Field, SQLModel


class BasketTable(SQLModel, table=True):
    __tablename__ = "basket"

    id: int | None = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="user.id")
    order_date: datetime = Field(default_factory=lambda: datetime.now(UTC))


class BasketItemTable(SQLModel, table=True):
    """One size of a product in a basket; the size identifies the product."""

    __tablename__ = "basket_item"

    id: int | None = Field(default=None, primary_key=True)
    basket_id: int = Field(foreign_key="basket.id", index=True)
    size_id: int = Field(foreign_key="size.id")
    quantity: int = 1
