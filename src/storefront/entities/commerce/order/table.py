"""Order and payment card database table models."""

from datetime import UTC, datetime

from sqlalchemy import Text
from sqlmodel import Field, SQLModel


class OrderStatusTable(SQLModel, table=True):
    __tablename__ = "order_status"

    id: int = Field(primary_key=True)
    name: str = Field(max_length=50)


class CardTypeTable(SQLModel, table=True):
    __tablename__ = "card_type"

    id: int = Field(primary_key=True)
    name: str = Field(max_length=50)
    required_issue_number: bool = False


class CardTable(SQLModel, table=True):
    """Payment card; number and security code are stored encrypted by the caller."""

    __tablename__ = "card"

    id: int | None = Field(default=None, primary_key=True)
    card_type_id: int = Field(foreign_key="card_type.id")
    holder: str = Field(max_length=50)
    number: str = Field(max_length=500)
    expiry_month: int
    expiry_year: int
    start_month: int = 0
    start_year: int = 0
    issue_number: str = Field(default="", max_length=5)
    security_code: str = Field(max_length=500)


class OrderTable(SQLModel, table=True):
    __tablename__ = "order"

    id: int | None = Field(default=None, primary_key=True)
    basket_id: int = Field(foreign_key="basket.id")
    card_id: int | None = Field(default=None, foreign_key="card.id")
    card_contact_id: int = Field(foreign_key="contact.id")
    delivery_contact_id: int | None = Field(default=None, foreign_key="contact.id")
    email: str = Field(max_length=250)
    additional_information: str = Field(default="", sa_type=Text)
    use_card_holder_contact: bool = True
    pay_by_telephone: bool = False
    created_date: datetime = Field(default_factory=lambda: datetime.now(UTC))
    dispatched_date: datetime | None = None
    order_status_id: int = Field(foreign_key="order_status.id")
    user_id: int | None = Field(default=None, foreign_key="user.id")
