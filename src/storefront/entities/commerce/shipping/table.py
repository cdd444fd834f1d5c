"""Postage, zone, country and contact database table models."""

from decimal import Decimal

from sqlmodel import Field, SQLModel


class PostZoneTable(SQLModel, table=True):
    """Shipping zone; postage is scaled by ``multiplier`` or charged ``flat_rate``."""

    __tablename__ = "post_zone"

    id: int | None = Field(default=None, primary_key=True)
    name: str = Field(max_length=50)
    multiplier: Decimal = Field(default=Decimal("1"), max_digits=18, decimal_places=4)
    ask_if_max_weight: bool = False
    position: int = 0
    is_active: bool = True
    flat_rate: Decimal = Field(default=Decimal("0"), max_digits=19, decimal_places=4)


class PostageTable(SQLModel, table=True):
    """Weight band price."""

    __tablename__ = "postage"

    id: int | None = Field(default=None, primary_key=True)
    name: str = Field(max_length=50)
    max_weight: int
    price: Decimal = Field(max_digits=19, decimal_places=4)
    position: int = 0
    is_active: bool = True


class CountryTable(SQLModel, table=True):
    __tablename__ = "country"

    id: int | None = Field(default=None, primary_key=True)
    name: str = Field(max_length=50)
    position: int = 0
    is_active: bool = True
    post_zone_id: int = Field(foreign_key="post_zone.id")


class ContactTable(SQLModel, table=True):
    """Postal contact used for card holder and delivery addresses."""

    __tablename__ = "contact"

    id: int | None = Field(default=None, primary_key=True)
    firstname: str = Field(max_length=50)
    lastname: str = Field(max_length=50)
    address1: str = Field(max_length=100)
    address2: str = Field(default="", max_length=100)
    address3: str = Field(default="", max_length=100)
    town: str = Field(max_length=50)
    county: str = Field(default="", max_length=50)
    postcode: str = Field(max_length=50)
    country_id: int = Field(foreign_key="country.id")
    telephone: str = Field(default="", max_length=50)
