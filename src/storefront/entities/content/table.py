"""Content page database table models."""

from sqlalchemy import Text, UniqueConstraint
from sqlmodel import Field, SQLModel


class ContentTypeTable(SQLModel, table=True):
    """Lookup of content kinds (menu, text page, action link)."""

    __tablename__ = "content_type"

    id: int = Field(primary_key=True)
    name: str = Field(max_length=50)


class ContentTable(SQLModel, table=True):
    """A CMS page or menu entry; pages nest under a parent content item."""

    __tablename__ = "content"
    __table_args__ = (
        UniqueConstraint("name", name="unique_name"),
        UniqueConstraint("url_name", name="unique_urlName"),
    )

    id: int | None = Field(default=None, primary_key=True)
    parent_content_id: int | None = Field(default=None, foreign_key="content.id")
    content_type_id: int = Field(foreign_key="content_type.id")
    name: str = Field(max_length=250)
    url_name: str = Field(max_length=250)
    text: str | None = Field(default=None, sa_type=Text)
    controller: str | None = Field(default=None, max_length=50)
    action: str | None = Field(default=None, max_length=50)
    position: int = 0
    is_active: bool = True
