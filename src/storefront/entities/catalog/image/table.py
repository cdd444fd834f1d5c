"""Image database table model."""

from sqlmodel import Field, SQLModel


class ImageTable(SQLModel, table=True):
    """Database persistence model for stored images."""

    __tablename__ = "image"

    id: int | None = Field(default=None, primary_key=True)
    file_name: str = Field(max_length=64)
    description: str = Field(default="", max_length=500)
