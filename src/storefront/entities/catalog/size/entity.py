"""Entity: Size."""

from pydantic import BaseModel, Field


class Size(BaseModel):
    """A stock-keeping size of a product."""

    id: int = Field(default=0, description="Identity, 0 until persisted")
    name: str = Field(description="Size label shown to customers")
    is_in_stock: bool = Field(default=True)
    is_active: bool = Field(default=True)
