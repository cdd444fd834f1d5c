"""Entity: Image."""

from pydantic import BaseModel, Field


class Image(BaseModel):
    """A stored picture; ``file_name`` is the opaque handle of the stored file."""

    id: int = Field(default=0, description="Identity, 0 until persisted")
    file_name: str = Field(default="", description="Stored file handle")
    description: str = Field(default="", description="Human readable description")
