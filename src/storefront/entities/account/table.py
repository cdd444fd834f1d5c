"""User and role database table models."""

from datetime import UTC, datetime

import sqlalchemy as sa
from sqlalchemy import UniqueConstraint
from sqlmodel import Field, SQLModel


class RoleTable(SQLModel, table=True):
    __tablename__ = "role"

    id: int = Field(primary_key=True)
    name: str = Field(max_length=50)
    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC),
        nullable=False,
        sa_column_kwargs={"server_default": sa.func.now(), "onupdate": sa.func.now()},
    )


class UserTable(SQLModel, table=True):
    """Shop user; customers and administrators differ only by role."""

    __tablename__ = "user"
    __table_args__ = (UniqueConstraint("email", name="user_email_unique"),)

    id: int | None = Field(default=None, primary_key=True)
    email: str = Field(max_length=250)
    password: str = Field(max_length=128)
    role_id: int = Field(foreign_key="role.id")
    is_enabled: bool = True
    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC),
        nullable=False,
        sa_column_kwargs={"server_default": sa.func.now(), "onupdate": sa.func.now()},
    )
