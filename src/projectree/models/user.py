"""User model. Accounts are managed elsewhere; projects only reference them."""

from datetime import datetime

from sqlmodel import Field, SQLModel

from src.projectree.models.base import utc_now, utc_timestamp


class User(SQLModel, table=True):
    __tablename__ = "users"

    id: int | None = Field(default=None, primary_key=True)
    username: str = Field(max_length=100, unique=True, index=True)
    created_at: datetime = Field(default_factory=utc_now, sa_type=utc_timestamp())
