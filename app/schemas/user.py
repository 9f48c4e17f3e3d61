# app/schemas/user.py
import uuid
from datetime import datetime
from typing import Literal

from pydantic import ConfigDict
from sqlmodel import SQLModel

# App-level roles. Rows without a role are "user".
Role = Literal["user", "admin"]


class UserRead(SQLModel):
    """Profile returned to staff."""

    id: uuid.UUID
    email: str
    first_name: str
    last_name: str
    phone_number: str
    gender: str
    photo_url: str | None
    address: str | None
    role: Role
    created_at: datetime | None


class UserSummary(SQLModel):
    """
    Counts shown above the users table.
    """

    total: int
    admins: int
    customers: int
    new_this_month: int


class UserRoleUpdate(SQLModel):
    """
    Admin-only role update schema.
    """

    model_config = ConfigDict(extra="forbid")
    role: Role
