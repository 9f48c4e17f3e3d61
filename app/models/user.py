# app/models/user.py
import uuid
from datetime import datetime

from pydantic import ConfigDict, field_validator
from sqlmodel import SQLModel, Field


class User(SQLModel):
    """
    User profile, a row of the `users` table.

    Identity:
      - id: matches Supabase auth.users.id (UUID from JWT "sub")

    Role:
      - "user" | "admin"
      - rows written before roles existed have no role; they are users.

    Passwords live in Supabase Auth; this table only mirrors identity,
    contact fields, and application role.
    """

    model_config = ConfigDict(extra="ignore")

    id: uuid.UUID = Field(description="Matches Supabase auth.users.id")

    email: str = ""
    first_name: str = ""
    last_name: str = ""
    phone_number: str = ""
    gender: str = ""
    photo_url: str | None = None
    address: str | None = None

    role: str = Field(default="user", description="Application role: user | admin")

    created_at: datetime | None = None
    updated_at: datetime | None = None

    @field_validator("role", mode="before")
    @classmethod
    def default_role(cls, v):
        return v or "user"

    @field_validator("email", "first_name", "last_name", "phone_number", "gender", mode="before")
    @classmethod
    def none_to_empty(cls, v):
        return v or ""

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"
