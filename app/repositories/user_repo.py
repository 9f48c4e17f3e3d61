# app/repositories/user_repo.py
import uuid
from datetime import datetime, timezone

from supabase import Client

from app.models.user import User
from app.repositories.base import SupabaseRepository


class UserRepository(SupabaseRepository):
    """
    Data access layer for the `users` profile table.

    Responsibilities:
      - Pure store operations (queries + role update)
      - No FastAPI, no HTTP, no business logic
    """

    table_name = "users"

    def fetch_all(self, client: Client) -> list[User]:
        """All profiles, newest first."""
        query = self._table(client).select("*").order("created_at", desc=True)
        return self._parse(User, self._execute(query))

    def count(self, client: Client) -> int:
        """Number of profiles, as the size of a full collection read."""
        return len(self._execute(self._table(client).select("*")))

    def get_by_id(self, client: Client, user_id: uuid.UUID) -> User | None:
        """Return a User by primary key, or None if not found."""
        query = self._table(client).select("*").eq("id", str(user_id)).limit(1)
        rows = self._execute(query)
        return self._parse_one(User, rows)

    def update_role(self, client: Client, user_id: uuid.UUID, role: str) -> User | None:
        """Persist a role change; None if no row matched."""
        query = (
            self._table(client)
            .update(
                {
                    "role": role,
                    "updated_at": datetime.now(timezone.utc).isoformat(),
                }
            )
            .eq("id", str(user_id))
        )
        rows = self._execute(query)
        return self._parse_one(User, rows)
