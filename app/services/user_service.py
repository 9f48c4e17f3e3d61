# app/services/user_service.py
import uuid
from datetime import datetime, timezone
from typing import Iterable

from fastapi import HTTPException, status
from supabase import Client

from app.models.user import User
from app.repositories.user_repo import UserRepository
from app.schemas.common import Page
from app.schemas.user import UserRoleUpdate, UserSummary
from app.services.aggregations import as_utc
from app.services.pagination import paginate


def filter_users(
    users: Iterable[User],
    search: str = "",
    role: str = "all",
) -> list[User]:
    """
    Case-insensitive search on email or "first last", plus a role filter
    ("all" disables it). Users without a stored role count as "user".
    """
    needle = (search or "").strip().lower()

    matches: list[User] = []
    for user in users:
        if needle and needle not in user.email.lower() and needle not in user.full_name.lower():
            continue
        if role != "all" and user.role != role:
            continue
        matches.append(user)
    return matches


class UserService:
    """
    Business logic for staff-side user management.

    Responsibilities:
      - listing with search / role filter / pagination
      - headline counts for the users page
      - role changes and admin checks
      - map missing rows to HTTP errors
    """

    def __init__(self, repo: UserRepository):
        self.repo = repo

    def list_users(
        self,
        client: Client,
        search: str = "",
        role: str = "all",
        page: int = 1,
        per_page: int = 10,
    ) -> Page[User]:
        """List users newest first, filtered and paginated."""
        users = self.repo.fetch_all(client)
        return paginate(filter_users(users, search, role), page, per_page)

    def get_summary(self, client: Client, now: datetime | None = None) -> UserSummary:
        """
        Total / admin / customer counts, plus sign-ups in the current
        calendar month (UTC).
        """
        now = as_utc(now or datetime.now(timezone.utc))
        users = self.repo.fetch_all(client)

        admins = sum(1 for u in users if u.is_admin)
        new_this_month = 0
        for u in users:
            if u.created_at is None:
                continue
            created = as_utc(u.created_at)
            if created.year == now.year and created.month == now.month:
                new_this_month += 1

        return UserSummary(
            total=len(users),
            admins=admins,
            customers=len(users) - admins,
            new_this_month=new_this_month,
        )

    def get_user(self, client: Client, user_id: uuid.UUID) -> User:
        """
        Get a user by id.

        Raises:
            HTTPException(404): if not found.
        """
        user = self.repo.get_by_id(client, user_id)
        if not user:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="User not found",
            )
        return user

    def update_role(
        self,
        client: Client,
        user_id: uuid.UUID,
        payload: UserRoleUpdate,
    ) -> User:
        """
        Change user's role.

        Role validation is enforced by the schema (Literal).
        """
        self.get_user(client, user_id)
        updated = self.repo.update_role(client, user_id, payload.role)
        if updated is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="User not found",
            )
        return updated

    def is_admin(self, client: Client, user_id: uuid.UUID) -> bool:
        """False for unknown users."""
        user = self.repo.get_by_id(client, user_id)
        return bool(user and user.is_admin)
