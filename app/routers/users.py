# app/routers/users.py
import uuid
from typing import Literal

from fastapi import APIRouter, Depends, Query
from supabase import Client

from app.core.auth import require_admin
from app.database import get_client
from app.repositories.user_repo import UserRepository
from app.schemas.common import Page
from app.schemas.user import UserRead, UserRoleUpdate, UserSummary
from app.services.user_service import UserService

router = APIRouter(prefix="/admin/users", tags=["Users"])

repo = UserRepository()
service = UserService(repo)


@router.get(
    "",
    response_model=Page[UserRead],
    dependencies=[Depends(require_admin)],
)
def list_users(
    client: Client = Depends(get_client),
    search: str = "",
    role: Literal["all", "user", "admin"] = "all",
    page: int = Query(1, ge=1),
    per_page: int = Query(10, ge=1, le=50),
):
    """
    List users, newest first (admin only).

    Search covers email and full name.
    """
    return service.list_users(client, search, role, page, per_page)


@router.get(
    "/summary",
    response_model=UserSummary,
    dependencies=[Depends(require_admin)],
)
def get_summary(client: Client = Depends(get_client)):
    """
    Total, admin, customer and new-this-month counts.
    """
    return service.get_summary(client)


@router.get(
    "/{user_id}",
    response_model=UserRead,
    dependencies=[Depends(require_admin)],
)
def get_user(
    user_id: uuid.UUID,
    client: Client = Depends(get_client),
):
    """
    Get a specific user by id (admin only).
    """
    return service.get_user(client, user_id)


@router.patch(
    "/{user_id}/role",
    response_model=UserRead,
    dependencies=[Depends(require_admin)],
)
def change_role(
    user_id: uuid.UUID,
    payload: UserRoleUpdate,
    client: Client = Depends(get_client),
):
    """
    Update a user's role (admin only).

    Allowed roles: user, admin.
    """
    return service.update_role(client, user_id, payload)
