# app/core/auth.py
import uuid
from typing import Any

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials
from jose import jwt, JWTError
from supabase import Client

from app.core.auth_gate import AuthGate, Principal, ResolvedAuthGate
from app.core.config import get_settings
from app.database import bearer_scheme, get_client
from app.models.user import User
from app.repositories.user_repo import UserRepository

settings = get_settings()

user_repo = UserRepository()


def decode_access_token(token: str) -> dict[str, Any]:
    """
    Decode and verify a Supabase access token (JWT).

    Verification:
      - signature (HS256 using SUPABASE_JWT_SECRET)
      - expiration time (exp)
      - audience is NOT verified (Supabase 'aud' may vary)

    Args:
        token: raw JWT from the Authorization header.

    Returns:
        Decoded JWT claims.

    Raises:
        HTTPException(401): if token is invalid/expired.
    """
    try:
        return jwt.decode(
            token,
            settings.SUPABASE_JWT_SECRET,
            algorithms=[settings.SUPABASE_JWT_ALG],
            options={"verify_aud": False},
        )
    except JWTError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
        )


def get_current_principal(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> Principal:
    """
    Resolve the authenticated principal from a Supabase JWT.

    Flow:
      1. No Authorization header => 401.
      2. Decode JWT => extract 'sub' (auth user id) and 'email'.
      3. Convert 'sub' to UUID to match users.id.

    Raises:
        HTTPException(401): if token is missing, malformed, or lacks 'sub'.
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )

    payload = decode_access_token(credentials.credentials)
    sub = payload.get("sub")
    if not sub:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token missing sub",
        )

    # Supabase provides sub as a string; enforce UUID
    try:
        sub_uuid = uuid.UUID(sub)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid sub in token",
        )

    return Principal(
        id=sub_uuid,
        email=payload.get("email"),
        access_token=credentials.credentials,
    )


def require_admin(
    principal: Principal = Depends(get_current_principal),
    client: Client = Depends(get_client),
) -> User:
    """
    Enforce admin role.

    The caller's profile is read with the caller's own token, so RLS
    applies. Profiles without a role are plain users.

    Returns:
        The authenticated admin User.

    Raises:
        HTTPException(403): if there is no profile or role is not admin.
    """
    user = user_repo.get_by_id(client, principal.id)
    if user is None or not user.is_admin:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required",
        )
    return user


def get_auth_gate(
    principal: Principal = Depends(get_current_principal),
) -> AuthGate:
    """
    Auth gate for report endpoints.

    Over HTTP the principal comes from the bearer token, so the gate is
    already resolved.
    """
    return ResolvedAuthGate(principal)
