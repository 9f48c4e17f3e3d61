# app/database.py
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from supabase import Client

from app.core.supabase_client import supabase_for_token

# ---------------------------------------------------------
# Supabase data access (PostgREST)
#
# - One client per request, authorized with the caller's JWT.
# - RLS policies of the Supabase project decide what the caller
#   may read; a denied read surfaces as PermissionDeniedError
#   from the repositories.
# ---------------------------------------------------------

# auto_error=False => we raise our own 401 with a clear message.
bearer_scheme = HTTPBearer(auto_error=False)


def get_client(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> Client:
    """
    FastAPI dependency that yields a Supabase client acting as the caller.

    Usage:

        from fastapi import Depends

        @router.get("/example")
        def example_endpoint(client: Client = Depends(get_client)):
            ...
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )
    return supabase_for_token(credentials.credentials)
