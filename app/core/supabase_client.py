# app/core/supabase_client.py
from functools import lru_cache
from supabase import create_client, Client

from app.core.config import get_settings

settings = get_settings()


@lru_cache
def supabase_public() -> Client:
    """
    Create a Supabase client with the anon/public key.

    Use cases:
      - operator scripts that sign a staff account in themselves
        (the client swaps its PostgREST token on SIGNED_IN)

    Note: This client still respects RLS.
    """
    return create_client(settings.SUPABASE_URL, settings.SUPABASE_KEY)


def supabase_for_token(access_token: str) -> Client:
    """
    Create a Supabase client that queries as the owner of `access_token`.

    A fresh client per request: the PostgREST auth header is mutable
    client state and must not leak between callers.

    Reads issued through this client are subject to the caller's
    row level security policies, which is how the store reports
    "permission denied" for non-admin tables.
    """
    client = create_client(settings.SUPABASE_URL, settings.SUPABASE_KEY)
    client.postgrest.auth(access_token)
    return client
