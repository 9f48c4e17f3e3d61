# app/core/auth_gate.py
"""
Auth-readiness gate for reporting reads.

The identity provider may still be restoring its session when a report is
requested. Reports therefore ask an `AuthGate` for the principal first:

  - if a principal is already known, it is returned immediately;
  - otherwise the gate subscribes to auth state changes and resolves on the
    first non-null principal, or raises AuthenticationTimeoutError.

Each wait installs exactly one subscription and always disposes it.
"""
from __future__ import annotations

import asyncio
import logging
import uuid
from typing import Any, Callable, Protocol

from pydantic import ConfigDict
from sqlmodel import SQLModel

from app.core.errors import AuthenticationTimeoutError

logger = logging.getLogger(__name__)

PrincipalCallback = Callable[["Principal | None"], None]
Unsubscribe = Callable[[], None]


class Principal(SQLModel):
    """
    Authenticated identity as reported by Supabase Auth.
    """

    model_config = ConfigDict(extra="ignore")

    id: uuid.UUID
    email: str | None = None
    access_token: str | None = None

    @classmethod
    def from_auth_user(cls, user: Any, access_token: str | None = None) -> "Principal":
        """Build a Principal from a gotrue `User` object."""
        return cls(id=user.id, email=user.email, access_token=access_token)


class AuthStateSource(Protocol):
    """What an identity provider client must offer to the gate."""

    def current_principal(self) -> Principal | None: ...

    def subscribe(self, callback: PrincipalCallback) -> Unsubscribe: ...


class AuthGate(Protocol):
    def current_principal(self) -> Principal | None: ...

    async def await_principal(self, timeout: float) -> Principal: ...


class ResolvedAuthGate:
    """
    Gate for HTTP requests: the principal was already resolved from the
    bearer token by the auth dependencies, so there is nothing to wait for.
    """

    def __init__(self, principal: Principal):
        self._principal = principal

    def current_principal(self) -> Principal | None:
        return self._principal

    async def await_principal(self, timeout: float) -> Principal:
        return self._principal


class SubscriptionAuthGate:
    """
    Gate backed by an auth state subscription.

    Callbacks may be delivered from another thread (the Supabase client
    fires them from whichever thread completed the sign-in), so the result
    is handed to the event loop with `call_soon_threadsafe`.
    """

    def __init__(self, source: AuthStateSource):
        self.source = source

    def current_principal(self) -> Principal | None:
        return self.source.current_principal()

    async def await_principal(self, timeout: float) -> Principal:
        principal = self.current_principal()
        if principal is not None:
            return principal

        loop = asyncio.get_running_loop()
        future: asyncio.Future[Principal] = loop.create_future()

        def _resolve(value: Principal) -> None:
            if not future.done():
                future.set_result(value)

        def _on_change(value: Principal | None) -> None:
            if value is None:
                return
            loop.call_soon_threadsafe(_resolve, value)

        logger.debug("Waiting up to %.2fs for auth state to be restored", timeout)
        unsubscribe = self.source.subscribe(_on_change)
        try:
            # The session may have been restored between the first check and
            # subscribing; Supabase does not replay that event to new listeners.
            principal = self.current_principal()
            if principal is not None:
                return principal
            return await asyncio.wait_for(future, timeout)
        except asyncio.TimeoutError:
            logger.warning("No authenticated user after %.2fs", timeout)
            raise AuthenticationTimeoutError(timeout) from None
        finally:
            unsubscribe()


class SupabaseAuthStateSource:
    """
    AuthStateSource over a Supabase client's `auth` (gotrue) API.
    """

    def __init__(self, client: Any):
        self.client = client

    def current_principal(self) -> Principal | None:
        session = self.client.auth.get_session()
        if session is None or session.user is None:
            return None
        return Principal.from_auth_user(session.user, session.access_token)

    def subscribe(self, callback: PrincipalCallback) -> Unsubscribe:
        def _listener(event: Any, session: Any) -> None:
            if session is None or session.user is None:
                callback(None)
                return
            callback(Principal.from_auth_user(session.user, session.access_token))

        subscription = self.client.auth.on_auth_state_change(_listener)
        return subscription.unsubscribe
