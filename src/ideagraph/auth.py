"""Obtain access tokens and open authenticated Drive sessions.

Readiness is explicit: ``await connect(...)`` either returns a usable
:class:`DriveSession` or raises :class:`AuthenticationError`.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from types import TracebackType

import httpx
from pydantic import ValidationError

from ideagraph.config import (
    ACCESS_TOKEN_ENV,
    CLIENT_ID_ENV,
    CLIENT_SECRET_ENV,
    IDEAGRAPH_SCOPES,
    IDEAGRAPH_TOKEN_URL,
    REFRESH_TOKEN_ENV,
)
from ideagraph.exceptions import AuthenticationError
from ideagraph.http_utils import new_async_client
from ideagraph.schemas import AccessToken

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OAuthCredentials:
    """Client credentials plus a refresh token for the OAuth token endpoint."""

    client_id: str
    client_secret: str
    refresh_token: str
    scope: str = IDEAGRAPH_SCOPES

    @classmethod
    def from_env(cls) -> OAuthCredentials | None:
        """Load credentials from the environment, or None if any are missing."""
        client_id = os.getenv(CLIENT_ID_ENV)
        client_secret = os.getenv(CLIENT_SECRET_ENV)
        refresh_token = os.getenv(REFRESH_TOKEN_ENV)
        if not (client_id and client_secret and refresh_token):
            return None
        return cls(
            client_id=client_id,
            client_secret=client_secret,
            refresh_token=refresh_token,
        )


@dataclass
class DriveSession:
    """An authenticated HTTP session for the Drive API.

    Attributes:
        token: The access token used for every request.
        client: Pooled HTTP client owned by the session.
    """

    token: AccessToken
    client: httpx.AsyncClient = field(default_factory=new_async_client)

    @property
    def auth_headers(self) -> dict[str, str]:
        return {"Authorization": f"{self.token.token_type} {self.token.access_token}"}

    async def aclose(self) -> None:
        await self.client.aclose()

    async def __aenter__(self) -> DriveSession:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()


async def refresh_access_token(
    credentials: OAuthCredentials,
    *,
    client: httpx.AsyncClient | None = None,
) -> AccessToken:
    """Exchange a refresh token for a fresh access token.

    Args:
        credentials: OAuth client credentials and refresh token.
        client: Optional httpx.AsyncClient. A new one is created if omitted.

    Returns:
        The validated access token.

    Raises:
        AuthenticationError: If the request fails or the provider returns an
            error or a malformed payload.
    """
    form = {
        "grant_type": "refresh_token",
        "client_id": credentials.client_id,
        "client_secret": credentials.client_secret,
        "refresh_token": credentials.refresh_token,
        "scope": credentials.scope,
    }

    async def do_request(http_client: httpx.AsyncClient) -> httpx.Response:
        try:
            return await http_client.post(IDEAGRAPH_TOKEN_URL, data=form)
        except httpx.RequestError as exc:
            raise AuthenticationError(f"Sign-in failed: {exc}") from exc

    if client is not None:
        response = await do_request(client)
    else:
        async with new_async_client() as new_client:
            response = await do_request(new_client)

    return _parse_token_response(response)


async def connect(
    *,
    access_token: str | None = None,
    credentials: OAuthCredentials | None = None,
) -> DriveSession:
    """Open an authenticated Drive session.

    Resolution order: an explicit ``access_token``, explicit ``credentials``,
    ``IDEAGRAPH_ACCESS_TOKEN`` from the environment, then OAuth credentials
    from the environment.

    Raises:
        AuthenticationError: If no credential is available or the token
            refresh fails.
    """
    if access_token is None and credentials is None:
        access_token = os.getenv(ACCESS_TOKEN_ENV) or None
        if access_token is None:
            credentials = OAuthCredentials.from_env()

    if access_token is not None:
        if not access_token.strip():
            raise AuthenticationError("Missing access token.")
        return DriveSession(token=AccessToken(access_token=access_token.strip()))

    if credentials is None:
        raise AuthenticationError("Missing access token.")

    client = new_async_client()
    try:
        token = await refresh_access_token(credentials, client=client)
    except AuthenticationError:
        await client.aclose()
        raise
    logger.info(
        "Obtained access token (expires in %s s)",
        token.expires_in,
        extra={"expires_in": token.expires_in},
    )
    return DriveSession(token=token, client=client)


def _parse_token_response(response: httpx.Response) -> AccessToken:
    try:
        payload = response.json()
    except json.JSONDecodeError as exc:
        raise AuthenticationError(
            f"Sign-in failed: HTTP {response.status_code} with non-JSON body"
        ) from exc

    if not isinstance(payload, dict):
        raise AuthenticationError("Sign-in failed: unexpected token response")

    if "error" in payload or response.status_code >= 400:
        reason = payload.get("error_description") or payload.get("error") or f"HTTP {response.status_code}"
        raise AuthenticationError(f"Sign-in failed: {reason}")

    try:
        return AccessToken.model_validate(payload)
    except ValidationError as exc:
        raise AuthenticationError(f"Sign-in failed: malformed token response: {exc}") from exc
