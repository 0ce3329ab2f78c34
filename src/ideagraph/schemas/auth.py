"""Token endpoint models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class AccessToken(BaseModel):
    """Access token issued by the identity provider.

    Attributes:
        access_token: Opaque bearer credential.
        token_type: Token type, normally ``"Bearer"``.
        expires_in: Lifetime in seconds, if reported.
        scope: Space-separated granted scopes, if reported.
    """

    access_token: str = Field(..., min_length=1)
    token_type: str = "Bearer"
    expires_in: int | None = None
    scope: str | None = None
