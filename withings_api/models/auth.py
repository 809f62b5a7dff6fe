"""
Withings OAuth2 Models
======================
Pydantic shapes for the authorization flow:

- AuthClientConfig: immutable client credentials + requested scopes
- AccessTokenRequest / RefreshTokenRequest: form bodies POSTed to /v2/oauth2
- AccessTokenResponse / RefreshTokenResponse: the `{status, body}` envelope

Secrets are excluded from repr because request models are rendered into
error messages.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt, field_validator

from withings_api.models.scope import Scope, split_scopes

if TYPE_CHECKING:
    from withings_api.config import Settings


# ---------------------------------------------------------------------------
# Client configuration
# ---------------------------------------------------------------------------

class AuthClientConfig(BaseModel):
    """Everything AuthClient needs, fixed once constructed."""

    model_config = ConfigDict(frozen=True)

    base_api_url: str
    client_id: str
    consumer_secret: str = Field(..., repr=False)
    callback_uri: str
    scope: tuple[Scope, ...] = ()
    mode: Optional[str] = None
    response_type: Literal["code"] = "code"

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        scope: tuple[Scope, ...] = (Scope.UserInfo, Scope.UserMetrics),
        mode: Optional[str] = None,
    ) -> AuthClientConfig:
        return cls(
            base_api_url=settings.withings_api_url,
            client_id=settings.client_id,
            consumer_secret=settings.consumer_secret,
            callback_uri=settings.callback_url,
            scope=scope,
            mode=mode if mode is not None else settings.mode,
        )


# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------

class _FormRequest(BaseModel):
    def to_form(self) -> dict[str, str]:
        """Form body in field declaration order."""
        return self.model_dump()


class AccessTokenRequest(_FormRequest):
    """Exchange an authorization code for an access + refresh token pair."""

    action: str = "requesttoken"
    grant_type: str = "authorization_code"
    client_id: str
    client_secret: str = Field(..., repr=False)
    redirect_uri: str
    code: str


class RefreshTokenRequest(_FormRequest):
    """Exchange a refresh token for a new token pair."""

    action: str = "requesttoken"
    grant_type: str = "refresh_token"
    client_id: str
    client_secret: str = Field(..., repr=False)
    refresh_token: str


# ---------------------------------------------------------------------------
# Responses
# ---------------------------------------------------------------------------

class AccessToken(BaseModel):
    """Token payload under `body`. Scopes arrive comma-joined."""

    model_config = ConfigDict(populate_by_name=True)

    user_id: StrictInt = Field(..., alias="userid", ge=0)
    access_token: str
    refresh_token: str
    expires_in: StrictInt = Field(..., ge=0)  # seconds until expiry
    scope: list[Scope]
    token_type: str

    @field_validator("scope", mode="before")
    @classmethod
    def _split_scope(cls, value: object) -> object:
        if isinstance(value, str):
            return split_scopes(value)
        return value


class RefreshToken(AccessToken):
    """Same shape as AccessToken, returned by the refresh grant."""


class AccessTokenResponse(BaseModel):
    status: int
    body: AccessToken


class RefreshTokenResponse(BaseModel):
    status: int
    body: RefreshToken
