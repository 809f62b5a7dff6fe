"""
Withings OAuth2 Client
======================
Authorization flow against the Withings account and API hosts.

- get_authorize_url(): URL the user opens in a browser to grant access
- get_access_token(): trade the callback's authorization code for tokens
- get_refresh_token(): trade a refresh token for a new token pair

Token storage and refresh scheduling are the caller's job.
"""

from __future__ import annotations

import logging
from typing import Optional
from urllib.parse import quote_plus, urlencode

import httpx

from withings_api.constants import WITHINGS_ACCOUNT_URL
from withings_api.models.auth import (
    AccessTokenRequest,
    AccessTokenResponse,
    AuthClientConfig,
    RefreshTokenRequest,
    RefreshTokenResponse,
)
from withings_api.models.scope import join_scopes
from withings_api.services.response import handle_response

logger = logging.getLogger(__name__)

AUTH2_TOKEN_PATH = "/v2/oauth2"
AUTHORIZE_PATH = "/oauth2_user/authorize2"

_DEFAULT_STATE = "dev"


def _form_quote(
    value: str, safe: str = "", encoding: Optional[str] = None, errors: Optional[str] = None
) -> str:
    """application/x-www-form-urlencoded: only alphanumerics and *-._ stay bare."""
    return quote_plus(value, safe="*", encoding=encoding, errors=errors).replace("~", "%7E")


class AuthClient:
    """Builds authorize URLs and performs the two token exchanges."""

    def __init__(
        self, config: AuthClientConfig, http_client: Optional[httpx.AsyncClient] = None
    ) -> None:
        self.config = config
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient()

    async def __aenter__(self) -> AuthClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    # ---- Authorization ---------------------------------------------------

    def get_authorize_url(self) -> str:
        """Return the account-host URL that starts the consent flow.

        Parameter order is fixed: response_type, client_id, redirect_uri,
        scope (omitted when no scopes are configured), state.
        """
        params = [
            ("response_type", self.config.response_type),
            ("client_id", self.config.client_id),
            ("redirect_uri", self.config.callback_uri),
        ]
        scope = join_scopes(self.config.scope)
        if scope:
            params.append(("scope", scope))
        state = self.config.mode if self.config.mode is not None else _DEFAULT_STATE
        params.append(("state", state))

        return f"{WITHINGS_ACCOUNT_URL}{AUTHORIZE_PATH}?{urlencode(params, quote_via=_form_quote)}"

    # ---- Token exchange --------------------------------------------------

    async def get_access_token(self, code: str) -> AccessTokenResponse:
        req = AccessTokenRequest(
            client_id=self.config.client_id,
            client_secret=self.config.consumer_secret,
            redirect_uri=self.config.callback_uri,
            code=code,
        )
        response = await self._post_token(req.to_form())
        return await handle_response(req, response, AccessTokenResponse)

    async def get_refresh_token(self, refresh_token: str) -> RefreshTokenResponse:
        req = RefreshTokenRequest(
            client_id=self.config.client_id,
            client_secret=self.config.consumer_secret,
            refresh_token=refresh_token,
        )
        response = await self._post_token(req.to_form())
        return await handle_response(req, response, RefreshTokenResponse)

    async def _post_token(self, form: dict[str, str]) -> httpx.Response:
        logger.debug("POST %s grant_type=%s", AUTH2_TOKEN_PATH, form["grant_type"])
        return await self._client.post(
            f"{self.config.base_api_url}{AUTH2_TOKEN_PATH}",
            data=form,
        )
