"""
Withings API
============
Async client for the Withings health-data API: OAuth2 authorization and
measurement retrieval.
"""

from withings_api.constants import WITHINGS_ACCOUNT_URL, WITHINGS_API_URL
from withings_api.models.auth import (
    AccessToken,
    AccessTokenRequest,
    AccessTokenResponse,
    AuthClientConfig,
    RefreshToken,
    RefreshTokenRequest,
    RefreshTokenResponse,
)
from withings_api.models.measure import ApiClientConfig, GetMeasRequest
from withings_api.models.scope import Scope
from withings_api.services.auth import AuthClient
from withings_api.services.measure import ApiClient
from withings_api.services.response import (
    AuthenticationFailed,
    BodyStatusError,
    DataFormatError,
    InternalServerError,
    InvalidParams,
    WithingsApiError,
    WithingsStatusError,
    handle_response,
)

__all__ = [
    "WITHINGS_ACCOUNT_URL",
    "WITHINGS_API_URL",
    "AccessToken",
    "AccessTokenRequest",
    "AccessTokenResponse",
    "ApiClient",
    "ApiClientConfig",
    "AuthClient",
    "AuthClientConfig",
    "AuthenticationFailed",
    "BodyStatusError",
    "DataFormatError",
    "GetMeasRequest",
    "InternalServerError",
    "InvalidParams",
    "RefreshToken",
    "RefreshTokenRequest",
    "RefreshTokenResponse",
    "Scope",
    "WithingsApiError",
    "WithingsStatusError",
    "handle_response",
]
