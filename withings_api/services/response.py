"""
Withings Response Handling
==========================
Every Withings call signals its outcome twice: once in the HTTP status and
once in a `status` integer inside the JSON body. handle_response() collapses
both layers into a decoded payload or one exception from the hierarchy below.

    WithingsApiError
    ├── InternalServerError      HTTP status was not 2xx
    ├── DataFormatError          body not JSON / payload failed validation
    │   └── BodyStatusError      body `status` missing or not an integer
    └── WithingsStatusError      vendor status not mapped below
        ├── AuthenticationFailed vendor status 100, 101, 102, 200
        └── InvalidParams        vendor status 501..511

Reference: https://developer.withings.com/api-reference#section/Response-status
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, Optional

import httpx
from pydantic import TypeAdapter, ValidationError

logger = logging.getLogger(__name__)

_AUTHENTICATION_FAILED_STATUSES = frozenset({100, 101, 102, 200})
_INVALID_PARAMS_STATUSES = range(501, 512)


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class WithingsApiError(Exception):
    """Base class. Carries the outbound request and the raw response."""

    def __init__(self, message: str, request: str, response: str) -> None:
        self.request = request
        self.response = response
        super().__init__(f"{message} Req: {request} Res: {response}")


class InternalServerError(WithingsApiError):
    """Non-2xx HTTP response. `status` is the HTTP status code."""

    def __init__(self, status: int, request: str, response: str) -> None:
        self.status = status
        super().__init__(f"Status: {status}", request, response)


class DataFormatError(WithingsApiError):
    """Response body could not be decoded into the expected shape."""


class BodyStatusError(DataFormatError):
    """JSON body has no usable `status` field."""

    def __init__(self, request: str, response: str) -> None:
        super().__init__("Body status couldn't be parsed.", request, response)


class WithingsStatusError(WithingsApiError):
    """Non-zero vendor status. `status` is the value from the JSON body."""

    def __init__(self, status: int, request: str, response: str) -> None:
        self.status = status
        super().__init__(f"Status: {status}", request, response)


class AuthenticationFailed(WithingsStatusError):
    pass


class InvalidParams(WithingsStatusError):
    pass


# ---------------------------------------------------------------------------
# Classifier
# ---------------------------------------------------------------------------


@lru_cache
def _adapter(payload_type: Any) -> TypeAdapter:
    return TypeAdapter(payload_type)


def _body_status(value: Any) -> Optional[int]:
    if not isinstance(value, dict):
        return None
    status = value.get("status")
    # bool is an int subclass; true/false is not a status code
    if isinstance(status, bool) or not isinstance(status, int):
        return None
    return status


async def handle_response(request: Any, response: httpx.Response, payload_type: Any) -> Any:
    """Consume `response` and return it decoded as `payload_type`.

    `request` is only used for error context; its repr is stored on any
    raised error. `payload_type` is anything pydantic's TypeAdapter accepts
    (a model class, `dict[str, Any]`, ...).
    """
    await response.aread()
    request_repr = repr(request)

    if not response.is_success:
        logger.warning("Withings HTTP %s: %s", response.status_code, response.text[:200])
        raise InternalServerError(response.status_code, request_repr, response.text)

    try:
        value = response.json()
    except ValueError as exc:
        logger.warning("Withings response is not JSON: %s", response.text[:200])
        raise DataFormatError("Response body is not valid JSON.", request_repr, response.text) from exc

    status = _body_status(value)
    if status is None:
        logger.warning("Withings response has no body status")
        raise BodyStatusError(request_repr, repr(value))

    if status == 0:
        try:
            return _adapter(payload_type).validate_python(value)
        except ValidationError as exc:
            logger.warning("Withings payload failed validation: %s", exc)
            raise DataFormatError(f"Payload decode failed: {exc}", request_repr, repr(value)) from exc

    logger.warning("Withings body status %s", status)
    if status in _AUTHENTICATION_FAILED_STATUSES:
        raise AuthenticationFailed(status, request_repr, repr(value))
    if status in _INVALID_PARAMS_STATUSES:
        raise InvalidParams(status, request_repr, repr(value))
    raise WithingsStatusError(status, request_repr, repr(value))
