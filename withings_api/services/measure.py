"""
Withings Measure Client
=======================
Bearer-authenticated data calls. Only getmeas is wrapped; the decoded JSON
envelope is returned as-is.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

from withings_api.models.measure import ApiClientConfig, GetMeasRequest
from withings_api.services.response import handle_response

logger = logging.getLogger(__name__)

MEASURE_PATH = "/measure"


class ApiClient:
    """Makes authenticated requests to the Withings data API."""

    def __init__(
        self, config: ApiClientConfig, http_client: Optional[httpx.AsyncClient] = None
    ) -> None:
        self.config = config
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient()

    async def __aenter__(self) -> ApiClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def get_meas(self, req: GetMeasRequest) -> dict[str, Any]:
        """POST /measure with the request's filters as a form body."""
        logger.debug("POST %s action=%s", MEASURE_PATH, req.action)
        response = await self._client.post(
            f"{self.config.base_url}{MEASURE_PATH}",
            data=req.to_form(),
            headers={"Authorization": f"Bearer {self.config.access_token}"},
        )
        return await handle_response(req, response, dict[str, Any])
