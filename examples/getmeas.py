"""
Fetch all measures visible to ACCESS_TOKEN.

Run: ACCESS_TOKEN=<token> python examples/getmeas.py
"""

import asyncio
import logging

from withings_api import ApiClient, ApiClientConfig, GetMeasRequest
from withings_api.config import get_settings


async def main() -> None:
    settings = get_settings()
    logging.basicConfig(level=settings.log_level)
    if not settings.access_token:
        raise SystemExit("ACCESS_TOKEN must be present.")

    async with ApiClient(ApiClientConfig.from_settings(settings)) as client:
        res = await client.get_meas(GetMeasRequest())

    print(f"Response {res}")


if __name__ == "__main__":
    asyncio.run(main())
