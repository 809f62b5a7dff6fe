"""
Exchange an authorization code for tokens.

Run: CODE=<code from callback> python examples/get_access_token.py
"""

import asyncio
import logging

from withings_api import AuthClient, AuthClientConfig
from withings_api.config import get_settings


async def main() -> None:
    settings = get_settings()
    logging.basicConfig(level=settings.log_level)
    if not settings.code:
        raise SystemExit("CODE must be present.")

    async with AuthClient(AuthClientConfig.from_settings(settings)) as client:
        res = await client.get_access_token(settings.code)

    print(f"Response {res!r}")


if __name__ == "__main__":
    asyncio.run(main())
