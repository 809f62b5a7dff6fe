"""
Print the Withings authorize URL.

Run: python examples/get_authorize_url.py   (reads CLIENT_ID, CONSUMER_SECRET,
CALLBACK_URL from the environment or .env)
"""

import asyncio
import logging

from withings_api import AuthClient, AuthClientConfig
from withings_api.config import get_settings


async def main() -> None:
    settings = get_settings()
    logging.basicConfig(level=settings.log_level)

    async with AuthClient(AuthClientConfig.from_settings(settings)) as client:
        print(f"Response {client.get_authorize_url()}")


if __name__ == "__main__":
    asyncio.run(main())
