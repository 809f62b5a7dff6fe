"""Withings hosts."""

WITHINGS_API_URL = "https://wbsapi.withings.net"
WITHINGS_ACCOUNT_URL = "https://account.withings.com"
