"""
Withings Measure Models
=======================
Request shape for `POST /measure?action=getmeas`. The response is returned to
callers as plain decoded JSON; the vendor schema is theirs to interpret.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from withings_api.config import Settings


class ApiClientConfig(BaseModel):
    """Bearer token + API host for data calls."""

    model_config = ConfigDict(frozen=True)

    access_token: str = Field(..., repr=False)
    base_url: str

    @classmethod
    def from_settings(cls, settings: Settings) -> ApiClientConfig:
        return cls(access_token=settings.access_token, base_url=settings.withings_api_url)


class GetMeasRequest(BaseModel):
    """Query filters for getmeas. Every filter is optional."""

    action: str = "getmeas"
    meastype: Optional[int] = None
    meastypes: Optional[list[int]] = None
    category: Optional[int] = None  # 1 = real measures, 2 = user objectives
    startdate: Optional[int] = None  # unix epoch seconds
    enddate: Optional[int] = None
    offset: Optional[int] = None
    lastupdate: Optional[int] = None

    def to_form(self) -> dict[str, str]:
        """Form body with absent filters omitted and meastypes comma-joined."""
        form: dict[str, str] = {}
        for name, value in self.model_dump(exclude_none=True).items():
            if isinstance(value, list):
                form[name] = ",".join(str(v) for v in value)
            else:
                form[name] = str(value)
        return form
