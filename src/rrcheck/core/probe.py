"""Plain HTTP check for the client-side error string, without a browser."""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal

import requests
from pydantic import BaseModel

if TYPE_CHECKING:
    from rrcheck.core.config.main import ProbeConfig

ERROR_STRING = "Application error: a client-side exception has occurred"


class ProbeResult(BaseModel):
    """Outcome of a single GET request.

    ``error`` is also set when the request itself failed.
    """

    url: str
    status_code: int | Literal["N/A"]
    error: bool
    fetch_error: str | None = None


def probe_url(url: str, config: ProbeConfig, session: requests.Session | None = None) -> ProbeResult:
    if session is None:
        with requests.Session() as owned:
            return probe_url(url, config, owned)

    try:
        response = session.get(url, headers={"User-Agent": config.user_agent}, timeout=config.timeout_s)
    except requests.RequestException as e:
        return ProbeResult(url=url, status_code="N/A", error=True, fetch_error=str(e))

    return ProbeResult(url=url, status_code=response.status_code, error=ERROR_STRING in response.text)
