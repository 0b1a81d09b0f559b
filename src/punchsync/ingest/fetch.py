"""Remote JSON source (typically a spreadsheet web-app endpoint)."""
from __future__ import annotations

import logging
from typing import Any

import httpx

from punchsync.domain.exceptions import ConnectivityError, FormatError

logger = logging.getLogger(__name__)


def fetch_payload(url: str, timeout: float = 30.0, transport: httpx.BaseTransport | None = None) -> Any:
    """GET *url* once and return the decoded JSON body. No retries."""
    try:
        with httpx.Client(timeout=timeout, follow_redirects=True, transport=transport) as client:
            resp = client.get(url)
    except httpx.HTTPError as exc:
        logger.error("Fetch failed for %s: %s", url, exc)
        raise ConnectivityError(f"could not reach data source: {exc}") from exc

    if not resp.is_success:
        logger.error("Data source answered %s for %s", resp.status_code, url)
        raise ConnectivityError(f"data source answered HTTP {resp.status_code}")

    try:
        return resp.json()
    except ValueError as exc:
        raise FormatError("data source did not return JSON") from exc
