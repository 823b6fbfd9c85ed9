# app/services/espn/client.py
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from app.core.config import settings
from app.core.errors import UpstreamUnavailable

logger = logging.getLogger(__name__)

# ----------------------------
# HTTP session (connection pool)
# ----------------------------
def _build_session() -> requests.Session:
    s = requests.Session()
    s.headers.update({"User-Agent": "PickemLiveRankings/1.0"})
    s.mount(
        "https://",
        HTTPAdapter(
            pool_connections=8,
            pool_maxsize=16,
            max_retries=Retry(
                total=settings.ESPN_MAX_RETRIES,
                backoff_factor=settings.ESPN_RETRY_BACKOFF,
                status_forcelist=[429, 500, 502, 503, 504],
                allowed_methods=["GET"],
                raise_on_status=False,
            ),
        ),
    )
    return s

_REQS = _build_session()


def espn_get(url: str, params: Optional[Dict[str, Any]] = None) -> Any:
    """
    One GET against the ESPN site API. Any transport failure, timeout, non-2xx
    status or non-JSON body becomes UpstreamUnavailable; callers never see a
    half-read payload.
    """
    try:
        r = _REQS.get(url, params=params or {}, timeout=settings.ESPN_TIMEOUT_SECONDS)
    except requests.Timeout as e:
        logger.warning("ESPN timeout for %s params=%s", url, params)
        raise UpstreamUnavailable("Timed out fetching live scores from ESPN") from e
    except requests.RequestException as e:
        logger.warning("ESPN request failed for %s: %s", url, e)
        raise UpstreamUnavailable("Failed to fetch live scores from ESPN") from e

    logger.debug("ESPN %s %s -> %s", url, params, r.status_code)
    if not r.ok:
        logger.warning("ESPN upstream %s for %s", r.status_code, r.url)
        raise UpstreamUnavailable(f"ESPN upstream {r.status_code}")
    try:
        return r.json()
    except ValueError as e:
        raise UpstreamUnavailable("ESPN returned non-JSON") from e
