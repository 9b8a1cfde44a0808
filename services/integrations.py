# services/integrations.py
from __future__ import annotations
import logging
from typing import Optional

import requests

from core.config import get_settings
from core.errors import FetchError

logger = logging.getLogger(__name__)


def _valid_url(url: Optional[str]) -> Optional[str]:
    if isinstance(url, str) and url.strip().startswith(("http://", "https://")):
        return url.strip()
    return None


def fetch_csv_text(url: str, timeout: Optional[float] = None, session: Optional[requests.Session] = None) -> str:
    """GET a published CSV and return its body unchanged. Raises FetchError."""
    target = _valid_url(url)
    if not target:
        raise FetchError(f"Not an http(s) URL: {url!r}")
    timeout = get_settings().FETCH_TIMEOUT if timeout is None else timeout
    http = session or requests
    try:
        r = http.get(target, timeout=timeout)
        r.raise_for_status()
    except requests.RequestException as e:
        logger.warning("CSV fetch failed for %s: %s", target, e)
        raise FetchError(str(e)) from e
    # Google Sheets may omit the charset
    if not r.encoding or r.encoding.lower() == "iso-8859-1":
        r.encoding = "utf-8"
    return r.text
