# notebook 2- 1-campaign API ingestion

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

import requests

from core.n2_2_flatten import validate_campaigns

logger = logging.getLogger(__name__)

# ==================================================
# CONFIG
# ==================================================
DEFAULT_API_URL = os.getenv(
    "MARKETING_API_URL",
    "https://www.amanabootcamp.org/api/fs-classwork-data/amana-marketing",
)
REQUEST_TIMEOUT = float(os.getenv("MARKETING_API_TIMEOUT", "30"))

NO_CACHE_HEADERS = {
    "Cache-Control": "no-cache",
    "Pragma": "no-cache",
    "Accept": "application/json",
}

WRAPPER_KEYS = ("data", "campaigns")


# ----------------------------------
# Payload unwrapping (FAIL FAST)
# ----------------------------------
def unwrap_campaign_payload(payload: Any) -> List[Dict[str, Any]]:
    """
    Accept the campaign list in any of the shapes the endpoint returns:

    - [ {...}, {...} ]
    - {"data": [ ... ]}
    - {"campaigns": [ ... ]}

    Anything else is a schema violation, as is a list holding non-object
    campaigns or non-array sub-record collections.
    """
    if isinstance(payload, list):
        validate_campaigns(payload)
        return payload

    if isinstance(payload, dict):
        for key in WRAPPER_KEYS:
            if isinstance(payload.get(key), list):
                validate_campaigns(payload[key])
                return payload[key]

        raise ValueError(
            f"❌ Campaign payload is not an array and has no "
            f"{' / '.join(repr(k) for k in WRAPPER_KEYS)} array "
            f"(keys: {sorted(payload.keys())})"
        )

    raise ValueError(
        f"❌ Campaign payload is not an array (got {type(payload).__name__})"
    )


# ----------------------------------
# HTTP fetch (single GET, no retry)
# ----------------------------------
def fetch_campaigns(
        url: Optional[str] = None,
        timeout: Optional[float] = None,
) -> List[Dict[str, Any]]:
    """
    Fetch the raw campaign list from the marketing endpoint.

    One GET, no query parameters, no cached response.
    Raises requests.HTTPError on non-2xx, ValueError on bad JSON / shape.
    """
    url = url or DEFAULT_API_URL
    timeout = REQUEST_TIMEOUT if timeout is None else timeout

    r = requests.get(url, headers=NO_CACHE_HEADERS, timeout=timeout)

    if not r.ok:
        raise requests.HTTPError(
            f"Failed to fetch raw campaign data "
            f"(Status: {r.status_code}, Message: {r.text[:100]})",
            response=r,
        )

    try:
        payload = r.json()
    except ValueError as e:
        raise ValueError(f"❌ Campaign endpoint returned non-JSON body: {e}") from e

    campaigns = unwrap_campaign_payload(payload)
    logger.info("Fetched %s campaigns from %s", len(campaigns), url)

    return campaigns


# ----------------------------------
# Local file ingestion (saved API response)
# ----------------------------------
def load_campaigns_file(path: Union[str, Path]) -> List[Dict[str, Any]]:
    """Load a saved API response from disk and unwrap it."""
    path = Path(path)

    if path.suffix.lower() != ".json":
        raise ValueError("Unsupported file type. Use a JSON export.")

    with path.open(encoding="utf-8") as fh:
        payload = json.load(fh)

    campaigns = unwrap_campaign_payload(payload)
    logger.info("Loaded %s campaigns from %s", len(campaigns), path)

    return campaigns


# ----------------------------------
# Dashboard boundary (capture, never propagate)
# ----------------------------------
def load_dashboard_data(
        url: Optional[str] = None,
        timeout: Optional[float] = None,
) -> Tuple[List[Dict[str, Any]], Optional[str]]:
    """
    Fetch for a page view.

    Returns (campaigns, error). On any fetch / parse failure campaigns is
    an empty list and error holds the message, so the views still render
    as all-zero instead of crashing.
    """
    try:
        return fetch_campaigns(url, timeout=timeout), None
    except (requests.RequestException, ValueError) as e:
        logger.warning("Campaign data load failed: %s", e)
        return [], str(e) or type(e).__name__
