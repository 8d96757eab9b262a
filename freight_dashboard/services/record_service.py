import logging
from typing import Optional

from pydantic import ValidationError

from freight_dashboard.models.call import CallListResponse, CallRecord
from freight_dashboard.models.load import LoadListResponse, LoadRecord
from freight_dashboard.utils.upstream import (
    UpstreamClient,
    UpstreamError,
    UpstreamResponse,
)

log = logging.getLogger(__name__)


def _usable(kind: str, resp: UpstreamResponse) -> bool:
    if not resp.ok:
        log.error("Error fetching %s: upstream HTTP %d", kind, resp.status_code)
        return False
    return True


async def fetch_calls(client: UpstreamClient) -> Optional[list[CallRecord]]:
    """Fetch the call snapshot. Returns None on any upstream failure."""
    try:
        resp = await client.get_calls()
    except UpstreamError as exc:
        log.error("Error fetching calls: %s", exc)
        return None
    if not _usable("calls", resp):
        return None
    try:
        calls = CallListResponse.model_validate(resp.body).results
    except ValidationError as exc:
        log.error("Error fetching calls: malformed body: %s", exc)
        return None
    log.info("Fetched calls: %d", len(calls))
    return calls


async def fetch_loads(
    client: UpstreamClient,
    origin: str = "",
    destination: str = "",
    equipment_type: str = "",
) -> Optional[list[LoadRecord]]:
    """Fetch the load snapshot. Returns None on any upstream failure."""
    try:
        resp = await client.search_loads(origin, destination, equipment_type)
    except UpstreamError as exc:
        log.error("Error fetching loads: %s", exc)
        return None
    if not _usable("loads", resp):
        return None
    try:
        loads = LoadListResponse.model_validate(resp.body).results
    except ValidationError as exc:
        log.error("Error fetching loads: malformed body: %s", exc)
        return None
    log.info("Fetched loads: %d", len(loads))
    return loads
