"""
Client for the upstream freight API. Every request carries the configured
API key in the `x-api-key` header. Single attempt, no retry.
"""

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional

import httpx

from freight_dashboard.config import Settings

log = logging.getLogger(__name__)

CALLS_PATH = "/calls"
LOADS_SEARCH_PATH = "/loads/search"


class UpstreamError(Exception):
    """Upstream API could not produce a usable response."""


class UpstreamUnavailableError(UpstreamError):
    pass


class UpstreamBodyError(UpstreamError):
    pass


@dataclass(frozen=True)
class UpstreamResponse:
    status_code: int
    body: Any

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


class UpstreamClient:
    def __init__(
        self,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = settings.api_base_url.rstrip("/")
        self._api_key = settings.api_key
        self._timeout = settings.upstream_timeout_seconds
        self._transport = transport

    async def get(
        self, path: str, params: Optional[Mapping[str, str]] = None
    ) -> UpstreamResponse:
        url = f"{self.base_url}{path}"
        log.info("Upstream GET %s params=%s", url, dict(params or {}))

        async with httpx.AsyncClient(
            timeout=self._timeout, transport=self._transport
        ) as client:
            try:
                resp = await client.get(
                    url, params=params, headers={"x-api-key": self._api_key}
                )
            except (httpx.HTTPError, httpx.InvalidURL) as exc:
                log.error("Upstream GET %s failed: %s", url, exc)
                raise UpstreamUnavailableError(
                    f"Upstream API unreachable: {exc}"
                ) from exc

        try:
            body = resp.json()
        except ValueError as exc:
            log.error(
                "Upstream GET %s returned non-JSON body (HTTP %d)",
                url,
                resp.status_code,
            )
            raise UpstreamBodyError(
                f"Upstream API returned a non-JSON body (HTTP {resp.status_code})"
            ) from exc

        if resp.status_code >= 400:
            log.warning("Upstream GET %s: HTTP %d", url, resp.status_code)
        return UpstreamResponse(status_code=resp.status_code, body=body)

    async def get_calls(self) -> UpstreamResponse:
        return await self.get(CALLS_PATH)

    async def search_loads(
        self, origin: str = "", destination: str = "", equipment_type: str = ""
    ) -> UpstreamResponse:
        return await self.get(
            LOADS_SEARCH_PATH,
            params={
                "origin": origin,
                "destination": destination,
                "equipment_type": equipment_type,
            },
        )
