import asyncio
import logging
from datetime import datetime, timezone
from functools import lru_cache
from typing import Iterable, Optional

from freight_dashboard.config import get_settings
from freight_dashboard.models.call import CallRecord
from freight_dashboard.models.enums import DashboardStatus
from freight_dashboard.models.load import LoadRecord
from freight_dashboard.models.metrics import DashboardResponse, Metrics
from freight_dashboard.services.metrics_service import MetricsCache
from freight_dashboard.services.record_service import fetch_calls, fetch_loads
from freight_dashboard.utils.upstream import UpstreamClient

log = logging.getLogger(__name__)


class DashboardStore:
    """Current call/load snapshots plus the metrics derived from them.

    Snapshots are tuples and are only ever replaced, never edited. Each call
    snapshot gets a fresh version number, which keys the metrics cache.
    """

    def __init__(self, client: UpstreamClient, metrics_cache_size: int = 8):
        self.client = client
        self.calls: tuple[CallRecord, ...] = ()
        self.loads: tuple[LoadRecord, ...] = ()
        self.version = 0
        self.calls_resolved = False
        self.refreshed_at: Optional[datetime] = None
        self._metrics = MetricsCache(maxsize=metrics_cache_size)
        self._lock = asyncio.Lock()

    # ── Snapshots ────────────────────────────────────────────────────────────

    def replace_calls(self, calls: Iterable[CallRecord]) -> None:
        self.calls = tuple(calls)
        self.version += 1
        self.calls_resolved = True

    def replace_loads(self, loads: Iterable[LoadRecord]) -> None:
        self.loads = tuple(loads)

    @property
    def status(self) -> DashboardStatus:
        if not self.calls_resolved:
            return DashboardStatus.LOADING
        if not self.calls:
            return DashboardStatus.EMPTY
        return DashboardStatus.READY

    def metrics(self) -> Optional[Metrics]:
        if not self.calls_resolved:
            return None
        return self._metrics.get(self.version, self.calls)

    # ── Fetching ─────────────────────────────────────────────────────────────

    async def _refresh_calls(self) -> None:
        calls = await fetch_calls(self.client)
        self.replace_calls(calls or [])

    async def _refresh_loads(self) -> None:
        loads = await fetch_loads(self.client)
        self.replace_loads(loads or [])

    async def refresh(self) -> DashboardResponse:
        """Refetch calls and loads concurrently; either may finish first."""
        async with self._lock:
            await asyncio.gather(self._refresh_calls(), self._refresh_loads())
            self.refreshed_at = datetime.now(timezone.utc)
        log.info(
            "Dashboard refreshed: status=%s calls=%d loads=%d version=%d",
            self.status.value,
            len(self.calls),
            len(self.loads),
            self.version,
        )
        return self.snapshot()

    def snapshot(self) -> DashboardResponse:
        return DashboardResponse(
            status=self.status,
            metrics=self.metrics(),
            call_count=len(self.calls),
            load_count=len(self.loads),
            refreshed_at=self.refreshed_at,
        )


@lru_cache
def get_dashboard_store() -> DashboardStore:
    s = get_settings()
    return DashboardStore(UpstreamClient(s), metrics_cache_size=s.metrics_cache_size)
