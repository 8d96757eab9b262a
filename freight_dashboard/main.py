"""
Freight Dashboard API
Backend for the call-center and freight-load analytics dashboard.

Endpoints:
  GET  /health                    – Health check
  GET  /api/calls                 – Proxy to upstream /calls
  GET  /api/loads                 – Proxy to upstream /loads/search
  GET  /api/dashboard             – Dashboard state + metrics
  GET  /api/dashboard/metrics     – Aggregated call metrics
  GET  /api/dashboard/calls       – Call snapshot (table view)
  GET  /api/dashboard/loads       – Load snapshot (table view)
  POST /api/dashboard/refresh     – Refetch snapshots from upstream

Upstream requests carry header: x-api-key
"""

import asyncio
import logging
from contextlib import asynccontextmanager, suppress
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from freight_dashboard.config import get_settings
from freight_dashboard.services.dashboard_service import get_dashboard_store
from freight_dashboard.routes import health, calls, loads, dashboard

log = logging.getLogger(__name__)


def _log_refresh_failure(task: asyncio.Task) -> None:
    if task.cancelled():
        return
    exc = task.exception()
    if exc is not None:
        log.error("Startup dashboard refresh failed: %r", exc)


@asynccontextmanager
async def lifespan(app: FastAPI):
    s = get_settings()
    logging.basicConfig(
        level=s.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    refresh_task = None
    if s.refresh_on_startup:
        # Store stays in the loading state until this first fetch resolves
        refresh_task = asyncio.create_task(get_dashboard_store().refresh())
        refresh_task.add_done_callback(_log_refresh_failure)
    print(f"✅ {s.app_name} ready")
    print(f"   Upstream  : {s.api_base_url or 'not configured'}")
    print(f"   API key   : {'set' if s.api_key else 'missing'}")
    print(f"   Timeout   : {s.upstream_timeout_seconds} s")
    yield
    if refresh_task is not None and not refresh_task.done():
        refresh_task.cancel()
        with suppress(asyncio.CancelledError):
            await refresh_task


app = FastAPI(
    title="Freight Dashboard API",
    description="Upstream proxy and call metrics for the freight analytics dashboard.",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(calls.router)
app.include_router(loads.router)
app.include_router(dashboard.router)
