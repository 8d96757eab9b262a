from fastapi import APIRouter, Depends, HTTPException

from freight_dashboard.models.call import CallListResponse
from freight_dashboard.models.enums import DashboardStatus
from freight_dashboard.models.load import LoadListResponse
from freight_dashboard.models.metrics import DashboardResponse, Metrics
from freight_dashboard.services.dashboard_service import (
    DashboardStore,
    get_dashboard_store,
)

router = APIRouter(prefix="/api/dashboard", tags=["Dashboard"])


@router.get("", response_model=DashboardResponse)
async def dashboard_route(store: DashboardStore = Depends(get_dashboard_store)):
    """Current dashboard state: loading, empty, or ready with metrics."""
    return store.snapshot()


@router.get("/metrics", response_model=Metrics)
async def dashboard_metrics_route(
    store: DashboardStore = Depends(get_dashboard_store),
):
    """Aggregated call metrics for the charts."""
    if store.status == DashboardStatus.LOADING:
        raise HTTPException(503, "Dashboard data is still loading")
    metrics = store.metrics()
    if metrics is None:
        raise HTTPException(404, "No data available")
    return metrics


@router.get("/calls", response_model=CallListResponse)
async def dashboard_calls_route(store: DashboardStore = Depends(get_dashboard_store)):
    """Call snapshot backing the calls table."""
    return CallListResponse(results=list(store.calls))


@router.get("/loads", response_model=LoadListResponse)
async def dashboard_loads_route(store: DashboardStore = Depends(get_dashboard_store)):
    """Load snapshot backing the loads table."""
    return LoadListResponse(results=list(store.loads))


@router.post("/refresh", response_model=DashboardResponse)
async def dashboard_refresh_route(
    store: DashboardStore = Depends(get_dashboard_store),
):
    """Refetch calls and loads from upstream."""
    return await store.refresh()
