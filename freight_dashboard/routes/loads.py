from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from freight_dashboard.routes._deps import get_upstream_client
from freight_dashboard.routes._proxy import forward
from freight_dashboard.utils.upstream import UpstreamClient

router = APIRouter(prefix="/api/loads", tags=["Loads"])


@router.get("")
async def proxy_loads_route(
    origin: str = Query("", description="Origin filter, passed through"),
    destination: str = Query("", description="Destination filter, passed through"),
    equipment_type: str = Query("", description="Equipment filter, passed through"),
    client: UpstreamClient = Depends(get_upstream_client),
) -> JSONResponse:
    """
    Forward to upstream `/loads/search`. All three filters are always sent,
    empty when not given. Body and status are returned as-is.
    """
    return await forward(
        client.search_loads(
            origin=origin,
            destination=destination,
            equipment_type=equipment_type,
        )
    )
