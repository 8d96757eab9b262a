from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from freight_dashboard.routes._deps import get_upstream_client
from freight_dashboard.routes._proxy import forward
from freight_dashboard.utils.upstream import UpstreamClient

router = APIRouter(prefix="/api/calls", tags=["Calls"])


@router.get("")
async def proxy_calls_route(
    client: UpstreamClient = Depends(get_upstream_client),
) -> JSONResponse:
    """Forward to upstream `/calls`; body and status are returned as-is."""
    return await forward(client.get_calls())
