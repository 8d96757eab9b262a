from typing import Awaitable

from fastapi import HTTPException
from fastapi.responses import JSONResponse

from freight_dashboard.utils.upstream import UpstreamError, UpstreamResponse


async def forward(pending: Awaitable[UpstreamResponse]) -> JSONResponse:
    try:
        resp = await pending
    except UpstreamError as e:
        raise HTTPException(502, str(e))
    return JSONResponse(content=resp.body, status_code=resp.status_code)
