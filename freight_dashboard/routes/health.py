from fastapi import APIRouter
from freight_dashboard.config import get_settings

router = APIRouter()


@router.get("/health", tags=["Health"])
async def health():
    s = get_settings()
    return {
        "status": "healthy",
        "service": s.app_name,
        "upstream": "configured" if s.api_base_url else "missing",
    }
