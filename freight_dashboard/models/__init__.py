from freight_dashboard.models.enums import CallOutcome, Sentiment, DashboardStatus
from freight_dashboard.models.call import CallRecord, CallListResponse
from freight_dashboard.models.load import LoadRecord, LoadListResponse
from freight_dashboard.models.metrics import (
    DistributionSlice,
    RatePoint,
    DailyTrend,
    Metrics,
    DashboardResponse,
)

__all__ = [
    "CallOutcome",
    "Sentiment",
    "DashboardStatus",
    "CallRecord",
    "CallListResponse",
    "LoadRecord",
    "LoadListResponse",
    "DistributionSlice",
    "RatePoint",
    "DailyTrend",
    "Metrics",
    "DashboardResponse",
]
