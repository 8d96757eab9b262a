from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict

from freight_dashboard.models.enums import DashboardStatus


class DistributionSlice(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    value: int
    color: Optional[str] = None


class RatePoint(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    initial_rate: float
    final_rate: float
    difference: float
    outcome: str


class DailyTrend(BaseModel):
    model_config = ConfigDict(frozen=True)

    date: str
    won: int = 0
    lost: int = 0
    total: int = 0


class Metrics(BaseModel):
    model_config = ConfigDict(frozen=True)

    outcome: list[DistributionSlice]
    sentiment: list[DistributionSlice]
    equipment: list[DistributionSlice]
    rates: list[RatePoint]
    daily: list[DailyTrend]

    total_calls: int
    won_calls: int
    win_rate_percent: int
    avg_initial_rate: int
    avg_final_rate: int
    total_cost: float
    total_revenue: float


class DashboardResponse(BaseModel):
    status: DashboardStatus
    metrics: Optional[Metrics] = None
    call_count: int = 0
    load_count: int = 0
    refreshed_at: Optional[datetime] = None
