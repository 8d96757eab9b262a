from datetime import datetime
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, field_validator


class CallRecord(BaseModel):
    """One logged carrier call, as returned by the upstream `/calls` endpoint.

    `outcome` and `sentiment` stay plain strings so that codes outside
    `CallOutcome` / `Sentiment` survive validation and can be grouped as-is.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: int
    created_at: datetime
    pickup_datetime: Optional[datetime] = None
    delivery_datetime: Optional[datetime] = None
    origin: str = ""
    destination: str = ""
    equipment_type: str = ""
    initial_rate: float = 0
    final_rate: float = 0
    mc_number: Optional[Union[str, int]] = None
    outcome: str
    sentiment: str

    @field_validator("mc_number", mode="before")
    @classmethod
    def coerce_mc_to_str(cls, v):
        if v is not None:
            return str(v)
        return v

    @field_validator("initial_rate", "final_rate", mode="before")
    @classmethod
    def null_rate_to_zero(cls, v):
        return 0 if v is None else v

    @field_validator("origin", "destination", "equipment_type", mode="before")
    @classmethod
    def null_text_to_empty(cls, v):
        return "" if v is None else v


class CallListResponse(BaseModel):
    results: list[CallRecord]
