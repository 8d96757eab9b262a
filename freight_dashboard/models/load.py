from datetime import datetime
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict


class LoadRecord(BaseModel):
    """Freight listing from upstream `/loads/search`. Shown as a table only;
    nothing is derived from it."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        json_schema_extra={
            "example": {
                "load_id": 1001,
                "origin": "Dallas, TX",
                "destination": "Houston, TX",
                "pickup_datetime": "2024-01-02T08:00:00Z",
                "delivery_datetime": "2024-01-02T18:00:00Z",
                "equipment_type": "Dry Van",
                "loadboard_rate": 1850.0,
                "miles": 240,
                "weight": 38000,
                "notes": "Driver assist",
            }
        },
    )

    load_id: Union[int, str]
    origin: str
    destination: str
    pickup_datetime: Optional[datetime] = None
    delivery_datetime: Optional[datetime] = None
    equipment_type: str
    loadboard_rate: Optional[float] = None
    miles: Optional[float] = None
    weight: Optional[float] = None
    notes: Optional[str] = None


class LoadListResponse(BaseModel):
    results: list[LoadRecord]
