import json

from freight_dashboard.models.call import CallRecord

BASE = "http://upstream.test"
API_KEY = "test-key"


def make_call(**overrides) -> CallRecord:
    data = {
        "id": 1,
        "created_at": "2024-01-01T00:00:00Z",
        "pickup_datetime": None,
        "delivery_datetime": None,
        "origin": "Dallas, TX",
        "destination": "Houston, TX",
        "equipment_type": "Flatbed",
        "initial_rate": 100,
        "final_rate": 120,
        "mc_number": "123456",
        "outcome": "won",
        "sentiment": "pos",
    }
    data.update(overrides)
    return CallRecord.model_validate(data)


def call_payload(**overrides) -> dict:
    return json.loads(make_call(**overrides).model_dump_json())


LOAD_PAYLOAD = {
    "load_id": 1001,
    "origin": "Dallas, TX",
    "destination": "Houston, TX",
    "pickup_datetime": None,
    "delivery_datetime": None,
    "equipment_type": "Dry Van",
    "loadboard_rate": 1850.0,
    "miles": 240,
    "weight": None,
}
