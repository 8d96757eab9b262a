from enum import Enum


class CallOutcome(str, Enum):
    """Outcome of a carrier call. Upstream may send codes outside this set;
    those are kept as plain strings on the record."""

    WON = "won"
    LOST = "lost"


class Sentiment(str, Enum):
    POSITIVE = "pos"
    NEGATIVE = "neg"
    NEUTRAL = "neu"


class DashboardStatus(str, Enum):
    LOADING = "loading"
    EMPTY = "empty"
    READY = "ready"
