from datetime import timezone
from decimal import ROUND_HALF_UP, Decimal
from typing import Hashable, Optional, Sequence

from cachetools import LRUCache

from freight_dashboard.models.call import CallRecord
from freight_dashboard.models.enums import CallOutcome, Sentiment
from freight_dashboard.models.metrics import (
    DailyTrend,
    DistributionSlice,
    Metrics,
    RatePoint,
)

_WON = CallOutcome.WON.value
_LOST = CallOutcome.LOST.value

_GREEN = "#10B981"
_RED = "#EF4444"
_AMBER = "#F59E0B"

_OUTCOME_ORDER = [_WON, _LOST]

_SENTIMENT_LABELS = {
    Sentiment.POSITIVE.value: "Positive",
    Sentiment.NEGATIVE.value: "Negative",
    Sentiment.NEUTRAL.value: "Neutral",
}
_SENTIMENT_ORDER = [s.value for s in Sentiment]
_SENTIMENT_COLORS = {"Positive": _GREEN, "Negative": _RED}


# ── Numeric helpers ──────────────────────────────────────────────────────────

def round_half_away(x: float) -> int:
    """Round to the nearest integer, ties away from zero (2.5 -> 3, -2.5 -> -3)."""
    return int(Decimal(x).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def _avg(values: list[float]) -> int:
    if not values:
        return 0
    return round_half_away(sum(values) / len(values))


# ── Grouping helpers ─────────────────────────────────────────────────────────

def _count_by(keys: Sequence[str]) -> dict[str, int]:
    counts: dict[str, int] = {}
    for k in keys:
        counts[k] = counts.get(k, 0) + 1
    return counts


def _canonical(counts: dict[str, int], order: list[str]) -> list[tuple[str, int]]:
    """Known keys first in `order`, then the rest in first-seen order."""
    known = [(k, counts[k]) for k in order if k in counts]
    rest = [(k, v) for k, v in counts.items() if k not in order]
    return known + rest


def _capitalize(code: str) -> str:
    return code[:1].upper() + code[1:]


def _other_label(label: str, code: str, reserved) -> str:
    """Label for an unrecognised code; never reuses a label already taken."""
    if label in reserved:
        return f"{code} (other)"
    return label


def _day_key(call: CallRecord) -> str:
    ts = call.created_at
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=timezone.utc)
    return ts.astimezone(timezone.utc).date().isoformat()


# ── Distributions ────────────────────────────────────────────────────────────

def _outcome_distribution(calls: Sequence[CallRecord]) -> list[DistributionSlice]:
    counts = _count_by([c.outcome for c in calls])
    reserved = {_capitalize(code) for code in _OUTCOME_ORDER}
    slices = []
    for code, n in _canonical(counts, _OUTCOME_ORDER):
        label = _capitalize(code)
        if code not in _OUTCOME_ORDER:
            label = _other_label(label, code, reserved)
        reserved.add(label)
        slices.append(
            DistributionSlice(
                name=label, value=n, color=_GREEN if code == _WON else _RED
            )
        )
    return slices


def _sentiment_distribution(calls: Sequence[CallRecord]) -> list[DistributionSlice]:
    counts = _count_by([c.sentiment for c in calls])
    reserved = set(_SENTIMENT_LABELS.values())
    slices = []
    for code, n in _canonical(counts, _SENTIMENT_ORDER):
        label = _SENTIMENT_LABELS.get(code) or _other_label(code, code, reserved)
        reserved.add(label)
        slices.append(
            DistributionSlice(
                name=label, value=n, color=_SENTIMENT_COLORS.get(label, _AMBER)
            )
        )
    return slices


def _equipment_distribution(won: Sequence[CallRecord]) -> list[DistributionSlice]:
    counts = _count_by([c.equipment_type for c in won])
    return [DistributionSlice(name=eq, value=n) for eq, n in counts.items()]


def _rate_series(won: Sequence[CallRecord]) -> list[RatePoint]:
    return [
        RatePoint(
            id=c.id,
            initial_rate=c.initial_rate,
            final_rate=c.final_rate,
            difference=c.final_rate - c.initial_rate,
            outcome=c.outcome,
        )
        for c in won
    ]


def _daily_trend(calls: Sequence[CallRecord]) -> list[DailyTrend]:
    buckets: dict[str, dict[str, int]] = {}
    for c in calls:
        day = buckets.setdefault(_day_key(c), {_WON: 0, _LOST: 0, "total": 0})
        if c.outcome in (_WON, _LOST):
            day[c.outcome] += 1
        day["total"] += 1
    return [
        DailyTrend(date=d, won=b[_WON], lost=b[_LOST], total=b["total"])
        for d, b in sorted(buckets.items())
    ]


# ── Public entry point ───────────────────────────────────────────────────────

def aggregate_metrics(calls: Sequence[CallRecord]) -> Optional[Metrics]:
    """Summarise call records for the dashboard charts.

    Returns None when `calls` is empty; callers show a "no data" state
    instead of a zeroed summary. Equipment mix and the rate series cover
    won calls only.
    """
    if not calls:
        return None

    won = [c for c in calls if c.outcome == _WON]
    total_cost = sum(c.final_rate for c in won)

    return Metrics(
        outcome=_outcome_distribution(calls),
        sentiment=_sentiment_distribution(calls),
        equipment=_equipment_distribution(won),
        rates=_rate_series(won),
        daily=_daily_trend(calls),
        total_calls=len(calls),
        won_calls=len(won),
        win_rate_percent=round_half_away(len(won) / len(calls) * 100),
        avg_initial_rate=_avg([c.initial_rate for c in won]),
        avg_final_rate=_avg([c.final_rate for c in won]),
        total_cost=total_cost,
        total_revenue=total_cost,
    )


class MetricsCache:
    """Memoizes `aggregate_metrics` per snapshot version.

    The caller issues a new version whenever it replaces the call sequence;
    a version is never reused for different contents.
    """

    def __init__(self, maxsize: int = 8):
        self._cache: LRUCache = LRUCache(maxsize=maxsize)
        self.hits = 0
        self.misses = 0

    def get(self, version: Hashable, calls: Sequence[CallRecord]) -> Optional[Metrics]:
        if version in self._cache:
            self.hits += 1
            return self._cache[version]
        self.misses += 1
        result = aggregate_metrics(calls)
        self._cache[version] = result
        return result
