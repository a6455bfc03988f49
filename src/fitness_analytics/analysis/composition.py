"""
Body Composition Engine

Classifies simultaneous weight and body-fat change into a training phase.
The reported deltas are the raw observed change over the actual period;
classification uses the same change scaled to a 30-day rate.
"""

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Iterable, List

from ..metrics.metabolism import WeightPoint
from ..models.records import BodyMetric
from ..utils.dates import days_between, parse_date
from ..utils.numbers import round_half_up

WEIGHT_THRESHOLD_KG = 0.5   # kg/month considered meaningful
BODY_FAT_THRESHOLD = 0.3    # %/month considered meaningful
RATE_WINDOW_DAYS = 30


class CompositionTrend(str, Enum):
    """Coarse body composition phase."""
    BULKING = "bulking"
    CUTTING = "cutting"
    RECOMPING = "recomping"
    MAINTAINING = "maintaining"
    INSUFFICIENT_DATA = "insufficient_data"


COMPOSITION_LABELS = {
    CompositionTrend.BULKING: "Bulking",
    CompositionTrend.CUTTING: "Cutting",
    CompositionTrend.RECOMPING: "Body Recomp",
    CompositionTrend.MAINTAINING: "Maintaining",
    CompositionTrend.INSUFFICIENT_DATA: "Need more data",
}


@dataclass
class CompositionAnalysis:
    """Composition trend plus the raw change that produced it."""

    trend: CompositionTrend
    weight_change_kg: float
    body_fat_change_pct: float
    period_days: int

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        result = asdict(self)
        result["trend"] = self.trend.value
        return result


@dataclass
class BodyFatPoint:
    """A dated body-fat measurement."""

    date: str
    body_fat: float

    def to_dict(self) -> dict:
        return asdict(self)


def analyze_composition(metrics: Iterable[BodyMetric]) -> CompositionAnalysis:
    """
    Classify the composition trend between the first and last metric rows.

    Args:
        metrics: Body metric rows in any order; missing weight or body fat
            counts as 0

    Returns:
        CompositionAnalysis (insufficient_data with zero deltas for fewer
        than two rows)
    """
    ordered = sorted(metrics, key=lambda m: m.date)
    if len(ordered) < 2:
        return CompositionAnalysis(
            trend=CompositionTrend.INSUFFICIENT_DATA,
            weight_change_kg=0,
            body_fat_change_pct=0,
            period_days=0,
        )

    first, last = ordered[0], ordered[-1]
    first_date, last_date = parse_date(first.date), parse_date(last.date)
    span = days_between(first_date, last_date) if first_date and last_date else 0
    period_days = max(1, span)

    weight_change = (last.weight or 0) - (first.weight or 0)
    bf_change = (last.body_fat or 0) - (first.body_fat or 0)

    scale = RATE_WINDOW_DAYS / period_days
    weight_per_month = weight_change * scale
    bf_per_month = bf_change * scale

    if weight_per_month > WEIGHT_THRESHOLD_KG and bf_per_month < BODY_FAT_THRESHOLD:
        trend = CompositionTrend.BULKING
    elif weight_per_month < -WEIGHT_THRESHOLD_KG and bf_per_month < -BODY_FAT_THRESHOLD:
        trend = CompositionTrend.CUTTING
    elif abs(weight_per_month) < WEIGHT_THRESHOLD_KG and bf_per_month < -BODY_FAT_THRESHOLD:
        trend = CompositionTrend.RECOMPING
    else:
        trend = CompositionTrend.MAINTAINING

    return CompositionAnalysis(
        trend=trend,
        weight_change_kg=round_half_up(weight_change, 1),
        body_fat_change_pct=round_half_up(bf_change, 1),
        period_days=period_days,
    )


def get_weight_trend(metrics: Iterable[BodyMetric]) -> List[WeightPoint]:
    """Weight series for charting, oldest first."""
    return [
        WeightPoint(date=m.date, weight=m.weight)
        for m in sorted(metrics, key=lambda m: m.date)
        if m.weight is not None
    ]


def get_body_fat_trend(metrics: Iterable[BodyMetric]) -> List[BodyFatPoint]:
    """Body-fat series for charting, oldest first."""
    return [
        BodyFatPoint(date=m.date, body_fat=m.body_fat)
        for m in sorted(metrics, key=lambda m: m.date)
        if m.body_fat is not None
    ]


def composition_label(trend: CompositionTrend) -> str:
    return COMPOSITION_LABELS[trend]
