"""
Personal Record Detection

Strength records (max weight, estimated 1RM, max reps) per exercise and
body records (lowest weight, waist, body fat) from logged history.
"""

import logging
from typing import Callable, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from ..metrics.strength import epley_1rm, estimate_1rm
from ..models.personal_records import BodyPR, BodyPRType, StrengthPR, StrengthPRType
from ..models.records import BodyMetric, StrengthSet
from ..utils.numbers import round_half_up
from .strength import beats_record, exercise_name_for, group_by_exercise

logger = logging.getLogger(__name__)


# Body record type -> (metric field, unit)
BODY_PR_FIELDS: Dict[BodyPRType, Tuple[str, str]] = {
    BodyPRType.LOWEST_WEIGHT: ("weight", "kg"),
    BodyPRType.SMALLEST_WAIST: ("waist", "cm"),
    BodyPRType.BEST_BODY_FAT: ("body_fat", "%"),
}


def _best_set(
    sets: Sequence[StrengthSet],
    value_of: Callable[[StrengthSet], float],
) -> Optional[Tuple[StrengthSet, float]]:
    """Pick the record set by ``value_of`` using the shared tie-break."""
    best: Optional[Tuple[StrengthSet, float]] = None
    for s in sets:
        value = value_of(s)
        if best is None or beats_record(value, s, best[1], best[0]):
            best = (s, value)
    return best


def compute_strength_prs(
    sets: Sequence[StrengthSet],
    exercise_map: Optional[Mapping[str, str]] = None,
) -> List[StrengthPR]:
    """
    Compute all-time strength records for every exercise.

    Each record type is computed independently, so the three records of an
    exercise may come from different sets.

    Args:
        sets: Sets in any order
        exercise_map: exercise_id -> exercise name

    Returns:
        Up to three StrengthPR entries per exercise
    """
    prs: List[StrengthPR] = []

    for exercise_id, ex_sets in group_by_exercise(sets).items():
        name = exercise_name_for(exercise_id, exercise_map, ex_sets)

        weighted = [s for s in ex_sets if (s.weight or 0) > 0]
        with_reps = [s for s in weighted if (s.reps or 0) > 0]
        # 0 kg bodyweight sets still count for reps
        rep_sets = [s for s in ex_sets if s.weight is not None and (s.reps or 0) > 0]

        candidates = [
            (StrengthPRType.MAX_WEIGHT, _best_set(weighted, lambda s: s.weight)),
            (StrengthPRType.ESTIMATED_1RM,
             _best_set(with_reps, lambda s: estimate_1rm(s.weight, s.reps))),
            (StrengthPRType.MAX_REPS, _best_set(rep_sets, lambda s: s.reps)),
        ]

        for pr_type, best in candidates:
            if best is None:
                continue
            record_set, value = best
            if pr_type == StrengthPRType.ESTIMATED_1RM:
                value = epley_1rm(record_set.weight, record_set.reps)
            prs.append(StrengthPR(
                type=pr_type,
                value=value,
                exercise_id=exercise_id,
                exercise_name=name,
                date=record_set.activity_date or "",
                weight=record_set.weight,
                reps=record_set.reps,
            ))

    logger.debug("Computed %d strength PRs", len(prs))
    return prs


def compute_body_prs(metrics: Iterable[BodyMetric]) -> List[BodyPR]:
    """
    Compute lowest-is-best body records.

    Only positive values count. On an exact tie the earlier day wins.

    Args:
        metrics: Body metric rows in any order

    Returns:
        At most one BodyPR per field that has ever been logged
    """
    rows = list(metrics)
    prs: List[BodyPR] = []

    for pr_type, (field_name, unit) in BODY_PR_FIELDS.items():
        best: Optional[BodyMetric] = None
        for row in rows:
            value = getattr(row, field_name)
            if not value or value <= 0:
                continue
            best_value = getattr(best, field_name) if best else None
            if (
                best is None
                or value < best_value
                or (value == best_value and row.date < best.date)
            ):
                best = row
        if best is not None:
            prs.append(BodyPR(
                type=pr_type,
                value=getattr(best, field_name),
                date=best.date,
                unit=unit,
            ))

    return prs


def is_new_pr(
    current: float,
    pr_value: Optional[float],
    higher_is_better: bool = True,
) -> bool:
    """Whether ``current`` beats the existing record (any positive value beats none)."""
    if not pr_value:
        return current > 0
    if higher_is_better:
        return current > pr_value
    return 0 < current < pr_value


def progress_to_pr(current: float, pr: float, higher_is_better: bool = True) -> int:
    """
    Percentage of the record reached by ``current``.

    Args:
        current: Latest value
        pr: Record value
        higher_is_better: False for body records

    Returns:
        Integer percentage, 0 when there is no record yet
    """
    if not pr:
        return 0
    if higher_is_better:
        return round_half_up(current / pr * 100)
    if not current:
        return 0
    return round_half_up(pr / current * 100)


def new_pr_labels(
    previous: Iterable[StrengthPR],
    current: Iterable[StrengthPR],
) -> List[str]:
    """
    Labels of records in ``current`` that improve on ``previous``.

    A record type seen for the first time counts as new.

    Args:
        previous: Records before the period of interest
        current: Records including the period of interest

    Returns:
        Labels such as ``Bench Press 1RM``, in ``current`` order
    """
    before = {(pr.exercise_id, pr.type): pr.value for pr in previous}
    labels = []
    for pr in current:
        old = before.get((pr.exercise_id, pr.type))
        if old is None or pr.value > old:
            labels.append(pr.label)
    return labels
