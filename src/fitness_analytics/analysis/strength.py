"""
Strength Aggregation

Per-exercise summaries, best sets, plateau detection and volume trends.
"""

import logging
from dataclasses import asdict, dataclass, field
from typing import Dict, FrozenSet, List, Mapping, Optional, Sequence, Tuple

from ..metrics.strength import epley_1rm, estimate_1rm
from ..models.records import Exercise, StrengthSet
from ..utils.dates import parse_date, to_iso, week_start

logger = logging.getLogger(__name__)

UNKNOWN_EXERCISE = "Unknown"

PLATEAU_MIN_SETS = 6
PLATEAU_SESSIONS = 3
PLATEAU_THRESHOLD = 0.03  # < 3% spread across the last sessions


@dataclass
class ExerciseSummary:
    """Aggregated stats for one exercise."""

    exercise_id: str
    exercise_name: str
    total_volume: float
    max_weight: float
    estimated_1rm: float
    set_count: int
    last_performed: str

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class PRRecord:
    """The all-time best set for an exercise by estimated 1RM."""

    exercise_id: str
    exercise_name: str
    weight: float
    reps: int
    estimated_1rm: float
    achieved_on: str

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class WeeklyVolume:
    """Volume lifted for one exercise in one Monday-start week."""

    week: str
    volume: float

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class ExercisePreferences:
    """User ordering preferences; only affects presentation order."""

    tracked_ids: FrozenSet[str] = field(default_factory=frozenset)

    def is_tracked(self, exercise_id: str) -> bool:
        return exercise_id in self.tracked_ids

    def toggle(self, exercise_id: str) -> "ExercisePreferences":
        """Return new preferences with ``exercise_id`` tracked/untracked."""
        if exercise_id in self.tracked_ids:
            return ExercisePreferences(self.tracked_ids - {exercise_id})
        return ExercisePreferences(self.tracked_ids | {exercise_id})


def group_by_exercise(sets: Sequence[StrengthSet]) -> Dict[str, List[StrengthSet]]:
    """Group sets by exercise id, keeping first-seen order."""
    groups: Dict[str, List[StrengthSet]] = {}
    for s in sets:
        groups.setdefault(s.exercise_id, []).append(s)
    return groups


def exercise_name_for(
    exercise_id: str,
    exercise_map: Optional[Mapping[str, str]],
    sets: Sequence[StrengthSet] = (),
    default: str = UNKNOWN_EXERCISE,
) -> str:
    """Resolve an exercise name from the map, then from the sets themselves."""
    if exercise_map and exercise_map.get(exercise_id):
        return exercise_map[exercise_id]
    for s in sets:
        if s.exercise_name:
            return s.exercise_name
    return default


def beats_record(
    value: float,
    candidate: StrengthSet,
    best_value: float,
    best: StrengthSet,
) -> bool:
    """
    Whether ``candidate`` replaces ``best`` as a record set.

    Higher value wins. On an exact tie the earlier session wins; a tie on
    both keeps the set seen first.
    """
    if value != best_value:
        return value > best_value
    candidate_date = candidate.activity_date or ""
    best_date = best.activity_date or ""
    if candidate_date and best_date:
        return candidate_date < best_date
    return bool(candidate_date) and not best_date


def calc_exercise_summaries(
    sets: Sequence[StrengthSet],
    exercise_map: Optional[Mapping[str, str]] = None,
) -> List[ExerciseSummary]:
    """
    Aggregate per-exercise stats from a flat list of sets.

    Args:
        sets: Sets in any order
        exercise_map: exercise_id -> exercise name

    Returns:
        Summaries sorted by total volume, highest first
    """
    summaries: List[ExerciseSummary] = []

    for exercise_id, ex_sets in group_by_exercise(sets).items():
        total_volume = sum(s.volume for s in ex_sets)
        max_weight = max([0] + [s.weight or 0 for s in ex_sets])
        best_1rm = max([0] + [
            epley_1rm(s.weight, s.reps) for s in ex_sets if s.weight and s.reps
        ])
        dates = sorted(s.activity_date for s in ex_sets if s.activity_date)

        summaries.append(ExerciseSummary(
            exercise_id=exercise_id,
            exercise_name=exercise_name_for(exercise_id, exercise_map, ex_sets),
            total_volume=total_volume,
            max_weight=max_weight,
            estimated_1rm=best_1rm,
            set_count=len(ex_sets),
            last_performed=dates[-1] if dates else "",
        ))

    return sorted(summaries, key=lambda s: s.total_volume, reverse=True)


def find_personal_records(
    sets: Sequence[StrengthSet],
    exercise_map: Optional[Mapping[str, str]] = None,
) -> List[PRRecord]:
    """
    Find the all-time best set (highest estimated 1RM) per exercise.

    Candidates are compared on the unrounded estimate, so 5 x 105 (122.5)
    beats 3 x 110 (121) even though the heavier set moved more weight.

    Args:
        sets: Sets in any order
        exercise_map: exercise_id -> exercise name

    Returns:
        One PRRecord per exercise, highest estimated 1RM first
    """
    best: Dict[str, Tuple[StrengthSet, float]] = {}

    for s in sets:
        if not s.weight or not s.reps:
            continue
        one_rm = estimate_1rm(s.weight, s.reps)
        current = best.get(s.exercise_id)
        if current is None or beats_record(one_rm, s, current[1], current[0]):
            best[s.exercise_id] = (s, one_rm)

    groups = group_by_exercise(sets)
    records = [
        PRRecord(
            exercise_id=exercise_id,
            exercise_name=exercise_name_for(exercise_id, exercise_map, groups[exercise_id]),
            weight=record_set.weight,
            reps=record_set.reps,
            estimated_1rm=epley_1rm(record_set.weight, record_set.reps),
            achieved_on=record_set.activity_date or "",
        )
        for exercise_id, (record_set, _) in best.items()
    ]
    return sorted(records, key=lambda r: r.estimated_1rm, reverse=True)


def detect_plateau(sets: Sequence[StrengthSet], exercise_id: str) -> bool:
    """
    Check whether an exercise has stalled.

    Takes the best estimated 1RM of each session date and flags a plateau
    when the last three sessions are within 3% of each other.

    Args:
        sets: Sets in any order (other exercises are ignored)
        exercise_id: Exercise to check

    Returns:
        True if plateaued; never True with fewer than 6 dated sets or
        fewer than 3 sessions
    """
    ex_sets = sorted(
        (s for s in sets if s.exercise_id == exercise_id and s.activity_date),
        key=lambda s: s.activity_date,
    )
    if len(ex_sets) < PLATEAU_MIN_SETS:
        return False

    session_best: Dict[str, float] = {}
    for s in ex_sets:
        if not s.weight or not s.reps:
            continue
        one_rm = epley_1rm(s.weight, s.reps)
        if one_rm > session_best.get(s.activity_date, 0):
            session_best[s.activity_date] = one_rm

    if len(session_best) < PLATEAU_SESSIONS:
        return False

    recent = [session_best[d] for d in sorted(session_best)][-PLATEAU_SESSIONS:]
    high, low = max(recent), min(recent)
    plateaued = high > 0 and (high - low) / high < PLATEAU_THRESHOLD
    if plateaued:
        logger.debug("Plateau detected for %s: %s", exercise_id, recent)
    return plateaued


def weekly_volume_for_exercise(
    sets: Sequence[StrengthSet],
    exercise_id: str,
) -> List[WeeklyVolume]:
    """Volume per Monday-start week for one exercise, oldest first."""
    weeks: Dict[str, float] = {}
    for s in sets:
        if s.exercise_id != exercise_id:
            continue
        session_date = parse_date(s.activity_date)
        if session_date is None:
            continue
        week = to_iso(week_start(session_date))
        weeks[week] = weeks.get(week, 0) + s.volume

    return [WeeklyVolume(week=w, volume=v) for w, v in sorted(weeks.items())]


def order_exercises(
    exercises: Sequence[Exercise],
    preferences: ExercisePreferences,
    search: Optional[str] = None,
    limit: Optional[int] = None,
) -> List[Exercise]:
    """
    Order exercises for pickers: tracked first, then alphabetically.

    Args:
        exercises: Exercise catalogue
        preferences: User preferences (tracked exercise ids)
        search: Optional case-insensitive name filter
        limit: Maximum number of results

    Returns:
        Ordered exercises
    """
    needle = (search or "").lower()
    matches = [e for e in exercises if not needle or needle in e.name.lower()]
    ordered = sorted(
        matches,
        key=lambda e: (0 if preferences.is_tracked(e.id) else 1, e.name.lower()),
    )
    if limit is not None:
        return ordered[:limit]
    return ordered
