"""Goal progress from logged goal entries."""

from dataclasses import asdict, dataclass
from typing import Dict, Iterable, List, Mapping, Optional

from ..models.records import Goal, GoalLog, GoalType
from ..utils.numbers import round_half_up

HIGHER_IS_BETTER = frozenset({
    GoalType.LIFT,
    GoalType.CARDIO_DISTANCE,
    GoalType.CARDIO_TIME,
})

GOAL_LABELS: Dict[GoalType, str] = {
    GoalType.WEIGHT: "Body Weight",
    GoalType.WAIST: "Waist",
    GoalType.BODY_FAT: "Body Fat %",
    GoalType.LIFT: "Lift PR",
    GoalType.CARDIO_DISTANCE: "Distance",
    GoalType.CARDIO_TIME: "Cardio Time",
}

GOAL_UNITS: Dict[GoalType, str] = {
    GoalType.WEIGHT: "kg",
    GoalType.WAIST: "cm",
    GoalType.BODY_FAT: "%",
    GoalType.LIFT: "kg",
    GoalType.CARDIO_DISTANCE: "km",
    GoalType.CARDIO_TIME: "min",
}


@dataclass
class GoalStatus:
    """Progress of one active goal."""

    goal_id: str
    name: str
    type: str
    target_value: float
    unit: str
    best_value: Optional[float]
    progress_pct: Optional[int]
    reached: bool

    def to_dict(self) -> dict:
        return asdict(self)


def is_higher_better(goal_type: GoalType) -> bool:
    return goal_type in HIGHER_IS_BETTER


def best_goal_value(goal: Goal, logs: Iterable[GoalLog]) -> Optional[float]:
    """
    Best logged value for a goal.

    The highest value for lift and cardio goals, the lowest for body goals.
    Logs for other goals are ignored.
    """
    values = [log.value for log in logs if log.goal_id == goal.id]
    if not values:
        return None
    return max(values) if is_higher_better(goal.type) else min(values)


def goal_progress(goal: Goal, best: Optional[float]) -> Optional[int]:
    """
    Percentage towards the target, capped at 100.

    Args:
        goal: The goal
        best: Best logged value (None when nothing was logged)

    Returns:
        Integer percentage, or None without logs
    """
    if best is None:
        return None
    if is_higher_better(goal.type):
        if not goal.target_value:
            return 100
        pct = best / goal.target_value * 100
    else:
        if not best:
            return 0
        pct = goal.target_value / best * 100
    return min(100, round_half_up(pct))


def is_goal_reached(goal: Goal, best: Optional[float]) -> bool:
    if best is None:
        return False
    if is_higher_better(goal.type):
        return best >= goal.target_value
    return best <= goal.target_value


def goal_display_name(goal: Goal, exercise_map: Optional[Mapping[str, str]] = None) -> str:
    """Notes win; lift goals use the exercise name, others the type label."""
    if goal.notes:
        return goal.notes
    if goal.type == GoalType.LIFT and goal.exercise_id:
        name = (exercise_map or {}).get(goal.exercise_id)
        return f"{name} PR" if name else GOAL_LABELS[GoalType.LIFT]
    return GOAL_LABELS[goal.type]


def evaluate_goals(
    goals: Iterable[Goal],
    logs: Iterable[GoalLog],
    exercise_map: Optional[Mapping[str, str]] = None,
) -> List[GoalStatus]:
    """Progress for every active goal, in input order."""
    all_logs = list(logs)
    results = []
    for goal in goals:
        if not goal.is_active:
            continue
        best = best_goal_value(goal, all_logs)
        results.append(GoalStatus(
            goal_id=goal.id,
            name=goal_display_name(goal, exercise_map),
            type=goal.type.value,
            target_value=goal.target_value,
            unit=GOAL_UNITS[goal.type],
            best_value=best,
            progress_pct=goal_progress(goal, best),
            reached=is_goal_reached(goal, best),
        ))
    return results
