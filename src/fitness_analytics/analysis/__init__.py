"""Record aggregators and engines built on the estimation primitives."""

from .strength import (
    ExercisePreferences,
    ExerciseSummary,
    PRRecord,
    WeeklyVolume,
    calc_exercise_summaries,
    detect_plateau,
    find_personal_records,
    order_exercises,
    weekly_volume_for_exercise,
)
from .records import (
    compute_body_prs,
    compute_strength_prs,
    is_new_pr,
    new_pr_labels,
    progress_to_pr,
)
from .training_load import (
    DailyLoad,
    TrainingStatus,
    WeeklyLoad,
    calc_weekly_loads,
    classify_week_load,
    daily_loads,
    get_4week_avg_load,
)
from .composition import (
    BodyFatPoint,
    CompositionAnalysis,
    CompositionTrend,
    analyze_composition,
    composition_label,
    get_body_fat_trend,
    get_weight_trend,
)
from .summary import (
    WeeklySummaryInput,
    data_freshness_warning,
    deficit_label,
    generate_weekly_summary,
    weight_trend_label,
)
from .goals import (
    GoalStatus,
    best_goal_value,
    evaluate_goals,
    goal_display_name,
    goal_progress,
    is_goal_reached,
)
from .dashboard import Dashboard, build_dashboard

__all__ = [
    # Strength
    "ExercisePreferences",
    "ExerciseSummary",
    "PRRecord",
    "WeeklyVolume",
    "calc_exercise_summaries",
    "detect_plateau",
    "find_personal_records",
    "order_exercises",
    "weekly_volume_for_exercise",
    # Records
    "compute_body_prs",
    "compute_strength_prs",
    "is_new_pr",
    "new_pr_labels",
    "progress_to_pr",
    # Load
    "DailyLoad",
    "TrainingStatus",
    "WeeklyLoad",
    "calc_weekly_loads",
    "classify_week_load",
    "daily_loads",
    "get_4week_avg_load",
    # Composition
    "BodyFatPoint",
    "CompositionAnalysis",
    "CompositionTrend",
    "analyze_composition",
    "composition_label",
    "get_body_fat_trend",
    "get_weight_trend",
    # Narrative
    "WeeklySummaryInput",
    "data_freshness_warning",
    "deficit_label",
    "generate_weekly_summary",
    "weight_trend_label",
    # Goals
    "GoalStatus",
    "best_goal_value",
    "evaluate_goals",
    "goal_display_name",
    "goal_progress",
    "is_goal_reached",
    # Dashboard
    "Dashboard",
    "build_dashboard",
]
