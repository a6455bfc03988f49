"""Analytics API routes.

Every endpoint is stateless: records arrive in the request body and the
derived values are returned directly.
"""

import logging

from fastapi import APIRouter

from ...analysis import (
    analyze_composition,
    build_dashboard,
    calc_exercise_summaries,
    calc_weekly_loads,
    composition_label,
    compute_body_prs,
    compute_strength_prs,
    detect_plateau,
    find_personal_records,
    get_4week_avg_load,
    weekly_volume_for_exercise,
)
from ...config import get_settings
from ...exceptions import NotFoundError, ValidationError
from ...metrics import (
    calc_bmr,
    calc_cardio_calories,
    calc_strength_calories,
    calc_tdee,
    resolve_profile,
)
from ..schemas import (
    ActivitiesRequest,
    BodyMetricsRequest,
    CardioCaloriesRequest,
    DashboardRequest,
    MetabolismRequest,
    SetsRequest,
    StrengthCaloriesRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/dashboard")
async def dashboard(request: DashboardRequest):
    """Run every engine over a snapshot."""
    settings = get_settings()
    result = build_dashboard(
        request.snapshot,
        today=request.today,
        days=request.days or settings.summary_days,
        default_body_weight_kg=request.default_body_weight_kg or settings.default_body_weight_kg,
    )
    return result.to_dict()


@router.post("/weekly-loads")
async def weekly_loads(request: ActivitiesRequest):
    """Weekly training load with status, plus the 4-week average."""
    loads = calc_weekly_loads(request.activities)
    return {
        "weeks": [w.to_dict() for w in loads],
        "avg_4week_load": get_4week_avg_load(loads),
    }


@router.post("/exercise-summaries")
async def exercise_summaries(request: SetsRequest):
    """Per-exercise volume, max weight and best 1RM."""
    summaries = calc_exercise_summaries(request.sets, request.exercise_map)
    return {"exercises": [s.to_dict() for s in summaries]}


@router.post("/exercises/{exercise_id}/progress")
async def exercise_progress(exercise_id: str, request: SetsRequest):
    """Weekly volume and plateau flag for one exercise."""
    if not any(s.exercise_id == exercise_id for s in request.sets):
        raise NotFoundError("Exercise", exercise_id)
    return {
        "exercise_id": exercise_id,
        "weekly_volume": [w.to_dict() for w in weekly_volume_for_exercise(request.sets, exercise_id)],
        "plateau": detect_plateau(request.sets, exercise_id),
    }


@router.post("/personal-records")
async def personal_records(request: SetsRequest):
    """Best set per exercise plus the three strength record types."""
    return {
        "best_sets": [r.to_dict() for r in find_personal_records(request.sets, request.exercise_map)],
        "strength_prs": [
            pr.model_dump(mode="json")
            for pr in compute_strength_prs(request.sets, request.exercise_map)
        ],
    }


@router.post("/composition")
async def composition(request: BodyMetricsRequest):
    """Composition trend and body records."""
    analysis = analyze_composition(request.body_metrics)
    return {
        **analysis.to_dict(),
        "label": composition_label(analysis.trend),
        "body_prs": [pr.model_dump(mode="json") for pr in compute_body_prs(request.body_metrics)],
    }


@router.post("/metabolism")
async def metabolism(request: MetabolismRequest):
    """BMR and TDEE from the latest profile fields."""
    profile = resolve_profile(request.body_metrics)
    if profile is None:
        raise ValidationError(
            "Weight, height, age and gender must each be logged at least once",
            field="body_metrics",
        )

    steps = request.steps
    if steps is None:
        newest = max(request.body_metrics, key=lambda m: m.date)
        steps = newest.steps

    result = calc_tdee(calc_bmr(profile), request.workout_calories, steps)
    logger.debug("TDEE computed: %s", result)
    return {"profile": profile.to_dict(), **result.to_dict()}


@router.post("/calories/cardio")
async def cardio_calories(request: CardioCaloriesRequest):
    """MET-based calorie estimate for a cardio session."""
    return calc_cardio_calories(
        request.duration_min,
        request.weight_kg,
        distance_km=request.distance_km,
        notes=request.notes,
    ).to_dict()


@router.post("/calories/strength")
async def strength_calories(request: StrengthCaloriesRequest):
    """MET-based calorie estimate for a strength session."""
    return calc_strength_calories(request.sets, request.weight_kg, request.duration_min).to_dict()
