"""One-rep-max estimation and set volume."""

from typing import Optional

from ..utils.numbers import round_half_up


def estimate_1rm(weight: Optional[float], reps: Optional[int]) -> float:
    """
    Epley one-rep-max estimate, unrounded.

    1RM = weight * (1 + reps / 30)

    A single rep is already a true max and is returned unchanged.

    Args:
        weight: Load lifted in kg
        reps: Repetitions performed

    Returns:
        Estimated 1RM in kg, 0.0 when weight or reps is missing or zero
    """
    if not weight or not reps:
        return 0.0
    if reps == 1:
        return float(weight)
    return weight * (1 + reps / 30)


def epley_1rm(weight: Optional[float], reps: Optional[int]) -> float:
    """
    Epley one-rep-max estimate rounded to the nearest kg.

    Zero means "no valid estimate"; callers must drop those before using the
    value as a record candidate.

    Args:
        weight: Load lifted in kg
        reps: Repetitions performed

    Returns:
        Estimated 1RM (weight itself for a single rep)
    """
    if not weight or not reps:
        return 0
    if reps == 1:
        return weight
    return round_half_up(estimate_1rm(weight, reps))


def set_volume(weight: Optional[float], reps: Optional[int]) -> float:
    """Volume of one set (weight x reps); missing fields contribute zero."""
    return (weight or 0) * (reps or 0)
