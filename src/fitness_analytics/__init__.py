"""Fitness analytics: derived metrics from logged workouts and body measurements."""

__version__ = "0.1.0"
