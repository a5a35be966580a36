"""Validation of raw workout form input."""

from __future__ import annotations

import math
from dataclasses import dataclass

from mapty.workout.model import WORKOUT_TYPES, WorkoutType


class InvalidInput(ValueError):
    """Raised when submitted workout values are not usable."""


@dataclass(frozen=True)
class FormValues:
    """Values as read from the form, before any checking."""

    type: str
    distance: object
    duration: object
    cadence: object = None
    elevation: object = None


@dataclass(frozen=True)
class WorkoutInput:
    type: WorkoutType
    distance_km: float
    duration_min: float
    cadence_spm: float | None = None
    elevation_gain_m: float | None = None


def _to_number(raw: object) -> float:
    if raw is None or isinstance(raw, bool):
        return math.nan
    if isinstance(raw, (int, float)):
        return float(raw)
    text = str(raw).strip()
    if not text:
        return math.nan
    try:
        return float(text)
    except ValueError:
        return math.nan


def _all_finite(*values: float) -> bool:
    return all(math.isfinite(value) for value in values)


def _all_positive(*values: float) -> bool:
    return all(value > 0 for value in values)


def validate_workout_input(values: FormValues) -> WorkoutInput:
    """Check form values and return typed input for workout construction.

    Every numeric field must be finite. Distance, duration and running cadence
    must be strictly positive; cycling elevation may be zero or negative.
    """
    if values.type not in WORKOUT_TYPES:
        raise InvalidInput(f"Unknown workout type '{values.type}'")

    distance = _to_number(values.distance)
    duration = _to_number(values.duration)

    if values.type == "running":
        cadence = _to_number(values.cadence)
        if not _all_finite(distance, duration, cadence) or not _all_positive(
            distance, duration, cadence
        ):
            raise InvalidInput("Distance, duration and cadence must be a positive number")
        return WorkoutInput(
            type="running",
            distance_km=distance,
            duration_min=duration,
            cadence_spm=cadence,
        )

    elevation = _to_number(values.elevation)
    if not _all_finite(distance, duration, elevation) or not _all_positive(distance, duration):
        raise InvalidInput(
            "Distance and duration must be a positive number, elevation must be a number"
        )
    return WorkoutInput(
        type="cycling",
        distance_km=distance,
        duration_min=duration,
        elevation_gain_m=elevation,
    )
