from __future__ import annotations

import math

import pytest

from mapty.workout.validation import FormValues, InvalidInput, validate_workout_input


def test_valid_running_input() -> None:
    data = validate_workout_input(
        FormValues(type="running", distance="5.2", duration=24, cadence=178)
    )

    assert data.type == "running"
    assert data.distance_km == 5.2
    assert data.duration_min == 24.0
    assert data.cadence_spm == 178.0
    assert data.elevation_gain_m is None


@pytest.mark.parametrize(("elevation", "expected"), [(0, 0.0), (-120, -120.0), ("523", 523.0)])
def test_cycling_elevation_only_needs_to_be_finite(elevation: object, expected: float) -> None:
    data = validate_workout_input(
        FormValues(type="cycling", distance=27, duration=95, elevation=elevation)
    )

    assert data.type == "cycling"
    assert data.elevation_gain_m == expected


@pytest.mark.parametrize(
    ("distance", "duration", "cadence"),
    [
        (-3, 24, 178),
        (0, 24, 178),
        (5, 0, 178),
        (5, -1, 178),
        (5, 24, 0),
        (5, 24, -170),
        (math.inf, 24, 178),
        (5, math.nan, 178),
        (5, 24, "inf"),
        ("abc", 24, 178),
        (None, 24, 178),
        ("", 24, 178),
    ],
)
def test_running_rejects_bad_values(distance: object, duration: object, cadence: object) -> None:
    with pytest.raises(InvalidInput, match="must be a positive number"):
        validate_workout_input(
            FormValues(type="running", distance=distance, duration=duration, cadence=cadence)
        )


@pytest.mark.parametrize(
    ("distance", "duration", "elevation"),
    [
        (-3, 60, 100),
        (20, 0, 100),
        (20, 60, math.nan),
        (20, 60, None),
        (math.inf, 60, 100),
    ],
)
def test_cycling_rejects_bad_values(distance: object, duration: object, elevation: object) -> None:
    with pytest.raises(InvalidInput):
        validate_workout_input(
            FormValues(type="cycling", distance=distance, duration=duration, elevation=elevation)
        )


def test_unknown_type_is_rejected() -> None:
    with pytest.raises(InvalidInput):
        validate_workout_input(FormValues(type="swimming", distance=1, duration=30))


def test_boolean_is_not_a_number() -> None:
    with pytest.raises(InvalidInput):
        validate_workout_input(
            FormValues(type="running", distance=True, duration=24, cadence=178)
        )
