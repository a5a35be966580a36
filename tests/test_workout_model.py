from __future__ import annotations

from datetime import datetime

from mapty.workout.model import (
    Cycling,
    Running,
    WorkoutIdSource,
    describe,
    new_cycling,
    new_running,
)


def test_running_pace_is_duration_over_distance() -> None:
    run = new_running((39, -12), 5.2, 24, 178)

    assert isinstance(run, Running)
    assert run.type == "running"
    assert run.pace_min_per_km == 24 / 5.2
    assert run.cadence_spm == 178
    assert run.coords == (39.0, -12.0)
    assert run.clicks == 0


def test_cycling_speed_is_km_per_hour() -> None:
    ride = new_cycling((39, -12), 27, 95, 523)

    assert isinstance(ride, Cycling)
    assert ride.type == "cycling"
    assert ride.speed_km_per_h == 27 / (95 / 60)
    assert ride.elevation_gain_m == 523


def test_cycling_accepts_negative_elevation() -> None:
    ride = new_cycling((0.0, 0.0), 10, 30, -40)

    assert ride.elevation_gain_m == -40
    assert ride.speed_km_per_h == 20.0


def test_description_uses_type_and_creation_date() -> None:
    when = datetime(2026, 3, 5, 8, 30)

    run = new_running((1.0, 2.0), 5, 25, 170, now=when)
    ride = new_cycling((1.0, 2.0), 20, 60, 100, now=datetime(2026, 12, 31))

    assert run.description == "Running on March 5"
    assert run.created_at == when
    assert ride.description == "Cycling on December 31"
    assert describe("cycling", datetime(2025, 1, 1)) == "Cycling on January 1"


def test_ids_are_distinct_in_tight_loop() -> None:
    ids = WorkoutIdSource()
    generated = [ids.next_id() for _ in range(5000)]

    assert len(set(generated)) == len(generated)
    assert all(len(value) == 10 and value.isdigit() for value in generated)


def test_default_ids_are_distinct_across_constructors() -> None:
    workouts = [new_running((0.0, 0.0), 5, 25, 170) for _ in range(200)]
    workouts += [new_cycling((0.0, 0.0), 20, 60, 0) for _ in range(200)]

    assert len({w.id for w in workouts}) == 400


def test_click_only_bumps_counter() -> None:
    run = new_running((39.0, -12.0), 5.2, 24, 178)

    run.click()
    run.click()

    assert run.clicks == 2
    assert run.distance_km == 5.2
    assert run.pace_min_per_km == 24 / 5.2
