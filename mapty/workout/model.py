"""Workout domain models."""

from __future__ import annotations

import time
from dataclasses import dataclass
from datetime import datetime
from typing import ClassVar, Literal


WorkoutType = Literal["running", "cycling"]
Coords = tuple[float, float]

WORKOUT_TYPES: tuple[WorkoutType, ...] = ("running", "cycling")

MONTHS: tuple[str, ...] = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


class WorkoutIdSource:
    """Timestamp-based ids, truncated to the low-order 10 digits.

    Ids are best-effort unique: a value that would not move forward is bumped
    past the last one issued, so a tight loop never repeats itself.
    """

    def __init__(self, digits: int = 10) -> None:
        self._modulus = 10**digits
        self._digits = digits
        self._last: int | None = None

    def next_id(self) -> str:
        candidate = (time.time_ns() // 1_000) % self._modulus
        if self._last is not None and candidate <= self._last:
            candidate = (self._last + 1) % self._modulus
        self._last = candidate
        return f"{candidate:0{self._digits}d}"


_default_ids = WorkoutIdSource()


def describe(workout_type: WorkoutType, created_at: datetime) -> str:
    return f"{workout_type.capitalize()} on {MONTHS[created_at.month - 1]} {created_at.day}"


@dataclass(frozen=True, kw_only=True)
class Workout:
    type: ClassVar[WorkoutType]

    id: str
    created_at: datetime
    coords: Coords
    distance_km: float
    duration_min: float
    description: str
    clicks: int = 0

    def click(self) -> None:
        # Only post-construction mutation a workout allows.
        object.__setattr__(self, "clicks", self.clicks + 1)


@dataclass(frozen=True, kw_only=True)
class Running(Workout):
    type: ClassVar[WorkoutType] = "running"

    cadence_spm: float
    pace_min_per_km: float


@dataclass(frozen=True, kw_only=True)
class Cycling(Workout):
    type: ClassVar[WorkoutType] = "cycling"

    elevation_gain_m: float
    speed_km_per_h: float


def new_running(
    coords: Coords,
    distance_km: float,
    duration_min: float,
    cadence_spm: float,
    *,
    now: datetime | None = None,
    ids: WorkoutIdSource | None = None,
) -> Running:
    created_at = now or datetime.now().astimezone()
    return Running(
        id=(ids or _default_ids).next_id(),
        created_at=created_at,
        coords=(float(coords[0]), float(coords[1])),
        distance_km=distance_km,
        duration_min=duration_min,
        description=describe("running", created_at),
        cadence_spm=cadence_spm,
        pace_min_per_km=duration_min / distance_km,
    )


def new_cycling(
    coords: Coords,
    distance_km: float,
    duration_min: float,
    elevation_gain_m: float,
    *,
    now: datetime | None = None,
    ids: WorkoutIdSource | None = None,
) -> Cycling:
    created_at = now or datetime.now().astimezone()
    return Cycling(
        id=(ids or _default_ids).next_id(),
        created_at=created_at,
        coords=(float(coords[0]), float(coords[1])),
        distance_km=distance_km,
        duration_min=duration_min,
        description=describe("cycling", created_at),
        elevation_gain_m=elevation_gain_m,
        speed_km_per_h=distance_km / (duration_min / 60),
    )
