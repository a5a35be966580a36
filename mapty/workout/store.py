"""Ordered workout collection and its round-trip to durable storage."""

from __future__ import annotations

import json
import math
from datetime import datetime
from typing import Any, Iterator

from loguru import logger

from mapty.workout.model import Cycling, Running, Workout
from mapty.workout.storage import KeyValueStorage


DEFAULT_STORAGE_KEY = "workouts"


class CorruptPersistedState(ValueError):
    """Raised when a stored blob does not decode into workouts."""


def encode_workout(workout: Workout) -> dict[str, Any]:
    record: dict[str, Any] = {
        "type": workout.type,
        "id": workout.id,
        "created_at": workout.created_at.isoformat(),
        "coords": [workout.coords[0], workout.coords[1]],
        "distance_km": workout.distance_km,
        "duration_min": workout.duration_min,
        "description": workout.description,
        "clicks": workout.clicks,
    }
    if isinstance(workout, Running):
        record["cadence_spm"] = workout.cadence_spm
        record["pace_min_per_km"] = workout.pace_min_per_km
    elif isinstance(workout, Cycling):
        record["elevation_gain_m"] = workout.elevation_gain_m
        record["speed_km_per_h"] = workout.speed_km_per_h
    return record


def _field(record: dict[str, Any], name: str, kind: type | tuple[type, ...]) -> Any:
    if name not in record:
        raise CorruptPersistedState(f"Workout record missing '{name}'")
    value = record[name]
    if isinstance(value, bool) or not isinstance(value, kind):
        raise CorruptPersistedState(f"Workout field '{name}' has wrong type")
    return value


def _number(record: dict[str, Any], name: str) -> float:
    # NaN and infinity never come from a valid save; json lets them through.
    value = float(_field(record, name, (int, float)))
    if not math.isfinite(value):
        raise CorruptPersistedState(f"Workout field '{name}' is not finite")
    return value


def decode_workout(record: object) -> Workout:
    if not isinstance(record, dict):
        raise CorruptPersistedState("Workout record must be an object")

    coords_obj = _field(record, "coords", list)
    if len(coords_obj) != 2 or not all(
        isinstance(c, (int, float)) and not isinstance(c, bool) and math.isfinite(c)
        for c in coords_obj
    ):
        raise CorruptPersistedState("Workout field 'coords' must be finite [lat, lng]")

    created_raw = _field(record, "created_at", str)
    try:
        created_at = datetime.fromisoformat(created_raw)
    except ValueError as exc:
        raise CorruptPersistedState(f"Invalid created_at '{created_raw}'") from exc

    common: dict[str, Any] = {
        "id": _field(record, "id", str),
        "created_at": created_at,
        "coords": (float(coords_obj[0]), float(coords_obj[1])),
        "distance_km": _number(record, "distance_km"),
        "duration_min": _number(record, "duration_min"),
        "description": _field(record, "description", str),
        "clicks": _field(record, "clicks", int),
    }

    kind = record.get("type")
    if kind == "running":
        return Running(
            **common,
            cadence_spm=_number(record, "cadence_spm"),
            pace_min_per_km=_number(record, "pace_min_per_km"),
        )
    if kind == "cycling":
        return Cycling(
            **common,
            elevation_gain_m=_number(record, "elevation_gain_m"),
            speed_km_per_h=_number(record, "speed_km_per_h"),
        )
    raise CorruptPersistedState(f"Unknown workout type '{kind}'")


def encode_workouts(workouts: list[Workout] | tuple[Workout, ...]) -> str:
    return json.dumps([encode_workout(w) for w in workouts], ensure_ascii=True)


def decode_workouts(blob: str) -> list[Workout]:
    try:
        data = json.loads(blob)
    except json.JSONDecodeError as exc:
        raise CorruptPersistedState(f"Invalid JSON: {exc}") from exc
    if not isinstance(data, list):
        raise CorruptPersistedState("Stored workouts must be an array")
    return [decode_workout(item) for item in data]


class WorkoutStore:
    def __init__(self, storage: KeyValueStorage, key: str = DEFAULT_STORAGE_KEY) -> None:
        self._storage = storage
        self._key = key
        self._workouts: list[Workout] = []

    def __len__(self) -> int:
        return len(self._workouts)

    def __iter__(self) -> Iterator[Workout]:
        return iter(tuple(self._workouts))

    @property
    def workouts(self) -> tuple[Workout, ...]:
        return tuple(self._workouts)

    def add(self, workout: Workout) -> None:
        self._workouts.append(workout)

    def add_and_save(self, workout: Workout) -> None:
        """Append and persist; on a failed write the workout is dropped again."""
        self._workouts.append(workout)
        try:
            self.save()
        except OSError:
            self._workouts.pop()
            raise

    def find_by_id(self, workout_id: str) -> Workout | None:
        for workout in self._workouts:
            if workout.id == workout_id:
                return workout
        return None

    def save(self) -> None:
        self._storage.set(self._key, encode_workouts(self._workouts))
        logger.debug(f"Saved {len(self._workouts)} workouts under '{self._key}'")

    def load(self) -> None:
        self._workouts = []
        try:
            blob = self._storage.get(self._key)
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning(f"Ignoring unreadable stored workouts: {exc}")
            return
        if blob is None:
            return
        try:
            self._workouts = decode_workouts(blob)
        except CorruptPersistedState as exc:
            logger.warning(f"Ignoring corrupt stored workouts: {exc}")
            return
        logger.info(f"Loaded {len(self._workouts)} workouts from '{self._key}'")

    def clear(self) -> None:
        self._workouts = []
        self._storage.remove(self._key)
