"""View-models for the sidebar list and map markers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from mapty.workout.model import Cycling, Running, Workout, WorkoutType


MAP_ZOOM_LEVEL = 13
PAN_ANIMATION: dict[str, Any] = {"animate": True, "pan": {"duration": 1}}

TYPE_ICONS: dict[WorkoutType, str] = {
    "running": "🏃‍♂️",
    "cycling": "🚴‍♀️",
}


@dataclass(frozen=True)
class PopupOptions:
    max_width: int = 250
    min_width: int = 100
    auto_close: bool = False
    close_on_click: bool = False
    style_class: str = ""

    def to_leaflet(self) -> dict[str, Any]:
        return {
            "maxWidth": self.max_width,
            "minWidth": self.min_width,
            "autoClose": self.auto_close,
            "closeOnClick": self.close_on_click,
            "className": self.style_class,
        }


@dataclass(frozen=True)
class MarkerPopup:
    coords: tuple[float, float]
    content: str
    options: PopupOptions


@dataclass(frozen=True)
class EntryDetail:
    icon: str
    value: str
    unit: str


@dataclass(frozen=True)
class WorkoutEntry:
    id: str
    type: WorkoutType
    title: str
    details: tuple[EntryDetail, ...]


def _fmt_raw(value: float) -> str:
    # Entered values are shown as typed: 5.0 -> "5", 5.25 -> "5.25".
    number = float(value)
    return str(int(number)) if number.is_integer() else str(number)


def _fmt_metric(value: float) -> str:
    return f"{value:.1f}"


def build_marker(workout: Workout) -> MarkerPopup:
    return MarkerPopup(
        coords=workout.coords,
        content=f"{TYPE_ICONS[workout.type]} {workout.description}",
        options=PopupOptions(style_class=f"{workout.type}-popup"),
    )


def build_entry(workout: Workout) -> WorkoutEntry:
    details: list[EntryDetail] = [
        EntryDetail(TYPE_ICONS[workout.type], _fmt_raw(workout.distance_km), "km"),
        EntryDetail("⏱", _fmt_raw(workout.duration_min), "min"),
    ]
    if isinstance(workout, Running):
        details.append(EntryDetail("⚡️", _fmt_metric(workout.pace_min_per_km), "min/km"))
        details.append(EntryDetail("🦶🏼", _fmt_raw(workout.cadence_spm), "spm"))
    elif isinstance(workout, Cycling):
        details.append(EntryDetail("⚡️", _fmt_metric(workout.speed_km_per_h), "km/h"))
        details.append(EntryDetail("⛰", _fmt_raw(workout.elevation_gain_m), "m"))
    return WorkoutEntry(
        id=workout.id,
        type=workout.type,
        title=workout.description,
        details=tuple(details),
    )
