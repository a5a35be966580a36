"""Session state for the workout map controller."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from mapty.workout.model import Coords


Phase = Literal[
    "idle",
    "awaiting_location",
    "map_ready",
    "form_open",
    "submitting",
    "error",
]


@dataclass
class SessionState:
    phase: Phase = "idle"
    pending_coords: Coords | None = None
    error_reason: str | None = None

    @property
    def map_ready(self) -> bool:
        return self.phase in ("map_ready", "form_open", "submitting")
