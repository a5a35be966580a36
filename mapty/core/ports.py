"""Collaborators the session controller drives but does not implement."""

from __future__ import annotations

from typing import Any, Callable, Protocol

from mapty.workout.model import Coords, WorkoutType
from mapty.workout.render import PopupOptions, WorkoutEntry
from mapty.workout.validation import FormValues


MapClickHandler = Callable[[Coords], None]


class LocationUnavailable(RuntimeError):
    """Raised when the current position cannot be determined."""


class MapView(Protocol):
    def set_view(self, coords: Coords, zoom: int) -> None: ...

    def on_click(self, handler: MapClickHandler) -> None: ...

    def add_marker(self, coords: Coords) -> Any: ...

    def bind_popup(self, marker: Any, content: str, options: PopupOptions) -> None: ...

    def open_popup(self, marker: Any) -> None: ...

    def pan_to(self, coords: Coords, zoom: int, animation: dict[str, Any]) -> None: ...


class Geolocation(Protocol):
    async def get_current_position(self) -> Coords:
        """Resolve once with (lat, lng) or raise LocationUnavailable."""
        ...


class WorkoutForm(Protocol):
    def show(self) -> None: ...

    def hide(self) -> None: ...

    def show_fields_for(self, workout_type: WorkoutType) -> None: ...

    def focus_distance(self) -> None: ...

    def read(self) -> FormValues: ...

    def clear(self) -> None: ...


class WorkoutList(Protocol):
    def append(self, entry: WorkoutEntry) -> None: ...

    def clear(self) -> None: ...


class Notifier(Protocol):
    def notify(self, message: str) -> None: ...
