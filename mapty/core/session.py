"""Session controller tying geolocation, map, form and storage together."""

from __future__ import annotations

from loguru import logger

from mapty.core.ports import (
    Geolocation,
    LocationUnavailable,
    MapView,
    Notifier,
    WorkoutForm,
    WorkoutList,
)
from mapty.core.state import SessionState
from mapty.workout.model import Coords, Workout, WorkoutType, new_cycling, new_running
from mapty.workout.render import MAP_ZOOM_LEVEL, PAN_ANIMATION, build_entry, build_marker
from mapty.workout.store import WorkoutStore
from mapty.workout.validation import InvalidInput, WorkoutInput, validate_workout_input


LOCATION_NOTICE = "Could not get your position"
SAVE_NOTICE = "Could not save your workout, please try again"


class SessionController:
    def __init__(
        self,
        store: WorkoutStore,
        map_view: MapView,
        geolocation: Geolocation,
        form: WorkoutForm,
        workout_list: WorkoutList,
        notifier: Notifier,
        zoom: int = MAP_ZOOM_LEVEL,
    ) -> None:
        self._store = store
        self._map = map_view
        self._geolocation = geolocation
        self._form = form
        self._list = workout_list
        self._notifier = notifier
        self._zoom = zoom
        self.state = SessionState()

    @property
    def store(self) -> WorkoutStore:
        return self._store

    async def start(self) -> None:
        if self.state.phase != "idle":
            raise RuntimeError("Session already started")

        self.state.phase = "awaiting_location"
        self._store.load()
        for workout in self._store:
            self._list.append(build_entry(workout))

        try:
            coords = await self._geolocation.get_current_position()
        except LocationUnavailable as exc:
            logger.warning(f"Location unavailable: {exc}")
            self.state.phase = "error"
            self.state.error_reason = str(exc) or LOCATION_NOTICE
            self._notifier.notify(LOCATION_NOTICE)
            return

        self._load_map(coords)

    def _load_map(self, coords: Coords) -> None:
        logger.info(f"Position fixed at {coords[0]:.5f}, {coords[1]:.5f}")
        self._map.set_view(coords, self._zoom)
        self._map.on_click(self.handle_map_click)
        for workout in self._store:
            self._render_marker(workout)
        self.state.phase = "map_ready"

    def handle_map_click(self, coords: Coords) -> None:
        if self.state.phase not in ("map_ready", "form_open"):
            logger.debug(f"Ignoring map click while {self.state.phase}")
            return
        self.state.phase = "form_open"
        self.state.pending_coords = coords
        self._form.show()
        self._form.focus_distance()

    def handle_type_change(self, workout_type: WorkoutType) -> None:
        self._form.show_fields_for(workout_type)

    def handle_submit(self) -> Workout | None:
        if self.state.phase != "form_open" or self.state.pending_coords is None:
            logger.debug(f"Ignoring submit while {self.state.phase}")
            return None

        coords = self.state.pending_coords
        self.state.phase = "submitting"
        try:
            data = validate_workout_input(self._form.read())
        except InvalidInput as exc:
            logger.info(f"Rejected workout input: {exc}")
            self.state.phase = "form_open"
            self._notifier.notify(str(exc))
            return None

        workout = _build_workout(coords, data)
        try:
            self._store.add_and_save(workout)
        except OSError as exc:
            logger.error(f"Could not store workout: {exc}")
            self.state.phase = "form_open"
            self._notifier.notify(SAVE_NOTICE)
            return None
        logger.info(f"Created {workout.description} ({workout.id})")

        self._render_marker(workout)
        self._list.append(build_entry(workout))
        self._form.clear()
        self._form.hide()

        self.state.phase = "map_ready"
        self.state.pending_coords = None
        return workout

    def handle_list_click(self, workout_id: str) -> None:
        if not self.state.map_ready:
            logger.debug(f"Ignoring list click while {self.state.phase}")
            return

        workout = self._store.find_by_id(workout_id)
        if workout is None:
            logger.debug(f"No workout with id {workout_id}")
            return

        self._map.pan_to(workout.coords, self._zoom, PAN_ANIMATION)
        if self.state.phase == "form_open":
            self._form.hide()
        self.state.phase = "map_ready"
        self.state.pending_coords = None

    def reset(self) -> None:
        self._store.clear()
        self._list.clear()
        logger.info("Cleared stored workouts")

    def _render_marker(self, workout: Workout) -> None:
        popup = build_marker(workout)
        marker = self._map.add_marker(popup.coords)
        self._map.bind_popup(marker, popup.content, popup.options)
        self._map.open_popup(marker)


def _build_workout(coords: Coords, data: WorkoutInput) -> Workout:
    if data.type == "running":
        assert data.cadence_spm is not None
        return new_running(coords, data.distance_km, data.duration_min, data.cadence_spm)
    assert data.elevation_gain_m is not None
    return new_cycling(coords, data.distance_km, data.duration_min, data.elevation_gain_m)
