"""NiceGUI web UI for Mapty."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, cast

from loguru import logger
from nicegui import Client, ui

from mapty.core.ports import Geolocation, MapClickHandler
from mapty.core.session import SessionController
from mapty.ui.geolocation import BrowserGeolocation, FixedGeolocation
from mapty.workout.model import Coords, WorkoutType
from mapty.workout.render import PopupOptions, WorkoutEntry
from mapty.workout.storage import FileStorage
from mapty.workout.store import WorkoutStore
from mapty.workout.validation import FormValues

TILE_URL = "https://{s}.tile.openstreetmap.fr/hot/{z}/{x}/{y}.png"
TILE_ATTRIBUTION = (
    '&copy; <a href="https://www.openstreetmap.org/copyright">OpenStreetMap</a> contributors'
)
TYPE_COLORS: dict[str, str] = {"running": "#00c46a", "cycling": "#ffb545"}

_HEAD_HTML = """
<style>
  body {
    background: #2d3439;
    color: #ececec;
    font-family: "Manrope", Arial, sans-serif;
  }
  .mp-sidebar {
    background: #2d3439;
    height: 100vh;
    overflow-y: auto;
  }
  .mp-card {
    background: #42484d;
    border-radius: 5px;
  }
  .workout--running { border-left: 5px solid #00c46a; }
  .workout--cycling { border-left: 5px solid #ffb545; }
  .running-popup .leaflet-popup-content-wrapper { border-left: 5px solid #00c46a; }
  .cycling-popup .leaflet-popup-content-wrapper { border-left: 5px solid #ffb545; }
  .leaflet-popup-content-wrapper, .leaflet-popup-tip {
    background: #2d3439;
    color: #ececec;
  }
</style>
"""


def _latlng(args: Any) -> Coords | None:
    try:
        latlng = args["latlng"]
        return float(latlng["lat"]), float(latlng["lng"])
    except (KeyError, TypeError, ValueError):
        return None


class LeafletMapView:
    def __init__(self, leaflet: ui.leaflet) -> None:
        self._leaflet = leaflet

    def set_view(self, coords: Coords, zoom: int) -> None:
        self._leaflet.set_center(coords)
        self._leaflet.set_zoom(zoom)

    def on_click(self, handler: MapClickHandler) -> None:
        def _on_map_click(e: Any) -> None:
            coords = _latlng(e.args)
            if coords is None:
                logger.debug(f"Map click without coordinates: {e.args!r}")
                return
            handler(coords)

        self._leaflet.on("map-click", _on_map_click)

    def add_marker(self, coords: Coords) -> Any:
        return self._leaflet.marker(latlng=coords)

    def bind_popup(self, marker: Any, content: str, options: PopupOptions) -> None:
        marker.run_method("bindPopup", content, options.to_leaflet())

    def open_popup(self, marker: Any) -> None:
        marker.run_method("openPopup")

    def pan_to(self, coords: Coords, zoom: int, animation: dict[str, Any]) -> None:
        self._leaflet.run_map_method("setView", list(coords), zoom, animation)


class WebWorkoutForm:
    def __init__(
        self,
        card: ui.card,
        type_select: ui.select,
        distance_input: ui.number,
        duration_input: ui.number,
        cadence_input: ui.number,
        elevation_input: ui.number,
    ) -> None:
        self._card = card
        self._type = type_select
        self._distance = distance_input
        self._duration = duration_input
        self._cadence = cadence_input
        self._elevation = elevation_input

    def show(self) -> None:
        self._card.set_visibility(True)

    def hide(self) -> None:
        self._card.set_visibility(False)

    def show_fields_for(self, workout_type: WorkoutType) -> None:
        self._cadence.set_visibility(workout_type == "running")
        self._elevation.set_visibility(workout_type == "cycling")

    def focus_distance(self) -> None:
        self._distance.run_method("focus")

    def read(self) -> FormValues:
        return FormValues(
            type=str(self._type.value),
            distance=self._distance.value,
            duration=self._duration.value,
            cadence=self._cadence.value,
            elevation=self._elevation.value,
        )

    def clear(self) -> None:
        for field in (self._distance, self._duration, self._cadence, self._elevation):
            field.value = None


class SidebarList:
    """Workout entries, newest first, right below the form."""

    def __init__(self, container: ui.column) -> None:
        self._container = container
        self._on_select: Callable[[str], None] | None = None

    def set_select_handler(self, handler: Callable[[str], None]) -> None:
        self._on_select = handler

    def _select(self, workout_id: str) -> None:
        if self._on_select is not None:
            self._on_select(workout_id)

    def append(self, entry: WorkoutEntry) -> None:
        with self._container:
            with ui.card().classes(
                f"w-full mp-card cursor-pointer workout workout--{entry.type}"
            ) as card:
                ui.label(entry.title).classes("text-base font-semibold")
                with ui.row().classes("w-full gap-4"):
                    for detail in entry.details:
                        with ui.row().classes("items-baseline gap-1"):
                            ui.label(detail.icon)
                            ui.label(detail.value).classes("font-semibold")
                            ui.label(detail.unit).classes("text-xs uppercase text-slate-400")

                def on_pick(_: Any = None, picked_id: str = entry.id) -> None:
                    self._select(picked_id)

                card.on("click", on_pick)
        card.move(target_index=0)

    def clear(self) -> None:
        self._container.clear()


class WebNotifier:
    def notify(self, message: str) -> None:
        ui.notify(message, color="negative")


def run_web_ui(
    *,
    storage_dir: Path | None = None,
    host: str = "127.0.0.1",
    port: int = 8080,
    location: Coords | None = None,
    geolocation_timeout: float = 60.0,
) -> int:
    def make_geolocation() -> Geolocation:
        if location is not None:
            return FixedGeolocation(location)
        return BrowserGeolocation(timeout=geolocation_timeout)

    @ui.page("/")
    async def index(client: Client) -> None:
        ui.add_head_html(_HEAD_HTML)
        with ui.row().classes("w-full no-wrap gap-0"):
            with ui.column().classes("mp-sidebar w-[36rem] p-6 gap-3"):
                ui.label("MAPTY").classes("text-2xl font-bold tracking-wide")
                with ui.card().classes("w-full mp-card") as form_card:
                    with ui.grid(columns=2).classes("w-full gap-2"):
                        type_select = ui.select(
                            {"running": "Running", "cycling": "Cycling"},
                            value="running",
                            label="Type",
                        )
                        distance_input = ui.number("Distance (km)", placeholder="km")
                        duration_input = ui.number("Duration (min)", placeholder="min")
                        cadence_input = ui.number("Cadence (step/min)", placeholder="step/min")
                        elevation_input = ui.number("Elev Gain (m)", placeholder="meters")
                    submit_btn = ui.button("OK").props("color=positive")
                form_card.set_visibility(False)
                elevation_input.set_visibility(False)
                entries = ui.column().classes("w-full gap-3")
                reset_btn = ui.button("Reset workouts").props("outline color=white")
                ui.label("Click on the map to log a workout").classes("text-xs text-slate-400")

            leaflet = ui.leaflet(center=(0.0, 0.0), zoom=2).classes("grow h-screen")
            leaflet.clear_layers()
            leaflet.tile_layer(url_template=TILE_URL, options={"attribution": TILE_ATTRIBUTION})

        form = WebWorkoutForm(
            form_card,
            type_select,
            distance_input,
            duration_input,
            cadence_input,
            elevation_input,
        )
        sidebar = SidebarList(entries)
        controller = SessionController(
            store=WorkoutStore(FileStorage(storage_dir)),
            map_view=LeafletMapView(leaflet),
            geolocation=make_geolocation(),
            form=form,
            workout_list=sidebar,
            notifier=WebNotifier(),
        )
        sidebar.set_select_handler(controller.handle_list_click)

        def on_submit() -> None:
            controller.handle_submit()

        def on_type_change() -> None:
            controller.handle_type_change(cast(WorkoutType, type_select.value))

        def on_reset() -> None:
            controller.reset()
            ui.navigate.reload()

        type_select.on_value_change(lambda _: on_type_change())
        submit_btn.on_click(on_submit)
        for field in (distance_input, duration_input, cadence_input, elevation_input):
            field.on("keydown.enter", on_submit)
        reset_btn.on_click(on_reset)

        await client.connected()
        await leaflet.initialized()
        await controller.start()

    ui.run(host=host, port=port, reload=False, title="Mapty", show=False)
    return 0
