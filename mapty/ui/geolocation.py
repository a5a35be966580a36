"""Position sources for the session controller."""

from __future__ import annotations

from typing import Any

from nicegui import ui

from mapty.core.ports import LocationUnavailable
from mapty.workout.model import Coords


_POSITION_JS = """
return await new Promise((resolve) => {
  if (!navigator.geolocation) {
    resolve(null);
    return;
  }
  navigator.geolocation.getCurrentPosition(
    (pos) => resolve({latitude: pos.coords.latitude, longitude: pos.coords.longitude}),
    () => resolve(null),
  );
});
"""


def parse_position(payload: Any) -> Coords:
    if not isinstance(payload, dict):
        raise LocationUnavailable("Browser did not report a position")
    try:
        return float(payload["latitude"]), float(payload["longitude"])
    except (KeyError, TypeError, ValueError) as exc:
        raise LocationUnavailable(f"Malformed position payload: {payload!r}") from exc


def parse_fixed_location(raw: str) -> Coords:
    parts = [p.strip() for p in raw.split(",")]
    if len(parts) != 2:
        raise ValueError("Location must be 'LAT,LNG'")
    lat, lng = float(parts[0]), float(parts[1])
    if not (-90 <= lat <= 90 and -180 <= lng <= 180):
        raise ValueError(f"Location out of range: {raw}")
    return lat, lng


class BrowserGeolocation:
    """Asks the connected browser once for its position."""

    def __init__(self, timeout: float = 60.0) -> None:
        self._timeout = timeout

    async def get_current_position(self) -> Coords:
        try:
            payload = await ui.run_javascript(_POSITION_JS, timeout=self._timeout)
        except TimeoutError as exc:
            raise LocationUnavailable("Browser did not answer the position request") from exc
        return parse_position(payload)


class FixedGeolocation:
    def __init__(self, coords: Coords | None) -> None:
        self._coords = coords

    async def get_current_position(self) -> Coords:
        if self._coords is None:
            raise LocationUnavailable("No fixed location configured")
        return self._coords
