"""
Route Model

Static, ordered list of waypoints from the trailhead to the summit.
A route is fixed for the lifetime of a trip session.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator

import yaml

from summit_pacer.shared.constants import Terrain
from .exceptions import RouteDefinitionError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RouteSegment:
    """
    A waypoint on the route.

    `terrain` is the terrain of the leg arriving at this waypoint.
    Only the trailhead (mile 0) has terrain START.
    """

    mile: float
    location: str
    terrain: Terrain
    elevation: float


class Route:
    """
    Validated, immutable sequence of route segments.

    Invariants:
    - at least two segments
    - first segment is mile 0 with terrain START, no other START
    - miles strictly increasing
    - elevation non-decreasing (ascent profile)
    - last segment is the summit
    """

    def __init__(self, segments: Iterable[RouteSegment], name: str = "Route"):
        self.name = name
        self._segments: tuple[RouteSegment, ...] = tuple(segments)
        self._validate()

    def _validate(self) -> None:
        segments = self._segments
        if len(segments) < 2:
            raise RouteDefinitionError(f"{self.name}: a route needs a trailhead and a summit")

        first = segments[0]
        if first.mile != 0 or first.terrain != Terrain.START:
            raise RouteDefinitionError(
                f"{self.name}: first segment must be mile 0 with terrain 'start'"
            )

        for prev, seg in zip(segments, segments[1:]):
            if seg.terrain == Terrain.START:
                raise RouteDefinitionError(
                    f"{self.name}: terrain 'start' is only allowed at mile 0 (found at {seg.mile})"
                )
            if seg.mile <= prev.mile:
                raise RouteDefinitionError(
                    f"{self.name}: miles must be strictly increasing ({prev.mile} -> {seg.mile})"
                )
            if seg.elevation < prev.elevation:
                raise RouteDefinitionError(
                    f"{self.name}: elevation must not decrease ({prev.mile} -> {seg.mile})"
                )

    @property
    def segments(self) -> tuple[RouteSegment, ...]:
        return self._segments

    @property
    def trailhead(self) -> RouteSegment:
        return self._segments[0]

    @property
    def summit(self) -> RouteSegment:
        return self._segments[-1]

    def __iter__(self) -> Iterator[RouteSegment]:
        return iter(self._segments)

    def __len__(self) -> int:
        return len(self._segments)

    def __getitem__(self, index: int) -> RouteSegment:
        return self._segments[index]

    def resume_index(self, from_mile: float) -> int:
        """
        Index of the first segment at or beyond `from_mile`.

        Falls back to the summit index when `from_mile` is past the summit.
        """
        for i, seg in enumerate(self._segments):
            if seg.mile >= from_mile:
                return i
        return len(self._segments) - 1

    def terrain_for_mile(self, mile: float) -> Terrain:
        """Terrain of the last segment whose mile is <= `mile` (FLAT if none)."""
        for seg in reversed(self._segments):
            if mile >= seg.mile:
                return seg.terrain
        return Terrain.FLAT


# Middle Teton via the Southwest Couloir, from Lupine Meadows.
MIDDLE_TETON_ROUTE = Route(
    [
        RouteSegment(0, "Lupine Meadows Trailhead", Terrain.START, 6732),
        RouteSegment(1, "Forest Trail", Terrain.FLAT, 7332),
        RouteSegment(2, "Switchbacks Begin", Terrain.FLAT, 7932),
        RouteSegment(3, "Garnet Canyon Junction", Terrain.FLAT, 8532),
        RouteSegment(3.5, "Enter Garnet Canyon", Terrain.STEADY, 8707),
        RouteSegment(4, "Approaching Platforms", Terrain.STEADY, 8957),
        RouteSegment(4.2, "The Platforms", Terrain.STEADY, 9200),
        RouteSegment(4.7, "The Meadows", Terrain.STEADY, 9500),
        RouteSegment(5.2, "Boulder Field Midpoint", Terrain.BOULDER, 10475),
        RouteSegment(5.7, "Middle/South Teton Saddle", Terrain.BOULDER, 11450),
        RouteSegment(6.1, "Lower Southwest Couloir", Terrain.TECHNICAL, 12000),
        RouteSegment(6.5, "Middle Teton Summit", Terrain.TECHNICAL, 12804),
    ],
    name="Middle Teton Southwest Couloir",
)


def load_route(path: Path | str) -> Route:
    """
    Load a route definition from YAML.

    Expected layout:

        name: Middle Teton Southwest Couloir
        segments:
          - {mile: 0, location: Lupine Meadows Trailhead, terrain: start, elevation: 6732}
          - {mile: 1, location: Forest Trail, terrain: flat, elevation: 7332}

    Raises:
        RouteDefinitionError: If the file is malformed or breaks a route invariant
    """
    path = Path(path)
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if not isinstance(data, dict) or not isinstance(data.get("segments"), list):
        raise RouteDefinitionError(f"{path}: expected a mapping with a 'segments' list")

    name = data.get("name") or path.stem
    segments = []
    for raw in data["segments"]:
        try:
            segments.append(
                RouteSegment(
                    mile=float(raw["mile"]),
                    location=str(raw["location"]),
                    terrain=Terrain(raw["terrain"]),
                    elevation=float(raw["elevation"]),
                )
            )
        except (KeyError, TypeError, ValueError) as e:
            raise RouteDefinitionError(f"{name}: invalid segment {raw!r}: {e}") from e

    route = Route(segments, name=name)
    logger.info(f"Loaded route '{route.name}' with {len(route)} segments from {path}")
    return route
