"""Shared data structures for the itinerary, route and map layers.

Static itinerary values (coordinates, points, destinations) are frozen so
the tables in ``camino.api.data`` can be shared freely between sessions.
Map annotations and paths are rebuilt on every display refresh.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class Coordinate:
    """A WGS84 position."""

    lat: float
    lng: float

    def as_tuple(self) -> tuple[float, float]:
        return self.lat, self.lng

    def to_dict(self) -> dict:
        return {"lat": self.lat, "lng": self.lng}


@dataclass(frozen=True)
class LocationPoint:
    """A named point along one stage (start, waypoint or end)."""

    name: str
    coordinate: Optional[Coordinate] = None
    distance: Optional[float] = None  # km from the stage start
    services: Optional[str] = None
    details: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "coordinate": self.coordinate.to_dict() if self.coordinate else None,
            "distance": self.distance,
            "services": self.services,
            "details": self.details,
        }


@dataclass(frozen=True)
class RouteDetail:
    """Turn-by-turn description of a single day."""

    day: int
    title: Optional[str] = None
    start_point: Optional[LocationPoint] = None
    waypoints: tuple[LocationPoint, ...] = ()
    end_point: Optional[LocationPoint] = None
    ascent: Optional[int] = None
    descent: Optional[int] = None

    def points(self) -> list[LocationPoint]:
        """Start, waypoints and end in walking order."""
        ordered = []
        if self.start_point is not None:
            ordered.append(self.start_point)
        ordered.extend(self.waypoints)
        if self.end_point is not None:
            ordered.append(self.end_point)
        return ordered

    def to_dict(self) -> dict:
        return {
            "day": self.day,
            "title": self.title,
            "start_point": self.start_point.to_dict() if self.start_point else None,
            "waypoints": [w.to_dict() for w in self.waypoints],
            "end_point": self.end_point.to_dict() if self.end_point else None,
            "ascent": self.ascent,
            "descent": self.descent,
        }


@dataclass(frozen=True)
class Destination:
    """One day of the itinerary: where the pilgrim sleeps that night."""

    day: int
    location_name: str
    hotel_name: str
    coordinate: Coordinate
    distance: float = 0.0  # km walked that day
    cumulative_distance: float = 0.0
    content: str = ""
    date: Optional[date] = None

    def to_dict(self) -> dict:
        return {
            "day": self.day,
            "location_name": self.location_name,
            "hotel_name": self.hotel_name,
            "coordinate": self.coordinate.to_dict(),
            "distance": self.distance,
            "cumulative_distance": self.cumulative_distance,
            "content": self.content,
            "date": self.date.isoformat() if self.date else None,
        }


@dataclass
class MapAnnotation:
    """A marker on the map, projected from a LocationPoint or Destination."""

    name: str
    coordinate: Coordinate
    subtitle: Optional[str] = None
    day: Optional[int] = None
    is_waypoint: bool = False
    is_start: bool = False
    is_end: bool = False
    is_destination: bool = False

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "coordinate": self.coordinate.to_dict(),
            "subtitle": self.subtitle,
            "day": self.day,
            "is_waypoint": self.is_waypoint,
            "is_start": self.is_start,
            "is_end": self.is_end,
            "is_destination": self.is_destination,
        }


@dataclass
class RoutePath:
    """A stitched walking path, one segment per successful directions call."""

    segments: list[tuple[Coordinate, ...]] = field(default_factory=list)

    @property
    def coordinates(self) -> list[Coordinate]:
        return [c for segment in self.segments for c in segment]

    @property
    def segment_count(self) -> int:
        return len(self.segments)

    def to_dict(self) -> dict:
        return {
            "segment_count": self.segment_count,
            "coordinates": [c.to_dict() for c in self.coordinates],
        }


@dataclass(frozen=True)
class MapRegion:
    """Visible map area: a centre and a span in degrees."""

    center: Coordinate
    lat_span: float
    lng_span: float

    def to_dict(self) -> dict:
        return {
            "center": self.center.to_dict(),
            "lat_span": self.lat_span,
            "lng_span": self.lng_span,
        }
