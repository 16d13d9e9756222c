# camino/api/geo.py
from __future__ import annotations

import math
from typing import Dict, Iterable, List

from camino.api.models import Coordinate, MapRegion

EARTH_RADIUS_M = 6371000.0


def haversine_m(a: Coordinate, b: Coordinate) -> float:
    """Great-circle distance in metres between two coordinates."""
    phi1 = math.radians(a.lat)
    phi2 = math.radians(b.lat)
    dphi = math.radians(b.lat - a.lat)
    dlmb = math.radians(b.lng - a.lng)

    s = math.sin(dphi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(dlmb / 2) ** 2
    return 2 * EARTH_RADIUS_M * math.asin(math.sqrt(s))


def polyline_length_m(coordinates: List[Coordinate]) -> float:
    total = 0.0
    for i in range(1, len(coordinates)):
        total += haversine_m(coordinates[i - 1], coordinates[i])
    return total


def calculate_bounds(coordinates: Iterable[Coordinate]) -> Dict[str, float]:
    """Bounding box of the coordinates, or {} when there are none."""
    lats = []
    lngs = []
    for c in coordinates:
        lats.append(c.lat)
        lngs.append(c.lng)

    if not lats:
        return {}

    return {
        "north": max(lats),
        "south": min(lats),
        "east": max(lngs),
        "west": min(lngs),
    }


def fit_region(coordinates: Iterable[Coordinate], margin_degrees: float) -> MapRegion | None:
    """Region covering every coordinate, padded by ``margin_degrees`` on each side."""
    bounds = calculate_bounds(coordinates)
    if not bounds:
        return None

    center = Coordinate(
        lat=(bounds["north"] + bounds["south"]) / 2,
        lng=(bounds["east"] + bounds["west"]) / 2,
    )
    return MapRegion(
        center=center,
        lat_span=(bounds["north"] - bounds["south"]) + 2 * margin_degrees,
        lng_span=(bounds["east"] - bounds["west"]) + 2 * margin_degrees,
    )
