# camino/api/services/map_service.py
"""Service layer for map display: annotations, route path and viewport."""

import itertools
import logging
import threading
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

from camino.api.config import get_route_config
from camino.api.data.destinations import get_all_destinations
from camino.api.data.route_details import get_route_detail
from camino.api.geo import fit_region, polyline_length_m
from camino.api.models import Coordinate, MapAnnotation, MapRegion, RoutePath
from camino.api.services.route_builder import CancellationToken, RouteBuilder, RouteMode

logger = logging.getLogger(__name__)

DEFAULT_REGION = MapRegion(center=Coordinate(43.1636, -1.2386), lat_span=5.0, lng_span=5.0)


class MapDisplayState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    EMPTY = "empty"
    CANCELLED = "cancelled"


class RefreshRequest:
    """One display refresh for a focused day (None = overview)."""

    def __init__(self, generation: int, day: Optional[int], mode: RouteMode,
                 points: list, annotations: List[MapAnnotation]):
        self.generation = generation
        self.day = day
        self.mode = mode
        self.points = points
        self.annotations = annotations
        self.token = CancellationToken()
        self.state = MapDisplayState.LOADING

    def cancel(self) -> None:
        self.token.cancel()
        if self.state == MapDisplayState.LOADING:
            self.state = MapDisplayState.CANCELLED


def build_overview_annotations(destinations) -> List[MapAnnotation]:
    return [
        MapAnnotation(
            name=d.location_name,
            coordinate=d.coordinate,
            subtitle=d.hotel_name,
            day=d.day,
            is_destination=True,
        )
        for d in destinations
    ]


def build_detail_annotations(detail) -> List[MapAnnotation]:
    """Annotations for the start, waypoints and end that have coordinates."""
    if detail is None:
        return []

    annotations = []
    roles = [(detail.start_point, "start")]
    roles.extend((w, "waypoint") for w in detail.waypoints)
    roles.append((detail.end_point, "end"))

    for point, role in roles:
        if point is None or point.coordinate is None:
            continue
        annotations.append(
            MapAnnotation(
                name=point.name,
                coordinate=point.coordinate,
                subtitle=point.services,
                day=detail.day,
                is_start=role == "start",
                is_waypoint=role == "waypoint",
                is_end=role == "end",
            )
        )
    return annotations


class MapDisplay:
    """Map state for one viewer.

    Each focus change starts a new generation. Only the request of the current
    generation may publish; superseded requests end up CANCELLED and leave the
    display untouched even if their directions calls complete later.
    """

    def __init__(self, route_builder: RouteBuilder,
                 destinations_provider: Callable[[], list] = get_all_destinations,
                 route_detail_provider: Callable[[int], Any] = get_route_detail,
                 margin_degrees: Optional[float] = None):
        self.route_builder = route_builder
        self.destinations_provider = destinations_provider
        self.route_detail_provider = route_detail_provider
        if margin_degrees is None:
            margin_degrees = get_route_config()["viewport_margin_degrees"]
        self.margin_degrees = margin_degrees

        self.state = MapDisplayState.IDLE
        self.focused_day: Optional[int] = None
        self.annotations: List[MapAnnotation] = []
        self.path: Optional[RoutePath] = None
        self.region: MapRegion = DEFAULT_REGION

        self._lock = threading.Lock()
        self._generations = itertools.count(1)
        self._current: Optional[RefreshRequest] = None

    @property
    def generation(self) -> int:
        return self._current.generation if self._current else 0

    def focus(self, day: Optional[int]) -> RefreshRequest:
        """Start a refresh for ``day``, superseding any request in flight."""
        if day is None:
            mode = RouteMode.OVERVIEW
            points = list(self.destinations_provider())
            annotations = build_overview_annotations(points)
        else:
            mode = RouteMode.DETAIL
            detail = self.route_detail_provider(day)
            points = detail.points() if detail else []
            annotations = build_detail_annotations(detail)

        with self._lock:
            previous = self._current
            request = RefreshRequest(next(self._generations), day, mode, points, annotations)
            self._current = request
            self.focused_day = day
            self.state = MapDisplayState.LOADING

        if previous is not None and previous.state == MapDisplayState.LOADING:
            previous.cancel()
            logger.info(f"Superseded map refresh #{previous.generation} (day {previous.day})")

        logger.debug(f"Map refresh #{request.generation} started for day {day} ({mode.value})")
        return request

    def run(self, request: RefreshRequest) -> MapDisplayState:
        """Build the path for ``request`` and publish it if still current."""
        if not request.annotations:
            return self._publish(request, None)

        path = self.route_builder.build(request.points, request.mode, request.token)
        return self._publish(request, path)

    def refresh(self, day: Optional[int]) -> MapDisplayState:
        return self.run(self.focus(day))

    def cancel(self) -> None:
        """Cancel whatever refresh is in flight."""
        with self._lock:
            current = self._current
            if current is None or current.state != MapDisplayState.LOADING:
                return
            current.cancel()
            self.state = MapDisplayState.CANCELLED

    def _publish(self, request: RefreshRequest, path: Optional[RoutePath]) -> MapDisplayState:
        with self._lock:
            if request is not self._current or request.token.cancelled:
                request.state = MapDisplayState.CANCELLED
                logger.debug(f"Discarding stale map refresh #{request.generation}")
                return request.state

            if not request.annotations:
                self.annotations = []
                self.path = None
                request.state = MapDisplayState.EMPTY
            else:
                self.annotations = request.annotations
                self.path = path
                fit_to = path.coordinates if path else [a.coordinate for a in request.annotations]
                region = fit_region(fit_to, self.margin_degrees)
                if region is not None:
                    self.region = region
                request.state = MapDisplayState.SUCCESS

            self.state = request.state

        logger.info(
            f"Map refresh #{request.generation} {request.state.value}: "
            f"{len(self.annotations)} annotations, "
            f"{self.path.segment_count if self.path else 0} segments"
        )
        return request.state

    def snapshot(self) -> Dict[str, Any]:
        with self._lock:
            return {
                "state": self.state.value,
                "generation": self.generation,
                "focused_day": self.focused_day,
                "mode": RouteMode.OVERVIEW.value if self.focused_day is None else RouteMode.DETAIL.value,
                "annotations": [a.to_dict() for a in self.annotations],
                "path": self.path.to_dict() if self.path else None,
                "path_length_m": polyline_length_m(self.path.coordinates) if self.path else 0.0,
                "region": self.region.to_dict(),
            }


__all__ = ["MapDisplay", "MapDisplayState", "RefreshRequest", "DEFAULT_REGION"]
