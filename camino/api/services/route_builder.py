# camino/api/services/route_builder.py
"""Stitch walking directions between consecutive points into one path."""

import logging
import threading
import time
from enum import Enum
from typing import Iterable, List, Optional

from camino.api.config import get_route_config
from camino.api.geo import polyline_length_m
from camino.api.models import Coordinate, RoutePath

logger = logging.getLogger(__name__)


class RouteMode(str, Enum):
    DETAIL = "detail"      # one day: start, waypoints, end
    OVERVIEW = "overview"  # whole itinerary: one point per day


class CancellationToken:
    """Cooperative cancellation flag shared between a build and its owner."""

    def __init__(self):
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def wait(self, seconds: float) -> bool:
        """Sleep up to ``seconds``; returns True if cancelled meanwhile."""
        return self._event.wait(seconds)


class RouteBuilder:
    """Builds a RoutePath from ordered points using a directions service.

    ``directions`` is anything with a ``walking_segment(origin, destination)``
    method returning a list of Coordinates or None.
    """

    def __init__(self, directions, overview_delay: Optional[float] = None):
        self.directions = directions
        if overview_delay is None:
            overview_delay = get_route_config()["overview_delay_seconds"]
        self.overview_delay = overview_delay

    @staticmethod
    def usable_coordinates(points: Iterable) -> List[Coordinate]:
        """Coordinates of the points that have one, in order."""
        return [p.coordinate for p in points if getattr(p, "coordinate", None) is not None]

    def build(self, points: Iterable, mode: RouteMode = RouteMode.DETAIL,
              token: Optional[CancellationToken] = None) -> Optional[RoutePath]:
        """Request one walking segment per consecutive pair and concatenate them.

        Returns None when fewer than two points have coordinates, when every
        segment failed, or when ``token`` was cancelled.
        """
        token = token or CancellationToken()
        coordinates = self.usable_coordinates(points)

        if len(coordinates) < 2:
            logger.debug(f"Only {len(coordinates)} usable point(s), no path to build")
            return None

        pairs = list(zip(coordinates, coordinates[1:]))
        segments = []
        start_time = time.time()

        for index, (origin, destination) in enumerate(pairs):
            if token.cancelled:
                logger.info(f"Route build cancelled before segment {index + 1}/{len(pairs)}")
                return None

            if mode == RouteMode.OVERVIEW and index > 0 and self.overview_delay > 0:
                if token.wait(self.overview_delay):
                    logger.info(f"Route build cancelled before segment {index + 1}/{len(pairs)}")
                    return None

            try:
                segment = self.directions.walking_segment(origin, destination)
            except Exception as e:
                logger.warning(f"Segment {index + 1}/{len(pairs)} raised, skipping: {e}")
                continue

            if not segment:
                logger.warning(f"Segment {index + 1}/{len(pairs)} unavailable, skipping")
                continue

            segments.append(tuple(segment))

        if token.cancelled:
            logger.info("Route build cancelled before publishing")
            return None

        path = RoutePath(segments=segments)
        if len(path.coordinates) < 2:
            logger.warning(f"No usable segments out of {len(pairs)}")
            return None

        duration = time.time() - start_time
        logger.info(
            f"Built {mode.value} route: {path.segment_count}/{len(pairs)} segments, "
            f"{len(path.coordinates)} points, {polyline_length_m(path.coordinates) / 1000:.1f} km in {duration:.2f}s"
        )
        return path


__all__ = ["RouteBuilder", "RouteMode", "CancellationToken"]
