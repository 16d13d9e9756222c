# camino/api/directions.py
from __future__ import annotations

import logging
from typing import List

import googlemaps
from googlemaps import convert, exceptions

from camino.api.config import get_google_maps_config
from camino.api.models import Coordinate

logger = logging.getLogger(__name__)


class SingleAttemptClient(googlemaps.Client):
    """googlemaps client that sends each request once.

    The stock client re-sends 5xx responses with exponential backoff for up to
    ``retry_timeout`` seconds. A failed segment is skipped instead.
    """

    def _request(self, url, params, first_request_time=None, retry_counter=0, *args, **kwargs):
        if retry_counter > 0:
            raise exceptions.TransportError(f"{url} failed with a retriable status")
        return super()._request(url, params, first_request_time, retry_counter, *args, **kwargs)


class DirectionsService:
    """Walking directions between two coordinates via the Google Directions API.

    A failed lookup is reported as ``None``; callers decide whether to skip the
    segment. The googlemaps client is created on first use so a process without
    an API key can still start and serve everything that does not need routing.
    """

    def __init__(self, client: googlemaps.Client | None = None, api_key: str | None = None):
        self._client = client
        self._api_key = api_key

    def _get_client(self) -> googlemaps.Client | None:
        """Return a cached googlemaps.Client instance."""
        if self._client is None:
            api_key = self._api_key or get_google_maps_config().get("api_key", "")
            if not api_key:
                logger.error("No Google Maps API key found in config")
                return None
            try:
                logger.info(f"Initializing Google Maps client with key: {api_key[:10]}...")
                self._client = SingleAttemptClient(key=api_key, retry_over_query_limit=False)
            except ValueError as e:
                logger.error(f"Failed to initialize Google Maps client: {e}")
                return None
        return self._client

    def walking_segment(self, origin: Coordinate, destination: Coordinate) -> List[Coordinate] | None:
        """Decoded walking polyline from ``origin`` to ``destination``, or None."""
        client = self._get_client()
        if client is None:
            return None

        try:
            routes = client.directions(
                origin.as_tuple(),
                destination.as_tuple(),
                mode="walking",
            )
        except (exceptions.ApiError, exceptions.TransportError, exceptions.Timeout) as e:
            logger.warning(f"Directions request {origin} -> {destination} failed: {e}")
            return None

        if not routes:
            logger.warning(f"No walking route found {origin} -> {destination}")
            return None

        encoded = routes[0].get("overview_polyline", {}).get("points")
        if not encoded:
            logger.warning(f"Directions response without polyline {origin} -> {destination}")
            return None

        points = convert.decode_polyline(encoded)
        logger.debug(f"Decoded {len(points)} points for {origin} -> {destination}")
        return [Coordinate(p["lat"], p["lng"]) for p in points]


__all__ = ["DirectionsService", "SingleAttemptClient"]
