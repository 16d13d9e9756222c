# camino/api/services/weather_service.py
"""Current conditions and forecasts for itinerary destinations (OpenWeather)."""

from __future__ import annotations

import logging
import os
from datetime import datetime, timedelta, timezone
from typing import Callable, Dict, Iterable, Optional, Tuple

import requests
import requests_cache

from camino.api.config import get_data_dir, get_weather_config
from camino.api.data.destinations import get_destination
from camino.api.errors import (
    AuthenticationError,
    InvalidDataError,
    NetworkError,
    NotFoundError,
    error_for_status,
)
from camino.api.models import Coordinate, Destination

logger = logging.getLogger(__name__)

CURRENT_WEATHER_PATH = "/data/2.5/weather"
FORECAST_PATH = "/data/2.5/forecast"

_STATUS_MESSAGES = {
    401: "Unauthorized - Check API key",
    404: "Resource not found",
}


def create_weather_session(refresh_interval: timedelta, cache_name: Optional[str] = None,
                           **kwargs) -> requests_cache.CachedSession:
    """SQLite-backed session under the data dir; forecasts always go to the network."""
    if cache_name is None:
        data_dir = get_data_dir()
        os.makedirs(data_dir, exist_ok=True)
        cache_name = os.path.join(data_dir, "weather")
    return requests_cache.CachedSession(
        cache_name,
        expire_after=refresh_interval,
        urls_expire_after={f"*{FORECAST_PATH}": requests_cache.DO_NOT_CACHE},
        **kwargs,
    )


def _fetched_at(response: requests.Response) -> datetime:
    created_at = getattr(response, "created_at", None)
    if not getattr(response, "from_cache", False) or created_at is None:
        return datetime.now(timezone.utc)
    if created_at.tzinfo is None:
        created_at = created_at.replace(tzinfo=timezone.utc)
    return created_at


class WeatherService:
    """Fetches weather for itinerary days.

    Current conditions go through an expiring HTTP cache, so a day's blob is
    served from disk for ``refresh_interval`` seconds after it was fetched.
    """

    def __init__(self, session: Optional[requests.Session] = None,
                 api_key: Optional[str] = None, base_url: Optional[str] = None,
                 timeout: Optional[float] = None, refresh_interval: Optional[float] = None,
                 destination_lookup: Callable[[int], Optional[Destination]] = get_destination):
        config = get_weather_config()
        if refresh_interval is None:
            refresh_interval = config["refresh_interval_seconds"]
        self.refresh_interval = timedelta(seconds=refresh_interval)
        self.session = session if session is not None else create_weather_session(self.refresh_interval)
        self.api_key = api_key if api_key is not None else config["api_key"]
        self.base_url = (base_url or config["base_url"]).rstrip("/")
        self.timeout = timeout if timeout is not None else config["timeout_seconds"]
        self.destination_lookup = destination_lookup

    def _destination(self, day: int) -> Destination:
        destination = self.destination_lookup(day)
        if destination is None:
            raise NotFoundError(f"No destination for day {day}")
        return destination

    def _request(self, path: str, coordinate: Coordinate) -> requests.Response:
        if not self.api_key:
            raise AuthenticationError("OpenWeather API key is not configured")

        params = {
            "lat": coordinate.lat,
            "lon": coordinate.lng,
            "units": "metric",
            "appid": self.api_key,
        }
        try:
            response = self.session.get(f"{self.base_url}{path}", params=params, timeout=self.timeout)
        except requests.exceptions.Timeout:
            raise NetworkError("Request timed out")
        except requests.exceptions.ConnectionError:
            raise NetworkError("No internet connection")
        except requests.exceptions.RequestException as e:
            raise NetworkError(str(e))

        if not 200 <= response.status_code < 300:
            status = response.status_code
            if 500 <= status <= 599:
                message = "Server error - Please try again later"
            else:
                message = _STATUS_MESSAGES.get(status, f"HTTP Error: {status}")
            logger.warning(f"OpenWeather {path} returned {status}")
            raise error_for_status(status, message)
        return response

    @staticmethod
    def _decode(response: requests.Response) -> dict:
        try:
            return response.json()
        except ValueError as e:
            raise InvalidDataError(f"Failed to decode response: {e}")

    def fetch_current(self, day: int) -> Tuple[dict, datetime]:
        """Current conditions for ``day`` and when they were fetched."""
        destination = self._destination(day)
        response = self._request(CURRENT_WEATHER_PATH, destination.coordinate)
        if getattr(response, "from_cache", False):
            logger.debug(f"Weather for day {day} served from cache")
        else:
            logger.debug(f"Fetched current weather for day {day} ({destination.location_name})")
        return self._decode(response), _fetched_at(response)

    def get_weather_report(self, days: Iterable[int]) -> Tuple[Dict[int, dict], Optional[datetime]]:
        """Blobs for ``days`` plus the fetch time of the oldest one."""
        days = list(dict.fromkeys(days))
        for day in days:
            self._destination(day)

        weather = {}
        oldest = None
        for day in days:
            weather[day], fetched_at = self.fetch_current(day)
            if oldest is None or fetched_at < oldest:
                oldest = fetched_at
        return weather, oldest

    def get_weather(self, days: Iterable[int]) -> Dict[int, dict]:
        return self.get_weather_report(days)[0]

    def get_forecast(self, day: int) -> dict:
        destination = self._destination(day)
        logger.debug(f"Fetching forecast for day {day} ({destination.location_name})")
        return self._decode(self._request(FORECAST_PATH, destination.coordinate))

    def clear_cache(self) -> None:
        self.session.cache.clear()
        logger.info("Weather cache cleared")


__all__ = ["WeatherService", "create_weather_session"]
