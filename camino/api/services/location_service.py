# camino/api/services/location_service.py
"""User location events and the off-route tracker fed by them."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, List, Optional, Union

from camino.api.config import get_route_config
from camino.api.data.destinations import nearest_destination
from camino.api.models import Coordinate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LocationUpdate:
    coordinate: Coordinate
    accuracy: Optional[float] = None  # metres
    timestamp: Optional[datetime] = None


@dataclass(frozen=True)
class LocationFailure:
    message: str


LocationEvent = Union[LocationUpdate, LocationFailure]


class Subscription:
    def __init__(self, stream: "EventStream", callback: Callable):
        self._stream = stream
        self.callback = callback
        self.active = True

    def cancel(self) -> None:
        if self.active:
            self.active = False
            self._stream._unsubscribe(self)


class EventStream:
    """Thread-safe publish/subscribe fan-out.

    Subscribers are called synchronously in subscription order. One failing
    subscriber is logged and does not stop delivery to the others.
    """

    def __init__(self, name: str = "events"):
        self.name = name
        self._subscriptions: List[Subscription] = []
        self._lock = threading.Lock()

    def subscribe(self, callback: Callable) -> Subscription:
        subscription = Subscription(self, callback)
        with self._lock:
            self._subscriptions.append(subscription)
        return subscription

    def _unsubscribe(self, subscription: Subscription) -> None:
        with self._lock:
            if subscription in self._subscriptions:
                self._subscriptions.remove(subscription)

    @property
    def subscriber_count(self) -> int:
        with self._lock:
            return len(self._subscriptions)

    def publish(self, event) -> int:
        """Deliver ``event``; returns how many subscribers handled it cleanly."""
        with self._lock:
            subscribers = list(self._subscriptions)

        delivered = 0
        for subscription in subscribers:
            try:
                subscription.callback(event)
                delivered += 1
            except Exception as e:
                logger.error(f"Subscriber on '{self.name}' failed for {type(event).__name__}: {e}")
        return delivered


class LocationTracker:
    """Keeps the latest user position relative to the itinerary."""

    def __init__(self, stream: EventStream, off_route_threshold_m: Optional[float] = None,
                 nearest_lookup=nearest_destination):
        if off_route_threshold_m is None:
            off_route_threshold_m = get_route_config()["off_route_threshold_m"]
        self.off_route_threshold_m = off_route_threshold_m
        self.nearest_lookup = nearest_lookup

        self.user_location: Optional[Coordinate] = None
        self.accuracy: Optional[float] = None
        self.nearest_day: Optional[int] = None
        self.distance_to_route_m: Optional[float] = None
        self.is_off_route = False
        self.last_error: Optional[str] = None

        self._lock = threading.Lock()
        self._subscription = stream.subscribe(self.handle)

    def handle(self, event: LocationEvent) -> None:
        if isinstance(event, LocationUpdate):
            self._on_update(event)
        elif isinstance(event, LocationFailure):
            with self._lock:
                self.last_error = event.message
            logger.warning(f"Location unavailable: {event.message}")
        else:
            logger.debug(f"Ignoring unknown location event {event!r}")

    def _on_update(self, event: LocationUpdate) -> None:
        destination, distance = self.nearest_lookup(event.coordinate)
        with self._lock:
            self.user_location = event.coordinate
            self.accuracy = event.accuracy
            self.last_error = None
            if destination is None:
                self.nearest_day = None
                self.distance_to_route_m = None
                self.is_off_route = False
            else:
                self.nearest_day = destination.day
                self.distance_to_route_m = distance
                self.is_off_route = distance > self.off_route_threshold_m

        if self.is_off_route:
            logger.info(f"User is {distance:.0f} m from day {destination.day}, off route")

    def stop(self) -> None:
        self._subscription.cancel()

    def to_dict(self) -> dict:
        with self._lock:
            return {
                "user_location": self.user_location.to_dict() if self.user_location else None,
                "accuracy": self.accuracy,
                "nearest_day": self.nearest_day,
                "distance_to_route_m": self.distance_to_route_m,
                "is_off_route": self.is_off_route,
                "last_error": self.last_error,
            }


__all__ = [
    "EventStream",
    "Subscription",
    "LocationUpdate",
    "LocationFailure",
    "LocationTracker",
]
