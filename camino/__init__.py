"""Camino de Santiago itinerary, map and travel helper service."""

__version__ = "0.1.0"
