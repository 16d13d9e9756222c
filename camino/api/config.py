# camino/api/config.py
"""Configuration management for the Camino API."""
import os
from dotenv import load_dotenv

load_dotenv()


def get_google_maps_config():
    """Get Google Maps configuration."""
    return {
        "api_key": os.getenv("GOOGLE_MAPS_API_KEY", ""),
        "client_id": os.getenv("maps_client_id", ""),
        "client_secret": os.getenv("maps_client_secret", "")
    }


def get_weather_config():
    """Get OpenWeather configuration."""
    return {
        "api_key": os.getenv("OPENWEATHER_API_KEY", ""),
        "base_url": os.getenv("OPENWEATHER_BASE_URL", "https://api.openweathermap.org"),
        "timeout_seconds": float(os.getenv("OPENWEATHER_TIMEOUT_SECONDS", "10")),
        # Cached weather is considered fresh for 15 minutes
        "refresh_interval_seconds": int(os.getenv("WEATHER_REFRESH_INTERVAL_SECONDS", "900")),
    }


def get_route_config():
    """Get route building and map display configuration."""
    return {
        # Pause between consecutive directions requests in overview mode
        "overview_delay_seconds": float(os.getenv("ROUTE_OVERVIEW_DELAY_SECONDS", "0.5")),
        "viewport_margin_degrees": float(os.getenv("MAP_VIEWPORT_MARGIN_DEGREES", "0.05")),
        "off_route_threshold_m": float(os.getenv("OFF_ROUTE_THRESHOLD_M", "500")),
    }


def get_session_config():
    """Get map session limits."""
    return {
        "max_concurrent_sessions": int(os.getenv("MAX_CONCURRENT_MAP_SESSIONS", "200")),
        "session_timeout_seconds": int(os.getenv("MAP_SESSION_TIMEOUT_SECONDS", "1800")),
        "cleanup_interval_seconds": int(os.getenv("MAP_SESSION_CLEANUP_INTERVAL_SECONDS", "60")),
    }


def get_websocket_config():
    """Get WebSocket configuration."""
    return {
        "ping_interval": int(os.getenv("WEBSOCKET_PING_INTERVAL", "25")),
        "ping_timeout": int(os.getenv("WEBSOCKET_PING_TIMEOUT", "60")),
        "cors_allowed_origins": os.getenv("WEBSOCKET_CORS_ORIGINS", "*").split(",")
    }


def get_data_dir():
    """Directory holding the persistent weather cache."""
    return os.getenv("CAMINO_DATA_DIR", os.path.join(os.getcwd(), "instance"))


def get_port():
    """Get port configuration."""
    return int(os.getenv("PORT", 5000))
