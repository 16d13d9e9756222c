"""Application error taxonomy and the alert log shown to users.

Every error carries a user-facing message and a severity. The severity only
picks a display style and a logging level; nothing here retries or recovers.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List, Optional

logger = logging.getLogger(__name__)


class Severity(str, Enum):
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"

    @property
    def title(self) -> str:
        return {
            Severity.INFO: "Information",
            Severity.WARNING: "Warning",
            Severity.ERROR: "Error",
            Severity.CRITICAL: "Critical Error",
        }[self]

    @property
    def log_level(self) -> int:
        return {
            Severity.INFO: logging.INFO,
            Severity.WARNING: logging.WARNING,
            Severity.ERROR: logging.ERROR,
            Severity.CRITICAL: logging.CRITICAL,
        }[self]


class AppError(Exception):
    """Base class for errors that are shown to the user."""

    title = "Error"
    severity = Severity.INFO
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {
            "error": self.title,
            "message": self.message,
            "severity": self.severity.value,
        }


class NetworkError(AppError):
    title = "Network Error"
    severity = Severity.WARNING
    status_code = 502


class InvalidDataError(AppError):
    title = "Data Error"
    severity = Severity.WARNING
    status_code = 400


class AuthenticationError(AppError):
    title = "Authentication Error"
    severity = Severity.ERROR
    status_code = 401


class PermissionDeniedError(AppError):
    title = "Permission Error"
    severity = Severity.ERROR
    status_code = 403


class NotFoundError(AppError):
    title = "Not Found"
    severity = Severity.WARNING
    status_code = 404


class ServerError(AppError):
    title = "Server Error"
    severity = Severity.CRITICAL
    status_code = 502


class GeneralError(AppError):
    title = "Error"
    severity = Severity.INFO
    status_code = 500


def error_for_status(status_code: int, message: str) -> AppError:
    """Map an upstream HTTP status code to an AppError."""
    if status_code == 400:
        return InvalidDataError(message)
    if status_code == 401:
        return AuthenticationError(message)
    if status_code == 403:
        return PermissionDeniedError(message)
    if status_code == 404:
        return NotFoundError(message)
    if status_code == 429:
        return NetworkError("Rate limit exceeded")
    if 500 <= status_code <= 599:
        return ServerError(message)
    return NetworkError(message)


@dataclass
class DisplayableError:
    message: str
    severity: Severity = Severity.ERROR
    created_at: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> dict:
        return {
            "title": self.severity.title,
            "message": self.message,
            "severity": self.severity.value,
            "created_at": self.created_at.isoformat(),
        }


class AlertManager:
    """Keeps the error currently shown to the user and a log of past ones."""

    def __init__(self):
        self.active_error: Optional[DisplayableError] = None
        self._log: List[DisplayableError] = []
        self._lock = threading.Lock()

    @property
    def is_showing_error(self) -> bool:
        return self.active_error is not None

    def show_error(self, message: str, severity: Severity = Severity.ERROR) -> DisplayableError:
        error = DisplayableError(message=message, severity=severity)
        with self._lock:
            self.active_error = error
            self._log.append(error)
        logger.log(severity.log_level, "[%s] %s", severity.value.upper(), message)
        return error

    def show_app_error(self, error: AppError) -> DisplayableError:
        return self.show_error(error.message, error.severity)

    def dismiss_error(self) -> None:
        with self._lock:
            self.active_error = None

    def get_error_log(self) -> List[DisplayableError]:
        with self._lock:
            return list(self._log)
