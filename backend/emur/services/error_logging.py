"""
Error Logging Service

Process-wide logging setup and error telemetry shared by the API and the
forecast worker.

- configure_logging(): console handler plus two rotating files under LOGS_DIR
  (errors.log for ERROR and above, app_detailed.log for everything)
- ErrorLogger: writes a log line for every reported failure and, once a
  session factory is configured, an error_logs row administrators can query
  through /api/v1/error-logs

Usage:
    from emur.services.error_logging import error_logger

    try:
        ...
    except ForecastAPIError as e:
        error_logger.log_error(e, severity="error", context={"city": city})
"""

import logging
import sys
import traceback
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Callable, Dict, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from emur.core.config import Settings
from emur.models.error_log import ErrorLog


logger = logging.getLogger("error_logging")

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DETAILED_LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(funcName)s:%(lineno)d | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

MAX_LOG_BYTES = 10 * 1024 * 1024

SEVERITY_LEVELS = {
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}

# Keys whose values never reach the error_logs table
SENSITIVE_FIELDS = ("password", "token", "authorization", "key", "secret", "credential")

_configured = {"done": False, "file": False}


def _rotating_handler(path: Path, level: int, fmt: str, backups: int) -> RotatingFileHandler:
    handler = RotatingFileHandler(path, maxBytes=MAX_LOG_BYTES, backupCount=backups, encoding="utf-8")
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt, datefmt=DATE_FORMAT))
    return handler


def configure_logging(settings: Settings) -> bool:
    """
    Attach the console and file handlers to the root logger, once per process.

    An unwritable LOGS_DIR downgrades to console-only logging with a warning.

    Returns:
        True if the rotating files are active
    """
    if _configured["done"]:
        return _configured["file"]
    _configured["done"] = True

    root_logger = logging.getLogger()
    root_logger.setLevel(settings.LOG_LEVEL.upper())

    console = logging.StreamHandler(sys.stdout)
    console.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    root_logger.addHandler(console)

    logs_dir = Path(settings.LOGS_DIR)
    try:
        logs_dir.mkdir(parents=True, exist_ok=True)
        probe = logs_dir / ".write_test"
        probe.touch()
        probe.unlink()
    except OSError as e:
        logger.warning(f"Logs directory {logs_dir} is not writable ({e}), logging to console only")
        return False

    root_logger.addHandler(_rotating_handler(logs_dir / "errors.log", logging.ERROR, LOG_FORMAT, 10))
    root_logger.addHandler(_rotating_handler(logs_dir / "app_detailed.log", logging.DEBUG, DETAILED_LOG_FORMAT, 5))
    _configured["file"] = True
    return True


def sanitize_data(data: Any, depth: int = 0) -> Any:
    """
    Copy of data with secrets replaced.

    Values under sensitive keys become "[REDACTED]"; strings that look like
    a JWT (optionally prefixed by "Bearer ") become "[REDACTED_TOKEN]".
    """
    if depth > 10:
        return "[MAX_DEPTH]"
    if isinstance(data, dict):
        return {
            key: "[REDACTED]" if any(s in str(key).lower() for s in SENSITIVE_FIELDS) else sanitize_data(value, depth + 1)
            for key, value in data.items()
        }
    if isinstance(data, (list, tuple)):
        return [sanitize_data(item, depth + 1) for item in data]
    if isinstance(data, str) and len(data) > 20 and data.removeprefix("Bearer ").startswith("eyJ"):
        return "[REDACTED_TOKEN]"
    return data


def truncate_string(s: Optional[str], max_length: int) -> Optional[str]:
    if s is None or len(s) <= max_length:
        return s
    return s[:max_length] + f"... [TRUNCATED, total {len(s)} chars]"


def _origin(error: Exception) -> Dict[str, Optional[str]]:
    """Stack trace and last frame of the error being reported."""
    tb = error.__traceback__
    if tb is None:
        return {"stack_trace": None, "module": None, "function": None, "line_number": None}
    frame = traceback.extract_tb(tb)[-1]
    return {
        "stack_trace": "".join(traceback.format_exception(type(error), error, tb)),
        "module": frame.filename,
        "function": frame.name,
        "line_number": str(frame.lineno),
    }


def _request_fields(request: Any) -> Dict[str, Optional[str]]:
    if request is None:
        return {}
    return {
        "request_method": request.method,
        "request_path": request.url.path,
        "request_query": request.url.query or None,
        "client_ip": request.client.host if request.client else None,
        "user_agent": truncate_string(request.headers.get("user-agent"), 500),
    }


class ErrorLogger:
    """
    Reports failures to the log and to the error_logs table.

    Database storage stays off until set_db_session_factory() is called
    (application startup, worker entry point).
    """

    def __init__(self):
        self.db_session_factory: Optional[Callable[[], Session]] = None

    def set_db_session_factory(self, factory: Callable[[], Session]) -> None:
        self.db_session_factory = factory

    def log_error(
        self,
        error: Exception,
        request: Optional[Any] = None,
        user: Optional[Any] = None,
        severity: str = "error",
        context: Optional[Dict] = None,
        save_to_db: bool = True,
    ) -> Optional[int]:
        """
        Report a failure.

        Args:
            error: The exception being reported
            request: Starlette Request, when the failure happened in a request
            user: Requester TokenClaims (email, user_uuid), if authenticated
            severity: warning, error or critical
            context: Extra data, sanitized before storage
            save_to_db: False to only write the log line

        Returns:
            Id of the stored error_logs row, or None when nothing was stored
        """
        error_type = type(error).__name__
        message = str(error) or error_type
        fields = _request_fields(request)
        user_email = getattr(user, "email", None)

        logger.log(
            SEVERITY_LEVELS.get(severity, logging.INFO),
            f"{error_type}: {message} | User: {user_email or 'anonymous'} | Path: {fields.get('request_path') or 'N/A'}",
        )

        if not save_to_db or self.db_session_factory is None:
            return None

        origin = _origin(error)
        status_code = getattr(error, "status_code", None)
        row = ErrorLog(
            timestamp=datetime.now(timezone.utc),
            error_type=error_type,
            error_code=str(status_code) if status_code is not None else None,
            severity=severity,
            module=origin["module"],
            function=origin["function"],
            line_number=origin["line_number"],
            stack_trace=truncate_string(origin["stack_trace"], 20000),
            user_uuid=getattr(user, "user_uuid", None),
            user_email=user_email,
            message=truncate_string(message, 1000),
            context_data=sanitize_data(context) if context else None,
            **fields,
        )

        db = self.db_session_factory()
        try:
            db.add(row)
            db.commit()
            return row.id
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Failed to store error log: {e}")
            return None
        finally:
            db.close()


# Singleton instance
error_logger = ErrorLogger()


def configure_error_logging(db_session_factory: Callable[[], Session]) -> None:
    """Enable storage of error logs (API startup and worker entry point)."""
    error_logger.set_db_session_factory(db_session_factory)
    logger.info("Error logging system configured")
