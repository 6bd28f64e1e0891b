import os
import json
import logging
from typing import Dict, Any, Optional
from datetime import datetime, timezone

# Import sentry_sdk at module level for testing
try:
    import sentry_sdk
except ImportError:
    sentry_sdk = None

logger = logging.getLogger(__name__)


def _utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def _emit(level: int, log_entry: Dict[str, Any]) -> None:
    logger.log(level, json.dumps(log_entry, separators=(',', ':'), default=str))


def log_event(
    action: str,
    source: str,
    count: int,
    meeting_id: Optional[str] = None,
    **kwargs
) -> None:
    """
    Log a structured store event with required fields.

    Args:
        action: The action performed (e.g., 'added', 'deleted', 'seeded')
        source: Where the change came from (e.g., 'api', 'seed', 'store')
        count: Number of meetings affected
        meeting_id: Optional id of the single affected meeting
        **kwargs: Additional fields to include in the log
    """
    log_entry = {
        "timestamp": _utc_timestamp(),
        "action": action,
        "source": source,
        "count": count,
    }

    if meeting_id is not None:
        log_entry["meeting_id"] = str(meeting_id)

    log_entry.update(kwargs)

    _emit(logging.INFO, log_entry)


def mask_phone(phone_number: str) -> str:
    """
    Mask a phone number so only the last four digits remain.

    Args:
        phone_number: Raw or formatted phone number

    Returns:
        Masked number safe for logging
    """
    digits = "".join(ch for ch in phone_number if ch.isdecimal())
    if len(digits) <= 4:
        return "*" * len(digits)
    return "*" * (len(digits) - 4) + digits[-4:]


def init_sentry() -> bool:
    """
    Initialize Sentry if enabled and DSN is provided.

    Returns:
        True if Sentry was initialized, False otherwise
    """
    if not os.getenv("OBS_ENABLED", "false").lower() == "true":
        return False

    sentry_dsn = os.getenv("SENTRY_DSN")
    if not sentry_dsn:
        logger.info("Sentry DSN not provided, skipping Sentry initialization")
        return False

    try:
        if sentry_sdk is None:
            raise ImportError("sentry_sdk not available")

        from sentry_sdk.integrations.fastapi import FastApiIntegration
        from sentry_sdk.integrations.logging import LoggingIntegration

        sentry_sdk.init(
            dsn=sentry_dsn,
            integrations=[
                FastApiIntegration(),
                LoggingIntegration(
                    level=logging.INFO,
                    event_level=logging.ERROR
                ),
            ],
            traces_sample_rate=0.1,
            environment=os.getenv("ENVIRONMENT", "development"),
        )

        logger.info("Sentry initialized successfully")
        return True

    except ImportError:
        logger.warning("Sentry SDK not installed, skipping Sentry initialization")
        return False
    except Exception as e:
        logger.error(f"Failed to initialize Sentry: {e}")
        return False


def log_error(error: Exception, context: Dict[str, Any] = None) -> None:
    """
    Log an error with optional context.

    Args:
        error: The exception to log
        context: Optional context dictionary
    """
    log_entry = {
        "timestamp": _utc_timestamp(),
        "level": "ERROR",
        "error": str(error),
        "error_type": type(error).__name__,
    }

    if context:
        log_entry.update(context)

    _emit(logging.ERROR, log_entry)


def log_warning(message: str, context: Dict[str, Any] = None) -> None:
    """Log a warning with optional context."""
    log_entry = {
        "timestamp": _utc_timestamp(),
        "level": "WARNING",
        "message": message,
    }

    if context:
        log_entry.update(context)

    _emit(logging.WARNING, log_entry)


def log_info(message: str, context: Dict[str, Any] = None) -> None:
    """Log an info message with optional context."""
    log_entry = {
        "timestamp": _utc_timestamp(),
        "level": "INFO",
        "message": message,
    }

    if context:
        log_entry.update(context)

    _emit(logging.INFO, log_entry)
