"""
Utility functions for the application.
"""
import logging
import threading
from contextlib import contextmanager
from datetime import datetime, timedelta, timezone
from typing import Optional

from inventory_api.core.exceptions import BaseServiceError, ValidationError

logger = logging.getLogger(__name__)

_clock_lock = threading.Lock()
_last_issued: Optional[datetime] = None


def utc_now() -> datetime:
    """
    Current UTC time, strictly greater than any value previously returned.

    Two mutations landing in the same clock tick still get distinct, ordered
    timestamps, so ``updated_at`` / ``last_updated`` always move forward.
    """
    global _last_issued
    with _clock_lock:
        now = datetime.now(timezone.utc)
        if _last_issued is not None and now <= _last_issued:
            now = _last_issued + timedelta(microseconds=1)
        _last_issued = now
        return now


@contextmanager
def wrap_unexpected_errors(action: str):
    """
    Let domain errors through untouched; turn anything else into a
    ValidationError so a single bad call never takes the process down.

    Args:
        action: Human readable description used as the message prefix,
            e.g. "creating product"
    """
    try:
        yield
    except BaseServiceError:
        raise
    except Exception as e:
        logger.exception(f"Unexpected error while {action}")
        raise ValidationError(f"Error {action}: {str(e)}") from e
