import logging
from datetime import date, datetime, time
from typing import Optional

logger = logging.getLogger(__name__)


def parse_birth_date(value: str) -> Optional[date]:
    """
    Parse an ISO (YYYY-MM-DD) date string.

    Returns None instead of raising so engines can choose their fallback.
    """
    try:
        return date.fromisoformat(value.strip())
    except (AttributeError, TypeError, ValueError):
        logger.debug("Unparseable birth date: %r", value)
        return None


def parse_birth_time(value: str) -> Optional[time]:
    """
    Parse an HH:MM or HH:MM:SS time string.
    """
    try:
        return time.fromisoformat(value.strip())
    except (AttributeError, TypeError, ValueError):
        logger.debug("Unparseable birth time: %r", value)
        return None


def parse_birth_moment(dob: str, tob: str) -> Optional[datetime]:
    """
    Combine date and time strings into a naive local datetime.
    """
    birth_date = parse_birth_date(dob)
    birth_time = parse_birth_time(tob)
    if birth_date is None or birth_time is None:
        return None
    return datetime.combine(birth_date, birth_time)
