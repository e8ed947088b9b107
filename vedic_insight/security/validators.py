"""
Request Field Validation

Readings are only as good as the birth data they are computed from. These
helpers reject malformed names, dates, times and places before any engine runs.
"""

import re
from datetime import date
from fastapi import HTTPException, status


NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 100
PLACE_MAX_LENGTH = 200


def sanitize_string(value: str, max_length: int = 500) -> str:
    """
    Trim, truncate and strip control characters from a free-text field.
    """
    if not isinstance(value, str):
        return str(value)

    # Truncate to max length
    value = value[:max_length]

    # Remove null bytes and other control characters
    value = re.sub(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]", "", value)

    return value.strip()


def validate_name(name: str) -> str:
    """
    Validate and sanitize a name field.

    Names need at least two characters, no digits, and only letters,
    spaces and basic punctuation.
    """
    if not name or not isinstance(name, str):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid name provided"
        )

    name = sanitize_string(name, max_length=NAME_MAX_LENGTH)

    if len(name) < NAME_MIN_LENGTH:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Name must be at least {NAME_MIN_LENGTH} characters"
        )

    if re.search(r"\d", name):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Name must not contain digits"
        )

    # Only allow letters, spaces, hyphens, apostrophes, and periods
    if not re.match(r"^[^\W\d_][\w\s\.\'\-]*$", name, re.UNICODE):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Name contains invalid characters"
        )

    return name


def validate_place(place: str) -> str:
    """
    Validate and sanitize a place/city field.
    """
    if not place or not isinstance(place, str) or not place.strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid place provided"
        )

    return sanitize_string(place, max_length=PLACE_MAX_LENGTH)


def validate_date_format(date_str: str) -> str:
    """Validate ISO date format (YYYY-MM-DD) and that the date exists."""
    if not isinstance(date_str, str) or not re.match(r"^\d{4}-\d{2}-\d{2}$", date_str):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid date format. Use YYYY-MM-DD"
        )

    try:
        date.fromisoformat(date_str)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid calendar date"
        )

    return date_str


def validate_time_format(time_str: str) -> str:
    """Validate 24-hour time format (HH:MM)."""
    if not isinstance(time_str, str) or not re.match(r"^([01]\d|2[0-3]):[0-5]\d$", time_str):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid time format. Use HH:MM"
        )
    return time_str
