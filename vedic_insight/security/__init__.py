"""
Security Module

Input validation helpers for the reading endpoints.
"""

from vedic_insight.security.validators import (
    validate_name,
    validate_place,
    validate_date_format,
    validate_time_format,
    sanitize_string,
)

__all__ = [
    "validate_name",
    "validate_place",
    "validate_date_format",
    "validate_time_format",
    "sanitize_string",
]
