import logging
from datetime import datetime
from typing import Optional

from vedic_insight.domain.astrology.constants import (
    EPHEMERIS_TABLE,
    EPOCH_YEAR,
    DAYS_PER_YEAR,
    LAHIRI_AYANAMSA_2000,
    AYANAMSA_ARCSEC_PER_YEAR,
    NODES,
    SUPERIOR_PLANETS,
    RETROGRADE_ELONGATION,
    SUNRISE_HOUR,
    DEGREES_PER_HOUR,
)

logger = logging.getLogger(__name__)

_EPOCH = datetime(EPOCH_YEAR, 1, 1)


def normalize_degree(degree: float) -> float:
    """
    Reduce any angle into [0, 360).
    """
    degree = degree % 360
    # float modulo can round up to exactly 360 for tiny negatives
    return 0.0 if degree >= 360 else degree


class SimulatedEphemeris:
    """
    Stable, repeatable pseudo-ephemeris.

    Longitudes are closed-form: a per-body base offset, a years-since-2000
    term scaled by an approximate orbital rate, and a day-of-month wobble.
    This is not astronomy; the arithmetic is fixed so that charts are
    reproducible.
    """

    def years_since_epoch(self, moment: Optional[datetime]) -> float:
        """
        Fractional years since 2000-01-01; 0 if the moment is unusable.
        """
        try:
            delta = moment - _EPOCH
            return delta.total_seconds() / 86400.0 / DAYS_PER_YEAR
        except (TypeError, OverflowError):
            logger.warning(f"Unusable moment {moment!r}. Using epoch offset 0.")
            return 0.0

    def longitude(self, body: str, moment: Optional[datetime]) -> float:
        """
        Sidereal longitude (0–360) of a body at the given moment.
        """
        base, rate, wobble = EPHEMERIS_TABLE[body]
        years = self.years_since_epoch(moment)
        day_of_month = moment.day if moment is not None else 0
        return normalize_degree(base + years * rate + day_of_month * wobble)

    def speed(self, body: str) -> float:
        """
        Mean daily motion in degrees (negative for the nodes).
        """
        _, rate, _ = EPHEMERIS_TABLE[body]
        return round(rate / DAYS_PER_YEAR, 4)

    def is_retrograde(self, body: str, longitude: float, sun_longitude: float) -> bool:
        """
        Nodes are always retrograde; superior planets near opposition.
        """
        if body in NODES:
            return True
        if body in SUPERIOR_PLANETS:
            low, high = RETROGRADE_ELONGATION
            elongation = normalize_degree(longitude - sun_longitude)
            return low <= elongation <= high
        return False

    def ascendant(self, sun_longitude: float, moment: Optional[datetime]) -> float:
        """
        Lagna: the Sun's longitude advanced 15° per hour after a 6 AM sunrise.
        """
        if moment is None:
            hours = 0.0
        else:
            hours = moment.hour + moment.minute / 60.0 - SUNRISE_HOUR
        return normalize_degree(sun_longitude + hours * DEGREES_PER_HOUR)

    def ayanamsa(self, moment: Optional[datetime]) -> float:
        """
        Approximate Lahiri ayanamsa for display.
        """
        years = self.years_since_epoch(moment)
        return LAHIRI_AYANAMSA_2000 + years * (AYANAMSA_ARCSEC_PER_YEAR / 3600)
