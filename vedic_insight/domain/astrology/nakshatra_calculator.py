from typing import NamedTuple

from vedic_insight.domain.astrology.constants import (
    NAKSHATRAS,
    NAKSHATRA_SPAN,
    PADA_SPAN,
)
from vedic_insight.domain.astrology.ephemeris import normalize_degree


class NakshatraPosition(NamedTuple):
    index: int
    name: str
    lord: str
    pada: int
    traversed: float  # fraction of the nakshatra already covered (0–1)


class NakshatraCalculator:
    """
    Utility to calculate nakshatra and pada from an absolute longitude.
    """

    def calculate(self, longitude: float) -> NakshatraPosition:
        """
        Calculate nakshatra name, lord and pada.
        """
        degree = normalize_degree(longitude)

        index = int(degree // NAKSHATRA_SPAN) % len(NAKSHATRAS)
        name, lord = NAKSHATRAS[index]

        # Each nakshatra has 4 padas
        within = degree % NAKSHATRA_SPAN
        pada = min(int(within // PADA_SPAN) + 1, 4)

        return NakshatraPosition(
            index=index,
            name=name,
            lord=lord,
            pada=pada,
            traversed=within / NAKSHATRA_SPAN,
        )
