import math

from vedic_insight.domain.astrology.constants import (
    TITHIS,
    TITHI_SPAN,
    NITYA_YOGAS,
    KARANAS,
    YOGA_SPAN,
    SUNRISE_LABEL,
)
from vedic_insight.domain.astrology.ephemeris import normalize_degree
from vedic_insight.domain.astrology.schemas import Panchang


class PanchangCalculator:
    """
    Tithi, Yoga and Karana from the Sun–Moon angular relationship.
    """

    def calculate(
        self,
        sun_longitude: float,
        moon_longitude: float,
        moon_nakshatra: str,
    ) -> Panchang:
        tithi_index = self.tithi_index(sun_longitude, moon_longitude)
        paksha = "Krishna" if tithi_index >= 15 else "Shukla"

        return Panchang(
            tithi=f"{TITHIS[tithi_index % len(TITHIS)]} ({paksha})",
            yoga=NITYA_YOGAS[self.yoga_index(sun_longitude, moon_longitude)],
            karana=KARANAS[tithi_index % len(KARANAS)],
            nakshatra=moon_nakshatra,
            sunrise=SUNRISE_LABEL,
            ayanamsa="Lahiri",
        )

    def tithi_index(self, sun_longitude: float, moon_longitude: float) -> int:
        """
        Lunar day index (0–29): 12° of Moon–Sun separation each.
        """
        separation = normalize_degree(moon_longitude - sun_longitude)
        return int(separation // TITHI_SPAN) % 30

    def yoga_index(self, sun_longitude: float, moon_longitude: float) -> int:
        """
        Nitya yoga index (0–26) from the Sun + Moon sum.
        """
        return math.floor((moon_longitude + sun_longitude) / YOGA_SPAN) % len(NITYA_YOGAS)
