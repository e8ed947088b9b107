from typing import Dict, List

from vedic_insight.domain.astrology.constants import (
    KENDRA_HOUSES,
    MANGLIK_HOUSES,
    NO_YOGAS_FOUND,
)
from vedic_insight.domain.astrology.schemas import Planet


class YogaCalculator:
    """
    Detects auspicious combinations and doshas in a chart.

    Current support:
    - Gaja Kesari Yoga
    - Budhaditya Yoga
    - Manglik (Mangal) Dosha
    """

    def calculate(self, planets: List[Planet]) -> List[str]:
        """
        Names of every triggered yoga, or a placeholder when none apply.
        """
        houses: Dict[str, int] = {p.name: p.house for p in planets}
        yogas: List[str] = []

        if self._gaja_kesari(houses):
            yogas.append("Gaja Kesari Yoga")
        if self._budhaditya(houses):
            yogas.append("Budhaditya Yoga")
        if self._manglik(houses):
            yogas.append("Manglik Dosha")

        return yogas or [NO_YOGAS_FOUND]

    # ─────────────────────────────────────────────
    # Individual rules
    # ─────────────────────────────────────────────

    def _gaja_kesari(self, houses: Dict[str, int]) -> bool:
        """
        Jupiter and Moon both occupy Kendra houses.
        """
        return (
            houses.get("Jupiter") in KENDRA_HOUSES
            and houses.get("Moon") in KENDRA_HOUSES
        )

    def _budhaditya(self, houses: Dict[str, int]) -> bool:
        """
        Sun and Mercury share a house.
        """
        sun = houses.get("Sun")
        return sun is not None and sun == houses.get("Mercury")

    def _manglik(self, houses: Dict[str, int]) -> bool:
        """
        Mars placed in a Manglik house from the ascendant.
        """
        return houses.get("Mars") in MANGLIK_HOUSES
