import logging
from datetime import datetime
from typing import Dict, List, Optional

from vedic_insight.domain.parsing import parse_birth_moment
from vedic_insight.domain.astrology.constants import (
    PLANET_ORDER,
    RASHIS,
    RASHI_LORDS,
    NODES,
    EXALTATION_SIGNS,
    DEBILITATION_SIGNS,
    KENDRA_HOUSES,
    TRIKONA_HOUSES,
    DUSTHANA_HOUSES,
    SUNRISE_LABEL,
)
from vedic_insight.domain.astrology.ephemeris import SimulatedEphemeris
from vedic_insight.domain.astrology.nakshatra_calculator import NakshatraCalculator
from vedic_insight.domain.astrology.house_calculator import (
    HouseCalculator,
    sign_of,
    house_of,
)
from vedic_insight.domain.astrology.dasha_calculator import DashaCalculator
from vedic_insight.domain.astrology.panchang_calculator import PanchangCalculator
from vedic_insight.domain.astrology.yoga_calculator import YogaCalculator
from vedic_insight.domain.astrology.schemas import (
    AstroInput,
    AstroChart,
    ChartMeta,
    Lagna,
    Planet,
)

logger = logging.getLogger(__name__)


class AstrologyEngine:
    """
    Orchestrates chart calculation.

    This class:
    - Parses birth date and time (falling back to "now")
    - Delegates to the ephemeris and the derived calculators
    - Returns a domain AstroChart
    """

    calculation_version = "v1"

    def __init__(
        self,
        ephemeris: Optional[SimulatedEphemeris] = None,
        nakshatras: Optional[NakshatraCalculator] = None,
        houses: Optional[HouseCalculator] = None,
        dasha: Optional[DashaCalculator] = None,
        panchang: Optional[PanchangCalculator] = None,
        yogas: Optional[YogaCalculator] = None,
    ):
        self.ephemeris = ephemeris or SimulatedEphemeris()
        self.nakshatras = nakshatras or NakshatraCalculator()
        self.houses = houses or HouseCalculator()
        self.dasha = dasha or DashaCalculator()
        self.panchang = panchang or PanchangCalculator()
        self.yogas = yogas or YogaCalculator()

    def generate(self, birth: AstroInput) -> AstroChart:
        """
        Generate the chart.

        This method is:
        - Pure (apart from the "now" fallback)
        - Deterministic for a valid dob/tob
        - Side-effect free
        """

        # ─────────────────────────────────────────────
        # Step 1: Birth moment
        # ─────────────────────────────────────────────

        moment = parse_birth_moment(birth.dob, birth.tob)
        if moment is None:
            moment = datetime.now().replace(second=0, microsecond=0)
            logger.warning(
                f"Invalid birth date/time '{birth.dob} {birth.tob}'. Defaulting to {moment.isoformat()}."
            )

        # ─────────────────────────────────────────────
        # Step 2: Longitudes & Lagna
        # ─────────────────────────────────────────────

        longitudes: Dict[str, float] = {
            name: self.ephemeris.longitude(name, moment)
            for name in PLANET_ORDER
        }
        sun = longitudes["Sun"]
        moon = longitudes["Moon"]

        lagna_degree = self.ephemeris.ascendant(sun, moment)
        lagna_sign = sign_of(lagna_degree)
        lagna_nakshatra = self.nakshatras.calculate(lagna_degree)

        lagna = Lagna(
            sign=lagna_sign,
            sign_name=RASHIS[lagna_sign],
            degree=lagna_degree % 30,
            nakshatra=lagna_nakshatra.name,
            lord=RASHI_LORDS[lagna_sign],
        )

        # ─────────────────────────────────────────────
        # Step 3: Planets
        # ─────────────────────────────────────────────

        planets = [
            self._build_planet(name, longitudes[name], sun, lagna_sign)
            for name in PLANET_ORDER
        ]
        self._assign_ranks(planets)

        # ─────────────────────────────────────────────
        # Step 4: Houses, Dasha, Panchang, Yogas
        # ─────────────────────────────────────────────

        houses = self.houses.calculate(lagna_sign, planets)

        moon_nakshatra = self.nakshatras.calculate(moon)
        dasha = self.dasha.calculate(moon_nakshatra, moment.date())

        panchang = self.panchang.calculate(sun, moon, moon_nakshatra.name)
        yogas = self.yogas.calculate(planets)

        meta = ChartMeta(
            name=birth.name,
            place=birth.pob,
            ayanamsha=f"Lahiri {self.ephemeris.ayanamsa(moment):.2f}°",
            sunrise=SUNRISE_LABEL,
            timezone="Local",
            calculation_version=self.calculation_version,
        )

        return AstroChart(
            meta=meta,
            lagna=lagna,
            planets=planets,
            houses=houses,
            dasha=dasha,
            yogas=yogas,
            panchang=panchang,
        )

    # ─────────────────────────────────────────────
    # Internal helpers
    # ─────────────────────────────────────────────

    def _build_planet(
        self,
        name: str,
        longitude: float,
        sun_longitude: float,
        lagna_sign: int,
    ) -> Planet:
        sign = sign_of(longitude)
        house = house_of(sign, lagna_sign)
        retrograde = self.ephemeris.is_retrograde(name, longitude, sun_longitude)
        nakshatra = self.nakshatras.calculate(longitude)

        return Planet(
            name=name,
            sign=sign,
            sign_name=RASHIS[sign],
            full_degree=longitude,
            norm_degree=longitude % 30,
            house=house,
            is_retrograde=retrograde,
            nakshatra=nakshatra.name,
            nakshatra_lord=nakshatra.lord,
            pada=nakshatra.pada,
            speed=self.ephemeris.speed(name),
            shadbala=self._shadbala(name, sign, house, retrograde),
            rank=0,
        )

    def _shadbala(self, name: str, sign: int, house: int, retrograde: bool) -> int:
        """
        Simplified strength (0–100) from dignity and house placement.
        """
        score = 50

        if EXALTATION_SIGNS.get(name) == sign:
            score += 25
        elif RASHI_LORDS[sign] == name:
            score += 15
        elif DEBILITATION_SIGNS.get(name) == sign:
            score -= 25

        if house in KENDRA_HOUSES:
            score += 10
        elif house in TRIKONA_HOUSES:
            score += 5
        elif house in DUSTHANA_HOUSES:
            score -= 10

        if retrograde and name not in NODES:
            score -= 5

        return max(0, min(100, score))

    def _assign_ranks(self, planets: List[Planet]) -> None:
        """
        Rank 1 is the strongest; ties keep planet order.
        """
        ordered = sorted(
            enumerate(planets),
            key=lambda item: (-item[1].shadbala, item[0]),
        )
        for rank, (_, planet) in enumerate(ordered, start=1):
            planet.rank = rank


def calculate_astrology(data: AstroInput) -> AstroChart:
    return AstrologyEngine().generate(data)
