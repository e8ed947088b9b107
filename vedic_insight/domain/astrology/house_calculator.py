from typing import List

from vedic_insight.domain.astrology.constants import (
    RASHIS,
    RASHI_LORDS,
    KENDRA_HOUSES,
    TRIKONA_HOUSES,
    DUSTHANA_HOUSES,
    UPACHAYA_HOUSES,
    BENEFIC_PLANETS,
    MALEFIC_PLANETS,
)
from vedic_insight.domain.astrology.schemas import House, Planet


def sign_of(longitude: float) -> int:
    """
    Zodiac sign number (1–12) for a longitude in [0, 360).
    """
    return int(longitude // 30) % 12 + 1


def house_of(sign: int, lagna_sign: int) -> int:
    """
    Whole-sign house (1–12) of a sign counted from the lagna sign.
    """
    house = (sign - lagna_sign + 1) % 12
    return 12 if house <= 0 else house


def house_type(number: int) -> str:
    """
    Fixed classification by house number, independent of contents.
    """
    if number in KENDRA_HOUSES:
        return "Kendra"
    if number in TRIKONA_HOUSES:
        return "Trikona"
    if number in DUSTHANA_HOUSES:
        return "Dusthana"
    if number in UPACHAYA_HOUSES:
        return "Upachaya"
    return "Neutral"


class HouseCalculator:
    """
    Builds the twelve whole-sign houses and scores them
    from their occupants.
    """

    def calculate(
        self,
        lagna_sign: int,
        planets: List[Planet],
    ) -> List[House]:
        """
        Calculate all houses (1–12) with occupants and strength.
        """
        houses: List[House] = []

        for number in range(1, 13):
            sign = (lagna_sign + number - 2) % 12 + 1
            occupants = [p.name for p in planets if p.house == number]
            kind = house_type(number)

            houses.append(
                House(
                    number=number,
                    sign=sign,
                    sign_name=RASHIS[sign],
                    lord=RASHI_LORDS[sign],
                    planets=occupants,
                    strength=self._strength(kind, occupants),
                    type=kind,
                )
            )

        return houses

    def _strength(self, kind: str, occupants: List[str]) -> int:
        """
        50 base, ±10 per benefic/malefic occupant, ±10 for house class.
        """
        score = 50

        for name in occupants:
            if name in BENEFIC_PLANETS:
                score += 10
            elif name in MALEFIC_PLANETS:
                score -= 10

        if kind in ("Kendra", "Trikona"):
            score += 10
        elif kind == "Dusthana":
            score -= 10

        return max(0, min(100, score))
