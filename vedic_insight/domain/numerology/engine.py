import logging
import re
from datetime import date, timedelta
from typing import List, Optional

from vedic_insight.domain.parsing import parse_birth_date
from vedic_insight.domain.numerology.schemas import (
    NumerologyInput,
    NumerologyResult,
    CoreNumbers,
    Compatibility,
    ColorChart,
    LuckyDaysChart,
    PeakYearsChart,
    NumerologyCharts,
    Forecast,
    Interpretations,
)
from vedic_insight.domain.numerology.tables import (
    LETTER_MAPS,
    CHALDEAN_MAP,
    MASTER_NUMBERS,
    COMPATIBILITY_MATRIX,
    COLOR_CHART,
    LUCKY_DAYS,
    PEAK_YEARS,
    RULING_PLANETS,
    TRAITS,
    PATHS,
    DISCLAIMER,
)

logger = logging.getLogger(__name__)

FORECAST_SCAN_DAYS = 5
FORECAST_MAX_DAYS = 3

_NON_LETTERS = re.compile(r"[^A-Z]")


def digital_root(num: int, use_master: bool = False) -> int:
    """
    Repeatedly sum decimal digits until a single digit remains.

    With `use_master`, 11, 22 and 33 are kept as soon as they appear.
    """
    num = abs(int(num))
    while num >= 10:
        if use_master and num in MASTER_NUMBERS:
            return num
        num = sum(int(digit) for digit in str(num))
    return num


def root_of(num: int) -> int:
    """
    Reduce a master number to its single-digit root for table lookups.
    """
    return digital_root(num) if num > 9 else num


def name_value(name: str, system: str = "chaldean") -> int:
    """
    Sum of mapped letter values; case-insensitive, non-letters ignored.
    """
    letter_map = LETTER_MAPS.get(system, CHALDEAN_MAP)
    clean = _NON_LETTERS.sub("", (name or "").upper())
    return sum(letter_map.get(ch, 0) for ch in clean)


def daily_number(day: date) -> int:
    """
    Personal daily number: digital root of day + month + year.
    """
    return digital_root(day.day + day.month + day.year)


class NumerologyEngine:
    """
    Deterministic numerology calculator.

    This class:
    - Derives Mulank, Bhagyank and Namank
    - Looks up chart tables by root digit
    - Scans upcoming days for favourable dates
    """

    def calculate(
        self,
        data: NumerologyInput,
        today: Optional[date] = None,
    ) -> NumerologyResult:
        """
        Calculate a full numerology reading.
        """
        use_master = data.use_master_numbers
        today = today or date.today()

        birth = parse_birth_date(data.dob)
        if birth is None:
            logger.warning(
                f"Invalid birth date '{data.dob}' in numerology input. Falling back to {today}."
            )
            birth = today

        # ─────────────────────────────────────────────
        # Core numbers
        # ─────────────────────────────────────────────

        mulank = digital_root(birth.day, use_master)
        root_mulank = root_of(mulank)

        bhagyank = digital_root(
            digital_root(birth.day) + digital_root(birth.month) + digital_root(birth.year),
            use_master,
        )
        root_bhagyank = root_of(bhagyank)

        namank = digital_root(name_value(data.name, data.system), use_master)

        # ─────────────────────────────────────────────
        # Charts
        # ─────────────────────────────────────────────

        compat = COMPATIBILITY_MATRIX.get(root_mulank)
        compatibility = Compatibility(
            friends=list(compat["friends"]) if compat else [],
            neutral=list(compat["neutral"]) if compat else [],
            enemies=list(compat["enemies"]) if compat else [],
        )

        charts = NumerologyCharts(
            compatibility=compatibility,
            colors=ColorChart(primary=COLOR_CHART.get(root_mulank)),
            lucky_days=LuckyDaysChart(primary=LUCKY_DAYS.get(root_bhagyank)),
            peak_years=PeakYearsChart(ranges=PEAK_YEARS.get(root_bhagyank)),
            ruling_planet=RULING_PLANETS.get(root_mulank),
        )

        # ─────────────────────────────────────────────
        # Forecast & interpretations
        # ─────────────────────────────────────────────

        forecast = Forecast(
            lucky_days_upcoming=self._favourable_days(today, compatibility.friends)
        )

        interpretations = Interpretations(
            mulank=(
                f"{mulank} ({RULING_PLANETS.get(root_mulank, 'Unknown')}): "
                f"Governs your inner nature. You are {_trait(root_mulank)}."
            ),
            bhagyank=f"{bhagyank}: Your life's purpose. Path of {_path(root_bhagyank)}.",
            # Master namanks (11/22/33) have no trait entry and read "mystery"
            namank=(
                f"{namank}: How the world sees you. "
                f"Vibrates with {_trait(namank)}."
            ),
        )

        return NumerologyResult(
            core_numbers=CoreNumbers(
                mulank=mulank,
                bhagyank=bhagyank,
                namank=namank,
                system=data.system.capitalize(),
            ),
            charts=charts,
            forecast=forecast,
            interpretations=interpretations,
            disclaimer=DISCLAIMER,
        )

    def _favourable_days(self, start: date, friends: List[int]) -> List[str]:
        """
        First few days in the scan window whose daily number is a friend.
        """
        days: List[str] = []
        for offset in range(FORECAST_SCAN_DAYS):
            day = start + timedelta(days=offset)
            if daily_number(day) in friends:
                days.append(f"{day:%a} {day.day}")
        return days[:FORECAST_MAX_DAYS]


def _trait(num: int) -> str:
    return TRAITS[num] if 0 < num < len(TRAITS) else "mystery"


def _path(num: int) -> str:
    return PATHS[num] if 0 < num < len(PATHS) else "unknown"


def calculate_numerology(
    data: NumerologyInput,
    today: Optional[date] = None,
) -> NumerologyResult:
    return NumerologyEngine().calculate(data, today=today)
