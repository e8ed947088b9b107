from datetime import date, timedelta
from typing import List

from vedic_insight.domain.astrology.constants import (
    DASHA_LORDS,
    DAYS_PER_YEAR,
    VIMSHOTTARI_YEARS,
    FOLLOWING_DASHA_PERIODS,
)
from vedic_insight.domain.astrology.nakshatra_calculator import NakshatraPosition
from vedic_insight.domain.astrology.schemas import Dasha, DashaPeriod, SubPeriod


def advance(start: date, years: float) -> date:
    """
    Move a date forward by fractional years (365.25-day years).
    """
    try:
        return start + timedelta(days=years * DAYS_PER_YEAR)
    except OverflowError:
        return date.max


def retreat(start: date, years: float) -> date:
    """
    Move a date back by fractional years.
    """
    try:
        return start - timedelta(days=years * DAYS_PER_YEAR)
    except OverflowError:
        return date.min


class DashaCalculator:
    """
    Vimshottari Dasha from the Moon's nakshatra.

    The starting lord is the Moon's nakshatra index mod 9; the first
    period is the unexpired balance, followed by full periods in the
    fixed lord cycle.
    """

    def calculate(self, moon: NakshatraPosition, birth_date: date) -> Dasha:
        """
        Calculate the balance period plus the following Mahadashas.
        """
        start_idx = moon.index % len(DASHA_LORDS)
        start_lord, start_years = DASHA_LORDS[start_idx]

        # Balance of dasha at birth
        balance_years = start_years * (1.0 - moon.traversed)
        elapsed_years = start_years - balance_years

        timeline: List[DashaPeriod] = []

        # ─────────────────────────────────────────────
        # First (balance) period
        # ─────────────────────────────────────────────

        end_date = advance(birth_date, balance_years)
        maha_start = retreat(birth_date, elapsed_years)

        timeline.append(
            DashaPeriod(
                planet=start_lord,
                start=birth_date.year,
                end=end_date.year,
                start_date=birth_date.isoformat(),
                end_date=end_date.isoformat(),
                years=round(balance_years, 2),
                duration=f"Balance: {balance_years:.1f}y",
                antardashas=[
                    sub for sub in self._antardashas(start_lord, start_years, maha_start)
                    if sub.end_date > birth_date.isoformat()
                ],
            )
        )

        # Clip the running antardasha to the birth date
        if timeline[0].antardashas:
            timeline[0].antardashas[0].start_date = birth_date.isoformat()

        # ─────────────────────────────────────────────
        # Following full periods
        # ─────────────────────────────────────────────

        current = end_date
        for step in range(1, FOLLOWING_DASHA_PERIODS + 1):
            lord, years = DASHA_LORDS[(start_idx + step) % len(DASHA_LORDS)]
            end = advance(current, years)

            timeline.append(
                DashaPeriod(
                    planet=lord,
                    start=current.year,
                    end=end.year,
                    start_date=current.isoformat(),
                    end_date=end.isoformat(),
                    years=float(years),
                    duration=f"{years} Years",
                    antardashas=self._antardashas(lord, years, current),
                )
            )
            current = end

        return Dasha(
            balance=f"{start_lord} Balance: {balance_years:.1f}y",
            timeline=timeline,
        )

    def _antardashas(
        self,
        mahadasha_lord: str,
        mahadasha_years: float,
        start_date: date,
    ) -> List[SubPeriod]:
        """
        Calculate Antardasha (sub-periods) for a given Mahadasha.
        """
        # Antardasha sequence starts with the Mahadasha lord
        start_idx = next(
            i for i, (lord, _) in enumerate(DASHA_LORDS) if lord == mahadasha_lord
        )

        sub_periods: List[SubPeriod] = []
        current = start_date

        for i in range(len(DASHA_LORDS)):
            sub_lord, sub_years = DASHA_LORDS[(start_idx + i) % len(DASHA_LORDS)]

            # (Mahadasha years * Antardasha years) / 120
            duration_years = (mahadasha_years * sub_years) / VIMSHOTTARI_YEARS
            end = advance(current, duration_years)

            sub_periods.append(
                SubPeriod(
                    planet=sub_lord,
                    start_date=current.isoformat(),
                    end_date=end.isoformat(),
                    duration_months=round(duration_years * 12, 2),
                )
            )
            current = end

        return sub_periods
