import unittest
from datetime import date, datetime

from vedic_insight.domain.astrology.constants import (
    DASHA_LORDS,
    NAKSHATRAS,
    PLANET_ORDER,
    NO_YOGAS_FOUND,
)
from vedic_insight.domain.astrology.dasha_calculator import DashaCalculator
from vedic_insight.domain.astrology.engine import AstrologyEngine, calculate_astrology
from vedic_insight.domain.astrology.ephemeris import SimulatedEphemeris, normalize_degree
from vedic_insight.domain.astrology.house_calculator import house_of, house_type, sign_of
from vedic_insight.domain.astrology.nakshatra_calculator import (
    NakshatraCalculator,
    NakshatraPosition,
)
from vedic_insight.domain.astrology.panchang_calculator import PanchangCalculator
from vedic_insight.domain.astrology.schemas import AstroInput, Planet
from vedic_insight.domain.astrology.yoga_calculator import YogaCalculator


def make_planet(name: str, house: int) -> Planet:
    return Planet(
        name=name, sign=1, sign_name="Mesha (Ari)", full_degree=0.0, norm_degree=0.0,
        house=house, is_retrograde=False, nakshatra="Ashwini", nakshatra_lord="Ketu",
        pada=1, speed=1.0, shadbala=50, rank=1,
    )


class TestHouseHelpers(unittest.TestCase):
    def test_sign_of(self):
        self.assertEqual(sign_of(0.0), 1)
        self.assertEqual(sign_of(29.999), 1)
        self.assertEqual(sign_of(30.0), 2)
        self.assertEqual(sign_of(359.9), 12)

    def test_house_of_is_whole_sign(self):
        self.assertEqual(house_of(5, 5), 1)
        self.assertEqual(house_of(4, 5), 12)
        self.assertEqual(house_of(1, 12), 2)
        for lagna in range(1, 13):
            for sign in range(1, 13):
                self.assertTrue(1 <= house_of(sign, lagna) <= 12)

    def test_house_type_partition(self):
        expected = {
            1: "Kendra", 4: "Kendra", 7: "Kendra", 10: "Kendra",
            5: "Trikona", 9: "Trikona",
            6: "Dusthana", 8: "Dusthana", 12: "Dusthana",
            3: "Upachaya", 11: "Upachaya",
            2: "Neutral",
        }
        for number, kind in expected.items():
            self.assertEqual(house_type(number), kind)


class TestNakshatraCalculator(unittest.TestCase):
    def setUp(self):
        self.calc = NakshatraCalculator()

    def test_start_of_zodiac(self):
        pos = self.calc.calculate(0.0)
        self.assertEqual((pos.index, pos.name, pos.lord, pos.pada), (0, "Ashwini", "Ketu", 1))

    def test_pada_and_index(self):
        pos = self.calc.calculate(13.5)  # just into Bharani
        self.assertEqual(pos.name, "Bharani")
        self.assertEqual(pos.pada, 1)
        self.assertEqual(self.calc.calculate(359.99).name, "Revati")
        self.assertEqual(self.calc.calculate(359.99).pada, 4)

    def test_wraps_out_of_range_longitudes(self):
        self.assertEqual(self.calc.calculate(360.0).name, "Ashwini")
        self.assertEqual(self.calc.calculate(-1.0).name, "Revati")


class TestEphemeris(unittest.TestCase):
    def setUp(self):
        self.eph = SimulatedEphemeris()
        self.moment = datetime(1995, 8, 17, 14, 45)

    def test_nodes_are_opposite(self):
        rahu = self.eph.longitude("Rahu", self.moment)
        ketu = self.eph.longitude("Ketu", self.moment)
        self.assertAlmostEqual(normalize_degree(ketu - rahu), 180.0, places=6)

    def test_longitudes_in_range(self):
        for body in PLANET_ORDER:
            lon = self.eph.longitude(body, self.moment)
            self.assertTrue(0 <= lon < 360)

    def test_nodes_always_retrograde(self):
        self.assertTrue(self.eph.is_retrograde("Rahu", 10.0, 200.0))
        self.assertTrue(self.eph.is_retrograde("Ketu", 10.0, 200.0))

    def test_superior_planet_retrograde_near_opposition(self):
        self.assertTrue(self.eph.is_retrograde("Saturn", 190.0, 10.0))
        self.assertFalse(self.eph.is_retrograde("Saturn", 100.0, 10.0))
        self.assertFalse(self.eph.is_retrograde("Venus", 190.0, 10.0))

    def test_lagna_equals_sun_at_sunrise(self):
        sun = self.eph.longitude("Sun", datetime(2010, 3, 3, 6, 0))
        self.assertAlmostEqual(self.eph.ascendant(sun, datetime(2010, 3, 3, 6, 0)), sun)
        # Two hours later the ascendant has moved 30 degrees
        later = self.eph.ascendant(sun, datetime(2010, 3, 3, 8, 0))
        self.assertAlmostEqual(normalize_degree(later - sun), 30.0)

    def test_node_speed_negative(self):
        self.assertLess(self.eph.speed("Rahu"), 0)
        self.assertGreater(self.eph.speed("Moon"), self.eph.speed("Sun"))


class TestDashaCalculator(unittest.TestCase):
    def setUp(self):
        self.calc = DashaCalculator()

    def test_start_lord_and_balance(self):
        # Rohini (index 3) -> Moon, half traversed -> 5 of 10 years left
        moon = NakshatraPosition(index=3, name="Rohini", lord="Moon", pada=3, traversed=0.5)
        dasha = self.calc.calculate(moon, date(2000, 1, 1))

        self.assertEqual(dasha.timeline[0].planet, "Moon")
        self.assertEqual(dasha.balance, "Moon Balance: 5.0y")
        self.assertEqual(dasha.timeline[0].years, 5.0)
        self.assertEqual(dasha.timeline[0].start_date, "2000-01-01")

    def test_timeline_follows_lord_cycle(self):
        moon = NakshatraPosition(index=25, name="U.Bhadrapada", lord="Saturn", pada=1, traversed=0.1)
        timeline = self.calc.calculate(moon, date(1990, 6, 15)).timeline

        self.assertEqual(len(timeline), 6)
        lords = [lord for lord, _ in DASHA_LORDS]
        start = 25 % 9
        self.assertEqual(
            [p.planet for p in timeline],
            [lords[(start + i) % 9] for i in range(6)],
        )

        for prev, nxt in zip(timeline, timeline[1:]):
            self.assertEqual(prev.end_date, nxt.start_date)
            self.assertLessEqual(prev.start, nxt.start)

    def test_antardashas(self):
        moon = NakshatraPosition(index=0, name="Ashwini", lord="Ketu", pada=1, traversed=0.0)
        timeline = self.calc.calculate(moon, date(2000, 1, 1)).timeline

        venus = timeline[1]
        self.assertEqual(venus.planet, "Venus")
        self.assertEqual(len(venus.antardashas), 9)
        self.assertEqual(venus.antardashas[0].planet, "Venus")
        self.assertEqual(venus.antardashas[0].start_date, venus.start_date)
        # Venus/Venus = 20 * 20 / 120 years = 40 months
        self.assertAlmostEqual(venus.antardashas[0].duration_months, 40.0)
        total_months = sum(sub.duration_months for sub in venus.antardashas)
        self.assertAlmostEqual(total_months, 240.0, places=1)

    def test_balance_period_antardashas_start_at_birth(self):
        moon = NakshatraPosition(index=1, name="Bharani", lord="Venus", pada=3, traversed=0.6)
        first = self.calc.calculate(moon, date(1985, 3, 10)).timeline[0]

        self.assertTrue(first.antardashas)
        self.assertEqual(first.antardashas[0].start_date, "1985-03-10")
        self.assertLessEqual(len(first.antardashas), 9)


class TestPanchangCalculator(unittest.TestCase):
    def test_tithi_paksha(self):
        calc = PanchangCalculator()
        waxing = calc.calculate(0.0, 13.0, "Ashwini")
        self.assertEqual(waxing.tithi, "Dwitiya (Shukla)")
        self.assertEqual(waxing.karana, "Balava")

        waning = calc.calculate(0.0, 185.0, "Chitra")
        self.assertEqual(waning.tithi, "Pratipada (Krishna)")
        self.assertEqual(waning.nakshatra, "Chitra")
        self.assertEqual(waning.ayanamsa, "Lahiri")

    def test_yoga_index_wraps(self):
        calc = PanchangCalculator()
        self.assertEqual(calc.yoga_index(350.0, 350.0), 25)  # floor(700 / 13.33) = 52 -> 25

    def test_yoga_boundary_uses_truncated_span(self):
        calc = PanchangCalculator()
        # Past 13.3333 but short of 360 / 27
        self.assertEqual(calc.yoga_index(0.0, 13.33332), 1)
        self.assertEqual(calc.yoga_index(0.0, 13.3332), 0)


class TestYogaCalculator(unittest.TestCase):
    def setUp(self):
        self.calc = YogaCalculator()

    def test_no_yogas(self):
        planets = [make_planet(name, 2) for name in PLANET_ORDER]
        planets[0] = make_planet("Sun", 3)
        self.assertEqual(self.calc.calculate(planets), [NO_YOGAS_FOUND])

    def test_all_yogas(self):
        planets = [
            make_planet("Sun", 5), make_planet("Mercury", 5),
            make_planet("Moon", 1), make_planet("Jupiter", 10),
            make_planet("Mars", 8),
        ]
        self.assertEqual(
            self.calc.calculate(planets),
            ["Gaja Kesari Yoga", "Budhaditya Yoga", "Manglik Dosha"],
        )


class TestAstrologyEngine(unittest.TestCase):
    def setUp(self):
        self.engine = AstrologyEngine()
        self.birth = AstroInput(name="Asha", dob="1992-11-04", tob="06:00", pob="Jaipur")

    def test_chart_shape(self):
        chart = self.engine.generate(self.birth)

        self.assertEqual([p.name for p in chart.planets], list(PLANET_ORDER))
        self.assertEqual([h.number for h in chart.houses], list(range(1, 13)))
        self.assertEqual(chart.meta.name, "Asha")
        self.assertEqual(chart.meta.place, "Jaipur")
        self.assertEqual(chart.meta.calculation_version, "v1")
        self.assertTrue(chart.meta.ayanamsha.startswith("Lahiri "))

    def test_house_invariant(self):
        chart = self.engine.generate(self.birth)
        lagna = chart.lagna.sign

        for planet in chart.planets:
            expected = (planet.sign - lagna + 1) % 12 or 12
            self.assertEqual(planet.house, expected)
            self.assertIn(planet.name, chart.houses[planet.house - 1].planets)

        occupants = [name for h in chart.houses for name in h.planets]
        self.assertEqual(sorted(occupants), sorted(PLANET_ORDER))

        for house in chart.houses:
            self.assertEqual(house.sign, (lagna + house.number - 2) % 12 + 1)
            self.assertEqual(house.type, house_type(house.number))
            self.assertTrue(0 <= house.strength <= 100)

    def test_lagna_at_sunrise_shares_sun_sign(self):
        chart = self.engine.generate(self.birth)
        sun = chart.planets[0]
        self.assertEqual(chart.lagna.sign, sun.sign)
        self.assertEqual(sun.house, 1)

    def test_ranks_and_strength(self):
        chart = self.engine.generate(self.birth)
        self.assertEqual(sorted(p.rank for p in chart.planets), list(range(1, 10)))
        for planet in chart.planets:
            self.assertTrue(0 <= planet.shadbala <= 100)

        by_rank = sorted(chart.planets, key=lambda p: p.rank)
        for stronger, weaker in zip(by_rank, by_rank[1:]):
            self.assertGreaterEqual(stronger.shadbala, weaker.shadbala)

    def test_nodes(self):
        chart = self.engine.generate(self.birth)
        planets = {p.name: p for p in chart.planets}
        self.assertTrue(planets["Rahu"].is_retrograde)
        self.assertTrue(planets["Ketu"].is_retrograde)
        self.assertAlmostEqual(
            normalize_degree(planets["Ketu"].full_degree - planets["Rahu"].full_degree),
            180.0,
            places=6,
        )
        self.assertFalse(planets["Sun"].is_retrograde)

    def test_dasha_starts_from_moon_nakshatra(self):
        chart = self.engine.generate(self.birth)
        moon = chart.planets[1]
        index = [name for name, _ in NAKSHATRAS].index(moon.nakshatra)

        self.assertEqual(chart.dasha.timeline[0].planet, DASHA_LORDS[index % 9][0])
        self.assertEqual(chart.dasha.timeline[0].start_date, "1992-11-04")
        self.assertEqual(chart.panchang.nakshatra, moon.nakshatra)

    def test_deterministic(self):
        first = calculate_astrology(self.birth)
        second = calculate_astrology(self.birth)
        self.assertEqual(first.model_dump(), second.model_dump())

    def test_invalid_date_falls_back_to_now(self):
        with self.assertLogs("vedic_insight.domain.astrology.engine", level="WARNING"):
            chart = self.engine.generate(AstroInput(dob="31/31/1999", tob="25:99"))
        self.assertEqual(len(chart.planets), 9)
        self.assertEqual(len(chart.houses), 12)
        self.assertTrue(chart.yogas)


if __name__ == "__main__":
    unittest.main()
