import math
import unittest

from vedic_insight.domain.face_reading.engine import (
    FaceReadingEngine,
    calculate_face_reading,
    analyze_forehead,
    analyze_nose,
    analyze_eyes,
    analyze_jaw,
    analyze_symmetry,
    dominant_zone,
)
from vedic_insight.domain.face_reading.schemas import (
    FaceMetrics,
    Forehead,
    Eyes,
    Nose,
    Cheeks,
    Mouth,
    Jaw,
)


class TestZones(unittest.TestCase):
    def setUp(self):
        self.engine = FaceReadingEngine()

    def test_all_zero_ties_go_to_upper(self):
        analysis = self.engine.calculate(FaceMetrics())
        self.assertEqual((analysis.zones.upper, analysis.zones.middle, analysis.zones.lower), (0, 0, 0))
        self.assertEqual(analysis.zones.dominance, "Intellectual")
        self.assertEqual(analysis.personality.primary, "Thinker / Planner")

    def test_upper_beats_middle_on_tie(self):
        metrics = FaceMetrics(forehead=Forehead(height=5), cheeks=Cheeks(prominence=10))
        zones = self.engine.calculate(metrics).zones
        self.assertEqual((zones.upper, zones.middle), (30, 30))
        self.assertEqual(zones.dominance, "Intellectual")

    def test_middle_beats_lower_on_tie(self):
        metrics = FaceMetrics(cheeks=Cheeks(prominence=10), jaw=Jaw(strength=6.8))
        zones = self.engine.calculate(metrics).zones
        self.assertEqual((zones.middle, zones.lower), (30, 30))
        self.assertEqual(zones.dominance, "Social")

    def test_dominant_zone_order(self):
        self.assertEqual(dominant_zone(10, 20, 30), ("Material", "Determined / Practical"))
        self.assertEqual(dominant_zone(10, 30, 30)[0], "Social")
        self.assertEqual(dominant_zone(30, 30, 30)[0], "Intellectual")

    def test_zone_scores_clamped(self):
        metrics = FaceMetrics(
            forehead=Forehead(height=10, width=10),
            eyes=Eyes(size=10),
            nose=Nose(width=10),
            cheeks=Cheeks(prominence=10),
        )
        zones = self.engine.calculate(metrics).zones
        self.assertEqual(zones.upper, 100)
        self.assertEqual(zones.middle, 100)
        self.assertEqual(zones.lower, 0)

        wrinkled = FaceMetrics(forehead=Forehead(wrinkles=10))
        self.assertEqual(self.engine.calculate(wrinkled).zones.upper, 0)

    def test_zone_balance_chart(self):
        metrics = FaceMetrics(forehead=Forehead(height=10, width=10))
        chart = self.engine.calculate(metrics).charts.zone_balance
        self.assertEqual(
            [(z.zone, z.score, z.interpretation) for z in chart],
            [
                ("Intellectual (Upper)", 100, "High"),
                ("Social (Middle)", 0, "Avg"),
                ("Material (Lower)", 0, "Avg"),
            ],
        )

    def test_life_emphasis(self):
        metrics = FaceMetrics(forehead=Forehead(height=10, width=10))
        emphasis = self.engine.calculate(metrics).life_emphasis
        self.assertEqual(emphasis.youth, "Intellectual Growth & Study")
        self.assertEqual(emphasis.midlife, "Career Building")
        self.assertEqual(emphasis.elder, "Spiritual Retreat")


class TestPlanetaryScores(unittest.TestCase):
    def test_zero_metrics(self):
        planetary = calculate_face_reading(FaceMetrics()).planetary
        self.assertEqual(set(planetary.model_dump().values()), {0})

    def test_formulas(self):
        metrics = FaceMetrics(
            forehead=Forehead(height=7, width=6),
            eyes=Eyes(size=5),
            cheeks=Cheeks(prominence=4),
        )
        planetary = calculate_face_reading(metrics).planetary
        self.assertEqual(planetary.jupiter, 65.0)
        self.assertEqual(planetary.mercury, 56.0)
        self.assertEqual(planetary.moon, 30.0)
        self.assertEqual(planetary.sun, 40.0)
        self.assertEqual(planetary.venus, 25.0)

    def test_capped_at_hundred(self):
        metrics = FaceMetrics(nose=Nose(length=20, width=10))
        self.assertEqual(calculate_face_reading(metrics).planetary.mars, 100)

    def test_secondary_personality(self):
        charming = FaceMetrics(mouth=Mouth(lip_fullness=10), eyes=Eyes(size=8))
        self.assertEqual(calculate_face_reading(charming).personality.secondary, "Charming")

        driven = FaceMetrics(nose=Nose(length=10, width=10), jaw=Jaw(strength=1))
        self.assertEqual(calculate_face_reading(driven).personality.secondary, "Driven")

        self.assertEqual(calculate_face_reading(FaceMetrics()).personality.secondary, "Steady")


class TestSubAnalyses(unittest.TestCase):
    def test_forehead_lookup_and_fallback(self):
        self.assertEqual(analyze_forehead("Square").career, "Engineering/Tech")
        self.assertEqual(analyze_forehead("Unknown"), analyze_forehead("High/Broad"))

    def test_nose_lookup_and_fallback(self):
        hooked = analyze_nose("Hooked")
        self.assertEqual((hooked.mars, hooked.venus, hooked.wealth), (95, 60, "High Ambition"))
        self.assertEqual(analyze_nose("Roman"), analyze_nose("Straight"))

    def test_eyes(self):
        large = analyze_eyes("Round", 8)
        self.assertEqual(large.type, "Large / Round")
        self.assertEqual(large.venus, "High")
        self.assertEqual(large.personality, "Trustworthy & Open, Emotional")

        small = analyze_eyes("Deep-set", 3)
        self.assertEqual(small.type, "Small / Deep-set")
        self.assertEqual(small.venus, "Medium")
        self.assertEqual(small.personality, "Analytical & Private, Intense")

        self.assertEqual(analyze_eyes("Almond", 5).personality, "Balanced")

    def test_jaw(self):
        jaw = analyze_jaw("Square/Strong", 9)
        self.assertEqual(jaw.approach, "Disciplined & Strong")
        self.assertEqual(jaw.saturn, 90)
        self.assertEqual(analyze_jaw("Round/Soft", 4).approach, "Harmonious & Adaptable")
        self.assertEqual(analyze_jaw("Pointed", 4).approach, "Ambitious & Sharp")
        self.assertEqual(analyze_jaw("Pointed", 40).saturn, 100)

    def test_symmetry_bands(self):
        self.assertEqual(analyze_symmetry(85).karmic, "Excellent")
        self.assertEqual(analyze_symmetry(84.9).karmic, "Good")
        self.assertEqual(analyze_symmetry(70).health, "Normal Health")
        self.assertEqual(analyze_symmetry(69).health, "Monitor Stress")


class TestExtremeInput(unittest.TestCase):
    def setUp(self):
        self.engine = FaceReadingEngine()

    def test_nan_metric_scores_zero(self):
        analysis = self.engine.calculate(FaceMetrics(forehead=Forehead(height=math.nan)))
        self.assertEqual(analysis.zones.upper, 0)
        self.assertEqual(analysis.planetary.jupiter, 0)
        self.assertEqual(analysis.zones.dominance, "Intellectual")

    def test_infinite_metric_clamps(self):
        analysis = self.engine.calculate(FaceMetrics(eyes=Eyes(size=math.inf)))
        self.assertEqual(analysis.zones.middle, 100)
        self.assertEqual(analysis.planetary.moon, 100)
        self.assertEqual(analysis.planetary.venus, 100)
        self.assertEqual(analysis.zones.dominance, "Social")

    def test_huge_finite_metric_clamps(self):
        metrics = FaceMetrics(jaw=Jaw(strength=1e308), mouth=Mouth(lip_fullness=1e308))
        analysis = self.engine.calculate(metrics)
        self.assertEqual(analysis.zones.lower, 100)
        self.assertEqual(analysis.planetary.saturn, 100)
        self.assertEqual(analysis.charts.jaw_analysis.saturn, 100)
        self.assertEqual(analysis.life_emphasis.elder, "Authority & Comfort")


if __name__ == "__main__":
    unittest.main()
