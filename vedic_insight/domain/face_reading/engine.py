from types import MappingProxyType
from typing import Dict, Tuple

from vedic_insight.domain.scoring import clamp, normalize_score
from vedic_insight.domain.face_reading.schemas import (
    FaceMetrics,
    FaceAnalysis,
    ZoneScores,
    PlanetaryScores,
    ZoneBalance,
    ForeheadAnalysis,
    NoseClassification,
    EyeCharacteristics,
    JawAnalysis,
    SymmetryHealth,
    FaceCharts,
    Personality,
    LifeEmphasis,
)


STRONG_ZONE = 70
HIGH_ZONE = 60

# Checked in order; the first zone equal to the maximum wins ties
ZONE_TRAITS = (
    ("upper", "Intellectual", "Thinker / Planner"),
    ("middle", "Social", "Charismatic / Emotional"),
    ("lower", "Material", "Determined / Practical"),
)

FOREHEAD_TABLE = MappingProxyType({
    "High/Broad": ("Strong", "Good", "Teacher/Advisor"),
    "Low/Narrow": ("Weak", "Sharp", "Business/Execution"),
    "Rounded": ("Moderate", "High", "Arts/Music"),
    "Square": ("High", "Moderate", "Engineering/Tech"),
})

NOSE_TABLE = MappingProxyType({
    "Straight": (85, 80, "Balanced Income"),
    "Hooked": (95, 60, "High Ambition"),
    "Bulbous": (70, 90, "Creative Wealth"),
    "Snub": (60, 85, "Service Oriented"),
})

LIFE_STAGES = (
    ("youth", "upper", "Intellectual Growth & Study", "Practical Struggles"),
    ("midlife", "middle", "Wealth & Family Success", "Career Building"),
    ("elder", "lower", "Authority & Comfort", "Spiritual Retreat"),
)


# ─────────────────────────────────────────────
# Three-zone formulas (Mukha Trikona)
# ─────────────────────────────────────────────

def upper_zone_score(m: FaceMetrics) -> int:
    """Forehead: intellect and spirituality (Jupiter/Mercury)."""
    f = m.forehead
    return normalize_score((f.height * 2 + f.width * 1.5 - f.wrinkles * 1.2) * 3)


def middle_zone_score(m: FaceMetrics) -> int:
    """Eyes, nose, cheeks: emotions and social life."""
    return normalize_score(
        (m.eyes.size * 1.8 + m.nose.width * 1.5 + m.cheeks.prominence * 1.2) * 2.5
    )


def lower_zone_score(m: FaceMetrics) -> int:
    """Mouth, chin, jaw: material life and discipline."""
    return normalize_score(
        (m.mouth.lip_fullness * 1.5 + m.chin.prominence * 1.8 + m.jaw.strength * 2) * 2.2
    )


def dominant_zone(upper: int, middle: int, lower: int) -> Tuple[str, str]:
    """
    (trait, description) of the highest zone; ties resolve upper, middle, lower.
    """
    scores = {"upper": upper, "middle": middle, "lower": lower}
    highest = max(scores.values())
    for zone, trait, desc in ZONE_TRAITS:
        if scores[zone] == highest:
            return trait, desc
    _, trait, desc = ZONE_TRAITS[-1]
    return trait, desc


# ─────────────────────────────────────────────
# Planetary feature mapping
# ─────────────────────────────────────────────

def planetary_scores(m: FaceMetrics) -> PlanetaryScores:
    raw: Dict[str, float] = {
        # Forehead → Jupiter (wisdom) + Mercury (intellect)
        "jupiter": (m.forehead.height + m.forehead.width) * 5,
        "mercury": (m.forehead.width * 0.6 + m.eyes.size * 0.4) * 10,
        # Eyes → Moon (mind)
        "moon": m.eyes.size * 6 + m.skin.texture * 4,
        # Nose → Mars (assertiveness)
        "mars": m.nose.length * 5 + m.nose.width * 3 + m.jaw.strength * 2,
        # Cheekbones → Sun (authority)
        "sun": m.cheeks.prominence * 10,
        # Lips → Venus (relationships)
        "venus": m.mouth.lip_fullness * 5 + m.eyes.size * 5,
        # Chin/Jaw → Saturn (discipline)
        "saturn": m.jaw.strength * 6 + m.chin.prominence * 4,
    }
    return PlanetaryScores(**{k: round(clamp(v), 2) for k, v in raw.items()})


# ─────────────────────────────────────────────
# Categorical sub-analyses
# ─────────────────────────────────────────────

def analyze_forehead(shape: str) -> ForeheadAnalysis:
    jupiter, mercury, career = FOREHEAD_TABLE.get(shape, FOREHEAD_TABLE["High/Broad"])
    return ForeheadAnalysis(jupiter=jupiter, mercury=mercury, career=career)


def analyze_nose(shape: str) -> NoseClassification:
    mars, venus, wealth = NOSE_TABLE.get(shape, NOSE_TABLE["Straight"])
    return NoseClassification(mars=mars, venus=venus, wealth=wealth)


def analyze_eyes(shape: str, size: float) -> EyeCharacteristics:
    if size > 7:
        personality = "Trustworthy & Open"
    elif size < 4:
        personality = "Analytical & Private"
    else:
        personality = "Balanced"

    if shape == "Deep-set":
        personality += ", Intense"
    elif shape == "Round":
        personality += ", Emotional"

    return EyeCharacteristics(
        type=f"{'Large' if size > 7 else 'Small'} / {shape}",
        venus="High" if size > 7 else "Medium",
        personality=personality,
    )


def analyze_jaw(jaw_type: str, strength: float) -> JawAnalysis:
    approach = "Balanced"
    if "Square" in jaw_type:
        approach = "Disciplined & Strong"
    elif "Round" in jaw_type:
        approach = "Harmonious & Adaptable"
    elif "Pointed" in jaw_type:
        approach = "Ambitious & Sharp"

    return JawAnalysis(type=jaw_type, saturn=clamp(strength * 10), approach=approach)


def analyze_symmetry(score: float) -> SymmetryHealth:
    if score >= 85:
        return SymmetryHealth(karmic="Excellent", health="Strong Vitality")
    if score >= 70:
        return SymmetryHealth(karmic="Good", health="Normal Health")
    return SymmetryHealth(karmic="Average", health="Monitor Stress")


class FaceReadingEngine:
    """
    Scores AI-estimated facial metrics.
    """

    def calculate(self, m: FaceMetrics) -> FaceAnalysis:
        zones = {
            "upper": upper_zone_score(m),
            "middle": middle_zone_score(m),
            "lower": lower_zone_score(m),
        }
        trait, description = dominant_zone(zones["upper"], zones["middle"], zones["lower"])

        planets = planetary_scores(m)

        # Forehead governs youth, middle face midlife, lower face later years
        emphasis = {
            stage: strong if zones[zone] > STRONG_ZONE else weak
            for stage, zone, strong, weak in LIFE_STAGES
        }

        charts = FaceCharts(
            zone_balance=[
                ZoneBalance(
                    zone=f"{zone_trait} ({zone.capitalize()})",
                    score=zones[zone],
                    interpretation="High" if zones[zone] > HIGH_ZONE else "Avg",
                )
                for zone, zone_trait, _ in ZONE_TRAITS
            ],
            forehead_analysis=analyze_forehead(m.forehead.shape),
            nose_classification=analyze_nose(m.nose.shape),
            eye_characteristics=analyze_eyes(m.eyes.shape, m.eyes.size),
            jaw_analysis=analyze_jaw(m.jaw.type, m.jaw.strength),
            symmetry_health=analyze_symmetry(m.symmetry),
        )

        if planets.venus > 80:
            secondary = "Charming"
        elif planets.mars > 80:
            secondary = "Driven"
        else:
            secondary = "Steady"

        return FaceAnalysis(
            zones=ZoneScores(dominance=trait, **zones),
            planetary=planets,
            charts=charts,
            personality=Personality(primary=description, secondary=secondary),
            life_emphasis=LifeEmphasis(**emphasis),
        )


def calculate_face_reading(metrics: FaceMetrics) -> FaceAnalysis:
    return FaceReadingEngine().calculate(metrics)
