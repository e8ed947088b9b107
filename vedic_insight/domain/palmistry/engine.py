from typing import Dict, List

from vedic_insight.domain.scoring import normalize_score
from vedic_insight.domain.palmistry.schemas import (
    PalmInput,
    PalmAnalysis,
    LineMetrics,
    MountMetrics,
    LifeEvent,
    LineQuality,
    MountActivation,
    FateTiming,
    PalmCharts,
    VedicInterpretation,
)


# (minimum score, grade), checked top-down
GRADE_BANDS = (
    (86, "Excellent"),
    (61, "Good"),
    (31, "Average"),
)
LOWEST_GRADE = "Weak"

MOUNT_MEANINGS = (
    ("jupiter", "Jupiter", "Leadership"),
    ("saturn", "Saturn", "Discipline"),
    ("apollo", "Apollo", "Creativity"),
    ("venus", "Venus", "Passion"),
)

FATE_TIMING = (
    ("0-20 yrs", "0-15%"),
    ("21-40 yrs", "15-35%"),
    ("41-60 yrs", "35-60%"),
    ("61-80 yrs", "60-85%"),
)


def grade_for(score: float) -> str:
    for minimum, grade in GRADE_BANDS:
        if score >= minimum:
            return grade
    return LOWEST_GRADE


# ─────────────────────────────────────────────
# Line formulas (Hasta Rekha)
# ─────────────────────────────────────────────

def life_line_score(m: LineMetrics) -> int:
    """Ayushya Rekha: length dominant, breaks and islands penalised."""
    return normalize_score(
        m.length * 4 + m.depth * 3 + m.clarity * 3 - m.breaks * 5 - m.islands * 4
    )


def head_line_score(m: LineMetrics) -> int:
    """Medhya Rekha: forks reward versatility."""
    return normalize_score(
        m.length * 3.5 + m.depth * 3 + m.clarity * 3 + m.forks * 2
    )


def heart_line_score(m: LineMetrics) -> int:
    """Hridaya Rekha."""
    return normalize_score(
        m.length * 3.5 + m.depth * 2.5 + m.clarity * 3 - m.islands * 5 - m.breaks * 3
    )


def fate_line_score(m: LineMetrics) -> int:
    """Karma Rekha."""
    return normalize_score(
        m.length * 4 + m.depth * 3 + m.clarity * 3 - m.breaks * 6
    )


def sun_line_score(m: LineMetrics) -> int:
    """Surya Rekha."""
    return normalize_score(
        m.length * 4 + m.clarity * 4 + m.depth * 2 + m.forks * 3
    )


def mount_score(m: MountMetrics) -> int:
    # Height dominant, firmness (fullness) secondary
    return normalize_score(m.height * 6 + m.firmness * 4)


# ─────────────────────────────────────────────
# Event timing
# ─────────────────────────────────────────────

def life_line_events(m: LineMetrics) -> List[LifeEvent]:
    events: List[LifeEvent] = []
    if m.breaks > 0:
        events.append(LifeEvent(age=45, event="Health/Vitality Shift", line="Life Line Break"))
    if m.islands > 0:
        events.append(LifeEvent(age=30, event="Period of Low Energy", line="Life Line Island"))
    if m.forks > 0:
        events.append(LifeEvent(age=60, event="Travel/Change of Residence", line="Life Line Fork"))
    return events


def fate_line_events(m: LineMetrics) -> List[LifeEvent]:
    """
    Fate line is read bottom to top: base to head line ~35,
    head to heart ~35-50, above the heart line 50+.
    """
    events: List[LifeEvent] = []
    if m.breaks > 0:
        events.append(LifeEvent(age=35, event="Career Pivot/Change", line="Fate Line Break"))
    if m.length > 8:
        events.append(LifeEvent(age=28, event="Career Rise", line="Deep Fate Line"))
    return events


class PalmistryEngine:
    """
    Scores AI-estimated palm metrics.
    """

    def calculate(self, palm: PalmInput) -> PalmAnalysis:
        lines = palm.lines

        scores: Dict[str, int] = {
            "life": life_line_score(lines.life),
            "head": head_line_score(lines.head),
            "heart": heart_line_score(lines.heart),
            "fate": fate_line_score(lines.fate),
            "sun": sun_line_score(lines.sun),
        }

        mounts: Dict[str, int] = {
            name: mount_score(getattr(palm.mounts, name))
            for name in ("jupiter", "saturn", "apollo", "mercury", "venus", "moon", "mars")
        }

        timeline = sorted(
            life_line_events(lines.life) + fate_line_events(lines.fate),
            key=lambda e: e.age,
        )

        charts = PalmCharts(
            line_quality=[
                LineQuality(name=name.capitalize(), score=scores[name], grade=grade_for(scores[name]))
                for name in ("life", "head", "heart", "fate")
            ],
            mount_activation=[
                MountActivation(name=label, score=mounts[key], meaning=meaning)
                for key, label, meaning in MOUNT_MEANINGS
            ],
            fate_timing=[
                FateTiming(range=age_range, position=position)
                for age_range, position in FATE_TIMING
            ],
        )

        return PalmAnalysis(
            hand_type=palm.hand_type,
            line_scores=scores,
            line_grades={name: grade_for(score) for name, score in scores.items()},
            mount_scores=mounts,
            event_timeline=timeline,
            charts=charts,
            vedic_interpretation=self._interpret(scores),
            special_marks=list(palm.marks),
        )

    def _interpret(self, scores: Dict[str, int]) -> VedicInterpretation:
        if scores["life"] > 75:
            vitality = "Excellent vitality (Dirgha Ayu). Potential 80+ years."
        elif scores["life"] > 50:
            vitality = "Average vitality. Focus on health maintenance."
        else:
            vitality = "Delicate constitution. Yoga recommended."

        return VedicInterpretation(
            vitality=vitality,
            mindset=(
                "Sharp, analytical mind (Tikshna Budhi)."
                if scores["head"] > 70
                else "Creative, intuitive thinking process."
            ),
            relationships=(
                "Deep, stable emotions & relations."
                if scores["heart"] > 75
                else "Emotional fluctuations possible."
            ),
            career=(
                "Strong destiny & career stability (Prabhal Karma)."
                if scores["fate"] > 70
                else "Self-made success through hard work."
            ),
        )


def calculate_palmistry(palm: PalmInput) -> PalmAnalysis:
    return PalmistryEngine().calculate(palm)
