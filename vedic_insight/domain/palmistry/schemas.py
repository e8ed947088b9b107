from typing import Dict, List, Literal
from pydantic import BaseModel, Field


HandType = Literal["Elementary", "Square", "Conic", "Pointed", "Mixed"]
ThumbIndexRatio = Literal["Long", "Short", "Equal"]


# ─────────────────────────────────────────────
# Input metrics (AI-estimated, trusted)
# ─────────────────────────────────────────────

class LineMetrics(BaseModel):
    """
    Palm line features on a 0–10 scale; breaks/islands/forks are counts.
    """
    length: float = 0
    depth: float = 0
    clarity: float = 0
    breaks: float = 0
    islands: float = 0
    forks: float = 0


class MountMetrics(BaseModel):
    height: float = 0
    firmness: float = 0


class PalmLines(BaseModel):
    life: LineMetrics = Field(default_factory=LineMetrics)
    head: LineMetrics = Field(default_factory=LineMetrics)
    heart: LineMetrics = Field(default_factory=LineMetrics)
    fate: LineMetrics = Field(default_factory=LineMetrics)
    sun: LineMetrics = Field(default_factory=LineMetrics)


class PalmMounts(BaseModel):
    jupiter: MountMetrics = Field(default_factory=MountMetrics)
    saturn: MountMetrics = Field(default_factory=MountMetrics)
    apollo: MountMetrics = Field(default_factory=MountMetrics)
    mercury: MountMetrics = Field(default_factory=MountMetrics)
    venus: MountMetrics = Field(default_factory=MountMetrics)
    moon: MountMetrics = Field(default_factory=MountMetrics)
    mars: MountMetrics = Field(default_factory=MountMetrics)


class Fingers(BaseModel):
    thumb_index_ratio: ThumbIndexRatio = "Equal"


class PalmInput(BaseModel):
    """
    Structured palm description supplied by the vision service.
    """
    hand_type: HandType = "Mixed"
    lines: PalmLines = Field(default_factory=PalmLines)
    mounts: PalmMounts = Field(default_factory=PalmMounts)
    fingers: Fingers = Field(default_factory=Fingers)
    marks: List[str] = Field(default_factory=list)


# ─────────────────────────────────────────────
# Analysis
# ─────────────────────────────────────────────

class LifeEvent(BaseModel):
    age: int
    event: str
    line: str


class LineQuality(BaseModel):
    name: str
    score: int
    grade: str


class MountActivation(BaseModel):
    name: str
    score: int
    meaning: str


class FateTiming(BaseModel):
    range: str
    position: str


class PalmCharts(BaseModel):
    line_quality: List[LineQuality] = Field(default_factory=list)
    mount_activation: List[MountActivation] = Field(default_factory=list)
    fate_timing: List[FateTiming] = Field(default_factory=list)


class VedicInterpretation(BaseModel):
    vitality: str
    mindset: str
    relationships: str
    career: str


class PalmAnalysis(BaseModel):
    """
    Scored palm reading. All scores are clamped to 0–100.
    """
    hand_type: str
    line_scores: Dict[str, int]
    line_grades: Dict[str, str]
    mount_scores: Dict[str, int]
    event_timeline: List[LifeEvent] = Field(default_factory=list)
    charts: PalmCharts
    vedic_interpretation: VedicInterpretation
    special_marks: List[str] = Field(default_factory=list)
