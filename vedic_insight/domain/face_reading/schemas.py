from typing import List, Literal
from pydantic import BaseModel, Field


ForeheadShape = Literal["High/Broad", "Low/Narrow", "Rounded", "Square"]
EyeSpacing = Literal["Wide", "Close", "Normal"]
EyeShape = Literal["Almond", "Round", "Deep-set", "Protruding"]
NoseShape = Literal["Straight", "Hooked", "Bulbous", "Snub"]
ChinShape = Literal["Round", "Square", "Pointed", "Receding"]
JawType = Literal["Square/Strong", "Round/Soft", "Pointed"]


# ─────────────────────────────────────────────
# Input metrics (AI-estimated, 0–10 unless noted)
# ─────────────────────────────────────────────

class Forehead(BaseModel):
    height: float = 0
    width: float = 0
    wrinkles: float = 0
    shape: ForeheadShape = "High/Broad"


class Eyes(BaseModel):
    size: float = 0
    spacing: EyeSpacing = "Normal"
    shape: EyeShape = "Almond"


class Nose(BaseModel):
    length: float = 0
    width: float = 0
    shape: NoseShape = "Straight"


class Cheeks(BaseModel):
    prominence: float = 0


class Mouth(BaseModel):
    lip_fullness: float = 0


class Chin(BaseModel):
    shape: ChinShape = "Round"
    prominence: float = 0


class Jaw(BaseModel):
    strength: float = 0
    type: JawType = "Round/Soft"


class Skin(BaseModel):
    texture: float = Field(0, description="10 is smooth")


class FaceMetrics(BaseModel):
    """
    Structured face description supplied by the vision service.
    """
    forehead: Forehead = Field(default_factory=Forehead)
    eyes: Eyes = Field(default_factory=Eyes)
    nose: Nose = Field(default_factory=Nose)
    cheeks: Cheeks = Field(default_factory=Cheeks)
    mouth: Mouth = Field(default_factory=Mouth)
    chin: Chin = Field(default_factory=Chin)
    jaw: Jaw = Field(default_factory=Jaw)
    symmetry: float = Field(0, description="0–100")
    skin: Skin = Field(default_factory=Skin)


# ─────────────────────────────────────────────
# Analysis
# ─────────────────────────────────────────────

class ZoneScores(BaseModel):
    upper: int
    middle: int
    lower: int
    dominance: str


class PlanetaryScores(BaseModel):
    jupiter: float
    mercury: float
    mars: float
    venus: float
    saturn: float
    moon: float
    sun: float


class ZoneBalance(BaseModel):
    zone: str
    score: int
    interpretation: str


class ForeheadAnalysis(BaseModel):
    jupiter: str
    mercury: str
    career: str


class NoseClassification(BaseModel):
    mars: int
    venus: int
    wealth: str


class EyeCharacteristics(BaseModel):
    type: str
    venus: str
    personality: str


class JawAnalysis(BaseModel):
    type: str
    saturn: float
    approach: str


class SymmetryHealth(BaseModel):
    karmic: str
    health: str


class FaceCharts(BaseModel):
    zone_balance: List[ZoneBalance] = Field(default_factory=list)
    forehead_analysis: ForeheadAnalysis
    nose_classification: NoseClassification
    eye_characteristics: EyeCharacteristics
    jaw_analysis: JawAnalysis
    symmetry_health: SymmetryHealth


class Personality(BaseModel):
    primary: str
    secondary: str


class LifeEmphasis(BaseModel):
    youth: str  # 20-35
    midlife: str  # 35-50
    elder: str  # 50+


class FaceAnalysis(BaseModel):
    """
    Mukha Samudrika reading.
    """
    zones: ZoneScores
    planetary: PlanetaryScores
    charts: FaceCharts
    personality: Personality
    life_emphasis: LifeEmphasis
