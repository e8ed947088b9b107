from typing import List, Literal
from pydantic import BaseModel, Field


HouseType = Literal["Kendra", "Trikona", "Dusthana", "Upachaya", "Neutral"]


# ─────────────────────────────────────────────
# Input
# ─────────────────────────────────────────────

class AstroInput(BaseModel):
    """
    Birth details for a chart. Only `dob` and `tob` enter the math.
    """
    name: str = ""
    dob: str = Field(..., description="Birth date as YYYY-MM-DD")
    tob: str = Field("12:00", description="Birth time as HH:MM")
    pob: str = ""


# ─────────────────────────────────────────────
# Chart atoms
# ─────────────────────────────────────────────

class ChartMeta(BaseModel):
    name: str
    place: str
    ayanamsha: str
    sunrise: str
    timezone: str
    calculation_version: str


class Lagna(BaseModel):
    """
    Ascendant sign, degree within sign, nakshatra and sign lord.
    """
    sign: int
    sign_name: str
    degree: float
    nakshatra: str
    lord: str


class Planet(BaseModel):
    """
    A single body's simulated placement.
    """
    name: str
    sign: int
    sign_name: str
    full_degree: float
    norm_degree: float
    house: int
    is_retrograde: bool
    nakshatra: str
    nakshatra_lord: str
    pada: int
    speed: float
    shadbala: int
    rank: int


class House(BaseModel):
    """
    Whole-sign house with occupants and strength.
    """
    number: int
    sign: int
    sign_name: str
    lord: str
    planets: List[str] = Field(default_factory=list)
    strength: int
    type: HouseType


# ─────────────────────────────────────────────
# Dasha
# ─────────────────────────────────────────────

class SubPeriod(BaseModel):
    """
    Antardasha within a Mahadasha.
    """
    planet: str
    start_date: str
    end_date: str
    duration_months: float


class DashaPeriod(BaseModel):
    """
    Mahadasha period. `start` / `end` are calendar years.
    """
    planet: str
    start: int
    end: int
    start_date: str
    end_date: str
    years: float
    duration: str
    antardashas: List[SubPeriod] = Field(default_factory=list)


class Dasha(BaseModel):
    balance: str
    timeline: List[DashaPeriod] = Field(default_factory=list)


# ─────────────────────────────────────────────
# Panchang & chart
# ─────────────────────────────────────────────

class Panchang(BaseModel):
    tithi: str
    yoga: str
    karana: str
    nakshatra: str
    sunrise: str
    ayanamsa: str


class AstroChart(BaseModel):
    """
    Simulated Vedic birth chart.
    """
    meta: ChartMeta
    lagna: Lagna
    planets: List[Planet]
    houses: List[House]
    dasha: Dasha
    yogas: List[str] = Field(default_factory=list)
    panchang: Panchang
