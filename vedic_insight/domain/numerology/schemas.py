from typing import List, Literal, Optional
from pydantic import BaseModel, Field


NumerologySystem = Literal["chaldean", "pythagorean"]


# ─────────────────────────────────────────────
# Input
# ─────────────────────────────────────────────

class NumerologyInput(BaseModel):
    """
    Name and birth date used for a numerology reading.
    """
    name: str
    dob: str = Field(..., description="Birth date as YYYY-MM-DD")
    system: NumerologySystem = "chaldean"
    use_master_numbers: bool = False


# ─────────────────────────────────────────────
# Result
# ─────────────────────────────────────────────

class CoreNumbers(BaseModel):
    mulank: int
    bhagyank: int
    namank: int
    system: str


class Compatibility(BaseModel):
    friends: List[int] = Field(default_factory=list)
    neutral: List[int] = Field(default_factory=list)
    enemies: List[int] = Field(default_factory=list)


class ColorChart(BaseModel):
    primary: Optional[str] = None


class LuckyDaysChart(BaseModel):
    primary: Optional[str] = None


class PeakYearsChart(BaseModel):
    ranges: Optional[str] = None


class NumerologyCharts(BaseModel):
    compatibility: Compatibility
    colors: ColorChart
    lucky_days: LuckyDaysChart
    peak_years: PeakYearsChart
    ruling_planet: Optional[str] = None


class Forecast(BaseModel):
    lucky_days_upcoming: List[str] = Field(default_factory=list)


class Interpretations(BaseModel):
    mulank: str
    bhagyank: str
    namank: str


class NumerologyResult(BaseModel):
    """
    Complete numerology reading.
    """
    core_numbers: CoreNumbers
    charts: NumerologyCharts
    forecast: Forecast
    interpretations: Interpretations
    disclaimer: str
