from typing import List
from pydantic import BaseModel, Field


class MatchInput(BaseModel):
    """
    Moon nakshatras of both partners. Names are descriptive only.
    """
    boy_name: str = ""
    girl_name: str = ""
    boy_nakshatra: str
    girl_nakshatra: str


class Avakahada(BaseModel):
    nakshatra: str
    sign: int
    sign_name: str
    varna: str
    vashya: str
    yoni: str
    gana: str
    nadi: str


class KootaFactor(BaseModel):
    name: str
    score: float
    max: int
    description: str
    boy_value: str
    girl_value: str
    area: str


class MatchResult(BaseModel):
    """
    Ashta Koota (Guna Milan) result out of 36 points.
    """
    boy_name: str = ""
    girl_name: str = ""
    total_score: float
    max_score: int = 36
    percentage: float
    verdict: str
    factors: List[KootaFactor] = Field(default_factory=list)
    boy_details: Avakahada
    girl_details: Avakahada
