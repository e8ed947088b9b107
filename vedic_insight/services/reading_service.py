import logging
import math
from datetime import date
from typing import Any, Iterator, Optional, Tuple

from pydantic import BaseModel

from vedic_insight.config import settings
from vedic_insight.domain.errors import InvalidBirthDataError, InvalidMetricsError
from vedic_insight.domain.parsing import parse_birth_date, parse_birth_moment

from vedic_insight.domain.numerology.engine import NumerologyEngine
from vedic_insight.domain.numerology.schemas import NumerologyInput, NumerologyResult
from vedic_insight.domain.astrology.engine import AstrologyEngine
from vedic_insight.domain.astrology.schemas import AstroInput, AstroChart
from vedic_insight.domain.palmistry.engine import PalmistryEngine
from vedic_insight.domain.palmistry.schemas import PalmInput, PalmAnalysis
from vedic_insight.domain.face_reading.engine import FaceReadingEngine
from vedic_insight.domain.face_reading.schemas import FaceMetrics, FaceAnalysis
from vedic_insight.domain.matching.engine import MatchmakingEngine
from vedic_insight.domain.matching.schemas import MatchInput, MatchResult

logger = logging.getLogger(__name__)


def _numeric_fields(model: BaseModel, prefix: str = "") -> Iterator[Tuple[str, float]]:
    for key, value in model.model_dump().items():
        yield from _walk(value, f"{prefix}{key}")


def _walk(value: Any, path: str) -> Iterator[Tuple[str, float]]:
    if isinstance(value, dict):
        for key, inner in value.items():
            yield from _walk(inner, f"{path}.{key}")
    elif isinstance(value, (int, float)) and not isinstance(value, bool):
        yield path, value


def ensure_usable_metrics(model: BaseModel) -> None:
    """
    Reject negative or non-finite metrics. The engines would clamp them
    to a bound, which is no meaningful reading.
    """
    for path, value in _numeric_fields(model):
        if not math.isfinite(value) or value < 0:
            raise InvalidMetricsError(f"Metric '{path}' must be a finite, non-negative number")


class ReadingService:
    """
    Orchestrates a single reading: strict input checks, engine call, logging.

    Engines never raise; this layer is where unusable input is refused.
    """

    def __init__(self):
        self.numerology = NumerologyEngine()
        self.astrology = AstrologyEngine()
        self.palmistry = PalmistryEngine()
        self.face_reading = FaceReadingEngine()
        self.matchmaking = MatchmakingEngine()

    # ─────────────────────────────────────────────
    # Birth-data readings
    # ─────────────────────────────────────────────

    def numerology_reading(
        self,
        data: NumerologyInput,
        today: Optional[date] = None,
    ) -> NumerologyResult:
        if parse_birth_date(data.dob) is None:
            raise InvalidBirthDataError(f"Unparseable birth date: {data.dob!r}")

        # Fields the caller left out take the deployment defaults
        overrides = {}
        if "system" not in data.model_fields_set:
            overrides["system"] = settings.NUMEROLOGY_DEFAULT_SYSTEM
        if "use_master_numbers" not in data.model_fields_set:
            overrides["use_master_numbers"] = settings.NUMEROLOGY_USE_MASTER_NUMBERS
        if overrides:
            data = data.model_copy(update=overrides)

        result = self.numerology.calculate(data, today=today)
        logger.info(
            f"Numerology reading ({data.system}): "
            f"mulank={result.core_numbers.mulank} bhagyank={result.core_numbers.bhagyank}"
        )
        return result

    def astrology_reading(self, data: AstroInput) -> AstroChart:
        if parse_birth_moment(data.dob, data.tob) is None:
            raise InvalidBirthDataError(f"Unparseable birth moment: {data.dob!r} {data.tob!r}")

        chart = self.astrology.generate(data)
        logger.info(
            f"Astrology chart: lagna={chart.lagna.sign_name} "
            f"moon={chart.planets[1].nakshatra} dasha={chart.dasha.balance}"
        )
        return chart

    # ─────────────────────────────────────────────
    # Metric readings (AI-estimated input)
    # ─────────────────────────────────────────────

    def palm_reading(self, data: PalmInput) -> PalmAnalysis:
        ensure_usable_metrics(data)

        analysis = self.palmistry.calculate(data)
        logger.info(f"Palm reading ({data.hand_type}): {analysis.line_grades}")
        return analysis

    def face_reading_analysis(self, data: FaceMetrics) -> FaceAnalysis:
        ensure_usable_metrics(data)

        analysis = self.face_reading.calculate(data)
        logger.info(f"Face reading: dominance={analysis.zones.dominance}")
        return analysis

    # ─────────────────────────────────────────────
    # Matching
    # ─────────────────────────────────────────────

    def match(self, data: MatchInput) -> MatchResult:
        result = self.matchmaking.calculate(data)
        logger.info(
            f"Ashta Koota match: {result.total_score}/{result.max_score} ({result.verdict})"
        )
        return result
