"""
Kundali Milan (Ashta Koota matching)

Scores compatibility between two Moon nakshatras on 8 factors (36 max points).
"""

import logging
from types import MappingProxyType
from typing import List, Tuple

from vedic_insight.domain.astrology.constants import (
    NAKSHATRAS,
    NAKSHATRA_SPAN,
    RASHIS,
    RASHI_LORDS,
    SIGN_SPAN,
)
from vedic_insight.domain.matching.schemas import (
    MatchInput,
    MatchResult,
    KootaFactor,
    Avakahada,
)

logger = logging.getLogger(__name__)

MAX_SCORE = 36

# (minimum total, verdict), checked top-down
VERDICT_BANDS = (
    (28, "Excellent Union (Uttam)"),
    (18, "Good Compatibility (Madhyam)"),
)
LOWEST_VERDICT = "Incompatible (Adham)"


# Full names accepted alongside the abbreviated chart spelling
_NAKSHATRA_ALIASES = {"purva ": "p.", "uttara ": "u.", "poorva ": "p.", "p. ": "p.", "u. ": "u."}


def nakshatra_index(name: str) -> int:
    """
    Index (0-26) of a nakshatra name; unknown names fall back to Ashwini.
    """
    key = (name or "").strip().lower()
    for alias, short in _NAKSHATRA_ALIASES.items():
        if key.startswith(alias):
            key = short + key[len(alias):]
            break

    for index, (nakshatra, _) in enumerate(NAKSHATRAS):
        if nakshatra.lower() == key:
            return index

    logger.warning(f"Unknown nakshatra {name!r}, falling back to {NAKSHATRAS[0][0]}")
    return 0


class MatchmakingEngine:
    """
    Ashta Koota matching between two Moon nakshatras.
    """

    # ─────────────────────────────────────────────
    # Constants / Lookup Tables
    # ─────────────────────────────────────────────

    VARNA_HIERARCHY = ("Shudra", "Vaishya", "Kshatriya", "Brahmin")  # 0 = lowest

    # Indexed by sign number (1-12)
    SIGN_VARNA = (
        "", "Kshatriya", "Vaishya", "Shudra", "Brahmin", "Kshatriya", "Vaishya",
        "Shudra", "Brahmin", "Kshatriya", "Vaishya", "Shudra", "Brahmin",
    )

    SIGN_VASHYA = (
        "", "Chatushpada", "Chatushpada", "Manava", "Jalchar", "Vanchar", "Manava",
        "Manava", "Keeta", "Manava", "Jalchar", "Manava", "Jalchar",
    )

    # Vashya compatibility (simplified); unlisted pairs score 0
    VASHYA_COMPAT = MappingProxyType({
        ("Manava", "Manava"): 2,
        ("Manava", "Chatushpada"): 1,
        ("Chatushpada", "Chatushpada"): 2,
        ("Vanchar", "Vanchar"): 2,
        ("Jalchar", "Jalchar"): 2,
        ("Keeta", "Keeta"): 2,
    })

    # Indexed by nakshatra (0-26)
    NAKSHATRA_YONI = (
        "Horse", "Elephant", "Sheep", "Serpent", "Serpent", "Dog",
        "Cat", "Sheep", "Cat", "Rat", "Rat",
        "Cow", "Buffalo", "Tiger", "Buffalo", "Tiger",
        "Deer", "Deer", "Dog", "Monkey", "Mongoose",
        "Monkey", "Lion", "Horse", "Lion",
        "Cow", "Elephant",
    )

    NAKSHATRA_GANA = (
        "Deva", "Manushya", "Rakshasa", "Manushya", "Deva", "Manushya",
        "Deva", "Deva", "Rakshasa", "Rakshasa", "Manushya",
        "Manushya", "Deva", "Rakshasa", "Deva", "Rakshasa",
        "Deva", "Rakshasa", "Rakshasa", "Manushya", "Manushya",
        "Deva", "Rakshasa", "Rakshasa", "Manushya",
        "Manushya", "Deva",
    )

    NAKSHATRA_NADI = (
        "Adi", "Madhya", "Antya", "Antya", "Madhya", "Adi",
        "Adi", "Madhya", "Antya", "Antya", "Madhya",
        "Adi", "Adi", "Madhya", "Antya", "Antya",
        "Madhya", "Adi", "Adi", "Madhya", "Antya",
        "Antya", "Madhya", "Adi", "Adi",
        "Madhya", "Antya",
    )

    YONI_ENEMIES = frozenset({
        ("Horse", "Buffalo"), ("Elephant", "Lion"), ("Sheep", "Monkey"),
        ("Serpent", "Mongoose"), ("Dog", "Deer"), ("Cat", "Rat"),
        ("Tiger", "Cow"),
    })

    GANA_SCORES = MappingProxyType({
        ("Deva", "Deva"): 6,
        ("Manushya", "Manushya"): 6,
        ("Rakshasa", "Rakshasa"): 6,
        ("Deva", "Manushya"): 5,
        ("Manushya", "Deva"): 5,
        ("Manushya", "Rakshasa"): 1,
        ("Rakshasa", "Manushya"): 1,
        ("Deva", "Rakshasa"): 0,
        ("Rakshasa", "Deva"): 0,
    })

    # 1 = Friend, 0 = Neutral, -1 = Enemy
    PLANET_FRIENDSHIP = MappingProxyType({
        "Sun": {"Moon": 1, "Mars": 1, "Jupiter": 1, "Venus": -1, "Saturn": -1, "Mercury": 0},
        "Moon": {"Sun": 1, "Mercury": 1, "Mars": 0, "Jupiter": 0, "Venus": 0, "Saturn": 0},
        "Mars": {"Sun": 1, "Moon": 1, "Jupiter": 1, "Venus": 0, "Saturn": 0, "Mercury": -1},
        "Mercury": {"Sun": 1, "Venus": 1, "Moon": -1, "Mars": 0, "Jupiter": 0, "Saturn": 0},
        "Jupiter": {"Sun": 1, "Moon": 1, "Mars": 1, "Venus": -1, "Saturn": 0, "Mercury": -1},
        "Venus": {"Mercury": 1, "Saturn": 1, "Sun": -1, "Moon": -1, "Mars": 0, "Jupiter": 0},
        "Saturn": {"Mercury": 1, "Venus": 1, "Sun": -1, "Moon": -1, "Mars": -1, "Jupiter": 0},
    })

    # Bhakoot dosha sign distances
    BHAKOOT_BAD = ((2, 12), (5, 9), (6, 8))

    AUSPICIOUS_TARAS = frozenset({3, 5, 7})
    INAUSPICIOUS_TARAS = frozenset({9})

    # ─────────────────────────────────────────────
    # Public API
    # ─────────────────────────────────────────────

    def calculate(self, data: MatchInput) -> MatchResult:
        boy = self.avakahada(nakshatra_index(data.boy_nakshatra))
        girl = self.avakahada(nakshatra_index(data.girl_nakshatra))

        factors: List[KootaFactor] = []

        def add(name: str, max_points: int, area: str, result: Tuple[float, str], boy_value: str, girl_value: str):
            score, description = result
            factors.append(KootaFactor(
                name=name, score=score, max=max_points, description=description,
                boy_value=boy_value, girl_value=girl_value, area=area,
            ))

        boy_lord = RASHI_LORDS[boy.sign]
        girl_lord = RASHI_LORDS[girl.sign]

        add("Varna", 1, "Work & Status", self._calc_varna(boy.varna, girl.varna), boy.varna, girl.varna)
        add("Vashya", 2, "Dominance & Control", self._calc_vashya(boy.vashya, girl.vashya), boy.vashya, girl.vashya)
        add("Tara", 3, "Destiny & Health", self._calc_tara(boy.nakshatra, girl.nakshatra), boy.nakshatra, girl.nakshatra)
        add("Yoni", 4, "Physical & Intimacy", self._calc_yoni(boy.yoni, girl.yoni), boy.yoni, girl.yoni)
        add("Graha Maitri", 5, "Mental Compatibility", self._calc_graha_maitri(boy_lord, girl_lord), boy_lord, girl_lord)
        add("Gana", 6, "Temperament & Nature", self._calc_gana(boy.gana, girl.gana), boy.gana, girl.gana)
        add("Bhakoot", 7, "Love & Prosperity", self._calc_bhakoot(boy.sign, girl.sign), boy.sign_name, girl.sign_name)
        add("Nadi", 8, "Health & Progeny", self._calc_nadi(boy.nadi, girl.nadi), boy.nadi, girl.nadi)

        total = sum(f.score for f in factors)

        return MatchResult(
            boy_name=data.boy_name,
            girl_name=data.girl_name,
            total_score=total,
            max_score=MAX_SCORE,
            percentage=round((total / MAX_SCORE) * 100, 1),
            verdict=verdict_for(total),
            factors=factors,
            boy_details=boy,
            girl_details=girl,
        )

    def avakahada(self, index: int) -> Avakahada:
        """
        Avakahada Chakra attributes for a Moon placed mid-nakshatra.
        """
        index %= len(NAKSHATRAS)
        midpoint = (index + 0.5) * NAKSHATRA_SPAN
        sign = int(midpoint // SIGN_SPAN) + 1

        return Avakahada(
            nakshatra=NAKSHATRAS[index][0],
            sign=sign,
            sign_name=RASHIS[sign],
            varna=self.SIGN_VARNA[sign],
            vashya=self.SIGN_VASHYA[sign],
            yoni=self.NAKSHATRA_YONI[index],
            gana=self.NAKSHATRA_GANA[index],
            nadi=self.NAKSHATRA_NADI[index],
        )

    # ─────────────────────────────────────────────
    # Per-Factor Calculations
    # ─────────────────────────────────────────────

    def _calc_varna(self, boy_varna: str, girl_varna: str):
        """Varna: Boy's Varna >= Girl's Varna = 1 point."""
        boy_rank = self.VARNA_HIERARCHY.index(boy_varna)
        girl_rank = self.VARNA_HIERARCHY.index(girl_varna)

        if boy_rank >= girl_rank:
            return 1, f"Boy ({boy_varna}) is equal or higher than Girl ({girl_varna})."
        return 0, f"Boy ({boy_varna}) is lower than Girl ({girl_varna})."

    def _calc_vashya(self, boy_vashya: str, girl_vashya: str):
        """Vashya: Compatibility of influence types."""
        score = self.VASHYA_COMPAT.get(
            (boy_vashya, girl_vashya),
            self.VASHYA_COMPAT.get((girl_vashya, boy_vashya), 0),
        )
        return score, f"Boy: {boy_vashya}, Girl: {girl_vashya}."

    def _calc_tara(self, boy_nak: str, girl_nak: str):
        """Tara: Based on Nakshatra distance."""
        names = [name for name, _ in NAKSHATRAS]
        boy_idx = names.index(boy_nak)
        girl_idx = names.index(girl_nak)

        # Count boy from girl's nakshatra, 1-9 cycle
        dist = (boy_idx - girl_idx) % 27 + 1
        tara_num = ((dist - 1) % 9) + 1

        if tara_num in self.AUSPICIOUS_TARAS:
            return 3, f"Tara {tara_num} is auspicious."
        if tara_num in self.INAUSPICIOUS_TARAS:
            return 0, f"Tara {tara_num} is inauspicious."
        return 1.5, f"Tara {tara_num} is neutral."

    def _calc_yoni(self, boy_yoni: str, girl_yoni: str):
        """Yoni: Animal compatibility."""
        if boy_yoni == girl_yoni:
            return 4, f"Same Yoni ({boy_yoni}), excellent physical compatibility."

        if (boy_yoni, girl_yoni) in self.YONI_ENEMIES or (girl_yoni, boy_yoni) in self.YONI_ENEMIES:
            return 0, f"{boy_yoni} and {girl_yoni} are enemies."

        return 2, f"{boy_yoni} and {girl_yoni} are neutral."

    def _calc_graha_maitri(self, boy_lord: str, girl_lord: str):
        """Graha Maitri: Friendship between Moon sign lords."""
        if boy_lord == girl_lord:
            return 5, f"Same lord ({boy_lord}), excellent mental compatibility."

        friendship = self.PLANET_FRIENDSHIP.get(boy_lord, {}).get(girl_lord, 0)
        rev_friendship = self.PLANET_FRIENDSHIP.get(girl_lord, {}).get(boy_lord, 0)

        avg = (friendship + rev_friendship) / 2

        if avg >= 0.5:
            return 5, f"{boy_lord} and {girl_lord} are friends."
        elif avg >= 0:
            return 3, f"{boy_lord} and {girl_lord} are neutral."
        else:
            return 0, f"{boy_lord} and {girl_lord} are enemies."

    def _calc_gana(self, boy_gana: str, girl_gana: str):
        """Gana: Temperament matching."""
        score = self.GANA_SCORES.get((boy_gana, girl_gana), 3)
        return score, f"Boy: {boy_gana}, Girl: {girl_gana}."

    def _calc_bhakoot(self, boy_sign: int, girl_sign: int):
        """Bhakoot: Moon sign position check."""
        dist1 = (boy_sign - girl_sign) % 12 + 1
        dist2 = (girl_sign - boy_sign) % 12 + 1

        for bad in self.BHAKOOT_BAD:
            if (dist1, dist2) == bad or (dist2, dist1) == bad:
                return 0, f"Distance {dist1}/{dist2} indicates Bhakoot Dosha."

        return 7, f"No Bhakoot Dosha detected (distance: {dist1}/{dist2})."

    def _calc_nadi(self, boy_nadi: str, girl_nadi: str):
        """Nadi: Genetic compatibility (most critical)."""
        if boy_nadi == girl_nadi:
            return 0, f"Same Nadi ({boy_nadi}), Nadi Dosha. Risk to progeny."
        return 8, f"Different Nadis ({boy_nadi} vs {girl_nadi}), no Nadi Dosha."


def verdict_for(total: float) -> str:
    for minimum, verdict in VERDICT_BANDS:
        if total >= minimum:
            return verdict
    return LOWEST_VERDICT


def calculate_match(data: MatchInput) -> MatchResult:
    return MatchmakingEngine().calculate(data)
