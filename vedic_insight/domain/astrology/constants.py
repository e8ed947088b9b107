from types import MappingProxyType

# ─────────────────────────────────────────────
# Zodiac
# ─────────────────────────────────────────────

# Index 0 is unused so that sign numbers (1–12) index directly
RASHIS = (
    "", "Mesha (Ari)", "Vrishabha (Tau)", "Mithuna (Gem)", "Karka (Can)",
    "Simha (Leo)", "Kanya (Vir)", "Tula (Lib)", "Vrishchika (Sco)",
    "Dhanu (Sag)", "Makara (Cap)", "Kumbha (Aq)", "Meena (Pis)",
)

RASHI_LORDS = (
    "", "Mars", "Venus", "Mercury", "Moon", "Sun", "Mercury",
    "Venus", "Mars", "Jupiter", "Saturn", "Saturn", "Jupiter",
)

SIGN_SPAN = 30.0


# ─────────────────────────────────────────────
# Planets
# ─────────────────────────────────────────────

PLANET_ORDER = (
    "Sun", "Moon", "Mars", "Mercury", "Jupiter",
    "Venus", "Saturn", "Rahu", "Ketu",
)

NODES = frozenset({"Rahu", "Ketu"})

# Planets that turn retrograde around opposition to the Sun
SUPERIOR_PLANETS = frozenset({"Mars", "Jupiter", "Saturn"})
RETROGRADE_ELONGATION = (150.0, 210.0)

# Benefic and malefic planet classification (simplified)
BENEFIC_PLANETS = frozenset({"Jupiter", "Venus", "Mercury", "Moon"})
MALEFIC_PLANETS = frozenset({"Saturn", "Mars", "Rahu", "Ketu", "Sun"})

EXALTATION_SIGNS = MappingProxyType({
    "Sun": 1, "Moon": 2, "Mars": 10, "Mercury": 6, "Jupiter": 4,
    "Venus": 12, "Saturn": 7, "Rahu": 2, "Ketu": 8,
})

DEBILITATION_SIGNS = MappingProxyType({
    "Sun": 7, "Moon": 8, "Mars": 4, "Mercury": 12, "Jupiter": 10,
    "Venus": 6, "Saturn": 1, "Rahu": 8, "Ketu": 2,
})


# ─────────────────────────────────────────────
# Simulated ephemeris
# ─────────────────────────────────────────────
#
# body: (base longitude at 2000-01-01, degrees per year, degrees per day-of-month)

EPHEMERIS_TABLE = MappingProxyType({
    "Sun": (256.61646, 360.0076983, 0.10),
    "Moon": (194.46650, 4812.678813, 0.90),
    "Mars": (331.58300, 191.4029647, 0.30),
    "Mercury": (246.61646, 360.0076983, 0.80),
    "Jupiter": (10.501519, 30.34905675, 0.05),
    "Venus": (276.61646, 360.0076983, 0.60),
    "Saturn": (26.227444, 12.22113794, 0.02),
    "Rahu": (101.19452, -19.34136261, 0.01),
    "Ketu": (281.19452, -19.34136261, 0.01),
})

EPOCH_YEAR = 2000
DAYS_PER_YEAR = 365.25

LAHIRI_AYANAMSA_2000 = 23.85
AYANAMSA_ARCSEC_PER_YEAR = 50.29

SUNRISE_HOUR = 6.0
DEGREES_PER_HOUR = 15.0
SUNRISE_LABEL = "06:00 AM"


# ─────────────────────────────────────────────
# Nakshatras
# ─────────────────────────────────────────────

NAKSHATRAS = (
    ("Ashwini", "Ketu"), ("Bharani", "Venus"), ("Krittika", "Sun"),
    ("Rohini", "Moon"), ("Mrigashira", "Mars"), ("Ardra", "Rahu"),
    ("Punarvasu", "Jupiter"), ("Pushya", "Saturn"), ("Ashlesha", "Mercury"),
    ("Magha", "Ketu"), ("P.Phalguni", "Venus"), ("U.Phalguni", "Sun"),
    ("Hasta", "Moon"), ("Chitra", "Mars"), ("Swati", "Rahu"),
    ("Vishakha", "Jupiter"), ("Anuradha", "Saturn"), ("Jyeshtha", "Mercury"),
    ("Mula", "Ketu"), ("P.Ashadha", "Venus"), ("U.Ashadha", "Sun"),
    ("Shravana", "Moon"), ("Dhanishta", "Mars"), ("Shatabhisha", "Rahu"),
    ("P.Bhadrapada", "Jupiter"), ("U.Bhadrapada", "Saturn"), ("Revati", "Mercury"),
)

NAKSHATRA_SPAN = 360 / 27  # 13°20′
PADA_SPAN = NAKSHATRA_SPAN / 4  # 3°20′


# ─────────────────────────────────────────────
# Houses
# ─────────────────────────────────────────────

KENDRA_HOUSES = frozenset({1, 4, 7, 10})
TRIKONA_HOUSES = frozenset({5, 9})
DUSTHANA_HOUSES = frozenset({6, 8, 12})
UPACHAYA_HOUSES = frozenset({3, 11})


# ─────────────────────────────────────────────
# Vimshottari Dasha
# ─────────────────────────────────────────────

DASHA_LORDS = (
    ("Ketu", 7), ("Venus", 20), ("Sun", 6), ("Moon", 10),
    ("Mars", 7), ("Rahu", 18), ("Jupiter", 16), ("Saturn", 19), ("Mercury", 17),
)

VIMSHOTTARI_YEARS = 120
FOLLOWING_DASHA_PERIODS = 5


# ─────────────────────────────────────────────
# Panchang
# ─────────────────────────────────────────────

TITHIS = (
    "Pratipada", "Dwitiya", "Tritiya", "Chaturthi", "Panchami", "Shashti",
    "Saptami", "Ashtami", "Navami", "Dashami", "Ekadashi", "Dwadashi",
    "Trayodashi", "Chaturdashi", "Purnima/Amavasya",
)

TITHI_SPAN = 12.0

# Truncated nakshatra span; yoga boundaries fall slightly earlier than 360/27
YOGA_SPAN = 13.3333

NITYA_YOGAS = (
    "Vishkumbha", "Preeti", "Ayushman", "Saubhagya", "Sobhana", "Atiganda",
    "Sukarma", "Dhriti", "Shoola", "Ganda", "Vriddhi", "Dhruva", "Vyaghata",
    "Harshana", "Vajra", "Siddhi", "Vyatipata", "Variyan", "Parigha", "Shiva",
    "Siddha", "Sadhya", "Shubha", "Shukla", "Brahma", "Indra", "Vaidhriti",
)

KARANAS = (
    "Bava", "Balava", "Kaulava", "Taitila", "Gara", "Vanija",
    "Vishti", "Shakuni", "Chatushpada", "Naga", "Kimstughna",
)


# ─────────────────────────────────────────────
# Yogas
# ─────────────────────────────────────────────

MANGLIK_HOUSES = frozenset({1, 4, 7, 8, 12})
NO_YOGAS_FOUND = "No major yogas found"
