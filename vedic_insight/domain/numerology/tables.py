from types import MappingProxyType

# ─────────────────────────────────────────────
# Letter → number tables
# ─────────────────────────────────────────────

# Chaldean leaves 9 unassigned (reserved as sacred)
CHALDEAN_MAP = MappingProxyType({
    "A": 1, "I": 1, "J": 1, "Q": 1, "Y": 1,
    "B": 2, "K": 2, "R": 2,
    "C": 3, "G": 3, "L": 3, "S": 3,
    "D": 4, "M": 4, "T": 4,
    "E": 5, "H": 5, "N": 5, "X": 5,
    "U": 6, "V": 6, "W": 6,
    "O": 7, "Z": 7,
    "F": 8, "P": 8,
})

PYTHAGOREAN_MAP = MappingProxyType({
    "A": 1, "J": 1, "S": 1,
    "B": 2, "K": 2, "T": 2,
    "C": 3, "L": 3, "U": 3,
    "D": 4, "M": 4, "V": 4,
    "E": 5, "N": 5, "W": 5,
    "F": 6, "O": 6, "X": 6,
    "G": 7, "P": 7, "Y": 7,
    "H": 8, "Q": 8, "Z": 8,
    "I": 9, "R": 9,
})

LETTER_MAPS = MappingProxyType({
    "chaldean": CHALDEAN_MAP,
    "pythagorean": PYTHAGOREAN_MAP,
})

MASTER_NUMBERS = frozenset({11, 22, 33})


# ─────────────────────────────────────────────
# Chart tables (keyed by root digit 1–9)
# ─────────────────────────────────────────────

COMPATIBILITY_MATRIX = MappingProxyType({
    1: {"friends": (1, 2, 3, 5, 9), "neutral": (4, 7), "enemies": (6, 8)},
    2: {"friends": (1, 3, 5), "neutral": (2, 7, 8, 9), "enemies": (4, 6)},
    3: {"friends": (1, 2, 3, 5, 9), "neutral": (7, 8), "enemies": (4, 6)},
    4: {"friends": (5, 6, 7), "neutral": (1, 8), "enemies": (2, 3, 4, 9)},
    5: {"friends": (1, 4, 5, 6), "neutral": (3, 7, 8, 9), "enemies": (2,)},
    6: {"friends": (5, 6, 8, 9), "neutral": (2, 4, 7), "enemies": (1, 3)},
    7: {"friends": (4, 6), "neutral": (1, 2, 3, 5, 7, 9), "enemies": (8,)},
    8: {"friends": (5, 6), "neutral": (3, 7), "enemies": (1, 2, 4, 8, 9)},
    9: {"friends": (1, 3, 5, 6, 9), "neutral": (2, 7), "enemies": (4, 8)},
})

COLOR_CHART = MappingProxyType({
    1: "Gold, Orange, Yellow",
    2: "White, Silver, Cream",
    3: "Yellow, Saffron, Purple",
    4: "Electric Blue, Grey",
    5: "Green, White, Light Brown",
    6: "White, Light Blue, Pink",
    7: "Smoky Grey, Pastel Green",
    8: "Black, Dark Blue, Violet",
    9: "Red, Maroon, Rose",
})

LUCKY_DAYS = MappingProxyType({
    1: "Sunday, Monday",
    2: "Monday, Sunday",
    3: "Thursday, Tuesday",
    4: "Saturday, Sunday",
    5: "Wednesday, Friday",
    6: "Friday, Wednesday",
    7: "Monday, Wednesday",
    8: "Saturday, Friday",
    9: "Tuesday, Thursday",
})

PEAK_YEARS = MappingProxyType({
    1: "22, 28, 37, 46, 55",
    2: "20, 24, 29, 38, 47",
    3: "21, 30, 39, 48, 57",
    4: "22, 31, 40, 49, 58",
    5: "23, 32, 41, 50, 59",
    6: "24, 33, 42, 51, 60",
    7: "25, 34, 43, 52, 61",
    8: "26, 35, 44, 53, 62",
    9: "27, 36, 45, 54, 63",
})

RULING_PLANETS = MappingProxyType({
    1: "Sun (Surya)",
    2: "Moon (Chandra)",
    3: "Jupiter (Guru)",
    4: "Rahu (Uranus)",
    5: "Mercury (Budh)",
    6: "Venus (Shukra)",
    7: "Ketu (Neptune)",
    8: "Saturn (Shani)",
    9: "Mars (Mangal)",
})

# Index 0 is unused; lookups outside 1–9 fall back to "mystery" / "unknown"
TRAITS = (
    "", "leadership and initiative", "cooperation and sensitivity",
    "creativity and expression", "stability and process",
    "freedom and versatility", "responsibility and care",
    "analysis and introspection", "power and ambition", "humanitarianism",
)

PATHS = (
    "", "achievement", "partnership", "expression", "building", "adventure",
    "service", "truth-seeking", "execution", "compassion",
)

DISCLAIMER = "Traditional Vedic guidance only, not scientific prediction."
