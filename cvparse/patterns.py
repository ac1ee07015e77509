"""
Shared keyword tables and regular expressions.

The experience, projects and education extractors classify lines with the
same bullet glyphs, date expressions and technology vocabulary; they are
defined once here so the extractors cannot drift apart.
"""

from __future__ import annotations

import re
from typing import Tuple

# ------------------------- Bullets -------------------------

BULLET_MARKERS: Tuple[str, ...] = (
    "•",  # bullet
    "-",
    "*",
    "⁃",  # hyphen bullet
    "◦",  # white bullet
    "▪",  # small black square
    "■",  # black square
    "●",  # black circle
    "○",  # white circle
    "➢",
    "➤",
    "➥",
    "➔",
)

BULLET_GLYPH_RE = re.compile(r"^\s*[•‣◦⁃∙▪▫▸→]")

BULLET_PREFIX_RE = re.compile(
    r"^\s*(?:[•‣◦⁃∙▪▫▸→"
    r"\-\*■●○➢➤➥➔]\s*)+"
)

# First words that mark an achievement line even without a glyph
ACTION_VERBS = frozenset({
    "developed", "created", "designed", "implemented", "managed",
    "led", "coordinated", "analyzed", "built", "established",
    "improved", "increased", "reduced", "achieved", "delivered",
    "launched", "executed", "generated", "maintained", "organized",
    "produced", "provided", "resolved", "supported", "trained",
    "responsible", "assisted", "collaborated", "facilitated", "simulated",
    "identified", "structured", "taught",
})

# ------------------------- Dates -------------------------

MONTH_NAME = (
    r"(?:Jan(?:uary)?|Feb(?:ruary)?|Mar(?:ch)?|Apr(?:il)?|"
    r"May|Jun(?:e)?|Jul(?:y)?|Aug(?:ust)?|"
    r"Sep(?:t(?:ember)?)?|Oct(?:ober)?|Nov(?:ember)?|Dec(?:ember)?)"
)

ONGOING = r"(?:Present|Current|Now|Ongoing)"

RANGE_SEPARATOR = r"(?:-|–|—|to|until|\s)"

HAS_DATE_RE = re.compile(
    rf"\b(?:19|20)\d{{2}}\b|\b{MONTH_NAME}\.?\s+\d{{4}}|\d{{1,2}}/\d{{4}}",
)

HAS_DATE_RANGE_RE = re.compile(
    rf"{RANGE_SEPARATOR}\s*(?:{MONTH_NAME}\.?\s+\d{{4}}|\b{ONGOING}\b|\d{{4}})",
)

# Tried in order against each line of an entry; first match wins.
DATE_RANGE_PATTERNS: Tuple[re.Pattern, ...] = (
    # "Jan 2020 - Mar 2022", "January 2020 to Present"
    re.compile(
        rf"\b({MONTH_NAME}\.?\s+\d{{4}})\s*{RANGE_SEPARATOR}\s*({MONTH_NAME}\.?\s+\d{{4}}|{ONGOING}\b)",
        re.IGNORECASE,
    ),
    # "01/2020 - 03/2022"
    re.compile(
        rf"\b(\d{{1,2}}/\d{{4}})\s*{RANGE_SEPARATOR}\s*(\d{{1,2}}/\d{{4}}|{ONGOING}\b)",
        re.IGNORECASE,
    ),
    # "01/15/2020 - 03/01/2022"
    re.compile(
        rf"\b(\d{{1,2}}/\d{{1,2}}/\d{{4}})\s*{RANGE_SEPARATOR}\s*(\d{{1,2}}/\d{{1,2}}/\d{{4}}|{ONGOING}\b)",
        re.IGNORECASE,
    ),
    # "2019 - 2021", "2019 to Present"
    re.compile(
        rf"\b((?:19|20)\d{{2}})\s*{RANGE_SEPARATOR}\s*((?:19|20)\d{{2}}\b|{ONGOING}\b)",
        re.IGNORECASE,
    ),
    # "2019-Present"
    re.compile(rf"\b((?:19|20)\d{{2}})-({ONGOING})\b", re.IGNORECASE),
)

# Standalone date tokens, most specific first
DATE_TOKEN_RE = re.compile(
    rf"\b{MONTH_NAME}\.?\s+\d{{4}}\b|\b\d{{1,2}}/\d{{1,2}}/\d{{4}}\b|\b\d{{1,2}}/\d{{4}}\b|\b(?:19|20)\d{{2}}\b",
    re.IGNORECASE,
)

MONTH_YEAR_RE = re.compile(rf"\b{MONTH_NAME}\.?\s+\d{{4}}\b", re.IGNORECASE)

ONGOING_RE = re.compile(r"present|current|now|ongoing", re.IGNORECASE)

# ------------------------- Entry indicators -------------------------

COMPANY_INDICATOR_RE = re.compile(
    r"\b(?:university|college|inc|llc|ltd|corporation|corp|company|co|gmbh|group|"
    r"technologies|solutions|systems|associates|program)\b",
    re.IGNORECASE,
)

JOB_TITLE_INDICATOR_RE = re.compile(
    r"\b(?:assistant|associate|intern|manager|director|engineer|developer|analyst|"
    r"designer|consultant|specialist|coordinator|administrator|officer|representative|"
    r"supervisor|lead|head|executive|president|vp|vice president|ceo|cto|cfo|coo|member)s?\b",
    re.IGNORECASE,
)

CITY_STATE_RE = re.compile(r"\b[A-Z][a-z]+,\s+[A-Z]{2}\b")

PROJECT_INDICATOR_RE = re.compile(
    r"\b(?:project|app|application|website|platform|tool|demo)s?\b",
    re.IGNORECASE,
)

SCHOOL_INDICATOR_RE = re.compile(
    r"university|college|school|academy|institute|polytechnic",
    re.IGNORECASE,
)

DEGREE_INDICATOR_RE = re.compile(
    r"\b(?:bachelor|master|phd|ph\.d|diploma|certificate|degree|b\.s\.|m\.s\.|b\.a\.|m\.a\.|"
    r"m\.b\.a\.|mba|b\.?tech|m\.?tech|b\.?sc|m\.?sc|major|minor|graduate|undergraduate|postgraduate|"
    r"associate(?:'s)?\s+(?:of|degree)|doctor(?:ate)?\b)",
    re.IGNORECASE,
)

# ------------------------- Links -------------------------

URL_RE = re.compile(r"https?://[^\s,;|)]+", re.IGNORECASE)

GITHUB_RE = re.compile(r"(?:https?://)?(?:www\.)?github\.com/[A-Za-z0-9_.\-/]+", re.IGNORECASE)

# ------------------------- Technologies -------------------------

TECH_KEYWORDS: Tuple[str, ...] = (
    "JavaScript", "TypeScript", "Python", "Java", "C++", "C#", "Golang", "Rust",
    "Ruby", "PHP", "Swift", "Kotlin", "Scala", "SQL", "HTML", "CSS", "Sass",
    "React", "React Native", "Angular", "Vue", "Svelte", "Next.js", "Node.js",
    "Express.js", "Django", "Flask", "FastAPI", "Spring Boot", "Ruby on Rails",
    ".NET", "GraphQL", "MongoDB", "PostgreSQL", "MySQL", "SQLite", "Redis",
    "Firebase", "AWS", "Azure", "GCP", "Docker", "Kubernetes", "Terraform",
    "Git", "Linux", "TensorFlow", "PyTorch", "Pandas", "NumPy", "Tailwind",
    "Bootstrap", "jQuery", "Flutter",
)


def keyword_pattern(keyword: str) -> re.Pattern:
    """Word-boundary pattern for a keyword that may itself contain symbols (C++, Node.js)."""
    return re.compile(rf"(?<![\w.+#]){re.escape(keyword)}(?![\w+#]|\.\w)", re.IGNORECASE)


TECH_KEYWORD_PATTERNS: Tuple[Tuple[str, re.Pattern], ...] = tuple(
    (kw, keyword_pattern(kw)) for kw in TECH_KEYWORDS
)
