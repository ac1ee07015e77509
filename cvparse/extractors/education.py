"""
Education extraction.

Entries start at school lines (university, college, institute, ...) that
carry or are followed by a date, or at degree lines directly above a
school line. Within an entry the school line names the school, the first
line with a degree keyword is split into degree and field, and GPA and
minors are picked out of whatever remains.
"""

from __future__ import annotations

import logging
import re
from typing import List, Optional, Sequence, Tuple

from ..dates import find_date_range, strip_dates
from ..shared import EducationEntry, non_empty_lines
from .base import best_effort
from .lines import (
    BoundaryRule,
    LineFeatures,
    classify_lines,
    find_boundaries,
    next_line,
    spans,
    strip_bullet,
)

DEGREE_WORD = (
    r"(?<![A-Za-z])(?:Bachelor(?:'s)?|Master(?:'s)?|Ph\.?\s?D\.?|Doctor(?:ate)?|Diploma|Certificate|"
    r"Associate(?:'s)?|Degree|B\.S\.|M\.S\.|B\.A\.|M\.A\.|M\.B\.A\.|MBA|B\.?\s?Tech|M\.?\s?Tech|"
    r"B\.?Sc\.?|M\.?Sc\.?|BS|MS|BA|MA)(?![A-Za-z])"
)

# Tried in order on the degree line (dates and GPA already removed).
DEGREE_FIELD_PATTERNS: Tuple[re.Pattern, ...] = (
    # "Bachelor of Science | Computer Science"
    re.compile(rf"^(.*?{DEGREE_WORD}[^|]*?)\s*\|\s*(.+)$", re.IGNORECASE),
    # "Bachelor of Science in Computer Science"
    re.compile(rf"^(.*?{DEGREE_WORD}.*?)\s+in\s+(.+)$", re.IGNORECASE),
    # "B.S., Computer Science"
    re.compile(rf"^(.*?{DEGREE_WORD}[^,]*?)\s*,\s*(.+)$", re.IGNORECASE),
)

GPA_RE = re.compile(
    r"\b(?:C?GPA|Grade Point Average)\s*[:\-]?\s*(\d(?:\.\d{1,2})?)(?:\s*/\s*\d(?:\.\d+)?)?",
    re.IGNORECASE,
)

MINOR_RE = re.compile(r"[\s,;–—-]*\bMinor\s+in\s+(.+)$", re.IGNORECASE)

_SEPARATORS = " \t,|-–—:;"

# lines after a school line searched for its dates
DATE_LOOKAHEAD = 2


def _degree_then_school(f: Sequence[LineFeatures], i: int) -> bool:
    nxt = next_line(f, i)
    if not f[i].has_degree_indicator or nxt is None or not nxt.has_school_indicator:
        return False
    # under a school line the degree belongs to that school
    return i == 0 or not f[i - 1].has_school_indicator


def _school_then_date(f: Sequence[LineFeatures], i: int) -> bool:
    """A school line with a date within the next lines, before any other school line."""
    if not f[i].has_school_indicator:
        return False
    for line in f[i + 1:i + 1 + DATE_LOOKAHEAD]:
        if line.has_school_indicator:
            return False
        if line.is_dated:
            return True
    return False


def _lone_degree(f: Sequence[LineFeatures], i: int) -> bool:
    if not f[i].has_degree_indicator:
        return False
    nxt = next_line(f, i)
    prev_school = i > 0 and f[i - 1].has_school_indicator
    return not prev_school and not (nxt is not None and nxt.has_school_indicator)


EDUCATION_RULES: Tuple[BoundaryRule, ...] = (
    BoundaryRule("degree_then_school", _degree_then_school, claims_next=True),
    BoundaryRule("school_then_date", _school_then_date, claims_next=True),
    BoundaryRule("school_with_date", lambda f, i: f[i].has_school_indicator and f[i].is_dated),
)

EDUCATION_FALLBACK_RULES: Tuple[BoundaryRule, ...] = (
    BoundaryRule("school_line", lambda f, i: f[i].has_school_indicator),
    BoundaryRule("lone_degree_line", _lone_degree),
)


def split_degree_field(line: str) -> Tuple[str, str]:
    """Split a degree line into (degree, field); field is empty when no pattern fits."""
    line = line.strip(_SEPARATORS)
    for pattern in DEGREE_FIELD_PATTERNS:
        m = pattern.match(line)
        if m:
            return m.group(1).strip(_SEPARATORS), m.group(2).strip(_SEPARATORS)
    return line, ""


def _split_school_line(line: str) -> Tuple[str, str]:
    """"MIT | B.S. Computer Science" -> (school, degree part)."""
    for separator in ("|", ","):
        if separator not in line:
            continue
        parts = [p.strip() for p in line.split(separator, 1)]
        if re.search(DEGREE_WORD, parts[1], re.IGNORECASE) and not re.search(DEGREE_WORD, parts[0], re.IGNORECASE):
            return parts[0], parts[1]
    return line, ""


def build_education(
    entry_id: str,
    features: Sequence[LineFeatures],
    log: logging.Logger,
) -> Optional[EducationEntry]:
    lines = [f.text for f in features]
    date_range = find_date_range(lines)

    header = [f for f in features if not f.is_bullet]
    remaining = [strip_dates(f.text) for f in header]
    gpa = ""
    for i, text in enumerate(remaining):
        m = GPA_RE.search(text)
        if m:
            gpa = gpa or m.group(1)
            remaining[i] = GPA_RE.sub(" ", text).strip(_SEPARATORS)

    school_idx = next((i for i, f in enumerate(header) if f.has_school_indicator), None)
    school = degree_part = ""
    if school_idx is not None:
        school, degree_part = _split_school_line(remaining[school_idx])

    degree_idx = next(
        (i for i, f in enumerate(header) if f.has_degree_indicator and i != school_idx and remaining[i]),
        None,
    )
    degree_line = remaining[degree_idx] if degree_idx is not None else degree_part

    if school_idx is None and degree_idx is not None:
        # "MIT | B.S. Physics": a school name without a school keyword
        head, rest = _split_school_line(degree_line)
        if rest:
            school, degree_line = head, rest

    if school_idx is None and not school:
        # no school keyword: the first line that is not the degree line names the school
        school_idx = next((i for i, t in enumerate(remaining) if t and i != degree_idx), None)
        if school_idx is not None:
            school = remaining[school_idx]

    degree = field = description = ""
    if degree_line:
        minor = MINOR_RE.search(degree_line)
        if minor:
            description = f"Minor in {minor.group(1).strip(_SEPARATORS)}"
            degree_line = degree_line[: minor.start()]
        degree, field = split_degree_field(degree_line)

    extra = [
        text for i, text in enumerate(remaining)
        if text and i not in (school_idx, degree_idx)
    ]
    extra += [strip_bullet(f.text) for f in features if f.is_bullet]
    description = " ".join(p for p in [description] + extra if p)

    school = school.strip(_SEPARATORS)
    if not (school or degree):
        log.debug("education entry skipped, no school or degree: %r", lines)
        return None

    log.debug("education: school=%r degree=%r field=%r", school, degree, field)
    return EducationEntry(
        id=entry_id,
        school=school,
        degree=degree,
        field=field,
        start_date=date_range.start,
        end_date=date_range.end,
        gpa=gpa,
        description=description,
    )


@best_effort(list)
def extract_education(text: str, log: Optional[logging.Logger] = None) -> List[EducationEntry]:
    """
    Extract education entries from an education section body.

    Never raises: failures are logged and yield an empty list.
    """
    lines = non_empty_lines(text)
    features = classify_lines(lines)
    boundaries = find_boundaries(
        features, EDUCATION_RULES, EDUCATION_FALLBACK_RULES, min_boundaries=1, log=log,
    )
    if boundaries and boundaries[0] != 0:
        boundaries = [0] + boundaries

    entries: List[EducationEntry] = []
    for start, end in spans(boundaries, len(features)):
        entry = build_education(str(len(entries) + 1), features[start:end], log)
        if entry is not None:
            entries.append(entry)

    log.debug("education extraction complete: %d entries", len(entries))
    return entries
