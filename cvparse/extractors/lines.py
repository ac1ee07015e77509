"""
Line classification and entry-boundary detection.

Resumes carry no markup between entries, so the experience, projects and
education extractors infer where an entry starts from line-level signals:

- ``classify_line`` turns one line into a ``LineFeatures`` record
  (bullet, dates, employer/title/project/school indicators, links,
  continuation).
- ``find_boundaries`` applies an ordered list of named ``BoundaryRule``
  predicates to the feature records and returns the indices of lines that
  start a new entry. A second, looser rule list is applied only when the
  first pass finds too few boundaries.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from functools import reduce
from typing import Callable, FrozenSet, List, Optional, Sequence, Tuple

from ..dates import strip_dates
from ..logging_utils import resolve_log
from ..patterns import (
    ACTION_VERBS,
    BULLET_GLYPH_RE,
    BULLET_MARKERS,
    BULLET_PREFIX_RE,
    CITY_STATE_RE,
    COMPANY_INDICATOR_RE,
    DATE_TOKEN_RE,
    DEGREE_INDICATOR_RE,
    GITHUB_RE,
    HAS_DATE_RANGE_RE,
    HAS_DATE_RE,
    JOB_TITLE_INDICATOR_RE,
    PROJECT_INDICATOR_RE,
    SCHOOL_INDICATOR_RE,
    URL_RE,
)

CONTINUATION_RE = re.compile(r"^(?:for|using|with|and|in|to|on|of|by)\s", re.IGNORECASE)

_ONGOING_WORD_RE = re.compile(r"\b(?:present|current|now|ongoing)\b", re.IGNORECASE)


@dataclass(frozen=True)
class LineFeatures:
    text: str
    is_bullet: bool = False
    has_date: bool = False
    has_date_range: bool = False
    is_date_only: bool = False
    has_company_indicator: bool = False
    has_location_indicator: bool = False
    has_job_title_indicator: bool = False
    has_project_indicator: bool = False
    has_school_indicator: bool = False
    has_degree_indicator: bool = False
    has_link: bool = False
    has_github_link: bool = False
    is_continuation: bool = False

    @property
    def is_dated(self) -> bool:
        return self.has_date or self.has_date_range


def is_bullet_line(line: str) -> bool:
    """Glyph prefix, unicode bullet glyph, or an action verb as the first word."""
    line = line.strip()
    if not line:
        return False
    if any(line.startswith(marker) for marker in BULLET_MARKERS):
        return True
    if BULLET_GLYPH_RE.match(line):
        return True
    first_word = line.split()[0].lower().strip(",.:;")
    return first_word in ACTION_VERBS


def strip_bullet(line: str) -> str:
    return BULLET_PREFIX_RE.sub("", line, count=1).strip()


def looks_like_continuation(line: str) -> bool:
    """A wrapped line: starts with a conjunction or preposition (for, using, with, ...)."""
    return bool(CONTINUATION_RE.match(line.strip()))


def is_date_only(line: str) -> bool:
    if not DATE_TOKEN_RE.search(line):
        return False
    rest = _ONGOING_WORD_RE.sub(" ", strip_dates(line))
    return not rest.strip(" \t,|-–—:;()")


def classify_line(line: str) -> LineFeatures:
    text = line.strip()
    return LineFeatures(
        text=text,
        is_bullet=is_bullet_line(text),
        has_date=bool(HAS_DATE_RE.search(text)),
        has_date_range=bool(HAS_DATE_RANGE_RE.search(text)),
        is_date_only=is_date_only(text),
        has_company_indicator=bool(COMPANY_INDICATOR_RE.search(text)),
        has_location_indicator="|" in text or ("," in text and bool(CITY_STATE_RE.search(text))),
        has_job_title_indicator=bool(JOB_TITLE_INDICATOR_RE.search(text)),
        has_project_indicator=bool(PROJECT_INDICATOR_RE.search(text)),
        has_school_indicator=bool(SCHOOL_INDICATOR_RE.search(text)),
        has_degree_indicator=bool(DEGREE_INDICATOR_RE.search(text)),
        has_link=bool(URL_RE.search(text) or GITHUB_RE.search(text)),
        has_github_link=bool(GITHUB_RE.search(text)),
        is_continuation=looks_like_continuation(text),
    )


def classify_lines(lines: Sequence[str]) -> List[LineFeatures]:
    return [classify_line(line) for line in lines]

# ------------------------- Boundary rules -------------------------

Predicate = Callable[[Sequence[LineFeatures], int], bool]


@dataclass(frozen=True)
class BoundaryRule:
    """
    A named reason for a line to start a new entry.

    claims_next marks rules that read the following line as part of the same
    header (e.g. the company line under a job title); a claimed line cannot
    start an entry itself.
    """
    name: str
    applies: Predicate
    claims_next: bool = False


def next_line(features: Sequence[LineFeatures], i: int) -> Optional[LineFeatures]:
    return features[i + 1] if i + 1 < len(features) else None


def after_bullet_run(features: Sequence[LineFeatures], i: int) -> bool:
    """The two preceding lines are bullets."""
    return i > 1 and features[i - 1].is_bullet and features[i - 2].is_bullet


def is_attached_date_line(features: Sequence[LineFeatures], i: int) -> bool:
    """A line holding only dates, directly under a header line, belongs to that header."""
    return features[i].is_date_only and i > 0 and not features[i - 1].is_bullet


def not_bullet(features: Sequence[LineFeatures], i: int) -> bool:
    """Default eligibility: bullets and attached date lines never start an entry."""
    return not features[i].is_bullet and not is_attached_date_line(features, i)


def _scan(
    features: Sequence[LineFeatures],
    rules: Sequence[BoundaryRule],
    eligible: Predicate,
    taken: FrozenSet[int],
    claimed: FrozenSet[int],
    log: logging.Logger,
    label: str,
) -> Tuple[Tuple[int, ...], FrozenSet[int]]:
    def step(state: Tuple[Tuple[int, ...], FrozenSet[int]], i: int) -> Tuple[Tuple[int, ...], FrozenSet[int]]:
        found, claimed_now = state
        if i in taken or i in claimed_now or not eligible(features, i):
            return state
        rule = next((r for r in rules if r.applies(features, i)), None)
        if rule is None:
            return state
        log.debug("%s boundary at line %d (%s): %r", label, i, rule.name, features[i].text)
        if rule.claims_next:
            claimed_now = claimed_now | {i + 1}
        return found + (i,), claimed_now

    return reduce(step, range(len(features)), ((), claimed))


def find_boundaries(
    features: Sequence[LineFeatures],
    rules: Sequence[BoundaryRule],
    fallback_rules: Sequence[BoundaryRule] = (),
    *,
    eligible: Predicate = not_bullet,
    min_boundaries: int = 2,
    log: Optional[logging.Logger] = None,
) -> List[int]:
    """
    Return the sorted indices of lines that start a new entry.

    The first pass applies ``rules``. If it finds fewer than
    ``min_boundaries`` lines, ``fallback_rules`` are applied on top of the
    first-pass result. The fallback favours recall and can over-segment
    unusual layouts; the projects extractor repairs part of that with its
    fragment merge.
    """
    log = resolve_log(log)
    found, claimed = _scan(features, rules, eligible, frozenset(), frozenset(), log, "primary")

    if len(found) < min_boundaries and fallback_rules:
        log.debug("only %d boundaries found, applying fallback rules", len(found))
        extra, _ = _scan(features, fallback_rules, eligible, frozenset(found), claimed, log, "fallback")
        found = found + extra

    return sorted(found)


def spans(boundaries: Sequence[int], total: int) -> List[Tuple[int, int]]:
    """(start, end_exclusive) per boundary; the last span runs to the end."""
    ends = list(boundaries[1:]) + [total]
    return list(zip(boundaries, ends))
