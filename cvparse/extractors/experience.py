"""
Work experience extraction.

Turns the body of an experience/employment section into job entries:

1. classify every non-empty line (see ``lines.classify_line``)
2. find the lines that start a job entry with ``EXPERIENCE_RULES``, falling
   back to ``EXPERIENCE_FALLBACK_RULES`` when fewer than two are found
3. build one entry per boundary-to-boundary span: date range, position
   and company from the header lines, bullet points from the bullet lines
4. drop entries without company, position or start date and sort the rest
   most recent first
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple

from ..dates import find_date_range, recency_key, strip_dates
from ..shared import ExperienceEntry, non_empty_lines
from .base import best_effort
from .lines import (
    BoundaryRule,
    LineFeatures,
    after_bullet_run,
    classify_lines,
    find_boundaries,
    next_line,
    spans,
    strip_bullet,
)

COMPANY_SEPARATORS: Tuple[str, ...] = (",", "|", " at ", " for ", " with ")


def _title_then_company(f: Sequence[LineFeatures], i: int) -> bool:
    nxt = next_line(f, i)
    if nxt is None or not f[i].has_job_title_indicator:
        return False
    if nxt.has_job_title_indicator and nxt.is_dated:
        # the next line is a complete header of its own
        return False
    return nxt.has_company_indicator or nxt.has_location_indicator


EXPERIENCE_RULES: Tuple[BoundaryRule, ...] = (
    BoundaryRule("title_then_company", _title_then_company, claims_next=True),
    BoundaryRule("title_with_date", lambda f, i: f[i].has_job_title_indicator and f[i].is_dated),
    BoundaryRule("company_with_date", lambda f, i: f[i].has_company_indicator and f[i].is_dated),
    BoundaryRule(
        "header_after_bullets",
        lambda f, i: after_bullet_run(f, i)
        and (f[i].has_job_title_indicator or f[i].has_company_indicator or f[i].has_date),
    ),
)

EXPERIENCE_FALLBACK_RULES: Tuple[BoundaryRule, ...] = (
    BoundaryRule("dated_or_titled_line", lambda f, i: f[i].has_date or f[i].has_job_title_indicator),
)


def split_position_company(line: str) -> Tuple[str, str]:
    """Split "Engineer, Acme" / "Engineer at Acme" style lines into (position, company)."""
    for separator in COMPANY_SEPARATORS:
        if separator in line:
            parts = line.split(separator)
            position, company = parts[0].strip(), parts[1].strip()
            if position and company:
                return position, company
    return line, ""


def build_experience(
    entry_id: str,
    features: Sequence[LineFeatures],
    log: logging.Logger,
) -> Optional[ExperienceEntry]:
    """Build one entry from the feature records of its span, or None when it carries nothing."""
    lines = [f.text for f in features]
    date_range = find_date_range(lines)
    if date_range.found:
        log.debug("dates: %r to %r", date_range.start, date_range.end)
    else:
        log.debug("no dates in entry starting %r", lines[0])

    header = [strip_dates(f.text).rstrip(",") for f in features if not f.is_bullet]
    header = [h for h in header if h]
    bullets = [strip_bullet(f.text) for f in features if f.is_bullet]
    bullets = [b for b in bullets if b]

    position = company = description = ""
    if len(header) > 1:
        position, company = header[0], header[1]
        description = " ".join(header[2:])
    elif header:
        position, company = split_position_company(header[0])

    if not (company or position or date_range.start):
        log.debug("entry skipped, no company/position/start date: %r", lines)
        return None

    log.debug("experience: position=%r company=%r bullets=%d", position, company, len(bullets))
    return ExperienceEntry(
        id=entry_id,
        company=company,
        position=position,
        start_date=date_range.start,
        end_date=date_range.end,
        description=description,
        bullet_points=bullets,
    )


def sort_by_recency(entries: Sequence[ExperienceEntry]) -> List[ExperienceEntry]:
    return sorted(entries, key=lambda e: recency_key(e.start_date, e.end_date))


@best_effort(list)
def extract_experiences(text: str, log: Optional[logging.Logger] = None) -> List[ExperienceEntry]:
    """
    Extract job entries from an experience section body.

    Never raises: failures are logged and yield an empty list.
    """
    lines = non_empty_lines(text)
    log.debug("experience extraction: %d non-empty lines", len(lines))

    features = classify_lines(lines)
    boundaries = find_boundaries(features, EXPERIENCE_RULES, EXPERIENCE_FALLBACK_RULES, log=log)
    dropped = lines[: boundaries[0]] if boundaries else lines
    if dropped:
        log.debug("lines before the first entry dropped: %r", dropped)

    entries: List[ExperienceEntry] = []
    for start, end in spans(boundaries, len(features)):
        entry = build_experience(str(len(entries) + 1), features[start:end], log)
        if entry is not None:
            entries.append(entry)

    log.debug("experience extraction complete: %d entries", len(entries))
    return sort_by_recency(entries)
