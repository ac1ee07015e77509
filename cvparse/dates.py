"""
Date handling for resume entries.

Dates stay strings everywhere in the records. This module only finds them
(ordered range patterns, then standalone tokens) and turns them into a
total-order sort key for "most recent first" ordering.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime
from enum import IntEnum
from typing import Optional, Sequence, Tuple

from dateutil import parser as dateparse

from .patterns import DATE_RANGE_PATTERNS, DATE_TOKEN_RE, ONGOING_RE

_DEFAULT = datetime(1900, 1, 1)


@dataclass(frozen=True)
class DateRange:
    start: str = ""
    end: str = ""
    line_index: int = -1  # index of the first line a date was found on, -1 if none

    @property
    def found(self) -> bool:
        return bool(self.start)


def find_date_range(lines: Sequence[str]) -> DateRange:
    """
    Find the date range of an entry.

    Each line is tried against the range patterns in priority order and the
    first match wins. Without a range, standalone date tokens are collected
    across all lines: two or more give start/end, a single one gives a start
    date only. An open end is never assumed to be "Present".
    """
    for i, line in enumerate(lines):
        for pattern in DATE_RANGE_PATTERNS:
            m = pattern.search(line)
            if m:
                return DateRange(start=m.group(1), end=m.group(2) or "", line_index=i)

    tokens: list[str] = []
    first_line = -1
    for i, line in enumerate(lines):
        found = [m.group(0) for m in DATE_TOKEN_RE.finditer(line)]
        if found and first_line == -1:
            first_line = i
        tokens.extend(found)

    if len(tokens) >= 2:
        return DateRange(start=tokens[0], end=tokens[1], line_index=first_line)
    if tokens:
        return DateRange(start=tokens[0], end="", line_index=first_line)
    return DateRange()


def is_ongoing(value: str) -> bool:
    return bool(value) and bool(ONGOING_RE.search(value))


def parse_date(value: str) -> Optional[date]:
    """
    Parse a date string found in an entry ("Jan 2020", "01/2020",
    "01/15/2020", "2020"). Missing month or day default to 1. Returns None
    for anything dateutil cannot read, including ongoing markers.
    """
    value = (value or "").strip()
    if not value:
        return None
    try:
        return dateparse.parse(value, default=_DEFAULT).date()
    except (ValueError, OverflowError):
        # "02/31/2020", "Present"
        return None


class DateKind(IntEnum):
    """Sort buckets, in the order entries should appear."""
    ONGOING = 0
    KNOWN = 1
    UNKNOWN = 2


def recency_key(start_date: str, end_date: str) -> Tuple[int, int]:
    """
    Sort key for "most recent first".

    Ongoing entries come first, then entries whose end date (or start date
    when there is no end date) parses, newest first. Everything else is
    UNKNOWN and keeps its relative order at the end (sorting is stable).
    """
    if is_ongoing(end_date):
        return (DateKind.ONGOING, 0)
    parsed = parse_date(end_date) if end_date else parse_date(start_date)
    if parsed is None:
        return (DateKind.UNKNOWN, 0)
    return (DateKind.KNOWN, -parsed.toordinal())


def strip_dates(line: str) -> str:
    """Remove date ranges and date tokens from a line, then trim leftover separators."""
    for pattern in DATE_RANGE_PATTERNS:
        line = pattern.sub(" ", line)
    line = DATE_TOKEN_RE.sub(" ", line)
    line = re.sub(r"\(\s*\)", " ", line)
    line = re.sub(r"\s{2,}", " ", line)
    return line.strip(" \t,|-–—:;")
