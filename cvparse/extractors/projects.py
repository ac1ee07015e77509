"""
Project extraction.

Uses the same two-pass boundary detection as the experience extractor,
keyed on project nouns, repository links and "followed by bullets". Lines
that read as a wrapped continuation ("using React ...", "for the ...")
never start a project; they extend the name or description of the
project above.

If the structured pass finds nothing, the body is split into blank-line
separated blocks instead. Finally, fragments (projects whose name starts
with a continuation word and that carry no dates) are folded into the
preceding project.
"""

from __future__ import annotations

import logging
import re
from dataclasses import replace
from functools import reduce
from typing import List, Optional, Sequence, Tuple

from ..dates import find_date_range, strip_dates
from ..patterns import GITHUB_RE, TECH_KEYWORD_PATTERNS, URL_RE
from ..shared import ProjectEntry, non_empty_lines, split_paragraph_blocks, unique_in_order
from .base import best_effort
from .lines import (
    BoundaryRule,
    LineFeatures,
    classify_lines,
    find_boundaries,
    is_attached_date_line,
    looks_like_continuation,
    next_line,
    spans,
    strip_bullet,
)

# ------------------------- Technologies -------------------------

TECH_LABEL_RE = re.compile(
    r"^\s*(?:technologies|technology|tech stack|tech|stack|built with|tools)\s*:\s*(.+)$",
    re.IGNORECASE | re.MULTILINE,
)

# Tried in order; the first one that yields anything wins.
TECH_PATTERNS: Tuple[re.Pattern, ...] = (
    TECH_LABEL_RE,
    re.compile(r"\(([^()]*[,/][^()]*)\)"),
    re.compile(r"\busing\s+(.+?)(?:[.;](?:\s|$)|$)", re.IGNORECASE | re.MULTILINE),
)

_TECH_SPLIT_RE = re.compile(r"\s*(?:,|/|;|\||&|\band\b)\s*", re.IGNORECASE)


def _split_tech_list(raw: str) -> List[str]:
    items = [item.strip(" .") for item in _TECH_SPLIT_RE.split(raw)]
    return [item for item in items if 0 < len(item) < 40 and not item.isdigit()]


def extract_technologies(text: str) -> List[str]:
    """
    Technologies named in a project's text.

    Tries "Technologies: X, Y", parenthesized lists and "using X and Y"
    before falling back to scanning for known technology names.
    """
    for pattern in TECH_PATTERNS:
        found: List[str] = []
        for m in pattern.finditer(text):
            found.extend(_split_tech_list(m.group(1)))
        if found:
            return unique_in_order(found)

    hits = []
    for keyword, pattern in TECH_KEYWORD_PATTERNS:
        m = pattern.search(text)
        if m:
            hits.append((m.start(), keyword))
    return unique_in_order([keyword for _, keyword in sorted(hits)])


def extract_link(text: str) -> str:
    m = URL_RE.search(text)
    if m:
        return m.group(0).rstrip(".,)")
    m = GITHUB_RE.search(text)
    if m:
        return "https://" + m.group(0).rstrip(".,)")
    return ""


def _strip_links(line: str) -> str:
    line = URL_RE.sub(" ", line)
    line = GITHUB_RE.sub(" ", line)
    return line

# ------------------------- Boundary rules -------------------------

def is_title_like(text: str) -> bool:
    """Short, mostly capitalized and not a sentence: "Recipe Finder", "Portfolio Website"."""
    text = strip_dates(_strip_links(text)).strip()
    words = [w for w in text.split() if w[:1].isalpha()]
    if not words or len(words) > 8 or text.endswith("."):
        return False
    capitalized = sum(1 for w in words if w[:1].isupper())
    return capitalized / len(words) >= 0.6


def is_link_only(line: str) -> bool:
    return not strip_dates(_strip_links(line)).strip(" \t,|-–—:;()")


def _eligible(f: Sequence[LineFeatures], i: int) -> bool:
    line = f[i]
    return not (
        line.is_bullet
        or line.is_continuation
        or is_attached_date_line(f, i)
        or is_link_only(line.text)
        or TECH_LABEL_RE.match(line.text)
    )


def _heading_before_bullets(f: Sequence[LineFeatures], i: int) -> bool:
    nxt = next_line(f, i)
    return nxt is not None and nxt.is_bullet and (i == 0 or f[i - 1].is_bullet)


PROJECT_RULES: Tuple[BoundaryRule, ...] = (
    BoundaryRule("heading_before_bullets", _heading_before_bullets),
    BoundaryRule("line_after_bullets", lambda f, i: i > 0 and f[i - 1].is_bullet),
    BoundaryRule("project_with_date", lambda f, i: f[i].has_project_indicator and f[i].is_dated),
    BoundaryRule("named_with_repository", lambda f, i: f[i].has_github_link),
)

PROJECT_FALLBACK_RULES: Tuple[BoundaryRule, ...] = (
    BoundaryRule(
        "titled_project_line",
        lambda f, i: is_title_like(f[i].text)
        and (f[i].has_project_indicator or f[i].is_dated or f[i].has_link),
    ),
)

# ------------------------- Entry building -------------------------

def _clean_name(line: str) -> str:
    name = strip_dates(_strip_links(line))
    name = re.sub(r"\s{2,}", " ", name)
    return name.strip(" \t,|-–—:;")


def build_project(
    entry_id: str,
    lines: Sequence[str],
    is_bullet: Sequence[bool],
    log: logging.Logger,
) -> Optional[ProjectEntry]:
    """Build a project from the lines of one span; None when no name can be found."""
    header = [(i, line) for i, (line, bullet) in enumerate(zip(lines, is_bullet)) if not bullet]
    bullets = [strip_bullet(line) for line, bullet in zip(lines, is_bullet) if bullet]
    bullets = [b for b in bullets if b]

    if not header:
        log.debug("project skipped, no header line: %r", list(lines))
        return None

    name_pos, name_line = header[0]
    name = _clean_name(name_line)
    if not name:
        log.debug("project skipped, empty name: %r", name_line)
        return None

    # only a continuation line directly under a bare name wraps the name
    name_open = name == name_line.strip() and not name_line.rstrip().endswith((".", ":"))
    description_parts: List[str] = []
    for pos, line in header[1:]:
        if is_link_only(line) or TECH_LABEL_RE.match(line):
            continue
        if name_open and pos == name_pos + 1 and looks_like_continuation(line):
            name = f"{name} {line.strip()}"
            continue
        description_parts.append(line.strip())

    full_text = "\n".join(lines)
    date_range = find_date_range([line for _, line in header])
    entry = ProjectEntry(
        id=entry_id,
        name=name,
        description=" ".join(description_parts),
        link=extract_link(full_text),
        technologies=extract_technologies(full_text),
        start_date=date_range.start,
        end_date=date_range.end,
        bullet_points=bullets,
    )
    log.debug(
        "project: name=%r link=%r technologies=%s bullets=%d",
        entry.name, entry.link, entry.technologies, len(entry.bullet_points),
    )
    return entry


def _structured_projects(lines: List[str], log: logging.Logger) -> List[ProjectEntry]:
    features = classify_lines(lines)
    boundaries = find_boundaries(
        features, PROJECT_RULES, PROJECT_FALLBACK_RULES, eligible=_eligible, log=log,
    )
    if not boundaries:
        return []
    if boundaries[0] != 0:
        # the body opens with a project whose header matched no rule
        boundaries = [0] + boundaries

    projects: List[ProjectEntry] = []
    for start, end in spans(boundaries, len(features)):
        span = features[start:end]
        entry = build_project(
            str(len(projects) + 1), [f.text for f in span], [f.is_bullet for f in span], log,
        )
        if entry is not None:
            projects.append(entry)
    return projects


def _paragraph_projects(text: str, log: logging.Logger) -> List[ProjectEntry]:
    projects: List[ProjectEntry] = []
    for block in split_paragraph_blocks(text):
        # the first line of a block is always its name
        flags = [False] + [f.is_bullet for f in classify_lines(block[1:])]
        entry = build_project(str(len(projects) + 1), block, flags, log)
        if entry is not None:
            projects.append(entry)
    return projects

# ------------------------- Fragment merge -------------------------

def _is_fragment(entry: ProjectEntry) -> bool:
    return looks_like_continuation(entry.name) and not entry.start_date and not entry.end_date


def _fold_fragment(acc: Tuple[ProjectEntry, ...], entry: ProjectEntry) -> Tuple[ProjectEntry, ...]:
    if not acc or not _is_fragment(entry):
        return acc + (entry,)
    prev = acc[-1]
    merged = replace(
        prev,
        description=" ".join(p for p in (prev.description, entry.name, entry.description) if p),
        bullet_points=prev.bullet_points + entry.bullet_points,
        technologies=unique_in_order(prev.technologies + entry.technologies),
        link=prev.link or entry.link,
    )
    return acc[:-1] + (merged,)


def merge_fragments(projects: Sequence[ProjectEntry], log: Optional[logging.Logger] = None) -> List[ProjectEntry]:
    """
    Fold over-segmented fragments into the preceding project.

    A fragment is a project whose name starts with a continuation word
    ("using", "for", "with", ...) and that has no dates. IDs are
    renumbered afterwards.
    """
    merged = reduce(_fold_fragment, projects, ())
    if log is not None and len(merged) != len(projects):
        log.debug("merged %d project fragments", len(projects) - len(merged))
    return [replace(p, id=str(i)) for i, p in enumerate(merged, start=1)]


@best_effort(list)
def extract_projects(text: str, log: Optional[logging.Logger] = None) -> List[ProjectEntry]:
    """
    Extract projects from a projects section body.

    Never raises: failures are logged and yield an empty list.
    """
    lines = non_empty_lines(text)
    log.debug("project extraction: %d non-empty lines", len(lines))

    projects = _structured_projects(lines, log)
    if not projects:
        log.debug("structured pass found no projects, splitting on blank lines")
        projects = _paragraph_projects(text, log)

    projects = merge_fragments(projects, log=log)
    log.debug("project extraction complete: %d projects", len(projects))
    return projects
