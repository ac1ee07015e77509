"""
Section splitting.

A resume has no markup, so section headings are recognized by vocabulary
plus a formatting signal. Everything before the first heading lands in the
"Header" section, which is where the name and contact details usually are.
"""

from __future__ import annotations

import logging
import re
from typing import Dict, List, Optional, Tuple

from .logging_utils import resolve_log

HEADER_SECTION = "Header"
CERTIFICATIONS_SECTION = "Certifications"

SECTION_KEYWORDS: Tuple[str, ...] = (
    "summary", "objective", "profile",
    "experience", "employment", "work history",
    "education", "academic",
    "skills", "abilities", "competencies",
    "languages",
    "certifications", "certificates", "certification", "certificate",
    "credentials", "credential", "qualifications",
    "projects",
    "references",
    "courses", "workshops", "training",
)

# Lines in other sections that are moved into a synthetic certifications
# section when the document has none; compared lowercase
CERT_SCAVENGE_KEYWORDS: Tuple[str, ...] = (
    "certified", "certificate", "certification", "credential", "ccna", "comptia",
)

# Section title substring -> ParsedResume field, first match wins
SECTION_ROUTES: Tuple[Tuple[Tuple[str, ...], str], ...] = (
    (("summary", "objective", "profile"), "summary"),
    (("experience", "employment", "work history"), "experiences"),
    (("education", "academic"), "education"),
    (("skill",), "skills"),
    (("language",), "languages"),
    (("certification", "certificate", "credential"), "certifications"),
    (("project",), "projects"),
)

_HEADING_PATTERNS = {kw: re.compile(rf"^{re.escape(kw)}s?:?$", re.IGNORECASE) for kw in SECTION_KEYWORDS}


def is_section_heading(line: str) -> bool:
    """
    A keyword occurs in the line and the line is formatted like a heading:
    all caps, capitalized, the bare keyword, or "keyword(s):".
    """
    line = line.strip()
    if not line:
        return False
    lowered = line.lower()
    for keyword in SECTION_KEYWORDS:
        if keyword not in lowered:
            continue
        if (
            line.upper() == line
            or line[0].isupper()
            or lowered == keyword
            or _HEADING_PATTERNS[keyword].match(line)
        ):
            return True
    return False


def split_into_sections(text: str, log: Optional[logging.Logger] = None) -> Dict[str, str]:
    """
    Split resume text into {heading line: body}, in document order.

    Keys are the heading lines as they appear (trimmed, case preserved).
    Empty lines are skipped, so no body contains one. A heading seen twice
    appends to the existing section. Sections with no body are left out.
    If no key mentions "certif", lines carrying certification keywords are
    copied into a synthetic "Certifications" section; those lines then
    appear twice.
    """
    log = resolve_log(log)
    text = text if isinstance(text, str) else ""
    collected: Dict[str, List[str]] = {}
    current = HEADER_SECTION

    for raw in text.split("\n"):
        line = raw.strip()
        if not line:
            continue
        if is_section_heading(line):
            log.debug("section heading: %r", line)
            current = line
        else:
            collected.setdefault(current, []).append(line)

    sections = {title: "\n".join(lines) for title, lines in collected.items()}

    if not any("certif" in title.lower() for title in sections):
        scavenged = [
            line
            for title, section_text in sections.items()
            for line in section_text.split("\n")
            if any(keyword in line.lower() for keyword in CERT_SCAVENGE_KEYWORDS)
        ]
        if scavenged:
            log.debug("no certifications section, scavenged %d lines", len(scavenged))
            sections[CERTIFICATIONS_SECTION] = "\n".join(scavenged)

    log.debug("sections: %s", list(sections))
    return sections


def route_section(title: str) -> Optional[str]:
    """The ParsedResume field a section title feeds, or None."""
    lowered = title.lower().strip()
    for keywords, target in SECTION_ROUTES:
        if any(keyword in lowered for keyword in keywords):
            return target
    return None


def route_sections(sections: Dict[str, str]) -> Dict[str, str]:
    """Join the bodies of all sections routed to the same field, in document order."""
    routed: Dict[str, List[str]] = {}
    for title, body in sections.items():
        target = route_section(title)
        if target is None:
            continue
        routed.setdefault(target, []).append(body)
    return {target: "\n\n".join(bodies) for target, bodies in routed.items()}
