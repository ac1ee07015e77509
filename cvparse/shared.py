"""
Shared models and text utilities.

Defines the resume records produced by the extractors (personal info,
experience, education, projects, certifications, the assembled resume)
and the text normalization helpers used by the readers and extractors.
"""

from __future__ import annotations

import re

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List

# ------------------------- Models -------------------------

@dataclass(frozen=True)
class NamedLink:
    name: str
    url: str


@dataclass(frozen=True)
class Link:
    """A link found in the resume text, typed linkedin/website/github/twitter/other."""
    type: str
    url: str


@dataclass(frozen=True)
class Links:
    linkedin: str = ""
    portfolio: str = ""
    additional_links: List[NamedLink] = field(default_factory=list)


@dataclass(frozen=True)
class PersonalInfo:
    name: str = ""
    email: str = ""
    phone: str = ""
    linkedin_url: str = ""
    website_url: str = ""
    location: str = ""
    job_title: str = ""
    links: Links = field(default_factory=Links)

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class ExperienceEntry:
    """
    One job entry. Dates are kept as found in the text: "Present" and
    "Current" are preserved and nothing is normalized to a date type.
    """
    id: str
    company: str = ""
    position: str = ""
    start_date: str = ""
    end_date: str = ""
    description: str = ""
    bullet_points: List[str] = field(default_factory=list)

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class EducationEntry:
    id: str
    school: str = ""
    degree: str = ""
    field: str = ""
    start_date: str = ""
    end_date: str = ""
    gpa: str = ""
    description: str = ""

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class ProjectEntry:
    id: str
    name: str
    description: str = ""
    link: str = ""
    technologies: List[str] = field(default_factory=list)
    start_date: str = ""
    end_date: str = ""
    bullet_points: List[str] = field(default_factory=list)

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class CertificationEntry:
    name: str
    issuer: str = ""
    date: str = ""
    expiration_date: str = ""
    credential_id: str = ""

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class ParsedResume:
    """The assembled result of one parse; never mutated once built."""
    personal_info: PersonalInfo = field(default_factory=PersonalInfo)
    summary: str = ""
    experiences: List[ExperienceEntry] = field(default_factory=list)
    education: List[EducationEntry] = field(default_factory=list)
    skills: List[str] = field(default_factory=list)
    languages: str = ""
    projects: List[ProjectEntry] = field(default_factory=list)
    certifications: List[CertificationEntry] = field(default_factory=list)

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)

# ------------------------- Text helpers -------------------------

# Symbol-font bullets that PDF text extraction emits as private-use code points
_PRIVATE_BULLETS = ("\uf0b7", "\uf0a7", "\uf076", "\uf0d8", "\uf0fc")


def normalize_text_for_processing(s: str) -> str:
    """
    Normalize what we consider "text":
    - convert NBSP to normal space
    - replace soft hyphen with real hyphen
    - normalize newlines
    - map private-use bullet glyphs to a standard bullet
    """
    s = s.replace("\u00A0", " ")
    s = s.replace("\u00AD", "-")  # preserve "high-quality"
    s = s.replace("\r\n", "\n").replace("\r", "\n")
    for glyph in _PRIVATE_BULLETS:
        s = s.replace(glyph, "\u2022")
    return s


def non_empty_lines(text: str) -> List[str]:
    """Split on newlines, keeping trimmed non-empty lines in order."""
    return [ln.strip() for ln in text.split("\n") if ln.strip()]


def split_paragraph_blocks(text: str) -> List[List[str]]:
    """Blank-line separated blocks, each as its list of non-empty lines."""
    blocks = re.split(r"\n\s*\n", text)
    return [lines for lines in (non_empty_lines(block) for block in blocks) if lines]


def unique_in_order(items: List[str]) -> List[str]:
    seen: set[str] = set()
    out: List[str] = []
    for item in items:
        if item not in seen:
            seen.add(item)
            out.append(item)
    return out
