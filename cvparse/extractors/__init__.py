"""
Field extractors.

Each extractor takes the text of one section (or the whole resume, for
personal info) and an optional logger, and returns new records. None of
them raise: failures degrade to an empty result for that field.
"""

from .certifications import extract_certifications
from .education import extract_education
from .experience import extract_experiences
from .lines import BoundaryRule, LineFeatures, classify_line, classify_lines, find_boundaries
from .personal_info import extract_all_links, extract_personal_info
from .projects import extract_projects, merge_fragments
from .skills import extract_skills

__all__ = [
    "BoundaryRule",
    "LineFeatures",
    "classify_line",
    "classify_lines",
    "find_boundaries",
    "extract_all_links",
    "extract_certifications",
    "extract_education",
    "extract_experiences",
    "extract_personal_info",
    "extract_projects",
    "extract_skills",
    "merge_fragments",
]
