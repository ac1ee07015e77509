# cvparse/__init__.py

from .pipeline import parse_resume, parse_resume_text, process_single_file
from .readers import UnsupportedFileTypeError
from .sections import split_into_sections
from .shared import (
    CertificationEntry,
    EducationEntry,
    ExperienceEntry,
    Link,
    Links,
    NamedLink,
    ParsedResume,
    PersonalInfo,
    ProjectEntry,
)

__all__ = [
    "parse_resume",
    "parse_resume_text",
    "process_single_file",
    "split_into_sections",
    "UnsupportedFileTypeError",
    "CertificationEntry",
    "EducationEntry",
    "ExperienceEntry",
    "Link",
    "Links",
    "NamedLink",
    "ParsedResume",
    "PersonalInfo",
    "ProjectEntry",
]
