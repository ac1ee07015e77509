"""
Resume parsing pipeline.

bytes -> text (reader chosen by MIME type) -> sections -> field extractors
-> ParsedResume. Personal info is extracted last because the job title
guess uses the extracted experience.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from .extractors import (
    extract_certifications,
    extract_education,
    extract_experiences,
    extract_personal_info,
    extract_projects,
    extract_skills,
)
from .logging_utils import resolve_log
from .readers import DOCX_MIME_TYPE, PDF_MIME_TYPE, UnsupportedFileTypeError, get_reader
from .sections import route_sections, split_into_sections
from .shared import ParsedResume, normalize_text_for_processing

SUFFIX_MIME_TYPES: Dict[str, str] = {
    ".pdf": PDF_MIME_TYPE,
    ".docx": DOCX_MIME_TYPE,
}


def parse_resume_text(text: str, log: Optional[logging.Logger] = None) -> ParsedResume:
    """Split ``text`` into sections and run every field extractor over its section."""
    log = resolve_log(log)
    text = normalize_text_for_processing(text) if isinstance(text, str) else ""

    routed = route_sections(split_into_sections(text, log=log))
    summary = routed.get("summary", "").strip()
    experiences = extract_experiences(routed.get("experiences", ""), log=log)

    resume = ParsedResume(
        personal_info=extract_personal_info(text, summary=summary, experiences=experiences, log=log),
        summary=summary,
        experiences=experiences,
        education=extract_education(routed.get("education", ""), log=log),
        skills=extract_skills(routed.get("skills", ""), log=log),
        languages=routed.get("languages", "").strip(),
        projects=extract_projects(routed.get("projects", ""), log=log),
        certifications=extract_certifications(routed.get("certifications", ""), log=log),
    )
    log.info(
        "parsed resume: %d experiences, %d education, %d skills, %d projects, %d certifications",
        len(resume.experiences), len(resume.education), len(resume.skills),
        len(resume.projects), len(resume.certifications),
    )
    return resume


def parse_resume(data: bytes, mime_type: str, log: Optional[logging.Logger] = None) -> ParsedResume:
    """
    Parse an uploaded resume.

    Raises:
        UnsupportedFileTypeError: If ``mime_type`` has no registered reader
        Exception: Whatever the reader raises for a corrupt document
    """
    log = resolve_log(log)
    reader = get_reader(mime_type, log=log)
    text = reader.read_text(data)
    log.debug("read %d characters of %s", len(text), mime_type)
    return parse_resume_text(text, log=log)


def mime_type_for(path: Path) -> str:
    mime_type = SUFFIX_MIME_TYPES.get(path.suffix.lower())
    if mime_type is None:
        raise UnsupportedFileTypeError(path.suffix or path.name)
    return mime_type


def process_single_file(
    path: Path,
    out: Optional[Path] = None,
    log: Optional[logging.Logger] = None,
) -> Dict[str, Any]:
    """Parse a PDF/DOCX file and optionally write the result to JSON. Returns the result dict."""
    data = parse_resume(path.read_bytes(), mime_type_for(path), log=log).as_dict()

    if out is not None:
        out.parent.mkdir(parents=True, exist_ok=True)
        with out.open("w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)

    return data
