"""
Completeness check for a parsed resume.

A heuristic parse rarely fails outright; it comes back with empty fields.
This turns the empty fields into the errors/warnings reported on the CLI
status line.
"""

from __future__ import annotations

from typing import Any, Dict, List, Tuple

# Fields that are expected on almost every resume
EXPECTED_FIELDS: Tuple[str, ...] = ("experiences", "education", "skills")


def check_parsed_resume(data: Dict[str, Any]) -> Tuple[List[str], List[str]]:
    """
    Return (errors, warnings) for a ``ParsedResume.as_dict()`` result.

    Nothing extracted at all is an error; missing contact details or
    expected sections are warnings.
    """
    errs: List[str] = []
    warns: List[str] = []

    info = data.get("personal_info", {}) or {}
    missing_contact = [k for k in ("name", "email") if not info.get(k)]
    missing_fields = [k for k in EXPECTED_FIELDS if not data.get(k)]

    has_anything = any(info.get(k) for k in ("name", "email", "phone")) or any(
        data.get(k) for k in ("summary", "experiences", "education", "skills", "projects", "certifications")
    )
    if not has_anything:
        errs.append("nothing_extracted")
        return errs, warns

    if missing_contact:
        warns.append("missing contact: " + ", ".join(missing_contact))
    if missing_fields:
        warns.append("missing sections: " + ", ".join(missing_fields))
    return errs, warns
