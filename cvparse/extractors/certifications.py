"""
Certification extraction.

The body is split into blank-line separated blocks. Inside a block the
first line names a certification; following lines that carry issuer,
credential or date markers are details of it, a plain line right after the
name is its issuer, and any other line starts the next certification.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import List, Optional

from ..patterns import MONTH_YEAR_RE
from ..shared import CertificationEntry, split_paragraph_blocks
from .base import best_effort

CERT_KEYWORDS = ("certified", "certificate", "certification", "credential", "ccna", "comptia")

ISSUER_RE = re.compile(
    r"^(?:issued\s+by|issuer|issuing\s+organi[sz]ation|provided\s+by|provider|from)\b\s*:?\s*(.+)$",
    re.IGNORECASE,
)

CREDENTIAL_RE = re.compile(
    r"^(?:credential(?:\s+id)?|certificate\s+(?:id|no|number)|license(?:\s+(?:no|number))?|id)\b"
    r"\s*[:#.]?\s*([A-Za-z0-9][\w\-/]*)",
    re.IGNORECASE,
)

# "Issued Jan 2021", "Expires: March 2024", "Valid until Dec 2025"
_DATE_LABEL_RE = re.compile(
    r"\b(?:issued(?:\s+on)?|expires?|expiration(?:\s+date)?|expiry|valid\s+until|valid\s+through|date)\b",
    re.IGNORECASE,
)

_NAME_TRIM = " \t,.;:|-–—"


def is_cert_like(line: str) -> bool:
    lowered = line.lower()
    return any(keyword in lowered for keyword in CERT_KEYWORDS) or bool(MONTH_YEAR_RE.search(line))


def is_date_line(line: str) -> bool:
    if not MONTH_YEAR_RE.search(line):
        return False
    rest = _DATE_LABEL_RE.sub(" ", MONTH_YEAR_RE.sub(" ", line))
    return not rest.strip(" \t,.;:|-–—·()")


@dataclass
class _Draft:
    name_line: str
    issuer: str = ""
    credential_id: str = ""
    detail_lines: List[str] = field(default_factory=list)

    @property
    def has_details(self) -> bool:
        return bool(self.issuer or self.credential_id or self.detail_lines)

    def absorb(self, line: str) -> bool:
        """Attach a detail line; False when the line is not a detail."""
        m = ISSUER_RE.match(line)
        if m:
            self.issuer = self.issuer or m.group(1).strip(_NAME_TRIM)
            return True
        m = CREDENTIAL_RE.match(line)
        if m:
            self.credential_id = self.credential_id or m.group(1)
            return True
        if is_date_line(line):
            self.detail_lines.append(line)
            return True
        return False

    def build(self) -> Optional[CertificationEntry]:
        dates = [m.group(0) for m in MONTH_YEAR_RE.finditer("\n".join([self.name_line] + self.detail_lines))]
        name = MONTH_YEAR_RE.sub(" ", self.name_line)
        name = re.sub(r"\(\s*\)", " ", name)
        name = re.sub(r"\s{2,}", " ", name).strip(_NAME_TRIM)
        if not name:
            return None
        return CertificationEntry(
            name=name,
            issuer=self.issuer,
            date=dates[0] if dates else "",
            expiration_date=dates[1] if len(dates) > 1 else "",
            credential_id=self.credential_id,
        )


def _takes_issuer(draft: _Draft, line: str) -> bool:
    # the line directly under a bare name, unless it reads as a certification itself
    return not draft.has_details and not is_cert_like(line) and line != line.upper()


def group_block(lines: List[str]) -> List[_Draft]:
    drafts: List[_Draft] = []
    for line in lines:
        current = drafts[-1] if drafts else None
        if current is not None and current.absorb(line):
            continue
        if current is not None and _takes_issuer(current, line):
            current.issuer = line.strip(_NAME_TRIM)
            continue
        drafts.append(_Draft(name_line=line))
    return drafts


@best_effort(list)
def extract_certifications(text: str, log: Optional[logging.Logger] = None) -> List[CertificationEntry]:
    """
    Extract certifications from a certifications section body.

    Up to two month-year dates per certification are read as issue and
    expiration date. Missing values are empty strings.
    """
    certifications: List[CertificationEntry] = []
    for block in split_paragraph_blocks(text):
        for draft in group_block(block):
            entry = draft.build()
            if entry is None:
                log.debug("certification skipped, empty name: %r", draft.name_line)
                continue
            log.debug(
                "certification: name=%r issuer=%r date=%r", entry.name, entry.issuer, entry.date,
            )
            certifications.append(entry)

    log.debug("certification extraction complete: %d found", len(certifications))
    return certifications
