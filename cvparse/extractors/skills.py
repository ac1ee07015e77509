"""
Skills extraction: split the section body on separator characters.
"""

from __future__ import annotations

import logging
import re
from typing import List, Optional

from ..shared import unique_in_order
from .base import best_effort

SKILL_SEPARATORS_RE = re.compile(r"[,\n\t|;•·●▪◦]")

MAX_SKILL_LENGTH = 50


@best_effort(list)
def extract_skills(text: str, log: Optional[logging.Logger] = None) -> List[str]:
    """
    Return the distinct skills named in ``text``, in first-seen order.

    Items are trimmed of whitespace and leading/trailing dash or asterisk
    bullets; empty items and items of ``MAX_SKILL_LENGTH`` characters or
    more (usually sentences, not skills) are dropped.
    """
    items = [item.strip().strip("-* ").strip() for item in SKILL_SEPARATORS_RE.split(text)]
    kept = [item for item in items if 0 < len(item) < MAX_SKILL_LENGTH]
    skills = unique_in_order(kept)
    log.debug("skills: %d items, %d kept, %d distinct", len(items), len(kept), len(skills))
    return skills
