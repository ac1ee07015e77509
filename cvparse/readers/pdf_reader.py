"""
PDF text reader built on pypdf.
"""

from __future__ import annotations

import io
import logging
from typing import List, Optional

from pypdf import PdfReader

from ..logging_utils import resolve_log
from ..shared import normalize_text_for_processing
from .base import TextReader


class PdfTextReader(TextReader):
    """Extracts the text layer of every page of a PDF."""

    def __init__(self, log: Optional[logging.Logger] = None):
        self.log = resolve_log(log)

    def read_text(self, data: bytes) -> str:
        reader = PdfReader(io.BytesIO(data))

        pages_text: List[str] = []
        for i, page in enumerate(reader.pages):
            try:
                page_text = page.extract_text()
            except Exception as e:
                self.log.warning("Failed to extract text from page %d: %s", i + 1, e)
                continue
            if page_text and page_text.strip():
                pages_text.append(page_text.strip())

        text = normalize_text_for_processing("\n\n".join(pages_text))
        if not text.strip():
            self.log.warning("No text extracted from PDF; it may be scanned images")
        self.log.debug("PDF: %d pages, %d chars extracted", len(reader.pages), len(text))
        return text
