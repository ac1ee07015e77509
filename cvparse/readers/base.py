"""
Base interface for document text readers.

A reader turns the raw bytes of an uploaded document into plain text for
the section splitter and field extractors.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class UnsupportedFileTypeError(ValueError):
    """Raised when no reader is registered for a document's MIME type."""

    def __init__(self, mime_type: str):
        super().__init__(f"Unsupported file type: {mime_type}")
        self.mime_type = mime_type


class TextReader(ABC):
    """
    Abstract base class for text readers.

    Implementations decode one document format. They raise on corrupt
    input; the caller decides how to surface that.
    """

    @abstractmethod
    def read_text(self, data: bytes) -> str:
        """
        Extract the document's text.

        Args:
            data: The complete file contents

        Returns:
            Text with one line per paragraph, newline separated
        """
