"""
Document text readers and their MIME type registry.
"""

from .base import TextReader, UnsupportedFileTypeError
from .docx_reader import DocxTextReader
from .pdf_reader import PdfTextReader
from .reader_registry import (
    DOCX_MIME_TYPE,
    PDF_MIME_TYPE,
    get_reader,
    list_readers,
    register_reader,
    unregister_reader,
)

register_reader(PDF_MIME_TYPE, PdfTextReader)
register_reader(DOCX_MIME_TYPE, DocxTextReader)

__all__ = [
    "TextReader",
    "UnsupportedFileTypeError",
    "DocxTextReader",
    "PdfTextReader",
    "DOCX_MIME_TYPE",
    "PDF_MIME_TYPE",
    "get_reader",
    "list_readers",
    "register_reader",
    "unregister_reader",
]
