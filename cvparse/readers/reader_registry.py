"""
Reader registry mapping MIME types to text reader classes.
"""

from __future__ import annotations

from typing import Dict, List, Type

from .base import TextReader, UnsupportedFileTypeError

PDF_MIME_TYPE = "application/pdf"
DOCX_MIME_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"

# Global reader registry
_READER_REGISTRY: Dict[str, Type[TextReader]] = {}


def register_reader(mime_type: str, reader_class: Type[TextReader]) -> None:
    """
    Register a reader class for a MIME type.

    Args:
        mime_type: The MIME type the reader decodes (e.g., "application/pdf")
        reader_class: The reader class to register
    """
    _READER_REGISTRY[mime_type] = reader_class


def get_reader(mime_type: str, **kwargs) -> TextReader:
    """
    Get a reader instance for a MIME type.

    Raises:
        UnsupportedFileTypeError: If no reader is registered for it
    """
    reader_class = _READER_REGISTRY.get(mime_type)
    if reader_class is None:
        raise UnsupportedFileTypeError(mime_type)
    return reader_class(**kwargs)


def list_readers() -> List[Dict[str, str]]:
    """
    List all registered readers with their descriptions.

    Returns:
        List of dicts with 'mime_type' and 'description' keys
    """
    readers = []
    for mime_type, reader_class in _READER_REGISTRY.items():
        description = (reader_class.__doc__ or "No description available").strip().split("\n")[0]
        readers.append({"mime_type": mime_type, "description": description})
    return sorted(readers, key=lambda x: x["mime_type"])


def unregister_reader(mime_type: str) -> None:
    _READER_REGISTRY.pop(mime_type, None)


__all__ = [
    "PDF_MIME_TYPE",
    "DOCX_MIME_TYPE",
    "register_reader",
    "get_reader",
    "list_readers",
    "unregister_reader",
]
