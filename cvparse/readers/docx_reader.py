"""
DOCX text reader.

Reads WordprocessingML directly with zipfile + lxml:
- header parts (word/header*.xml) first, since names and contact details
  often live there
- text boxes in the body next (sidebars)
- then the body paragraphs in order

Word list paragraphs carry no glyph in their text, so they are prefixed
with a bullet to keep bullet detection working on the flattened text.
"""

from __future__ import annotations

import io
import logging
from typing import Iterator, List, Optional, Tuple
from zipfile import ZipFile

from lxml import etree

from ..logging_utils import resolve_log
from ..shared import normalize_text_for_processing, unique_in_order
from .base import TextReader

XML_PARSER = etree.XMLParser(recover=True, huge_tree=True)

W_NS = "http://schemas.openxmlformats.org/wordprocessingml/2006/main"
DOCX_NS = {"w": W_NS}

BULLET_PREFIX = "• "


def _in_textbox(node: etree._Element, p: etree._Element) -> bool:
    parent = node.getparent()
    while parent is not None and parent is not p:
        if etree.QName(parent).localname == "txbxContent":
            return True
        parent = parent.getparent()
    return False


def extract_text_from_w_p(p: etree._Element, skip_textboxes: bool = False) -> str:
    """Paragraph text; with skip_textboxes, text of text boxes anchored in the paragraph is left out."""
    parts: List[str] = []
    for node in p.iter():
        if skip_textboxes and _in_textbox(node, p):
            continue
        tag = etree.QName(node).localname
        if tag == "t" and node.text:
            parts.append(node.text)
        elif tag in ("noBreakHyphen", "softHyphen"):
            parts.append("-")
        elif tag in ("br", "cr"):
            parts.append("\n")
        elif tag == "tab":
            parts.append("\t")
    return normalize_text_for_processing("".join(parts)).strip()


def _p_style(p: etree._Element) -> str:
    pstyle = p.find("./w:pPr/w:pStyle", DOCX_NS)
    if pstyle is None:
        return ""
    return pstyle.get(f"{{{W_NS}}}val", "") or ""


def _p_is_bullet(p: etree._Element) -> bool:
    # Word list formatting is usually in <w:numPr>
    if p.find("./w:pPr/w:numPr", DOCX_NS) is not None:
        return True
    # Some templates use paragraph styles for lists
    style = _p_style(p).lower()
    return style.startswith("list") or "bullet" in style


def iter_paragraphs(
    root: etree._Element, xpath: str, skip_textboxes: bool = False,
) -> Iterator[Tuple[str, bool]]:
    """Yield (text, is_bullet) for the non-empty paragraphs selected by ``xpath``."""
    for p in root.xpath(xpath, namespaces=DOCX_NS):
        text = extract_text_from_w_p(p, skip_textboxes=skip_textboxes)
        if text:
            yield text, _p_is_bullet(p)


def _as_lines(paragraphs: Iterator[Tuple[str, bool]]) -> List[str]:
    lines: List[str] = []
    for text, is_bullet in paragraphs:
        for i, ln in enumerate(text.split("\n")):
            ln = ln.strip()
            if not ln:
                continue
            # only the first line of a list paragraph gets the glyph
            lines.append(BULLET_PREFIX + ln if is_bullet and i == 0 else ln)
    return lines


def header_lines(z: ZipFile) -> List[str]:
    """Lines from all header parts; text boxes preferred over plain header paragraphs."""
    lines: List[str] = []
    for name in sorted(z.namelist()):
        if not (name.startswith("word/header") and name.endswith(".xml")):
            continue
        root = etree.fromstring(z.read(name), XML_PARSER)
        found = _as_lines(iter_paragraphs(root, ".//w:txbxContent//w:p"))
        if not found:
            found = _as_lines(iter_paragraphs(root, ".//w:p"))
        lines.extend(found)
    return unique_in_order(lines)


def body_lines(z: ZipFile) -> Tuple[List[str], List[str]]:
    """(text box lines, body paragraph lines) of word/document.xml."""
    root = etree.fromstring(z.read("word/document.xml"), XML_PARSER)
    # a text box is often stored twice (DrawingML + VML fallback)
    textbox = unique_in_order(_as_lines(iter_paragraphs(root, ".//w:body//w:txbxContent//w:p")))
    body = _as_lines(iter_paragraphs(
        root, ".//w:body//w:p[not(ancestor::w:txbxContent)]", skip_textboxes=True,
    ))
    return textbox, body


class DocxTextReader(TextReader):
    """Extracts header, text box and body text from a Word .docx file."""

    def __init__(self, log: Optional[logging.Logger] = None):
        self.log = resolve_log(log)

    def read_text(self, data: bytes) -> str:
        with ZipFile(io.BytesIO(data)) as z:
            header = header_lines(z)
            textbox, body = body_lines(z)
        self.log.debug(
            "DOCX: %d header, %d text box, %d body lines", len(header), len(textbox), len(body),
        )
        return "\n".join(header + textbox + body)
