import io
import logging
import sys
import zipfile
from pathlib import Path
from typing import List, Optional, Sequence, Tuple, Union
from xml.sax.saxutils import escape

import pytest


PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


W_NS = "http://schemas.openxmlformats.org/wordprocessingml/2006/main"

SAMPLE_RESUME = """Jane Doe
Software Engineer
jane.doe@example.com | (555) 123-4567
linkedin.com/in/janedoe | janedoe.dev | github.com/janedoe

SUMMARY
Backend engineer based in Austin, TX with eight years of Python.

EXPERIENCE
Senior Software Engineer | Jan 2021 - Present
Acme Corp
- Built a billing service handling 2M invoices per month
- Led migration to Kubernetes
Software Engineer | Jun 2017 - Dec 2020
Globex Inc
- Developed internal APIs
- Reduced build times by 40%

EDUCATION
University of Texas at Austin
B.S. in Computer Science, 2013 - 2017
GPA: 3.8/4.0

SKILLS
Python, Go, PostgreSQL, Docker
Kubernetes | Terraform

PROJECTS
Chat App | github.com/janedoe/chat
A realtime messaging tool
- Built websocket server
- Added auth

CERTIFICATIONS
AWS Certified Solutions Architect
Amazon Web Services
Issued Mar 2022
"""

Paragraph = Union[str, Tuple[str, bool]]


def _paragraph_xml(paragraph: Paragraph) -> str:
    text, bullet = (paragraph, False) if isinstance(paragraph, str) else paragraph
    ppr = '<w:pPr><w:numPr><w:ilvl w:val="0"/><w:numId w:val="1"/></w:numPr></w:pPr>' if bullet else ""
    return f'<w:p>{ppr}<w:r><w:t xml:space="preserve">{escape(text)}</w:t></w:r></w:p>'


def _textbox_xml(lines: Sequence[str]) -> str:
    inner = "".join(_paragraph_xml(line) for line in lines)
    return f"<w:p><w:r><w:t>Anchor</w:t></w:r><w:r><w:txbxContent>{inner}</w:txbxContent></w:r></w:p>"


def build_docx(
    body: Sequence[Paragraph],
    header: Optional[Sequence[str]] = None,
    textbox: Optional[Sequence[str]] = None,
) -> bytes:
    """Minimal in-memory .docx: document.xml plus an optional header part."""
    parts: List[str] = []
    if textbox:
        parts.append(_textbox_xml(textbox))
    parts.extend(_paragraph_xml(p) for p in body)
    document = f'<w:document xmlns:w="{W_NS}"><w:body>{"".join(parts)}</w:body></w:document>'

    buf = io.BytesIO()
    with zipfile.ZipFile(buf, "w") as z:
        z.writestr("word/document.xml", document)
        if header:
            hdr = "".join(_paragraph_xml(line) for line in header)
            z.writestr("word/header1.xml", f'<w:hdr xmlns:w="{W_NS}">{hdr}</w:hdr>')
    return buf.getvalue()


@pytest.fixture
def sample_resume_text() -> str:
    return SAMPLE_RESUME


@pytest.fixture
def make_docx():
    return build_docx


@pytest.fixture
def sample_docx_path(tmp_path: Path) -> Path:
    path = tmp_path / "resume.docx"
    path.write_bytes(build_docx([ln for ln in SAMPLE_RESUME.split("\n") if ln.strip()]))
    return path


@pytest.fixture(autouse=True)
def restore_logging():
    """setup_logging() reconfigures global loggers; undo it after each test."""
    root = logging.getLogger()
    pkg = logging.getLogger("cvparse")
    saved = (root.handlers[:], root.level, pkg.level)
    yield
    for handler in root.handlers[:]:
        if handler not in saved[0]:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(saved[1])
    pkg.setLevel(saved[2])
