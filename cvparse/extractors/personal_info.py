"""
Personal info extraction: name, contact details and links.

Every helper is a pure function over its string input and returns "" (or
an empty list) when nothing matches.
"""

from __future__ import annotations

import logging
import re
from typing import List, Optional, Sequence, Tuple

from ..shared import ExperienceEntry, Link, Links, NamedLink, PersonalInfo, non_empty_lines
from .base import best_effort

EMAIL_RE = re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b")

PHONE_RE = re.compile(r"(?<!\d)(?:\+\d{1,3}[\s.-]?)?\(?\d{3}\)?[\s.-]?\d{3}[\s.-]?\d{4}(?!\d)")

LINKEDIN_RES: Tuple[re.Pattern, ...] = (
    re.compile(r"(?:https?://)?(?:www\.)?linkedin\.com/in/[A-Za-z0-9_-]+", re.IGNORECASE),
    re.compile(r"(?:https?://)?(?:www\.)?linkedin\.com/profile/view\?id=[A-Za-z0-9_-]+", re.IGNORECASE),
)

GITHUB_PROFILE_RE = re.compile(r"(?<![\w.])(?:https?://)?(?:www\.)?github\.com/[A-Za-z0-9_-]+", re.IGNORECASE)

TWITTER_RE = re.compile(r"(?<![\w.])(?:https?://)?(?:www\.)?(?:twitter\.com|x\.com)/[A-Za-z0-9_-]+", re.IGNORECASE)

_PATH = r"(?:/[^\s,;|()<>]*)?"

# Tried in order: full URLs, www. hosts, bare lowercase domains
WEBSITE_RES: Tuple[re.Pattern, ...] = (
    re.compile(rf"https?://[A-Za-z0-9][-A-Za-z0-9.]*\.[A-Za-z]{{2,}}\b{_PATH}", re.IGNORECASE),
    re.compile(rf"(?<![\w.@/])www\.[A-Za-z0-9][-A-Za-z0-9.]*\.[A-Za-z]{{2,}}\b{_PATH}", re.IGNORECASE),
    re.compile(rf"(?<![\w.@/:-])[a-z0-9][-a-z0-9]*(?:\.[-a-z0-9]+)*\.[a-z]{{2,}}\b(?!\.?\w){_PATH}"),
)

GENERAL_LINK_RE = re.compile(rf"https?://[A-Za-z0-9][-A-Za-z0-9.]*\.[A-Za-z]{{2,}}\b{_PATH}", re.IGNORECASE)

# Never a personal website
SOCIAL_DOMAINS = ("linkedin.com", "github.com", "twitter.com", "x.com")

# "Node.js", "main.py", "resume.pdf" look like domains but are not
FILE_SUFFIXES = frozenset({
    "js", "ts", "jsx", "tsx", "py", "rb", "java", "md", "json", "css", "scss", "html", "htm",
    "php", "sh", "yml", "yaml", "txt", "pdf", "doc", "docx", "xml", "jpg", "jpeg", "png", "svg",
})

LOCATION_RE = re.compile(r"\b((?:[A-Z][a-z]+\s)*[A-Z][a-z]+,\s*[A-Z]{2})\b")

NAME_RE = re.compile(r"^[A-Za-z\s.'-]+$")

COMMON_TITLES: Tuple[str, ...] = (
    "Software Engineer", "Software Developer", "Web Developer",
    "Product Manager", "Project Manager", "Program Manager",
    "Data Scientist", "Data Analyst", "Business Analyst",
    "Marketing Manager", "Sales Manager", "Account Executive",
    "UX Designer", "UI Designer", "Graphic Designer",
    "Content Writer", "Technical Writer",
)


def _with_scheme(url: str) -> str:
    return url if url.lower().startswith(("http://", "https://")) else f"https://{url}"


def _host(url: str) -> str:
    host = re.sub(r"^https?://", "", url, flags=re.IGNORECASE).split("/", 1)[0].lower()
    return host[4:] if host.startswith("www.") else host


def _is_social(url: str) -> bool:
    host = _host(url)
    return any(host == d or host.endswith("." + d) for d in SOCIAL_DOMAINS)


def extract_email(text: str) -> str:
    if not isinstance(text, str):
        return ""
    m = EMAIL_RE.search(text)
    return m.group(0) if m else ""


def extract_phone(text: str) -> str:
    if not isinstance(text, str):
        return ""
    m = PHONE_RE.search(text)
    return m.group(0).strip() if m else ""


def extract_linkedin(text: str) -> str:
    """First LinkedIn profile URL, with an https:// scheme."""
    if not isinstance(text, str):
        return ""
    for regex in LINKEDIN_RES:
        m = regex.search(text)
        if m:
            return _with_scheme(m.group(0))
    return ""


def extract_website(text: str) -> str:
    """
    First personal website URL.

    LinkedIn, GitHub and Twitter/X URLs are never websites, nor are e-mail
    domains or file names. Bare domains are returned with https:// added.
    """
    if not isinstance(text, str):
        return ""
    text = EMAIL_RE.sub(" ", text)
    for regex in WEBSITE_RES:
        for m in regex.finditer(text):
            candidate = m.group(0).rstrip(".,")
            if _is_social(candidate):
                continue
            if _host(candidate).rsplit(".", 1)[-1] in FILE_SUFFIXES:
                continue
            return _with_scheme(candidate)
    return ""


def extract_all_links(text: str) -> List[Link]:
    """
    Typed links in a fixed order: linkedin, website, github, twitter,
    then any other http(s) link not already listed.
    """
    if not isinstance(text, str):
        return []
    links: List[Link] = []
    linkedin = extract_linkedin(text)
    if linkedin:
        links.append(Link("linkedin", linkedin))
    website = extract_website(text)
    if website:
        links.append(Link("website", website))
    for link_type, regex in (("github", GITHUB_PROFILE_RE), ("twitter", TWITTER_RE)):
        m = regex.search(text)
        if m:
            links.append(Link(link_type, _with_scheme(m.group(0))))

    known = {link.url for link in links}
    for m in GENERAL_LINK_RE.finditer(text):
        url = m.group(0).rstrip(".,")
        if url not in known and not _is_social(url):
            links.append(Link("other", url))
            known.add(url)
    return links


def extract_name(text: str) -> str:
    """The first of the first five non-empty lines made only of name characters."""
    if not isinstance(text, str):
        return ""
    for line in non_empty_lines(text)[:5]:
        if len(line) < 50 and NAME_RE.match(line):
            return line
    return ""


def extract_location(summary: str) -> str:
    """A "City, ST" location, searched in the summary only."""
    if not isinstance(summary, str):
        return ""
    m = LOCATION_RE.search(summary)
    return m.group(1) if m else ""


def guess_job_title(text: str, experiences: Sequence[ExperienceEntry] = ()) -> str:
    if experiences and experiences[0].position:
        return experiences[0].position
    if not isinstance(text, str):
        return ""
    for title in COMMON_TITLES:
        if title in text:
            return title
    return ""


@best_effort(PersonalInfo)
def extract_personal_info(
    text: str,
    summary: str = "",
    experiences: Sequence[ExperienceEntry] = (),
    log: Optional[logging.Logger] = None,
) -> PersonalInfo:
    """
    Extract personal information from the full resume text.

    ``summary`` feeds location detection and ``experiences`` (already
    sorted most recent first) feeds job title guessing, so this runs after
    the experience extractor.
    """
    links = extract_all_links(text)
    linkedin = next((link.url for link in links if link.type == "linkedin"), "")
    website = next((link.url for link in links if link.type in ("website", "other")), "")
    additional = [
        NamedLink(name=link.type.capitalize(), url=link.url)
        for link in links
        if link.url not in (linkedin, website)
    ]
    log.debug("links: linkedin=%r website=%r additional=%d", linkedin, website, len(additional))

    info = PersonalInfo(
        name=extract_name(text),
        email=extract_email(text),
        phone=extract_phone(text),
        linkedin_url=linkedin,
        website_url=website,
        location=extract_location(summary),
        job_title=guess_job_title(text, experiences),
        links=Links(linkedin=linkedin, portfolio=website, additional_links=additional),
    )
    log.debug("personal info: name=%r email=%r job_title=%r", info.name, info.email, info.job_title)
    return info
