"""Tests for work experience extraction."""

import logging

from cvparse.extractors.experience import (
    EXPERIENCE_RULES,
    extract_experiences,
    sort_by_recency,
    split_position_company,
)
from cvparse.shared import ExperienceEntry


def test_entries_split_on_dated_title_lines():
    text = "\n".join([
        "Software Engineer | Jan 2016 - Dec 2018",
        "- Wrote the payments backend",
        "- Mentored two interns",
        "Senior Engineer | Jan 2019 - Mar 2022",
        "• Owned the search stack",
        "• Cut p99 latency in half",
    ])
    entries = extract_experiences(text)

    assert [e.position for e in entries] == ["Senior Engineer", "Software Engineer"]
    newest = entries[0]
    assert (newest.start_date, newest.end_date) == ("Jan 2019", "Mar 2022")
    assert newest.bullet_points == ["Owned the search stack", "Cut p99 latency in half"]
    for entry in entries:
        for bullet in entry.bullet_points:
            assert not bullet.startswith(("-", "•", " "))


def test_title_line_with_company_below(sample_resume_text):
    body = sample_resume_text.split("EXPERIENCE\n", 1)[1].split("\n\n", 1)[0]
    entries = extract_experiences(body)

    assert len(entries) == 2
    current, previous = entries
    assert current.position == "Senior Software Engineer"
    assert current.company == "Acme Corp"
    assert (current.start_date, current.end_date) == ("Jan 2021", "Present")
    assert current.bullet_points[0] == "Built a billing service handling 2M invoices per month"
    assert previous.company == "Globex Inc"
    assert (previous.start_date, previous.end_date) == ("Jun 2017", "Dec 2020")


def test_single_header_with_comma_and_date_line():
    """An open start date is kept without assuming the job is ongoing."""
    entries = extract_experiences("Senior Engineer, Acme Corp\nJanuary 2020\n- Built a thing")

    assert len(entries) == 1
    entry = entries[0]
    assert entry.position == "Senior Engineer"
    assert entry.company == "Acme Corp"
    assert entry.start_date == "January 2020"
    assert entry.end_date == ""
    assert entry.bullet_points == ["Built a thing"]


def test_ongoing_entries_sort_first():
    text = "\n".join([
        "Analyst at Initech | 2015 - 2017",
        "- Reports",
        "- Dashboards",
        "Lead Engineer at Hooli | 2018 - Present",
        "- Platform",
        "- Hiring",
    ])
    entries = extract_experiences(text)
    assert entries[0].company == "Hooli"
    assert entries[0].end_date == "Present"
    assert entries[1].position == "Analyst"


def test_ids_are_assigned_in_document_order():
    text = "Engineer | 2010 - 2012\n- A\n- B\nManager | 2013 - 2015\n- C\n- D"
    entries = extract_experiences(text)
    assert {e.id for e in entries} == {"1", "2"}
    assert entries[0].id == "2"


def test_empty_input():
    assert extract_experiences("") == []
    assert extract_experiences("   \n ") == []
    assert extract_experiences(None) == []


def test_split_position_company():
    assert split_position_company("Engineer at Acme") == ("Engineer", "Acme")
    assert split_position_company("Engineer, Acme") == ("Engineer", "Acme")
    assert split_position_company("Engineer") == ("Engineer", "")


def test_sort_by_recency_keeps_unknown_dates_last_and_stable():
    a = ExperienceEntry(id="1", position="A", start_date="sometime")
    b = ExperienceEntry(id="2", position="B", start_date="2019", end_date="2020")
    c = ExperienceEntry(id="3", position="C")
    d = ExperienceEntry(id="4", position="D", start_date="2021", end_date="Current")

    assert [e.position for e in sort_by_recency([a, b, c, d])] == ["D", "B", "A", "C"]


def test_rules_are_named():
    assert [r.name for r in EXPERIENCE_RULES] == [
        "title_then_company", "title_with_date", "company_with_date", "header_after_bullets",
    ]


def test_decisions_are_logged_to_injected_logger(caplog):
    log = logging.getLogger("test.experience")
    with caplog.at_level(logging.DEBUG, logger="test.experience"):
        extract_experiences("Engineer | 2010 - 2012\n- A", log=log)
    assert any("boundary" in r.getMessage() for r in caplog.records)
    assert all(r.name == "test.experience" for r in caplog.records)


def test_lines_before_first_entry_are_logged(caplog):
    """A line that starts no entry is dropped, and the drop is logged."""
    log = logging.getLogger("test.experience")
    with caplog.at_level(logging.DEBUG, logger="test.experience"):
        entries = extract_experiences("Acme Corp\nSoftware Engineer | Jan 2020 - Present", log=log)

    assert [e.position for e in entries] == ["Software Engineer"]
    assert all("Acme Corp" not in e.company for e in entries)
    dropped = [r.getMessage() for r in caplog.records if "before the first entry" in r.getMessage()]
    assert len(dropped) == 1
    assert "Acme Corp" in dropped[0]
