"""Tests for education extraction."""

from cvparse.extractors.education import extract_education, split_degree_field


def test_sample_education(sample_resume_text):
    body = sample_resume_text.split("EDUCATION\n", 1)[1].split("\n\n", 1)[0]
    entries = extract_education(body)

    assert len(entries) == 1
    entry = entries[0]
    assert entry.id == "1"
    assert entry.school == "University of Texas at Austin"
    assert entry.degree == "B.S."
    assert entry.field == "Computer Science"
    assert (entry.start_date, entry.end_date) == ("2013", "2017")
    assert entry.gpa == "3.8"
    assert entry.description == ""


def test_degree_above_school():
    entries = extract_education("Master of Science in Data Science\nStanford University\n2018 - 2020")

    assert len(entries) == 1
    entry = entries[0]
    assert entry.school == "Stanford University"
    assert entry.degree == "Master of Science"
    assert entry.field == "Data Science"
    assert (entry.start_date, entry.end_date) == ("2018", "2020")


def test_school_first_entries():
    text = "\n".join([
        "University of Michigan",
        "B.A. in Economics",
        "2010 - 2014",
        "Community College of Denver",
        "Associate of Arts",
        "2008 - 2010",
    ])
    entries = extract_education(text)

    assert [e.school for e in entries] == ["University of Michigan", "Community College of Denver"]
    assert [e.degree for e in entries] == ["B.A.", "Associate of Arts"]
    assert entries[0].field == "Economics"
    assert entries[1].start_date == "2008"


def test_school_and_degree_on_one_line_with_minor():
    entries = extract_education("MIT | B.S., Physics, Minor in Music | 2015 - 2019")

    assert len(entries) == 1
    entry = entries[0]
    assert entry.school == "MIT"
    assert entry.degree == "B.S."
    assert entry.field == "Physics"
    assert entry.description == "Minor in Music"
    assert entry.end_date == "2019"


def test_bullets_go_to_description():
    entries = extract_education("Georgia Institute of Technology, 2016\n- Dean's list\n- Robotics club")
    assert len(entries) == 1
    assert entries[0].school == "Georgia Institute of Technology"
    assert entries[0].description == "Dean's list Robotics club"


def test_split_degree_field():
    assert split_degree_field("Bachelor of Science | Biology") == ("Bachelor of Science", "Biology")
    assert split_degree_field("Bachelor of Arts in History") == ("Bachelor of Arts", "History")
    assert split_degree_field("M.S., Statistics") == ("M.S.", "Statistics")
    assert split_degree_field("Diploma") == ("Diploma", "")


def test_empty_input():
    assert extract_education("") == []
