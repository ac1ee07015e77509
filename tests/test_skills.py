"""Tests for skills extraction."""

import pytest

from cvparse.extractors.skills import MAX_SKILL_LENGTH, extract_skills


def test_sample_skills(sample_resume_text):
    body = sample_resume_text.split("SKILLS\n", 1)[1].split("\n\n", 1)[0]
    assert extract_skills(body) == ["Python", "Go", "PostgreSQL", "Docker", "Kubernetes", "Terraform"]


def test_separators_and_bullets():
    text = "Python; SQL\t Excel\n• Tableau · Looker\n- Airflow\n* dbt"
    assert extract_skills(text) == ["Python", "SQL", "Excel", "Tableau", "Looker", "Airflow", "dbt"]


def test_duplicates_removed_first_seen_order():
    assert extract_skills("Go, Rust, Go\nRust | C") == ["Go", "Rust", "C"]


def test_long_items_dropped():
    sentence = "Comfortable presenting findings to executive stakeholders weekly"
    assert len(sentence) >= MAX_SKILL_LENGTH
    assert extract_skills(f"Python, {sentence}") == ["Python"]


@pytest.mark.parametrize("text", ["Python, Go", "a | b | a", "• Docker\n• Helm"])
def test_idempotent(text):
    once = extract_skills(text)
    assert extract_skills(", ".join(once)) == once


def test_every_skill_within_bounds():
    for skill in extract_skills("x, , ,\n\n" + "y" * 60 + ", z"):
        assert 0 < len(skill) < MAX_SKILL_LENGTH


def test_empty_input():
    assert extract_skills("") == []
    assert extract_skills(" , ; |") == []
