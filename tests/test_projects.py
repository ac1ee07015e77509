"""Tests for project extraction."""

from cvparse.extractors.projects import (
    extract_link,
    extract_projects,
    extract_technologies,
    is_title_like,
    merge_fragments,
)
from cvparse.shared import ProjectEntry


def test_sample_project(sample_resume_text):
    body = sample_resume_text.split("PROJECTS\n", 1)[1].split("\n\n", 1)[0]
    projects = extract_projects(body)

    assert len(projects) == 1
    project = projects[0]
    assert project.id == "1"
    assert project.name == "Chat App"
    assert project.link == "https://github.com/janedoe/chat"
    assert project.description == "A realtime messaging tool"
    assert project.bullet_points == ["Built websocket server", "Added auth"]


def test_projects_split_at_headings_between_bullet_runs():
    text = "\n".join([
        "Portfolio Website",
        "- Built with Next.js",
        "- Deployed on Vercel",
        "Weather App",
        "- Shows forecasts",
        "- Caches results offline",
    ])
    projects = extract_projects(text)
    assert [p.name for p in projects] == ["Portfolio Website", "Weather App"]
    assert [p.id for p in projects] == ["1", "2"]
    assert projects[1].bullet_points == ["Shows forecasts", "Caches results offline"]


def test_continuation_line_stays_with_its_project():
    """A wrapped "using ..." line never becomes a project of its own."""
    text = "Recipe Finder app\nSearch recipes by ingredient\nusing React and Node.js\n- Deployed it"
    projects = extract_projects(text)

    assert len(projects) == 1
    project = projects[0]
    assert project.name == "Recipe Finder app"
    assert "using React and Node.js" in project.description
    assert project.technologies == ["React", "Node.js"]
    assert project.bullet_points == ["Deployed it"]


def test_continuation_block_after_bullets_goes_to_description():
    """A "using ..." block below a project's bullets is folded into its description."""
    text = "Recipe Finder\n- Built search\n- Added auth\n\nusing React and Node.js\n- deployed"
    projects = extract_projects(text)

    assert len(projects) == 1
    project = projects[0]
    assert project.name == "Recipe Finder"
    assert project.description == "using React and Node.js"
    assert project.technologies == ["React", "Node.js"]
    assert project.bullet_points == ["Built search", "Added auth", "deployed"]


def test_fragment_block_merged_into_previous_project():
    """In the blank-line fallback the "using ..." block starts its own fragment, which is then merged."""
    text = "recipe finder for home cooks\nsearch by ingredient\n\nusing React and Node.js\nhosted on a small VPS"
    projects = extract_projects(text)

    assert len(projects) == 1
    assert projects[0].name == "recipe finder for home cooks"
    assert "using React and Node.js" in projects[0].description
    assert projects[0].technologies == ["React", "Node.js"]


def test_continuation_directly_under_name_wraps_the_name():
    projects = extract_projects("Inventory Tracker\nfor a local bakery\n- Tracks stock")
    assert [p.name for p in projects] == ["Inventory Tracker for a local bakery"]
    assert projects[0].bullet_points == ["Tracks stock"]


def test_parenthesized_technologies():
    projects = extract_projects("Budget Tracker (React, Firebase)\n- Tracks monthly spending")
    assert len(projects) == 1
    assert projects[0].name.startswith("Budget Tracker")
    assert projects[0].technologies == ["React", "Firebase"]


def test_paragraph_fallback():
    text = "a small cli for notes\nwritten over a weekend\n\nanother toy\nnothing fancy"
    projects = extract_projects(text)
    assert [p.name for p in projects] == ["a small cli for notes", "another toy"]
    assert projects[0].description == "written over a weekend"


def test_merge_fragments_folds_into_previous_project():
    projects = [
        ProjectEntry(id="1", name="Recipe Finder", technologies=["React"], bullet_points=["Search"]),
        ProjectEntry(id="2", name="using Node.js and Redis", technologies=["Node.js", "Redis"]),
        ProjectEntry(id="3", name="Weather App", start_date="2021"),
    ]
    merged = merge_fragments(projects)

    assert [p.name for p in merged] == ["Recipe Finder", "Weather App"]
    assert [p.id for p in merged] == ["1", "2"]
    assert merged[0].description == "using Node.js and Redis"
    assert merged[0].technologies == ["React", "Node.js", "Redis"]
    assert merged[0].bullet_points == ["Search"]


def test_dated_fragment_is_not_merged():
    projects = [
        ProjectEntry(id="1", name="Recipe Finder"),
        ProjectEntry(id="2", name="for a local bakery", start_date="2020"),
    ]
    assert len(merge_fragments(projects)) == 2


def test_leading_fragment_is_kept():
    merged = merge_fragments([ProjectEntry(id="7", name="with friends")])
    assert [(p.id, p.name) for p in merged] == [("1", "with friends")]


def test_extract_technologies_variants():
    assert extract_technologies("Technologies: Python, Flask, Redis") == ["Python", "Flask", "Redis"]
    assert extract_technologies("Tool built using Go and gRPC.") == ["Go", "gRPC"]
    assert extract_technologies("Dashboard on PostgreSQL with Docker") == ["PostgreSQL", "Docker"]
    assert extract_technologies("A plain description") == []


def test_known_technology_scan_respects_symbols():
    assert extract_technologies("Ported from Java to C++") == ["Java", "C++"]
    assert "Java" not in extract_technologies("Rewrote the JavaScript client")


def test_extract_link():
    assert extract_link("Demo: https://demo.example.com/app.") == "https://demo.example.com/app"
    assert extract_link("src at github.com/jdoe/tool") == "https://github.com/jdoe/tool"
    assert extract_link("no link here") == ""


def test_is_title_like():
    assert is_title_like("Portfolio Website")
    assert not is_title_like("Built a small thing for my friends.")
    assert not is_title_like("")


def test_empty_input():
    assert extract_projects("") == []
