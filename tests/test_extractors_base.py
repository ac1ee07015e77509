"""Tests for the best-effort wrapper shared by the extractors."""

import logging

import pytest

from cvparse.extractors.base import best_effort


@best_effort(list)
def _explode(text, log=None):
    raise RuntimeError("bad table")


@best_effort(list)
def _echo(text, suffix="", log=None):
    log.debug("echo called")
    return [text + suffix]


@pytest.mark.parametrize("value", [None, "", "   \n", 42, b"bytes"])
def test_empty_or_non_string_input_returns_default(value):
    assert _echo(value) == []


def test_passes_through_arguments():
    assert _echo("a", suffix="b") == ["ab"]


def test_exception_is_logged_and_converted(caplog):
    log = logging.getLogger("test.base")
    with caplog.at_level(logging.DEBUG, logger="test.base"):
        assert _explode("some text", log=log) == []

    errors = [r for r in caplog.records if r.levelno == logging.ERROR]
    assert len(errors) == 1
    assert "_explode failed" in errors[0].getMessage()
    assert "bad table" in errors[0].getMessage()


def test_package_logger_used_when_none_injected(caplog):
    with caplog.at_level(logging.DEBUG, logger="cvparse"):
        _echo("x")
    assert any(r.name == "cvparse" and r.getMessage() == "echo called" for r in caplog.records)


def test_wrapper_keeps_function_name():
    assert _explode.__name__ == "_explode"
