"""Tests for the scalecli command-line front end."""

import logging

import pytest
from click.testing import CliRunner

from scalecli import __version__
from scalecli.cli import main


def _invoke(*args: str):
    return CliRunner().invoke(main, list(args))


def test_scale_only() -> None:
    result = _invoke("--scale", "A#4")
    assert result.exit_code == 0
    assert "Scale : A#4" in result.output
    assert "Key   : -" in result.output


def test_scale_and_key_short_options() -> None:
    result = _invoke("-s", "G", "-k", "Bb")
    assert result.exit_code == 0
    assert "Scale : G" in result.output
    assert "Key   : Bb" in result.output


def test_enharmonic_spellings_are_normalized() -> None:
    result = _invoke("-s", "E#", "-k", "Cb-1")
    assert result.exit_code == 0
    assert "Scale : F" in result.output
    assert "Key   : B-1" in result.output


def test_banner_shows_version() -> None:
    result = _invoke("-s", "C")
    assert f"scalecli v{__version__}" in result.output


def test_invalid_scale_is_usage_error() -> None:
    result = _invoke("--scale", "H#")
    assert result.exit_code == 2
    assert "Invalid note: 'H#'" in result.output


def test_invalid_key_is_usage_error() -> None:
    result = _invoke("-s", "C", "-k", "C#4x")
    assert result.exit_code == 2
    assert "Invalid note: 'C#4x'" in result.output


def test_scale_is_required() -> None:
    result = _invoke()
    assert result.exit_code == 2
    assert "--scale" in result.output


def test_version_option() -> None:
    result = _invoke("--version")
    assert result.exit_code == 0
    assert __version__ in result.output


def test_verbose_flag_enables_debug_logging(caplog: pytest.LogCaptureFixture) -> None:
    result = _invoke("-v", "-s", "D")
    assert result.exit_code == 0
    assert "Scale : D" in result.output
    assert any(
        record.levelno == logging.DEBUG and "scale=" in record.getMessage()
        for record in caplog.records
    )


def test_debug_logging_off_by_default(caplog: pytest.LogCaptureFixture) -> None:
    result = _invoke("-s", "D")
    assert result.exit_code == 0
    assert not any("scale=" in record.getMessage() for record in caplog.records)
