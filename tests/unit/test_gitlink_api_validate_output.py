"""Unit tests for gitlink.api.validate_output."""

import pytest

from gitlink.api.config.cmd_version import cmd_version
from gitlink.api.validate_output import validate_output


def cmd_mock_command():
    """Mock command function."""


def test_fills_defaults_for_registered_schema():
    output = {"version": "1.0", "git_sha": "", "full_version": "1.0"}

    validated = validate_output(cmd_version, output)

    assert validated == {"errors": [], "warnings": [], "version": "1.0", "git_sha": "", "full_version": "1.0"}


def test_rejects_missing_field():
    with pytest.raises(ValueError, match="config.version"):
        validate_output(cmd_version, {"version": "1.0"})


def test_rejects_extra_field():
    with pytest.raises(ValueError, match="Output validation failed"):
        validate_output(cmd_version, {"version": "1.0", "git_sha": "", "full_version": "1.0", "extra": 1})


def test_skips_non_api_function():
    assert validate_output(cmd_mock_command, {"anything": 1}) == {"anything": 1}


def test_skips_unregistered_command(monkeypatch):
    monkeypatch.setattr(cmd_mock_command, "__module__", "gitlink.api.link.cmd_mock_command")
    assert validate_output(cmd_mock_command, {"anything": 1}) == {"anything": 1}
