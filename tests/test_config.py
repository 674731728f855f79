# tests/test_config.py

import pytest
from pydantic import ValidationError

from task_structures import DisplayConfig


def test_defaults() -> None:
    config = DisplayConfig()

    assert config.date_format == "%m/%d/%Y %H:%M"
    assert config.depth_marker == "--|"
    assert config.late_prefix == "LATE: "
    assert config.log_level == "WARNING"


def test_from_env_reads_prefixed_variables(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TASK_STRUCTURES_DEPTH_MARKER", "  ")
    monkeypatch.setenv("TASK_STRUCTURES_DATE_FORMAT", "%Y-%m-%d")
    monkeypatch.setenv("TASK_STRUCTURES_LOG_LEVEL", "DEBUG")

    config = DisplayConfig.from_env()

    # Blank values fall back to defaults
    assert config.depth_marker == "--|"
    assert config.date_format == "%Y-%m-%d"
    assert config.log_level == "DEBUG"


def test_overrides_win_over_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TASK_STRUCTURES_DEPTH_MARKER", "**")

    assert DisplayConfig.from_env().depth_marker == "**"
    assert DisplayConfig.from_env(depth_marker="..").depth_marker == ".."
    assert DisplayConfig.from_env(depth_marker=None).depth_marker == "**"


def test_empty_date_format_rejected() -> None:
    with pytest.raises(ValidationError):
        DisplayConfig(date_format="")
