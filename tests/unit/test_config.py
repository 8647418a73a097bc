"""Tests for configuration helpers."""

from pathlib import Path

import pytest

from study_map import config
from study_map.config import (
    TRANSITION_DELAY_ENV,
    TRANSITION_DELAY_SECONDS,
    resolve_transition_delay,
)


def test_transition_delay_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(TRANSITION_DELAY_ENV, raising=False)
    assert resolve_transition_delay() == TRANSITION_DELAY_SECONDS == 0.6


def test_transition_delay_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(TRANSITION_DELAY_ENV, "250")
    assert resolve_transition_delay() == 0.25


@pytest.mark.parametrize("value", ["fast", "-5", "1.5"])
def test_transition_delay_ignores_bad_values(monkeypatch: pytest.MonkeyPatch, value: str) -> None:
    monkeypatch.setenv(TRANSITION_DELAY_ENV, value)
    assert resolve_transition_delay() == TRANSITION_DELAY_SECONDS


def test_resolve_log_file_uses_first_usable_candidate(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    blocker = tmp_path / "file"
    blocker.write_text("")
    candidates = [blocker / "sub" / "a.log", tmp_path / "logs" / "b.log"]
    monkeypatch.setattr(config, "LOG_FILE_CANDIDATES", candidates)
    assert config.resolve_log_file() == tmp_path / "logs" / "b.log"
    assert (tmp_path / "logs").is_dir()
