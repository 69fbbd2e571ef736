from __future__ import annotations

import pytest

from editcore.runtime import telemetry


def test_presets_are_named_for_the_editor() -> None:
    assert telemetry.PRESETS == ("development", "production", "quiet")

    quiet = telemetry.preset_options("quiet")
    assert quiet.console is False
    assert quiet.level == "WARNING"
    assert quiet.log_file is None


def test_unknown_preset_is_rejected() -> None:
    with pytest.raises(ValueError):
        telemetry.preset_options("performance")


def test_log_file_env_overrides_preset(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EDITCORE_LOG_FILE", "session.log")

    assert telemetry.preset_options("quiet").log_file == "session.log"
    assert telemetry.preset_options("production").log_file == "session.log"


def test_options_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EDITCORE_LOG_LEVEL", "debug")
    monkeypatch.setenv("EDITCORE_DISABLE_CONSOLE", "yes")
    monkeypatch.setenv("EDITCORE_LOG_JSON", "1")
    monkeypatch.delenv("EDITCORE_LOG_FILE", raising=False)

    options = telemetry.options_from_env()

    assert options.level == "DEBUG"
    assert options.console is False
    assert options.json is True
    assert options.log_file is None


def test_configure_rejects_config_and_preset_together() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(config=object(), preset="quiet")
