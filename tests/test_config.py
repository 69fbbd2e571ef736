from __future__ import annotations

import pytest

from editcore.config import EditorSettings


def test_defaults() -> None:
    settings = EditorSettings.from_env({})

    assert settings == EditorSettings()
    assert settings.font_size == 24
    assert (settings.min_font_size, settings.max_font_size) == (8, 72)
    assert settings.font_step == 2
    assert settings.tab_width == 4


def test_env_overrides_are_clamped() -> None:
    settings = EditorSettings.from_env(
        {"EDITCORE_FONT_SIZE": "100", "EDITCORE_TAB_WIDTH": "2"}
    )

    assert settings.font_size == 72
    assert settings.tab_width == 2


def test_invalid_env_values_fall_back() -> None:
    settings = EditorSettings.from_env(
        {
            "EDITCORE_FONT_SIZE": "huge",
            "EDITCORE_MIN_FONT_SIZE": "50",
            "EDITCORE_MAX_FONT_SIZE": "10",
            "EDITCORE_FONT_STEP": "0",
        }
    )

    assert settings.font_size == 24
    assert (settings.min_font_size, settings.max_font_size) == (8, 72)
    assert settings.font_step == 2


def test_clamp_font_size() -> None:
    settings = EditorSettings()

    assert settings.clamp_font_size(4) == 8
    assert settings.clamp_font_size(30) == 30
    assert settings.clamp_font_size(90) == 72


def test_rejects_inverted_limits() -> None:
    with pytest.raises(ValueError):
        EditorSettings(min_font_size=20, max_font_size=10)
