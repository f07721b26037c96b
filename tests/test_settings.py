from __future__ import annotations

import pytest

from mdedit_engine.runtime import EditorSettings, load_settings


def test_load_settings_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MDEDIT_MENU_OFFSET_X", "3")
    monkeypatch.setenv("MDEDIT_MENU_OFFSET_Y", "-1")
    monkeypatch.setenv("MDEDIT_TELEMETRY_PRESET", "Development")

    settings = load_settings()

    assert settings == EditorSettings(
        menu_offset_x=3, menu_offset_y=-1, telemetry_preset="development"
    )


def test_load_settings_falls_back_on_bad_values() -> None:
    settings = load_settings({"MDEDIT_MENU_OFFSET_X": "wide"})

    assert settings.menu_offset_x == 0
    assert settings.menu_offset_y == 0
    assert settings.telemetry_preset is None


def test_with_overrides_keeps_unset_fields() -> None:
    base = EditorSettings(menu_offset_x=2, menu_offset_y=5)

    updated = base.with_overrides(menu_offset_y=0)

    assert updated.menu_offset_x == 2
    assert updated.menu_offset_y == 0
