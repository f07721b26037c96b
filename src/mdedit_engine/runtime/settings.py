"""Environment-driven settings for hosts embedding the editing engine."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

ENV_PREFIX = "MDEDIT_"


def _env_int(env: Mapping[str, str], key: str, fallback: int) -> int:
    value = env.get(f"{ENV_PREFIX}{key}")
    if value is None:
        return fallback
    try:
        return int(value)
    except ValueError:
        return fallback


@dataclass(frozen=True, slots=True)
class EditorSettings:
    """Knobs shared by the menu controller and the Textual demo."""

    # Nudges the popup menu away from the trigger point so it does not
    # cover a native context menu drawn at the same coordinates.
    menu_offset_x: int = 0
    menu_offset_y: int = 0
    telemetry_preset: Optional[str] = None

    def with_overrides(
        self,
        *,
        menu_offset_x: Optional[int] = None,
        menu_offset_y: Optional[int] = None,
        telemetry_preset: Optional[str] = None,
    ) -> "EditorSettings":
        return EditorSettings(
            menu_offset_x=(
                self.menu_offset_x if menu_offset_x is None else menu_offset_x
            ),
            menu_offset_y=(
                self.menu_offset_y if menu_offset_y is None else menu_offset_y
            ),
            telemetry_preset=telemetry_preset or self.telemetry_preset,
        )


def load_settings(env: Optional[Mapping[str, str]] = None) -> EditorSettings:
    """Read ``MDEDIT_*`` variables, falling back to defaults on bad input."""

    source = os.environ if env is None else env
    preset = source.get(f"{ENV_PREFIX}TELEMETRY_PRESET") or None
    return EditorSettings(
        menu_offset_x=_env_int(source, "MENU_OFFSET_X", 0),
        menu_offset_y=_env_int(source, "MENU_OFFSET_Y", 0),
        telemetry_preset=preset.lower() if preset else None,
    )


__all__ = ["EditorSettings", "load_settings"]
