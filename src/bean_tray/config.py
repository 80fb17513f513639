"""Environment-driven configuration for the tray menu."""

from __future__ import annotations

import os
from dataclasses import dataclass

from bean_tray.exceptions import ConfigError
from bean_tray.freshness import DEFAULT_END_DAY, DEFAULT_START_DAY
from bean_tray.menu.builder import DEFAULT_APP_NAME, DEFAULT_LABEL_WIDTH


def _parse_non_negative_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        parsed = int(value.strip())
    except ValueError as e:
        raise ConfigError(f"{name} must be an integer, got {value!r}") from e
    if parsed < 0:
        raise ConfigError(f"{name} must not be negative, got {parsed}")
    return parsed


def _parse_str(name: str, default: str) -> str:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip() or default


@dataclass(frozen=True)
class TrayConfig:
    label_width: int = DEFAULT_LABEL_WIDTH
    default_start_day: int = DEFAULT_START_DAY
    default_end_day: int = DEFAULT_END_DAY
    app_name: str = DEFAULT_APP_NAME
    tooltip: str = DEFAULT_APP_NAME

    @classmethod
    def from_env(cls) -> "TrayConfig":
        app_name = _parse_str("BEAN_TRAY_APP_NAME", DEFAULT_APP_NAME)
        return cls(
            label_width=_parse_non_negative_int("BEAN_TRAY_LABEL_WIDTH", DEFAULT_LABEL_WIDTH),
            default_start_day=_parse_non_negative_int("BEAN_TRAY_DEFAULT_START_DAY", DEFAULT_START_DAY),
            default_end_day=_parse_non_negative_int("BEAN_TRAY_DEFAULT_END_DAY", DEFAULT_END_DAY),
            app_name=app_name,
            tooltip=_parse_str("BEAN_TRAY_TOOLTIP", app_name),
        )
