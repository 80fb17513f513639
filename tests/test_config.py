"""Tests for environment configuration."""

import pytest

from bean_tray.config import TrayConfig
from bean_tray.exceptions import ConfigError

ENV_VARS = [
    "BEAN_TRAY_LABEL_WIDTH",
    "BEAN_TRAY_DEFAULT_START_DAY",
    "BEAN_TRAY_DEFAULT_END_DAY",
    "BEAN_TRAY_APP_NAME",
    "BEAN_TRAY_TOOLTIP",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    config = TrayConfig.from_env()

    assert config == TrayConfig()
    assert config.label_width == 16
    assert config.default_start_day == 7
    assert config.default_end_day == 30
    assert config.app_name == "Brew Guide"
    assert config.tooltip == "Brew Guide"


def test_from_env_reads_values(monkeypatch):
    monkeypatch.setenv("BEAN_TRAY_LABEL_WIDTH", "20")
    monkeypatch.setenv("BEAN_TRAY_DEFAULT_START_DAY", " 4 ")
    monkeypatch.setenv("BEAN_TRAY_DEFAULT_END_DAY", "45")
    monkeypatch.setenv("BEAN_TRAY_APP_NAME", "Bean Shelf")
    monkeypatch.setenv("BEAN_TRAY_TOOLTIP", "Beans")

    config = TrayConfig.from_env()

    assert config == TrayConfig(
        label_width=20,
        default_start_day=4,
        default_end_day=45,
        app_name="Bean Shelf",
        tooltip="Beans",
    )


def test_tooltip_falls_back_to_app_name(monkeypatch):
    monkeypatch.setenv("BEAN_TRAY_APP_NAME", "Bean Shelf")

    assert TrayConfig.from_env().tooltip == "Bean Shelf"


def test_blank_values_use_defaults(monkeypatch):
    monkeypatch.setenv("BEAN_TRAY_LABEL_WIDTH", "  ")
    monkeypatch.setenv("BEAN_TRAY_APP_NAME", "")

    config = TrayConfig.from_env()

    assert config.label_width == 16
    assert config.app_name == "Brew Guide"


def test_non_integer_raises(monkeypatch):
    monkeypatch.setenv("BEAN_TRAY_LABEL_WIDTH", "wide")

    with pytest.raises(ConfigError, match="BEAN_TRAY_LABEL_WIDTH"):
        TrayConfig.from_env()


def test_negative_raises(monkeypatch):
    monkeypatch.setenv("BEAN_TRAY_DEFAULT_END_DAY", "-1")

    with pytest.raises(ConfigError, match="must not be negative"):
        TrayConfig.from_env()
