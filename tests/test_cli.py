"""Tests for the bean-tray command-line preview."""

import io
import json

import pytest

from bean_tray.cli import main
from bean_tray.menu.types import MenuDocument

INVENTORY = [
    {"id": "a", "name": "Kenya AA", "remaining": "200", "roastDate": "2024-03-21"},
    {"id": "b", "name": "Frozen Geisha", "remaining": "50", "isFrozen": True},
    {"id": "c", "name": "Used up", "remaining": "0", "roastDate": "2024-03-21"},
]


@pytest.fixture
def stdin(monkeypatch):
    def _set(text: str) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO(text))

    return _set


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("BEAN_TRAY_LABEL_WIDTH", raising=False)


def test_cli_json_output(stdin, capsys):
    stdin(json.dumps(INVENTORY))

    assert main(["--json", "--today", "2024-03-31"]) == 0

    document = MenuDocument.model_validate_json(capsys.readouterr().out)
    assert document.find("stat_count").label == "库存数量：2 款"
    assert document.find("bean:a") is not None
    assert document.find("bean:c") is None


def test_cli_text_output(stdin, capsys):
    stdin(json.dumps(INVENTORY))

    assert main(["--today", "2024-03-31"]) == 0

    out = capsys.readouterr().out
    assert "(库存数量：2 款)" in out
    assert "冷冻中（1 款） ▸" in out
    assert "赏味期（1 款） ▸" in out
    assert "20 天 · Kenya AA" in out
    assert "打开 Brew Guide" in out


def test_cli_label_width_override(stdin, capsys):
    stdin(json.dumps(INVENTORY))

    assert main(["--json", "--today", "2024-03-31", "--label-width", "6"]) == 0

    document = MenuDocument.model_validate_json(capsys.readouterr().out)
    assert document.find("bean:a").label == "20 天 · Keny…"


def test_cli_empty_inventory(stdin, capsys):
    stdin("[]")

    assert main([]) == 0

    assert "(暂无咖啡豆库存)" in capsys.readouterr().out


def test_cli_invalid_json(stdin, capsys):
    stdin("{not json")

    assert main([]) == 1

    assert "Error: invalid inventory" in capsys.readouterr().err


def test_cli_invalid_record(stdin, capsys):
    stdin(json.dumps([{"name": "no id"}]))

    assert main([]) == 1

    assert "Error" in capsys.readouterr().err


def test_cli_invalid_config(stdin, capsys, monkeypatch):
    monkeypatch.setenv("BEAN_TRAY_LABEL_WIDTH", "wide")
    stdin("[]")

    assert main([]) == 1

    assert "BEAN_TRAY_LABEL_WIDTH" in capsys.readouterr().err
