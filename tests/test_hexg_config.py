from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from hexg import FLAT, POINTY, LayoutSettings, OffsetScheme, OrientationKind, Point
from hexg import config as config_module


def test_defaults_build_unit_flat_odd_q_layout():
    layout = LayoutSettings().to_layout()
    assert layout.orientation == FLAT
    assert layout.scheme is OffsetScheme.ODD_Q
    assert layout.size == Point(1.0, 1.0)
    assert layout.origin == Point(0.0, 0.0)


def test_offset_mode_spellings():
    settings = LayoutSettings(orientation="pointy", offset_mode="even-r")
    assert settings.orientation is OrientationKind.POINTY
    assert settings.offset_mode is OffsetScheme.EVEN_R
    assert settings.to_layout().orientation == POINTY


@pytest.mark.parametrize(
    "payload",
    [
        {"orientation": "flat", "offset_mode": "odd-r"},
        {"orientation": "pointy", "offset_mode": "even-q"},
        {"orientation": "sideways"},
        {"offset_mode": "diagonal"},
        {"size_x": 0},
        {"size_y": -2.5},
        {"hex_height": 36.0},
    ],
)
def test_invalid_settings_are_rejected(payload):
    with pytest.raises(ValidationError):
        LayoutSettings(**payload)


def test_load_missing_file_returns_defaults(tmp_path: Path) -> None:
    assert LayoutSettings.load(tmp_path / "missing.json") == LayoutSettings()


def test_load_reads_json(tmp_path: Path) -> None:
    path = tmp_path / "layout.json"
    path.write_text(
        json.dumps(
            {
                "orientation": "pointy",
                "size_x": 10,
                "size_y": 12.5,
                "origin_x": 3,
                "origin_y": -4,
                "offset_mode": "odd-r",
            }
        ),
        encoding="utf-8",
    )
    settings = LayoutSettings.load(path)
    assert settings.size == Point(10.0, 12.5)
    assert settings.origin == Point(3.0, -4.0)
    assert settings.to_layout().scheme is OffsetScheme.ODD_R


def test_load_rejects_malformed_file(tmp_path: Path) -> None:
    path = tmp_path / "layout.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ValidationError):
        LayoutSettings.load(path)


def test_save_then_load(tmp_path: Path) -> None:
    settings = LayoutSettings(orientation="pointy", size_x=2.0, offset_mode="even_r")
    path = settings.save(tmp_path / "nested" / "layout.json")
    assert path.exists()
    assert not path.with_suffix(".json.tmp").exists()
    assert LayoutSettings.load(path) == settings


def test_default_path_uses_user_config_dir(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setattr(config_module, "user_config_dir", lambda appname: str(tmp_path / appname))
    assert config_module.default_config_path() == tmp_path / "hexg" / "layout.json"
    LayoutSettings().save()
    assert (tmp_path / "hexg" / "layout.json").exists()
