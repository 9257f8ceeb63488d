"""Validated layout configuration."""

from __future__ import annotations

import logging
from pathlib import Path

from platformdirs import user_config_dir
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .coords import OffsetScheme, Point
from .layout import Layout, OrientationKind

log = logging.getLogger(__name__)

CONFIG_FILENAME = "layout.json"


def default_config_path() -> Path:
    """Per-user location of the layout file, e.g. ``~/.config/hexg/layout.json``."""

    return Path(user_config_dir("hexg")) / CONFIG_FILENAME


class LayoutSettings(BaseModel):
    """Parameters needed to build a :class:`~hexg.layout.Layout`."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    orientation: OrientationKind = Field(default=OrientationKind.FLAT)
    size_x: float = Field(default=1.0, gt=0.0)
    size_y: float = Field(default=1.0, gt=0.0)
    origin_x: float = Field(default=0.0)
    origin_y: float = Field(default=0.0)
    offset_mode: OffsetScheme = Field(default=OffsetScheme.ODD_Q)

    @field_validator("offset_mode", mode="before")
    @classmethod
    def _coerce_offset_mode(cls, value: object) -> object:
        # "odd-q" and "ODD_Q" are both accepted
        if isinstance(value, str):
            return OffsetScheme(value)
        return value

    @model_validator(mode="after")
    def _offset_matches_orientation(self) -> "LayoutSettings":
        flat = self.orientation is OrientationKind.FLAT
        if flat != self.offset_mode.shifts_columns:
            raise ValueError(
                f"offset mode {self.offset_mode} does not apply to {self.orientation.value}-top hexes"
            )
        return self

    @property
    def size(self) -> Point:
        return Point(self.size_x, self.size_y)

    @property
    def origin(self) -> Point:
        return Point(self.origin_x, self.origin_y)

    def to_layout(self) -> Layout:
        return Layout(self.orientation.orientation, self.size, self.origin, self.offset_mode)

    @classmethod
    def load(cls, path: Path | None = None) -> "LayoutSettings":
        """Read settings from ``path``, falling back to defaults when it does not exist.

        Malformed files raise :class:`pydantic.ValidationError`.
        """

        path = path or default_config_path()
        if not path.exists():
            log.debug("no layout config at %s, using defaults", path)
            return cls()
        log.debug("loading layout config from %s", path)
        return cls.model_validate_json(path.read_text(encoding="utf-8"))

    def save(self, path: Path | None = None) -> Path:
        """Write the settings as JSON, replacing any existing file atomically."""

        path = path or default_config_path()
        path.parent.mkdir(parents=True, exist_ok=True)
        temp_path = path.with_suffix(path.suffix + ".tmp")
        temp_path.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        temp_path.replace(path)
        log.debug("saved layout config to %s", path)
        return path


__all__ = ["CONFIG_FILENAME", "LayoutSettings", "default_config_path"]
