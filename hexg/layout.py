"""Projection between hexes and screen points.

A :class:`Layout` pairs one of the two fixed orientations with a size, an
origin, and the offset scheme used when the caller asks for column/row
coordinates. Orientation and offset scheme are independent fields.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from math import cos, pi, sin, sqrt
from typing import Iterable

from .conversions import from_offset, to_offset
from .coords import FractionalHex, Hex, OffsetCoord, OffsetScheme, Point
from .errors import InvalidArgument
from .lines import hex_round


# Forward (f) and inverse (b) matrices for the two hex orientations.
@dataclass(frozen=True)
class Orientation:
    f0: float; f1: float; f2: float; f3: float  # axial(q,r) -> pixel
    b0: float; b1: float; b2: float; b3: float  # pixel -> axial
    start_angle: float                           # in multiples of 60°


POINTY = Orientation(
    f0 =  sqrt(3.0), f1 =  sqrt(3.0)/2.0,
    f2 =  0.0,       f3 =  3.0/2.0,
    b0 =  sqrt(3.0)/3.0, b1 = -1.0/3.0,
    b2 =  0.0,            b3 =  2.0/3.0,
    start_angle = 0.5,
)
FLAT = Orientation(
    f0 =  3.0/2.0,  f1 = 0.0,
    f2 =  sqrt(3.0)/2.0, f3 = sqrt(3.0),
    b0 =  2.0/3.0,  b1 = 0.0,
    b2 = -1.0/3.0,  b3 = sqrt(3.0)/3.0,
    start_angle = 0.0,
)


class OrientationKind(str, Enum):
    POINTY = "pointy"
    FLAT = "flat"

    @property
    def orientation(self) -> Orientation:
        return POINTY if self is OrientationKind.POINTY else FLAT


# Bearing names per direction index. Flat-top layouts have vertical
# columns, so direction 2 points straight up; pointy-top layouts have
# horizontal rows and direction 0 points east.
FLAT_BEARINGS: tuple[str, ...] = ("ESE", "ENE", "N", "WNW", "WSW", "S")
POINTY_BEARINGS: tuple[str, ...] = ("E", "NNE", "NNW", "W", "SSW", "SSE")


def bearing_to_direction(bearing: str) -> int:
    """Direction index for a bearing name from either orientation."""
    name = bearing.strip().upper()
    for table in (FLAT_BEARINGS, POINTY_BEARINGS):
        if name in table:
            return table.index(name)
    raise InvalidArgument(f"unknown bearing {bearing!r}")


@dataclass(frozen=True)
class Layout:
    orientation: Orientation
    size: Point
    origin: Point = Point(0.0, 0.0)
    scheme: OffsetScheme = OffsetScheme.ODD_Q

    @classmethod
    def flat(cls, size: Point, origin: Point, shove_odd_columns_down: bool) -> "Layout":
        scheme = OffsetScheme.ODD_Q if shove_odd_columns_down else OffsetScheme.EVEN_Q
        return cls(FLAT, size, origin, scheme)

    @classmethod
    def pointy(cls, size: Point, origin: Point, shove_odd_rows_right: bool) -> "Layout":
        scheme = OffsetScheme.ODD_R if shove_odd_rows_right else OffsetScheme.EVEN_R
        return cls(POINTY, size, origin, scheme)

    # --- orientation queries --------------------------------------------------

    @property
    def is_flat_top(self) -> bool:
        return self.orientation == FLAT

    @property
    def is_pointy_top(self) -> bool:
        return self.orientation == POINTY

    # flat-top hexes stack into vertical columns, pointy-top into horizontal rows
    is_vertical = is_flat_top
    is_horizontal = is_pointy_top

    def direction_to_bearing(self, direction: int) -> str:
        table = FLAT_BEARINGS if self.is_flat_top else POINTY_BEARINGS
        return table[(6 + direction % 6) % 6]

    # --- hex <-> pixel ----------------------------------------------------------

    def hex_to_pixel(self, h: Hex) -> Point:
        M = self.orientation
        x = (M.f0 * h.q + M.f1 * h.r) * self.size.x + self.origin.x
        y = (M.f2 * h.q + M.f3 * h.r) * self.size.y + self.origin.y
        return Point(x, y)

    def pixel_to_fractional_hex(self, p: Point) -> FractionalHex:
        M = self.orientation
        px = (p.x - self.origin.x) / self.size.x
        py = (p.y - self.origin.y) / self.size.y
        q = M.b0 * px + M.b1 * py
        r = M.b2 * px + M.b3 * py
        return FractionalHex(q, r, -q - r)

    def pixel_to_hex_rounded(self, p: Point) -> Hex:
        return hex_round(self.pixel_to_fractional_hex(p))

    def corner_offset(self, corner: int) -> Point:
        angle = 2.0 * pi * (self.orientation.start_angle + corner) / 6
        return Point(self.size.x * cos(angle), self.size.y * sin(angle))

    def polygon_corners(self, h: Hex) -> list[Point]:
        """The six corners of ``h``, counter-clockwise from the start angle."""
        center = self.hex_to_pixel(h)
        return [center + self.corner_offset(i) for i in range(6)]

    # --- offset coordinates -----------------------------------------------------

    def to_offset(self, h: Hex) -> OffsetCoord:
        return to_offset(h, self.scheme)

    def from_offset(self, oc: OffsetCoord) -> Hex:
        return from_offset(oc, self.scheme)

    def col_row_to_hex(self, col: int, row: int) -> Hex:
        return from_offset(OffsetCoord(col, row), self.scheme)

    def top_left(self, hexes: Iterable[Hex]) -> Hex:
        """The hex with the smallest (row, col) in this layout's offset coordinates."""
        return min(self._require(hexes), key=self._row_col)

    def bottom_right(self, hexes: Iterable[Hex]) -> Hex:
        return max(self._require(hexes), key=self._row_col)

    def _row_col(self, h: Hex) -> tuple[int, int]:
        oc = self.to_offset(h)
        return oc.row, oc.col

    @staticmethod
    def _require(hexes: Iterable[Hex]) -> list[Hex]:
        items = list(hexes)
        if not items:
            raise InvalidArgument("at least one hex is required")
        return items


def new_layout(
    kind: OrientationKind | str,
    size: Point,
    origin: Point,
    scheme: OffsetScheme | str,
) -> Layout:
    return Layout(OrientationKind(kind).orientation, size, origin, OffsetScheme(scheme))


__all__ = [
    "Orientation",
    "OrientationKind",
    "POINTY",
    "FLAT",
    "FLAT_BEARINGS",
    "POINTY_BEARINGS",
    "Layout",
    "bearing_to_direction",
    "new_layout",
]
