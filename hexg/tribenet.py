"""TribeNet sub-map coordinates.

TribeNet coordinates look like ``"AB 0102"``:

- ``A`` (grid row) and ``B`` (grid column) pick one of 26x26 sub-maps.
- ``0102`` is the position inside the sub-map: column 01 and row 02, both
  1-based. Each sub-map is 30 columns wide and 21 rows tall, so ``0101`` is
  the upper-left and ``3021`` the lower-right hex.

TribeNet maps shove even-numbered (1-based) columns down, which is the
odd-q scheme once the origin is translated by (-1, -1). ``"AA 0101"`` is
offset ``(0, 0)`` and ``"ZZ 3021"`` is ``(779, 545)``.
"""

from __future__ import annotations

from enum import IntEnum

from .conversions import from_offset, to_offset
from .coords import Hex, OffsetCoord, OffsetScheme, Point
from .errors import FormatError, InvalidGridLetter, InvalidSubCoordinate, OutOfRange
from .layout import Layout

ROWS_PER_GRID = 21
COLS_PER_GRID = 30
GRID_LETTERS = 26  # A ... Z

TRIBENET_SCHEME = OffsetScheme.ODD_Q
TRIBENET_LAYOUT = Layout.flat(Point(1.0, 1.0), Point(0.0, 0.0), shove_odd_columns_down=True)

TRIBENET_BEARINGS: tuple[str, ...] = ("SE", "NE", "N", "NW", "SW", "S")


class TribeNetDirection(IntEnum):
    """Direction indices named the way TribeNet reports movement."""

    SOUTH_EAST = 0
    NORTH_EAST = 1
    NORTH = 2
    NORTH_WEST = 3
    SOUTH_WEST = 4
    SOUTH = 5


def tribenet_bearing(direction: int) -> str:
    return TRIBENET_BEARINGS[(6 + direction % 6) % 6]


def _grid_index(letter: str, axis: str) -> int:
    if not ("A" <= letter <= "Z"):
        raise InvalidGridLetter(f"invalid grid {axis} {letter!r}: must be uppercase A-Z")
    return ord(letter) - ord("A")


def _sub_value(digits: str, upper: int, axis: str) -> int:
    if not (digits.isascii() and digits.isdigit()):
        raise InvalidSubCoordinate(f"invalid sub-map {axis}: {digits!r}")
    value = int(digits)
    if not (1 <= value <= upper):
        raise InvalidSubCoordinate(f"invalid sub-map {axis}: {digits!r} not in 01..{upper:02d}")
    return value


def parse_tribenet(text: str) -> OffsetCoord:
    """Convert ``"AB 0102"`` to a 0-based odd-q offset coordinate.

    Raises :class:`FormatError`, :class:`InvalidGridLetter` or
    :class:`InvalidSubCoordinate`, checked in that order.
    """
    if len(text) != 7 or text[2] != " ":
        raise FormatError(f"invalid format {text!r}: expected 'AB 0102'")
    grid_row = _grid_index(text[0], "row")
    grid_col = _grid_index(text[1], "column")
    sub_col = _sub_value(text[3:5], COLS_PER_GRID, "column")
    sub_row = _sub_value(text[5:7], ROWS_PER_GRID, "row")
    return OffsetCoord(
        col=grid_col * COLS_PER_GRID + sub_col - 1,
        row=grid_row * ROWS_PER_GRID + sub_row - 1,
    )


def format_tribenet(oc: OffsetCoord) -> str:
    """Convert a 0-based odd-q offset coordinate to ``"AB 0102"``.

    Raises :class:`OutOfRange` outside ``(0, 0)``..``(779, 545)``.
    """
    if oc.col < 0 or oc.row < 0:
        raise OutOfRange(f"invalid offset coordinates: {oc}")
    grid_row, grid_col = oc.row // ROWS_PER_GRID, oc.col // COLS_PER_GRID
    if grid_row >= GRID_LETTERS or grid_col >= GRID_LETTERS:
        raise OutOfRange(f"offset coordinates {oc} are out of range for the A-Z grid system")
    sub_col, sub_row = oc.col % COLS_PER_GRID + 1, oc.row % ROWS_PER_GRID + 1
    return f"{chr(ord('A') + grid_row)}{chr(ord('A') + grid_col)} {sub_col:02d}{sub_row:02d}"


def tribenet_to_hex(text: str) -> Hex:
    return from_offset(parse_tribenet(text), TRIBENET_SCHEME)


def hex_to_tribenet(h: Hex) -> str:
    return format_tribenet(to_offset(h, TRIBENET_SCHEME))


__all__ = [
    "ROWS_PER_GRID",
    "COLS_PER_GRID",
    "GRID_LETTERS",
    "TRIBENET_SCHEME",
    "TRIBENET_LAYOUT",
    "TRIBENET_BEARINGS",
    "TribeNetDirection",
    "tribenet_bearing",
    "parse_tribenet",
    "format_tribenet",
    "tribenet_to_hex",
    "hex_to_tribenet",
]
