"""Hex-grid coordinate geometry in the style of the Red Blob Games guide.

https://www.redblobgames.com/grids/hexagons/
"""

from .coords import ORIGIN, FractionalHex, Hex, OffsetCoord, OffsetScheme, Point, hex_key
from .conversions import from_offset, to_offset
from .errors import (
    FormatError,
    HexgError,
    InvalidArgument,
    InvalidCoordinate,
    InvalidGridLetter,
    InvalidSubCoordinate,
    OutOfRange,
    TribeNetError,
)
from .layout import FLAT, POINTY, Layout, Orientation, OrientationKind, bearing_to_direction, new_layout
from .lines import hex_lerp, hex_round, lerp, linedraw
from .neighbors import diagonal_neighbors, neighbors, neighbors_offset
from .regions import GridStore, hexagon, parallelogram, rectangle, ring, spiral, triangle
from .tribenet import format_tribenet, hex_to_tribenet, parse_tribenet, tribenet_to_hex
from .config import LayoutSettings

__version__ = "0.10.0"

__all__ = [
    "__version__",
    "ORIGIN",
    "FractionalHex",
    "Hex",
    "OffsetCoord",
    "OffsetScheme",
    "Point",
    "hex_key",
    "from_offset",
    "to_offset",
    "HexgError",
    "InvalidCoordinate",
    "InvalidArgument",
    "TribeNetError",
    "FormatError",
    "InvalidGridLetter",
    "InvalidSubCoordinate",
    "OutOfRange",
    "FLAT",
    "POINTY",
    "Layout",
    "Orientation",
    "OrientationKind",
    "bearing_to_direction",
    "new_layout",
    "hex_lerp",
    "hex_round",
    "lerp",
    "linedraw",
    "neighbors",
    "diagonal_neighbors",
    "neighbors_offset",
    "GridStore",
    "hexagon",
    "parallelogram",
    "rectangle",
    "ring",
    "spiral",
    "triangle",
    "format_tribenet",
    "hex_to_tribenet",
    "parse_tribenet",
    "tribenet_to_hex",
    "LayoutSettings",
]
