"""Conversions between cube coordinates and the four offset schemes.

Parity is tested with ``a & 1`` rather than ``a % 2``: for Python ints the
two agree, but ``& 1`` states the intent (0 or 1, never -1) and reads the
same as the reference formulas. ``a + sign * (a & 1)`` is always even, so
the floor division is exact for negative operands as well.
"""

from __future__ import annotations

from .coords import Hex, OffsetCoord, OffsetScheme


def _shove(a: int, sign: int) -> int:
    return (a + sign * (a & 1)) // 2


def to_offset(h: Hex, scheme: OffsetScheme) -> OffsetCoord:
    sign = scheme.sign
    if scheme.shifts_columns:
        return OffsetCoord(h.q, h.r + _shove(h.q, sign))
    return OffsetCoord(h.q + _shove(h.r, sign), h.r)


def from_offset(oc: OffsetCoord, scheme: OffsetScheme) -> Hex:
    sign = scheme.sign
    if scheme.shifts_columns:
        q = oc.col
        r = oc.row - _shove(oc.col, sign)
    else:
        q = oc.col - _shove(oc.row, sign)
        r = oc.row
    return Hex.from_axial(q, r)


def col_row_to_hex(col: int, row: int, scheme: OffsetScheme) -> Hex:
    return from_offset(OffsetCoord(col, row), scheme)


def cube_to_axial(h: Hex) -> tuple[int, int]:
    return h.q, h.r


def axial_to_cube(q: int, r: int) -> Hex:
    return Hex.from_axial(q, r)


__all__ = [
    "to_offset",
    "from_offset",
    "col_row_to_hex",
    "cube_to_axial",
    "axial_to_cube",
]
