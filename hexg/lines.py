"""Fractional hexes, rounding, and line drawing."""

from __future__ import annotations

import math

from .coords import FractionalHex, Hex

AnyHex = Hex | FractionalHex

# Pushes points that land exactly on an edge into a consistent hex. The
# components sum to zero so the nudged endpoints stay on the cube plane.
NUDGE = FractionalHex(1e-6, 1e-6, -2e-6)


def lerp(a: float, b: float, t: float) -> float:
    # better for floating point precision than a + (b - a) * t
    return a * (1 - t) + b * t


def hex_lerp(a: AnyHex, b: AnyHex, t: float) -> FractionalHex:
    return FractionalHex(
        lerp(float(a.q), float(b.q), t),
        lerp(float(a.r), float(b.r), t),
        lerp(float(a.s), float(b.s), t),
    )


def round_half_away(x: float) -> int:
    """Round to the nearest integer, ties away from zero.

    The builtin :func:`round` ties to even, which would move some points
    sitting exactly between two hexes into a different cell.
    """
    whole = math.trunc(x)
    if abs(x - whole) >= 0.5:
        whole += 1 if x > 0 else -1
    return int(whole)


def hex_round(frac: FractionalHex) -> Hex:
    """Return the hex containing ``frac``.

    Each component is rounded independently, then the one with the largest
    rounding error is recomputed from the other two.
    """
    q = round_half_away(frac.q)
    r = round_half_away(frac.r)
    s = round_half_away(frac.s)
    q_diff = abs(q - frac.q)
    r_diff = abs(r - frac.r)
    s_diff = abs(s - frac.s)
    if q_diff > r_diff and q_diff > s_diff:
        q = -r - s
    elif r_diff > s_diff:
        r = -q - s
    else:
        s = -q - r
    return Hex(q, r, s)


def linedraw(a: Hex, b: Hex, with_nudge: bool = False) -> list[Hex]:
    """Hexes on the segment from ``a`` to ``b``, both ends included.

    Returns ``a.distance(b) + 1`` hexes; consecutive hexes are neighbours.
    """
    n = a.distance(b)
    if n == 0:
        return [a]
    start: AnyHex = a
    end: AnyHex = b
    if with_nudge:
        start = FractionalHex.from_hex(a).add(NUDGE)
        end = FractionalHex.from_hex(b).add(NUDGE)
    return [hex_round(hex_lerp(start, end, i / n)) for i in range(n + 1)]


__all__ = [
    "NUDGE",
    "lerp",
    "hex_lerp",
    "round_half_away",
    "hex_round",
    "linedraw",
]
