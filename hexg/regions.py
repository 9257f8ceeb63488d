"""Generators for the standard map shapes.

Every generator returns a fresh :data:`GridStore`: a dict of hexes keyed by
:func:`hexg.coords.hex_key`. Shapes that depend on the drawing orientation
take a :class:`~hexg.layout.Layout`.
"""

from __future__ import annotations

from typing import Iterable

from .coords import ORIGIN, Hex
from .errors import InvalidArgument
from .layout import Layout

GridStore = dict[int, Hex]


def _store(hexes: Iterable[Hex]) -> GridStore:
    return {h.key(): h for h in hexes}


def _non_negative(name: str, value: int) -> None:
    if value < 0:
        raise InvalidArgument(f"{name} must be non-negative, got {value}")


def parallelogram(q1: int, r1: int, q2: int, r2: int) -> GridStore:
    """All hexes with ``q1 <= q <= q2`` and ``r1 <= r <= r2``."""
    return _store(
        Hex.from_axial(q, r)
        for q in range(q1, q2 + 1)
        for r in range(r1, r2 + 1)
    )


def triangle(layout: Layout, side: int) -> GridStore:
    """A right triangle with ``side + 1`` hexes along each edge, corner at the origin."""
    _non_negative("side", side)
    n = side
    if layout.is_pointy_top:
        return _store(
            Hex.from_axial(q, r) for q in range(n + 1) for r in range(n - q + 1)
        )
    return _store(
        Hex.from_axial(q, r) for q in range(n + 1) for r in range(n - q, n + 1)
    )


def hexagon(radius: int, center: Hex = ORIGIN) -> GridStore:
    """Every hex within ``radius`` of ``center``; independent of orientation."""
    _non_negative("radius", radius)
    n = radius
    return _store(
        center.add(Hex.from_axial(q, r))
        for q in range(-n, n + 1)
        for r in range(max(-n, -q - n), min(n, -q + n) + 1)
    )


def ring(center: Hex, radius: int) -> list[Hex]:
    """Hexes at exactly ``radius`` from ``center``, in walk order.

    The walk starts at ``center + direction(4) * radius`` and follows each of
    the six directions for ``radius`` steps.
    """
    _non_negative("radius", radius)
    if radius == 0:
        return [center]
    results: list[Hex] = []
    h = center.add(Hex.direction(4).scale(radius))
    for i in range(6):
        for _ in range(radius):
            results.append(h)
            h = h.neighbor(i)
    return results


def spiral(center: Hex, radius: int) -> list[Hex]:
    """``center`` followed by rings 1..radius."""
    _non_negative("radius", radius)
    results = [center]
    for k in range(1, radius + 1):
        results.extend(ring(center, k))
    return results


def ring_store(center: Hex, radius: int) -> GridStore:
    return _store(ring(center, radius))


def spiral_store(center: Hex, radius: int) -> GridStore:
    return _store(spiral(center, radius))


def rectangle(
    layout: Layout,
    left: int,
    right: int,
    top: int,
    bottom: int,
    center: Hex = ORIGIN,
) -> GridStore:
    """A region that looks rectangular on screen under ``layout``.

    ``>> 1`` floors for negative rows/columns, keeping the edges straight on
    both sides of the origin.
    """
    if layout.is_pointy_top:
        return _store(
            center.add(Hex.from_axial(q, r))
            for r in range(top, bottom + 1)
            for q in range(left - (r >> 1), right - (r >> 1) + 1)
        )
    return _store(
        center.add(Hex.from_axial(q, r))
        for q in range(left, right + 1)
        for r in range(top - (q >> 1), bottom - (q >> 1) + 1)
    )


__all__ = [
    "GridStore",
    "parallelogram",
    "triangle",
    "hexagon",
    "ring",
    "spiral",
    "ring_store",
    "spiral_store",
    "rectangle",
]
