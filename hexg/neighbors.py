from __future__ import annotations

from typing import Iterator

from .conversions import from_offset, to_offset
from .coords import Hex, OffsetCoord, OffsetScheme


def neighbors(h: Hex) -> Iterator[Hex]:
    """The six adjacent hexes, in direction order 0..5."""
    for direction in range(6):
        yield h.neighbor(direction)


def diagonal_neighbors(h: Hex) -> Iterator[Hex]:
    for direction in range(6):
        yield h.diagonal_neighbor(direction)


def neighbors_offset(oc: OffsetCoord, scheme: OffsetScheme) -> Iterator[OffsetCoord]:
    # Going through cube coordinates avoids a per-parity delta table.
    for n in neighbors(from_offset(oc, scheme)):
        yield to_offset(n, scheme)


def neighbors_offset_bounded(
    oc: OffsetCoord, scheme: OffsetScheme, width: int, height: int
) -> Iterator[OffsetCoord]:
    for n in neighbors_offset(oc, scheme):
        if 0 <= n.col < width and 0 <= n.row < height:
            yield n


__all__ = [
    "neighbors",
    "diagonal_neighbors",
    "neighbors_offset",
    "neighbors_offset_bounded",
]
