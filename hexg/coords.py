"""Value types for hex-grid positions.

Cube coordinates follow https://www.redblobgames.com/grids/hexagons/:
``q + r + s == 0`` for every discrete hex, and the axial pair ``(q, r)``
carries the same information.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

from .errors import InvalidCoordinate

_MASK32 = (1 << 32) - 1
_MASK64 = (1 << 64) - 1
_GOLDEN = 0x9E3779B97F4A7C15
_MIX1 = 0xBF58476D1CE4E5B9
_MIX2 = 0x94D049BB133111EB


def hex_key(q: int, r: int) -> int:
    """Return a 64-bit key for the axial coordinate ``(q, r)``.

    The 32-bit two's-complement patterns of ``q`` and ``r`` are packed into
    one word and run through the splitmix64 finaliser. Both steps are
    bijections, so keys never collide while ``-2**31 <= q, r < 2**31``.
    """
    z = ((((q & _MASK32) << 32) | (r & _MASK32)) + _GOLDEN) & _MASK64
    z = ((z ^ (z >> 30)) * _MIX1) & _MASK64
    z = ((z ^ (z >> 27)) * _MIX2) & _MASK64
    return z ^ (z >> 31)


@dataclass(frozen=True, slots=True)
class Hex:
    q: int
    r: int
    s: int

    # Counter-clockwise from direction 0. There is no "up" until a layout
    # is chosen.
    DIRECTIONS: ClassVar[tuple[tuple[int, int, int], ...]] = (
        (+1, 0, -1),
        (+1, -1, 0),
        (0, -1, +1),
        (-1, 0, +1),
        (-1, +1, 0),
        (0, +1, -1),
    )
    DIAGONALS: ClassVar[tuple[tuple[int, int, int], ...]] = (
        (+2, -1, -1),
        (+1, -2, +1),
        (-1, -1, +2),
        (-2, +1, +1),
        (-1, +2, -1),
        (+1, +1, -2),
    )

    def __post_init__(self) -> None:
        if self.q + self.r + self.s != 0:
            raise InvalidCoordinate(
                f"cube coordinates must sum to zero, got ({self.q}, {self.r}, {self.s})"
            )

    @classmethod
    def from_axial(cls, q: int, r: int) -> "Hex":
        return cls(q, r, -q - r)

    def __str__(self) -> str:
        return f"{self.q},{self.r},{self.s}"

    def concise(self) -> str:
        """Signed form, e.g. ``+1+0-1``."""
        return f"{self.q:+d}{self.r:+d}{self.s:+d}"

    # --- arithmetic -----------------------------------------------------------

    def add(self, other: "Hex") -> "Hex":
        return Hex(self.q + other.q, self.r + other.r, self.s + other.s)

    def subtract(self, other: "Hex") -> "Hex":
        return Hex(self.q - other.q, self.r - other.r, self.s - other.s)

    def multiply(self, k: int) -> "Hex":
        return Hex(self.q * k, self.r * k, self.s * k)

    scale = multiply

    def __add__(self, other: "Hex") -> "Hex":
        return self.add(other)

    def __sub__(self, other: "Hex") -> "Hex":
        return self.subtract(other)

    def __mul__(self, k: int) -> "Hex":
        return self.multiply(k)

    __rmul__ = __mul__

    # --- distance ---------------------------------------------------------------

    def length(self) -> int:
        return (abs(self.q) + abs(self.r) + abs(self.s)) // 2

    def distance(self, other: "Hex") -> int:
        return self.subtract(other).length()

    # --- neighbours -------------------------------------------------------------

    @classmethod
    def direction(cls, direction: int) -> "Hex":
        """Unit vector for ``direction``; any integer is wrapped into 0..5."""
        return cls(*cls.DIRECTIONS[(6 + direction % 6) % 6])

    @classmethod
    def diagonal(cls, direction: int) -> "Hex":
        return cls(*cls.DIAGONALS[(6 + direction % 6) % 6])

    def neighbor(self, direction: int) -> "Hex":
        return self.add(Hex.direction(direction))

    def diagonal_neighbor(self, direction: int) -> "Hex":
        return self.add(Hex.diagonal(direction))

    # --- rotation and reflection about the origin -------------------------------

    def rotate_left(self) -> "Hex":
        return Hex(-self.s, -self.q, -self.r)

    def rotate_right(self) -> "Hex":
        return Hex(-self.r, -self.s, -self.q)

    def reflect_q(self) -> "Hex":
        return Hex(self.q, self.s, self.r)

    def reflect_r(self) -> "Hex":
        return Hex(self.s, self.r, self.q)

    def reflect_s(self) -> "Hex":
        return Hex(self.r, self.q, self.s)

    # --- storage and conversions ------------------------------------------------

    def key(self) -> int:
        # s is redundant
        return hex_key(self.q, self.r)

    def to_offset(self, scheme: "OffsetScheme") -> "OffsetCoord":
        from .conversions import to_offset

        return to_offset(self, scheme)


@dataclass(frozen=True, slots=True)
class FractionalHex:
    """Continuous cube coordinate used for interpolation before rounding."""

    q: float
    r: float
    s: float

    @classmethod
    def from_axial(cls, q: float, r: float) -> "FractionalHex":
        return cls(q, r, -q - r)

    @classmethod
    def from_hex(cls, h: Hex) -> "FractionalHex":
        return cls(float(h.q), float(h.r), float(h.s))

    def add(self, other: "FractionalHex") -> "FractionalHex":
        return FractionalHex(self.q + other.q, self.r + other.r, self.s + other.s)

    def round(self) -> Hex:
        from .lines import hex_round

        return hex_round(self)


class OffsetScheme(Enum):
    """Which columns (``*_Q``) or rows (``*_R``) are shoved by half a hex."""

    ODD_R = "odd_r"
    EVEN_R = "even_r"
    ODD_Q = "odd_q"
    EVEN_Q = "even_q"

    @classmethod
    def _missing_(cls, value: object) -> "OffsetScheme | None":
        # accept "odd-q", "ODD_Q", "Odd-Q"
        if isinstance(value, str):
            normalised = value.strip().lower().replace("-", "_")
            for member in cls:
                if member.value == normalised:
                    return member
        return None

    @property
    def shifts_columns(self) -> bool:
        return self in (OffsetScheme.ODD_Q, OffsetScheme.EVEN_Q)

    @property
    def sign(self) -> int:
        """+1 for the even schemes, -1 for the odd ones."""
        return +1 if self in (OffsetScheme.EVEN_Q, OffsetScheme.EVEN_R) else -1

    def __str__(self) -> str:
        return self.value.replace("_", "-")


@dataclass(frozen=True, slots=True)
class OffsetCoord:
    col: int  # q-like
    row: int  # r-like

    def __str__(self) -> str:
        return f"{self.col},{self.row}"

    def concise(self) -> str:
        return f"{self.col:+d}{self.row:+d}"

    def to_hex(self, scheme: OffsetScheme) -> Hex:
        from .conversions import from_offset

        return from_offset(self, scheme)


@dataclass(frozen=True, slots=True)
class Point:
    """A screen coordinate."""

    x: float
    y: float

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __str__(self) -> str:
        return f"{self.x:g},{self.y:g}"


ORIGIN = Hex(0, 0, 0)

__all__ = [
    "Hex",
    "FractionalHex",
    "OffsetCoord",
    "OffsetScheme",
    "Point",
    "ORIGIN",
    "hex_key",
]
