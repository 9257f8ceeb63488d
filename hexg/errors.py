"""Exceptions raised by hexg.

Every error subclasses :class:`ValueError` so callers that already guard
coordinate input with ``except ValueError`` keep working.
"""

from __future__ import annotations


class HexgError(Exception):
    """Base class for all hexg errors."""


class InvalidCoordinate(HexgError, ValueError):
    """Cube coordinates that do not satisfy ``q + r + s == 0``."""


class InvalidArgument(HexgError, ValueError):
    """A parameter outside the domain of an operation (e.g. a negative radius)."""


class TribeNetError(HexgError, ValueError):
    """Base class for malformed or out-of-range TribeNet coordinates."""


class FormatError(TribeNetError):
    """The text is not shaped like ``"AB 0102"``."""


class InvalidGridLetter(TribeNetError):
    """A sub-map letter is not an uppercase ``A``-``Z``."""


class InvalidSubCoordinate(TribeNetError):
    """A sub-map column or row is not a number in range."""


class OutOfRange(TribeNetError):
    """An offset coordinate falls outside the 26x26 sub-map grid."""


__all__ = [
    "HexgError",
    "InvalidCoordinate",
    "InvalidArgument",
    "TribeNetError",
    "FormatError",
    "InvalidGridLetter",
    "InvalidSubCoordinate",
    "OutOfRange",
]
