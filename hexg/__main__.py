"""Command line demo: neighbours, corners and TribeNet conversions."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Sequence

from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from . import __version__
from .config import LayoutSettings
from .coords import ORIGIN, Hex
from .errors import HexgError, OutOfRange
from .tribenet import TRIBENET_LAYOUT, hex_to_tribenet, parse_tribenet, tribenet_bearing

log = logging.getLogger("hexg")

EXIT_OK = 0
EXIT_INVALID = 2


def _configure_logging(verbose: bool) -> None:
    # repeated calls only change the level; root logger handlers are left alone
    if not any(isinstance(handler, RichHandler) for handler in log.handlers):
        log.addHandler(RichHandler(show_time=False, show_path=False))
    log.setLevel(logging.DEBUG if verbose else logging.WARNING)


def _coordinate(value: float) -> str:
    # drop float noise such as 1.22465e-16 and the sign of -0.0
    return f"{round(value, 9) + 0.0:g}"


def _neighbors(args: argparse.Namespace, console: Console) -> int:
    if args.tribenet:
        oc = parse_tribenet(args.tribenet)
        center = TRIBENET_LAYOUT.from_offset(oc)
        title = f"Neighbors of {args.tribenet} ({center.concise()})"
    else:
        center = Hex(*args.hex) if args.hex else ORIGIN
        title = f"Neighbors of {center.concise()}"

    console.print(title)
    table = Table()
    table.add_column("Direction", justify="right")
    table.add_column("Bearing")
    table.add_column("Hex")
    if args.tribenet:
        table.add_column("TribeNet")
    for direction in range(6):
        n = center.neighbor(direction)
        if args.tribenet:
            try:
                label = hex_to_tribenet(n)
            except OutOfRange:
                label = "off map"
            table.add_row(str(direction), tribenet_bearing(direction), n.concise(), label)
        else:
            table.add_row(str(direction), TRIBENET_LAYOUT.direction_to_bearing(direction), n.concise())
    console.print(table)
    return EXIT_OK


def _corners(args: argparse.Namespace, console: Console) -> int:
    settings = LayoutSettings.load(args.config)
    layout = settings.to_layout()
    center = Hex(*args.hex) if args.hex else ORIGIN

    console.print(f"Corners of {center.concise()} ({settings.orientation.value}-top, {settings.offset_mode})")
    table = Table()
    table.add_column("Corner", justify="right")
    table.add_column("X", justify="right")
    table.add_column("Y", justify="right")
    for corner, point in enumerate(layout.polygon_corners(center)):
        table.add_row(str(corner), _coordinate(point.x), _coordinate(point.y))
    console.print(table)
    return EXIT_OK


def _tribenet(args: argparse.Namespace, console: Console) -> int:
    table = Table(title="TribeNet coordinates")
    table.add_column("TribeNet")
    table.add_column("Offset")
    table.add_column("Hex")
    for text in args.coords:
        oc = parse_tribenet(text)
        table.add_row(text, str(oc), TRIBENET_LAYOUT.from_offset(oc).concise())
    console.print(table)
    return EXIT_OK


def _version(args: argparse.Namespace, console: Console) -> int:
    console.print(f"hexg: version {__version__}")
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="hexg", description=__doc__)
    ap.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = ap.add_subparsers(dest="command", required=True)

    neighbors = sub.add_parser("neighbors", help="List the six neighbours of a hex")
    where = neighbors.add_mutually_exclusive_group()
    where.add_argument("--tribenet", metavar="COORD", help='TribeNet coordinate, e.g. "AB 0102"')
    where.add_argument("--hex", nargs=3, type=int, metavar=("Q", "R", "S"), help="Cube coordinates")
    neighbors.set_defaults(handler=_neighbors)

    corners = sub.add_parser("corners", help="Pixel corners of a hex under the configured layout")
    corners.add_argument("--config", type=Path, default=None, help="Layout settings (JSON)")
    corners.add_argument("--hex", nargs=3, type=int, metavar=("Q", "R", "S"), help="Cube coordinates")
    corners.set_defaults(handler=_corners)

    tribenet = sub.add_parser("tribenet", help="Convert TribeNet coordinates")
    tribenet.add_argument("coords", nargs="+", metavar="COORD")
    tribenet.set_defaults(handler=_tribenet)

    version = sub.add_parser("version", help="Print the version number")
    version.set_defaults(handler=_version)
    return ap


def main(argv: Sequence[str] | None = None, console: Console | None = None) -> int:
    args = build_parser().parse_args(argv)
    _configure_logging(args.verbose)
    console = console or Console()
    try:
        return args.handler(args, console)
    except (HexgError, ValidationError) as exc:
        log.error("%s", exc)
        return EXIT_INVALID


if __name__ == "__main__":  # pragma: no cover - module entry point
    raise SystemExit(main())
