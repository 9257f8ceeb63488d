from __future__ import annotations

import itertools

import pytest

from hexg import FractionalHex, Hex, hex_lerp, hex_round, lerp, linedraw
from hexg.lines import NUDGE, round_half_away


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (0.49, 0),
        (0.5, 1),
        (1.5, 2),
        (2.5, 3),
        (-0.5, -1),
        (-2.5, -3),
        (-0.49, 0),
        (3.0, 3),
    ],
)
def test_round_half_away_from_zero(value, expected):
    assert round_half_away(value) == expected


def test_lerp():
    assert lerp(0.0, 10.0, 0.25) == pytest.approx(2.5)
    assert lerp(4.0, -4.0, 1.0) == -4.0
    assert lerp(4.0, -4.0, 0.0) == 4.0


def test_hex_lerp_accepts_hex_and_fractional_operands():
    f = hex_lerp(Hex(0, 0, 0), FractionalHex(2.0, -4.0, 2.0), 0.5)
    assert (f.q, f.r, f.s) == pytest.approx((1.0, -2.0, 1.0))


def test_hex_round():
    a = Hex(0, 0, 0)
    b = Hex(1, -1, 0)
    c = Hex(0, -1, 1)
    assert hex_round(hex_lerp(Hex(0, 0, 0), Hex(10, -20, 10), 0.5)) == Hex(5, -10, 5)
    assert hex_round(hex_lerp(a, b, 0.499)) == a
    assert hex_round(hex_lerp(a, b, 0.501)) == b
    mixed_a = FractionalHex(
        a.q * 0.4 + b.q * 0.3 + c.q * 0.3,
        a.r * 0.4 + b.r * 0.3 + c.r * 0.3,
        a.s * 0.4 + b.s * 0.3 + c.s * 0.3,
    )
    mixed_c = FractionalHex(
        a.q * 0.3 + b.q * 0.3 + c.q * 0.4,
        a.r * 0.3 + b.r * 0.3 + c.r * 0.4,
        a.s * 0.3 + b.s * 0.3 + c.s * 0.4,
    )
    assert hex_round(mixed_a) == a
    assert mixed_c.round() == c


def test_hex_round_tie_recomputes_r_before_s():
    # q and r errors tie at 0.5, so r is rebuilt from q and s
    assert hex_round(FractionalHex(0.5, -0.5, 0.0)) == Hex(1, -1, 0)


def test_linedraw_single_hex():
    h = Hex(3, -1, -2)
    assert linedraw(h, h) == [h]
    assert linedraw(h, h, with_nudge=True) == [h]


def test_linedraw_matches_reference_line():
    expected = [
        Hex(0, 0, 0),
        Hex(0, -1, 1),
        Hex(0, -2, 2),
        Hex(1, -3, 2),
        Hex(1, -4, 3),
        Hex(1, -5, 4),
    ]
    assert linedraw(Hex(0, 0, 0), Hex(1, -5, 4), with_nudge=True) == expected
    assert linedraw(Hex(0, 0, 0), Hex(1, -5, 4)) == expected


def test_nudge_breaks_edge_ties_consistently():
    a, b = Hex(0, 0, 0), Hex(2, -1, -1)
    assert linedraw(a, b) == [a, Hex(1, -1, 0), b]
    assert linedraw(a, b, with_nudge=True) == [a, Hex(1, 0, -1), b]
    assert NUDGE.q + NUDGE.r + NUDGE.s == pytest.approx(0.0, abs=1e-12)


def test_linedraw_is_a_connected_path():
    targets = [Hex.from_axial(q, r) for q, r in itertools.product(range(-5, 6), repeat=2)]
    for start in (Hex(0, 0, 0), Hex(-2, 3, -1)):
        for end in targets:
            line = linedraw(start, end)
            assert len(line) == start.distance(end) + 1
            assert line[0] == start and line[-1] == end
            for here, there in zip(line, line[1:]):
                assert here.distance(there) == 1


@pytest.mark.parametrize("end", [Hex(4, -4, 0), Hex(-3, 5, -2), Hex(7, -2, -5), Hex(0, -6, 6)])
def test_nudged_linedraw_keeps_endpoints_and_length(end):
    start = Hex(1, 1, -2)
    line = linedraw(start, end, with_nudge=True)
    assert len(line) == start.distance(end) + 1
    assert line[0] == start
    assert line[-1] == end
