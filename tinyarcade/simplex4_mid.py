"""4D OpenSimplex noise inside the two rectified 4-simplices (dispentachora)."""

from __future__ import annotations

from typing import Sequence

from .simplex import SQUISH_CONSTANT_4D, OpenSimplex

_SQ = SQUISH_CONSTANT_4D
_AXIS_PAIRS = ((0, 1), (0, 2), (0, 3), (1, 2), (1, 3), (2, 3))

_Vertex = tuple[list[int], list[float]]


def _contribution4(generator: OpenSimplex, sv: Sequence[int], d: Sequence[float]) -> float:
    attn = 2 - d[0] * d[0] - d[1] * d[1] - d[2] * d[2] - d[3] * d[3]
    if attn <= 0:
        return 0.0
    attn *= attn
    return attn * attn * generator.extrapolate4(*sv, *d)


def _first_axis(bits: int, want_set: bool) -> int:
    """First of x, y, z whose bit matches want_set; w otherwise."""
    return next((axis for axis in range(3) if bool(bits & (1 << axis)) == want_set), 3)


def _lower_pair(c: int, base: Sequence[int], d0: Sequence[float]) -> tuple[_Vertex, _Vertex]:
    """Two extra vertices: the point c with each zero axis replaced by -1 in turn."""
    lowers_first = (True, (c & 0x01) == 0x01, (c & 0x03) == 0x03, False)
    sv0: list[int] = []
    sv1: list[int] = []
    e0: list[float] = []
    e1: list[float] = []
    for axis in range(4):
        b, d = base[axis], d0[axis]
        if c & (1 << axis):
            v, e = b + 1, d - 1 - _SQ
            sv0.append(v)
            sv1.append(v)
            e0.append(e)
            e1.append(e)
            continue
        plain = d - _SQ
        lowered = d + 1 - _SQ if axis in (0, 3) else plain + 1
        if lowers_first[axis]:
            sv0.append(b - 1)
            e0.append(lowered)
            sv1.append(b)
            e1.append(plain)
        else:
            sv0.append(b)
            e0.append(plain)
            sv1.append(b - 1)
            e1.append(lowered)
    return (sv0, e0), (sv1, e1)


def _upper_pair(c: int, base: Sequence[int], d0: Sequence[float]) -> tuple[_Vertex, _Vertex]:
    """Two extra vertices: the point c with each one axis replaced by 2 in turn."""
    raises_first = (True, (c & 0x01) == 0, (c & 0x03) == 0, False)
    sv0: list[int] = []
    sv1: list[int] = []
    e0: list[float] = []
    e1: list[float] = []
    for axis in range(4):
        b, d = base[axis], d0[axis]
        if not c & (1 << axis):
            e = d - 3 * _SQ
            sv0.append(b)
            sv1.append(b)
            e0.append(e)
            e1.append(e)
            continue
        plain = d - 1 - 3 * _SQ
        raised = d - 2 - 3 * _SQ if axis in (0, 3) else plain - 1
        if raises_first[axis]:
            sv0.append(b + 2)
            e0.append(raised)
            sv1.append(b + 1)
            e1.append(plain)
        else:
            sv0.append(b + 1)
            e0.append(plain)
            sv1.append(b + 2)
            e1.append(raised)
    return (sv0, e0), (sv1, e1)


def _first_region_extras(
    base: Sequence[int], d0: Sequence[float], ins: Sequence[float], in_sum: float
) -> list[_Vertex]:
    xins, yins, zins, wins = ins
    a_big = b_big = True

    if xins + yins > zins + wins:
        a_score, a_point = xins + yins, 0x03
    else:
        a_score, a_point = zins + wins, 0x0C

    if xins + zins > yins + wins:
        b_score, b_point = xins + zins, 0x05
    else:
        b_score, b_point = yins + wins, 0x0A

    if xins + wins > yins + zins:
        score, point = xins + wins, 0x09
    else:
        score, point = yins + zins, 0x06
    if a_score >= b_score and score > b_score:
        b_score, b_point = score, point
    elif a_score < b_score and score > a_score:
        a_score, a_point = score, point

    for p, point in (
        (2 - in_sum + xins, 0x01),
        (2 - in_sum + yins, 0x02),
        (2 - in_sum + zins, 0x04),
        (2 - in_sum + wins, 0x08),
    ):
        if a_score >= b_score and p > b_score:
            b_score, b_point, b_big = p, point, False
        elif a_score < b_score and p > a_score:
            a_score, a_point, a_big = p, point, False

    def permuted_two(c2: int) -> _Vertex:
        sv = list(base)
        e = [d - 2 * _SQ for d in d0]
        axis = _first_axis(c2, True)
        sv[axis] += 2
        e[axis] -= 2
        return sv, e

    if a_big == b_big:
        if a_big:
            c1 = a_point | b_point
            c2 = a_point & b_point
            sv0: list[int] = []
            sv1: list[int] = []
            e0: list[float] = []
            e1: list[float] = []
            for axis in range(4):
                b, d = base[axis], d0[axis]
                if c1 & (1 << axis):
                    sv0.append(b + 1)
                    sv1.append(b + 1)
                    e0.append(d - 1 - 3 * _SQ)
                    e1.append(d - 1 - 2 * _SQ)
                else:
                    sv0.append(b)
                    sv1.append(b - 1)
                    e0.append(d - 3 * _SQ)
                    e1.append(d + 1 - 2 * _SQ)
            return [(sv0, e0), (sv1, e1), permuted_two(c2)]
        ext0, ext1 = _lower_pair(a_point | b_point, base, d0)
        return [ext0, ext1, (list(base), list(d0))]

    c1, c2 = (a_point, b_point) if a_big else (b_point, a_point)
    ext0, ext1 = _lower_pair(c1, base, d0)
    return [ext0, ext1, permuted_two(c2)]


def _second_region_extras(
    base: Sequence[int], d0: Sequence[float], ins: Sequence[float], in_sum: float
) -> list[_Vertex]:
    xins, yins, zins, wins = ins
    a_big = b_big = True

    if xins + yins < zins + wins:
        a_score, a_point = xins + yins, 0x0C
    else:
        a_score, a_point = zins + wins, 0x03

    if xins + zins < yins + wins:
        b_score, b_point = xins + zins, 0x0A
    else:
        b_score, b_point = yins + wins, 0x05

    if xins + wins < yins + zins:
        score, point = xins + wins, 0x06
    else:
        score, point = yins + zins, 0x09
    if a_score <= b_score and score < b_score:
        b_score, b_point = score, point
    elif a_score > b_score and score < a_score:
        a_score, a_point = score, point

    for p, point in (
        (3 - in_sum + xins, 0x0E),
        (3 - in_sum + yins, 0x0D),
        (3 - in_sum + zins, 0x0B),
        (3 - in_sum + wins, 0x07),
    ):
        if a_score <= b_score and p < b_score:
            b_score, b_point, b_big = p, point, False
        elif a_score > b_score and p < a_score:
            a_score, a_point, a_big = p, point, False

    def permuted_minus_one(c2: int) -> _Vertex:
        sv = [b + 1 for b in base]
        e = [d - 1 - 2 * _SQ for d in d0]
        axis = _first_axis(c2, False)
        sv[axis] -= 2
        e[axis] += 2
        return sv, e

    if a_big == b_big:
        if a_big:
            c1 = a_point & b_point
            c2 = a_point | b_point
            sv0 = list(base)
            sv1 = list(base)
            e0 = [d - _SQ for d in d0]
            e1 = [d - 2 * _SQ for d in d0]
            axis = _first_axis(c1, True)
            sv0[axis] += 1
            e0[axis] -= 1
            sv1[axis] += 2
            e1[axis] -= 2
            return [(sv0, e0), (sv1, e1), permuted_minus_one(c2)]
        ext0, ext1 = _upper_pair(a_point & b_point, base, d0)
        corner = ([b + 1 for b in base], [d - 1 - 4 * _SQ for d in d0])
        return [ext0, ext1, corner]

    c1, c2 = (a_point, b_point) if a_big else (b_point, a_point)
    ext0, ext1 = _upper_pair(c1, base, d0)
    return [ext0, ext1, permuted_minus_one(c2)]


def rectified_contributions(
    generator: OpenSimplex,
    xsb: int,
    ysb: int,
    zsb: int,
    wsb: int,
    xins: float,
    yins: float,
    zins: float,
    wins: float,
    dx0: float,
    dy0: float,
    dz0: float,
    dw0: float,
) -> float:
    """Unnormalised noise sum for a point whose in-cell coordinates sum to between 1 and 3.

    Raises ValueError when the coordinate sum lies outside that open interval.
    """
    in_sum = xins + yins + zins + wins
    if not 1 < in_sum < 3:
        raise ValueError(f"in-cell coordinate sum {in_sum} is not between 1 and 3")

    base = (xsb, ysb, zsb, wsb)
    ins = (xins, yins, zins, wins)
    d0 = (dx0, dy0, dz0, dw0)

    value = 0.0
    if in_sum <= 2:
        extras = _first_region_extras(base, d0, ins, in_sum)
        for axis in range(4):
            sv = [b + 1 if i == axis else b for i, b in enumerate(base)]
            d = [dd - 1 - _SQ if i == axis else dd - _SQ for i, dd in enumerate(d0)]
            value += _contribution4(generator, sv, d)
    else:
        extras = _second_region_extras(base, d0, ins, in_sum)
        for axis in (3, 2, 1, 0):
            sv = [b if i == axis else b + 1 for i, b in enumerate(base)]
            d = [dd - 3 * _SQ if i == axis else dd - 1 - 3 * _SQ for i, dd in enumerate(d0)]
            value += _contribution4(generator, sv, d)

    for pair in _AXIS_PAIRS:
        sv = [b + 1 if i in pair else b for i, b in enumerate(base)]
        d = [dd - 1 - 2 * _SQ if i in pair else dd - 0 - 2 * _SQ for i, dd in enumerate(d0)]
        value += _contribution4(generator, sv, d)

    for sv, d in extras:
        value += _contribution4(generator, sv, d)

    return value