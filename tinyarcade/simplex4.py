"""4D OpenSimplex noise on a simplectic honeycomb."""

from __future__ import annotations

from .simplex import (
    NORM_CONSTANT_4D,
    SQUISH_CONSTANT_4D,
    STRETCH_CONSTANT_4D,
    OpenSimplex,
    fast_floor,
)
from .simplex4_mid import rectified_contributions


def _contribution4(
    generator: OpenSimplex,
    xsv: int,
    ysv: int,
    zsv: int,
    wsv: int,
    dx: float,
    dy: float,
    dz: float,
    dw: float,
) -> float:
    attn = 2 - dx * dx - dy * dy - dz * dz - dw * dw
    if attn <= 0:
        return 0.0
    attn *= attn
    return attn * attn * generator.extrapolate4(xsv, ysv, zsv, wsv, dx, dy, dz, dw)


def _lower_simplex(
    generator: OpenSimplex,
    xsb: int, ysb: int, zsb: int, wsb: int,
    xins: float, yins: float, zins: float, wins: float,
    in_sum: float,
    dx0: float, dy0: float, dz0: float, dw0: float,
) -> float:
    """Sum for the pentachoron at (0,0,0,0)."""
    sq = SQUISH_CONSTANT_4D

    a_point, a_score = 0x01, xins
    b_point, b_score = 0x02, yins
    if a_score >= b_score and zins > b_score:
        b_score, b_point = zins, 0x04
    elif a_score < b_score and zins > a_score:
        a_score, a_point = zins, 0x04
    if a_score >= b_score and wins > b_score:
        b_score, b_point = wins, 0x08
    elif a_score < b_score and wins > a_score:
        a_score, a_point = wins, 0x08

    uins = 1 - in_sum
    if uins > a_score or uins > b_score:
        c = b_point if b_score > a_score else a_point

        if c & 0x01 == 0:
            xsv0, xsv1, xsv2 = xsb - 1, xsb, xsb
            dxe0, dxe1, dxe2 = dx0 + 1, dx0, dx0
        else:
            xsv0 = xsv1 = xsv2 = xsb + 1
            dxe0 = dxe1 = dxe2 = dx0 - 1

        if c & 0x02 == 0:
            ysv0 = ysv1 = ysv2 = ysb
            dye0 = dye1 = dye2 = dy0
            if c & 0x01 == 0x01:
                ysv0 -= 1
                dye0 += 1
            else:
                ysv1 -= 1
                dye1 += 1
        else:
            ysv0 = ysv1 = ysv2 = ysb + 1
            dye0 = dye1 = dye2 = dy0 - 1

        if c & 0x04 == 0:
            zsv0 = zsv1 = zsv2 = zsb
            dze0 = dze1 = dze2 = dz0
            if c & 0x03 != 0:
                if c & 0x03 == 0x03:
                    zsv0 -= 1
                    dze0 += 1
                else:
                    zsv1 -= 1
                    dze1 += 1
            else:
                zsv2 -= 1
                dze2 += 1
        else:
            zsv0 = zsv1 = zsv2 = zsb + 1
            dze0 = dze1 = dze2 = dz0 - 1

        if c & 0x08 == 0:
            wsv0, wsv1, wsv2 = wsb, wsb, wsb - 1
            dwe0, dwe1, dwe2 = dw0, dw0, dw0 + 1
        else:
            wsv0 = wsv1 = wsv2 = wsb + 1
            dwe0 = dwe1 = dwe2 = dw0 - 1
    else:
        c = a_point | b_point

        if c & 0x01 == 0:
            xsv0, xsv1, xsv2 = xsb, xsb - 1, xsb
            dxe0 = dx0 - 2 * sq
            dxe1 = dx0 + 1 - sq
            dxe2 = dx0 - sq
        else:
            xsv0 = xsv1 = xsv2 = xsb + 1
            dxe0 = dx0 - 1 - 2 * sq
            dxe1 = dxe2 = dx0 - 1 - sq

        if c & 0x02 == 0:
            ysv0 = ysv1 = ysv2 = ysb
            dye0 = dy0 - 2 * sq
            dye1 = dye2 = dy0 - sq
            if c & 0x01 == 0x01:
                ysv1 -= 1
                dye1 += 1
            else:
                ysv2 -= 1
                dye2 += 1
        else:
            ysv0 = ysv1 = ysv2 = ysb + 1
            dye0 = dy0 - 1 - 2 * sq
            dye1 = dye2 = dy0 - 1 - sq

        if c & 0x04 == 0:
            zsv0 = zsv1 = zsv2 = zsb
            dze0 = dz0 - 2 * sq
            dze1 = dze2 = dz0 - sq
            if c & 0x03 == 0x03:
                zsv1 -= 1
                dze1 += 1
            else:
                zsv2 -= 1
                dze2 += 1
        else:
            zsv0 = zsv1 = zsv2 = zsb + 1
            dze0 = dz0 - 1 - 2 * sq
            dze1 = dze2 = dz0 - 1 - sq

        if c & 0x08 == 0:
            wsv0, wsv1, wsv2 = wsb, wsb, wsb - 1
            dwe0 = dw0 - 2 * sq
            dwe1 = dw0 - sq
            dwe2 = dw0 + 1 - sq
        else:
            wsv0 = wsv1 = wsv2 = wsb + 1
            dwe0 = dw0 - 1 - 2 * sq
            dwe1 = dwe2 = dw0 - 1 - sq

    value = 0.0
    value += _contribution4(generator, xsb, ysb, zsb, wsb, dx0, dy0, dz0, dw0)

    dx1 = dx0 - 1 - sq
    dy1 = dy0 - 0 - sq
    dz1 = dz0 - 0 - sq
    dw1 = dw0 - 0 - sq
    value += _contribution4(generator, xsb + 1, ysb, zsb, wsb, dx1, dy1, dz1, dw1)

    dx2 = dx0 - 0 - sq
    dy2 = dy0 - 1 - sq
    value += _contribution4(generator, xsb, ysb + 1, zsb, wsb, dx2, dy2, dz1, dw1)

    dz3 = dz0 - 1 - sq
    value += _contribution4(generator, xsb, ysb, zsb + 1, wsb, dx2, dy1, dz3, dw1)

    dw4 = dw0 - 1 - sq
    value += _contribution4(generator, xsb, ysb, zsb, wsb + 1, dx2, dy1, dz1, dw4)

    value += _contribution4(generator, xsv0, ysv0, zsv0, wsv0, dxe0, dye0, dze0, dwe0)
    value += _contribution4(generator, xsv1, ysv1, zsv1, wsv1, dxe1, dye1, dze1, dwe1)
    value += _contribution4(generator, xsv2, ysv2, zsv2, wsv2, dxe2, dye2, dze2, dwe2)
    return value


def _upper_simplex(
    generator: OpenSimplex,
    xsb: int, ysb: int, zsb: int, wsb: int,
    xins: float, yins: float, zins: float, wins: float,
    in_sum: float,
    dx0: float, dy0: float, dz0: float, dw0: float,
) -> float:
    """Sum for the pentachoron at (1,1,1,1)."""
    sq = SQUISH_CONSTANT_4D

    a_point, a_score = 0x0E, xins
    b_point, b_score = 0x0D, yins
    if a_score <= b_score and zins < b_score:
        b_score, b_point = zins, 0x0B
    elif a_score > b_score and zins < a_score:
        a_score, a_point = zins, 0x0B
    if a_score <= b_score and wins < b_score:
        b_score, b_point = wins, 0x07
    elif a_score > b_score and wins < a_score:
        a_score, a_point = wins, 0x07

    uins = 4 - in_sum
    if uins < a_score or uins < b_score:
        c = b_point if b_score < a_score else a_point

        if c & 0x01 != 0:
            xsv0, xsv1, xsv2 = xsb + 2, xsb + 1, xsb + 1
            dxe0 = dx0 - 2 - 4 * sq
            dxe1 = dxe2 = dx0 - 1 - 4 * sq
        else:
            xsv0 = xsv1 = xsv2 = xsb
            dxe0 = dxe1 = dxe2 = dx0 - 4 * sq

        if c & 0x02 != 0:
            ysv0 = ysv1 = ysv2 = ysb + 1
            dye0 = dye1 = dye2 = dy0 - 1 - 4 * sq
            if c & 0x01 != 0:
                ysv1 += 1
                dye1 -= 1
            else:
                ysv0 += 1
                dye0 -= 1
        else:
            ysv0 = ysv1 = ysv2 = ysb
            dye0 = dye1 = dye2 = dy0 - 4 * sq

        if c & 0x04 != 0:
            zsv0 = zsv1 = zsv2 = zsb + 1
            dze0 = dze1 = dze2 = dz0 - 1 - 4 * sq
            if c & 0x03 != 0x03:
                if c & 0x03 == 0:
                    zsv0 += 1
                    dze0 -= 1
                else:
                    zsv1 += 1
                    dze1 -= 1
            else:
                zsv2 += 1
                dze2 -= 1
        else:
            zsv0 = zsv1 = zsv2 = zsb
            dze0 = dze1 = dze2 = dz0 - 4 * sq

        if c & 0x08 != 0:
            wsv0, wsv1, wsv2 = wsb + 1, wsb + 1, wsb + 2
            dwe0 = dwe1 = dw0 - 1 - 4 * sq
            dwe2 = dw0 - 2 - 4 * sq
        else:
            wsv0 = wsv1 = wsv2 = wsb
            dwe0 = dwe1 = dwe2 = dw0 - 4 * sq
    else:
        c = a_point & b_point

        if c & 0x01 != 0:
            xsv0, xsv1, xsv2 = xsb + 1, xsb + 2, xsb + 1
            dxe0 = dx0 - 1 - 2 * sq
            dxe1 = dx0 - 2 - 3 * sq
            dxe2 = dx0 - 1 - 3 * sq
        else:
            xsv0 = xsv1 = xsv2 = xsb
            dxe0 = dx0 - 2 * sq
            dxe1 = dxe2 = dx0 - 3 * sq

        if c & 0x02 != 0:
            ysv0 = ysv1 = ysv2 = ysb + 1
            dye0 = dy0 - 1 - 2 * sq
            dye1 = dye2 = dy0 - 1 - 3 * sq
            if c & 0x01 != 0:
                ysv2 += 1
                dye2 -= 1
            else:
                ysv1 += 1
                dye1 -= 1
        else:
            ysv0 = ysv1 = ysv2 = ysb
            dye0 = dy0 - 2 * sq
            dye1 = dye2 = dy0 - 3 * sq

        if c & 0x04 != 0:
            zsv0 = zsv1 = zsv2 = zsb + 1
            dze0 = dz0 - 1 - 2 * sq
            dze1 = dze2 = dz0 - 1 - 3 * sq
            if c & 0x03 != 0:
                zsv2 += 1
                dze2 -= 1
            else:
                zsv1 += 1
                dze1 -= 1
        else:
            zsv0 = zsv1 = zsv2 = zsb
            dze0 = dz0 - 2 * sq
            dze1 = dze2 = dz0 - 3 * sq

        if c & 0x08 != 0:
            wsv0, wsv1, wsv2 = wsb + 1, wsb + 1, wsb + 2
            dwe0 = dw0 - 1 - 2 * sq
            dwe1 = dw0 - 1 - 3 * sq
            dwe2 = dw0 - 2 - 3 * sq
        else:
            wsv0 = wsv1 = wsv2 = wsb
            dwe0 = dw0 - 2 * sq
            dwe1 = dwe2 = dw0 - 3 * sq

    value = 0.0

    dx4 = dx0 - 1 - 3 * sq
    dy4 = dy0 - 1 - 3 * sq
    dz4 = dz0 - 1 - 3 * sq
    dw4 = dw0 - 3 * sq
    value += _contribution4(generator, xsb + 1, ysb + 1, zsb + 1, wsb, dx4, dy4, dz4, dw4)

    dz3 = dz0 - 3 * sq
    dw3 = dw0 - 1 - 3 * sq
    value += _contribution4(generator, xsb + 1, ysb + 1, zsb, wsb + 1, dx4, dy4, dz3, dw3)

    dy2 = dy0 - 3 * sq
    value += _contribution4(generator, xsb + 1, ysb, zsb + 1, wsb + 1, dx4, dy2, dz4, dw3)

    dx1 = dx0 - 3 * sq
    value += _contribution4(generator, xsb, ysb + 1, zsb + 1, wsb + 1, dx1, dy4, dz4, dw3)

    dxc = dx0 - 1 - 4 * sq
    dyc = dy0 - 1 - 4 * sq
    dzc = dz0 - 1 - 4 * sq
    dwc = dw0 - 1 - 4 * sq
    value += _contribution4(
        generator, xsb + 1, ysb + 1, zsb + 1, wsb + 1, dxc, dyc, dzc, dwc
    )

    value += _contribution4(generator, xsv0, ysv0, zsv0, wsv0, dxe0, dye0, dze0, dwe0)
    value += _contribution4(generator, xsv1, ysv1, zsv1, wsv1, dxe1, dye1, dze1, dwe1)
    value += _contribution4(generator, xsv2, ysv2, zsv2, wsv2, dxe2, dye2, dze2, dwe2)
    return value


def noise4(generator: OpenSimplex, x: float, y: float, z: float, w: float) -> float:
    """4D OpenSimplex noise of generator at (x, y, z, w)."""
    stretch_offset = (x + y + z + w) * STRETCH_CONSTANT_4D
    xs = x + stretch_offset
    ys = y + stretch_offset
    zs = z + stretch_offset
    ws = w + stretch_offset

    xsb = fast_floor(xs)
    ysb = fast_floor(ys)
    zsb = fast_floor(zs)
    wsb = fast_floor(ws)

    squish_offset = (xsb + ysb + zsb + wsb) * SQUISH_CONSTANT_4D
    xb = xsb + squish_offset
    yb = ysb + squish_offset
    zb = zsb + squish_offset
    wb = wsb + squish_offset

    xins = xs - xsb
    yins = ys - ysb
    zins = zs - zsb
    wins = ws - wsb
    in_sum = xins + yins + zins + wins

    dx0 = x - xb
    dy0 = y - yb
    dz0 = z - zb
    dw0 = w - wb

    if in_sum <= 1:
        value = _lower_simplex(
            generator, xsb, ysb, zsb, wsb, xins, yins, zins, wins, in_sum,
            dx0, dy0, dz0, dw0,
        )
    elif in_sum >= 3:
        value = _upper_simplex(
            generator, xsb, ysb, zsb, wsb, xins, yins, zins, wins, in_sum,
            dx0, dy0, dz0, dw0,
        )
    else:
        value = rectified_contributions(
            generator, xsb, ysb, zsb, wsb, xins, yins, zins, wins,
            dx0, dy0, dz0, dw0,
        )

    return value / NORM_CONSTANT_4D