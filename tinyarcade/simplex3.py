"""3D OpenSimplex noise on a simplectic honeycomb."""

from __future__ import annotations

from .simplex import (
    NORM_CONSTANT_3D,
    SQUISH_CONSTANT_3D,
    STRETCH_CONSTANT_3D,
    OpenSimplex,
    fast_floor,
)


def _contribution3(
    generator: OpenSimplex,
    xsv: int,
    ysv: int,
    zsv: int,
    dx: float,
    dy: float,
    dz: float,
) -> float:
    attn = 2 - dx * dx - dy * dy - dz * dz
    if attn <= 0:
        return 0.0
    attn *= attn
    return attn * attn * generator.extrapolate3(xsv, ysv, zsv, dx, dy, dz)


def noise3(generator: OpenSimplex, x: float, y: float, z: float) -> float:
    """3D OpenSimplex noise of generator at (x, y, z)."""
    sq = SQUISH_CONSTANT_3D

    stretch_offset = (x + y + z) * STRETCH_CONSTANT_3D
    xs = x + stretch_offset
    ys = y + stretch_offset
    zs = z + stretch_offset

    xsb = fast_floor(xs)
    ysb = fast_floor(ys)
    zsb = fast_floor(zs)

    squish_offset = (xsb + ysb + zsb) * sq
    xb = xsb + squish_offset
    yb = ysb + squish_offset
    zb = zsb + squish_offset

    xins = xs - xsb
    yins = ys - ysb
    zins = zs - zsb
    in_sum = xins + yins + zins

    dx0 = x - xb
    dy0 = y - yb
    dz0 = z - zb

    value = 0.0

    if in_sum <= 1:
        # Inside the tetrahedron at (0,0,0).
        a_point, a_score = 0x01, xins
        b_point, b_score = 0x02, yins
        if a_score >= b_score and zins > b_score:
            b_score, b_point = zins, 0x04
        elif a_score < b_score and zins > a_score:
            a_score, a_point = zins, 0x04

        wins = 1 - in_sum
        if wins > a_score or wins > b_score:
            c = b_point if b_score > a_score else a_point

            if c & 0x01 == 0:
                xsv_ext0, xsv_ext1 = xsb - 1, xsb
                dx_ext0, dx_ext1 = dx0 + 1, dx0
            else:
                xsv_ext0 = xsv_ext1 = xsb + 1
                dx_ext0 = dx_ext1 = dx0 - 1

            if c & 0x02 == 0:
                ysv_ext0 = ysv_ext1 = ysb
                dy_ext0 = dy_ext1 = dy0
                if c & 0x01 == 0:
                    ysv_ext1 -= 1
                    dy_ext1 += 1
                else:
                    ysv_ext0 -= 1
                    dy_ext0 += 1
            else:
                ysv_ext0 = ysv_ext1 = ysb + 1
                dy_ext0 = dy_ext1 = dy0 - 1

            if c & 0x04 == 0:
                zsv_ext0, zsv_ext1 = zsb, zsb - 1
                dz_ext0, dz_ext1 = dz0, dz0 + 1
            else:
                zsv_ext0 = zsv_ext1 = zsb + 1
                dz_ext0 = dz_ext1 = dz0 - 1
        else:
            c = a_point | b_point

            if c & 0x01 == 0:
                xsv_ext0, xsv_ext1 = xsb, xsb - 1
                dx_ext0 = dx0 - 2 * sq
                dx_ext1 = dx0 + 1 - sq
            else:
                xsv_ext0 = xsv_ext1 = xsb + 1
                dx_ext0 = dx0 - 1 - 2 * sq
                dx_ext1 = dx0 - 1 - sq

            if c & 0x02 == 0:
                ysv_ext0, ysv_ext1 = ysb, ysb - 1
                dy_ext0 = dy0 - 2 * sq
                dy_ext1 = dy0 + 1 - sq
            else:
                ysv_ext0 = ysv_ext1 = ysb + 1
                dy_ext0 = dy0 - 1 - 2 * sq
                dy_ext1 = dy0 - 1 - sq

            if c & 0x04 == 0:
                zsv_ext0, zsv_ext1 = zsb, zsb - 1
                dz_ext0 = dz0 - 2 * sq
                dz_ext1 = dz0 + 1 - sq
            else:
                zsv_ext0 = zsv_ext1 = zsb + 1
                dz_ext0 = dz0 - 1 - 2 * sq
                dz_ext1 = dz0 - 1 - sq

        value += _contribution3(generator, xsb, ysb, zsb, dx0, dy0, dz0)

        dx1 = dx0 - 1 - sq
        dy1 = dy0 - 0 - sq
        dz1 = dz0 - 0 - sq
        value += _contribution3(generator, xsb + 1, ysb, zsb, dx1, dy1, dz1)

        dx2 = dx0 - 0 - sq
        dy2 = dy0 - 1 - sq
        dz2 = dz1
        value += _contribution3(generator, xsb, ysb + 1, zsb, dx2, dy2, dz2)

        dx3 = dx2
        dy3 = dy1
        dz3 = dz0 - 1 - sq
        value += _contribution3(generator, xsb, ysb, zsb + 1, dx3, dy3, dz3)

    elif in_sum >= 2:
        # Inside the tetrahedron at (1,1,1).
        a_point, a_score = 0x06, xins
        b_point, b_score = 0x05, yins
        if a_score <= b_score and zins < b_score:
            b_score, b_point = zins, 0x03
        elif a_score > b_score and zins < a_score:
            a_score, a_point = zins, 0x03

        wins = 3 - in_sum
        if wins < a_score or wins < b_score:
            c = b_point if b_score < a_score else a_point

            if c & 0x01 != 0:
                xsv_ext0, xsv_ext1 = xsb + 2, xsb + 1
                dx_ext0 = dx0 - 2 - 3 * sq
                dx_ext1 = dx0 - 1 - 3 * sq
            else:
                xsv_ext0 = xsv_ext1 = xsb
                dx_ext0 = dx_ext1 = dx0 - 3 * sq

            if c & 0x02 != 0:
                ysv_ext0 = ysv_ext1 = ysb + 1
                dy_ext0 = dy_ext1 = dy0 - 1 - 3 * sq
                if c & 0x01 != 0:
                    ysv_ext1 += 1
                    dy_ext1 -= 1
                else:
                    ysv_ext0 += 1
                    dy_ext0 -= 1
            else:
                ysv_ext0 = ysv_ext1 = ysb
                dy_ext0 = dy_ext1 = dy0 - 3 * sq

            if c & 0x04 != 0:
                zsv_ext0, zsv_ext1 = zsb + 1, zsb + 2
                dz_ext0 = dz0 - 1 - 3 * sq
                dz_ext1 = dz0 - 2 - 3 * sq
            else:
                zsv_ext0 = zsv_ext1 = zsb
                dz_ext0 = dz_ext1 = dz0 - 3 * sq
        else:
            c = a_point & b_point

            if c & 0x01 != 0:
                xsv_ext0, xsv_ext1 = xsb + 1, xsb + 2
                dx_ext0 = dx0 - 1 - sq
                dx_ext1 = dx0 - 2 - 2 * sq
            else:
                xsv_ext0 = xsv_ext1 = xsb
                dx_ext0 = dx0 - sq
                dx_ext1 = dx0 - 2 * sq

            if c & 0x02 != 0:
                ysv_ext0, ysv_ext1 = ysb + 1, ysb + 2
                dy_ext0 = dy0 - 1 - sq
                dy_ext1 = dy0 - 2 - 2 * sq
            else:
                ysv_ext0 = ysv_ext1 = ysb
                dy_ext0 = dy0 - sq
                dy_ext1 = dy0 - 2 * sq

            if c & 0x04 != 0:
                zsv_ext0, zsv_ext1 = zsb + 1, zsb + 2
                dz_ext0 = dz0 - 1 - sq
                dz_ext1 = dz0 - 2 - 2 * sq
            else:
                zsv_ext0 = zsv_ext1 = zsb
                dz_ext0 = dz0 - sq
                dz_ext1 = dz0 - 2 * sq

        dx3 = dx0 - 1 - 2 * sq
        dy3 = dy0 - 1 - 2 * sq
        dz3 = dz0 - 0 - 2 * sq
        value += _contribution3(generator, xsb + 1, ysb + 1, zsb, dx3, dy3, dz3)

        dx2 = dx3
        dy2 = dy0 - 0 - 2 * sq
        dz2 = dz0 - 1 - 2 * sq
        value += _contribution3(generator, xsb + 1, ysb, zsb + 1, dx2, dy2, dz2)

        dx1 = dx0 - 0 - 2 * sq
        dy1 = dy3
        dz1 = dz2
        value += _contribution3(generator, xsb, ysb + 1, zsb + 1, dx1, dy1, dz1)

        dx0 = dx0 - 1 - 3 * sq
        dy0 = dy0 - 1 - 3 * sq
        dz0 = dz0 - 1 - 3 * sq
        value += _contribution3(generator, xsb + 1, ysb + 1, zsb + 1, dx0, dy0, dz0)

    else:
        # Inside the octahedron in between.
        p1 = xins + yins
        if p1 > 1:
            a_score, a_point, a_further = p1 - 1, 0x03, True
        else:
            a_score, a_point, a_further = 1 - p1, 0x04, False

        p2 = xins + zins
        if p2 > 1:
            b_score, b_point, b_further = p2 - 1, 0x05, True
        else:
            b_score, b_point, b_further = 1 - p2, 0x02, False

        p3 = yins + zins
        if p3 > 1:
            score = p3 - 1
            if a_score <= b_score and a_score < score:
                a_score, a_point, a_further = score, 0x06, True
            elif a_score > b_score and b_score < score:
                b_score, b_point, b_further = score, 0x06, True
        else:
            score = 1 - p3
            if a_score <= b_score and a_score < score:
                a_score, a_point, a_further = score, 0x01, False
            elif a_score > b_score and b_score < score:
                b_score, b_point, b_further = score, 0x01, False

        if a_further == b_further:
            if a_further:
                # Both closest points on the (1,1,1) side.
                dx_ext0 = dx0 - 1 - 3 * sq
                dy_ext0 = dy0 - 1 - 3 * sq
                dz_ext0 = dz0 - 1 - 3 * sq
                xsv_ext0, ysv_ext0, zsv_ext0 = xsb + 1, ysb + 1, zsb + 1

                c = a_point & b_point
                if c & 0x01 != 0:
                    dx_ext1 = dx0 - 2 - 2 * sq
                    dy_ext1 = dy0 - 2 * sq
                    dz_ext1 = dz0 - 2 * sq
                    xsv_ext1, ysv_ext1, zsv_ext1 = xsb + 2, ysb, zsb
                elif c & 0x02 != 0:
                    dx_ext1 = dx0 - 2 * sq
                    dy_ext1 = dy0 - 2 - 2 * sq
                    dz_ext1 = dz0 - 2 * sq
                    xsv_ext1, ysv_ext1, zsv_ext1 = xsb, ysb + 2, zsb
                else:
                    dx_ext1 = dx0 - 2 * sq
                    dy_ext1 = dy0 - 2 * sq
                    dz_ext1 = dz0 - 2 - 2 * sq
                    xsv_ext1, ysv_ext1, zsv_ext1 = xsb, ysb, zsb + 2
            else:
                # Both closest points on the (0,0,0) side.
                dx_ext0, dy_ext0, dz_ext0 = dx0, dy0, dz0
                xsv_ext0, ysv_ext0, zsv_ext0 = xsb, ysb, zsb

                c = a_point | b_point
                if c & 0x01 == 0:
                    dx_ext1 = dx0 + 1 - sq
                    dy_ext1 = dy0 - 1 - sq
                    dz_ext1 = dz0 - 1 - sq
                    xsv_ext1, ysv_ext1, zsv_ext1 = xsb - 1, ysb + 1, zsb + 1
                elif c & 0x02 == 0:
                    dx_ext1 = dx0 - 1 - sq
                    dy_ext1 = dy0 + 1 - sq
                    dz_ext1 = dz0 - 1 - sq
                    xsv_ext1, ysv_ext1, zsv_ext1 = xsb + 1, ysb - 1, zsb + 1
                else:
                    dx_ext1 = dx0 - 1 - sq
                    dy_ext1 = dy0 - 1 - sq
                    dz_ext1 = dz0 + 1 - sq
                    xsv_ext1, ysv_ext1, zsv_ext1 = xsb + 1, ysb + 1, zsb - 1
        else:
            # One point on each side.
            if a_further:
                c1, c2 = a_point, b_point
            else:
                c1, c2 = b_point, a_point

            if c1 & 0x01 == 0:
                dx_ext0 = dx0 + 1 - sq
                dy_ext0 = dy0 - 1 - sq
                dz_ext0 = dz0 - 1 - sq
                xsv_ext0, ysv_ext0, zsv_ext0 = xsb - 1, ysb + 1, zsb + 1
            elif c1 & 0x02 == 0:
                dx_ext0 = dx0 - 1 - sq
                dy_ext0 = dy0 + 1 - sq
                dz_ext0 = dz0 - 1 - sq
                xsv_ext0, ysv_ext0, zsv_ext0 = xsb + 1, ysb - 1, zsb + 1
            else:
                dx_ext0 = dx0 - 1 - sq
                dy_ext0 = dy0 - 1 - sq
                dz_ext0 = dz0 + 1 - sq
                xsv_ext0, ysv_ext0, zsv_ext0 = xsb + 1, ysb + 1, zsb - 1

            dx_ext1 = dx0 - 2 * sq
            dy_ext1 = dy0 - 2 * sq
            dz_ext1 = dz0 - 2 * sq
            xsv_ext1, ysv_ext1, zsv_ext1 = xsb, ysb, zsb
            if c2 & 0x01 != 0:
                dx_ext1 -= 2
                xsv_ext1 += 2
            elif c2 & 0x02 != 0:
                dy_ext1 -= 2
                ysv_ext1 += 2
            else:
                dz_ext1 -= 2
                zsv_ext1 += 2

        dx1 = dx0 - 1 - sq
        dy1 = dy0 - 0 - sq
        dz1 = dz0 - 0 - sq
        value += _contribution3(generator, xsb + 1, ysb, zsb, dx1, dy1, dz1)

        dx2 = dx0 - 0 - sq
        dy2 = dy0 - 1 - sq
        dz2 = dz1
        value += _contribution3(generator, xsb, ysb + 1, zsb, dx2, dy2, dz2)

        dx3 = dx2
        dy3 = dy1
        dz3 = dz0 - 1 - sq
        value += _contribution3(generator, xsb, ysb, zsb + 1, dx3, dy3, dz3)

        dx4 = dx0 - 1 - 2 * sq
        dy4 = dy0 - 1 - 2 * sq
        dz4 = dz0 - 0 - 2 * sq
        value += _contribution3(generator, xsb + 1, ysb + 1, zsb, dx4, dy4, dz4)

        dx5 = dx4
        dy5 = dy0 - 0 - 2 * sq
        dz5 = dz0 - 1 - 2 * sq
        value += _contribution3(generator, xsb + 1, ysb, zsb + 1, dx5, dy5, dz5)

        dx6 = dx0 - 0 - 2 * sq
        dy6 = dy4
        dz6 = dz5
        value += _contribution3(generator, xsb, ysb + 1, zsb + 1, dx6, dy6, dz6)

    value += _contribution3(
        generator, xsv_ext0, ysv_ext0, zsv_ext0, dx_ext0, dy_ext0, dz_ext0
    )
    value += _contribution3(
        generator, xsv_ext1, ysv_ext1, zsv_ext1, dx_ext1, dy_ext1, dz_ext1
    )

    return value / NORM_CONSTANT_3D