"""OpenSimplex noise: seeded permutation tables, gradient lookups and 2D noise."""

from __future__ import annotations

from typing import Sequence

STRETCH_CONSTANT_2D = -0.211324865405187
SQUISH_CONSTANT_2D = 0.366025403784439
STRETCH_CONSTANT_3D = -1.0 / 6.0
SQUISH_CONSTANT_3D = 1.0 / 3.0
STRETCH_CONSTANT_4D = -0.138196601125011
SQUISH_CONSTANT_4D = 0.309016994374947

NORM_CONSTANT_2D = 47.0
NORM_CONSTANT_3D = 103.0
NORM_CONSTANT_4D = 30.0

DEFAULT_SEED = 0

_MASK64 = (1 << 64) - 1
_LCG_MUL = 6364136223846793005
_LCG_ADD = 1442695040888963407

# Directions to the vertices of an octagon.
GRADIENTS_2D = (
    5, 2, 2, 5,
    -5, 2, -2, 5,
    5, -2, 2, -5,
    -5, -2, -2, -5,
)

# Directions to the vertices of a skewed rhombicuboctahedron.
GRADIENTS_3D = (
    -11, 4, 4, -4, 11, 4, -4, 4, 11,
    11, 4, 4, 4, 11, 4, 4, 4, 11,
    -11, -4, 4, -4, -11, 4, -4, -4, 11,
    11, -4, 4, 4, -11, 4, 4, -4, 11,
    -11, 4, -4, -4, 11, -4, -4, 4, -11,
    11, 4, -4, 4, 11, -4, 4, 4, -11,
    -11, -4, -4, -4, -11, -4, -4, -4, -11,
    11, -4, -4, 4, -11, -4, 4, -4, -11,
)

# Directions to the vertices of a skewed disprismatotesseractihexadecachoron.
GRADIENTS_4D = (
    3, 1, 1, 1, 1, 3, 1, 1, 1, 1, 3, 1, 1, 1, 1, 3,
    -3, 1, 1, 1, -1, 3, 1, 1, -1, 1, 3, 1, -1, 1, 1, 3,
    3, -1, 1, 1, 1, -3, 1, 1, 1, -1, 3, 1, 1, -1, 1, 3,
    -3, -1, 1, 1, -1, -3, 1, 1, -1, -1, 3, 1, -1, -1, 1, 3,
    3, 1, -1, 1, 1, 3, -1, 1, 1, 1, -3, 1, 1, 1, -1, 3,
    -3, 1, -1, 1, -1, 3, -1, 1, -1, 1, -3, 1, -1, 1, -1, 3,
    3, -1, -1, 1, 1, -3, -1, 1, 1, -1, -3, 1, 1, -1, -1, 3,
    -3, -1, -1, 1, -1, -3, -1, 1, -1, -1, -3, 1, -1, -1, -1, 3,
    3, 1, 1, -1, 1, 3, 1, -1, 1, 1, 3, -1, 1, 1, 1, -3,
    -3, 1, 1, -1, -1, 3, 1, -1, -1, 1, 3, -1, -1, 1, 1, -3,
    3, -1, 1, -1, 1, -3, 1, -1, 1, -1, 3, -1, 1, -1, 1, -3,
    -3, -1, 1, -1, -1, -3, 1, -1, -1, -1, 3, -1, -1, -1, 1, -3,
    3, 1, -1, -1, 1, 3, -1, -1, 1, 1, -3, -1, 1, 1, -1, -3,
    -3, 1, -1, -1, -1, 3, -1, -1, -1, 1, -3, -1, -1, 1, -1, -3,
    3, -1, -1, -1, 1, -3, -1, -1, 1, -1, -3, -1, 1, -1, -1, -3,
    -3, -1, -1, -1, -1, -3, -1, -1, -1, -1, -3, -1, -1, -1, -1, -3,
)

_GRAD3_COUNT = len(GRADIENTS_3D) // 3


def fast_floor(x: float) -> int:
    """Floor of x as an int."""
    xi = int(x)
    return xi - 1 if x < xi else xi


def _to_int16(value: int) -> int:
    return ((int(value) + 0x8000) & 0xFFFF) - 0x8000


def _grad3_index(p: int) -> int:
    # Remainder truncated towards zero, as for signed integers.
    remainder = abs(p) % _GRAD3_COUNT
    return (remainder if p >= 0 else -remainder) * 3


class OpenSimplex:
    """A noise generator defined by a 256-entry permutation table."""

    def __init__(self, seed: int = DEFAULT_SEED) -> None:
        state = seed & _MASK64
        source = list(range(256))
        perm = [0] * 256
        for _ in range(3):
            state = (state * _LCG_MUL + _LCG_ADD) & _MASK64
        for i in range(255, -1, -1):
            state = (state * _LCG_MUL + _LCG_ADD) & _MASK64
            r = ((state + 31) & _MASK64) % (i + 1)
            perm[i] = source[r]
            source[r] = source[i]
        self._set_perm(perm)

    def _set_perm(self, perm: Sequence[int]) -> None:
        self.perm: tuple[int, ...] = tuple(_to_int16(p) for p in perm)
        self.perm_grad_index3d: tuple[int, ...] = tuple(
            _grad3_index(p) for p in self.perm[:256]
        )

    @classmethod
    def from_permutation(cls, perm: Sequence[int]) -> "OpenSimplex":
        """Build a generator from an explicit permutation table of at least 256 entries."""
        values = list(perm)
        if len(values) < 256:
            raise ValueError(
                f"permutation table needs at least 256 entries, got {len(values)}"
            )
        generator = cls.__new__(cls)
        generator._set_perm(values)
        return generator

    def extrapolate2(self, xsb: int, ysb: int, dx: float, dy: float) -> float:
        """Gradient contribution of a 2D lattice point."""
        perm = self.perm
        index = perm[(perm[xsb & 0xFF] + ysb) & 0xFF] & 0x0E
        return GRADIENTS_2D[index] * dx + GRADIENTS_2D[index + 1] * dy

    def extrapolate3(
        self, xsb: int, ysb: int, zsb: int, dx: float, dy: float, dz: float
    ) -> float:
        """Gradient contribution of a 3D lattice point."""
        perm = self.perm
        index = self.perm_grad_index3d[
            (perm[(perm[xsb & 0xFF] + ysb) & 0xFF] + zsb) & 0xFF
        ]
        return (
            GRADIENTS_3D[index] * dx
            + GRADIENTS_3D[index + 1] * dy
            + GRADIENTS_3D[index + 2] * dz
        )

    def extrapolate4(
        self,
        xsb: int,
        ysb: int,
        zsb: int,
        wsb: int,
        dx: float,
        dy: float,
        dz: float,
        dw: float,
    ) -> float:
        """Gradient contribution of a 4D lattice point."""
        perm = self.perm
        index = (
            perm[
                (perm[(perm[(perm[xsb & 0xFF] + ysb) & 0xFF] + zsb) & 0xFF] + wsb)
                & 0xFF
            ]
            & 0xFC
        )
        return (
            GRADIENTS_4D[index] * dx
            + GRADIENTS_4D[index + 1] * dy
            + GRADIENTS_4D[index + 2] * dz
            + GRADIENTS_4D[index + 3] * dw
        )

    def _contribution2(self, xsv: int, ysv: int, dx: float, dy: float) -> float:
        attn = 2 - dx * dx - dy * dy
        if attn <= 0:
            return 0.0
        attn *= attn
        return attn * attn * self.extrapolate2(xsv, ysv, dx, dy)

    def noise2(self, x: float, y: float) -> float:
        """2D OpenSimplex noise at (x, y)."""
        sq = SQUISH_CONSTANT_2D

        stretch_offset = (x + y) * STRETCH_CONSTANT_2D
        xs = x + stretch_offset
        ys = y + stretch_offset

        xsb = fast_floor(xs)
        ysb = fast_floor(ys)

        squish_offset = (xsb + ysb) * sq
        xb = xsb + squish_offset
        yb = ysb + squish_offset

        xins = xs - xsb
        yins = ys - ysb
        in_sum = xins + yins

        dx0 = x - xb
        dy0 = y - yb

        value = 0.0
        value += self._contribution2(xsb + 1, ysb, dx0 - 1 - sq, dy0 - sq)
        value += self._contribution2(xsb, ysb + 1, dx0 - sq, dy0 - 1 - sq)

        if in_sum <= 1:
            zins = 1 - in_sum
            if zins > xins or zins > yins:
                if xins > yins:
                    xsv_ext, ysv_ext = xsb + 1, ysb - 1
                    dx_ext, dy_ext = dx0 - 1, dy0 + 1
                else:
                    xsv_ext, ysv_ext = xsb - 1, ysb + 1
                    dx_ext, dy_ext = dx0 + 1, dy0 - 1
            else:
                xsv_ext, ysv_ext = xsb + 1, ysb + 1
                dx_ext = dx0 - 1 - 2 * sq
                dy_ext = dy0 - 1 - 2 * sq
        else:
            zins = 2 - in_sum
            if zins < xins or zins < yins:
                if xins > yins:
                    xsv_ext, ysv_ext = xsb + 2, ysb
                    dx_ext = dx0 - 2 - 2 * sq
                    dy_ext = dy0 - 2 * sq
                else:
                    xsv_ext, ysv_ext = xsb, ysb + 2
                    dx_ext = dx0 - 2 * sq
                    dy_ext = dy0 - 2 - 2 * sq
            else:
                dx_ext, dy_ext = dx0, dy0
                xsv_ext, ysv_ext = xsb, ysb
            xsb += 1
            ysb += 1
            dx0 = dx0 - 1 - 2 * sq
            dy0 = dy0 - 1 - 2 * sq

        value += self._contribution2(xsb, ysb, dx0, dy0)
        value += self._contribution2(xsv_ext, ysv_ext, dx_ext, dy_ext)

        return value / NORM_CONSTANT_2D