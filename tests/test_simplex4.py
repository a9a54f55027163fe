import math
import random

import pytest

from tinyarcade.simplex import SQUISH_CONSTANT_4D, OpenSimplex
from tinyarcade.simplex4 import noise4

# Along the diagonal x=y=z=w=t the in-cell coordinate sum is 4 * frac(t * 0.4472...),
# so these values of t land in each of the four regions.
DIAGONAL_POINTS = [0.5, 1.0, 1.5, 2.0]


def _random_points(count, seed=1234, span=20.0):
    rng = random.Random(seed)
    return [
        tuple(rng.uniform(-span, span) for _ in range(4)) for _ in range(count)
    ]


def test_same_seed_gives_same_values():
    first = OpenSimplex(7)
    second = OpenSimplex(7)
    for point in _random_points(50):
        assert noise4(first, *point) == noise4(second, *point)


def test_values_are_bounded():
    generator = OpenSimplex(0)
    for point in _random_points(500):
        value = noise4(generator, *point)
        assert math.isfinite(value)
        assert -1.5 <= value <= 1.5


@pytest.mark.parametrize("t", DIAGONAL_POINTS)
def test_each_region_gives_bounded_values(t):
    generator = OpenSimplex(3)
    value = noise4(generator, t, t, t, t)
    assert math.isfinite(value)
    assert abs(value) <= 1.5


def test_different_seeds_give_different_fields():
    points = _random_points(40)
    a = [noise4(OpenSimplex(1), *p) for p in points]
    b = [noise4(OpenSimplex(2), *p) for p in points]
    assert a != b


def test_noise_is_not_constant():
    generator = OpenSimplex(0)
    values = {round(noise4(generator, *p), 12) for p in _random_points(30)}
    assert len(values) > 20


def test_periodic_over_lattice_wrap():
    generator = OpenSimplex(11)
    sq = SQUISH_CONSTANT_4D
    shift = 256
    for x, y, z, w in _random_points(25, seed=99, span=5.0):
        base = noise4(generator, x, y, z, w)
        moved = noise4(
            generator,
            x + shift * (1 + sq),
            y + shift * sq,
            z + shift * sq,
            w + shift * sq,
        )
        assert moved == pytest.approx(base, abs=1e-6)


# Diagonal parameters where the in-cell coordinate sum crosses 1, 2 and 3.
@pytest.mark.parametrize("fraction", [0.25, 0.5, 0.75])
def test_continuous_across_region_boundaries(fraction):
    generator = OpenSimplex(5)
    t0 = fraction / (1 + 4 * (-0.138196601125011))
    eps = 1e-7
    below = noise4(generator, t0 - eps, t0 - eps, t0 - eps, t0 - eps)
    above = noise4(generator, t0 + eps, t0 + eps, t0 + eps, t0 + eps)
    assert above == pytest.approx(below, abs=1e-4)


def test_small_steps_give_small_changes():
    generator = OpenSimplex(21)
    for x, y, z, w in _random_points(50, seed=3):
        a = noise4(generator, x, y, z, w)
        b = noise4(generator, x + 1e-6, y, z, w + 1e-6)
        assert abs(a - b) < 1e-3


def test_from_permutation_matches_seeded_generator():
    seeded = OpenSimplex(42)
    copied = OpenSimplex.from_permutation(seeded.perm)
    for point in _random_points(30, seed=8):
        assert noise4(copied, *point) == noise4(seeded, *point)