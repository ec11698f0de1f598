"""
Tests for the homogeneous 4x4 and 5x5 matrices in matrix.py.

Rotation constructors are checked for orthonormality and for leaving
the axes outside their plane untouched across a range of angles, and
composed affine transforms are checked to round-trip through their
inverse.
"""

from __future__ import annotations

import sys
from pathlib import Path
import math
import random

import numpy as np
import pytest

# Make the backend package importable when running tests directly via pytest
sys.path.append(str(Path(__file__).resolve().parents[1]))

from hyperslice.services.matrix import Mat4, Mat5
from hyperslice.services.vector import Vector, vec3, vec4, vec5

ANGLES = [0.0, 0.3, -1.2, math.pi / 2, 2.5, -math.pi, 10.0]

MAT5_PLANES = {
    "rotate_xy": (0, 1),
    "rotate_xz": (0, 2),
    "rotate_xw": (0, 3),
    "rotate_yz": (1, 2),
    "rotate_yw": (1, 3),
    "rotate_zw": (2, 3),
}

MAT4_PLANES = {
    "rotate_x": (1, 2),
    "rotate_y": (2, 0),
    "rotate_z": (0, 1),
}


def random_vectors(degree: int, count: int = 5, seed: int = 7) -> list:
    rng = random.Random(seed)
    return [Vector(rng.uniform(-10.0, 10.0) for _ in range(degree)) for _ in range(count)]


@pytest.mark.parametrize("vec", [Vector.zero(5)] + random_vectors(5))
def test_identity_leaves_vectors_unchanged(vec: Vector) -> None:
    assert Mat5.identity() * vec == vec


def test_identity_squared_is_identity() -> None:
    assert Mat5.identity() * Mat5.identity() == Mat5.identity()
    assert Mat4.identity() @ Mat4.identity() == Mat4.identity()


def test_matrix_products() -> None:
    foo = Mat4.from_flat(range(1, 17))
    bar = Mat4.translate(vec3(1, 1, 1))
    assert (foo * bar).tolist() == [
        [1, 2, 3, 10],
        [5, 6, 7, 26],
        [9, 10, 11, 42],
        [13, 14, 15, 58],
    ]
    assert foo * vec4(1, 2, 3, 1) == vec4(18, 46, 74, 102)
    assert (foo * 10.0)[3, 3] == 160.0
    assert (10.0 * foo)[0, 1] == 20.0
    assert (foo / 2.0)[0, 0] == 0.5


def test_add_sub_neg_and_transpose() -> None:
    a = Mat5.from_flat(range(25))
    b = Mat5.identity()
    assert (a + b)[2, 2] == 13.0
    assert (a - b)[0, 0] == -1.0
    assert (-a)[4, 4] == -24.0
    assert a.transpose()[1, 3] == a[3, 1]
    assert a.row(1) == vec5(5, 6, 7, 8, 9)
    assert a.col(1) == vec5(1, 6, 11, 16, 21)
    assert a.T.T == a


@pytest.mark.parametrize("name", sorted(MAT5_PLANES))
@pytest.mark.parametrize("angle", ANGLES)
def test_mat5_rotations_are_orthonormal(name: str, angle: float) -> None:
    m = getattr(Mat5, name)(angle)
    assert (m.transpose() * m).approx_eq(Mat5.identity(), 1e-12)
    assert math.isclose(m.determinant(), 1.0, rel_tol=1e-9)
    a, b = MAT5_PLANES[name]
    for axis in range(5):
        if axis in (a, b):
            continue
        unit = Vector.unit(5, axis)
        assert m * unit == unit


@pytest.mark.parametrize("name", sorted(MAT4_PLANES))
@pytest.mark.parametrize("angle", ANGLES)
def test_mat4_rotations_are_orthonormal(name: str, angle: float) -> None:
    m = getattr(Mat4, name)(angle)
    assert (m.transpose() * m).approx_eq(Mat4.identity(), 1e-12)
    assert math.isclose(m.determinant(), 1.0, rel_tol=1e-9)
    a, b = MAT4_PLANES[name]
    for axis in range(4):
        if axis not in (a, b):
            assert m * Vector.unit(4, axis) == Vector.unit(4, axis)


@pytest.mark.parametrize("name", sorted(MAT5_PLANES))
def test_mat5_rotation_sign_convention(name: str) -> None:
    """A quarter turn in plane (a, b) carries +a onto +b."""
    a, b = MAT5_PLANES[name]
    m = getattr(Mat5, name)(math.pi / 2)
    assert (m * Vector.unit(5, a)).approx_eq(Vector.unit(5, b), 1e-12)


def test_mat4_rotations_follow_right_hand_rule() -> None:
    quarter = math.pi / 2
    assert Mat4.rotate_x(quarter).transform_point(vec3(0, 1, 0)).approx_eq(vec3(0, 0, 1), 1e-12)
    assert Mat4.rotate_y(quarter).transform_point(vec3(0, 0, 1)).approx_eq(vec3(1, 0, 0), 1e-12)
    assert Mat4.rotate_z(quarter).transform_point(vec3(1, 0, 0)).approx_eq(vec3(0, 1, 0), 1e-12)


def test_translation_uses_last_column() -> None:
    t = Mat5.translate(vec4(1.0, 2.0, 3.0, 4.0))
    expected = np.identity(5)
    expected[:4, 4] = [1.0, 2.0, 3.0, 4.0]
    assert np.array_equal(t.array, expected)
    assert t.transform_point(vec4(1, 1, 1, 1)) == vec4(2, 3, 4, 5)
    # Directions are not affected by translation
    assert t.transform_direction(vec4(1, 1, 1, 1)) == vec4(1, 1, 1, 1)


def test_scale() -> None:
    s = Mat5.scale(vec4(1.0, 2.0, 3.0, 4.0))
    assert s.transform_point(vec4(1, 1, 1, 1)) == vec4(1, 2, 3, 4)
    assert Mat4.scale_uniform(3.0).transform_point(vec3(1, -1, 2)) == vec3(3, -3, 6)
    assert s[4, 4] == 1.0


def test_composed_transform_round_trips_through_inverse() -> None:
    m = (
        Mat5.translate(vec4(1.0, -2.0, 0.5, 3.0))
        * Mat5.rotate_yz(0.7)
        * Mat5.rotate_xw(-0.4)
        * Mat5.rotate_xy(1.1)
        * Mat5.rotate_zw(2.0)
        * Mat5.scale_uniform(2.5)
    )
    inv = m.inverse()
    assert (inv * m).approx_eq(Mat5.identity(), 1e-9)
    for p in random_vectors(4, seed=11):
        assert inv.transform_point(m.transform_point(p)).approx_eq(p, 1e-4)


def test_singular_matrix_inverse_raises() -> None:
    with pytest.raises(np.linalg.LinAlgError):
        Mat5.zero().inverse()


def test_invalid_shapes_rejected() -> None:
    with pytest.raises(ValueError):
        Mat5([[1.0, 0.0], [0.0, 1.0]])
    with pytest.raises(ValueError):
        Mat4.from_flat(range(15))
    with pytest.raises(ValueError):
        _ = Mat5.identity() * vec4(1, 2, 3, 4)
    with pytest.raises(ValueError):
        Mat5.translate(vec3(1, 2, 3))


def test_approx_distance() -> None:
    a = Mat4.identity()
    assert a.approx_distance_to(Mat4.identity()) == 0.0
    c = Mat4.translate(vec3(0.0, 0.25, 0.0))
    assert a.approx_distance_to(c) == 0.25
