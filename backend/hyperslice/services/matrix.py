"""
Homogeneous transformation matrices for 3D and 4D space.

Two square matrix types share one implementation:

- :class:`Mat4` transforms homogeneous 3D points (``vec4`` with a
  trailing ``1``).  It provides the three classic rotations about the
  x, y and z axes.
- :class:`Mat5` transforms homogeneous 4D points (``vec5`` with a
  trailing ``1``).  A rotation in 4-space happens in a coordinate
  *plane* rather than about an axis, so there are six rotation
  constructors: XY, XZ, XW, YZ, YW and ZW.

Elements are addressed as ``m[row, col]``.  Translations live in the
last column.  A product ``a * b`` is the usual row-by-column product,
so a composed transform ``t * r * s`` applied to a point scales first,
then rotates, then translates.

Rotation sign convention: a rotation in the plane of axes ``(a, b)`` by
a positive angle turns ``+a`` toward ``+b``, i.e. ``m[a, a] = m[b, b] =
cos``, ``m[a, b] = -sin`` and ``m[b, a] = sin``.  ``Mat4.rotate_y`` is
the ZX plane so that the three 3D rotations follow the right-hand rule.
"""

from __future__ import annotations

import math
from typing import Iterable, Sequence, Union

import numpy as np

from .vector import DTYPE, Scalar, Vector


class _SquareMatrix:
    """Immutable ``SIZE`` x ``SIZE`` matrix backed by a numpy array."""

    SIZE = 0

    __slots__ = ("_data",)

    def __init__(self, rows: Union[Sequence[Sequence[Scalar]], np.ndarray]):
        data = np.array(rows, dtype=DTYPE)
        if data.shape != (self.SIZE, self.SIZE):
            raise ValueError(
                f"{type(self).__name__} expects a {self.SIZE}x{self.SIZE} array, got shape {data.shape}"
            )
        data.flags.writeable = False
        self._data = data

    @classmethod
    def _wrap(cls, data: np.ndarray):
        mat = cls.__new__(cls)
        data = np.array(data, dtype=DTYPE)
        data.flags.writeable = False
        mat._data = data
        return mat

    # ------------------------------------------------------------------
    # Basic constructors
    # ------------------------------------------------------------------
    @classmethod
    def zero(cls):
        return cls._wrap(np.zeros((cls.SIZE, cls.SIZE)))

    @classmethod
    def identity(cls):
        return cls._wrap(np.identity(cls.SIZE))

    @classmethod
    def from_flat(cls, values: Iterable[Scalar]):
        """Build a matrix from ``SIZE * SIZE`` values in row-major order."""
        flat = np.array(list(values), dtype=DTYPE)
        if flat.shape != (cls.SIZE * cls.SIZE,):
            raise ValueError(
                f"{cls.__name__}.from_flat expects {cls.SIZE * cls.SIZE} values, got {flat.shape[0]}"
            )
        return cls._wrap(flat.reshape(cls.SIZE, cls.SIZE))

    @classmethod
    def scale_uniform(cls, factor: Scalar):
        return cls.scale(Vector.splat(cls.SIZE - 1, factor))

    @classmethod
    def scale(cls, factor: Vector):
        """Non-uniform scale; ``factor`` has one component per spatial axis."""
        cls._check_spatial(factor)
        data = np.identity(cls.SIZE)
        for i, f in enumerate(factor):
            data[i, i] = f
        return cls._wrap(data)

    @classmethod
    def translate(cls, delta: Vector):
        """Translation by ``delta``, stored in the last column."""
        cls._check_spatial(delta)
        data = np.identity(cls.SIZE)
        data[: cls.SIZE - 1, cls.SIZE - 1] = delta.array
        return cls._wrap(data)

    @classmethod
    def _plane_rotation(cls, a: int, b: int, angle: float):
        data = np.identity(cls.SIZE)
        s = math.sin(angle)
        c = math.cos(angle)
        data[a, a] = c
        data[a, b] = -s
        data[b, a] = s
        data[b, b] = c
        return cls._wrap(data)

    @classmethod
    def _check_spatial(cls, vec: Vector) -> None:
        if vec.degree != cls.SIZE - 1:
            raise ValueError(
                f"{cls.__name__} expects a vec{cls.SIZE - 1}, got vec{vec.degree}"
            )

    # ------------------------------------------------------------------
    # Element access
    # ------------------------------------------------------------------
    @property
    def array(self) -> np.ndarray:
        return self._data

    def __getitem__(self, index):
        row, col = index
        return float(self._data[row, col])

    def row(self, index: int) -> Vector:
        return Vector(self._data[index, :])

    def col(self, index: int) -> Vector:
        return Vector(self._data[:, index])

    def tolist(self) -> list:
        return self._data.tolist()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data.tolist()})"

    def transpose(self):
        return self._wrap(self._data.T)

    @property
    def T(self):
        return self.transpose()

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------
    def _same_type(self, other) -> bool:
        return isinstance(other, _SquareMatrix) and other.SIZE == self.SIZE

    def __add__(self, other):
        if not self._same_type(other):
            return NotImplemented
        return self._wrap(self._data + other._data)

    def __sub__(self, other):
        if not self._same_type(other):
            return NotImplemented
        return self._wrap(self._data - other._data)

    def __neg__(self):
        return self._wrap(-self._data)

    def __mul__(self, other):
        if self._same_type(other):
            return self._wrap(self._data @ other._data)
        if isinstance(other, Vector):
            if other.degree != self.SIZE:
                raise ValueError(
                    f"{type(self).__name__} cannot multiply vec{other.degree}"
                )
            # Each output component is the dot product of a row with the vector.
            return Vector._wrap(self._data @ other.array)
        if isinstance(other, (int, float, np.floating, np.integer)):
            return self._wrap(self._data * float(other))
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, (int, float, np.floating, np.integer)):
            return self._wrap(self._data * float(other))
        return NotImplemented

    __matmul__ = __mul__

    def __truediv__(self, other):
        if isinstance(other, (int, float, np.floating, np.integer)):
            return self._wrap(self._data / float(other))
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not self._same_type(other):
            return NotImplemented
        return bool(np.array_equal(self._data, other._data))

    __hash__ = None  # type: ignore[assignment]

    def approx_distance_to(self, other) -> float:
        """Largest absolute element-wise difference between two matrices."""
        return float(np.max(np.abs(self._data - other._data)))

    def approx_eq(self, other, eps: float = 1e-5) -> bool:
        return self.approx_distance_to(other) < eps

    def inverse(self):
        """Numeric inverse.

        Raises:
            numpy.linalg.LinAlgError: If the matrix is singular.
        """
        return self._wrap(np.linalg.inv(self._data))

    def determinant(self) -> float:
        return float(np.linalg.det(self._data))

    def transform_point(self, point: Vector) -> Vector:
        """Apply the matrix to a Euclidean point (homogeneous ``w = 1``)."""
        return (self * point.extend(1.0)).dehomogenize()

    def transform_direction(self, direction: Vector) -> Vector:
        """Apply the matrix to a direction (homogeneous ``w = 0``)."""
        return (self * direction.extend(0.0)).truncate()


class Mat4(_SquareMatrix):
    """4x4 matrix acting on homogeneous 3D coordinates."""

    SIZE = 4

    @classmethod
    def rotate_x(cls, angle: float) -> "Mat4":
        """Rotation about the x axis (the YZ plane)."""
        return cls._plane_rotation(1, 2, angle)

    @classmethod
    def rotate_y(cls, angle: float) -> "Mat4":
        """Rotation about the y axis (the ZX plane)."""
        return cls._plane_rotation(2, 0, angle)

    @classmethod
    def rotate_z(cls, angle: float) -> "Mat4":
        """Rotation about the z axis (the XY plane)."""
        return cls._plane_rotation(0, 1, angle)


class Mat5(_SquareMatrix):
    """5x5 matrix acting on homogeneous 4D coordinates."""

    SIZE = 5

    @classmethod
    def rotate_xy(cls, angle: float) -> "Mat5":
        return cls._plane_rotation(0, 1, angle)

    @classmethod
    def rotate_xz(cls, angle: float) -> "Mat5":
        return cls._plane_rotation(0, 2, angle)

    @classmethod
    def rotate_xw(cls, angle: float) -> "Mat5":
        return cls._plane_rotation(0, 3, angle)

    @classmethod
    def rotate_yz(cls, angle: float) -> "Mat5":
        return cls._plane_rotation(1, 2, angle)

    @classmethod
    def rotate_yw(cls, angle: float) -> "Mat5":
        return cls._plane_rotation(1, 3, angle)

    @classmethod
    def rotate_zw(cls, angle: float) -> "Mat5":
        return cls._plane_rotation(2, 3, angle)


__all__ = ["Mat4", "Mat5"]
