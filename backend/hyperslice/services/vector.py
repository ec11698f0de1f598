"""
Fixed-degree vectors for the slicing engine.

A :class:`Vector` wraps a read-only numpy array of 2 to 5 float
components.  Degree 3 vectors are points in the sliced 3D world, degree
4 vectors are points in 4-space (or homogeneous 3D points) and degree 5
vectors are homogeneous 4D points.  All operations return new vectors;
nothing in this module mutates its inputs.

Named accessors (``x``, ``y``, ``z``, ``w``, ``v``) read the components
of the underlying array, so there is a single storage layout and no
aliasing between an array view and a field view.

Normalisation of a (numerically) zero vector returns the zero vector
instead of dividing by zero, so that degenerate triangle normals do not
spread NaN values through later orientation tests.
"""

from __future__ import annotations

import math
from typing import Callable, Iterable, Iterator, Tuple, Union

import numpy as np

# Component type used throughout the engine.
DTYPE = np.float64

# Lengths below this value are treated as zero when normalising.
ZERO_LENGTH_EPS = 1e-9

MIN_DEGREE = 2
MAX_DEGREE = 5

_AXIS_NAMES = "xyzwv"

Scalar = Union[int, float]


class Vector:
    """Immutable vector of ``degree`` float components."""

    __slots__ = ("_data",)

    # numpy defers to our reflected operators, so np.float64(2) * v is a Vector.
    __array_ufunc__ = None

    def __init__(self, components: Iterable[Scalar]):
        data = np.array(list(components), dtype=DTYPE)
        if data.ndim != 1 or not MIN_DEGREE <= data.shape[0] <= MAX_DEGREE:
            raise ValueError(
                f"vector must have between {MIN_DEGREE} and {MAX_DEGREE} components, got {data.shape}"
            )
        data.flags.writeable = False
        self._data = data

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------
    @classmethod
    def _wrap(cls, data: np.ndarray) -> "Vector":
        vec = cls.__new__(cls)
        data = np.asarray(data, dtype=DTYPE)
        data.flags.writeable = False
        vec._data = data
        return vec

    @classmethod
    def zero(cls, degree: int) -> "Vector":
        """Return the zero vector of the given degree."""
        return cls([0.0] * degree)

    @classmethod
    def unit(cls, degree: int, axis: int) -> "Vector":
        """Return the unit vector along ``axis`` (0 = x, 1 = y, ...)."""
        if not 0 <= axis < degree:
            raise ValueError(f"axis {axis} out of range for degree {degree}")
        comps = [0.0] * degree
        comps[axis] = 1.0
        return cls(comps)

    @classmethod
    def splat(cls, degree: int, value: Scalar) -> "Vector":
        return cls([value] * degree)

    # ------------------------------------------------------------------
    # Container protocol
    # ------------------------------------------------------------------
    @property
    def degree(self) -> int:
        return int(self._data.shape[0])

    @property
    def array(self) -> np.ndarray:
        """Read-only view of the components."""
        return self._data

    def __len__(self) -> int:
        return self.degree

    def __iter__(self) -> Iterator[float]:
        for c in self._data:
            yield float(c)

    def __getitem__(self, index: int) -> float:
        return float(self._data[index])

    def __repr__(self) -> str:
        comps = ", ".join(f"{c:.4g}" for c in self)
        return f"vec{self.degree}({comps})"

    def tolist(self) -> list:
        return [float(c) for c in self._data]

    def astuple(self) -> Tuple[float, ...]:
        return tuple(self.tolist())

    def _axis(self, axis: int) -> float:
        if axis >= self.degree:
            raise AttributeError(
                f"vec{self.degree} has no component '{_AXIS_NAMES[axis]}'"
            )
        return float(self._data[axis])

    @property
    def x(self) -> float:
        return self._axis(0)

    @property
    def y(self) -> float:
        return self._axis(1)

    @property
    def z(self) -> float:
        return self._axis(2)

    @property
    def w(self) -> float:
        return self._axis(3)

    @property
    def v(self) -> float:
        return self._axis(4)

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------
    def _check_same_degree(self, other: "Vector") -> None:
        if self.degree != other.degree:
            raise ValueError(
                f"degree mismatch: vec{self.degree} and vec{other.degree}"
            )

    def __add__(self, other: "Vector") -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        self._check_same_degree(other)
        return Vector._wrap(self._data + other._data)

    def __sub__(self, other: "Vector") -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        self._check_same_degree(other)
        return Vector._wrap(self._data - other._data)

    def __neg__(self) -> "Vector":
        return Vector._wrap(-self._data)

    def __mul__(self, other: Union["Vector", Scalar]) -> "Vector":
        # Vector * Vector is componentwise, Vector * scalar scales.
        if isinstance(other, Vector):
            self._check_same_degree(other)
            return Vector._wrap(self._data * other._data)
        if isinstance(other, (int, float, np.floating, np.integer)):
            return Vector._wrap(self._data * float(other))
        return NotImplemented

    def __rmul__(self, other: Scalar) -> "Vector":
        if isinstance(other, (int, float, np.floating, np.integer)):
            return Vector._wrap(self._data * float(other))
        return NotImplemented

    def __truediv__(self, other: Union["Vector", Scalar]) -> "Vector":
        if isinstance(other, Vector):
            self._check_same_degree(other)
            return Vector._wrap(self._data / other._data)
        if isinstance(other, (int, float, np.floating, np.integer)):
            return Vector._wrap(self._data / float(other))
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.degree == other.degree and bool(np.array_equal(self._data, other._data))

    __hash__ = None  # type: ignore[assignment]

    def approx_eq(self, other: "Vector", eps: float = 1e-5) -> bool:
        """Return ``True`` if every component differs by less than ``eps``."""
        self._check_same_degree(other)
        return bool(np.all(np.abs(self._data - other._data) < eps))

    def map(self, func: Callable[[float], float]) -> "Vector":
        return Vector(func(c) for c in self)

    # ------------------------------------------------------------------
    # Metric operations
    # ------------------------------------------------------------------
    def dot(self, other: "Vector") -> float:
        self._check_same_degree(other)
        return float(np.dot(self._data, other._data))

    def len_sqr(self) -> float:
        return float(np.dot(self._data, self._data))

    def len(self) -> float:
        return math.sqrt(self.len_sqr())

    def normalize_or_zero(self) -> "Vector":
        """Return the unit vector in this direction, or zero if degenerate."""
        length = self.len()
        if length < ZERO_LENGTH_EPS:
            return Vector.zero(self.degree)
        return Vector._wrap(self._data / length)

    def cross(self, other: "Vector") -> "Vector":
        """Cross product; defined for degree 3 vectors only."""
        if self.degree != 3 or other.degree != 3:
            raise ValueError("cross product is only defined for vec3")
        ax, ay, az = self._data
        bx, by, bz = other._data
        return Vector((ay * bz - az * by, az * bx - ax * bz, ax * by - ay * bx))

    def arg(self) -> float:
        """Angle of a 2D vector from the +x axis, in radians (``atan2``)."""
        if self.degree != 2:
            raise ValueError("arg is only defined for vec2")
        return math.atan2(self._data[1], self._data[0])

    def rotate(self, angle: float) -> "Vector":
        """Rotate a 2D vector counter-clockwise by ``angle`` radians."""
        if self.degree != 2:
            raise ValueError("rotate is only defined for vec2")
        s = math.sin(angle)
        c = math.cos(angle)
        x, y = self._data
        return Vector((x * c - y * s, x * s + y * c))

    # ------------------------------------------------------------------
    # Structural projections
    # ------------------------------------------------------------------
    def extend(self, value: Scalar) -> "Vector":
        """Append one component (e.g. a homogeneous ``1.0``)."""
        return Vector(list(self._data) + [value])

    def truncate(self, count: int = 1) -> "Vector":
        """Drop the last ``count`` components."""
        return Vector(self._data[: self.degree - count])

    @property
    def xy(self) -> "Vector":
        return Vector(self._data[:2])

    @property
    def xyz(self) -> "Vector":
        if self.degree < 3:
            raise AttributeError(f"vec{self.degree} has no xyz projection")
        return Vector(self._data[:3])

    @property
    def xyzw(self) -> "Vector":
        if self.degree < 4:
            raise AttributeError(f"vec{self.degree} has no xyzw projection")
        return Vector(self._data[:4])

    def dehomogenize(self) -> "Vector":
        """Divide the leading components by the last one and drop it.

        The last component must be non-zero; affine matrices built by
        :mod:`.matrix` always keep it at ``1``.
        """
        return Vector._wrap(self._data[:-1] / self._data[-1])


def vec2(x: Scalar, y: Scalar) -> Vector:
    return Vector((x, y))


def vec3(x: Scalar, y: Scalar, z: Scalar) -> Vector:
    return Vector((x, y, z))


def vec4(x: Scalar, y: Scalar, z: Scalar, w: Scalar) -> Vector:
    return Vector((x, y, z, w))


def vec5(x: Scalar, y: Scalar, z: Scalar, w: Scalar, v: Scalar) -> Vector:
    return Vector((x, y, z, w, v))


def centroid(points: Iterable[Vector]) -> Vector:
    """Arithmetic mean of a non-empty collection of vectors.

    Raises:
        ValueError: If ``points`` is empty.
    """
    pts = list(points)
    if not pts:
        raise ValueError("centroid of an empty point set is undefined")
    total = pts[0]
    for p in pts[1:]:
        total = total + p
    return total / len(pts)


UNIT_X3 = vec3(1.0, 0.0, 0.0)
UNIT_Y3 = vec3(0.0, 1.0, 0.0)
UNIT_Z3 = vec3(0.0, 0.0, 1.0)
UNIT_X4 = vec4(1.0, 0.0, 0.0, 0.0)
UNIT_W4 = vec4(0.0, 0.0, 0.0, 1.0)

__all__ = [
    "DTYPE",
    "Vector",
    "vec2",
    "vec3",
    "vec4",
    "vec5",
    "centroid",
    "UNIT_X3",
    "UNIT_Y3",
    "UNIT_Z3",
    "UNIT_X4",
    "UNIT_W4",
]
