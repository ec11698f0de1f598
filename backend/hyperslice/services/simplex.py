"""
Simplex value types consumed and produced by the intersectors.

- :class:`Triangle` is a 3D triangle with a cached face normal.  It is
  both the building block of 3D meshes (sliced by
  :class:`~.plane.Plane`) and the output of slicing 4D meshes with
  :class:`~.space.Space`.
- :class:`Tetrahedron4d` is the building block of 4D meshes.
- :class:`Triangle4d` is the intermediate result of slicing one
  tetrahedron, before it is projected down to 3D.

All three are frozen dataclasses.  Re-orienting a triangle returns a
new instance; the set of vertices never changes, only their order and
the sign of the normal.

Vertices are unhashable numpy-backed vectors, so these types compare and
hash by identity.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple

from .matrix import Mat4, Mat5
from .vector import Vector, centroid

# Vertex index pairs of a tetrahedron's six edges, in slicing order.
TETRAHEDRON_EDGES: Tuple[Tuple[int, int], ...] = (
    (0, 1),
    (0, 2),
    (0, 3),
    (1, 2),
    (1, 3),
    (2, 3),
)

TETRAHEDRON_FACES: Tuple[Tuple[int, int, int], ...] = (
    (0, 1, 2),
    (0, 1, 3),
    (0, 2, 3),
    (1, 2, 3),
)


def face_normal(a: Vector, b: Vector, c: Vector) -> Vector:
    """Unit normal of the triangle ``abc`` (zero if degenerate)."""
    return (b - a).cross(c - a).normalize_or_zero()


@dataclass(frozen=True, eq=False)
class MeshVertex:
    """One entry of a renderable vertex buffer."""

    position: Vector
    normal: Vector


@dataclass(frozen=True, eq=False)
class Triangle:
    """Triangle in 3-space with its face normal.

    Use :meth:`from_vertices` to build one; it derives the normal from
    the winding of the vertices.
    """

    vertices: Tuple[Vector, Vector, Vector]
    normal: Vector

    @classmethod
    def from_vertices(cls, vertices: Sequence[Vector]) -> "Triangle":
        a, b, c = vertices
        for p in (a, b, c):
            if p.degree != 3:
                raise ValueError(f"triangle vertices must be vec3, got vec{p.degree}")
        return cls(vertices=(a, b, c), normal=face_normal(a, b, c))

    def center(self) -> Vector:
        return centroid(self.vertices)

    def looking_away_from(self, target: Vector) -> "Triangle":
        """Return this triangle with its normal facing away from ``target``.

        If the normal currently points toward ``target`` the first two
        vertices are swapped and the normal negated; otherwise the
        triangle is returned unchanged.  A zero normal never flips.
        """
        if self.normal.dot(target - self.center()) > 0.0:
            a, b, c = self.vertices
            return Triangle(vertices=(b, a, c), normal=-self.normal)
        return self

    def transformed(self, matrix: Mat4) -> "Triangle":
        """Apply an affine transform and recompute the normal."""
        return Triangle.from_vertices([matrix.transform_point(p) for p in self.vertices])

    def into_vertices(self) -> List[MeshVertex]:
        return [MeshVertex(position=p, normal=self.normal) for p in self.vertices]


@dataclass(frozen=True, eq=False)
class Triangle4d:
    vertices: Tuple[Vector, Vector, Vector]


@dataclass(frozen=True, eq=False)
class Tetrahedron4d:
    """Tetrahedron in 4-space."""

    vertices: Tuple[Vector, Vector, Vector, Vector]

    def __post_init__(self) -> None:
        if len(self.vertices) != 4:
            raise ValueError(f"tetrahedron needs 4 vertices, got {len(self.vertices)}")
        for p in self.vertices:
            if p.degree != 4:
                raise ValueError(f"tetrahedron vertices must be vec4, got vec{p.degree}")

    def edges(self) -> List[Tuple[Vector, Vector]]:
        """The six edges as vertex pairs, in :data:`TETRAHEDRON_EDGES` order."""
        return [(self.vertices[i], self.vertices[j]) for i, j in TETRAHEDRON_EDGES]

    def faces(self) -> List[Tuple[Vector, Vector, Vector]]:
        return [
            (self.vertices[i], self.vertices[j], self.vertices[k])
            for i, j, k in TETRAHEDRON_FACES
        ]

    def transformed(self, matrix: Mat5) -> "Tetrahedron4d":
        return Tetrahedron4d(tuple(matrix.transform_point(p) for p in self.vertices))


def triangles_into_vertices(triangles: Iterable[Triangle]) -> List[MeshVertex]:
    """Flatten triangles into a vertex buffer, three entries per triangle."""
    buffer: List[MeshVertex] = []
    for tri in triangles:
        buffer.extend(tri.into_vertices())
    return buffer


__all__ = [
    "TETRAHEDRON_EDGES",
    "TETRAHEDRON_FACES",
    "MeshVertex",
    "Triangle",
    "Triangle4d",
    "Tetrahedron4d",
    "face_normal",
    "triangles_into_vertices",
]
