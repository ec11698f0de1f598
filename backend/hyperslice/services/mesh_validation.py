"""
Topology checks for simplicial meshes.

These helpers verify that a mesh bounds a closed volume: a triangle
mesh is closed when every edge is shared by exactly two triangles, and
a tetrahedral mesh (the boundary of a 4D solid) is closed when every
triangular face is shared by exactly two tetrahedra.

Meshes here are "triangle soups" without an index buffer, so vertices
are identified by their coordinates after snapping each component to a
multiple of ``eps``.  Vertices closer than ``eps`` therefore compare
equal.
"""

from __future__ import annotations

import logging
import os
from collections import Counter
from itertools import combinations
from typing import Dict, FrozenSet, Iterable, Tuple

from .simplex import Tetrahedron4d, Triangle
from .vector import Vector

logger = logging.getLogger(__name__)

SNAP_EPS = 1e-6

PointKey = Tuple[int, ...]


def point_key(p: Vector, eps: float = SNAP_EPS) -> PointKey:
    """Hashable key for a point, snapped to a grid of size ``eps``."""
    if eps <= 0.0:
        raise ValueError("eps must be positive for snapping")
    return tuple(int(round(c / eps)) for c in p)


def edge_use_counts(
    triangles: Iterable[Triangle], eps: float = SNAP_EPS
) -> Dict[FrozenSet[PointKey], int]:
    """Count how many triangles use each undirected edge."""
    counts: Counter = Counter()
    for tri in triangles:
        keys = [point_key(p, eps) for p in tri.vertices]
        for a, b in combinations(keys, 2):
            counts[frozenset((a, b))] += 1
    return dict(counts)


def is_closed_triangle_mesh(triangles: Iterable[Triangle], eps: float = SNAP_EPS) -> bool:
    counts = edge_use_counts(triangles, eps)
    if not counts:
        return False
    open_edges = [edge for edge, n in counts.items() if n != 2]
    if open_edges and os.getenv("SLICE_DEBUG"):
        logger.debug(
            "is_closed_triangle_mesh: %d of %d edges not shared by exactly two triangles",
            len(open_edges),
            len(counts),
        )
    return not open_edges


def face_use_counts(
    tetrahedra: Iterable[Tetrahedron4d], eps: float = SNAP_EPS
) -> Dict[FrozenSet[PointKey], int]:
    """Count how many tetrahedra use each triangular face."""
    counts: Counter = Counter()
    for tet in tetrahedra:
        for face in tet.faces():
            counts[frozenset(point_key(p, eps) for p in face)] += 1
    return dict(counts)


def is_closed_tetrahedral_mesh(
    tetrahedra: Iterable[Tetrahedron4d], eps: float = SNAP_EPS
) -> bool:
    counts = face_use_counts(tetrahedra, eps)
    if not counts:
        return False
    open_faces = [face for face, n in counts.items() if n != 2]
    if open_faces and os.getenv("SLICE_DEBUG"):
        logger.debug(
            "is_closed_tetrahedral_mesh: %d of %d faces not shared by exactly two tetrahedra",
            len(open_faces),
            len(counts),
        )
    return not open_faces


def has_outward_normals(triangles: Iterable[Triangle], center: Vector) -> bool:
    """True if every triangle's normal points away from ``center``.

    Only meaningful for meshes that are star-shaped around ``center``.
    """
    return all(tri.normal.dot(tri.center() - center) > 0.0 for tri in triangles)


__all__ = [
    "point_key",
    "edge_use_counts",
    "is_closed_triangle_mesh",
    "face_use_counts",
    "is_closed_tetrahedral_mesh",
    "has_outward_normals",
]
