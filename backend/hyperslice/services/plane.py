"""
Cutting a 3D triangle mesh with a plane.

A :class:`Plane` is the set of points ``p`` with
``dot(normalize(normal), p) == offset``.  The normal does not have to be
unit length; it is normalised on use.  Slicing a closed triangle mesh
with the plane yields the boundary of a flat polygon, which
:meth:`Plane.cross_sect` returns as an ordered ring of
:class:`PlaneSectionVertex` objects.  Each vertex carries both its world
space position (for drawing the section in 3D) and its coordinates in a
2D frame embedded in the plane (for drawing it flat).

How the ring is built:

1. Every triangle is intersected with the plane.  Only triangles whose
   edges cross the plane exactly twice contribute (a segment); a plane
   through a single vertex or along an edge contributes nothing.
2. Segment endpoints closer than ``sqrt(MERGE_DIST_SQR)`` to an already
   collected point are merged into it.
3. The points are sorted by their angle around the 2D centroid, which
   orders them counter-clockwise as seen from the side the normal points
   to.
4. Points lying on a straight run between their two neighbours are
   dropped.  Such points appear where the diagonal of a triangulated
   quad crosses the plane.

The angular sort is only correct for sections that are star-shaped
around their centroid (convex sections always are).  Concave or
multiply connected sections come out in a scrambled order.

Debug logging can be enabled via the ``SLICE_DEBUG`` environment
variable.
"""

from __future__ import annotations

import logging
import math
import os
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from .matrix import Mat4
from .simplex import Triangle
from .vector import Vector, vec2, vec3

logger = logging.getLogger(__name__)

# Segments whose endpoint distances differ by less than this are treated
# as parallel to the plane.
PARALLEL_EPS = 1e-5

# Squared distance under which two section points are the same point.
MERGE_DIST_SQR = 1e-5

# Sine of the turn angle under which a ring vertex counts as collinear.
COLLINEAR_EPS = 1e-5


def intersect_segment_by_distance(
    p1: Vector, p2: Vector, d1: float, d2: float
) -> Optional[Vector]:
    """Point where the segment ``p1 p2`` crosses a hyperplane.

    ``d1`` and ``d2`` are the signed distances of the endpoints.  Shared
    by :class:`Plane` and :class:`~.space.Space`.

    Returns:
        The crossing point, or ``None`` if the segment is (nearly)
        parallel to the hyperplane or does not reach it.
    """
    if abs(d1 - d2) < PARALLEL_EPS:
        return None
    t = d1 / (d1 - d2)
    if 0.0 <= t <= 1.0:
        return p1 + (p2 - p1) * t
    return None


@dataclass(frozen=True, eq=False)
class PlaneSectionVertex:
    """A point of a plane cross-section."""

    world_pos: Vector
    projected: Vector


@dataclass(frozen=True, eq=False)
class Plane:
    """Cutting plane in 3-space.

    Attributes:
        normal: Direction perpendicular to the plane.  Points on the side
            the normal points to have a positive :meth:`distance`.
        offset: Signed distance of the plane from the origin, measured
            along the normalised ``normal``.
    """

    normal: Vector
    offset: float = 0.0

    def __post_init__(self) -> None:
        if self.normal.degree != 3:
            raise ValueError(f"plane normal must be a vec3, got vec{self.normal.degree}")

    @property
    def unit_normal(self) -> Vector:
        return self.normal.normalize_or_zero()

    def distance(self, point: Vector) -> float:
        return self.unit_normal.dot(point) - self.offset

    def project(self, point: Vector) -> Vector:
        """Orthogonal projection of ``point`` onto the plane."""
        return point - self.unit_normal * self.distance(point)

    def angles(self) -> Tuple[float, float]:
        """Spherical angles ``(rot_h, rot_v)`` of the normal.

        ``rot_h`` is the heading of the normal's (x, z) components and
        ``rot_v`` its elevation toward y.
        """
        n = self.unit_normal
        flat = vec2(n.x, n.z)
        return flat.arg(), vec2(flat.len(), n.y).arg()

    def matrix(self) -> Mat4:
        """Rigid transform taking the plane onto the local ``x = 0`` plane.

        The plane normal becomes the local x axis, so the local (z, y)
        coordinates of a projected point are its 2D position in the
        plane.
        """
        rot_h, rot_v = self.angles()
        return (
            Mat4.rotate_z(-rot_v)
            * Mat4.rotate_y(rot_h)
            * Mat4.translate(-self.unit_normal * self.offset)
        )

    def project2d(self, point: Vector) -> Vector:
        local = self.matrix().transform_point(self.project(point))
        return vec2(local.z, local.y)

    def intersect_segment(self, p1: Vector, p2: Vector) -> Optional[Vector]:
        return intersect_segment_by_distance(p1, p2, self.distance(p1), self.distance(p2))

    def intersect_triangle(self, triangle: Triangle) -> Optional[Tuple[Vector, Vector]]:
        """Segment where ``triangle`` crosses the plane.

        Returns:
            The two crossing points if exactly two edges cross the plane,
            otherwise ``None``.
        """
        a, b, c = triangle.vertices
        points = [
            p
            for p in (
                self.intersect_segment(a, b),
                self.intersect_segment(a, c),
                self.intersect_segment(b, c),
            )
            if p is not None
        ]
        if len(points) == 2:
            return points[0], points[1]
        return None

    def cross_sect(
        self,
        geometry: Iterable[Triangle],
        merge_collinear: bool = True,
    ) -> List[PlaneSectionVertex]:
        """Cross-section of a triangle mesh with the plane.

        Args:
            geometry: Triangles in world coordinates.
            merge_collinear: Drop ring vertices that lie on a straight
                line between their neighbours.

        Returns:
            The section boundary in counter-clockwise order, possibly
            with fewer than three points (nothing visible) or empty.
        """
        points: List[PlaneSectionVertex] = []
        total = 0
        hits = 0
        for triangle in geometry:
            total += 1
            segment = self.intersect_triangle(triangle)
            if segment is None:
                continue
            hits += 1
            for p in segment:
                if any((q.world_pos - p).len_sqr() < MERGE_DIST_SQR for q in points):
                    continue
                points.append(PlaneSectionVertex(world_pos=p, projected=self.project2d(p)))

        if points:
            center = vec2(
                sum(p.projected.x for p in points) / len(points),
                sum(p.projected.y for p in points) / len(points),
            )
            points.sort(key=lambda p: -(p.projected - center).arg())

        raw_count = len(points)
        if merge_collinear and len(points) > 3:
            points = _drop_collinear(points)

        if os.getenv("SLICE_DEBUG"):
            logger.debug(
                "Plane.cross_sect: normal=%s offset=%s triangles=%d crossing=%d points=%d (raw %d)",
                self.normal,
                self.offset,
                total,
                hits,
                len(points),
                raw_count,
            )
        return points


def _drop_collinear(ring: List[PlaneSectionVertex]) -> List[PlaneSectionVertex]:
    """Remove ring vertices whose neighbours are on a straight line through them."""
    n = len(ring)
    keep: List[PlaneSectionVertex] = []
    for i in range(n):
        prev = ring[i - 1].projected
        cur = ring[i].projected
        nxt = ring[(i + 1) % n].projected
        e1 = cur - prev
        e2 = nxt - cur
        norm = e1.len() * e2.len()
        if norm == 0.0:
            keep.append(ring[i])
            continue
        turn = (e1.x * e2.y - e1.y * e2.x) / norm
        straight = e1.dot(e2) > 0.0
        if abs(turn) < COLLINEAR_EPS and straight:
            continue
        keep.append(ring[i])
    return keep


_AXIS_NORMALS = {
    "x": vec3(1.0, 0.0, 0.0),
    "y": vec3(0.0, 1.0, 0.0),
    "z": vec3(0.0, 0.0, 1.0),
}


def make_plane(axis: str, offset: float = 0.0) -> Plane:
    """Construct an axis-aligned :class:`Plane`.

    Args:
        axis: ``"x"``, ``"y"`` or ``"z"`` (case insensitive), optionally
            prefixed with ``"-"`` to flip the normal.
        offset: Signed distance along the (possibly flipped) normal.

    Raises:
        ValueError: If ``axis`` is not recognised.
    """
    key = (axis or "").strip().lower()
    sign = 1.0
    if key.startswith("-"):
        sign = -1.0
        key = key[1:]
    if key not in _AXIS_NORMALS:
        raise ValueError(f"unknown plane axis: {axis!r}")
    plane = Plane(normal=_AXIS_NORMALS[key] * sign, offset=float(offset))
    if os.getenv("SLICE_DEBUG"):
        logger.debug("Plane created: axis=%s normal=%s offset=%s", axis, plane.normal, plane.offset)
    return plane


__all__ = [
    "PARALLEL_EPS",
    "MERGE_DIST_SQR",
    "COLLINEAR_EPS",
    "Plane",
    "PlaneSectionVertex",
    "intersect_segment_by_distance",
    "make_plane",
]
