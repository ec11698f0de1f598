"""
Cutting a 4D tetrahedral mesh with a hyperplane.

:class:`Space` is the 4D counterpart of :class:`~.plane.Plane`: the
3-dimensional hyperplane ``w == offset``.  Its normal is fixed to the
unit w axis, so unlike a plane it only stores an offset.

A tetrahedron crossing the hyperplane is cut either near a corner (three
edges cross, giving a triangle) or through its middle (four edges
cross, giving a quadrilateral that is split into two triangles).  The
resulting triangles are projected into 3-space by dropping w and turned
so that their normals face away from the centroid of the whole section.
Like the angular sort of the plane section, that orientation rule
assumes the section is star-shaped around its centroid.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Iterable, List, Optional

from .matrix import Mat5
from .plane import intersect_segment_by_distance
from .simplex import Tetrahedron4d, Triangle, Triangle4d
from .vector import UNIT_W4, Vector, centroid

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Space:
    """The hyperplane ``w == offset`` in 4-space."""

    offset: float = 0.0

    @property
    def normal(self) -> Vector:
        return UNIT_W4

    def distance(self, point: Vector) -> float:
        return UNIT_W4.dot(point) - self.offset

    def project(self, point: Vector) -> Vector:
        return point - UNIT_W4 * self.distance(point)

    def matrix(self) -> Mat5:
        """Homogeneous transform moving the hyperplane onto ``w = 0``."""
        return Mat5.translate(-UNIT_W4 * self.offset)

    def project3d(self, point: Vector) -> Vector:
        local = self.matrix().transform_point(self.project(point))
        return local.xyz

    def intersect_segment(self, p1: Vector, p2: Vector) -> Optional[Vector]:
        return intersect_segment_by_distance(p1, p2, self.distance(p1), self.distance(p2))

    def intersect_tetrahedron(self, tetrahedron: Tetrahedron4d) -> List[Triangle4d]:
        """Slice one tetrahedron.

        Returns:
            One triangle when three edges cross, two triangles when four
            edges cross, and nothing for any other count.
        """
        points = [
            p
            for p in (self.intersect_segment(p1, p2) for p1, p2 in tetrahedron.edges())
            if p is not None
        ]
        if len(points) == 3:
            a, b, c = points
            return [Triangle4d((a, b, c))]
        if len(points) == 4:
            # Edge order puts the quad's diagonal between the 2nd and 3rd hits.
            a, b, c, d = points
            return [Triangle4d((a, b, c)), Triangle4d((d, c, b))]
        return []

    def cross_sect(self, geometry: Iterable[Tetrahedron4d]) -> List[Triangle]:
        """Cross-section of a tetrahedral mesh, as outward facing 3D triangles."""
        triangles: List[Triangle] = []
        total = 0
        for tetrahedron in geometry:
            total += 1
            for tri in self.intersect_tetrahedron(tetrahedron):
                triangles.append(
                    Triangle.from_vertices([self.project3d(v) for v in tri.vertices])
                )

        if os.getenv("SLICE_DEBUG"):
            logger.debug(
                "Space.cross_sect: offset=%s tetrahedra=%d triangles=%d",
                self.offset,
                total,
                len(triangles),
            )
        if not triangles:
            return []

        center = centroid(v for tri in triangles for v in tri.vertices)
        return [tri.looking_away_from(center) for tri in triangles]


__all__ = ["Space"]
