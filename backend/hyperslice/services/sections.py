"""
Section service: from an object's local mesh and pose to a response.

This is the entry point a host application calls once per frame.  It
transforms an object's local simplices into world space with the pose
matrix, slices them with a :class:`~.plane.Plane` or
:class:`~.space.Space` and packages the result as the pydantic models
defined in :mod:`hyperslice.api.models`.

A plane section with fewer than three points has no area to draw; it
is reported as invisible and carries no points.
"""

from __future__ import annotations

import logging
import os
from typing import Iterable, List, Sequence, Tuple

from ..api.models import (
    PlaneSectionResponse,
    SectionPoint,
    SectionTriangle,
    SpaceSectionResponse,
)
from .plane import Plane, PlaneSectionVertex
from .pose import Pose3, Pose4
from .simplex import Tetrahedron4d, Triangle
from .space import Space

logger = logging.getLogger(__name__)

MIN_VISIBLE_POINTS = 3


def world_triangles(triangles: Iterable[Triangle], pose: Pose3) -> List[Triangle]:
    """Transform local triangles into world space."""
    matrix = pose.matrix()
    return [tri.transformed(matrix) for tri in triangles]


def world_tetrahedra(tetrahedra: Iterable[Tetrahedron4d], pose: Pose4) -> List[Tetrahedron4d]:
    matrix = pose.matrix()
    return [tet.transformed(matrix) for tet in tetrahedra]


def plane_section_response(section: Sequence[PlaneSectionVertex]) -> PlaneSectionResponse:
    if len(section) < MIN_VISIBLE_POINTS:
        return PlaneSectionResponse(points=[], visible=False)
    return PlaneSectionResponse(
        points=[
            SectionPoint(worldPos=v.world_pos.tolist(), projected=v.projected.tolist())
            for v in section
        ],
        visible=True,
    )


def space_section_response(offset: float, triangles: Sequence[Triangle]) -> SpaceSectionResponse:
    return SpaceSectionResponse(
        offset=offset,
        triangles=[
            SectionTriangle(
                vertices=[p.tolist() for p in tri.vertices],
                normal=tri.normal.tolist(),
            )
            for tri in triangles
        ],
    )


def section_object_3d(
    triangles: Iterable[Triangle], pose: Pose3, plane: Plane
) -> PlaneSectionResponse:
    """Slice one posed 3D object with ``plane``."""
    section = plane.cross_sect(world_triangles(triangles, pose))
    return plane_section_response(section)


def section_object_4d(
    tetrahedra: Iterable[Tetrahedron4d], pose: Pose4, space: Space
) -> SpaceSectionResponse:
    """Slice one posed 4D object with ``space``."""
    triangles = space.cross_sect(world_tetrahedra(tetrahedra, pose))
    return space_section_response(space.offset, triangles)


def section_scene_3d(
    objects: Iterable[Tuple[Sequence[Triangle], Pose3]], plane: Plane
) -> List[Tuple[int, PlaneSectionResponse]]:
    """Slice every object of a scene, keeping only visible sections.

    Args:
        objects: ``(local triangles, pose)`` pairs.
        plane: The cutting plane shared by all objects.

    Returns:
        ``(index, response)`` pairs, where ``index`` is the object's
        position in ``objects``.
    """
    visible: List[Tuple[int, PlaneSectionResponse]] = []
    count = 0
    for index, (triangles, pose) in enumerate(objects):
        count += 1
        response = section_object_3d(triangles, pose, plane)
        if response.visible:
            visible.append((index, response))
    if os.getenv("SLICE_DEBUG"):
        logger.debug("section_scene_3d: objects=%d visible=%d", count, len(visible))
    return visible


def section_sweep_4d(
    tetrahedra: Sequence[Tetrahedron4d], pose: Pose4, offsets: Iterable[float]
) -> List[SpaceSectionResponse]:
    """Slice one posed 4D object at several hyperplane offsets.

    The mesh is transformed once and reused for every offset.
    """
    world = world_tetrahedra(tetrahedra, pose)
    responses: List[SpaceSectionResponse] = []
    for offset in offsets:
        space = Space(offset=float(offset))
        responses.append(space_section_response(space.offset, space.cross_sect(world)))
    return responses


__all__ = [
    "MIN_VISIBLE_POINTS",
    "world_triangles",
    "world_tetrahedra",
    "plane_section_response",
    "space_section_response",
    "section_object_3d",
    "section_object_4d",
    "section_scene_3d",
    "section_sweep_4d",
]
