"""
Demo driver for the slicing engine.

Builds a small scene out of the catalog shapes, slices it the way a
host application would on one frame and returns the serialised
results.  ``run.py`` at the repository root prints them as JSON.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Dict, List

from .services.catalog import (
    unit_5cell_tetrahedralized,
    unit_cube_triangulated,
    unit_icosahedron_triangulized,
)
from .services.plane import make_plane
from .services.pose import Pose3, Pose4
from .services.sections import section_scene_3d, section_sweep_4d
from .services.vector import vec3, vec4

logger = logging.getLogger(__name__)

DEFAULT_SWEEP_STEPS = 9


def sweep_offsets(lo: float, hi: float, steps: int) -> List[float]:
    if steps < 2:
        raise ValueError("a sweep needs at least two steps")
    return [lo + (hi - lo) * i / (steps - 1) for i in range(steps)]


def build_demo(steps: int = DEFAULT_SWEEP_STEPS) -> Dict[str, Any]:
    """Slice a two-object 3D scene with z = 0 and sweep the 5-cell along w."""
    cube = unit_cube_triangulated()
    ico = unit_icosahedron_triangulized()
    scene = [
        (cube, Pose3(position=vec3(-2.0, 0.0, 0.25), orientation=vec3(1.0, 0.5, 0.3), roll=math.radians(30.0))),
        (ico, Pose3(position=vec3(2.5, 0.0, -0.5), scale=0.8)),
        (cube, Pose3(position=vec3(0.0, 0.0, -5.0))),
    ]
    plane = make_plane("z", 0.0)
    flat = section_scene_3d(scene, plane)
    logger.info("3D scene: %d of %d objects cross the plane", len(flat), len(scene))

    pose = Pose4(position=vec4(0.0, 0.0, 0.0, 0.0), orientation=vec4(1.0, 0.2, 0.1, 0.4))
    sweep = section_sweep_4d(unit_5cell_tetrahedralized(), pose, sweep_offsets(-1.0, 1.0, steps))
    logger.info(
        "5-cell sweep: %s",
        ", ".join(f"w={s.offset:+.2f}:{len(s.triangles)}" for s in sweep),
    )
    return {
        "plane": {str(index): resp.model_dump() for index, resp in flat},
        "space": [resp.model_dump() for resp in sweep],
    }
