"""
Canonical polytopes, pre-split into simplices.

Every generator here is deterministic: it returns the same hand-written
corner list and triangulation (or tetrahedralisation) on each call.
Shapes are centred at the origin and use the "unit" convention of the
rest of the engine, i.e. coordinates of magnitude one (the unit cube
spans ``[-1, 1]`` on every axis).

3D solids are returned as lists of :class:`~.simplex.Triangle` with
outward facing normals.  The 5-cell, the only 4D solid, is returned as
a list of :class:`~.simplex.Tetrahedron4d`.
"""

from __future__ import annotations

import math
from itertools import combinations
from typing import List, Tuple

from .simplex import Tetrahedron4d, Triangle
from .vector import Vector, vec3, vec4

Point2 = Tuple[float, float]
Point3 = Tuple[float, float, float]
Point4 = Tuple[float, float, float, float]

# Golden ratio used by the icosahedron.
PHI = (1.0 + math.sqrt(5.0)) / 2.0

# Height of the equilateral unit triangle with side length 2.
TRIANGLE_HEIGHT = math.sqrt(3.0)

CUBE_TRIANGLES: Tuple[Tuple[int, int, int], ...] = (
    (0, 3, 1),
    (0, 2, 3),
    (0, 5, 4),
    (0, 1, 5),
    (1, 7, 5),
    (1, 3, 7),
    (2, 4, 6),
    (2, 0, 4),
    (3, 6, 7),
    (3, 2, 6),
    (4, 7, 6),
    (4, 5, 7),
)

ICOSAHEDRON_TRIANGLES: Tuple[Tuple[int, int, int], ...] = (
    (0, 11, 5),
    (0, 5, 1),
    (0, 1, 7),
    (0, 7, 10),
    (0, 10, 11),
    (1, 5, 9),
    (5, 11, 4),
    (11, 10, 2),
    (10, 7, 6),
    (7, 1, 8),
    (3, 9, 4),
    (3, 4, 2),
    (3, 2, 6),
    (3, 6, 8),
    (3, 8, 9),
    (4, 9, 5),
    (2, 4, 11),
    (6, 2, 10),
    (8, 6, 7),
    (9, 8, 1),
)


def unit_line() -> Tuple[float, float]:
    return (-1.0, 1.0)


def unit_square() -> List[Point2]:
    """Corners of the unit square, row by row: y=-1 first, then y=1."""
    return [(x, y) for y in unit_line() for x in unit_line()]


def unit_cube() -> List[Point3]:
    """Corners of the unit cube: the unit square at z=-1, then at z=1."""
    return [(x, y, z) for z in unit_line() for (x, y) in unit_square()]


def unit_cube_triangulated() -> List[Triangle]:
    """The unit cube as 12 triangles, two per face, normals outward."""
    corners = [vec3(*p) for p in unit_cube()]
    return [
        Triangle.from_vertices([corners[i] for i in ids]) for ids in CUBE_TRIANGLES
    ]


def unit_triangle() -> List[Point2]:
    """Equilateral triangle with side 2, centroid at the origin."""
    h = TRIANGLE_HEIGHT
    return [
        (-1.0, -h / 3.0),
        (1.0, -h / 3.0),
        (0.0, h * 2.0 / 3.0),
    ]


def unit_triangle_triangulated() -> List[Triangle]:
    """The unit triangle lying in the z=0 plane, normal along +z."""
    return [Triangle.from_vertices([vec3(x, y, 0.0) for (x, y) in unit_triangle()])]


def unit_tetrahedron() -> List[Point3]:
    """Regular tetrahedron on alternate corners of the unit cube."""
    return [
        (1.0, 1.0, 1.0),
        (1.0, -1.0, -1.0),
        (-1.0, 1.0, -1.0),
        (-1.0, -1.0, 1.0),
    ]


def unit_tetrahedron_triangulated() -> List[Triangle]:
    corners = [vec3(*p) for p in unit_tetrahedron()]
    origin = Vector.zero(3)
    return [
        Triangle.from_vertices(face).looking_away_from(origin)
        for face in combinations(corners, 3)
    ]


def unit_icosahedron() -> List[Point3]:
    """The 12 golden-ratio vertices ``(±1, ±phi, 0)`` and their cyclic shifts."""
    p = PHI
    return [
        (-1.0, p, 0.0),
        (1.0, p, 0.0),
        (-1.0, -p, 0.0),
        (1.0, -p, 0.0),
        (0.0, -1.0, p),
        (0.0, 1.0, p),
        (0.0, -1.0, -p),
        (0.0, 1.0, -p),
        (p, 0.0, -1.0),
        (p, 0.0, 1.0),
        (-p, 0.0, -1.0),
        (-p, 0.0, 1.0),
    ]


def unit_icosahedron_triangulized() -> List[Triangle]:
    corners = [vec3(*p) for p in unit_icosahedron()]
    return [
        Triangle.from_vertices([corners[i] for i in ids])
        for ids in ICOSAHEDRON_TRIANGLES
    ]


def unit_5cell() -> List[Point4]:
    """Regular 5-cell: the unit tetrahedron at ``w = -1/sqrt(5)`` plus an apex.

    The apex sits at ``w = 4/sqrt(5)`` so the five vertices are centred
    on the origin and every edge has the same length as the
    tetrahedron's edges.
    """
    root_five = math.sqrt(5.0)
    base = [(x, y, z, -1.0 / root_five) for (x, y, z) in unit_tetrahedron()]
    return base + [(0.0, 0.0, 0.0, 4.0 / root_five)]


def unit_5cell_tetrahedralized() -> List[Tetrahedron4d]:
    """The 5-cell's boundary: one tetrahedron per 4-subset of its vertices."""
    corners = [vec4(*p) for p in unit_5cell()]
    return [Tetrahedron4d(tuple(subset)) for subset in combinations(corners, 4)]


__all__ = [
    "PHI",
    "CUBE_TRIANGLES",
    "ICOSAHEDRON_TRIANGLES",
    "unit_line",
    "unit_square",
    "unit_cube",
    "unit_cube_triangulated",
    "unit_triangle",
    "unit_triangle_triangulated",
    "unit_tetrahedron",
    "unit_tetrahedron_triangulated",
    "unit_icosahedron",
    "unit_icosahedron_triangulized",
    "unit_5cell",
    "unit_5cell_tetrahedralized",
]
