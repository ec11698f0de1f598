"""
Tests for the canonical shapes in catalog.py.

Besides a few literal corner checks, every triangulated solid must be a
closed 2-manifold with outward facing normals, and the 5-cell's
tetrahedra must close up into a 4D boundary.
"""

from __future__ import annotations

import sys
from pathlib import Path
import math
from itertools import combinations

import pytest

# Make the backend package importable when running tests directly via pytest
sys.path.append(str(Path(__file__).resolve().parents[1]))

from hyperslice.services.catalog import (
    PHI,
    unit_5cell,
    unit_5cell_tetrahedralized,
    unit_cube,
    unit_cube_triangulated,
    unit_icosahedron,
    unit_icosahedron_triangulized,
    unit_line,
    unit_square,
    unit_tetrahedron,
    unit_tetrahedron_triangulated,
    unit_triangle,
    unit_triangle_triangulated,
)
from hyperslice.services.mesh_validation import (
    has_outward_normals,
    is_closed_tetrahedral_mesh,
    is_closed_triangle_mesh,
)
from hyperslice.services.simplex import triangles_into_vertices
from hyperslice.services.vector import Vector, centroid, vec3, vec4

SOLIDS = {
    "cube": unit_cube_triangulated,
    "tetrahedron": unit_tetrahedron_triangulated,
    "icosahedron": unit_icosahedron_triangulized,
}


def test_unit_line_square_and_cube_corners() -> None:
    assert unit_line() == (-1.0, 1.0)
    assert unit_square() == [(-1.0, -1.0), (1.0, -1.0), (-1.0, 1.0), (1.0, 1.0)]
    cube = unit_cube()
    assert len(cube) == 8
    assert cube[0] == (-1.0, -1.0, -1.0)
    assert cube[3] == (1.0, 1.0, -1.0)
    assert cube[4] == (-1.0, -1.0, 1.0)
    assert cube[7] == (1.0, 1.0, 1.0)


def test_shapes_are_deterministic() -> None:
    assert unit_icosahedron() == unit_icosahedron()
    first = unit_cube_triangulated()
    second = unit_cube_triangulated()
    assert all(a.vertices == b.vertices for a, b in zip(first, second))


@pytest.mark.parametrize("name,expected", [("cube", 12), ("tetrahedron", 4), ("icosahedron", 20)])
def test_triangle_counts(name: str, expected: int) -> None:
    assert len(SOLIDS[name]()) == expected


@pytest.mark.parametrize("name", sorted(SOLIDS))
def test_solids_are_closed_with_outward_normals(name: str) -> None:
    triangles = SOLIDS[name]()
    assert is_closed_triangle_mesh(triangles)
    assert has_outward_normals(triangles, Vector.zero(3))
    for tri in triangles:
        assert math.isclose(tri.normal.len(), 1.0, rel_tol=1e-12)


def test_cube_normals_are_axis_aligned() -> None:
    for tri in unit_cube_triangulated():
        comps = sorted(abs(c) for c in tri.normal)
        assert comps == [0.0, 0.0, 1.0]


def test_icosahedron_geometry() -> None:
    corners = [vec3(*p) for p in unit_icosahedron()]
    assert len(corners) == 12
    radius = math.sqrt(1.0 + PHI * PHI)
    for p in corners:
        assert math.isclose(p.len(), radius, rel_tol=1e-12)
    for tri in unit_icosahedron_triangulized():
        for a, b in combinations(tri.vertices, 2):
            assert math.isclose((a - b).len(), 2.0, rel_tol=1e-12)


def test_tetrahedron_is_regular() -> None:
    corners = [vec3(*p) for p in unit_tetrahedron()]
    for a, b in combinations(corners, 2):
        assert math.isclose((a - b).len(), 2.0 * math.sqrt(2.0), rel_tol=1e-12)


def test_unit_triangle() -> None:
    corners = [Vector(p) for p in unit_triangle()]
    assert centroid(corners).approx_eq(Vector.zero(2), 1e-12)
    for a, b in combinations(corners, 2):
        assert math.isclose((a - b).len(), 2.0, rel_tol=1e-12)
    (tri,) = unit_triangle_triangulated()
    assert tri.normal.approx_eq(vec3(0.0, 0.0, 1.0), 1e-12)


def test_5cell_is_regular_and_centred() -> None:
    corners = [vec4(*p) for p in unit_5cell()]
    assert len(corners) == 5
    assert centroid(corners).approx_eq(Vector.zero(4), 1e-12)
    for a, b in combinations(corners, 2):
        assert math.isclose((a - b).len(), 2.0 * math.sqrt(2.0), rel_tol=1e-12)


def test_5cell_tetrahedralization_is_closed() -> None:
    tetrahedra = unit_5cell_tetrahedralized()
    assert len(tetrahedra) == 5
    assert is_closed_tetrahedral_mesh(tetrahedra)
    # The first four corners (the base) form the first tetrahedron.
    base = [vec4(*p) for p in unit_5cell()[:4]]
    assert list(tetrahedra[0].vertices) == base


def test_vertex_buffer_carries_face_normals() -> None:
    triangles = unit_cube_triangulated()
    buffer = triangles_into_vertices(triangles)
    assert len(buffer) == 3 * len(triangles)
    for i, tri in enumerate(triangles):
        for j, vertex in enumerate(buffer[3 * i:3 * i + 3]):
            assert vertex.position == tri.vertices[j]
            assert vertex.normal == tri.normal
