"""
Pydantic data models for cross-section results.

These models define the shape of what the slicing engine hands to a
renderer: an ordered boundary ring for a plane section and a list of
outward facing triangles for a 4D section.  Keeping the schemas in one
place makes the contract between the engine and its consumers explicit
and lets results be serialised with ``model_dump()`` /
``model_dump_json()``.
"""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field


class SectionPoint(BaseModel):
    """One vertex of a plane cross-section."""

    worldPos: List[float] = Field(..., description="World space position (x, y, z)")
    projected: List[float] = Field(..., description="Position (u, v) in the plane's own 2D frame")


class PlaneSectionResponse(BaseModel):
    """Boundary of a 3D object's cross-section with a plane."""

    points: List[SectionPoint] = Field(
        default_factory=list,
        description="Boundary points in counter-clockwise order; empty when nothing is visible",
    )
    visible: bool = Field(..., description="True when the section has at least three points")


class SectionTriangle(BaseModel):
    """One triangle of a 4D object's cross-section, already in 3-space."""

    vertices: List[List[float]] = Field(..., description="Three (x, y, z) vertex positions")
    normal: List[float] = Field(..., description="Unit normal facing away from the section's centre")


class SpaceSectionResponse(BaseModel):
    """Cross-section of a 4D object with the hyperplane ``w = offset``."""

    offset: float = Field(..., description="Position of the hyperplane along the w axis")
    triangles: List[SectionTriangle] = Field(
        default_factory=list,
        description="Outward oriented triangles; empty when the hyperplane misses the object",
    )

    @property
    def visible(self) -> bool:
        return bool(self.triangles)
