"""
Object poses and their object-to-world transforms.

An object in the scene is placed by a position, an orientation vector,
a roll angle and a uniform scale.  These are never applied piecewise;
:meth:`Pose3.matrix` and :meth:`Pose4.matrix` compose them into one
affine matrix, always in the same order (read right to left):

    translate * roll * rotations from the orientation * scale

The orientation vector is reduced to successive 2D rotations by taking
the ``arg`` of 2D projections of its components: first the heading in
the (x, z) plane, then the elevation of the (x, z) length toward y and,
in 4D, the elevation of the (x, y, z) length toward w.

Poses are frozen; the ``rotated_*`` helpers return new poses.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from typing import Tuple

from .matrix import Mat4, Mat5
from .vector import UNIT_X3, UNIT_X4, Vector, vec2


@dataclass(frozen=True, eq=False)
class Pose3:
    """Placement of a 3D object."""

    position: Vector
    orientation: Vector = field(default_factory=lambda: UNIT_X3)
    roll: float = 0.0
    scale: float = 1.0

    def angles(self) -> Tuple[float, float]:
        """``(rot_h, rot_v)`` decomposition of the orientation."""
        o = self.orientation
        flat = vec2(o.x, o.z)
        return flat.arg(), vec2(flat.len(), o.y).arg()

    def matrix(self) -> Mat4:
        rot_h, rot_v = self.angles()
        return (
            Mat4.translate(self.position)
            * Mat4.rotate_x(self.roll)
            * Mat4.rotate_z(-rot_v)
            * Mat4.rotate_y(rot_h)
            * Mat4.scale_uniform(self.scale)
        )

    def inverse_matrix(self) -> Mat4:
        """Inverse of :meth:`matrix`, composed from the inverse primitives."""
        rot_h, rot_v = self.angles()
        return (
            Mat4.scale_uniform(1.0 / self.scale)
            * Mat4.rotate_y(-rot_h)
            * Mat4.rotate_z(rot_v)
            * Mat4.rotate_x(-self.roll)
            * Mat4.translate(-self.position)
        )

    def rotated_y(self, angle: float) -> "Pose3":
        """Yaw the orientation by ``angle`` in its (x, z) components."""
        o = self.orientation
        flat = vec2(o.x, o.z).rotate(angle)
        return replace(self, orientation=Vector((flat.x, o.y, flat.y)))

    def translated(self, delta: Vector) -> "Pose3":
        return replace(self, position=self.position + delta)


@dataclass(frozen=True, eq=False)
class Pose4:
    """Placement of a 4D object."""

    position: Vector
    orientation: Vector = field(default_factory=lambda: UNIT_X4)
    roll: float = 0.0
    scale: float = 1.0

    def angles(self) -> Tuple[float, float, float]:
        """``(rot_h, rot_v, rot_w)`` decomposition of the orientation."""
        o = self.orientation
        flat = vec2(o.x, o.z)
        rot_h = flat.arg()
        rot_v = vec2(flat.len(), o.y).arg()
        rot_w = vec2(math.sqrt(o.x * o.x + o.y * o.y + o.z * o.z), o.w).arg()
        return rot_h, rot_v, rot_w

    def matrix(self) -> Mat5:
        rot_h, rot_v, rot_w = self.angles()
        return (
            Mat5.translate(self.position)
            * Mat5.rotate_yz(self.roll)
            * Mat5.rotate_xw(-rot_w)
            * Mat5.rotate_xy(-rot_v)
            * Mat5.rotate_xz(-rot_h)
            * Mat5.scale_uniform(self.scale)
        )

    def inverse_matrix(self) -> Mat5:
        rot_h, rot_v, rot_w = self.angles()
        return (
            Mat5.scale_uniform(1.0 / self.scale)
            * Mat5.rotate_xz(rot_h)
            * Mat5.rotate_xy(rot_v)
            * Mat5.rotate_xw(rot_w)
            * Mat5.rotate_yz(-self.roll)
            * Mat5.translate(-self.position)
        )

    def rotated_xz(self, angle: float) -> "Pose4":
        o = self.orientation
        flat = vec2(o.x, o.z).rotate(angle)
        return replace(self, orientation=Vector((flat.x, o.y, flat.y, o.w)))

    def translated(self, delta: Vector) -> "Pose4":
        return replace(self, position=self.position + delta)


__all__ = ["Pose3", "Pose4"]
