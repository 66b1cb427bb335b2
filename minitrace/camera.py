"""
Camera module for generating primary rays.

A fixed pinhole camera: every ray starts at the camera origin and passes
through a point on a rectangular image plane spanned by two vectors.
"""

from __future__ import annotations
from typing import Optional

from .vec3 import Vec3, Point3
from .ray import Ray


class Camera:
    """A pinhole camera looking down -Z with a 2:1 image plane by default."""

    def __init__(
        self,
        origin: Optional[Point3] = None,
        lower_left_corner: Optional[Point3] = None,
        horizontal: Optional[Vec3] = None,
        vertical: Optional[Vec3] = None
    ):
        """Create a camera.

        Args:
            origin: Camera position in world space
            lower_left_corner: Bottom-left corner of the image plane
            horizontal: Full width of the image plane as a vector
            vertical: Full height of the image plane as a vector
        """
        # Own copies so later edits to the arguments cannot move the camera
        self.origin = origin.copy() if origin is not None else Point3(0.0, 0.0, 0.0)
        self.lower_left_corner = (
            lower_left_corner.copy() if lower_left_corner is not None
            else Point3(-2.0, -1.0, -1.0)
        )
        self.horizontal = horizontal.copy() if horizontal is not None else Vec3(4.0, 0.0, 0.0)
        self.vertical = vertical.copy() if vertical is not None else Vec3(0.0, 2.0, 0.0)

    def get_ray(self, u: float, v: float) -> Ray:
        """Generate a ray for the given UV coordinates on the image plane.

        Args:
            u: Horizontal coordinate (0 = left, 1 = right)
            v: Vertical coordinate (0 = bottom, 1 = top)

        Returns:
            A ray from the camera origin through the image plane point.
            The direction is left unnormalized.
        """
        direction = (
            self.lower_left_corner
            + self.horizontal * u
            + self.vertical * v
            - self.origin
        )
        return Ray(self.origin.copy(), direction)

    def __repr__(self) -> str:
        return f"Camera(origin={self.origin}, lower_left_corner={self.lower_left_corner})"
