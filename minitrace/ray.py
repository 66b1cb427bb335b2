"""
Ray class for representing rays in 3D space, and the diffuse shading loop.

A ray is defined by an origin point and a direction vector.
Ray(t) = origin + t * direction
"""

from __future__ import annotations
from typing import Optional, TYPE_CHECKING
import numpy as np

from .vec3 import Vec3, Point3, Color

if TYPE_CHECKING:
    from .shapes import Hittable

# Lower bound of the hit interval for every scene query; keeps bounce rays
# from re-hitting the surface they start on.
T_MIN = 0.001

# Fraction of energy kept at each diffuse bounce
ALBEDO = 0.5

WHITE = (1.0, 1.0, 1.0)
SKY_BLUE = (0.5, 0.7, 1.0)


class Ray:
    """A ray with origin and direction.

    The parametric form is: P(t) = origin + t * direction.
    The direction is not required to be unit length.
    """

    __slots__ = ('origin', 'direction')

    def __init__(self, origin: Point3, direction: Vec3):
        self.origin = origin
        self.direction = direction

    def at(self, t: float) -> Point3:
        """Get the point along the ray at parameter t.

        Args:
            t: The parameter value (any real number, including negatives)

        Returns:
            The point at origin + t * direction
        """
        return self.origin + self.direction * t

    point_at = at

    def color(
        self,
        scene: Hittable,
        depth: int,
        rng: Optional[np.random.Generator] = None
    ) -> Color:
        """Shade this ray against a scene. See :func:`ray_color`."""
        return ray_color(self, scene, depth, rng)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Ray):
            return NotImplemented
        return self.origin == other.origin and self.direction == other.direction

    __hash__ = None

    def __repr__(self) -> str:
        return f"Ray(origin={self.origin}, direction={self.direction})"


def sky_color(ray: Ray) -> Color:
    """Vertical background gradient, white at the bottom to sky blue at the top.

    Raises:
        ZeroDivisionError: if the ray direction is the zero vector
    """
    unit_direction = ray.direction.normalize()
    t = 0.5 * (unit_direction.y + 1.0)
    return Color(*WHITE) * (1.0 - t) + Color(*SKY_BLUE) * t


def ray_color(
    ray: Ray,
    scene: Hittable,
    depth: int,
    rng: Optional[np.random.Generator] = None
) -> Color:
    """Compute the color seen along a ray using diffuse path tracing.

    Every surface scatters towards a random point in the unit sphere tangent
    to the hit point and keeps ALBEDO of the incoming energy. The path ends
    when it escapes to the sky or when `depth` bounces have been spent, in
    which case the contribution is black.

    The bounce loop keeps a running attenuation instead of recursing, so the
    call stack stays flat for any depth.

    Args:
        ray: The ray to trace
        scene: Anything with a `hit(ray, t_min, t_max)` method
        depth: Maximum number of scene queries along the path
        rng: Generator for bounce directions (process-wide numpy state if None)

    Returns:
        The linear RGB color carried back along the ray
    """
    if depth < 0:
        raise ValueError(f"depth must be non-negative, got {depth}")

    attenuation = 1.0
    for _ in range(depth):
        hit_record = scene.hit(ray, T_MIN, float('inf'))

        if hit_record is None:
            return sky_color(ray) * attenuation

        target = hit_record.point + hit_record.normal + Vec3.random_in_unit_sphere(rng)
        ray = Ray(hit_record.point, target - hit_record.point)
        attenuation *= ALBEDO

    return Color(0.0, 0.0, 0.0)
