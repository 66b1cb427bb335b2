"""
Geometric shapes for the ray tracer.

Each shape must implement the Hittable interface with a `hit` method.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional
import math

from .vec3 import Vec3, Point3
from .ray import Ray


@dataclass
class HitRecord:
    """Stores information about a ray-object intersection.

    Attributes:
        point: The intersection point in world space, equal to ray.at(t)
        normal: The outward unit surface normal at the intersection
        t: The ray parameter at intersection
    """
    point: Point3
    normal: Vec3
    t: float


class Hittable(ABC):
    """Abstract base class for all objects that can be hit by rays."""

    @abstractmethod
    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        """Test if ray intersects this object.

        Args:
            ray: The ray to test
            t_min: Exclusive lower bound on t (avoids self-intersection)
            t_max: Exclusive upper bound on t

        Returns:
            HitRecord for the nearest intersection in (t_min, t_max), None otherwise
        """


class Sphere(Hittable):
    """A sphere defined by center and radius."""

    def __init__(self, center: Point3, radius: float):
        """Create a sphere.

        Args:
            center: Center point of the sphere
            radius: Radius of the sphere, must be positive

        Raises:
            ValueError: if radius is not a positive finite number
        """
        if not math.isfinite(radius) or radius <= 0:
            raise ValueError(f"sphere radius must be positive, got {radius}")
        self.center = center.copy()
        self.radius = radius

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        """Test ray-sphere intersection using the quadratic formula.

        The equation (P-C)·(P-C) = r² where P = ray.at(t)
        expands to: t²(d·d) + 2t(d·(O-C)) + (O-C)·(O-C) - r² = 0.
        With half_b = d·(O-C) the roots are (-half_b ± sqrt(half_b² - ac)) / a.
        A tangent ray (zero discriminant) counts as a miss.
        """
        oc = ray.origin - self.center
        a = ray.direction.length_squared()
        half_b = oc.dot(ray.direction)
        c = oc.length_squared() - self.radius * self.radius

        discriminant = half_b * half_b - a * c
        if discriminant <= 0:
            return None

        sqrtd = math.sqrt(discriminant)

        # Near root first so the visible side wins when both are in range
        for root in ((-half_b - sqrtd) / a, (-half_b + sqrtd) / a):
            if t_min < root < t_max:
                point = ray.at(root)
                return HitRecord(
                    point=point,
                    normal=(point - self.center) / self.radius,
                    t=root
                )

        return None

    def __repr__(self) -> str:
        return f"Sphere(center={self.center}, radius={self.radius})"


class Scene(Hittable):
    """An ordered collection of hittable objects."""

    def __init__(self, objects: Optional[list[Hittable]] = None):
        self.objects: list[Hittable] = list(objects) if objects is not None else []

    @classmethod
    def reference(cls) -> Scene:
        """The fixed two-sphere scene: a small sphere resting on a huge one."""
        return cls([
            Sphere(Point3(0.0, 0.0, -1.0), 0.5),
            Sphere(Point3(0.0, -100.5, -1.0), 100.0),
        ])

    def add(self, obj: Hittable) -> None:
        """Add an object to the scene."""
        self.objects.append(obj)

    def clear(self) -> None:
        """Remove all objects."""
        self.objects.clear()

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        """Find the closest intersection among all objects.

        The upper bound shrinks to the best hit so far, so any object that
        only intersects farther away is rejected by its own range test.
        """
        closest_hit: Optional[HitRecord] = None
        closest_t = t_max

        for obj in self.objects:
            hit_record = obj.hit(ray, t_min, closest_t)
            if hit_record is not None:
                closest_hit = hit_record
                closest_t = hit_record.t

        return closest_hit

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self):
        return iter(self.objects)

    def __repr__(self) -> str:
        return f"Scene({len(self.objects)} objects)"
