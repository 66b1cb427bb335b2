"""
MiniTrace - A minimal Python ray tracer

Casts rays from a pinhole camera into a scene of spheres and shades them
with diffuse bounces against a sky gradient:
- Vector math on single precision components
- Ray-sphere intersection and nearest-hit scenes
- Iterative diffuse path tracing
- Multi-threaded tile rendering with PPM/PNG output
"""

__version__ = "0.1.0"

from .vec3 import Vec3, Point3, Color
from .ray import Ray, ray_color, sky_color
from .shapes import HitRecord, Hittable, Sphere, Scene
from .camera import Camera
from .renderer import Renderer, RenderSettings, write_ppm
