"""
Renderer module - drives the pixel loop around the shading core.

Implements:
- Jittered multi-sample pixels
- Multi-threaded tile-based rendering with reproducible seeding
- Gamma 2 conversion to 8-bit
- Plain-text PPM output (other formats through Pillow)
"""

from __future__ import annotations
import logging
import os
import threading
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Callable, Tuple, Union
import numpy as np

from .camera import Camera
from .ray import ray_color
from .shapes import Hittable

logger = logging.getLogger(__name__)

Tile = Tuple[int, int, int, int]


@dataclass
class RenderSettings:
    """Configuration for the renderer."""
    width: int = 400
    height: int = 200
    samples_per_pixel: int = 100
    max_depth: int = 50
    tile_size: int = 32
    num_threads: int = 0  # 0 = auto-detect
    seed: Optional[int] = None

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"image size must be positive, got {self.width}x{self.height}")
        if self.samples_per_pixel <= 0:
            raise ValueError(f"samples_per_pixel must be positive, got {self.samples_per_pixel}")
        if self.max_depth < 0:
            raise ValueError(f"max_depth must be non-negative, got {self.max_depth}")
        if self.tile_size <= 0:
            raise ValueError(f"tile_size must be positive, got {self.tile_size}")
        if self.num_threads == 0:
            self.num_threads = os.cpu_count() or 4


class Renderer:
    """Diffuse path tracing renderer with multi-threading support."""

    def __init__(self, settings: Optional[RenderSettings] = None):
        """Create a renderer with the given settings.

        Args:
            settings: Render configuration (uses defaults if None)
        """
        self.settings = settings if settings else RenderSettings()
        self._progress_callback: Optional[Callable[[float], None]] = None

    def set_progress_callback(self, callback: Callable[[float], None]) -> None:
        """Set a callback function for progress updates.

        Args:
            callback: Function that takes progress as float (0.0 to 1.0)
        """
        self._progress_callback = callback

    def render(self, scene: Hittable, camera: Camera) -> np.ndarray:
        """Render the scene and return the linear image as a numpy array.

        Row 0 of the result is the top of the image. Each tile draws from its
        own generator spawned from `settings.seed`, so a seeded render gives
        the same image for any thread count.

        Args:
            scene: The scene to render (any Hittable)
            camera: The camera to render from

        Returns:
            Linear color image of shape (height, width, 3)
        """
        width = self.settings.width
        height = self.settings.height
        samples = self.settings.samples_per_pixel
        max_depth = self.settings.max_depth

        image = np.zeros((height, width, 3), dtype=np.float64)

        tiles = self._generate_tiles(width, height)
        seeds = np.random.SeedSequence(self.settings.seed).spawn(len(tiles))
        total_tiles = len(tiles)
        completed_tiles = [0]
        progress_lock = threading.Lock()

        logger.info(
            "Rendering %dx%d, %d spp, depth %d, %d tiles on %d threads",
            width, height, samples, max_depth, total_tiles, self.settings.num_threads
        )

        def render_tile(job: Tuple[Tile, np.random.SeedSequence]) -> Tuple[Tile, np.ndarray]:
            """Render a single tile."""
            tile, seed = job
            rng = np.random.default_rng(seed)
            x0, y0, x1, y1 = tile
            tile_image = np.zeros((y1 - y0, x1 - x0, 3), dtype=np.float64)

            for j in range(y1 - y0):
                # Image rows run top to bottom, camera v runs bottom to top
                row = height - 1 - (y0 + j)
                for i in range(x1 - x0):
                    col = x0 + i
                    pixel = np.zeros(3, dtype=np.float64)

                    for _ in range(samples):
                        u = (col + rng.random()) / width
                        v = (row + rng.random()) / height
                        ray = camera.get_ray(u, v)
                        pixel += ray_color(ray, scene, max_depth, rng).to_array()

                    tile_image[j, i] = pixel / samples

            with progress_lock:
                completed_tiles[0] += 1
                done = completed_tiles[0]
                logger.debug("Tile %s done (%d/%d)", tile, done, total_tiles)
                if self._progress_callback:
                    self._progress_callback(done / total_tiles)

            return tile, tile_image

        jobs = list(zip(tiles, seeds))
        if self.settings.num_threads > 1:
            with ThreadPoolExecutor(max_workers=self.settings.num_threads) as executor:
                results = list(executor.map(render_tile, jobs))
        else:
            results = [render_tile(job) for job in jobs]

        for tile, tile_image in results:
            x0, y0, x1, y1 = tile
            image[y0:y1, x0:x1] = tile_image

        return image

    def _generate_tiles(self, width: int, height: int) -> list[Tile]:
        """Split the image into tiles given as (x0, y0, x1, y1) tuples."""
        tile_size = self.settings.tile_size
        tiles = []

        for y in range(0, height, tile_size):
            for x in range(0, width, tile_size):
                x1 = min(x + tile_size, width)
                y1 = min(y + tile_size, height)
                tiles.append((x, y, x1, y1))

        return tiles

    @staticmethod
    def to_ldr(image: np.ndarray) -> np.ndarray:
        """Convert a linear image to 8-bit with square-root gamma.

        Args:
            image: Linear image array

        Returns:
            LDR image as uint8 array
        """
        corrected = np.sqrt(np.clip(image, 0.0, 1.0))
        return (255.99 * corrected).astype(np.uint8)

    def save_image(self, image: np.ndarray, filename: Union[str, Path]) -> None:
        """Save image to file.

        A `.ppm` extension writes the plain-text pixel dump; anything else is
        handed to Pillow, which picks the format from the extension.

        Args:
            image: Image array (linear float or uint8)
            filename: Output filename
        """
        if image.dtype != np.uint8:
            image = self.to_ldr(image)

        path = Path(filename)
        if path.suffix.lower() == '.ppm':
            write_ppm(image, path)
        else:
            from PIL import Image as PILImage
            PILImage.fromarray(image, 'RGB').save(path)

        logger.info("Saved %dx%d image to %s", image.shape[1], image.shape[0], path)


def write_ppm(image: np.ndarray, path: Union[str, Path]) -> None:
    """Write an 8-bit image as plain-text PPM (P3).

    One "R G B" line per pixel, row-major from the top of the image.
    """
    height, width = image.shape[:2]
    lines = [f"P3\n{width} {height}\n255"]
    for row in image:
        for r, g, b in row:
            lines.append(f"{r} {g} {b}")

    Path(path).write_text("\n".join(lines) + "\n")
