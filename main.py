#!/usr/bin/env python3
"""
MiniTrace - A minimal Python ray tracer

Main entry point: renders the two-sphere reference scene.
"""

import argparse
import logging
import sys
import time
from pathlib import Path

from minitrace.camera import Camera
from minitrace.shapes import Scene
from minitrace.renderer import Renderer, RenderSettings


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='MiniTrace - A minimal Python ray tracer',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog='''
Examples:
  python main.py --output result.ppm
  python main.py --width 200 --height 100 --samples 10 --seed 7 --output preview.png
        '''
    )

    parser.add_argument('--width', type=int, default=400, help='Image width (default: 400)')
    parser.add_argument('--height', type=int, default=200, help='Image height (default: 200)')
    parser.add_argument('--samples', type=int, default=100, help='Samples per pixel (default: 100)')
    parser.add_argument('--depth', type=int, default=50, help='Max bounce depth (default: 50)')
    parser.add_argument('--threads', type=int, default=0, help='Number of threads (0=auto)')
    parser.add_argument('--seed', type=int, default=None, help='Random seed for a reproducible image')
    parser.add_argument('--output', type=str, default='result.ppm', help='Output filename')
    parser.add_argument('-v', '--verbose', action='store_true', help='Log per-tile progress')
    return parser


def main(argv=None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s %(name)s %(levelname)s: %(message)s'
    )

    try:
        settings = RenderSettings(
            width=args.width,
            height=args.height,
            samples_per_pixel=args.samples,
            max_depth=args.depth,
            num_threads=args.threads,
            seed=args.seed
        )
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    print("=" * 60)
    print("MiniTrace Ray Tracer")
    print("=" * 60)
    print(f"  Resolution: {settings.width}x{settings.height}")
    print(f"  Samples: {settings.samples_per_pixel}")
    print(f"  Max Depth: {settings.max_depth}")
    print(f"  Threads: {settings.num_threads}")

    scene = Scene.reference()
    camera = Camera()
    renderer = Renderer(settings)

    start_time = time.time()
    image = renderer.render(scene, camera)
    elapsed = time.time() - start_time
    print(f"\nRender completed in {elapsed:.2f} seconds")

    output_path = Path(args.output)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    renderer.save_image(image, output_path)
    print(f"Saved to: {output_path}")

    return 0


if __name__ == '__main__':
    sys.exit(main())
