#!/usr/bin/env python3
#
# PROJECT: vex-math
# MODULE: client_demo.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import argparse
import logging
import math
import sys
import os

# Ensure local package is importable
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from vex_math import Matrix4
from vex_math.camera import Camera
from vex_math.config import ViewConfig
from vex_math.logging_config import setup_logging
from vex_math.mesh import Mesh
from vex_math.demo import describe


def parse_args(argv=None):
    epilog = """\
examples:
  %(prog)s                                 Cube seen from the default orbit
  %(prog)s --yaw 35 --pitch -20            Orbit the camera (degrees)
  %(prog)s --spin 45 --scale 0.5           Rotate and shrink the model
  %(prog)s --fov 90 --distance 4 -v        Wide lens, close up, debug logging
"""
    parser = argparse.ArgumentParser(
        description="Project a wireframe cube through a model-view-projection chain",
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument("--yaw", type=float, default=30.0,
                        help="Camera yaw around the Y axis in degrees (default: 30)")
    parser.add_argument("--pitch", type=float, default=-20.0,
                        help="Camera pitch around the X axis in degrees (default: -20)")
    parser.add_argument("--distance", type=float, default=6.0,
                        help="Camera distance from the origin (default: 6.0)")
    parser.add_argument("--fov", type=float, default=60.0,
                        help="Vertical field of view in degrees (default: 60)")
    parser.add_argument("--near", type=float, default=0.1,
                        help="Near clipping plane (default: 0.1)")
    parser.add_argument("--far", type=float, default=150.0,
                        help="Far clipping plane (default: 150.0)")
    parser.add_argument("--spin", type=float, default=0.0,
                        help="Model rotation around the Z axis in degrees (default: 0)")
    parser.add_argument("--scale", type=float, default=1.0,
                        help="Uniform model scale (default: 1.0)")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Enable debug logging on stderr")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    config = ViewConfig.detect_terminal()
    config.fov = args.fov
    config.near = args.near
    config.far = args.far
    config.distance = args.distance

    camera = Camera(fov=config.fov, distance=config.distance,
                    near=config.near, far=config.far)
    camera.orbit(math.radians(args.yaw), math.radians(args.pitch))

    model = (Matrix4.rotate_z(math.radians(args.spin))
             @ Matrix4.scale(args.scale, args.scale, args.scale))

    print(describe(Mesh.cube(), camera, config, model))
    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
