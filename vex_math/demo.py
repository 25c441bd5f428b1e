#
# PROJECT: vex-math
# MODULE: vex_math/demo.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import logging

from .camera import Camera
from .config import ViewConfig
from .matrix import Matrix4
from .mesh import Mesh
from .vector import Vector2, Vector4

logger = logging.getLogger(__name__)


def project_mesh(mesh: Mesh, camera: Camera, config: ViewConfig, model: Matrix4 = None):
    """
    Run every vertex through model-view-projection and the perspective divide.

    Returns one screen-space Vector2 per vertex (origin top-left, y down), or
    None for vertices that are not in front of the near plane.
    """
    mvp = camera.projection_matrix(config.aspect_ratio) @ camera.view_matrix()
    if model is not None:
        mvp = mvp @ model

    half_w = config.width * 0.5
    half_h = config.height * 0.5

    points = []
    for v in mesh.vertices:
        clip = mvp @ Vector4(v.x, v.y, v.z, 1.0)
        # Clip-space w is the distance in front of the camera
        if clip.w <= camera.near:
            points.append(None)
            continue
        ndc_x = clip.x / clip.w
        ndc_y = clip.y / clip.w
        points.append(Vector2((ndc_x + 1.0) * half_w, (1.0 - ndc_y) * half_h))

    culled = sum(1 for p in points if p is None)
    if culled:
        logger.debug(f"{culled} of {len(points)} vertices behind the near plane")
    return points


def _plot_line(grid, p1: Vector2, p2: Vector2, char: str):
    """DDA line between two screen points, clipped to the grid."""
    h = len(grid)
    w = len(grid[0]) if h else 0
    delta = p2 - p1
    step = max(abs(delta.x), abs(delta.y))
    if step < 1.0:
        step = 1.0
    inc = delta / step
    cur = p1.copy()
    for _ in range(int(step) + 1):
        # Two vertical units per text row
        x, y = int(cur.x), int(cur.y) // 2
        if 0 <= x < w and 0 <= y < h:
            grid[y][x] = char
        cur += inc


def render_ascii(mesh: Mesh, points, config: ViewConfig) -> str:
    """Draw the mesh edges between projected points as ASCII art."""
    rows = (config.height + 1) // 2
    grid = [[' '] * config.width for _ in range(rows)]

    for a, b in mesh.edges():
        if points[a] is None or points[b] is None:
            continue
        _plot_line(grid, points[a], points[b], '.')

    for p in points:
        if p is None:
            continue
        x, y = int(p.x), int(p.y) // 2
        if 0 <= x < config.width and 0 <= y < rows:
            grid[y][x] = '#'

    return "\n".join(''.join(row).rstrip() for row in grid)


def describe(mesh: Mesh, camera: Camera, config: ViewConfig, model: Matrix4 = None) -> str:
    """Text report: camera matrices, projected vertices and the wireframe."""
    points = project_mesh(mesh, camera, config, model)
    lines = [
        f"camera position: {camera.position()}",
        "view:",
        str(camera.view_matrix()),
        "projection:",
        str(camera.projection_matrix(config.aspect_ratio)),
        "screen points:",
    ]
    for i, (v, p) in enumerate(zip(mesh.vertices, points)):
        shown = "clipped" if p is None else f"<{p.x:.2f}, {p.y:.2f}>"
        lines.append(f"  {i}: {v} -> {shown}")
    lines.append(render_ascii(mesh, points, config))
    return "\n".join(lines)
