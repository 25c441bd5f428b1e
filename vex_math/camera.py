#
# PROJECT: vex-math
# MODULE: vex_math/camera.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import math

from .matrix import Matrix4
from .vector import Vector3

# Keeps the orbit off the poles, where look_at has no usable right axis.
_PITCH_LIMIT = math.pi / 2.0 - 0.01


class Camera:
    """
    Orbital camera looking at the origin.

    Stores rotation angles (pitch/yaw), distance from the origin,
    field-of-view and near/far clip planes, and turns them into the view and
    projection matrices of a standard model-view-projection chain.
    """
    __slots__ = ('pitch', 'yaw', 'distance', 'fov', 'near', 'far')

    def __init__(self, fov: float = 60.0, distance: float = 6.0,
                 near: float = 0.1, far: float = 150.0):
        self.pitch = 0.0         # Rotation around X axis (radians)
        self.yaw = 0.0           # Rotation around Y axis (radians)
        self.distance = distance
        self.fov = fov           # Vertical field of view (degrees)
        self.near = near
        self.far = far

    def orbit(self, dyaw: float, dpitch: float):
        """Adjust orbital angles by delta (radians)."""
        self.yaw += dyaw
        self.pitch = max(-_PITCH_LIMIT, min(_PITCH_LIMIT, self.pitch + dpitch))

    def zoom(self, delta: float):
        """Adjust camera distance. Positive = further, negative = closer."""
        self.distance = max(0.5, self.distance + delta)

    def adjust_fov(self, delta: float):
        """Adjust field of view by delta degrees, clamped to [10, 170]."""
        self.fov = max(10, min(170, self.fov + delta))

    def orientation(self) -> Matrix4:
        """Yaw applied after pitch."""
        return Matrix4.rotate_y(self.yaw) @ Matrix4.rotate_x(self.pitch)

    def position(self) -> Vector3:
        return self.orientation().transform_point(Vector3(0.0, 0.0, self.distance))

    def view_matrix(self) -> Matrix4:
        """World-to-camera transform: the inverse of the look_at basis."""
        basis = Matrix4.look_at(self.position(), Vector3.zero(), Vector3.up())
        view = basis.inverted()
        if view is None:
            raise ValueError("camera basis is degenerate; it looks straight along the up axis")
        return view

    def projection_matrix(self, aspect_ratio: float) -> Matrix4:
        return Matrix4.perspective(self.fov, aspect_ratio, self.near, self.far)
