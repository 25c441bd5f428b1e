#
# PROJECT: vex-math
# MODULE: vex_math/mesh.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

from .vector import Vector3


class Mesh:
    def __init__(self, vertices=None, faces=None):
        self.vertices = [v.copy() if isinstance(v, Vector3) else Vector3(*v)
                         for v in (vertices or [])]
        self.faces = [list(face) for face in (faces or [])]

    @classmethod
    def cube(cls):
        """A cube with corners at +/-1, centered at the origin."""
        vertices = [
            (-1, -1, -1), ( 1, -1, -1), ( 1,  1, -1), (-1,  1, -1),
            (-1, -1,  1), ( 1, -1,  1), ( 1,  1,  1), (-1,  1,  1),
        ]
        faces = [
            [0, 1, 2, 3],  # front
            [5, 4, 7, 6],  # back
            [4, 0, 3, 7],  # left
            [1, 5, 6, 2],  # right
            [3, 2, 6, 7],  # top
            [4, 5, 1, 0],  # bottom
        ]
        return cls(vertices, faces)

    def edges(self):
        """Unique (low, high) vertex index pairs along the face outlines."""
        seen = set()
        for face in self.faces:
            for i, a in enumerate(face):
                b = face[(i + 1) % len(face)]
                seen.add((min(a, b), max(a, b)))
        return sorted(seen)
