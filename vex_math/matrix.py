#
# PROJECT: vex-math
# MODULE: vex_math/matrix.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import logging
import math
import operator
from numbers import Real

from .math_utils import divide, is_valid
from .vector import Vector3, _Vector

logger = logging.getLogger(__name__)


def _element(row: int, col: int) -> property:
    """Read/write property for the element at 1-indexed (row, col)."""
    def getter(self):
        return self._m[(col - 1) * self.SIZE + row - 1]

    def setter(self, value):
        self._m[(col - 1) * self.SIZE + row - 1] = float(value)

    return property(getter, setter, doc=f"Element at row {row}, column {col}.")


class _Matrix:
    """
    Square matrix stored as a flat column-major list.

    All of column 1 comes first, then column 2, and so on, so the storage can
    be handed straight to a graphics API expecting column-major uniforms.
    Elements are addressed by 1-indexed (row, col), either through get() /
    set_element() or the m{row}{col} properties of the concrete classes.

    Scalar arithmetic is element-wise; multiplying two matrices is the true
    matrix product.
    """
    __slots__ = ('_m',)
    SIZE = 0
    MINOR = None  # matrix class of the (SIZE-1) x (SIZE-1) minors

    def __init__(self, values=None):
        n = self.SIZE
        if values is None:
            self._m = [1.0 if r == c else 0.0 for c in range(n) for r in range(n)]
            return
        values = [float(v) for v in values]
        if len(values) != n * n:
            raise ValueError(f"{type(self).__name__} needs {n * n} values, got {len(values)}")
        self._m = values

    @classmethod
    def identity(cls):
        return cls()

    @classmethod
    def zero(cls):
        return cls([0.0] * (cls.SIZE * cls.SIZE))

    @classmethod
    def make(cls, *values):
        """Build a matrix from SIZE*SIZE values given in column-major order."""
        return cls(values)

    construct = make

    @property
    def m(self) -> tuple:
        """Copy of the raw column-major storage."""
        return tuple(self._m)

    def copy(self):
        return type(self)(self._m)

    def set(self, *values):
        """Overwrite every element; values are in column-major order."""
        n = self.SIZE
        if len(values) != n * n:
            raise ValueError(f"{type(self).__name__} needs {n * n} values, got {len(values)}")
        self._m = [float(v) for v in values]

    # --- element access ------------------------------------------------

    def _index(self, row: int, col: int) -> int:
        n = self.SIZE
        if not (1 <= row <= n and 1 <= col <= n):
            raise IndexError(f"Invalid element for {type(self).__name__}: ({row}, {col})")
        return (col - 1) * n + row - 1

    def get(self, row: int, col: int) -> float:
        return self._m[self._index(row, col)]

    def set_element(self, row: int, col: int, value: float):
        self._m[self._index(row, col)] = float(value)

    def __len__(self):
        return len(self._m)

    def __iter__(self):
        return iter(self._m)

    # --- linear algebra ------------------------------------------------

    def transpose(self):
        """Swap elements across the diagonal in place."""
        n = self.SIZE
        m = self._m
        for c in range(n):
            for r in range(c + 1, n):
                i, j = c * n + r, r * n + c
                m[i], m[j] = m[j], m[i]

    def minor(self, row: int, col: int):
        """The matrix left after deleting the given row and column."""
        self._index(row, col)
        n = self.SIZE
        values = [self._m[c * n + r]
                  for c in range(n) if c != col - 1
                  for r in range(n) if r != row - 1]
        return self.MINOR(values)

    def cofactor(self, row: int, col: int) -> float:
        value = self.minor(row, col).determinant()
        return -value if (row + col) % 2 else value

    def determinant(self) -> float:
        """Laplace expansion along the first row, signs alternating."""
        det = 0.0
        for col in range(1, self.SIZE + 1):
            term = self.get(1, col) * self.minor(1, col).determinant()
            det = det + term if col % 2 else det - term
        return det

    def inverse(self) -> bool:
        """
        Invert in place using the adjugate method.

        Returns False and leaves the matrix untouched when the determinant is
        exactly zero; near-singular matrices are inverted as-is.
        """
        det = self.determinant()
        if det == 0.0:
            logger.debug(f"{type(self).__name__} is singular, inverse skipped")
            return False

        inv_det = 1.0 / det
        n = self.SIZE
        adjugate = [0.0] * (n * n)
        for row in range(1, n + 1):
            for col in range(1, n + 1):
                # Transposed cofactor: C(row, col) lands at (col, row)
                adjugate[(row - 1) * n + col - 1] = self.cofactor(row, col) * inv_det
        self._m = adjugate
        return True

    def inverted(self):
        """Inverted copy, or None when the matrix is singular."""
        result = self.copy()
        if result.inverse():
            return result
        return None

    def transform_point(self, point):
        """
        Multiply a column vector by this matrix.

        A vector of SIZE components is mapped linearly. A vector one component
        shorter is treated as a point with an implicit trailing 1, so the last
        column acts as a translation.
        """
        if not isinstance(point, _Vector):
            raise TypeError(f"{type(self).__name__} cannot transform {type(point).__name__}")
        n = self.SIZE
        size = len(point)
        if size == n:
            values = list(point)
        elif size == n - 1:
            values = list(point) + [1.0]
        else:
            raise TypeError(f"{type(self).__name__} cannot transform {type(point).__name__}")
        m = self._m
        return type(point)(*(
            sum(m[c * n + r] * values[c] for c in range(n))
            for r in range(size)
        ))

    def is_valid(self) -> bool:
        return all(is_valid(v) for v in self._m)

    # --- arithmetic ----------------------------------------------------

    def _product(self, other):
        n = self.SIZE
        a, b = self._m, other._m
        values = [0.0] * (n * n)
        for c in range(n):
            for r in range(n):
                val = 0.0
                for k in range(n):
                    val += a[k * n + r] * b[c * n + k]
                values[c * n + r] = val
        return type(self)(values)

    def _elementwise(self, other, op):
        if isinstance(other, Real):
            return type(self)(op(v, other) for v in self._m)
        if type(other) is type(self):
            return type(self)(op(a, b) for a, b in zip(self._m, other._m))
        return NotImplemented

    def __neg__(self):
        return type(self)(-v for v in self._m)

    def __add__(self, other):
        return self._elementwise(other, operator.add)

    __radd__ = __add__

    def __sub__(self, other):
        return self._elementwise(other, operator.sub)

    def __mul__(self, other):
        if type(other) is type(self):
            return self._product(other)
        if isinstance(other, _Vector):
            return self.transform_point(other)
        return self._elementwise(other, operator.mul)

    def __rmul__(self, other):
        if isinstance(other, Real):
            return self._elementwise(other, operator.mul)
        return NotImplemented

    def __matmul__(self, other):
        if type(other) is type(self):
            return self._product(other)
        if isinstance(other, _Vector):
            return self.transform_point(other)
        return NotImplemented

    def __truediv__(self, other):
        if isinstance(other, Real):
            return self._elementwise(other, divide)
        return NotImplemented

    def _update(self, result):
        if result is NotImplemented:
            return NotImplemented
        self._m = result._m
        return self

    def __iadd__(self, other):
        return self._update(self._elementwise(other, operator.add))

    def __isub__(self, other):
        return self._update(self._elementwise(other, operator.sub))

    def __imul__(self, other):
        if isinstance(other, _Vector):
            return NotImplemented
        return self._update(self * other)

    def __imatmul__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._update(self._product(other))

    def __itruediv__(self, other):
        return self._update(self / other)

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._m == other._m

    __hash__ = None

    def __repr__(self):
        return f"{type(self).__name__}.make({', '.join(repr(v) for v in self._m)})"

    def __str__(self):
        n = self.SIZE
        rows = ("  " + ", ".join(str(self.get(r, c)) for c in range(1, n + 1))
                for r in range(1, n + 1))
        return "[\n" + "\n".join(rows) + "\n]"


class Matrix2(_Matrix):
    __slots__ = ()
    SIZE = 2

    m11, m12 = _element(1, 1), _element(1, 2)
    m21, m22 = _element(2, 1), _element(2, 2)

    def minor(self, row: int, col: int):
        raise TypeError("Matrix2 has no matrix minors")

    def cofactor(self, row: int, col: int) -> float:
        # The minor of a 2x2 element is the single diagonally opposite element.
        value = self.get(3 - row, 3 - col)
        return -value if (row + col) % 2 else value

    def determinant(self) -> float:
        return self.m11 * self.m22 - self.m12 * self.m21


class Matrix3(_Matrix):
    """3x3 matrix. Transforms Vector3 linearly and Vector2 as an affine point."""
    __slots__ = ()
    SIZE = 3
    MINOR = Matrix2

    m11, m12, m13 = _element(1, 1), _element(1, 2), _element(1, 3)
    m21, m22, m23 = _element(2, 1), _element(2, 2), _element(2, 3)
    m31, m32, m33 = _element(3, 1), _element(3, 2), _element(3, 3)

    @classmethod
    def look_at(cls, position: Vector3, target: Vector3, up: Vector3) -> 'Matrix3':
        """Rotation basis facing target: columns right, up and backward."""
        forward = target - position
        forward.normalize()

        right = forward.cross(up)
        right.normalize()
        up = right.cross(forward)

        return cls.make(
            right.x, right.y, right.z,
            up.x, up.y, up.z,
            -forward.x, -forward.y, -forward.z
        )


class Matrix4(_Matrix):
    """
    4x4 matrix for 3D transforms.

    Transforms Vector4 linearly (w included) and Vector3 as an affine point.
    The factory methods build the usual OpenGL-style transforms for a
    right-handed coordinate system with the camera looking down -Z.
    """
    __slots__ = ()
    SIZE = 4
    MINOR = Matrix3

    m11, m12, m13, m14 = _element(1, 1), _element(1, 2), _element(1, 3), _element(1, 4)
    m21, m22, m23, m24 = _element(2, 1), _element(2, 2), _element(2, 3), _element(2, 4)
    m31, m32, m33, m34 = _element(3, 1), _element(3, 2), _element(3, 3), _element(3, 4)
    m41, m42, m43, m44 = _element(4, 1), _element(4, 2), _element(4, 3), _element(4, 4)

    @classmethod
    def ortho(cls, left: float, right: float, top: float, bottom: float,
              near: float, far: float) -> 'Matrix4':
        width = right - left
        height = top - bottom
        depth = far - near

        mat = cls()
        mat.m11 = divide(2.0, width)
        mat.m22 = divide(2.0, height)
        mat.m33 = divide(-2.0, depth)
        mat.m14 = divide(-(right + left), width)
        mat.m24 = divide(-(top + bottom), height)
        mat.m34 = divide(-(far + near), depth)
        return mat

    @classmethod
    def perspective(cls, fov: float, aspect_ratio: float,
                    near: float, far: float) -> 'Matrix4':
        """Perspective projection; fov is the vertical field of view in degrees."""
        radians = math.radians(fov / 2.0)
        cotangent = divide(math.cos(radians), math.sin(radians))
        depth = far - near

        mat = cls()
        mat.m11 = divide(cotangent, aspect_ratio)
        mat.m22 = cotangent
        mat.m33 = divide(-(far + near), depth)
        mat.m34 = divide(-2.0 * near * far, depth)
        mat.m43 = -1.0
        mat.m44 = 0.0
        return mat

    @classmethod
    def look_at(cls, position: Vector3, target: Vector3, up: Vector3) -> 'Matrix4':
        """
        Camera basis placed at position and facing target.

        Columns are the right, up and backward axes followed by the position,
        i.e. the camera-to-world transform. Invert it for a view matrix.
        A target straight along the up axis gives a degenerate basis.
        """
        forward = target - position
        forward.normalize()

        right = forward.cross(up)
        right.normalize()
        up = right.cross(forward)

        return cls.make(
            right.x, right.y, right.z, 0.0,
            up.x, up.y, up.z, 0.0,
            -forward.x, -forward.y, -forward.z, 0.0,
            position.x, position.y, position.z, 1.0
        )

    @classmethod
    def translate(cls, x: float, y: float, z: float) -> 'Matrix4':
        mat = cls()
        mat.m14 = x
        mat.m24 = y
        mat.m34 = z
        return mat

    @classmethod
    def rotate_x(cls, angle: float) -> 'Matrix4':
        mat = cls()
        c = math.cos(angle)
        s = math.sin(angle)
        mat.m22 = c
        mat.m23 = -s
        mat.m32 = s
        mat.m33 = c
        return mat

    @classmethod
    def rotate_y(cls, angle: float) -> 'Matrix4':
        mat = cls()
        c = math.cos(angle)
        s = math.sin(angle)
        mat.m11 = c
        mat.m13 = s
        mat.m31 = -s
        mat.m33 = c
        return mat

    @classmethod
    def rotate_z(cls, angle: float) -> 'Matrix4':
        mat = cls()
        c = math.cos(angle)
        s = math.sin(angle)
        mat.m11 = c
        mat.m12 = -s
        mat.m21 = s
        mat.m22 = c
        return mat

    @classmethod
    def scale(cls, x: float, y: float, z: float) -> 'Matrix4':
        mat = cls()
        mat.m11 = x
        mat.m22 = y
        mat.m33 = z
        return mat
