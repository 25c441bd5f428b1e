#
# PROJECT: vex-math
# MODULE: vex_math/vector.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import math
import operator
from numbers import Real

from .math_utils import EPSILON, divide, is_valid


class _Vector:
    """
    Behaviour shared by the fixed-size vectors.

    Subclasses declare their component names in __slots__ (in order); every
    operation here walks those names, so it works for any dimension.
    Vectors are mutable value types: the in-place operations (normalize,
    clamp, abs, +=, ...) modify the receiver, the binary operators return
    new vectors.
    """
    __slots__ = ()

    @classmethod
    def zero(cls):
        return cls()

    @classmethod
    def one(cls):
        return cls(*([1.0] * len(cls.__slots__)))

    @classmethod
    def make(cls, *components):
        return cls(*components)

    @classmethod
    def from_vector(cls, other):
        """
        Explicit size conversion.

        Trailing components of a larger vector are dropped; a smaller vector
        is padded with zeros.
        """
        if not isinstance(other, _Vector):
            raise TypeError(f"cannot convert {type(other).__name__} to {cls.__name__}")
        size = len(cls.__slots__)
        values = list(other)[:size]
        values.extend([0.0] * (size - len(values)))
        return cls(*values)

    def copy(self):
        return type(self)(*self)

    def set(self, *components):
        """Overwrite every component."""
        if len(components) != len(self.__slots__):
            raise TypeError(f"{type(self).__name__}.set() takes {len(self.__slots__)} "
                            f"components ({len(components)} given)")
        for name, value in zip(self.__slots__, components):
            setattr(self, name, float(value))

    # --- geometry ------------------------------------------------------

    def _same_size(self, other):
        if type(other) is not type(self):
            raise TypeError(f"expected {type(self).__name__}, got {type(other).__name__}")
        return other

    def dot(self, other) -> float:
        return sum(a * b for a, b in zip(self, self._same_size(other)))

    def min(self, other):
        """Component-wise minimum of two vectors."""
        return type(self)(*(min(a, b) for a, b in zip(self, self._same_size(other))))

    def max(self, other):
        """Component-wise maximum of two vectors."""
        return type(self)(*(max(a, b) for a, b in zip(self, self._same_size(other))))

    def clamp(self, a, b):
        """
        Clamp this vector in place between a and b, component-wise.

        The bounds may be given in either order: the low and high corners are
        taken as min(a, b) and max(a, b) before clamping.
        """
        low = a.min(b)
        high = a.max(b)
        self.set(*low.max(self.min(high)))

    def magnitude_squared(self) -> float:
        return self.dot(self)

    def magnitude(self) -> float:
        return math.sqrt(self.magnitude_squared())

    def normalize(self) -> float:
        """
        Scale this vector to unit length in place.

        Returns the length before normalization. A vector whose length is at
        or below EPSILON is left untouched and 0.0 is returned.
        """
        length = self.magnitude()
        if length > EPSILON:
            for name in self.__slots__:
                setattr(self, name, getattr(self, name) / length)
            return length
        return 0.0

    def abs(self):
        """Replace every component with its absolute value."""
        for name in self.__slots__:
            setattr(self, name, abs(getattr(self, name)))

    def is_valid(self) -> bool:
        return all(is_valid(c) for c in self)

    # --- container protocol --------------------------------------------

    def __len__(self):
        return len(self.__slots__)

    def __iter__(self):
        for name in self.__slots__:
            yield getattr(self, name)

    def _component_name(self, index):
        if not isinstance(index, int):
            raise TypeError(f"{type(self).__name__} indices must be integers")
        if 0 <= index < len(self.__slots__):
            return self.__slots__[index]
        raise IndexError(f"Invalid index for {type(self).__name__}: {index}")

    def __getitem__(self, index):
        return getattr(self, self._component_name(index))

    def __setitem__(self, index, value):
        setattr(self, self._component_name(index), float(value))

    # --- arithmetic ----------------------------------------------------

    def _combine(self, other, op):
        if isinstance(other, Real):
            return type(self)(*(op(c, other) for c in self))
        if type(other) is type(self):
            return type(self)(*(op(a, b) for a, b in zip(self, other)))
        return NotImplemented

    def _update(self, other, op):
        result = self._combine(other, op)
        if result is NotImplemented:
            return NotImplemented
        self.set(*result)
        return self

    def __neg__(self):
        return type(self)(*(-c for c in self))

    def __add__(self, other):
        return self._combine(other, operator.add)

    __radd__ = __add__

    def __sub__(self, other):
        return self._combine(other, operator.sub)

    def __mul__(self, other):
        return self._combine(other, operator.mul)

    __rmul__ = __mul__

    def __truediv__(self, other):
        return self._combine(other, divide)

    def __iadd__(self, other):
        return self._update(other, operator.add)

    def __isub__(self, other):
        return self._update(other, operator.sub)

    def __imul__(self, other):
        return self._update(other, operator.mul)

    def __itruediv__(self, other):
        return self._update(other, divide)

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return all(a == b for a, b in zip(self, other))

    __hash__ = None

    def __repr__(self):
        return f"{type(self).__name__}({', '.join(repr(c) for c in self)})"

    def __str__(self):
        return f"<{', '.join(str(c) for c in self)}>"


class Vector2(_Vector):
    """2-component vector."""
    __slots__ = ('x', 'y')

    def __init__(self, x: float = 0.0, y: float = 0.0):
        self.x = float(x)
        self.y = float(y)

    def cross(self, other) -> float:
        """2D cross product: the z component of the 3D cross of (x, y, 0) vectors."""
        return self.x * other.y - self.y * other.x

    @staticmethod
    def cross_scalar_vec(s: float, v: 'Vector2') -> 'Vector2':
        return Vector2(-s * v.y, s * v.x)

    @staticmethod
    def cross_vec_scalar(v: 'Vector2', s: float) -> 'Vector2':
        return Vector2(s * v.y, -s * v.x)

    def skew(self):
        """Rotate by +90 degrees in place: (x, y) -> (-y, x)."""
        self.x, self.y = -self.y, self.x


class Vector3(_Vector):
    """3-component vector. forward() points down -Z."""
    __slots__ = ('x', 'y', 'z')

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)

    @classmethod
    def right(cls) -> 'Vector3':
        return cls(1.0, 0.0, 0.0)

    @classmethod
    def up(cls) -> 'Vector3':
        return cls(0.0, 1.0, 0.0)

    @classmethod
    def forward(cls) -> 'Vector3':
        return cls(0.0, 0.0, -1.0)

    def cross(self, other) -> 'Vector3':
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )


class Vector4(_Vector):
    """4-component vector (homogeneous coordinates). Has no cross product."""
    __slots__ = ('x', 'y', 'z', 'w')

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0, w: float = 0.0):
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)
        self.w = float(w)

