#
# PROJECT: vex-math
# MODULE: vex_math/__init__.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

from .math_utils import EPSILON, is_valid, next_power_of_two, is_power_of_two, sign
from .vector import Vector2, Vector3, Vector4
from .matrix import Matrix2, Matrix3, Matrix4
