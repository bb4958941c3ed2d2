from vecmath.scalar import EPSILON
from vecmath.vector2 import Vector2
from vecmath.vector3 import Vector3
from vecmath.vector4 import Vector4

__version__ = "0.1.0"
__all__ = ["Vector2", "Vector3", "Vector4", "EPSILON"]
