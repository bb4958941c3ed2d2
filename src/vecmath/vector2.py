# vecmath/vector2.py
import logging
import numpy as np
from vecmath.scalar import DTYPE, f32, is_scalar, close, ieee754

logger = logging.getLogger(__name__)


class Vector2:
    """
    A 2D single-precision vector, e.g. a screen position or a texture offset.
    """
    __slots__ = ("x", "y")
    __array_ufunc__ = None

    @ieee754
    def __init__(self, x: float, y: float):
        self.x = f32(x)
        self.y = f32(y)

    @classmethod
    def zero(cls) -> "Vector2":
        return cls(0.0, 0.0)

    @classmethod
    @ieee754
    def from_array(cls, values) -> "Vector2":
        values = np.asarray(values, dtype=DTYPE)
        if values.shape != (2,):
            raise ValueError(f"Vector2 needs exactly 2 values, got shape {values.shape}")
        return cls(values[0], values[1])

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=DTYPE)

    def copy(self) -> "Vector2":
        return Vector2(self.x, self.y)

    def __iter__(self):
        yield self.x
        yield self.y

    @ieee754
    def length_squared(self) -> np.float32:
        return self.x * self.x + self.y * self.y

    @ieee754
    def length(self) -> np.float32:
        return np.sqrt(self.length_squared())

    @ieee754
    def normalize(self) -> None:
        """Scales to unit length in place."""
        length = self.length()
        if length == 0:
            logger.debug("Normalizing zero-length %r yields NaN components", self)
        inv_length = f32(1.0) / length
        self.x *= inv_length
        self.y *= inv_length

    def normalized(self) -> "Vector2":
        v = self.copy()
        v.normalize()
        return v

    @ieee754
    def distance_squared(self, other: "Vector2") -> np.float32:
        if not isinstance(other, Vector2):
            raise TypeError("Can only calculate distance to another Vector2.")
        d_x = self.x - other.x
        d_y = self.y - other.y
        return d_x * d_x + d_y * d_y

    @ieee754
    def distance(self, other: "Vector2") -> np.float32:
        return np.sqrt(self.distance_squared(other))

    @ieee754
    def dot(self, other: "Vector2") -> np.float32:
        if not isinstance(other, Vector2):
            raise TypeError("Can only calculate dot product with another Vector2.")
        return self.x * other.x + self.y * other.y

    @ieee754
    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector2):
            return NotImplemented
        return close(self.x, other.x) and close(self.y, other.y)

    def __neg__(self) -> "Vector2":
        return Vector2(-self.x, -self.y)

    @ieee754
    def __add__(self, other: "Vector2") -> "Vector2":
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    @ieee754
    def __iadd__(self, other: "Vector2") -> "Vector2":
        if not isinstance(other, Vector2):
            return NotImplemented
        self.x += other.x
        self.y += other.y
        return self

    @ieee754
    def __sub__(self, other: "Vector2") -> "Vector2":
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)

    @ieee754
    def __isub__(self, other: "Vector2") -> "Vector2":
        if not isinstance(other, Vector2):
            return NotImplemented
        self.x -= other.x
        self.y -= other.y
        return self

    @ieee754
    def __mul__(self, other):
        if isinstance(other, Vector2):
            return Vector2(self.x * other.x, self.y * other.y)
        if is_scalar(other):
            t = f32(other)
            return Vector2(self.x * t, self.y * t)
        return NotImplemented

    def __rmul__(self, other: float) -> "Vector2":
        if not is_scalar(other):
            return NotImplemented
        return self.__mul__(other)

    @ieee754
    def __imul__(self, other):
        if isinstance(other, Vector2):
            self.x *= other.x
            self.y *= other.y
            return self
        if is_scalar(other):
            t = f32(other)
            self.x *= t
            self.y *= t
            return self
        return NotImplemented

    @ieee754
    def __truediv__(self, other):
        if isinstance(other, Vector2):
            return Vector2(self.x / other.x, self.y / other.y)
        if is_scalar(other):
            t = f32(other)
            return Vector2(self.x / t, self.y / t)
        return NotImplemented

    @ieee754
    def __itruediv__(self, other):
        if isinstance(other, Vector2):
            self.x /= other.x
            self.y /= other.y
            return self
        if is_scalar(other):
            t = f32(other)
            self.x /= t
            self.y /= t
            return self
        return NotImplemented

    def __repr__(self) -> str:
        return f"Vector2({self.x}, {self.y})"
