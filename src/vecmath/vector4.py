# vecmath/vector4.py
import logging
import numpy as np
from vecmath.scalar import DTYPE, f32, is_scalar, close, ieee754

logger = logging.getLogger(__name__)


class Vector4:
    """
    A 4D single-precision vector with X, Y, Z and W components, such as a
    homogeneous coordinate or an RGBA color.

    Arithmetic follows IEEE-754 float32 rules; no operation raises on
    division by zero.
    """
    __slots__ = ("x", "y", "z", "w")
    __array_ufunc__ = None

    @ieee754
    def __init__(self, x: float, y: float, z: float, w: float):
        self.x = f32(x)
        self.y = f32(y)
        self.z = f32(z)
        self.w = f32(w)

    @classmethod
    def zero(cls) -> "Vector4":
        return cls(0.0, 0.0, 0.0, 0.0)

    @classmethod
    @ieee754
    def from_array(cls, values) -> "Vector4":
        """
        Builds a vector from exactly four numbers in x, y, z, w order.
        """
        values = np.asarray(values, dtype=DTYPE)
        if values.shape != (4,):
            raise ValueError(f"Vector4 needs exactly 4 values, got shape {values.shape}")
        return cls(values[0], values[1], values[2], values[3])

    def to_array(self) -> np.ndarray:
        """
        Returns the components as a float32 array of shape (4,).
        """
        return np.array([self.x, self.y, self.z, self.w], dtype=DTYPE)

    def copy(self) -> "Vector4":
        return Vector4(self.x, self.y, self.z, self.w)

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    @ieee754
    def length_squared(self) -> np.float32:
        """
        Squared magnitude; cheaper than length() when only comparing.
        """
        return self.x * self.x + self.y * self.y + self.z * self.z + self.w * self.w

    @ieee754
    def length(self) -> np.float32:
        return np.sqrt(self.length_squared())

    @ieee754
    def normalize(self) -> None:
        """
        Rescales the vector to unit length in place.
        """
        length = self.length()
        if length == 0:
            logger.debug("Normalizing zero-length %r yields NaN components", self)
        inv_length = f32(1.0) / length
        self.x *= inv_length
        self.y *= inv_length
        self.z *= inv_length
        self.w *= inv_length

    def normalized(self) -> "Vector4":
        """
        Returns a unit-length copy, leaving this vector untouched.
        """
        v = self.copy()
        v.normalize()
        return v

    @ieee754
    def distance_squared(self, other: "Vector4") -> np.float32:
        if not isinstance(other, Vector4):
            raise TypeError("Can only calculate distance to another Vector4.")
        d_x = self.x - other.x
        d_y = self.y - other.y
        d_z = self.z - other.z
        d_w = self.w - other.w
        return d_x * d_x + d_y * d_y + d_z * d_z + d_w * d_w

    @ieee754
    def distance(self, other: "Vector4") -> np.float32:
        return np.sqrt(self.distance_squared(other))

    @ieee754
    def dot(self, other: "Vector4") -> np.float32:
        if not isinstance(other, Vector4):
            raise TypeError("Can only calculate dot product with another Vector4.")
        return self.x * other.x + self.y * other.y + self.z * other.z + self.w * other.w

    @ieee754
    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector4):
            return NotImplemented
        return (close(self.x, other.x) and close(self.y, other.y) and
                close(self.z, other.z) and close(self.w, other.w))

    def __neg__(self) -> "Vector4":
        return Vector4(-self.x, -self.y, -self.z, -self.w)

    @ieee754
    def __add__(self, other: "Vector4") -> "Vector4":
        if not isinstance(other, Vector4):
            return NotImplemented
        return Vector4(self.x + other.x, self.y + other.y,
                       self.z + other.z, self.w + other.w)

    @ieee754
    def __iadd__(self, other: "Vector4") -> "Vector4":
        if not isinstance(other, Vector4):
            return NotImplemented
        self.x += other.x
        self.y += other.y
        self.z += other.z
        self.w += other.w
        return self

    @ieee754
    def __sub__(self, other: "Vector4") -> "Vector4":
        if not isinstance(other, Vector4):
            return NotImplemented
        return Vector4(self.x - other.x, self.y - other.y,
                       self.z - other.z, self.w - other.w)

    @ieee754
    def __isub__(self, other: "Vector4") -> "Vector4":
        if not isinstance(other, Vector4):
            return NotImplemented
        self.x -= other.x
        self.y -= other.y
        self.z -= other.z
        self.w -= other.w
        return self

    @ieee754
    def __mul__(self, other):
        # Element-wise multiplication.
        if isinstance(other, Vector4):
            return Vector4(self.x * other.x, self.y * other.y,
                           self.z * other.z, self.w * other.w)
        # Scalar multiplication.
        if is_scalar(other):
            t = f32(other)
            return Vector4(self.x * t, self.y * t, self.z * t, self.w * t)
        return NotImplemented

    def __rmul__(self, other: float) -> "Vector4":
        if not is_scalar(other):
            return NotImplemented
        return self.__mul__(other)

    @ieee754
    def __imul__(self, other):
        if isinstance(other, Vector4):
            self.x *= other.x
            self.y *= other.y
            self.z *= other.z
            self.w *= other.w
            return self
        if is_scalar(other):
            t = f32(other)
            self.x *= t
            self.y *= t
            self.z *= t
            self.w *= t
            return self
        return NotImplemented

    @ieee754
    def __truediv__(self, other):
        if isinstance(other, Vector4):
            return Vector4(self.x / other.x, self.y / other.y,
                           self.z / other.z, self.w / other.w)
        if is_scalar(other):
            t = f32(other)
            return Vector4(self.x / t, self.y / t, self.z / t, self.w / t)
        return NotImplemented

    @ieee754
    def __itruediv__(self, other):
        if isinstance(other, Vector4):
            self.x /= other.x
            self.y /= other.y
            self.z /= other.z
            self.w /= other.w
            return self
        if is_scalar(other):
            t = f32(other)
            self.x /= t
            self.y /= t
            self.z /= t
            self.w /= t
            return self
        return NotImplemented

    def __repr__(self) -> str:
        return f"Vector4({self.x}, {self.y}, {self.z}, {self.w})"
