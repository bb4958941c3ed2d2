# vecmath/vector3.py
import logging
import numpy as np
from vecmath.scalar import DTYPE, f32, is_scalar, close, ieee754

logger = logging.getLogger(__name__)


class Vector3:
    """
    A 3D single-precision vector supporting arithmetic, dot and cross
    products, distances and normalization.

    Components are stored as numpy float32 scalars. Nothing guards against
    NaN or Infinity: dividing by zero or normalizing a zero-length vector
    gives IEEE-754 results instead of raising.
    """
    __slots__ = ("x", "y", "z")

    # Keeps numpy scalars on the left of an operator from broadcasting
    # over the vector; Python falls through to our reflected methods.
    __array_ufunc__ = None

    @ieee754
    def __init__(self, x: float, y: float, z: float):
        self.x = f32(x)
        self.y = f32(y)
        self.z = f32(z)

    @classmethod
    def zero(cls) -> "Vector3":
        return cls(0.0, 0.0, 0.0)

    @classmethod
    @ieee754
    def from_array(cls, values) -> "Vector3":
        """
        Builds a vector from a sequence of exactly three numbers, in x, y, z
        order.
        """
        values = np.asarray(values, dtype=DTYPE)
        if values.shape != (3,):
            raise ValueError(f"Vector3 needs exactly 3 values, got shape {values.shape}")
        return cls(values[0], values[1], values[2])

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=DTYPE)

    def copy(self) -> "Vector3":
        return Vector3(self.x, self.y, self.z)

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    @ieee754
    def length_squared(self) -> np.float32:
        return self.x * self.x + self.y * self.y + self.z * self.z

    @ieee754
    def length(self) -> np.float32:
        return np.sqrt(self.length_squared())

    @ieee754
    def normalize(self) -> None:
        """
        Rescales the vector to unit length in place.
        A zero-length vector ends up with NaN components.
        """
        length = self.length()
        if length == 0:
            logger.debug("Normalizing zero-length %r yields NaN components", self)
        inv_length = f32(1.0) / length
        self.x *= inv_length
        self.y *= inv_length
        self.z *= inv_length

    def normalized(self) -> "Vector3":
        """
        Returns a unit-length copy, leaving this vector untouched.
        """
        v = self.copy()
        v.normalize()
        return v

    @ieee754
    def distance_squared(self, other: "Vector3") -> np.float32:
        if not isinstance(other, Vector3):
            raise TypeError("Can only calculate distance to another Vector3.")
        d_x = self.x - other.x
        d_y = self.y - other.y
        d_z = self.z - other.z
        return d_x * d_x + d_y * d_y + d_z * d_z

    @ieee754
    def distance(self, other: "Vector3") -> np.float32:
        return np.sqrt(self.distance_squared(other))

    @ieee754
    def dot(self, other: "Vector3") -> np.float32:
        if not isinstance(other, Vector3):
            raise TypeError("Can only calculate dot product with another Vector3.")
        return self.x * other.x + self.y * other.y + self.z * other.z

    @ieee754
    def cross(self, other: "Vector3") -> "Vector3":
        """
        Right-handed cross product: x cross y gives z.
        """
        if not isinstance(other, Vector3):
            raise TypeError("Can only calculate cross product with another Vector3.")
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    @ieee754
    def __eq__(self, other) -> bool:
        # Tolerant comparison; NaN components never match.
        if not isinstance(other, Vector3):
            return NotImplemented
        return close(self.x, other.x) and close(self.y, other.y) and close(self.z, other.z)

    def __neg__(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)

    @ieee754
    def __add__(self, other: "Vector3") -> "Vector3":
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    @ieee754
    def __iadd__(self, other: "Vector3") -> "Vector3":
        if not isinstance(other, Vector3):
            return NotImplemented
        self.x += other.x
        self.y += other.y
        self.z += other.z
        return self

    @ieee754
    def __sub__(self, other: "Vector3") -> "Vector3":
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    @ieee754
    def __isub__(self, other: "Vector3") -> "Vector3":
        if not isinstance(other, Vector3):
            return NotImplemented
        self.x -= other.x
        self.y -= other.y
        self.z -= other.z
        return self

    @ieee754
    def __mul__(self, other):
        # Element-wise multiplication.
        if isinstance(other, Vector3):
            return Vector3(self.x * other.x, self.y * other.y, self.z * other.z)
        # Scalar multiplication.
        if is_scalar(other):
            t = f32(other)
            return Vector3(self.x * t, self.y * t, self.z * t)
        return NotImplemented

    def __rmul__(self, other: float) -> "Vector3":
        if not is_scalar(other):
            return NotImplemented
        return self.__mul__(other)

    @ieee754
    def __imul__(self, other):
        if isinstance(other, Vector3):
            self.x *= other.x
            self.y *= other.y
            self.z *= other.z
            return self
        if is_scalar(other):
            t = f32(other)
            self.x *= t
            self.y *= t
            self.z *= t
            return self
        return NotImplemented

    @ieee754
    def __truediv__(self, other):
        if isinstance(other, Vector3):
            return Vector3(self.x / other.x, self.y / other.y, self.z / other.z)
        if is_scalar(other):
            t = f32(other)
            return Vector3(self.x / t, self.y / t, self.z / t)
        return NotImplemented

    @ieee754
    def __itruediv__(self, other):
        if isinstance(other, Vector3):
            self.x /= other.x
            self.y /= other.y
            self.z /= other.z
            return self
        if is_scalar(other):
            t = f32(other)
            self.x /= t
            self.y /= t
            self.z /= t
            return self
        return NotImplemented

    def __repr__(self) -> str:
        return f"Vector3({self.x}, {self.y}, {self.z})"
