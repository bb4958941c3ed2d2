# vecmath/scalar.py
import functools
import numpy as np

# All vector components are single precision.
DTYPE = np.float32

# Machine epsilon for float32, used as the tolerance for vector equality.
EPSILON = np.finfo(DTYPE).eps

SCALAR_TYPES = (int, float, np.integer, np.floating)


def f32(value) -> np.float32:
    """Coerce a Python or numpy number to a float32 scalar."""
    return DTYPE(value)


def is_scalar(value) -> bool:
    """
    True for numbers that can be broadcast across vector components.
    Booleans are rejected even though bool subclasses int.
    """
    return isinstance(value, SCALAR_TYPES) and not isinstance(value, bool)


def ieee754(func):
    """
    Run float arithmetic with plain IEEE-754 results.

    Division by zero, 0/0 and overflow yield Infinity or NaN without numpy
    emitting RuntimeWarnings. A new errstate is entered on every call so
    decorated functions can call each other.
    """
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            return func(*args, **kwargs)
    return wrapper


def close(a, b) -> bool:
    """Components match exactly or differ by at most EPSILON."""
    return bool(a == b or abs(a - b) <= EPSILON)
