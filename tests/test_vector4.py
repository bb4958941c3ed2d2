"""Unit tests for vecmath.vector4."""

import warnings

import numpy as np
import pytest

from vecmath import Vector3, Vector4

SAMPLES = [
    Vector4(1.0, 2.0, 3.0, 4.0),
    Vector4(-0.5, 0.0, 2.0, 1.0),
    Vector4(8.0, -8.0, 0.25, -3.0),
]

PAIRS = [(a, b) for a in SAMPLES for b in SAMPLES if a is not b]


def _xyzw(v):
    return tuple(float(c) for c in v)


# ---------------------------------------------------------------------------
# Construction and conversion
# ---------------------------------------------------------------------------


def test_addition_scenario():
    result = Vector4(1.0, 2.0, 3.0, 4.0) + Vector4(4.0, 3.0, 2.0, 1.0)
    assert _xyzw(result) == (5.0, 5.0, 5.0, 5.0)


def test_zero():
    assert _xyzw(Vector4.zero()) == (0.0, 0.0, 0.0, 0.0)


def test_array_conversion_keeps_xyzw_order():
    v = Vector4.from_array(np.arange(1, 5))
    assert (float(v.x), float(v.y), float(v.z), float(v.w)) == (1.0, 2.0, 3.0, 4.0)
    assert v.to_array().tolist() == [1.0, 2.0, 3.0, 4.0]
    assert v.to_array().dtype == np.float32


@pytest.mark.parametrize("v", SAMPLES)
def test_array_round_trip_is_exact(v):
    assert _xyzw(Vector4.from_array(v.to_array())) == _xyzw(v)


def test_from_array_wrong_length():
    with pytest.raises(ValueError, match="exactly 4"):
        Vector4.from_array([1.0, 2.0, 3.0])


def test_repr():
    assert repr(Vector4(1.0, 2.0, 3.0, 4.0)) == "Vector4(1.0, 2.0, 3.0, 4.0)"


# ---------------------------------------------------------------------------
# Geometry
# ---------------------------------------------------------------------------


def test_length():
    v = Vector4(1.0, 1.0, 1.0, 1.0)
    assert v.length_squared() == 4.0
    assert v.length() == 2.0


@pytest.mark.parametrize("v", SAMPLES)
def test_length_squared_equals_self_dot(v):
    assert v.length_squared() == v.dot(v)


@pytest.mark.parametrize("a,b", PAIRS)
def test_symmetry(a, b):
    assert a.dot(b) == b.dot(a)
    assert a.distance(b) == b.distance(a)
    assert a.distance_squared(b) == b.distance_squared(a)


def test_distance():
    a = Vector4(1.0, 2.0, 3.0, 4.0)
    b = Vector4(2.0, 3.0, 4.0, 5.0)
    assert a.distance_squared(b) == 4.0
    assert a.distance(b) == 2.0


def test_dot():
    assert Vector4(1.0, 2.0, 3.0, 4.0).dot(Vector4(4.0, 3.0, 2.0, 1.0)) == 20.0


@pytest.mark.parametrize("v", SAMPLES)
def test_normalize(v):
    v = v.copy()
    v.normalize()
    assert float(v.length()) == pytest.approx(1.0, abs=1e-6)


def test_normalize_zero_length_is_silent():
    v = Vector4.zero()
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        v.normalize()
    assert np.isnan(v.to_array()).all()


def test_dot_rejects_other_arity():
    with pytest.raises(TypeError):
        Vector4.zero().dot(Vector3.zero())


# ---------------------------------------------------------------------------
# Arithmetic
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("v", SAMPLES)
def test_identities(v):
    assert v + Vector4.zero() == v
    assert v - v == Vector4.zero()
    assert (v * 2.0) / 2.0 == v
    assert -(-v) == v


def test_value_operators():
    a = Vector4(2.0, 4.0, 6.0, 8.0)
    b = Vector4(1.0, 2.0, -3.0, 4.0)
    assert _xyzw(-a) == (-2.0, -4.0, -6.0, -8.0)
    assert _xyzw(a - b) == (1.0, 2.0, 9.0, 4.0)
    assert _xyzw(a * b) == (2.0, 8.0, -18.0, 32.0)
    assert _xyzw(a / b) == (2.0, 2.0, -2.0, 2.0)
    assert _xyzw(a * 0.5) == (1.0, 2.0, 3.0, 4.0)
    assert _xyzw(3 * b) == (3.0, 6.0, -9.0, 12.0)
    assert _xyzw(a / 2.0) == (1.0, 2.0, 3.0, 4.0)


def test_in_place_operators():
    v = Vector4(1.0, 2.0, 3.0, 4.0)
    alias = v
    v += Vector4(1.0, 1.0, 1.0, 1.0)
    assert _xyzw(alias) == (2.0, 3.0, 4.0, 5.0)
    v -= Vector4(2.0, 2.0, 2.0, 2.0)
    assert _xyzw(alias) == (0.0, 1.0, 2.0, 3.0)
    v *= Vector4(5.0, 4.0, 3.0, 2.0)
    assert _xyzw(alias) == (0.0, 4.0, 6.0, 6.0)
    v /= Vector4(1.0, 2.0, 3.0, 6.0)
    assert _xyzw(alias) == (0.0, 2.0, 2.0, 1.0)
    v *= 4
    assert _xyzw(alias) == (0.0, 8.0, 8.0, 4.0)
    v /= 8.0
    assert _xyzw(alias) == (0.0, 1.0, 1.0, 0.5)
    assert v is alias


def test_in_place_scalar_division_by_zero():
    v = Vector4(1.0, -1.0, 0.0, 2.0)
    v /= 0
    assert np.isposinf(v.x)
    assert np.isneginf(v.y)
    assert np.isnan(v.z)
    assert np.isposinf(v.w)


def test_overflow_becomes_infinity():
    big = Vector4(3e38, 3e38, 0.0, 0.0)
    assert np.isposinf((big + big).x)
    assert np.isposinf(big.length_squared())


def test_equality():
    assert Vector4(1.0, 2.0, 3.0, 4.0) == Vector4(1.0, 2.0, 3.0, 4.0)
    assert Vector4(1.0, 2.0, 3.0, 4.0) != Vector4(1.0, 2.0, 3.0, 4.5)
    assert Vector4(1.0, 2.0, 3.0, 4.0) != [1.0, 2.0, 3.0, 4.0]
