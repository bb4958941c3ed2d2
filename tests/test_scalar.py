"""Unit tests for vecmath.scalar."""

import warnings

import numpy as np

from vecmath.scalar import EPSILON, close, f32, ieee754, is_scalar


def test_epsilon_is_float32_machine_epsilon():
    assert EPSILON == np.finfo(np.float32).eps
    assert f32(1.0) + EPSILON != f32(1.0)


def test_f32():
    assert isinstance(f32(1), np.float32)
    assert f32(0.1) == np.float32(0.1)


def test_is_scalar():
    assert is_scalar(1)
    assert is_scalar(2.5)
    assert is_scalar(np.float32(1.0))
    assert is_scalar(np.int64(3))
    assert not is_scalar(True)
    assert not is_scalar("1")
    assert not is_scalar([1.0])


def test_close():
    assert close(f32(0.0), f32(0.0))
    assert close(f32(0.0), EPSILON)
    assert not close(f32(0.0), EPSILON * 2)
    assert close(f32(np.inf), f32(np.inf))
    assert not close(f32(np.nan), f32(np.nan))


def test_ieee754_silences_float_warnings_and_nests():
    @ieee754
    def inner():
        return f32(1.0) / f32(0.0)

    @ieee754
    def outer():
        return inner() - inner()

    with warnings.catch_warnings():
        warnings.simplefilter("error")
        assert np.isnan(outer())
        assert np.isposinf(inner())
