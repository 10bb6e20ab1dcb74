"""Tests for vector helpers."""
from __future__ import annotations

import math

import pytest

from gridwalk import vec


def test_add_and_sub():
    assert vec.add((1.0, 2.0, 3.0), (4.0, 5.0, 6.0)) == (5.0, 7.0, 9.0)
    assert vec.sub((5.0, 3.0, 1.0), (1.0, 2.0, 1.0)) == (4.0, 1.0, 0.0)


def test_mismatched_dimensions_raises():
    with pytest.raises(ValueError):
        vec.add((1.0, 2.0), (3.0, 4.0, 5.0))


def test_scale():
    assert vec.scale((1.0, -2.0, 0.0), 50.0) == (50.0, -100.0, 0.0)


def test_dot():
    assert vec.dot((1.0, 0.0, 0.0), (-10.0, 3.0, 0.0)) == -10.0


def test_magnitude_diagonal():
    assert math.isclose(vec.magnitude((1.0, 1.0, 0.0)), math.sqrt(2.0))
    assert vec.magnitude(vec.zero(3)) == 0.0


def test_zero():
    assert vec.zero() == (0.0, 0.0, 0.0)
    assert vec.zero(2) == (0.0, 0.0)
