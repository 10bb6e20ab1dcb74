"""Tests for clock advancement and TickContext generation."""

import math

import pytest

from gridwalk.clock import Clock
from gridwalk.types import TickContext


def test_clock_initialization():
    clock = Clock()
    assert clock.tick_number == 0
    assert clock.dt == 0.0
    assert clock.elapsed == 0.0


def test_advance_returns_new_tick_number():
    clock = Clock()
    assert clock.advance(0.1) == 1
    assert clock.advance(0.1) == 2


def test_advance_records_variable_dt():
    clock = Clock()
    clock.advance(0.25)
    assert clock.dt == 0.25
    clock.advance(0.05)
    assert clock.dt == 0.05
    assert math.isclose(clock.elapsed, 0.3)


def test_zero_dt_is_allowed():
    clock = Clock()
    clock.advance(0.0)
    assert clock.tick_number == 1
    assert clock.elapsed == 0.0


def test_negative_dt_raises():
    clock = Clock()
    with pytest.raises(ValueError):
        clock.advance(-0.01)
    assert clock.tick_number == 0


def test_context_returns_correct_values():
    clock = Clock()
    clock.advance(0.5)
    stop_called = []
    ctx = clock.context(lambda: stop_called.append(True))

    assert isinstance(ctx, TickContext)
    assert ctx.tick_number == 1
    assert ctx.dt == 0.5
    assert ctx.elapsed == 0.5
    ctx.request_stop()
    assert stop_called == [True]


def test_context_is_frozen():
    ctx = Clock().context(lambda: None)
    with pytest.raises(AttributeError):
        ctx.dt = 1.0  # type: ignore[misc]
