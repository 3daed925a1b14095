import numpy as np
import pytest

from rotaryknob.model.rotation import RotationRange, normalize_rotation, snap, tick_directions, wrap


@pytest.mark.parametrize("raw, expected", [
    (370.0, 10.0),
    (-10.0, 350.0),
    (360.0, 0.0),
    (720.5, 0.5),
    (-1e-20, 0.0),
])
def test_wrap(raw, expected):
    assert wrap(raw) == pytest.approx(expected)


@pytest.mark.parametrize("raw, expected", [
    (34.0, 30.0),
    (14.0, 0.0),
    (346.0, 0.0),
    (45.0, 60.0),
    (330.0, 330.0),
])
def test_snap_with_dead_zone(raw, expected):
    assert snap(raw, 30.0) == expected


def test_snap_rounds_half_up():
    assert snap(75.0, 30.0) == 90.0


@pytest.mark.parametrize("raw", [-725.0, -10.0, 0.0, 14.9, 181.0, 359.9, 1000.0])
@pytest.mark.parametrize("snapping", [False, True])
def test_normalize_rotation_is_idempotent_and_in_domain(raw, snapping):
    once = normalize_rotation(raw, tick_spacing=30.0, snap_to_ticks=snapping)
    twice = normalize_rotation(once, tick_spacing=30.0, snap_to_ticks=snapping)
    assert 0.0 <= once < 360.0
    assert once == twice


@pytest.mark.parametrize("raw", [-725.0, -10.0, 0.0, 12.0, 181.0, 355.0, 1000.0])
@pytest.mark.parametrize("snapping", [False, True])
@pytest.mark.parametrize("bounds", [(30.0, 270.0), (10.0, 350.0), (41.0, 42.0)])
def test_normalize_rotation_in_range_is_idempotent_and_in_range(raw, snapping, bounds):
    r = RotationRange.create(*bounds)
    once = normalize_rotation(raw, tick_spacing=40.0, snap_to_ticks=snapping, rotation_range=r)
    twice = normalize_rotation(once, tick_spacing=40.0, snap_to_ticks=snapping, rotation_range=r)
    assert once in r
    assert once == twice


def test_range_clamps_instead_of_wrapping():
    r = RotationRange.create(30.0, 270.0)
    assert normalize_rotation(300.0, tick_spacing=10.0, rotation_range=r) == 270.0
    assert normalize_rotation(-10.0, tick_spacing=10.0, rotation_range=r) == 30.0
    assert normalize_rotation(90.0, tick_spacing=10.0, rotation_range=r) == 90.0


def test_range_snapping_stays_inside_range():
    r = RotationRange.create(10.0, 350.0)
    assert normalize_rotation(355.0, tick_spacing=40.0, snap_to_ticks=True, rotation_range=r) == 320.0
    assert normalize_rotation(12.0, tick_spacing=40.0, snap_to_ticks=True, rotation_range=r) == 40.0
    assert normalize_rotation(90.0, tick_spacing=40.0, snap_to_ticks=True, rotation_range=r) == 80.0


def test_range_without_tick_inside_falls_back_to_clamp():
    r = RotationRange.create(41.0, 42.0)
    assert normalize_rotation(50.0, tick_spacing=30.0, snap_to_ticks=True, rotation_range=r) == 42.0


def test_range_create_swaps_and_limits_bounds():
    assert RotationRange.create(270.0, 30.0) == RotationRange(30.0, 270.0)
    assert RotationRange.create(-20.0, 400.0) == RotationRange(0.0, 360.0)


def test_range_create_rejects_non_finite_bounds():
    with pytest.raises(ValueError):
        RotationRange.create(float("nan"), 10.0)


def test_tick_directions_count_and_unit_length():
    ticks = tick_directions(45.0)
    assert ticks.shape == (8, 2)
    assert np.allclose(np.linalg.norm(ticks, axis=1), 1.0)
    assert np.allclose(ticks[0], (0.0, -1.0))
    assert np.allclose(ticks[2], (1.0, 0.0))


def test_tick_directions_exclude_full_turn():
    assert len(tick_directions(30.0)) == 12
    assert len(tick_directions(7.0)) == 52
