import math

import pytest

from fieldtrip import (
    Attractor,
    Body,
    DivideByZeroError,
    DragZone,
    InvalidMassError,
    Mode,
    Vector2,
    boost_factor,
)


def test_body_rejects_non_positive_mass() -> None:
    with pytest.raises(InvalidMassError):
        Body(0.0, 0.0, mass=0.0)
    with pytest.raises(ValueError):
        Body(0.0, 0.0, mass=-5.0)
    with pytest.raises(InvalidMassError):
        Body(0.0, 0.0, mass=float("nan"))


def test_attractor_rejects_non_positive_mass() -> None:
    with pytest.raises(InvalidMassError):
        Attractor(x=0.0, y=0.0, mass=0.0)


def test_apply_force_accumulates_force_over_mass() -> None:
    body = Body(0.0, 0.0, mass=4.0)
    body.apply_force(Vector2(8.0, 0.0))
    body.apply_force(Vector2(0.0, -4.0))
    assert math.isclose(body.acceleration.x, 2.0)
    assert math.isclose(body.acceleration.y, -1.0)


def test_apply_force_on_massless_body_is_a_fault() -> None:
    body = Body(0.0, 0.0, mass=1.0)
    body._mass = 0.0
    with pytest.raises(DivideByZeroError):
        body.apply_force(Vector2(1.0, 0.0))


def test_update_without_forces_moves_by_velocity_only() -> None:
    body = Body(10.0, 20.0, vx=2.0, vy=-3.0, mass=15.0)
    body.update(Mode.CHAOS)
    assert body.position == Vector2(12.0, 17.0)
    assert body.velocity == Vector2(2.0, -3.0)
    assert body.acceleration == Vector2.zero()


@pytest.mark.parametrize(
    ("mode", "expected_vx"),
    [
        (Mode.CALM, 1.0),
        (Mode.CHAOS, 17.0),
        (Mode.SNOW, 1.25),
        (Mode.WIND, 65.0),
    ],
)
def test_update_boosts_velocity_by_mode(mode: Mode, expected_vx: float) -> None:
    body = Body(0.0, 0.0, mass=1.0)
    body.apply_force(Vector2(1.0, 0.0))
    body.update(mode)
    assert math.isclose(body.velocity.x, expected_vx)
    # Boost lands in velocity before position is integrated.
    assert math.isclose(body.position.x, expected_vx)
    assert body.acceleration == Vector2.zero()


def test_update_uses_custom_boost_factors() -> None:
    body = Body(0.0, 0.0, mass=2.0)
    body.apply_force(Vector2(0.0, 2.0))
    body.update(Mode.WIND, wind_boost=3.0)
    assert math.isclose(body.velocity.y, 4.0)


def test_boost_factor_table() -> None:
    assert boost_factor(Mode.CALM) == 0.0
    assert boost_factor(Mode.CHAOS) == 16.0
    assert boost_factor(Mode.SNOW) == 0.25
    assert boost_factor(Mode.WIND) == 64.0
    assert boost_factor(Mode.CHAOS, chaos_boost=2.0) == 2.0


def test_lifetime_decreases_and_expires() -> None:
    body = Body(0.0, 0.0, mass=1.0, lifetime=3)
    seen = [body.remaining_lifetime]
    for _ in range(3):
        assert not body.is_expired()
        body.update()
        seen.append(body.remaining_lifetime)
    assert seen == [3, 2, 1, 0]
    assert body.is_expired()


def test_mass_is_read_only() -> None:
    body = Body(0.0, 0.0, mass=12.0)
    with pytest.raises(AttributeError):
        body.mass = 3.0  # type: ignore[misc]


def test_attract_points_toward_attractor() -> None:
    attractor = Attractor(x=100.0, y=100.0, mass=50.0)
    body = Body(100.0, 110.0, mass=10.0)
    force = attractor.attract(body)
    assert force.x == 0.0
    assert force.y < 0.0
    assert math.isclose(force.magnitude(), 50.0 * 10.0 / 100.0)


def test_attract_clamps_close_range_to_minimum_distance() -> None:
    attractor = Attractor(x=0.0, y=0.0, mass=50.0)
    body = Body(3.0, 0.0, mass=1.0)
    force = attractor.attract(body)
    assert math.isclose(force.magnitude(), 50.0 / 25.0)
    assert attractor.clamped_distance(body) == 5.0


@pytest.mark.parametrize("distance", [1.0, 12.0, 80.0])
def test_attract_uses_clamped_distance_for_custom_clamp(distance: float) -> None:
    attractor = Attractor(x=0.0, y=0.0, mass=40.0, gravitational_constant=2.0, min_distance=4.0, max_distance=30.0)
    body = Body(0.0, distance, mass=3.0)
    clamped = attractor.clamped_distance(body)
    assert clamped == min(max(distance, 4.0), 30.0)
    assert math.isclose(attractor.attract(body).magnitude(), 2.0 * 40.0 * 3.0 / clamped**2)


def test_attract_clamps_long_range_to_maximum_distance() -> None:
    attractor = Attractor(x=0.0, y=0.0, mass=50.0)
    near_cap = attractor.attract(Body(25.0, 0.0, mass=1.0))
    far = attractor.attract(Body(400.0, 0.0, mass=1.0))
    assert math.isclose(near_cap.magnitude(), far.magnitude())
    assert math.isclose(far.magnitude(), 50.0 / 625.0)


def test_attract_magnitude_decreases_with_distance_inside_clamp() -> None:
    attractor = Attractor(x=0.0, y=0.0, mass=50.0)
    magnitudes = [attractor.attract(Body(d, 0.0, mass=20.0)).magnitude() for d in range(5, 26)]
    assert all(a > b for a, b in zip(magnitudes, magnitudes[1:]))


def test_attract_magnitude_increases_with_either_mass() -> None:
    body_light = Body(10.0, 0.0, mass=10.0)
    body_heavy = Body(10.0, 0.0, mass=20.0)
    light_well = Attractor(x=0.0, y=0.0, mass=30.0)
    heavy_well = Attractor(x=0.0, y=0.0, mass=60.0)
    assert light_well.attract(body_heavy).magnitude() > light_well.attract(body_light).magnitude()
    assert heavy_well.attract(body_light).magnitude() > light_well.attract(body_light).magnitude()


def test_attract_is_pure() -> None:
    attractor = Attractor(x=0.0, y=0.0, mass=50.0)
    body = Body(7.0, 7.0, vx=1.0, mass=10.0)
    attractor.attract(body)
    assert body.position == Vector2(7.0, 7.0)
    assert body.velocity == Vector2(1.0, 0.0)
    assert body.acceleration == Vector2.zero()


def test_attract_on_top_of_attractor_is_zero() -> None:
    attractor = Attractor(x=5.0, y=5.0, mass=50.0)
    assert attractor.attract(Body(5.0, 5.0, mass=10.0)) == Vector2.zero()


def test_attractor_is_immutable() -> None:
    attractor = Attractor(x=1.0, y=2.0)
    with pytest.raises(AttributeError):
        attractor.x = 3.0  # type: ignore[misc]
    pos = attractor.position
    pos.add_in_place(Vector2(10.0, 10.0))
    assert attractor.position == Vector2(1.0, 2.0)


def test_drag_zone_contains_is_strict() -> None:
    zone = DragZone(x=0.0, y=0.0, width=100.0, height=50.0)
    assert zone.contains(Body(50.0, 25.0))
    assert not zone.contains(Body(0.0, 25.0))
    assert not zone.contains(Body(100.0, 25.0))
    assert not zone.contains(Body(50.0, 50.0))
    assert not zone.contains(Body(150.0, 25.0))


def test_drag_zone_applies_force_opposing_velocity() -> None:
    zone = DragZone(x=0.0, y=0.0, width=800.0, height=600.0)
    body = Body(400.0, 300.0, vx=10.0, vy=0.0, mass=1.0)
    force = zone.drag_force(body)
    assert math.isclose(force.x, -1.0)
    assert math.isclose(force.y, 0.0, abs_tol=1e-12)
    zone.apply_effect(body)
    assert math.isclose(body.acceleration.x, -1.0)
    assert math.isclose(body.acceleration.y, 0.0, abs_tol=1e-12)


def test_drag_zone_rejects_negative_size() -> None:
    with pytest.raises(ValueError):
        DragZone(x=0.0, y=0.0, width=-1.0, height=10.0)


def test_mode_parse_and_metadata() -> None:
    assert Mode.parse("Wind") is Mode.WIND
    assert Mode.parse(Mode.SNOW) is Mode.SNOW
    assert [m.spawn_count for m in Mode] == [1, 2, 3, 4]
    assert Mode.WIND.label == "Hurricane"
    with pytest.raises(ValueError):
        Mode.parse("storm")
