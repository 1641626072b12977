from fieldtrip import Controller, Mode, SimulationWorld


def _world() -> SimulationWorld:
    world = SimulationWorld(seed=31)
    world.bodies.clear()
    return world


def test_click_spawns_bodies_for_current_mode() -> None:
    world = _world()
    controller = Controller(world)
    controller.click(100.0, 100.0)
    assert len(world.bodies) == 1
    world.set_mode(Mode.WIND)
    controller.click(100.0, 100.0)
    assert len(world.bodies) == 5
    assert len(world.attractors) == 1


def test_modified_click_adds_attractor_only() -> None:
    world = _world()
    controller = Controller(world)
    controller.click(250.0, 125.0, modifier=True)
    assert len(world.attractors) == 2
    assert world.bodies == []
    assert (world.attractors[-1].x, world.attractors[-1].y) == (250.0, 125.0)


def test_mode_keys_select_exclusive_modes() -> None:
    world = _world()
    controller = Controller(world)
    expected = {"l": Mode.CHAOS, "s": Mode.SNOW, "w": Mode.WIND, "m": Mode.CALM}
    for key, mode in expected.items():
        assert controller.key(key)
        assert world.mode is mode
    assert controller.key("L")
    assert world.mode is Mode.CHAOS


def test_overlay_toggle_does_not_touch_world() -> None:
    world = _world()
    controller = Controller(world)
    before = world.state_array()
    assert controller.show_overlay
    assert controller.key("t")
    assert not controller.show_overlay
    assert controller.key("T")
    assert controller.show_overlay
    assert (world.state_array() == before).all()


def test_reset_keys() -> None:
    world = _world()
    controller = Controller(world)
    controller.click(10.0, 10.0, modifier=True)
    assert controller.key("r")
    assert world.seed == 31
    assert len(world.bodies) == 2
    assert len(world.attractors) == 1

    twin = SimulationWorld(seed=31)
    expected_seed = twin.hard_reset()
    assert controller.key("n")
    assert world.seed == expected_seed


def test_unbound_keys_are_ignored() -> None:
    world = _world()
    controller = Controller(world)
    assert not controller.key("x")
    assert not controller.key("shift")
    assert not controller.key(None)
    assert world.mode is Mode.CALM
    assert set(controller.keys) == {"t", "m", "l", "s", "w", "r", "n"}
