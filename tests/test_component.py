import pytest

from delvekit.component import Component, TransformComponent


def test_transform_defaults_to_origin_with_unit_scale():
    t = TransformComponent()
    assert (t.x, t.y, t.rotation) == (0.0, 0.0, 0.0)
    assert (t.scale_x, t.scale_y) == (1.0, 1.0)


def test_transform_initial_position():
    t = TransformComponent(3.5, -2.0)
    assert (t.x, t.y) == (3.5, -2.0)


def test_set_position_and_move():
    t = TransformComponent()
    t.set_position(4.0, 6.0)
    t.move(1.0, -2.0)
    assert (t.x, t.y) == (4.0 + 1.0, 6.0 - 2.0)


def test_set_scale_uniform_and_separate():
    t = TransformComponent()
    t.set_scale(2.5)
    assert t.scale_x == t.scale_y == 2.5
    t.set_scale(1.5, 3.0)
    assert (t.scale_x, t.scale_y) == (1.5, 3.0)


def test_rotate_accumulates():
    t = TransformComponent()
    t.rotate(30.0)
    t.rotate(15.0)
    assert t.rotation == pytest.approx(45.0)


def test_update_applies_velocity():
    t = TransformComponent(1.0, 1.0)
    t.set_velocity(10.0, -4.0)
    t.update(0.5)
    assert t.x == pytest.approx(1.0 + 10.0 * 0.5)
    assert t.y == pytest.approx(1.0 - 4.0 * 0.5)


def test_update_without_velocity_keeps_position():
    t = TransformComponent(2.0, 3.0)
    t.update(1.0)
    assert (t.x, t.y) == (2.0, 3.0)


def test_attach_and_detach_set_owner():
    c = Component()
    owner = object()
    c.on_attach(owner)
    assert c.owner is owner
    c.on_detach()
    assert c.owner is None