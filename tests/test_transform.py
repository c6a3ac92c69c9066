import pytest

from mazegame.transform import Transform2D
from mazegame.vectors import Vector2


def _approx(v):
    return pytest.approx((v.x, v.y), abs=1e-6)


def test_owner_is_kept():
    owner = object()
    assert Transform2D(owner).owner is owner


def test_default_scale_and_forward():
    t = Transform2D()
    assert (t.scale.x, t.scale.y) == _approx(Vector2(1.0, 1.0))
    assert (t.forward.x, t.forward.y) == _approx(Vector2(1.0, 0.0))


def test_local_position_round_trip():
    t = Transform2D()
    t.local_position = Vector2(12.0, -4.0)
    assert t.local_position == Vector2(12.0, -4.0)
    assert t.world_position == Vector2(12.0, -4.0)


def test_world_position_setter_without_parent():
    t = Transform2D()
    t.world_position = Vector2(5.0, 6.0)
    assert t.local_position == Vector2(5.0, 6.0)


def test_child_world_position_includes_parent():
    parent, child = Transform2D(), Transform2D()
    parent.add_child(child)
    parent.local_position = Vector2(100.0, 50.0)
    child.local_position = Vector2(10.0, 20.0)
    expected = parent.local_position + child.local_position
    assert (child.world_position.x, child.world_position.y) == _approx(expected)


def test_child_world_position_setter_with_parent():
    parent, child = Transform2D(), Transform2D()
    parent.add_child(child)
    parent.local_position = Vector2(30.0, 40.0)
    child.world_position = Vector2(35.0, 47.0)
    assert (child.world_position.x, child.world_position.y) == _approx(Vector2(35.0, 47.0))


def test_add_and_remove_child():
    parent, child = Transform2D(), Transform2D()
    parent.add_child(child)
    assert child.parent is parent
    assert parent.children == (child,)
    assert parent.remove_child(child) is True
    assert child.parent is None
    assert parent.children == ()
    assert parent.remove_child(child) is False
    assert parent.remove_child(None) is False


def test_remove_child_at():
    parent, first, second = Transform2D(), Transform2D(), Transform2D()
    parent.add_child(first)
    parent.add_child(second)
    assert parent.remove_child_at(5) is False
    assert parent.remove_child_at(-1) is False
    assert parent.remove_child_at(0) is True
    assert parent.children == (second,)
    assert first.parent is None


def test_parent_setter():
    parent, child = Transform2D(), Transform2D()
    child.parent = parent
    parent.local_position = Vector2(3.0, 4.0)
    assert child.parent is parent
    assert child.world_position == parent.world_position


def test_scale_set_and_scale_by():
    t = Transform2D()
    t.scale = Vector2(25.0, 10.0)
    assert (t.scale.x, t.scale.y) == _approx(Vector2(25.0, 10.0))
    t.scale_by(Vector2(1.0, 1.0))
    assert (t.scale.x, t.scale.y) == _approx(Vector2(25.0, 10.0))


def test_rotate_accumulates():
    a, b = Transform2D(), Transform2D()
    a.rotate(0.3)
    a.rotate(0.5)
    b.set_rotation(0.8)
    assert (a.forward.x, a.forward.y) == _approx(b.forward)


def test_set_rotation_keeps_forward_unit_and_position():
    t = Transform2D()
    t.local_position = Vector2(7.0, 9.0)
    t.set_rotation(1.2)
    assert t.forward.magnitude() == pytest.approx(1.0)
    assert (t.world_position.x, t.world_position.y) == _approx(Vector2(7.0, 9.0))


@pytest.mark.parametrize("target", [Vector2(0.0, 1.0), Vector2(-3.0, 2.0), Vector2(4.0, -4.0)])
def test_look_at_points_forward_at_target(target):
    t = Transform2D()
    t.look_at(target)
    assert (t.forward.x, t.forward.y) == _approx(target.normalized())


def test_forward_setter_faces_direction():
    t = Transform2D()
    t.local_position = Vector2(50.0, 50.0)
    direction = Vector2(-2.0, 5.0)
    t.forward = direction
    assert (t.forward.x, t.forward.y) == _approx(direction.normalized())


def test_global_matrix_combines_parent():
    parent, child = Transform2D(), Transform2D()
    parent.add_child(child)
    parent.local_position = Vector2(1.0, 2.0)
    child.local_position = Vector2(3.0, 4.0)
    assert child.global_matrix == parent.global_matrix * child.local_matrix