from mazegame.actor import Actor
from mazegame.colliders import AABBCollider
from mazegame.scene import Scene


class RecordingActor(Actor):
    def __init__(self, x=0.0, y=0.0, name="Recording"):
        super().__init__(x, y, name)
        self.events = []
        self.collisions = []

    def start(self):
        super().start()
        self.events.append("start")

    def update(self, delta_time):
        super().update(delta_time)
        self.events.append("update")

    def fixed_update(self, fixed_delta_time):
        super().fixed_update(fixed_delta_time)
        self.events.append("fixed_update")

    def draw(self):
        super().draw()
        self.events.append("draw")

    def end(self):
        super().end()
        self.events.append("end")

    def on_destroy(self):
        super().on_destroy()
        self.events.append("destroy")

    def on_collision(self, other):
        super().on_collision(other)
        self.collisions.append(other)


def test_add_actor_includes_children():
    scene = Scene()
    parent = RecordingActor(name="parent")
    child = RecordingActor(name="child")
    parent.transform.add_child(child.transform)
    scene.add_actor(parent)
    assert scene.actors == (parent, child)


def test_add_ui_element_includes_children():
    scene = Scene()
    parent = RecordingActor()
    child = RecordingActor()
    parent.transform.add_child(child.transform)
    scene.add_ui_element(parent)
    assert scene.ui_elements == (parent, child)
    assert scene.actors == ()


def test_remove_actor_reports_success():
    scene = Scene()
    a = RecordingActor()
    b = RecordingActor()
    scene.add_actor(a)
    assert scene.remove_actor(a) is True
    assert scene.remove_actor(b) is False
    assert scene.remove_actor(None) is False
    assert scene.actors == ()


def test_remove_ui_element_reports_success():
    scene = Scene()
    a = RecordingActor()
    scene.add_ui_element(a)
    assert scene.remove_ui_element(a) is True
    assert scene.remove_ui_element(a) is False


def test_get_actor_by_index():
    scene = Scene()
    a, b = RecordingActor(), RecordingActor()
    scene.add_actor(a)
    scene.add_actor(b)
    assert scene.get_actor(0) is a
    assert scene.get_actor(1) is b


def test_update_starts_once_and_skips_inactive():
    scene = Scene()
    active = RecordingActor()
    inactive = RecordingActor()
    inactive.active = False
    scene.add_actor(active)
    scene.add_actor(inactive)
    scene.update(0.1)
    scene.update(0.1)
    assert active.events == ["start", "update", "update"]
    assert inactive.events == []
    assert inactive.started is False


def test_update_ui_skips_inactive():
    scene = Scene()
    element = RecordingActor()
    hidden = RecordingActor()
    hidden.active = False
    scene.add_ui_element(element)
    scene.add_ui_element(hidden)
    scene.update_ui(0.1)
    assert element.events == ["start", "update"]
    assert hidden.events == []


def test_start_and_end():
    scene = Scene()
    started = RecordingActor()
    idle = RecordingActor()
    scene.add_actor(started)
    scene.add_actor(idle)
    scene.start()
    assert scene.started is True
    started.start()
    scene.end()
    assert scene.started is False
    assert started.events == ["start", "end"]
    assert idle.events == []


def test_draw_skips_inactive():
    scene = Scene()
    shown = RecordingActor()
    hidden = RecordingActor()
    hidden.active = False
    scene.add_actor(shown)
    scene.add_actor(hidden)
    scene.draw()
    assert shown.events == ["draw"]
    assert hidden.events == []


def test_draw_ui_draws_elements():
    scene = Scene()
    element = RecordingActor()
    scene.add_ui_element(element)
    scene.draw_ui()
    assert element.events == ["draw"]


def _colliding_pair():
    a = RecordingActor(0, 0)
    b = RecordingActor(5, 0)
    a.collider = AABBCollider(a, 10, 10)
    b.collider = AABBCollider(b, 10, 10)
    return a, b


def test_fixed_update_reports_collisions_both_ways():
    scene = Scene()
    a, b = _colliding_pair()
    scene.add_actor(a)
    scene.add_actor(b)
    scene.update(0.0)
    scene.fixed_update(0.01)
    assert a.collisions == [b]
    assert b.collisions == [a]
    assert "fixed_update" in a.events


def test_static_actor_does_not_receive_collisions():
    scene = Scene()
    a, b = _colliding_pair()
    b.static = True
    scene.add_actor(a)
    scene.add_actor(b)
    scene.update(0.0)
    scene.fixed_update(0.01)
    assert a.collisions == [b]
    assert b.collisions == []


def test_collision_requires_started_other():
    scene = Scene()
    a, b = _colliding_pair()
    scene.add_actor(a)
    scene.add_actor(b)
    a.start()
    scene.fixed_update(0.01)
    assert a.collisions == []
    assert b.collisions == [a]


def test_no_collision_when_apart():
    scene = Scene()
    a = RecordingActor(0, 0)
    b = RecordingActor(100, 0)
    a.collider = AABBCollider(a, 10, 10)
    b.collider = AABBCollider(b, 10, 10)
    scene.add_actor(a)
    scene.add_actor(b)
    scene.update(0.0)
    scene.fixed_update(0.01)
    assert a.collisions == []
    assert b.collisions == []


def test_destroy_happens_on_next_update():
    scene = Scene()
    a = RecordingActor()
    scene.add_actor(a)
    scene.destroy(a)
    assert scene.actors == (a,)
    scene.update(0.0)
    assert scene.actors == ()
    assert a.events == ["end", "destroy"]


def test_destroy_twice_ends_once():
    scene = Scene()
    a = RecordingActor()
    scene.add_actor(a)
    scene.destroy(a)
    scene.destroy(a)
    scene.update(0.0)
    assert a.events.count("end") == 1


def test_destroy_includes_children_and_detaches_from_parent():
    scene = Scene()
    root = RecordingActor(name="root")
    parent = RecordingActor(name="parent")
    child = RecordingActor(name="child")
    root.transform.add_child(parent.transform)
    parent.transform.add_child(child.transform)
    scene.add_actor(root)
    scene.destroy(parent)
    scene.update(0.0)
    assert scene.actors == (root,)
    assert "destroy" in parent.events
    assert "destroy" in child.events
    assert parent.transform not in root.transform.children


def test_destroy_ui_element():
    scene = Scene()
    element = RecordingActor()
    scene.add_ui_element(element)
    scene.destroy(element)
    scene.update(0.0)
    assert scene.ui_elements == ()
    assert element.events == ["end", "destroy"]