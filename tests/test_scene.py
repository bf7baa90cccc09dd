import pytest

from samurai_engine.game_object import GameObject
from samurai_engine.scene import Scene


class Recorder(GameObject):
    def __init__(self, name, log):
        self.name = name
        self.log = log

    def start(self):
        self.log.append(("start", self.name))

    def update(self):
        self.log.append(("update", self.name))

    def render(self):
        self.log.append(("render", self.name))


@pytest.fixture
def log():
    return []


@pytest.fixture
def scene_with_two(log):
    scene = Scene()
    a = scene.create_object(lambda: Recorder("a", log))
    b = scene.create_object(lambda: Recorder("b", log))
    return scene, a, b


def test_new_scene_is_empty():
    assert len(Scene()) == 0
    assert list(Scene()) == []


def test_create_object_registers_and_returns(scene_with_two):
    scene, a, b = scene_with_two
    assert len(scene) == 2
    assert list(scene) == [a, b]


def test_start_update_render_visit_objects_in_order(scene_with_two, log):
    scene, _, _ = scene_with_two
    scene.start()
    scene.update()
    scene.render()
    assert [obj.name for obj in scene] == ["a", "b"]
    assert log == [
        ("start", "a"),
        ("start", "b"),
        ("update", "a"),
        ("update", "b"),
        ("render", "a"),
        ("render", "b"),
    ]


def test_delete_object_removes_only_that_object(scene_with_two, log):
    scene, a, b = scene_with_two
    scene.delete_object(a)
    assert list(scene) == [b]
    scene.update()
    assert log == [("update", "b")]


def test_delete_unknown_object_raises(scene_with_two, log):
    scene, _, _ = scene_with_two
    with pytest.raises(ValueError):
        scene.delete_object(Recorder("stranger", log))
    assert len(scene) == 2


def test_clear_removes_everything(scene_with_two, log):
    scene, _, _ = scene_with_two
    scene.clear()
    assert len(scene) == 0
    scene.render()
    assert log == []


def test_exit_clears_objects(scene_with_two):
    scene, _, _ = scene_with_two
    scene.exit()
    assert list(scene) == []