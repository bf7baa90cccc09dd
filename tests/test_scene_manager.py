import pytest

from samurai_engine.scene import Scene
from samurai_engine.scene_manager import SceneManager


class RecordingScene(Scene):
    def __init__(self, name, log):
        super().__init__()
        self.name = name
        self.log = log

    def start(self):
        self.log.append(("start", self.name))
        super().start()

    def update(self):
        self.log.append(("update", self.name))
        super().update()

    def render(self):
        self.log.append(("render", self.name))
        super().render()

    def exit(self):
        self.log.append(("exit", self.name))
        super().exit()


@pytest.fixture
def manager():
    created = SceneManager()
    yield created
    SceneManager.clear_instance()


@pytest.fixture
def log():
    return []


@pytest.fixture
def two_scenes(manager, log):
    menu = manager.create_scene(lambda: RecordingScene("menu", log))
    stage = manager.create_scene(lambda: RecordingScene("stage", log))
    return menu, stage


def test_manager_is_singleton(manager):
    assert SceneManager.get() is manager
    with pytest.raises(RuntimeError):
        SceneManager()


def test_no_current_scene_does_nothing(manager, log):
    manager.init()
    manager.update()
    manager.render()
    assert manager.current_scene() is None
    assert log == []


def test_set_current_scene(manager, two_scenes):
    menu, stage = two_scenes
    manager.set_current_scene(1)
    assert manager.current_scene() is stage
    manager.set_current_scene(0)
    assert manager.current_scene() is menu


def test_out_of_range_indices_are_ignored(manager, two_scenes):
    menu, _ = two_scenes
    manager.set_current_scene(0)
    manager.set_current_scene(2)
    manager.set_current_scene(-1)
    assert manager.current_scene() is menu
    manager.change_scene(5)
    manager.update()
    assert manager.current_scene() is menu


def test_init_starts_current_scene(manager, two_scenes, log):
    menu, _ = two_scenes
    manager.set_current_scene(0)
    manager.init()
    assert manager.current_scene() is menu
    assert log == [("start", "menu")]


def test_update_and_render_forward_to_current(manager, two_scenes, log):
    menu, _ = two_scenes
    manager.set_current_scene(0)
    manager.update()
    manager.render()
    assert manager.current_scene() is menu
    assert log == [("update", "menu"), ("render", "menu")]


def test_change_scene_is_deferred_until_update(manager, two_scenes, log):
    menu, stage = two_scenes
    manager.set_current_scene(0)
    manager.change_scene(1)
    assert manager.current_scene() is menu
    assert log == []
    manager.update()
    assert manager.current_scene() is stage
    assert log == [("exit", "menu"), ("start", "stage"), ("update", "stage")]


def test_change_scene_without_current_starts_target(manager, two_scenes, log):
    _, stage = two_scenes
    manager.change_scene(1)
    manager.update()
    assert manager.current_scene() is stage
    assert log == [("start", "stage"), ("update", "stage")]


def test_change_is_applied_only_once(manager, two_scenes, log):
    menu, _ = two_scenes
    manager.change_scene(0)
    manager.update()
    manager.update()
    assert manager.current_scene() is menu
    assert log.count(("start", "menu")) == 1
    assert log.count(("update", "menu")) == 2


def test_release_drops_all_scenes(manager, two_scenes, log):
    manager.set_current_scene(0)
    manager.release()
    assert manager.current_scene() is None
    manager.set_current_scene(0)
    assert manager.current_scene() is None
    manager.update()
    assert log == []