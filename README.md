# samurai-engine

A small 2D game engine built on pygame. It gives a game a main loop and a
set of managers: scenes full of game objects, a frame timer, a renderer with
a back buffer, and background music and sound effects.

## Installation

```
pip install samurai-engine
```

## Concepts

- `GameObject` (`samurai_engine.game_object`) is the abstract base of
  everything that lives in a scene. Subclasses implement `start()`,
  `update()` and `render()`.
- `Scene` (`samurai_engine.scene`) owns a list of game objects.
  `create_object(factory)` calls the factory, registers the result and
  returns it; `delete_object(obj)` removes it and raises `ValueError` if it is
  not registered. `start()`, `update()` and `render()` call the same method
  on each object in the order they were added. `exit()` and `clear()` drop
  all objects. A scene supports `len()` and iteration.
- `SceneManager` (`samurai_engine.scene_manager`) holds every scene of the
  game. `create_scene(factory)` registers one and returns it.
  `set_current_scene(index)` makes a scene current at once;
  `change_scene(index)` asks for a switch that takes place at the start of
  the next `update()`: the old scene exits and the new one starts. Indices
  out of range are ignored. `init()` starts the current scene, if any, and
  `current_scene()` returns it.
- `TimeManager` (`samurai_engine.time_manager`) measures `delta_time()`
  between updates and `total_time()` since `init()`, in seconds. It takes an
  optional clock function (default `time.perf_counter`).
- `RenderManager` (`samurai_engine.render_manager`) draws to a back buffer
  and copies it to the screen with `draw_back_to_front()`. It offers
  `load_image`, `copy_image`, `flip_image`, `draw_background`, `draw_image`,
  `draw_image_region` (one frame of an atlas), `draw_image_flipped` and
  `draw_image_region_flipped` (mirrored when the direction is -1),
  `draw_text` (white text), `draw_rect` (blended when the colour has alpha),
  `draw_fade_rect(alpha)` (a black full-screen overlay; alpha must be 0-255)
  and `draw_box` (a one-pixel red outline).
- `SoundManager` (`samurai_engine.sound_manager`) plays one looping
  background track (`play_bgm`, `stop_bgm`) and one sound effect at a time
  (`play_sfx`, `stop_sfx`), through pygame's mixer. `stop_all()` stops both.
  Playing before `init()` raises `RuntimeError`; a missing file raises
  `FileNotFoundError`.
- `GameApp` (`samurai_engine.app`) creates the time, sound, render and scene
  managers when it is constructed. `init()` opens the window and starts the
  managers; `run(max_frames=None)` handles window events, updates time and
  scenes, renders, and returns the number of frames run. It stops when a
  quit event arrives or after `max_frames`. `release()` shuts everything down.
  Override `handle_event(event)` to react to other events.
- `Vector2` (`samurai_engine.vector2`) is a mutable 2D vector with `+`, `-`,
  `*` by a number, their in-place forms, `length()`, `length_squared()`,
  `dot()`, `distance()` and `normalize()` (which raises `ZeroDivisionError`
  on a zero vector).

## Singletons

`GameApp` and every manager derive from `Singleton`
(`samurai_engine.singleton`). Constructing one registers it; its class method
`get()` returns it from anywhere. Constructing a second instance raises
`RuntimeError`, as does `get()` before one exists. `clear_instance()`
forgets the registered instance. Because `GameApp` builds its own managers,
create the `GameApp` first and reach the managers through `get()`.

## Example

```python
from samurai_engine.app import GameApp
from samurai_engine.game_object import GameObject
from samurai_engine.render_manager import RenderManager
from samurai_engine.scene import Scene
from samurai_engine.scene_manager import SceneManager
from samurai_engine.time_manager import TimeManager
from samurai_engine.vector2 import Vector2


class Ball(GameObject):
    def start(self):
        self.pos = Vector2(100, 100)
        self.vel = Vector2(60, 40)

    def update(self):
        self.pos += self.vel * TimeManager.get().delta_time()

    def render(self):
        RenderManager.get().draw_rect(self.pos, 20, 20, (255, 255, 255))


class Stage(Scene):
    def start(self):
        self.create_object(Ball)
        super().start()


app = GameApp(800, 600, "Demo")
SceneManager.get().create_scene(Stage)
SceneManager.get().change_scene(0)  # starts on the first update
app.init()
app.run(max_frames=600)
app.release()
```

## Audio constants

`samurai_engine.dsp_effects` lists DSP effect types (`DspType`) and, as
`IntEnum`s, the parameter indices of each built-in effect, together with the
`LoudnessMeterInfo` and `LoudnessMeterWeighting` data classes.
`samurai_engine.audio_errors` has the `Result` codes; `Result.message()` and
`error_string(result)` give the English explanation of each, and
`"Unknown error."` for codes it does not know.
`samurai_engine.output_plugin` describes an output plugin: its
`OutputDescription`, the `OutputState` handed to it (whose methods call the
callbacks it holds and raise `RuntimeError` when one is missing),
`OutputMethod` and `Object3DInfo`.

## What the package does not do

- There is no keyboard or mouse input manager; `GameApp` only reacts to the
  window's quit event. Read input yourself in `handle_event` or with pygame.
- The DSP, result-code and output-plugin modules are definitions only.
  Sound is played through pygame's mixer, which applies no DSP effects and
  never calls an output plugin.
- There is no command-line program; the engine is used as a library.

## Running the tests

```
pip install samurai-engine[test]
pytest
```