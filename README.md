# meowcore

Core runtime pieces of a small game engine that need no window or GPU.

## Modules

- `meowcore.registry.Registry`: a minimal entity–component registry. Entities are integers and each holds at most one component per type.
  - `create(entity=None)` returns a new entity. It uses the given identifier when that identifier is free.
  - `emplace` attaches a component. It raises `KeyError` for an unknown entity and `ValueError` if a component of that type is already attached.
  - `get` raises `KeyError` when the component is missing.
  - `valid` and `all_of` answer membership questions.
  - `storage(component_type)` returns a read-only pool. `storage()` returns every pool.
  - `view(*types)` yields `(entity, component, ...)` tuples.
- `meowcore.buffers`: `DoubleBuffer` and `TripleBuffer`. Both are built from a factory. They keep `current`/`final` (and `staging`) values.
  - `DoubleBuffer.swap()` exchanges its two values.
  - `TripleBuffer.swap()` exchanges current with staging, then current with final.
- `meowcore.thread_barrier.ThreadBarrier`: blocks callers of `wait()` until the given number of threads are waiting.
  - `release()` lets waiting threads continue.
  - `end()` releases them and makes later waits return at once.
- `meowcore.reflection`: runtime reflection over component properties.
  - `PropertyType` and `property_type_of` classify value types.
  - `ReflectionProperty` reads and writes a named attribute with `get` and `set`.
  - `make_property` registers a property on the shared `REFLECTION` instance.
  - `ReflectionPropertyChange` describes an edit to one property of one entity's component.
  - `EnttReflection` maps component identifiers to names and class names to properties. Its `apply_property_change` writes an edit into the matching component of a `Registry`, following nested properties when needed.
- `meowcore.window`: `WindowSize` (unsigned 32-bit width and height), `Platform`, `current_platform()`, `should_display_full_screen()` and `initial_window_size()`.
  - `current_platform()` raises `UnsupportedPlatformError` on systems outside the supported set.
  - Mobile platforms and the web need the display size passed in. Other platforms get a fixed 1000×500 window.
- `meowcore.frame_rate_counter.FrameRateCounter`: frame timing against a monotonic clock. The clock is injectable.
  - `calculate()` records the frame length in `delta_time`.
  - `frame_rate()` gives frames per second averaged over a sample window.
  - `lock_frame_rate()` busy-waits until the target frame time has passed.
- `meowcore.mesh`: `Vertex` (position and texture coordinate) and `Mesh` (vertices and unsigned 32-bit indices). Both are frozen and validated. Equal vertices hash alike.
- `meowcore.camera`: cameras and the matrices behind them.
  - `perspective` and `look_at` build right-handed projection and view matrices as numpy arrays.
  - `CameraController` is a fly-through controller. It provides `look_around`, `move_forward`, `move_backward`, `move_up`, `move_down`, and the `position`, `up` and `direction` properties.
  - `PerspectiveCamera` is a 45° camera. It provides `configure`, `projection_matrix()` and `view_matrix()`.
- `meowcore.profiler.ProfilerProcess`: starts an external profiler as a child process (`open`, `close`, or use it as a context manager). While the child runs, interrupt, termination and quit signals terminate it. The previous signal handlers are restored on close.
- `meowcore.log.log(tag, message, error=None)`: writes `tag: message` to standard output and appends the error text when given. It writes nothing under `python -O`.

## Install

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## Example

```python
from meowcore.registry import Registry
from meowcore.camera import CameraController, PerspectiveCamera

registry = Registry()
entity = registry.create()

controller = CameraController((0.0, 2.0, -10.0))
controller.move_forward(0.016)

camera = PerspectiveCamera(1000.0, 500.0)
camera.configure(controller.position, controller.up, controller.direction)
matrix = camera.projection_matrix() @ camera.view_matrix()
```

## What it does not do

The package has no window, renderer, physics simulation, editor user interface or main loop. It does not open windows or graphics contexts and does not draw anything. It provides no command to run. It supplies the data structures and calculations that such parts would use.