# novadesk

novadesk is a library that models a simulated desktop environment. It works entirely with text. Rendering methods return the text they produce. Actions that change state print a one-line trace to standard output.

It needs no third-party libraries.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is in the package

### Window management

- `novadesk.window_manager`: `WindowManager` owns eight virtual desktops (`Desktop`) of `Window` objects. It can do the following:
  - create, destroy, move, resize and focus windows
  - snap a window with `SnapType`: left, right, top, bottom or fullscreen
  - tile the windows of the current desktop in a near-square grid
  - switch desktops directly or with a swipe gesture (`handle_gesture`)
  - return the current desktop as text with `render()`
- `novadesk.holoflow`: `HoloFlow` works on the windows of a `WindowManager`. It pulls a window closer or pushes it deeper, within depth 0.1 to 10.0. It fans windows out, and sets a window's transparency, clamped to 0.1 to 1.0.
- `novadesk.desktop_manager`: `DesktopManager` keeps a flat list of `ManagedWindow` objects and the active workspace. `composite()` returns the compositor pass.
- `novadesk.notifications`: `NotificationHistory` keeps the eight most recent messages.
- `novadesk.ui_framework`: `UIFramework` provides start, tick, render and shutdown hooks around an attached `WindowManager`.

### Widgets

- `novadesk.label`: `Label`
- `novadesk.listwidget`: `ListWidget` and `ListItem`, with selection that wraps around
- `novadesk.button`: `Button`, whose `handle_click` tests whether the point hits the button
- `novadesk.contrast`: `set_high_contrast_mode(enabled)` switches labels, lists and buttons to the high-contrast palette together.
- `novadesk.ai_orb`: `AiOrb` listens, thinks and suggests.
- `novadesk.collab_bubble`: `CollabBubble` holds users, their pointers and a shared annotation.
- `novadesk.swarm`: `SwarmSession` merges desktops and federates the users' assistants.
- `novadesk.quantum_timeline`: `QuantumTimeline` saves states, rewinds and branches.
- `novadesk.self_heal`: `SelfHealMonitor` rewinds a timeline after three unstable ticks in a row.
- `novadesk.spatial`: `SpatialManager` and `SpatialObject` place objects in 3D space and open portals between them.
- `novadesk.agent`: `AgentManager` and `Agent` are micro-agents that switch between idle and active at random. The random source can be injected.
- `novadesk.iot`: `IotDevice` is a registered smart-home device.
- `novadesk.graphics`: `draw_line`, `draw_rect`, `draw_circle` and `gui_draw` emit drawing traces.

### Kernel layer

- `novadesk.modular` holds three registries:
  - `ModuleRegistry` checks a module's signature and type before it loads it. When deinit fails it rolls back, and `recover()` restarts a module.
  - `ServiceRegistry`
  - `FsRegistry`
- `novadesk.ipc`: `IpcQueue` is a bounded, thread-safe FIFO of `IpcMessage`. `ChannelRegistry` holds up to 16 named channels.
- `novadesk.kernel`: `PageAllocator` hands out fixed-size pages as offsets. `RoundRobinScheduler` cycles through process ids.
- `novadesk.multiboot`: `parse_multiboot_info(data)` reads the memory and boot-device fields of a Multiboot info block.

## Example

```python
from novadesk.window_manager import WindowManager
from novadesk.holoflow import HoloFlow

wm = WindowManager()
terminal = wm.create_window("Terminal", 100, 100, 400, 300)
browser = wm.create_window("Web Browser", 300, 200, 600, 500)

wm.focus_window(terminal.id)
wm.tile_windows()
HoloFlow(wm).pull(browser.id)
print(wm.render())
```

## Errors

Operations that can fail raise exceptions:

- `IpcQueue.send` raises `QueueFullError` when the queue is full.
- `IpcQueue.receive` raises `QueueEmptyError` when there is nothing to receive.
- `ChannelRegistry.channel` raises `IpcError` when no channel slot is free.
- `PageAllocator.alloc` raises `OutOfPagesError` when no page is free.
- `ModuleRegistry.register` raises one of these:
  - `SignatureError` when the signature check fails
  - `ModulePermissionError` when the module's type may not be loaded
  - `ModuleInitError` when the module's init fails
- `ModuleRegistry.unregister` raises `DeinitError` when deinit fails.
- The registries raise `ModuleNotFoundInRegistry` when you remove a name that is not registered.

Operations on unknown window ids, out-of-range desktops or full containers are ignored, or they return `None`.

## What the package does not do

- There is no command-line program and no desktop showcase to run. The package is used as a library.
- There are no plain orb, info-stream or DNA link and marketplace widgets.
- Nothing is drawn on a real screen. Every output is text.