# seika

Building blocks for small 2D games and tools, in pure Python with no
third-party dependencies.

## What is inside

- `seika.data_structures`
  - `array_list.ArrayList`: an ordered list whose capacity doubles when full, with
    value-based removal (`remove`, `remove_by_index`, `has`).
  - `array2d.Array2D`: a resizable grid addressed by `(x, y)`; `get` raises `IndexError`
    outside the grid, `set` returns `False`.
  - `hash_map.HashMap`: a chained hash map over fixed-size keys (integers or bytes), with
    the `djb2_hash` function it uses.
  - `hash_map_string.StringHashMap`: the same for string keys, with `add_int`/`get_int`
    and `add_string`/`get_string` helpers.
  - `id_queue.IdQueue`: hands out integer ids and takes them back; it doubles its
    capacity when it runs out.
  - `fixed_queue.FixedQueue`: a bounded ring buffer that returns an `invalid_value`
    when empty and drops items when full.
  - `static_array.StaticArray`: an array with a fixed capacity (`add` raises
    `OverflowError` when full) and `add_if_unique`, `remove`, `remove_if` and `sort`.
  - `array_utils`: `selection_sort` and `remove_item` for fixed-length sequences.
  - `spatial_hash_map.SpatialHashMap`: broad-phase collision lookup for axis-aligned
    `Rect2` boxes; the cell size follows the largest object inserted.
- `seika.event`: `Event`, `Observer` and `SubjectNotifyPayload`, a simple observer pattern
  holding fewer than eight observers per event.
- `seika.command_line_args`: `parse` a list of arguments against `CmdLineArgDef`
  definitions into `CmdLineArgKeyResult`s; `format_results` and `print_results` report them.
- `seika.file_system`: `chdir`, `get_cwd`, `print_cwd`, `get_file_size`,
  `read_file_contents`, `read_file_contents_without_raw`, `write_to_file`,
  `does_file_exist` and `does_dir_exist`.
- `seika.asset.asset_file_loader`: `AssetFileLoader`, which reads assets from disk or,
  in `ReadMode.ARCHIVE`, from a zip archive.
- `seika.ecs`: an entity-component-system made of `entity.EntityManager`,
  `component.ComponentRegistry` and `component.ComponentManager`,
  `ec_system.SystemManager` with `ECSSystem` and `SystemTemplate`, and `ecs.ECS`,
  which ties them together.

## Installing

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Examples

Finding which boxes overlap:

```python
from seika.data_structures.spatial_hash_map import Rect2, SpatialHashMap

grid = SpatialHashMap(initial_cell_size=32)
grid.insert_or_update(1, Rect2(0, 0, 16, 16))
grid.insert_or_update(2, Rect2(8, 8, 16, 16))
print(grid.compute_collision(1))  # [2]
```

Notifying observers:

```python
from seika.event import Event, Observer, SubjectNotifyPayload

event = Event()
event.register_observer(Observer(lambda payload: print(payload.data)))
event.notify_observers(SubjectNotifyPayload(data="hello"))
```

Parsing arguments:

```python
from seika.command_line_args import CmdLineArgDef, parse, print_results

defs = [CmdLineArgDef(id="dir", expects_value=True, keys=("-d", "--dir"))]
print_results(parse(["-d", "assets"], defs))
```

Reading assets from a zip archive:

```python
from seika.asset.asset_file_loader import AssetFileLoader, ReadMode

with AssetFileLoader() as loader:
    loader.load_archive("assets.zip")
    loader.read_mode = ReadMode.ARCHIVE
    text = loader.read_file_contents_as_string("config/settings.txt")
```

Setting up an ECS:

```python
from seika.ecs.ec_system import SystemTemplate
from seika.ecs.ecs import ECS

def move(system, delta_time):
    for entity in system.entities:
        print("moving", entity, delta_time)

with ECS() as ecs:
    transform = ecs.registry.register("Transform")
    movement = ecs.systems.create_system("movement", "Transform", SystemTemplate(update_func=move))
    ecs.systems.register(movement)

    entity = ecs.entities.create()
    ecs.components.set_component(entity, transform.index, {"x": 0, "y": 0})
    ecs.systems.update_entity_signature_with_systems(entity)
    ecs.systems.update(1 / 60)
```

## What it does not do

seika is a library of building blocks only. It opens no window, draws nothing, plays
no sound and reads no keyboard, mouse or gamepad input; it has no texture, font or
audio asset manager and no command of its own. Those parts are left to the program
that uses it.